from pathlib import Path

import pytest

from vitetags import Manifest
from vitetags.config import get_settings

FIXTURES = Path(__file__).parent / "fixtures"
MANIFEST_PATH = FIXTURES / "manifest.json"


@pytest.fixture
def manifest_path():
    """Path to the sample manifest produced by a Vite build."""
    return MANIFEST_PATH


@pytest.fixture
def production():
    """Production-mode manifest under /dist/."""
    return Manifest(dev=False, manifest_path=MANIFEST_PATH, base_path="/dist/")


@pytest.fixture
def development():
    """Development-mode manifest under /dist/."""
    return Manifest(dev=True, manifest_path=MANIFEST_PATH, base_path="/dist/")


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Isolate tests from the developer's VITE_* environment."""
    for name in ("DEV", "MANIFEST_PATH", "BASE_PATH", "PRELOAD_IMAGES", "PRELOAD_STYLES"):
        monkeypatch.delenv(f"VITE_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
