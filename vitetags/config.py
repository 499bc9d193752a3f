from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class ViteSettings(BaseSettings):
    DEV: bool = False
    MANIFEST_PATH: Path = Path("dist/.vite/manifest.json")
    BASE_PATH: str = "/dist/"
    PRELOAD_IMAGES: bool = False
    PRELOAD_STYLES: bool = False

    class Config:
        case_sensitive = True
        env_prefix = "VITE_"
        env_file = ".env"
        extra = "ignore"


@lru_cache(maxsize=1)
def get_settings() -> ViteSettings:
    return ViteSettings()
