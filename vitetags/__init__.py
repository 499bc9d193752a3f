"""
vitetags - HTML tags for Vite build manifests

Usage:
    from vitetags import Manifest
    manifest = Manifest(manifest_path="dist/.vite/manifest.json", base_path="/dist/")
    tags = manifest.create_tags("main.js")
"""

from .chunks import Chunk, ChunkKind, kind_of
from .errors import (
    ChunkNotFound,
    EntryNotFound,
    InvalidManifest,
    ManifestError,
    ManifestNotFound,
    NotAnEntryPoint,
)
from .loader import load_manifest, parse_manifest
from .manifest import Manifest
from .tags import Tags

__version__ = "0.1.0"

__all__ = [
    "Manifest",
    "Tags",
    "Chunk",
    "ChunkKind",
    "kind_of",
    "load_manifest",
    "parse_manifest",
    "ManifestError",
    "EntryNotFound",
    "NotAnEntryPoint",
    "ChunkNotFound",
    "ManifestNotFound",
    "InvalidManifest",
    "__version__",
]
