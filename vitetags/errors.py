"""Errors raised while loading a manifest or resolving tags."""
from pathlib import Path
from typing import Union


class ManifestError(RuntimeError):
    """Base class for every error raised by vitetags."""


class EntryNotFound(ManifestError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Entry not found in manifest: {key}")


class NotAnEntryPoint(ManifestError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Chunk is not an entry point: {key}")


class ChunkNotFound(ManifestError):
    """A static import points at a key the manifest does not contain."""

    def __init__(self, key: str, importer: str):
        self.key = key
        self.importer = importer
        super().__init__(
            f"Imported chunk not found in manifest: {key} (imported by {importer})"
        )


class ManifestNotFound(ManifestError):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Manifest file not found: {self.path}")


class InvalidManifest(ManifestError):
    def __init__(self, path: Union[str, Path, None], reason: str):
        self.path = Path(path) if path is not None else None
        self.reason = reason
        source = self.path if self.path is not None else "<data>"
        super().__init__(f"Invalid manifest {source}: {reason}")
