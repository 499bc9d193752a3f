"""
Chunk records of a Vite build manifest.

A manifest maps a chunk key (the source-relative path, e.g. ``main.js`` or
``_shared.83069a53.js``) to the record describing the bundler output for it.
"""
from enum import Enum
from typing import Mapping, Optional, Tuple

from pydantic import BaseModel, Field

STYLE_EXTENSIONS = frozenset({"css", "scss", "sass", "less", "styl", "stylus", "pcss", "postcss"})
IMAGE_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "gif", "webp", "avif", "svg", "ico", "bmp", "apng"})


class ChunkKind(str, Enum):
    SCRIPT = "script"
    STYLE = "style"
    IMAGE = "image"


def extension_of(path: str) -> str:
    """Lower-cased extension of a path, without the dot ("" if none)."""
    name = path.split("?", 1)[0].rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[-1].lower()


def kind_of(key: str) -> ChunkKind:
    """Derive the kind of a chunk from the extension of its key."""
    extension = extension_of(key)
    if extension in STYLE_EXTENSIONS:
        return ChunkKind.STYLE
    if extension in IMAGE_EXTENSIONS:
        return ChunkKind.IMAGE
    return ChunkKind.SCRIPT


class Chunk(BaseModel):
    """One record of the manifest."""
    file: Optional[str] = None
    src: Optional[str] = None
    is_entry: bool = Field(default=False, alias="isEntry")
    imports: Tuple[str, ...] = ()
    dynamic_imports: Tuple[str, ...] = Field(default=(), alias="dynamicImports")
    css: Tuple[str, ...] = ()
    assets: Tuple[str, ...] = ()

    class Config:
        frozen = True
        populate_by_name = True
        extra = "ignore"

    @property
    def output_path(self) -> Optional[str]:
        """Path of the built file, falling back to ``src`` for asset-only records."""
        return self.file or self.src


ChunkGraph = Mapping[str, Chunk]
