"""
Rendering of resolved assets into HTML tags.

Each ``Tag`` is a (kind, path) pair produced by the resolver; rendering joins
the path with the configured base path and emits one line of HTML.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, NamedTuple

from vitetags.chunks import extension_of
from vitetags.urls import join_url

IMAGE_SUBTYPES = {
    "jpg": "jpeg",
    "jpeg": "jpeg",
    "svg": "svg+xml",
    "ico": "x-icon",
}


class TagKind(str, Enum):
    MODULE_PRELOAD = "modulepreload"
    STYLE_PRELOAD = "style-preload"
    IMAGE_PRELOAD = "image-preload"
    STYLESHEET = "stylesheet"
    SCRIPT = "script"


class Tag(NamedTuple):
    kind: TagKind
    path: str


@dataclass(frozen=True)
class Tags:
    """The three rendered streams for one ``create_tags`` call."""
    preload: str = ""
    css: str = ""
    js: str = ""

    def __str__(self) -> str:
        return "\n".join(stream for stream in (self.preload, self.css, self.js) if stream)


def image_mime_type(path: str) -> str:
    extension = extension_of(path)
    return f"image/{IMAGE_SUBTYPES.get(extension, extension)}"


def render(tag: Tag, base_path: str) -> str:
    """Render a single tag as one line of HTML."""
    url = join_url(base_path, tag.path)

    if tag.kind is TagKind.MODULE_PRELOAD:
        return f'<link rel="modulepreload" href="{url}" />'
    if tag.kind is TagKind.STYLE_PRELOAD:
        return f'<link rel="preload" as="style" type="text/css" href="{url}" />'
    if tag.kind is TagKind.IMAGE_PRELOAD:
        return f'<link rel="preload" as="image" type="{image_mime_type(tag.path)}" href="{url}" />'
    if tag.kind is TagKind.STYLESHEET:
        return f'<link rel="stylesheet" href="{url}" />'
    if tag.kind is TagKind.SCRIPT:
        return script_tag(url)
    raise ValueError(f"Unknown tag kind: {tag.kind}")


def render_stream(tags: Iterable[Tag], base_path: str) -> str:
    return "\n".join(render(tag, base_path) for tag in tags)


def script_tag(url: str) -> str:
    """Script tag for an already-built URL (used by development mode)."""
    return f'<script type="module" src="{url}"></script>'
