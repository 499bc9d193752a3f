"""
Dependency resolution over the chunk graph.

Walks the manifest from the requested entry points, following static imports
only, and collects the tags needed to load them in three ordered streams.
"""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Set

from vitetags.chunks import Chunk, ChunkGraph, ChunkKind, IMAGE_EXTENSIONS, extension_of, kind_of
from vitetags.errors import ChunkNotFound, EntryNotFound, InvalidManifest, NotAnEntryPoint
from vitetags.tags import Tag, TagKind

logger = logging.getLogger(__name__)

PRELOAD_KINDS = frozenset({TagKind.MODULE_PRELOAD, TagKind.STYLE_PRELOAD, TagKind.IMAGE_PRELOAD})


@dataclass(frozen=True)
class ResolutionFlags:
    preload_images: bool = False
    preload_styles: bool = False


@dataclass
class Resolution:
    preload: List[Tag] = field(default_factory=list)
    css: List[Tag] = field(default_factory=list)
    js: List[Tag] = field(default_factory=list)


class ResolutionState:
    """
    Accumulator for a single resolution call.

    ``visited`` holds chunk keys already traversed (guards against cycles),
    ``seen`` holds tags already emitted (guards against duplicate output).
    The two are kept apart: distinct chunks may emit the same tag.
    """

    def __init__(self, graph: ChunkGraph, flags: ResolutionFlags, source: Optional[Path] = None):
        self.graph = graph
        self.flags = flags
        self.source = source
        self.visited: Set[str] = set()
        self.seen: Set[Tag] = set()
        self.resolution = Resolution()

    def emit(self, kind: TagKind, path: str) -> None:
        tag = Tag(kind, path)
        if tag in self.seen:
            return
        self.seen.add(tag)

        if kind in PRELOAD_KINDS:
            self.resolution.preload.append(tag)
        elif kind is TagKind.STYLESHEET:
            self.resolution.css.append(tag)
        else:
            self.resolution.js.append(tag)

    def visit(self, key: str) -> bool:
        """Mark a chunk as traversed; False if it already was."""
        if key in self.visited:
            return False
        self.visited.add(key)
        return True


def _output_path(state: ResolutionState, key: str, chunk: Chunk) -> str:
    path = chunk.output_path
    if path is None:
        raise InvalidManifest(state.source, f"chunk {key} has neither 'file' nor 'src'")
    return path


def _emit_images(state: ResolutionState, chunk: Chunk) -> None:
    if not state.flags.preload_images:
        return
    for asset in chunk.assets:
        # fonts and other non-image assets have no valid as="image" hint
        if extension_of(asset) in IMAGE_EXTENSIONS:
            state.emit(TagKind.IMAGE_PRELOAD, asset)


def _traverse_imports(state: ResolutionState, key: str, chunk: Chunk) -> None:
    # (import key, importer) pairs; pushed reversed so pops follow listed order
    stack = [(import_key, key) for import_key in reversed(chunk.imports)]
    while stack:
        import_key, importer = stack.pop()
        if import_key in state.visited:
            continue
        imported = state.graph.get(import_key)
        if imported is None:
            raise ChunkNotFound(import_key, importer)
        state.visit(import_key)

        state.emit(TagKind.MODULE_PRELOAD, _output_path(state, import_key, imported))
        for css in imported.css:
            state.emit(TagKind.STYLESHEET, css)

        stack.extend((nested, import_key) for nested in reversed(imported.imports))


def _resolve_script(state: ResolutionState, key: str, chunk: Chunk) -> None:
    path = _output_path(state, key, chunk)
    state.visit(key)

    state.emit(TagKind.MODULE_PRELOAD, path)
    state.emit(TagKind.SCRIPT, path)
    for css in chunk.css:
        state.emit(TagKind.STYLESHEET, css)
    _emit_images(state, chunk)

    _traverse_imports(state, key, chunk)


def _resolve_style(state: ResolutionState, key: str, chunk: Chunk) -> None:
    path = _output_path(state, key, chunk)
    if state.flags.preload_styles:
        state.emit(TagKind.STYLE_PRELOAD, path)
    state.emit(TagKind.STYLESHEET, path)


def _resolve_image(state: ResolutionState, key: str, chunk: Chunk) -> None:
    if state.flags.preload_images:
        state.emit(TagKind.IMAGE_PRELOAD, _output_path(state, key, chunk))


_ENTRY_RESOLVERS = {
    ChunkKind.SCRIPT: _resolve_script,
    ChunkKind.STYLE: _resolve_style,
    ChunkKind.IMAGE: _resolve_image,
}

if set(_ENTRY_RESOLVERS) != set(ChunkKind):
    raise RuntimeError("every ChunkKind needs an entry resolver")


def check_entry(graph: ChunkGraph, key: str) -> Chunk:
    """Look up a requested entry, ensuring it exists and is an entry point."""
    chunk = graph.get(key)
    if chunk is None:
        raise EntryNotFound(key)
    if not chunk.is_entry:
        raise NotAnEntryPoint(key)
    return chunk


def resolve(
    graph: ChunkGraph,
    entries: Sequence[str],
    flags: ResolutionFlags = ResolutionFlags(),
    source: Optional[Path] = None,
) -> Resolution:
    """
    Resolve the requested entries into ordered, deduplicated tag streams.

    Entries are processed in request order. Each script entry contributes
    itself, its stylesheets and (optionally) its images, then its static
    imports depth-first in listed order. Anything already emitted for an
    earlier entry is skipped. Dynamic imports are never followed.

    Raises:
        EntryNotFound: a requested key is not in the manifest
        NotAnEntryPoint: a requested key is not marked ``isEntry``
        ChunkNotFound: a static import points at a missing key
        InvalidManifest: a chunk to emit has no output path; ``source``
            names the manifest file in the message
    """
    chunks = [(key, check_entry(graph, key)) for key in entries]

    state = ResolutionState(graph, flags, source)
    for key, chunk in chunks:
        _ENTRY_RESOLVERS[kind_of(key)](state, key, chunk)

    resolution = state.resolution
    logger.debug(
        f"Resolved {list(entries)}: {len(resolution.preload)} preload, "
        f"{len(resolution.css)} css, {len(resolution.js)} js"
    )
    return resolution
