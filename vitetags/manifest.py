"""
Entry point for turning Vite entries into HTML tags.

Usage:
    manifest = Manifest(dev=False, manifest_path="dist/.vite/manifest.json", base_path="/dist/")
    manifest.preload_images()
    tags = manifest.create_tags("main.js")
    tags.preload, tags.css, tags.js
"""
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, FrozenSet, Mapping, Optional, Union

from vitetags.chunks import ChunkGraph
from vitetags.errors import EntryNotFound, InvalidManifest, ManifestError
from vitetags.loader import load_manifest, parse_manifest
from vitetags.resolver import ResolutionFlags, resolve
from vitetags.tags import Tags, render_stream, script_tag
from vitetags.urls import join_url

if TYPE_CHECKING:
    from vitetags.config import ViteSettings

logger = logging.getLogger(__name__)

VITE_CLIENT = "@vite/client"


class Manifest:
    """
    Resolves entry points against a Vite manifest, or passes them through to
    the Vite dev server in development mode.

    Args:
        dev: Serve straight from the dev server; the manifest is never read
        manifest_path: Location of ``manifest.json`` (production mode)
        base_path: Public URL prefix of the build output (or of the dev server)
        chunks: Already-parsed manifest data, instead of ``manifest_path``
    """

    def __init__(
        self,
        dev: bool = False,
        manifest_path: Optional[Union[str, Path]] = None,
        base_path: str = "",
        chunks: Optional[Mapping[str, Any]] = None,
    ):
        self.dev = dev
        self.base_path = base_path
        self.manifest_path = Path(manifest_path) if manifest_path is not None else None
        self._preload_images = False
        self._preload_styles = False
        self._chunks: Optional[ChunkGraph] = None

        if dev:
            return

        if chunks is not None:
            self._chunks = parse_manifest(chunks, source=self.manifest_path)
        elif self.manifest_path is not None:
            self._chunks = load_manifest(self.manifest_path)
        else:
            raise ValueError("Production mode needs either manifest_path or chunks")

    @classmethod
    def from_settings(cls, settings: "ViteSettings") -> "Manifest":
        manifest = cls(
            dev=settings.DEV,
            manifest_path=settings.MANIFEST_PATH,
            base_path=settings.BASE_PATH,
        )
        if settings.PRELOAD_IMAGES:
            manifest.preload_images()
        if settings.PRELOAD_STYLES:
            manifest.preload_styles()
        return manifest

    @property
    def chunks(self) -> ChunkGraph:
        if self._chunks is None:
            raise ManifestError("No manifest is loaded in development mode")
        return self._chunks

    def preload_images(self, enabled: bool = True) -> "Manifest":
        """Emit image preload hints for images of entry scripts and image entries."""
        self._preload_images = enabled
        return self

    def preload_styles(self, enabled: bool = True) -> "Manifest":
        """Emit style preload hints for stylesheet entries."""
        self._preload_styles = enabled
        return self

    @property
    def flags(self) -> ResolutionFlags:
        return ResolutionFlags(
            preload_images=self._preload_images,
            preload_styles=self._preload_styles,
        )

    def create_tags(self, *entries: str) -> Tags:
        """
        Create the preload, stylesheet and script tags for the given entries.

        Raises:
            EntryNotFound: an entry is not in the manifest
            NotAnEntryPoint: an entry is not marked as an entry point
        """
        if not entries:
            raise ValueError("At least one entry is required")

        if self.dev:
            return self._create_dev_tags(entries)

        try:
            resolution = resolve(self.chunks, entries, self.flags, source=self.manifest_path)
        except ManifestError as e:
            logger.warning(f"Failed to create tags for {list(entries)}: {e}")
            raise

        return Tags(
            preload=render_stream(resolution.preload, self.base_path),
            css=render_stream(resolution.css, self.base_path),
            js=render_stream(resolution.js, self.base_path),
        )

    def _create_dev_tags(self, entries) -> Tags:
        # CSS and preloading are handled by the Vite client at runtime
        lines = [script_tag(join_url(self.base_path, VITE_CLIENT))]
        for entry in dict.fromkeys(entries):
            lines.append(script_tag(join_url(self.base_path, entry)))
        return Tags(js="\n".join(lines))

    def get_url(self, key: str) -> str:
        """
        Public URL of a single chunk. Unlike ``create_tags`` this works for
        any chunk in the manifest, entry point or not.
        """
        if self.dev:
            return join_url(self.base_path, key)

        chunk = self.chunks.get(key)
        if chunk is None:
            raise EntryNotFound(key)
        if chunk.output_path is None:
            raise InvalidManifest(self.manifest_path, f"chunk {key} has neither 'file' nor 'src'")
        return join_url(self.base_path, chunk.output_path)

    def output_files(self) -> FrozenSet[str]:
        """Every build output path named in the manifest (empty in dev mode)."""
        if self.dev:
            return frozenset()
        files = set()
        for chunk in self.chunks.values():
            if chunk.file:
                files.add(chunk.file)
            files.update(chunk.css)
            files.update(chunk.assets)
        return frozenset(files)
