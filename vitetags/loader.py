"""
Loading of the Vite ``manifest.json`` into a chunk graph.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from vitetags.chunks import Chunk, ChunkGraph
from vitetags.errors import InvalidManifest, ManifestNotFound

logger = logging.getLogger(__name__)


def parse_manifest(data: Any, source: Optional[Path] = None) -> ChunkGraph:
    """Validate already-decoded manifest data into a chunk graph."""
    if not isinstance(data, Mapping):
        raise InvalidManifest(source, f"expected a JSON object, got {type(data).__name__}")

    graph: Dict[str, Chunk] = {}
    for key, record in data.items():
        if isinstance(record, Chunk):
            graph[key] = record
            continue
        try:
            graph[key] = Chunk.model_validate(record)
        except ValidationError as e:
            raise InvalidManifest(source, f"chunk {key}: {e}") from e
    return graph


def load_manifest(path: Union[str, Path]) -> ChunkGraph:
    """
    Read and validate a manifest file.

    Args:
        path: Location of the bundler's ``manifest.json``

    Returns:
        Mapping of chunk key to ``Chunk``

    Raises:
        ManifestNotFound: the file does not exist
        InvalidManifest: the file is not a valid manifest
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ManifestNotFound(path) from e
    except json.JSONDecodeError as e:
        raise InvalidManifest(path, str(e)) from e

    graph = parse_manifest(data, source=path)
    logger.info(f"Loaded manifest {path} with {len(graph)} chunks")
    return graph
