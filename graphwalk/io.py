"""Reading graph descriptions and writing result documents.

The graph description is a JSON object with ``nodes`` and ``edges`` arrays in
the element format used by Cytoscape-style editors::

    {
      "nodes": [{"data": {"id": "A"}}, {"data": {"id": "B"}}],
      "edges": [{"data": {"source": "A", "target": "B", "weight": 5}}]
    }

Documents are validated against the packaged JSON schema
``graphwalk/schemas/graph.json`` before a graph is built.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema
from jsonschema.exceptions import best_match

from graphwalk.errors import GraphIOError, MalformedInputError
from graphwalk.graph.adjacency import AdjacencyGraph
from graphwalk.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


@lru_cache(maxsize=1)
def _graph_validator() -> jsonschema.Draft7Validator:
    with (
        resources.files("graphwalk.schemas")
        .joinpath("graph.json")
        .open("r", encoding="utf-8")
    ) as f:
        schema = json.load(f)
    return jsonschema.Draft7Validator(schema)


def validate_graph_document(data: Any) -> None:
    """Check a decoded document against the graph schema.

    Raises:
        MalformedInputError: Naming the first offending location.
    """
    error = best_match(_graph_validator().iter_errors(data))
    if error is None:
        return
    location = "/".join(str(part) for part in error.absolute_path) or "<root>"
    raise MalformedInputError(
        f"Invalid graph description at {location}: {error.message}",
        details={"path": list(error.absolute_path)},
    )


def load_graph_document(path: PathLike) -> Dict[str, Any]:
    """Read and validate a graph description file.

    Args:
        path: JSON file location.

    Returns:
        The decoded document.

    Raises:
        GraphIOError: If the file cannot be read.
        MalformedInputError: If it is not JSON or does not match the schema.
    """
    path = Path(path)
    logger.debug(f"Reading graph description from: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise GraphIOError(f"Could not open file: {path} ({exc.strerror or exc})") from exc
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"Graph description is not UTF-8 text: {path}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(
            f"Graph description is not valid JSON: {path} (line {exc.lineno}, "
            f"column {exc.colno}: {exc.msg})"
        ) from exc

    validate_graph_document(data)
    return data


def graph_from_document(data: Dict[str, Any]) -> AdjacencyGraph:
    """Build an AdjacencyGraph from a validated graph description.

    Raises:
        MissingNodeError: If an edge references a node not listed in ``nodes``.
    """
    nodes = [node["data"]["id"] for node in data["nodes"]]
    edges = [
        (edge["data"]["source"], edge["data"]["target"], int(edge["data"]["weight"]))
        for edge in data["edges"]
    ]
    return AdjacencyGraph.build(nodes, edges)


def load_graph(path: PathLike) -> AdjacencyGraph:
    """Read, validate and build the graph stored at ``path``."""
    graph = graph_from_document(load_graph_document(path))
    logger.info(
        f"Loaded graph from {path}: {len(graph)} nodes, {graph.edge_count()} edges"
    )
    return graph


def dump_results(results: Dict[str, Any], indent: int = 2) -> str:
    """Serialize a result document to JSON text.

    Key order follows the document, so equal documents give identical text.
    """
    return json.dumps(results, indent=indent, allow_nan=False)


def write_results(path: PathLike, results: Dict[str, Any], indent: int = 2) -> Path:
    """Write a result document, creating parent directories as needed.

    The document is serialized before the file is opened, so a serialization
    failure leaves no file behind.

    Raises:
        GraphIOError: If the file cannot be written.
    """
    path = Path(path)
    json_str = dump_results(results, indent=indent)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json_str, encoding="utf-8")
    except OSError as exc:
        raise GraphIOError(
            f"Could not write to file: {path} ({exc.strerror or exc})"
        ) from exc
    logger.debug(f"Wrote results to: {path}")
    return path
