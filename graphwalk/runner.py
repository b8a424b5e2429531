"""Single-algorithm dispatch for one graphwalk run."""

from __future__ import annotations

from time import perf_counter
from typing import Union

from graphwalk.algorithms import bfs, dfs, widest_path
from graphwalk.errors import UsageError
from graphwalk.graph.adjacency import AdjacencyGraph, NodeID
from graphwalk.logging import get_logger
from graphwalk.results import ResultDict, assemble
from graphwalk.types import Mode

logger = get_logger(__name__)


def run_algorithm(
    graph: AdjacencyGraph, mode: Union[Mode, str], *node_keys: NodeID
) -> ResultDict:
    """Run the algorithm selected by ``mode`` and return the result document.

    Args:
        graph: Graph to run on.
        mode: ``Mode`` member or its name.
        *node_keys: Start node for ``bfs``/``dfs``; source and destination for
            ``widest``.

    Returns:
        The assembled result document.

    Raises:
        UsageError: If the mode is unknown or the number of node keys is wrong.
        NodeNotFoundError: If a node key is not in the graph.
    """
    if not isinstance(mode, Mode):
        mode = Mode.from_string(mode)

    if len(node_keys) != mode.arity:
        raise UsageError(
            f"Mode '{mode.value}' expects {mode.arity} node argument(s), "
            f"got {len(node_keys)}"
        )

    logger.info(f"Running {mode.value} on {graph!r} with nodes {list(node_keys)}")
    start = perf_counter()

    if mode is Mode.BFS:
        output = bfs(graph, node_keys[0])
    elif mode is Mode.DFS:
        output = dfs(graph, node_keys[0])
    else:
        output = widest_path(graph, node_keys[0], node_keys[1])

    logger.debug(f"{mode.value} finished in {(perf_counter() - start) * 1000.0:.3f} ms")
    return assemble(mode, output)
