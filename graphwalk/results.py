"""Assembly of algorithm outputs into the result document.

A result document holds exactly one of:

- ``{"bfs_order": [...]}``
- ``{"dfs_order": [...]}``
- ``{"widest_path": [...], "widest_path_edges": [{"from": ..., "to": ...}],
  "widest_path_capacity": int}``

An unbounded widest-path capacity (source equals destination) is written as
``MAX_CAPACITY``, the largest signed 32-bit integer, so the field is always an
integer.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Union

from graphwalk.algorithms.types import UNBOUNDED, Capacity, WidestPathResult
from graphwalk.graph.adjacency import NodeID
from graphwalk.types import Mode

ResultDict = Dict[str, Any]

#: Serialized capacity of the trivial source == destination path.
MAX_CAPACITY = 2**31 - 1


def traversal_results(mode: Mode, order: Sequence[NodeID]) -> ResultDict:
    """Return ``{"<mode>_order": [...]}`` for a BFS or DFS visitation order."""
    if mode not in (Mode.BFS, Mode.DFS):
        raise ValueError(f"{mode.value!r} is not a traversal mode")
    return {f"{mode.value}_order": list(order)}


def _capacity_value(capacity: Capacity) -> int:
    if capacity == UNBOUNDED:
        return MAX_CAPACITY
    return int(capacity)


def widest_path_results(result: WidestPathResult) -> ResultDict:
    """Return the ``widest_path*`` keys for a widest-path result."""
    return {
        "widest_path": list(result.path),
        "widest_path_edges": [edge.to_dict() for edge in result.edges],
        "widest_path_capacity": _capacity_value(result.capacity),
    }


def assemble(
    mode: Mode, output: Union[List[NodeID], WidestPathResult]
) -> ResultDict:
    """Map the output of the algorithm selected by ``mode`` to a result document."""
    if mode is Mode.WIDEST:
        if not isinstance(output, WidestPathResult):
            raise TypeError("widest mode expects a WidestPathResult")
        return widest_path_results(output)
    return traversal_results(mode, output)  # type: ignore[arg-type]
