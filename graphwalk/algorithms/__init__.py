"""Graph algorithms: traversal orders and widest-path search."""

from graphwalk.algorithms.traversal import bfs, dfs
from graphwalk.algorithms.types import UNBOUNDED, PathEdge, WidestPathResult
from graphwalk.algorithms.widest import widest_capacities, widest_path

__all__ = [
    "bfs",
    "dfs",
    "widest_path",
    "widest_capacities",
    "PathEdge",
    "WidestPathResult",
    "UNBOUNDED",
]
