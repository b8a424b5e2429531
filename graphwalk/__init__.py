"""graphwalk: traversal orders and widest paths over undirected weighted graphs.

Primary API:
    build_graph() - Build an immutable AdjacencyGraph from nodes and edges
    bfs(), dfs() - Visitation orders from a start node
    widest_path() - Maximum bottleneck capacity path between two nodes
    run_algorithm() - Run one algorithm by mode and assemble the result document
    load_graph(), write_results() - File I/O for graph and result documents

Example:
    from graphwalk import build_graph, widest_path

    graph = build_graph(["A", "B", "C"], [("A", "B", 5), ("B", "C", 3)])
    result = widest_path(graph, "A", "C")
    # result.path == ["A", "B", "C"], result.capacity == 3
"""

from __future__ import annotations

from graphwalk import cli, logging
from graphwalk._version import __version__
from graphwalk.algorithms import (
    UNBOUNDED,
    PathEdge,
    WidestPathResult,
    bfs,
    dfs,
    widest_path,
)
from graphwalk.config import GraphWalkConfig, load_config
from graphwalk.errors import (
    ConfigError,
    GraphIOError,
    GraphWalkError,
    MalformedInputError,
    MissingNodeError,
    NodeNotFoundError,
    UsageError,
)
from graphwalk.graph import AdjacencyEntry, AdjacencyGraph, build_graph
from graphwalk.graph.convert import from_networkx, to_networkx
from graphwalk.io import load_graph, write_results
from graphwalk.results import assemble
from graphwalk.runner import run_algorithm
from graphwalk.types import Mode

__all__ = [
    # Version
    "__version__",
    # Model
    "AdjacencyGraph",
    "AdjacencyEntry",
    "build_graph",
    # Algorithms
    "bfs",
    "dfs",
    "widest_path",
    "PathEdge",
    "WidestPathResult",
    "UNBOUNDED",
    # Run
    "Mode",
    "run_algorithm",
    "assemble",
    # I/O and configuration
    "load_graph",
    "write_results",
    "GraphWalkConfig",
    "load_config",
    # Errors
    "GraphWalkError",
    "UsageError",
    "GraphIOError",
    "MalformedInputError",
    "ConfigError",
    "MissingNodeError",
    "NodeNotFoundError",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
