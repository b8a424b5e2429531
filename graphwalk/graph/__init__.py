"""Graph model and helpers.

This package provides the immutable adjacency-list graph `AdjacencyGraph`
(`adjacency`) and conversion to and from NetworkX graphs (`convert`).
"""

from graphwalk.graph.adjacency import (
    AdjacencyEntry,
    AdjacencyGraph,
    EdgeSpec,
    NodeID,
    Weight,
    build_graph,
)

__all__ = [
    "AdjacencyEntry",
    "AdjacencyGraph",
    "EdgeSpec",
    "NodeID",
    "Weight",
    "build_graph",
]
