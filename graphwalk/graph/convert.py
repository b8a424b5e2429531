"""Conversion between AdjacencyGraph and NetworkX graphs.

Nodes and weighted edges are preserved. Adjacency order after `from_networkx`
follows NetworkX edge iteration order, not the original declaration order.
"""

from __future__ import annotations

from typing import Union

import networkx as nx

from graphwalk.errors import MalformedInputError
from graphwalk.graph.adjacency import AdjacencyGraph

NxUndirected = Union[nx.Graph, nx.MultiGraph]


def to_networkx(graph: AdjacencyGraph, weight_attr: str = "weight") -> nx.MultiGraph:
    """Convert an AdjacencyGraph to a NetworkX MultiGraph.

    Parallel edges and self-loops are kept as separate multi-edges.

    Args:
        graph: Graph to convert.
        weight_attr: Edge attribute that receives the weight.

    Returns:
        A new ``networkx.MultiGraph``.
    """
    nx_graph = nx.MultiGraph()
    nx_graph.add_nodes_from(graph.nodes())
    for source, target, weight in graph.edges():
        nx_graph.add_edge(source, target, **{weight_attr: weight})
    return nx_graph


def from_networkx(nx_graph: NxUndirected, weight_attr: str = "weight") -> AdjacencyGraph:
    """Build an AdjacencyGraph from an undirected NetworkX graph.

    Node keys are converted to strings.

    Args:
        nx_graph: ``networkx.Graph`` or ``networkx.MultiGraph``.
        weight_attr: Edge attribute holding the integer weight.

    Raises:
        MalformedInputError: If the graph is directed or an edge lacks an
            integer ``weight_attr``.
    """
    if nx_graph.is_directed():
        raise MalformedInputError("Directed graphs are not supported.")

    edges = []
    for u, v, data in nx_graph.edges(data=True):
        weight = data.get(weight_attr)
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise MalformedInputError(
                f"Edge '{u}' - '{v}' has no integer '{weight_attr}' attribute."
            )
        edges.append((str(u), str(v), weight))
    return AdjacencyGraph.build((str(n) for n in nx_graph.nodes), edges)
