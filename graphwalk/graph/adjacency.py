"""Immutable undirected weighted graph stored as adjacency lists.

`AdjacencyGraph` maps every declared node key to an ordered tuple of
`AdjacencyEntry` records. Each undirected edge is materialized as two entries,
one in each endpoint's list, so traversals see neighbors in edge-declaration
order. The graph is built once via `build_graph` (or `AdjacencyGraph.build`)
and offers no mutation API afterwards.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import (
    Dict,
    Hashable,
    Iterable,
    Iterator,
    List,
    Mapping,
    NamedTuple,
    Tuple,
)

from graphwalk.errors import MissingNodeError, NodeNotFoundError

NodeID = str
Weight = int
EdgeSpec = Tuple[NodeID, NodeID, Weight]


class AdjacencyEntry(NamedTuple):
    """One traversable connection from a node: neighbor key and edge weight."""

    to: NodeID
    weight: Weight


class AdjacencyGraph:
    """Read-only adjacency view of an undirected weighted graph.

    Instances are created by :meth:`build`; the adjacency lists are owned by
    the graph and exposed only as tuples.
    """

    __slots__ = ("_adj", "_edges")

    def __init__(
        self,
        adjacency: Mapping[NodeID, Tuple[AdjacencyEntry, ...]],
        edges: Tuple[EdgeSpec, ...],
    ) -> None:
        self._adj: Mapping[NodeID, Tuple[AdjacencyEntry, ...]] = MappingProxyType(
            dict(adjacency)
        )
        self._edges = edges

    @classmethod
    def build(
        cls, nodes: Iterable[NodeID], edges: Iterable[EdgeSpec]
    ) -> AdjacencyGraph:
        """Build a graph from declared nodes and ``(source, target, weight)`` edges.

        Every declared node gets an adjacency list, possibly empty. Each edge
        adds ``(target, weight)`` to the source's list and ``(source, weight)``
        to the target's list. Weights are stored as given.

        Args:
            nodes: Node keys. Repeated keys are registered once.
            edges: Edges in declaration order.

        Returns:
            The constructed graph.

        Raises:
            MissingNodeError: If an edge endpoint is not a declared node.
        """
        adj: Dict[NodeID, List[AdjacencyEntry]] = {}
        for node in nodes:
            adj.setdefault(node, [])

        edge_list: List[EdgeSpec] = []
        for source, target, weight in edges:
            for endpoint in (source, target):
                if endpoint not in adj:
                    raise MissingNodeError(
                        f"Edge '{source}' - '{target}' references undeclared node "
                        f"'{endpoint}'.",
                        details={"source": source, "target": target, "node": endpoint},
                    )
            adj[source].append(AdjacencyEntry(target, weight))
            adj[target].append(AdjacencyEntry(source, weight))
            edge_list.append((source, target, weight))

        return cls(
            {node: tuple(entries) for node, entries in adj.items()}, tuple(edge_list)
        )

    def __contains__(self, node: Hashable) -> bool:
        return node in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self._adj)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(nodes={len(self)}, edges={len(self._edges)})"
        )

    def has_node(self, node: Hashable) -> bool:
        """Return True if ``node`` was declared when the graph was built."""
        return node in self._adj

    def nodes(self) -> List[NodeID]:
        """Return node keys in declaration order."""
        return list(self._adj)

    def edge_count(self) -> int:
        """Return the number of undirected edges the graph was built from."""
        return len(self._edges)

    def edges(self) -> List[EdgeSpec]:
        """Return ``(source, target, weight)`` edges in declaration order."""
        return list(self._edges)

    def neighbors(self, node: NodeID) -> Tuple[AdjacencyEntry, ...]:
        """Return the adjacency entries of ``node`` in edge-declaration order.

        Raises:
            NodeNotFoundError: If ``node`` is not in the graph.
        """
        try:
            return self._adj[node]
        except KeyError:
            raise NodeNotFoundError(
                f"Node '{node}' is not in the graph.", details={"node": node}
            ) from None

    def adjacency(self) -> Iterator[Tuple[NodeID, Tuple[AdjacencyEntry, ...]]]:
        """Iterate over ``(node, entries)`` pairs in node declaration order."""
        return iter(self._adj.items())


def build_graph(nodes: Iterable[NodeID], edges: Iterable[EdgeSpec]) -> AdjacencyGraph:
    """Build an :class:`AdjacencyGraph`. See :meth:`AdjacencyGraph.build`."""
    return AdjacencyGraph.build(nodes, edges)
