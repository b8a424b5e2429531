"""Widest-path (maximum bottleneck capacity) search.

Implements a Dijkstra-like label-correcting search that maximizes, per node,
the minimum edge weight along the best known path from the source instead of
minimizing a cumulative cost.

Notes:
    Capacities start at 0 for every node, so an edge of weight 0 (or below)
    never improves a label. A destination reachable only through such edges is
    reported exactly like an unreachable one: empty path, capacity 0.

    Among queue entries with equal capacity the node with the smaller key is
    expanded first, which makes the chosen path deterministic when several
    paths share the best capacity.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Dict, List, Tuple

from graphwalk.algorithms.types import UNBOUNDED, Capacity, PathEdge, WidestPathResult
from graphwalk.errors import NodeNotFoundError
from graphwalk.graph.adjacency import AdjacencyGraph, NodeID
from graphwalk.logging import get_logger

logger = get_logger(__name__)


def widest_capacities(
    graph: AdjacencyGraph, src_node: NodeID
) -> Tuple[Dict[NodeID, Capacity], Dict[NodeID, NodeID]]:
    """Compute the best bottleneck capacity from ``src_node`` to every node.

    Args:
        graph: Graph to search.
        src_node: Source node.

    Returns:
        A tuple of (capacity, pred):
          - capacity: Maps every node to its best bottleneck capacity from
            ``src_node``; 0 for unreachable nodes and ``UNBOUNDED`` for the
            source itself.
          - pred: Maps each reached node (other than the source) to its
            predecessor on the widest path.

    Raises:
        NodeNotFoundError: If ``src_node`` is not in the graph.
    """
    if src_node not in graph:
        raise NodeNotFoundError(
            f"Source node '{src_node}' is not in the graph.", details={"node": src_node}
        )

    capacity: Dict[NodeID, Capacity] = {node_id: 0 for node_id in graph}
    capacity[src_node] = UNBOUNDED
    pred: Dict[NodeID, NodeID] = {}

    # heapq is a min-heap; capacities are negated to pop the widest entry first
    max_pq: List[Tuple[Capacity, NodeID]] = [(-UNBOUNDED, src_node)]

    while max_pq:
        neg_cap, node_id = heappop(max_pq)
        current_cap = -neg_cap
        if current_cap < capacity[node_id]:
            # Stale entry, node already has a wider label
            continue

        for neighbor_id, weight in graph.neighbors(node_id):
            new_cap = min(current_cap, weight)
            if new_cap > capacity[neighbor_id]:
                capacity[neighbor_id] = new_cap
                pred[neighbor_id] = node_id
                heappush(max_pq, (-new_cap, neighbor_id))

    return capacity, pred


def reconstruct_path(
    src_node: NodeID,
    dst_node: NodeID,
    pred: Dict[NodeID, NodeID],
    capacity: Capacity,
) -> WidestPathResult:
    """Walk predecessors back from ``dst_node`` and build the result.

    Returns an empty result (no path, no edges, capacity 0) when ``dst_node``
    differs from ``src_node`` and has no predecessor.
    """
    if dst_node != src_node and dst_node not in pred:
        return WidestPathResult()

    path: List[NodeID] = [dst_node]
    edges: List[PathEdge] = []
    node_id = dst_node
    while node_id != src_node:
        prev_id = pred[node_id]
        edges.append(PathEdge(prev_id, node_id))
        path.append(prev_id)
        node_id = prev_id

    path.reverse()
    edges.reverse()
    return WidestPathResult(path=path, edges=edges, capacity=capacity)


def widest_path(
    graph: AdjacencyGraph, src_node: NodeID, dst_node: NodeID
) -> WidestPathResult:
    """Find the path from ``src_node`` to ``dst_node`` with maximal bottleneck.

    The bottleneck (capacity) of a path is its minimum edge weight. Among all
    paths between the two nodes the returned one has the largest capacity.

    Args:
        graph: Graph to search.
        src_node: Source node.
        dst_node: Destination node.

    Returns:
        WidestPathResult. For ``src_node == dst_node`` the path is the single
        node with no edges and an ``UNBOUNDED`` capacity. If the destination
        cannot be reached the path and edges are empty and capacity is 0.

    Raises:
        NodeNotFoundError: If either node is not in the graph.
    """
    if dst_node not in graph:
        raise NodeNotFoundError(
            f"Destination node '{dst_node}' is not in the graph.",
            details={"node": dst_node},
        )

    capacity, pred = widest_capacities(graph, src_node)
    result = reconstruct_path(src_node, dst_node, pred, capacity[dst_node])
    logger.debug(
        f"Widest path {src_node} -> {dst_node}: {len(result.edges)} hops, "
        f"capacity {result.capacity}"
    )
    return result
