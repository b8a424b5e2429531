"""Breadth-first and depth-first traversal orders."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, Set

from graphwalk.graph.adjacency import AdjacencyEntry, AdjacencyGraph, NodeID


def bfs(graph: AdjacencyGraph, start: NodeID) -> List[NodeID]:
    """Return nodes reachable from ``start`` in breadth-first visitation order.

    Neighbors are enqueued in adjacency order, so nodes on the same level appear
    in edge-declaration order.

    Args:
        graph: Graph to traverse.
        start: Node the traversal starts from.

    Returns:
        Node keys in the order they were first visited, starting with ``start``.

    Raises:
        NodeNotFoundError: If ``start`` is not in the graph.
    """
    visited: Set[NodeID] = set()
    order: List[NodeID] = []
    queue: Deque[NodeID] = deque([start])

    while queue:
        node = queue.popleft()
        if node in visited:
            continue
        # Lookup first so an unknown start raises before it is recorded
        neighbors = graph.neighbors(node)
        visited.add(node)
        order.append(node)
        for neighbor_id, _weight in neighbors:
            if neighbor_id not in visited:
                queue.append(neighbor_id)
    return order


def dfs(graph: AdjacencyGraph, start: NodeID) -> List[NodeID]:
    """Return nodes reachable from ``start`` in depth-first pre-order.

    Equivalent to visiting ``start`` and then recursing into each unvisited
    neighbor in adjacency order. An explicit stack of neighbor iterators
    replaces recursion, so deep graphs do not hit the interpreter recursion
    limit.

    Raises:
        NodeNotFoundError: If ``start`` is not in the graph.
    """
    visited: Set[NodeID] = {start}
    order: List[NodeID] = [start]
    stack: List[Iterator[AdjacencyEntry]] = [iter(graph.neighbors(start))]

    while stack:
        for neighbor_id, _weight in stack[-1]:
            if neighbor_id not in visited:
                visited.add(neighbor_id)
                order.append(neighbor_id)
                stack.append(iter(graph.neighbors(neighbor_id)))
                break
        else:
            stack.pop()
    return order
