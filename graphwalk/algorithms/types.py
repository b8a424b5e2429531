"""Result containers for graph algorithms."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Union

from graphwalk.graph.adjacency import NodeID

#: Bottleneck capacity; ``math.inf`` for the trivial source == destination path.
Capacity = Union[int, float]

#: Capacity of an unconstrained path.
UNBOUNDED = math.inf


@dataclass(frozen=True)
class PathEdge:
    """One step of a path, directed from ``source`` to ``target``."""

    source: NodeID
    target: NodeID

    def to_dict(self) -> Dict[str, NodeID]:
        return {"from": self.source, "to": self.target}


@dataclass(frozen=True)
class WidestPathResult:
    """Widest path between a source/destination pair.

    Attributes:
        path: Node keys from source to destination inclusive; empty if no path.
        edges: Steps between consecutive path nodes.
        capacity: Minimum edge weight along ``path``. 0 if no path exists.
    """

    path: List[NodeID] = field(default_factory=list)
    edges: List[PathEdge] = field(default_factory=list)
    capacity: Capacity = 0

    @property
    def found(self) -> bool:
        """True if the destination is reachable from the source."""
        return bool(self.path)

    @property
    def unbounded(self) -> bool:
        """True for the single-node path where source equals destination."""
        return self.capacity == UNBOUNDED
