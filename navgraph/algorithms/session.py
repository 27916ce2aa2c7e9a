"""Traversal-local bookkeeping for visited marks and aggregate costs.

Each traversal or frontier query creates its own `TraversalSession`, so the
marks never touch the long-lived `Vertex` objects. Abandoning a traversal part
way leaves nothing behind, and overlapping read-only traversals of one graph do
not interfere.
"""

from __future__ import annotations

import math
from typing import Dict, Set, Union

from navgraph.graph.vertex import Vertex
from navgraph.types import Cost, VertexID
from navgraph.utils.ids import new_base64_uuid

VertexRef = Union[Vertex, VertexID]


def _key(vertex: VertexRef) -> VertexID:
    return vertex.id if isinstance(vertex, Vertex) else vertex


class TraversalSession:
    """Visited flags and aggregate costs for one traversal call.

    Unset state reads as ``visited=False`` and ``aggregate_cost=+inf``.

    Attributes:
        token: Opaque identifier minted per session, useful in log records.
    """

    __slots__ = ("token", "_visited", "_aggregate_cost")

    def __init__(self) -> None:
        self.token: str = new_base64_uuid()
        self._visited: Set[VertexID] = set()
        self._aggregate_cost: Dict[VertexID, float] = {}

    def get_visited(self, vertex: VertexRef) -> bool:
        return _key(vertex) in self._visited

    def set_visited(self, vertex: VertexRef, visited: bool = True) -> None:
        if visited:
            self._visited.add(_key(vertex))
        else:
            self._visited.discard(_key(vertex))

    def get_aggregate_cost(self, vertex: VertexRef) -> float:
        return self._aggregate_cost.get(_key(vertex), math.inf)

    def set_aggregate_cost(self, vertex: VertexRef, cost: Cost) -> None:
        self._aggregate_cost[_key(vertex)] = cost

    @property
    def visited_count(self) -> int:
        return len(self._visited)

    def reset_visited(self) -> None:
        self._visited.clear()

    def reset_aggregate_cost(self) -> None:
        self._aggregate_cost.clear()

    def reset(self) -> None:
        """Clear all marks held by this session."""
        self.reset_visited()
        self.reset_aggregate_cost()

    def __repr__(self) -> str:
        return f"TraversalSession({self.token}, visited={len(self._visited)})"
