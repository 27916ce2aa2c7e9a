"""Vertex and edge primitives.

A `Vertex` owns its outgoing adjacency (target id -> weight) and an intrinsic
arrival cost called ``heuristic``. An `Edge` is an immutable view built on
demand from a vertex's adjacency; it is never stored. ``NO_EDGE`` is returned
for lookups that miss.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional

from navgraph.errors import PreconditionError
from navgraph.types import Cost, VertexID


def validate_cost(value: Any, what: str) -> float:
    """Return ``value`` as a float, rejecting NaN, infinite and negative values.

    Args:
        value: Candidate weight or heuristic.
        what: Human-readable name used in the error message.

    Returns:
        The value converted to float.

    Raises:
        PreconditionError: If the value is not a finite non-negative number.
    """
    try:
        cost = float(value)
    except (TypeError, ValueError):
        raise PreconditionError(f"{what} must be a number, got {value!r}.") from None
    if math.isnan(cost) or math.isinf(cost):
        raise PreconditionError(f"{what} must be finite, got {value!r}.")
    if cost < 0:
        raise PreconditionError(f"{what} must be non-negative, got {value!r}.")
    return cost


def validate_budget(value: Any, what: str = "Budget") -> float:
    """Return ``value`` as a float budget; ``inf`` means unbounded.

    Raises:
        PreconditionError: If the value is not a number, is NaN, or is negative.
    """
    try:
        budget = float(value)
    except (TypeError, ValueError):
        raise PreconditionError(f"{what} must be a number, got {value!r}.") from None
    if math.isnan(budget):
        raise PreconditionError(f"{what} must not be NaN.")
    if budget < 0:
        raise PreconditionError(f"{what} must be non-negative, got {value!r}.")
    return budget


class Vertex:
    """A graph node: identity, outgoing weighted edges, and arrival cost.

    Vertices compare and hash by ``id`` so they can key path maps. The id must
    support equality and hashing and is immutable for the vertex's lifetime.

    Attributes:
        id: Caller supplied identity, unique within a graph.
        adjacent: Outgoing edges as ``target_id -> weight``.
    """

    __slots__ = ("_id", "_heuristic", "adjacent")

    def __init__(
        self,
        vertex_id: VertexID,
        heuristic: Cost = 0.0,
        adjacent: Optional[Dict[VertexID, Cost]] = None,
    ) -> None:
        try:
            hash(vertex_id)
        except TypeError:
            raise PreconditionError(
                f"Vertex id must be hashable, got {type(vertex_id).__name__}."
            ) from None
        self._id = vertex_id
        self._heuristic = validate_cost(heuristic, f"Heuristic of vertex '{vertex_id}'")
        self.adjacent: Dict[VertexID, float] = {}
        for target_id, weight in (adjacent or {}).items():
            self.set_weight(target_id, weight)

    @property
    def id(self) -> VertexID:
        return self._id

    @property
    def heuristic(self) -> float:
        """Cost charged for arriving at or passing through this vertex."""
        return self._heuristic

    @heuristic.setter
    def heuristic(self, value: Cost) -> None:
        self._heuristic = validate_cost(value, f"Heuristic of vertex '{self._id}'")

    def set_weight(self, target_id: VertexID, weight: Cost) -> None:
        """Create or overwrite the outgoing edge to ``target_id``.

        Raises:
            PreconditionError: If ``weight`` is NaN, infinite, or negative.
        """
        self.adjacent[target_id] = validate_cost(
            weight, f"Weight of edge '{self._id}' -> '{target_id}'"
        )

    def get_weight(self, target_id: VertexID) -> float:
        """Return the weight of the edge to ``target_id``, or NaN if absent."""
        return self.adjacent.get(target_id, math.nan)

    def has_edge_to(self, target_id: VertexID) -> bool:
        return target_id in self.adjacent

    def remove_edge_to(self, target_id: VertexID) -> bool:
        """Remove the edge to ``target_id``; return whether one existed."""
        return self.adjacent.pop(target_id, None) is not None

    @property
    def out_degree(self) -> int:
        return len(self.adjacent)

    def neighbor_ids(self) -> Iterator[VertexID]:
        return iter(self.adjacent)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Vertex({self._id!r}, heuristic={self._heuristic}, "
            f"out_degree={len(self.adjacent)})"
        )


@dataclass(frozen=True)
class Edge:
    """Immutable ``(source, target, weight)`` view of one directed edge.

    Falsy only for the ``NO_EDGE`` sentinel.
    """

    source: Optional[Vertex]
    target: Optional[Vertex]
    weight: float

    def __bool__(self) -> bool:
        return self.source is not None and self.target is not None

    @property
    def traversal_cost(self) -> float:
        """Weight plus the arrival cost of the target vertex."""
        if not self:
            return math.nan
        return self.weight + self.target.heuristic  # type: ignore[union-attr]

    def __repr__(self) -> str:
        if not self:
            return "Edge(NO_EDGE)"
        return (
            f"Edge({self.source.id!r} -> {self.target.id!r}, "  # type: ignore[union-attr]
            f"weight={self.weight})"
        )


#: Sentinel returned by edge lookups that miss. NaN weight never appears on a
#: stored edge.
NO_EDGE = Edge(None, None, math.nan)


def edge_between(source: Vertex, target: Vertex) -> Edge:
    """Build the edge view from ``source`` to ``target`` or return ``NO_EDGE``."""
    weight = source.adjacent.get(target.id)
    if weight is None:
        return NO_EDGE
    return Edge(source, target, weight)
