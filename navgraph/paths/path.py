"""Materialized route between two vertices of a graph.

A `Path` turns the predecessor map of a search into a forward successor map
and lets a caller consume the route incrementally: one step, N steps, or as
far as a cost budget allows.
"""

from __future__ import annotations

import math
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Iterator,
    Mapping,
    Optional,
    Tuple,
    Union,
)

from navgraph.config import GRAPH_CONFIG
from navgraph.errors import InconsistentPathError, PreconditionError
from navgraph.graph.vertex import Edge, Vertex, validate_budget
from navgraph.types import Cost, VertexID

if TYPE_CHECKING:
    from navgraph.graph.graph import Graph

VertexRef = Union[Vertex, VertexID]


class Path:
    """Immutable forward view over a subset of a graph's vertices.

    The path shares the graph rather than copying it. Editing the graph after
    the path was built does not invalidate the path; use :meth:`is_stale` to
    detect that the route no longer matches the graph.

    Attributes:
        start: First vertex of the route.
        end: Last vertex of the route.
        graph: Graph the route was computed on.
        cost: Total route cost reported by the search.
    """

    def __init__(
        self,
        start: Vertex,
        end: Vertex,
        predecessors: Mapping[Vertex, Vertex],
        total_costs: Mapping[VertexID, Cost],
        graph: Graph,
    ) -> None:
        """Build the successor map by walking ``predecessors`` back from ``end``.

        If two candidates compete to follow the same vertex, the one with the
        lower total cost wins.

        Args:
            start: Start vertex.
            end: End vertex.
            predecessors: Maps a vertex to the vertex it was reached from.
            total_costs: Best known cost from ``start`` per vertex id.
            graph: Graph the route belongs to.

        Raises:
            PreconditionError: If ``start == end``.
            InconsistentPathError: If the walk hits a vertex with no predecessor
                or does not reach ``start``.
        """
        if start == end:
            raise PreconditionError(f"Start and end are the same: {start!r}.")

        self.start: Vertex = start
        self.end: Vertex = end
        self.graph: Graph = graph
        self._successor: Dict[Vertex, Vertex] = {}

        # A well-formed walk visits every predecessor entry at most once
        remaining_steps = len(predecessors) + 1
        current = end
        while current != start:
            if remaining_steps == 0:
                raise InconsistentPathError(
                    f"Predecessor walk from {end!r} does not reach {start!r}."
                )
            remaining_steps -= 1

            follower = current
            try:
                current = predecessors[current]
            except KeyError:
                raise InconsistentPathError(
                    f"Cannot find the predecessor of {current!r}."
                ) from None

            other = self._successor.get(current)
            if other is None or self._cost_of(
                total_costs, follower
            ) < self._cost_of(total_costs, other):
                self._successor[current] = follower

        self.cost: float = float(self._cost_of(total_costs, end))

    @staticmethod
    def _cost_of(total_costs: Mapping[VertexID, Cost], vertex: Vertex) -> Cost:
        return total_costs.get(vertex.id, math.inf)

    def _resolve(self, vertex: VertexRef) -> Vertex:
        if isinstance(vertex, Vertex):
            return vertex
        found = self.graph.try_get_vertex(vertex)
        if found is None:
            raise InconsistentPathError(f"Vertex '{vertex}' is not in the graph.")
        return found

    #
    # Stepping
    #
    def next(self, vertex: VertexRef) -> Vertex:
        """Return the vertex after ``vertex``.

        Raises:
            InconsistentPathError: If ``vertex`` is ``end`` or not on the path.
        """
        vertex = self._resolve(vertex)
        try:
            return self._successor[vertex]
        except KeyError:
            if vertex == self.end:
                raise InconsistentPathError(
                    f"Vertex {vertex!r} is the end of the path."
                ) from None
            raise InconsistentPathError(f"Vertex {vertex!r} is not in path.") from None

    def advance_steps(self, begin: VertexRef, steps: int) -> Tuple[Vertex, int]:
        """Advance up to ``steps`` steps, stopping early at ``end``.

        Args:
            begin: Vertex to advance from.
            steps: Maximum number of steps.

        Returns:
            ``(reached, steps_taken)``; ``steps_taken`` equals ``steps`` unless
            ``end`` was reached first.
        """
        current = self._resolve(begin)
        taken = 0
        while taken < steps and current != self.end:
            current = self.next(current)
            taken += 1
        return current, taken

    def advance_by_cost(
        self, begin: VertexRef, max_cost: Cost
    ) -> Tuple[Vertex, float, int]:
        """Advance while the next vertex's heuristic fits in the remaining budget.

        Args:
            begin: Vertex to advance from.
            max_cost: Budget spent on the heuristics of the vertices entered.

        Returns:
            ``(reached, cost_used, steps_taken)`` with ``cost_used <= max_cost``.

        Raises:
            PreconditionError: If ``max_cost`` is NaN or negative.
            InconsistentPathError: If ``begin`` is not on the path.
        """
        max_cost = validate_budget(max_cost, "Cost budget")
        current = self._resolve(begin)
        if current != self.end and current not in self._successor:
            raise InconsistentPathError(f"Vertex {current!r} is not in path.")

        cost_used = 0.0
        taken = 0
        while current != self.end:
            peek = self._successor[current]
            if cost_used + peek.heuristic > max_cost:
                break
            cost_used += peek.heuristic
            current = peek
            taken += 1
        return current, cost_used, taken

    #
    # Enumeration
    #
    def vertices(
        self, from_: Optional[VertexRef] = None, to: Optional[VertexRef] = None
    ) -> Iterator[Vertex]:
        """Yield the vertices from ``from_`` to ``to``, both inclusive.

        Each call returns an independent iterator.

        Args:
            from_: First vertex; defaults to ``start``.
            to: Last vertex; defaults to ``end``. Must follow ``from_`` on the
                path, otherwise iteration raises once ``end`` is passed.
        """
        first = self.start if from_ is None else self._resolve(from_)
        last = self.end if to is None else self._resolve(to)
        return self._iter_vertices(first, last)

    def _iter_vertices(self, first: Vertex, last: Vertex) -> Iterator[Vertex]:
        current = first
        yield current
        while current != last:
            current = self.next(current)
            yield current

    def __iter__(self) -> Iterator[Vertex]:
        return self.vertices()

    def vertex_ids(self) -> Tuple[VertexID, ...]:
        """Return the ids along the whole path."""
        return tuple(vertex.id for vertex in self.vertices())

    def edges(self) -> Iterator[Edge]:
        """Yield every edge of the path, start to end.

        Edges are looked up in the graph as it is now; a step whose edge has
        since been removed yields ``NO_EDGE``.
        """
        previous = None
        for vertex in self.vertices():
            if previous is not None:
                yield self.graph.get_edge(previous.id, vertex.id)
            previous = vertex

    def seek(self, begin: VertexRef, target_id: VertexID) -> Optional[Vertex]:
        """Scan from ``begin`` toward ``end`` for the vertex with ``target_id``.

        Returns:
            The matching vertex, or None if it does not occur before ``end``.
        """
        for vertex in self.vertices(begin):
            if vertex.id == target_id:
                return vertex
        return None

    #
    # Measures
    #
    def length(self) -> int:
        """Return the number of steps from ``start`` to ``end``."""
        steps = 0
        current = self.start
        while current != self.end:
            current = self.next(current)
            steps += 1
        return steps

    def __len__(self) -> int:
        return self.length()

    def max_single_cost(self) -> float:
        """Return the largest heuristic of any vertex entered along the path."""
        highest = 0.0
        current = self.start
        while current != self.end:
            current = self.next(current)
            highest = max(highest, current.heuristic)
        return highest

    def route_cost(self) -> float:
        """Recompute the route cost against the graph as it is now.

        Returns:
            Sum of edge weights plus arrival heuristics, or ``inf`` if an edge of
            the route no longer exists.
        """
        total = 0.0
        for edge in self.edges():
            if not edge:
                return math.inf
            total += edge.traversal_cost
        return total

    def is_stale(self) -> bool:
        """Return True if the graph changed in a way that alters this route's cost."""
        return not GRAPH_CONFIG.costs_match(self.route_cost(), self.cost)

    def __contains__(self, vertex: Any) -> bool:
        if not isinstance(vertex, Vertex):
            vertex = self.graph.try_get_vertex(vertex)
            if vertex is None:
                return False
        return vertex in self._successor or vertex == self.end

    def __repr__(self) -> str:
        return f"Path({self.start.id!r} -> {self.end.id!r}, cost={self.cost})"
