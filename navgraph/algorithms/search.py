"""Single-source, single-target shortest-path search.

Uniform-cost search (Dijkstra with decrease-key) over the whole vertex set.
Moving from ``u`` to ``v`` costs ``weight(u, v) + heuristic(v)``: a vertex's
intrinsic cost is charged once per arrival. No remaining-distance estimate is
used, so the search is not goal-directed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict

from navgraph.algorithms.priority_queue import UpdatablePriorityQueue
from navgraph.errors import NoPathError, PreconditionError
from navgraph.graph.vertex import Vertex
from navgraph.logging import get_logger
from navgraph.types import VertexID

if TYPE_CHECKING:
    from navgraph.graph.graph import Graph

logger = get_logger(__name__)


@dataclass
class SearchResult:
    """Raw output of a successful search.

    Attributes:
        start: Start vertex.
        end: End vertex.
        predecessors: Maps each relaxed vertex to the vertex that last improved
            its cost. Following it from ``end`` leads back to ``start``.
        total_costs: Best known cost from ``start`` per vertex id.
        cost: Total cost of the route to ``end``.
        expanded: Number of vertices taken from the queue.
    """

    start: Vertex
    end: Vertex
    predecessors: Dict[Vertex, Vertex] = field(repr=False)
    total_costs: Dict[VertexID, float] = field(repr=False)
    cost: float
    expanded: int = 0


def _check_endpoints(graph: Graph, start_id: VertexID, end_id: VertexID) -> None:
    if start_id not in graph.vertices:
        raise PreconditionError(f"Start vertex '{start_id}' is not in the graph.")
    if end_id not in graph.vertices:
        raise PreconditionError(f"End vertex '{end_id}' is not in the graph.")
    if len(graph.vertices) < 2:
        raise PreconditionError("Search needs a graph with at least 2 vertices.")
    if start_id == end_id:
        raise PreconditionError(f"Start and end are the same vertex: '{start_id}'.")


def uniform_cost_search(
    graph: Graph,
    start_id: VertexID,
    end_id: VertexID,
) -> SearchResult:
    """Find the cheapest route from ``start_id`` to ``end_id``.

    Args:
        graph: Graph to search.
        start_id: Id of the start vertex.
        end_id: Id of the target vertex.

    Returns:
        SearchResult with the predecessor map, per-vertex costs and route cost.

    Raises:
        PreconditionError: If either id is missing, the graph has fewer than two
            vertices, or ``start_id == end_id``.
        NoPathError: If ``end_id`` is unreachable from ``start_id``.
    """
    _check_endpoints(graph, start_id, end_id)
    vertices = graph.vertices
    start = vertices[start_id]

    queue: UpdatablePriorityQueue[VertexID] = UpdatablePriorityQueue(
        (vid, 0.0 if vid == start_id else math.inf) for vid in vertices
    )
    total_costs: Dict[VertexID, float] = {start_id: 0.0}
    predecessors: Dict[Vertex, Vertex] = {}
    expanded = 0

    while queue:
        vertex_id, priority = queue.pop()
        if priority == math.inf:
            # Everything left in the queue is unreachable
            break
        expanded += 1
        if vertex_id == end_id:
            logger.debug(
                "Search %r -> %r reached target: cost=%s, expanded=%d",
                start_id,
                end_id,
                total_costs[end_id],
                expanded,
            )
            return SearchResult(
                start=start,
                end=vertices[end_id],
                predecessors=predecessors,
                total_costs=total_costs,
                cost=total_costs[end_id],
                expanded=expanded,
            )

        vertex = vertices[vertex_id]
        base_cost = total_costs[vertex_id]
        for neighbor_id, weight in vertex.adjacent.items():
            neighbor = vertices[neighbor_id]
            candidate = base_cost + weight + neighbor.heuristic
            if candidate < total_costs.get(neighbor_id, math.inf):
                total_costs[neighbor_id] = candidate
                if neighbor_id in queue:
                    queue.update(neighbor_id, candidate)
                predecessors[neighbor] = vertex

    logger.debug(
        "Search %r -> %r exhausted after expanding %d vertices",
        start_id,
        end_id,
        expanded,
    )
    raise NoPathError(start_id, end_id)
