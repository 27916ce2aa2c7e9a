"""Cost-bounded frontier expansion."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Deque, Dict

from navgraph.algorithms.session import TraversalSession
from navgraph.graph.vertex import Vertex, validate_budget
from navgraph.logging import get_logger
from navgraph.types import Cost, VertexID

if TYPE_CHECKING:
    from navgraph.graph.graph import Graph

logger = get_logger(__name__)


def affordable_vertices(
    graph: Graph,
    root: Vertex,
    max_cost: Cost,
) -> Dict[VertexID, float]:
    """Collect the vertices reachable from ``root`` within a heuristic budget.

    Breadth-first expansion. A neighbour is admitted when its parent's aggregate
    cost plus its own heuristic is at most ``max_cost``; edge weights are not
    charged. ``root`` is always admitted with aggregate cost 0.

    This is a single greedy pass: once a vertex is admitted its aggregate cost
    is fixed, even if a cheaper route through another parent is discovered
    later. Membership is therefore an approximation of the minimal-cost
    frontier, and a vertex only reachable cheaply via such a route may be
    missing from the result.

    Args:
        graph: Graph to expand over.
        root: Starting vertex.
        max_cost: Budget compared against aggregate costs.

    Returns:
        Mapping of admitted vertex id to its aggregate cost, in discovery order.

    Raises:
        PreconditionError: If ``max_cost`` is NaN or negative.
    """
    max_cost = validate_budget(max_cost, "Frontier budget")
    session = TraversalSession()
    session.set_visited(root)
    session.set_aggregate_cost(root, 0.0)
    admitted: Dict[VertexID, float] = {root.id: 0.0}
    queue: Deque[Vertex] = deque([root])

    try:
        while queue:
            vertex = queue.popleft()
            base_cost = session.get_aggregate_cost(vertex)
            for neighbor_id in vertex.adjacent:
                if session.get_visited(neighbor_id):
                    continue
                neighbor = graph.vertices[neighbor_id]
                cost = base_cost + neighbor.heuristic
                if cost > max_cost:
                    continue
                session.set_visited(neighbor)
                session.set_aggregate_cost(neighbor, cost)
                admitted[neighbor_id] = cost
                queue.append(neighbor)
    finally:
        session.reset()

    logger.debug(
        "Frontier from %r within %s admitted %d vertices",
        root.id,
        max_cost,
        len(admitted),
    )
    return admitted
