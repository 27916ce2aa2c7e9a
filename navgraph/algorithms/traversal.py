"""Breadth-first and depth-first traversal.

Traversals are generators over a frontier they own. Visited marks live in a
`TraversalSession` created per call and cleared when the generator finishes,
is closed, or raises.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Deque, Iterator, Optional, Tuple

from navgraph.algorithms.session import TraversalSession
from navgraph.graph.vertex import Edge, Vertex, edge_between
from navgraph.logging import get_logger
from navgraph.types import TraversalOrder

if TYPE_CHECKING:
    from navgraph.graph.graph import Graph

logger = get_logger(__name__)

# (parent, vertex); parent is None for a component's starting vertex
_FrontierItem = Tuple[Optional[Vertex], Vertex]


def walk(
    graph: Graph,
    start: Optional[Vertex],
    order: TraversalOrder,
    include_all: bool,
) -> Iterator[_FrontierItem]:
    """Yield ``(parent, vertex)`` for every vertex the first time it is visited.

    ``parent`` is the vertex whose expansion queued ``vertex``, or None when
    ``vertex`` starts a walk (the initial start or an ``include_all`` restart).
    """
    if start is None:
        return

    session = TraversalSession()
    frontier: Deque[_FrontierItem] = deque([(None, start)])
    take = frontier.popleft if order == TraversalOrder.BREADTH_FIRST else frontier.pop
    restart_ids = iter(graph.vertices) if include_all else None
    logger.debug(
        "Traversal %s started at %r (%s, include_all=%s)",
        session.token,
        start.id,
        order.name,
        include_all,
    )

    try:
        while True:
            while frontier:
                parent, vertex = take()
                if session.get_visited(vertex):
                    continue
                session.set_visited(vertex)
                yield parent, vertex

                neighbor_ids = list(vertex.adjacent)
                if order == TraversalOrder.DEPTH_FIRST:
                    # Pop neighbours in insertion order
                    neighbor_ids.reverse()
                for neighbor_id in neighbor_ids:
                    if not session.get_visited(neighbor_id):
                        frontier.append((vertex, graph.vertices[neighbor_id]))

            if restart_ids is None:
                break
            next_start = next(
                (vid for vid in restart_ids if not session.get_visited(vid)), None
            )
            if next_start is None:
                break
            frontier.append((None, graph.vertices[next_start]))
    finally:
        logger.debug(
            "Traversal %s ended after %d vertices", session.token, session.visited_count
        )
        session.reset()


def traverse(
    graph: Graph,
    start: Optional[Vertex],
    order: TraversalOrder = TraversalOrder.BREADTH_FIRST,
    include_all: bool = False,
) -> Iterator[Vertex]:
    """Lazily yield vertices reachable from ``start`` in BFS or DFS order.

    Args:
        graph: Graph to walk.
        start: First vertex. ``None`` yields nothing.
        order: ``BREADTH_FIRST`` (FIFO frontier) or ``DEPTH_FIRST`` (LIFO).
        include_all: When the frontier empties, restart from the first unvisited
            vertex in graph insertion order, so every vertex is produced once.

    Yields:
        Each vertex exactly once, when it is first taken from the frontier.
    """
    for _, vertex in walk(graph, start, order, include_all):
        yield vertex


def traverse_edges(
    graph: Graph,
    start: Optional[Vertex],
    order: TraversalOrder = TraversalOrder.BREADTH_FIRST,
    include_all: bool = False,
) -> Iterator[Edge]:
    """Lazily yield the tree edges of a BFS or DFS walk.

    One edge ``(parent, child)`` is produced each time a child is first
    visited; starting vertices of components have no incoming tree edge.
    Arguments are the same as for :func:`traverse`.
    """
    for parent, vertex in walk(graph, start, order, include_all):
        if parent is not None:
            yield edge_between(parent, vertex)
