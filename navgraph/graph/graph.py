"""Weighted directed graph with traversal and search entry points.

`Graph` owns an id-keyed map of `Vertex` objects. Edges live in each vertex's
adjacency; adding an edge creates missing endpoints, so no edge ever points at
an unknown id. Algorithms are implemented in ``navgraph.algorithms`` and
exposed here as methods.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from navgraph.algorithms.frontier import affordable_vertices
from navgraph.algorithms.search import SearchResult, uniform_cost_search
from navgraph.algorithms.traversal import traverse, traverse_edges, walk
from navgraph.config import GRAPH_CONFIG
from navgraph.errors import PreconditionError
from navgraph.graph.vertex import NO_EDGE, Edge, Vertex
from navgraph.logging import get_logger
from navgraph.paths.path import Path
from navgraph.types import Cost, TraversalOrder, VertexID

logger = get_logger(__name__)


class Graph:
    """A set of vertices connected by weighted directed edges.

    Iterating a graph walks every vertex once, in ``traversal_order``, starting
    at ``root`` and covering disconnected components as well.

    Attributes:
        vertices: Map of vertex id to `Vertex`.
        root: Default traversal start; the first vertex added unless set.
        traversal_order: Order used when the graph itself is iterated.
    """

    def __init__(self, traversal_order: Optional[TraversalOrder] = None) -> None:
        self.vertices: Dict[VertexID, Vertex] = {}
        self.root: Optional[Vertex] = None
        self.traversal_order: TraversalOrder = (
            traversal_order
            if traversal_order is not None
            else GRAPH_CONFIG.default_traversal_order
        )

    #
    # Mutation
    #
    def add_vertex(self, vertex: Vertex) -> Vertex:
        """Insert ``vertex``, replacing any vertex with the same id.

        Args:
            vertex: Vertex to insert.

        Returns:
            The inserted vertex.
        """
        self.vertices[vertex.id] = vertex
        if self.root is None or self.root.id == vertex.id:
            self.root = vertex
        # Endpoints of pre-populated adjacency must exist
        for target_id in vertex.adjacent:
            if target_id not in self.vertices:
                self.vertices[target_id] = Vertex(
                    target_id, GRAPH_CONFIG.default_heuristic
                )
        logger.debug("Added %r", vertex)
        return vertex

    def add_edge(
        self,
        from_id: VertexID,
        to_id: VertexID,
        weight: Cost,
        from_heuristic: Optional[Cost] = None,
        to_heuristic: Optional[Cost] = None,
    ) -> Edge:
        """Add or overwrite the directed edge ``from_id -> to_id``.

        Missing endpoints are created with the supplied heuristic, or the
        configured default. Heuristics of existing vertices are left unchanged.

        Args:
            from_id: Source vertex id.
            to_id: Target vertex id.
            weight: Finite, non-negative edge weight.
            from_heuristic: Heuristic for the source if it has to be created.
            to_heuristic: Heuristic for the target if it has to be created.

        Returns:
            The edge view.

        Raises:
            PreconditionError: If ``weight`` or a heuristic is invalid.
        """
        source = self._ensure_vertex(from_id, from_heuristic)
        target = self._ensure_vertex(to_id, to_heuristic)
        source.set_weight(to_id, weight)
        return Edge(source, target, source.adjacent[to_id])

    def add_bidirectional_edge(
        self,
        a_id: VertexID,
        b_id: VertexID,
        weight: Cost,
        a_heuristic: Optional[Cost] = None,
        b_heuristic: Optional[Cost] = None,
    ) -> Tuple[Edge, Edge]:
        """Add ``a -> b`` and ``b -> a`` with the same weight."""
        forward = self.add_edge(a_id, b_id, weight, a_heuristic, b_heuristic)
        backward = self.add_edge(b_id, a_id, weight, b_heuristic, a_heuristic)
        return forward, backward

    def _ensure_vertex(
        self, vertex_id: VertexID, heuristic: Optional[Cost]
    ) -> Vertex:
        vertex = self.vertices.get(vertex_id)
        if vertex is None:
            if heuristic is None:
                heuristic = GRAPH_CONFIG.default_heuristic
            vertex = self.add_vertex(Vertex(vertex_id, heuristic))
        return vertex

    def trim_vertices(self) -> List[VertexID]:
        """Remove every vertex that has no outgoing edges.

        Edges that pointed into a removed vertex are dropped as well. The pass
        does not cascade: a vertex whose only edges led to removed vertices is
        kept and becomes a candidate for the next call.

        Returns:
            Ids of the removed vertices.
        """
        removed = [vid for vid, vertex in self.vertices.items() if not vertex.adjacent]
        if not removed:
            return removed

        removed_set = set(removed)
        for vid in removed:
            del self.vertices[vid]
        for vertex in self.vertices.values():
            for target_id in removed_set.intersection(vertex.adjacent):
                del vertex.adjacent[target_id]

        if self.root is not None and self.root.id in removed_set:
            self.root = next(iter(self.vertices.values()), None)

        logger.debug(
            "Trimmed %d zero out-degree vertices, %d remain",
            len(removed),
            len(self.vertices),
        )
        return removed

    #
    # Lookup
    #
    def has_vertex(self, vertex_id: VertexID) -> bool:
        return vertex_id in self.vertices

    def has_edge(self, from_id: VertexID, to_id: VertexID) -> bool:
        source = self.vertices.get(from_id)
        return source is not None and to_id in source.adjacent

    def get_edge(self, from_id: VertexID, to_id: VertexID) -> Edge:
        """Return the edge ``from_id -> to_id``, or ``NO_EDGE`` if absent."""
        source = self.vertices.get(from_id)
        target = self.vertices.get(to_id)
        if source is None or target is None or to_id not in source.adjacent:
            return NO_EDGE
        return Edge(source, target, source.adjacent[to_id])

    def try_get_vertex(self, vertex_id: VertexID) -> Optional[Vertex]:
        """Return the vertex with ``vertex_id``, or None if absent."""
        return self.vertices.get(vertex_id)

    def get_vertex(self, vertex_id: VertexID) -> Vertex:
        """Return the vertex with ``vertex_id``.

        Raises:
            PreconditionError: If no such vertex exists.
        """
        vertex = self.vertices.get(vertex_id)
        if vertex is None:
            raise PreconditionError(f"Vertex '{vertex_id}' is not in the graph.")
        return vertex

    def iter_edges(self) -> Iterator[Edge]:
        """Yield every stored edge."""
        for source in self.vertices.values():
            for target_id, weight in source.adjacent.items():
                yield Edge(source, self.vertices[target_id], weight)

    def edge_count(self) -> int:
        return sum(len(vertex.adjacent) for vertex in self.vertices.values())

    def __contains__(self, vertex_id: object) -> bool:
        try:
            return vertex_id in self.vertices
        except TypeError:
            # Unhashable ids can never be vertices
            return False

    def __len__(self) -> int:
        return len(self.vertices)

    def __repr__(self) -> str:
        return (
            f"Graph(vertices={len(self.vertices)}, edges={self.edge_count()}, "
            f"root={self.root.id if self.root is not None else None!r})"
        )

    #
    # Traversal
    #
    def _start_vertex(self, start: Optional[VertexID]) -> Optional[Vertex]:
        if start is None:
            return self.root
        return self.get_vertex(start)

    def traverse(
        self,
        start: Optional[VertexID] = None,
        order: Optional[TraversalOrder] = None,
        include_all: bool = False,
    ) -> Iterator[Vertex]:
        """Lazily walk vertices from ``start`` (default ``root``).

        Args:
            start: Id of the first vertex.
            order: Traversal order; defaults to ``traversal_order``.
            include_all: Also visit vertices unreachable from ``start``.

        Raises:
            PreconditionError: If ``start`` is not in the graph.
        """
        return traverse(
            self,
            self._start_vertex(start),
            order if order is not None else self.traversal_order,
            include_all,
        )

    def traverse_edges(
        self,
        start: Optional[VertexID] = None,
        order: Optional[TraversalOrder] = None,
        include_all: bool = False,
    ) -> Iterator[Edge]:
        """Lazily yield the tree edges of a walk; see :meth:`traverse`."""
        return traverse_edges(
            self,
            self._start_vertex(start),
            order if order is not None else self.traversal_order,
            include_all,
        )

    def bfs(
        self, start: Optional[VertexID] = None, include_all: bool = False
    ) -> Iterator[Vertex]:
        return self.traverse(start, TraversalOrder.BREADTH_FIRST, include_all)

    def dfs(
        self, start: Optional[VertexID] = None, include_all: bool = False
    ) -> Iterator[Vertex]:
        return self.traverse(start, TraversalOrder.DEPTH_FIRST, include_all)

    def __iter__(self) -> Iterator[Vertex]:
        return self.traverse(include_all=True)

    def components(self) -> List[List[VertexID]]:
        """Group vertex ids by the walk restart that discovered them.

        The first group starts at ``root``; each further group starts at the
        first vertex (in insertion order) not reached by an earlier group. For
        graphs whose edges are all bidirectional these are the connected
        components.
        """
        groups: List[List[VertexID]] = []
        for parent, vertex in walk(
            self, self.root, TraversalOrder.BREADTH_FIRST, include_all=True
        ):
            if parent is None:
                groups.append([vertex.id])
            else:
                groups[-1].append(vertex.id)
        return groups

    #
    # Queries
    #
    def affordable_vertices(
        self, root: Optional[VertexID], max_cost: Cost
    ) -> Dict[VertexID, float]:
        """Return vertices reachable from ``root`` within a heuristic budget.

        Greedy single pass; see
        :func:`navgraph.algorithms.frontier.affordable_vertices`.

        Args:
            root: Id of the start vertex; ``None`` uses the graph root.
            max_cost: Budget for aggregate heuristic cost.

        Returns:
            Mapping of vertex id to aggregate cost in discovery order.

        Raises:
            PreconditionError: If ``root`` is not in the graph, the graph is
                empty and no root is available, or ``max_cost`` is NaN or
                negative.
        """
        start = self._start_vertex(root)
        if start is None:
            raise PreconditionError("Graph is empty; no root to expand from.")
        return affordable_vertices(self, start, max_cost)

    def search_tree(self, start_id: VertexID, end_id: VertexID) -> SearchResult:
        """Run the shortest-path search and return its raw result.

        Raises:
            PreconditionError: On missing ids, fewer than two vertices, or
                ``start_id == end_id``.
            NoPathError: If ``end_id`` is unreachable.
        """
        return uniform_cost_search(self, start_id, end_id)

    def search(self, start_id: VertexID, end_id: VertexID) -> Tuple[Path, float]:
        """Find the cheapest route from ``start_id`` to ``end_id``.

        Each step costs the edge weight plus the heuristic of the vertex
        entered.

        Returns:
            ``(path, total_cost)``.

        Raises:
            PreconditionError: On missing ids, fewer than two vertices, or
                ``start_id == end_id``.
            NoPathError: If ``end_id`` is unreachable.
        """
        result = self.search_tree(start_id, end_id)
        path = Path(
            result.start, result.end, result.predecessors, result.total_costs, self
        )
        return path, result.cost
