import logging
import math

import pytest

from navgraph.config import GRAPH_CONFIG
from navgraph.errors import PreconditionError
from navgraph.graph.graph import Graph
from navgraph.graph.vertex import NO_EDGE, Vertex
from navgraph.types import TraversalOrder


def test_init_empty_graph():
    """A newly created graph has no vertices, no edges and no root."""
    g = Graph()
    assert len(g) == 0
    assert g.root is None
    assert g.edge_count() == 0
    assert list(g) == []
    assert g.traversal_order == GRAPH_CONFIG.default_traversal_order


def test_add_vertex_sets_root_once():
    g = Graph()
    a = g.add_vertex(Vertex("A"))
    g.add_vertex(Vertex("B"))
    assert g.root is a
    assert set(g.vertices) == {"A", "B"}


def test_add_vertex_overwrites_by_id():
    g = Graph()
    g.add_vertex(Vertex("A", heuristic=1))
    replacement = g.add_vertex(Vertex("A", heuristic=9))
    assert len(g) == 1
    assert g.get_vertex("A").heuristic == 9.0
    # Root follows the replacement
    assert g.root is replacement


def test_add_vertex_creates_missing_endpoints():
    """Pre-populated adjacency never leaves a dangling edge."""
    g = Graph()
    g.add_vertex(Vertex("A", adjacent={"B": 1}))
    assert g.has_vertex("B")
    assert list(g.vertices) == ["A", "B"]


def test_add_edge_creates_endpoints_with_heuristics():
    g = Graph()
    edge = g.add_edge("A", "B", 2, from_heuristic=1, to_heuristic=4)
    assert edge.weight == 2.0
    assert g.get_vertex("A").heuristic == 1.0
    assert g.get_vertex("B").heuristic == 4.0
    assert g.root.id == "A"


def test_add_edge_keeps_existing_heuristics():
    g = Graph()
    g.add_edge("A", "B", 1, to_heuristic=4)
    g.add_edge("C", "B", 1, to_heuristic=99)
    assert g.get_vertex("B").heuristic == 4.0


def test_add_edge_is_directed_and_overwrites_weight():
    g = Graph()
    g.add_edge("A", "B", 1)
    assert g.has_edge("A", "B")
    assert not g.has_edge("B", "A")

    g.add_edge("A", "B", 7)
    assert g.get_edge("A", "B").weight == 7.0
    assert g.edge_count() == 1


def test_add_edge_rejects_invalid_weight():
    g = Graph()
    with pytest.raises(PreconditionError):
        g.add_edge("A", "B", math.nan)


def test_add_bidirectional_edge():
    g = Graph()
    forward, backward = g.add_bidirectional_edge("A", "B", 3, a_heuristic=1)
    assert forward.source.id == "A" and forward.target.id == "B"
    assert backward.source.id == "B" and backward.target.id == "A"
    assert g.get_vertex("A").heuristic == 1.0
    assert g.edge_count() == 2


def test_get_edge_miss_returns_sentinel(diamond):
    assert diamond.get_edge("D", "A") is NO_EDGE
    assert diamond.get_edge("A", "missing") is NO_EDGE
    assert diamond.get_edge("missing", "A") is NO_EDGE


def test_lookup_helpers(diamond):
    assert diamond.try_get_vertex("A").id == "A"
    assert diamond.try_get_vertex("Q") is None
    assert "A" in diamond
    assert "Q" not in diamond
    assert [1, 2] not in diamond  # unhashable ids are never vertices
    with pytest.raises(PreconditionError, match="'Q' is not in the graph"):
        diamond.get_vertex("Q")


def test_iter_edges(diamond):
    pairs = {(e.source.id, e.target.id, e.weight) for e in diamond.iter_edges()}
    assert pairs == {
        ("A", "B", 1.0),
        ("B", "D", 1.0),
        ("A", "C", 5.0),
        ("C", "D", 1.0),
    }
    assert diamond.edge_count() == 4


def test_repr(diamond):
    assert repr(diamond) == "Graph(vertices=4, edges=4, root='A')"


class TestTrimVertices:
    def test_removes_zero_out_degree_vertices(self, diamond):
        removed = diamond.trim_vertices()
        assert removed == ["D"]
        assert not diamond.has_vertex("D")
        # Edges into D are gone, no dangling ids remain
        assert not diamond.has_edge("B", "D")
        for vertex in diamond.vertices.values():
            for target_id in vertex.adjacent:
                assert target_id in diamond.vertices

    def test_does_not_cascade(self, diamond):
        diamond.trim_vertices()
        # B and C lost their only edge; they go on the next call
        assert diamond.has_vertex("B") and diamond.has_vertex("C")
        assert sorted(diamond.trim_vertices()) == ["B", "C"]
        assert diamond.trim_vertices() == ["A"]
        assert len(diamond) == 0
        assert diamond.root is None

    def test_second_call_is_noop_on_cyclic_graph(self):
        g = Graph()
        g.add_bidirectional_edge("A", "B", 1)
        g.add_edge("B", "C", 1)
        assert g.trim_vertices() == ["C"]
        assert g.trim_vertices() == []
        assert set(g.vertices) == {"A", "B"}

    def test_reassigns_root(self):
        g = Graph()
        g.add_vertex(Vertex("lonely"))
        g.add_bidirectional_edge("A", "B", 1)
        assert g.root.id == "lonely"
        g.trim_vertices()
        assert g.root.id == "A"

    def test_logs_at_debug(self, diamond, caplog):
        caplog.set_level(logging.DEBUG, logger="navgraph")
        diamond.trim_vertices()
        assert "Trimmed 1 zero out-degree vertices" in caplog.text


class TestGraphTraversal:
    def test_iterating_graph_covers_all_components(self, islands):
        ids = [v.id for v in islands]
        assert sorted(ids) == ["A", "B", "C", "X", "Y", "Z"]
        assert len(ids) == len(set(ids))

    def test_default_start_is_root(self, islands):
        assert [v.id for v in islands.bfs()] == ["A", "B", "C"]

    def test_explicit_start_and_order(self, diamond):
        assert [v.id for v in diamond.bfs("A")] == ["A", "B", "C", "D"]
        assert [v.id for v in diamond.dfs("A")] == ["A", "B", "D", "C"]
        assert [v.id for v in diamond.traverse("C")] == ["C", "D"]

    def test_graph_order_is_used_when_iterating(self, diamond):
        diamond.traversal_order = TraversalOrder.DEPTH_FIRST
        assert [v.id for v in diamond] == ["A", "B", "D", "C"]

    def test_unknown_start_raises(self, diamond):
        with pytest.raises(PreconditionError):
            diamond.traverse("Q")

    def test_traverse_edges(self, diamond):
        edges = [(e.source.id, e.target.id) for e in diamond.traverse_edges("A")]
        assert edges == [("A", "B"), ("A", "C"), ("B", "D")]

    def test_components(self, islands):
        assert islands.components() == [["A", "B", "C"], ["X", "Y"], ["Z"]]

    def test_components_of_empty_graph(self):
        assert Graph().components() == []


class TestGraphQueries:
    def test_affordable_vertices_defaults_to_root(self, line):
        assert line.affordable_vertices(None, 5) == {"A": 0.0, "B": 2.0, "C": 5.0}

    def test_affordable_vertices_unknown_root(self, line):
        with pytest.raises(PreconditionError):
            line.affordable_vertices("Q", 5)

    def test_affordable_vertices_empty_graph(self):
        with pytest.raises(PreconditionError, match="empty"):
            Graph().affordable_vertices(None, 5)

    def test_search_returns_path_and_cost(self, diamond):
        path, cost = diamond.search("A", "D")
        assert path.vertex_ids() == ("A", "B", "D")
        assert cost == 2.0
        assert path.cost == cost
        assert path.graph is diamond

    def test_search_tree_exposes_raw_result(self, diamond):
        result = diamond.search_tree("A", "D")
        assert result.cost == 2.0
        assert result.total_costs["B"] == 1.0
        assert result.predecessors[diamond.get_vertex("D")].id == "B"
