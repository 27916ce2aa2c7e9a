import logging
import math

import pytest

from navgraph.algorithms.frontier import affordable_vertices
from navgraph.errors import PreconditionError
from navgraph.graph.graph import Graph


def test_budget_limits_aggregate_heuristic(line):
    # Edge weights are not charged, only heuristics of the vertices entered
    result = affordable_vertices(line, line.root, 5)
    assert result == {"A": 0.0, "B": 2.0, "C": 5.0}


def test_root_always_included(line):
    line.get_vertex("A").heuristic = 100
    assert affordable_vertices(line, line.root, 0) == {"A": 0.0}


def test_zero_budget_still_returns_root(line):
    assert affordable_vertices(line, line.get_vertex("C"), 0) == {"C": 0.0}


def test_unbounded_budget_reaches_everything(line):
    result = affordable_vertices(line, line.root, math.inf)
    assert list(result) == ["A", "B", "C", "D", "E"]


@pytest.mark.parametrize("budget", [math.nan, -1, -0.5, "lots", None])
def test_invalid_budget_is_rejected(line, budget):
    """A NaN budget would otherwise compare false and admit every vertex."""
    with pytest.raises(PreconditionError):
        affordable_vertices(line, line.root, budget)


def test_graph_query_rejects_nan_budget(line):
    with pytest.raises(PreconditionError, match="Frontier budget"):
        line.affordable_vertices("A", math.nan)


@pytest.mark.parametrize(
    "budget, expected",
    [
        (2, ["B"]),
        (3, ["B", "C"]),
        (4, ["B", "C", "D"]),
        (10, ["B", "C", "D", "E"]),
    ],
)
def test_larger_budgets_admit_more(line, budget, expected):
    result = affordable_vertices(line, line.get_vertex("B"), budget)
    assert list(result) == expected


def test_discovery_order_is_breadth_first(islands):
    result = affordable_vertices(islands, islands.root, 10)
    assert list(result) == ["A", "B", "C"]
    assert set(result.values()) == {0.0}


def test_greedy_admission_fixes_first_cost():
    #     R
    #   /   \
    #  P{3}  Q{0}
    #   \   /
    #    T{1} ── U{1}
    g = Graph()
    g.add_edge("R", "P", 1, to_heuristic=3)
    g.add_edge("R", "Q", 1, to_heuristic=0)
    g.add_edge("P", "T", 1, to_heuristic=1)
    g.add_edge("Q", "T", 1)
    g.add_edge("T", "U", 1, to_heuristic=1)

    result = affordable_vertices(g, g.root, 4)

    # T is reached through P first and keeps that cost even though Q is cheaper
    assert result["T"] == 4.0
    assert "U" not in result


def test_over_budget_neighbour_can_be_admitted_by_later_parent():
    g = Graph()
    g.add_edge("R", "P", 1, to_heuristic=3)
    g.add_edge("R", "Q", 1, to_heuristic=0)
    g.add_edge("P", "T", 1, to_heuristic=1)
    g.add_edge("Q", "T", 1)

    result = affordable_vertices(g, g.root, 3)
    assert result == {"R": 0.0, "P": 3.0, "Q": 0.0, "T": 1.0}


def test_repeated_queries_are_independent(line, caplog):
    caplog.set_level(logging.DEBUG, logger="navgraph")
    first = affordable_vertices(line, line.root, 5)
    second = affordable_vertices(line, line.root, 5)
    assert first == second
    assert "admitted 3 vertices" in caplog.text
