"""Shared graph fixtures.

Diagrams show edge weights in brackets and vertex heuristics in braces; a
vertex without braces has heuristic 0.
"""

from __future__ import annotations

import pytest

from navgraph.graph.graph import Graph
from navgraph.graph.vertex import Vertex


@pytest.fixture
def diamond() -> Graph:
    #       [1]      [1]
    #   A ──────► B ──────► D
    #   │                   ▲
    #   │  [5]         [1]  │
    #   └───────► C ────────┘
    g = Graph()
    g.add_edge("A", "B", 1)
    g.add_edge("B", "D", 1)
    g.add_edge("A", "C", 5)
    g.add_edge("C", "D", 1)
    return g


@pytest.fixture
def diamond_costly_end(diamond: Graph) -> Graph:
    # Same as diamond, D{10}
    diamond.get_vertex("D").heuristic = 10
    return diamond


@pytest.fixture
def line() -> Graph:
    #      [1]       [1]       [1]       [1]
    #  A ──────► B ──────► C ──────► D ──────► E
    #           {2}       {3}       {1}       {4}
    g = Graph()
    g.add_edge("A", "B", 1, to_heuristic=2)
    g.add_edge("B", "C", 1, to_heuristic=3)
    g.add_edge("C", "D", 1, to_heuristic=1)
    g.add_edge("D", "E", 1, to_heuristic=4)
    return g


@pytest.fixture
def islands() -> Graph:
    #  A ◄──► B ◄──► C       X ◄──► Y       Z
    # all weights [1]; Z has no edges
    g = Graph()
    g.add_bidirectional_edge("A", "B", 1)
    g.add_bidirectional_edge("B", "C", 1)
    g.add_bidirectional_edge("X", "Y", 1)
    g.add_vertex(Vertex("Z"))
    return g


@pytest.fixture
def grid() -> Graph:
    # 3x3 grid of (x, y) positions, 4-connected, every step [1].
    # The centre (1, 1) is expensive to enter: {5}.
    #
    #  (0,2) ─ (1,2) ─ (2,2)
    #    │       │       │
    #  (0,1) ─ (1,1) ─ (2,1)
    #    │      {5}      │
    #  (0,0) ─ (1,0) ─ (2,0)
    g = Graph()
    for x in range(3):
        for y in range(3):
            if x < 2:
                g.add_bidirectional_edge((x, y), (x + 1, y), 1)
            if y < 2:
                g.add_bidirectional_edge((x, y), (x, y + 1), 1)
    g.get_vertex((1, 1)).heuristic = 5
    return g
