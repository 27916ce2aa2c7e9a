"""NavGraph: weighted navigation graphs with stepwise path consumption.

NavGraph stores vertices with weighted outgoing edges and an intrinsic arrival
cost, walks them breadth- or depth-first, finds cheapest routes, and hands the
route back as a `Path` that callers consume a step or a cost budget at a time.

Primary API:
    Graph - vertex storage, traversal, frontier and search
    Vertex, Edge, NO_EDGE - graph primitives
    Path - materialized search result with stepwise advancement
    load_graph(), save_graph() - JSON/YAML persistence
    from_networkx(), to_networkx() - NetworkX interop

Example:
    from navgraph import Graph

    graph = Graph()
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "D", 1)
    graph.add_edge("A", "C", 5)
    graph.add_edge("C", "D", 1)

    path, cost = graph.search("A", "D")       # A -> B -> D, cost 2
    reached, steps = path.advance_steps("A", 1)
"""

from __future__ import annotations

from navgraph import logging
from navgraph._version import __version__
from navgraph.algorithms.priority_queue import UpdatablePriorityQueue
from navgraph.algorithms.search import SearchResult
from navgraph.algorithms.session import TraversalSession
from navgraph.config import GRAPH_CONFIG, GraphConfig
from navgraph.errors import (
    GraphError,
    InconsistentPathError,
    NoPathError,
    PreconditionError,
)
from navgraph.graph.convert import from_networkx, to_networkx
from navgraph.graph.graph import Graph
from navgraph.graph.io import graph_from_dict, graph_to_dict, load_graph, save_graph
from navgraph.graph.vertex import NO_EDGE, Edge, Vertex
from navgraph.paths.path import Path
from navgraph.types import Cost, TraversalOrder, VertexID

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Vertex",
    "Edge",
    "NO_EDGE",
    "Path",
    # Algorithms
    "UpdatablePriorityQueue",
    "SearchResult",
    "TraversalSession",
    # Types
    "Cost",
    "VertexID",
    "TraversalOrder",
    # Errors
    "GraphError",
    "PreconditionError",
    "InconsistentPathError",
    "NoPathError",
    # Configuration
    "GraphConfig",
    "GRAPH_CONFIG",
    # Persistence and interop
    "graph_to_dict",
    "graph_from_dict",
    "load_graph",
    "save_graph",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
