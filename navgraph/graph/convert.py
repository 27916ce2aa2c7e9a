"""Graph conversion utilities between Graph and NetworkX graphs.

Vertex heuristics become a node attribute and edge weights an edge attribute,
so NetworkX algorithms can be run against (or used to build) a navigation
graph.
"""

from typing import Optional

import networkx as nx

from navgraph.config import GRAPH_CONFIG
from navgraph.graph.graph import Graph
from navgraph.graph.vertex import Vertex


def to_networkx(
    graph: Graph,
    weight_attr: str = "weight",
    heuristic_attr: str = "heuristic",
) -> nx.DiGraph:
    """Convert a Graph to a NetworkX DiGraph.

    Args:
        graph: The Graph to convert.
        weight_attr: Edge attribute receiving the edge weight.
        heuristic_attr: Node attribute receiving the vertex heuristic.

    Returns:
        A NetworkX DiGraph with the same vertices, edges and costs. The graph
        root is stored in ``nx_graph.graph["root"]``.
    """
    nx_graph = nx.DiGraph()
    if graph.root is not None:
        nx_graph.graph["root"] = graph.root.id
    for vertex in graph.vertices.values():
        nx_graph.add_node(vertex.id, **{heuristic_attr: vertex.heuristic})
    for source in graph.vertices.values():
        for target_id, weight in source.adjacent.items():
            nx_graph.add_edge(source.id, target_id, **{weight_attr: weight})
    return nx_graph


def from_networkx(
    nx_graph: nx.Graph,
    weight_attr: str = "weight",
    heuristic_attr: str = "heuristic",
    default_weight: Optional[float] = None,
) -> Graph:
    """Build a Graph from a NetworkX graph.

    Undirected graphs produce an edge in both directions. For multigraphs the
    lightest parallel edge wins. Missing attributes fall back to the configured
    defaults.

    Args:
        nx_graph: Any NetworkX graph (directed or not, simple or multi).
        weight_attr: Edge attribute holding the weight.
        heuristic_attr: Node attribute holding the heuristic.
        default_weight: Weight for edges without ``weight_attr``; defaults to
            ``GRAPH_CONFIG.default_weight``.

    Returns:
        A new Graph. Its root is ``nx_graph.graph["root"]`` when present.
    """
    if default_weight is None:
        default_weight = GRAPH_CONFIG.default_weight

    graph = Graph()
    for node, data in nx_graph.nodes(data=True):
        graph.add_vertex(
            Vertex(node, data.get(heuristic_attr, GRAPH_CONFIG.default_heuristic))
        )

    directed = nx_graph.is_directed()
    for u, v, data in nx_graph.edges(data=True):
        weight = data.get(weight_attr, default_weight)
        pairs = ((u, v),) if directed else ((u, v), (v, u))
        for source_id, target_id in pairs:
            source = graph.vertices[source_id]
            current = source.adjacent.get(target_id)
            if current is None or weight < current:
                graph.add_edge(source_id, target_id, weight)

    root = nx_graph.graph.get("root")
    if root is not None and root in graph.vertices:
        graph.root = graph.vertices[root]
    return graph
