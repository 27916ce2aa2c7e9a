"""Graph serialization.

A graph persists as an ordered list of vertex records, each carrying its id,
heuristic and outgoing adjacency:

    {
        "root": <vertex_id or null>,
        "traversal_order": "BREADTH_FIRST",
        "vertices": [
            {
                "id": <vertex_id>,
                "heuristic": 0.0,
                "adjacent": [{"target": <vertex_id>, "weight": 1.0}, ...]
            },
            ...
        ]
    }

Tuple ids (e.g. grid positions) are written as lists and restored as tuples,
so the same dictionary works for JSON and YAML.
"""

from __future__ import annotations

import json
from pathlib import Path as FilePath
from typing import Any, Dict, Iterable, List, Optional, Union

import yaml

from navgraph.config import GRAPH_CONFIG
from navgraph.errors import PreconditionError
from navgraph.graph.graph import Graph
from navgraph.graph.vertex import Vertex
from navgraph.logging import get_logger
from navgraph.types import TraversalOrder, VertexID

logger = get_logger(__name__)


def _export_id(vertex_id: VertexID) -> Any:
    if isinstance(vertex_id, tuple):
        return [_export_id(part) for part in vertex_id]
    return vertex_id


def restore_id(value: Any) -> VertexID:
    """Convert a decoded id back to a hashable value (lists become tuples)."""
    if isinstance(value, list):
        return tuple(restore_id(part) for part in value)
    return value


def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    """Convert a Graph into a plain dictionary.

    Args:
        graph: Graph to convert.

    Returns:
        A dict with 'root', 'traversal_order' and an ordered 'vertices' list.
    """
    return {
        "root": _export_id(graph.root.id) if graph.root is not None else None,
        "traversal_order": graph.traversal_order.name,
        "vertices": [
            {
                "id": _export_id(vertex.id),
                "heuristic": vertex.heuristic,
                "adjacent": [
                    {"target": _export_id(target_id), "weight": weight}
                    for target_id, weight in vertex.adjacent.items()
                ],
            }
            for vertex in graph.vertices.values()
        ],
    }


def graph_from_dict(data: Dict[str, Any]) -> Graph:
    """Reconstruct a Graph from its dictionary representation.

    Args:
        data: Dictionary produced by :func:`graph_to_dict` (or hand written in
            the same shape).

    Returns:
        The reconstructed Graph.

    Raises:
        PreconditionError: If the data or a record is malformed, a weight or
            heuristic is invalid, or the traversal order or root id is unknown.
    """
    if not isinstance(data, dict):
        raise PreconditionError(
            f"Graph data must be a mapping, got {type(data).__name__}."
        )

    order_name = data.get("traversal_order")
    try:
        order = (
            TraversalOrder.from_string(str(order_name))
            if order_name
            else GRAPH_CONFIG.default_traversal_order
        )
    except ValueError as exc:
        raise PreconditionError(str(exc)) from None
    graph = Graph(traversal_order=order)

    records = data.get("vertices") or []
    if not isinstance(records, list):
        raise PreconditionError("'vertices' must be a list of vertex records.")
    # All vertices first so insertion order follows the record order
    for index, record in enumerate(records):
        if not isinstance(record, dict) or "id" not in record:
            raise PreconditionError(f"Vertex record #{index} has no 'id': {record!r}.")
        graph.add_vertex(
            Vertex(
                restore_id(record["id"]),
                record.get("heuristic", GRAPH_CONFIG.default_heuristic),
            )
        )

    for record in records:
        source_id = restore_id(record["id"])
        links = record.get("adjacent") or []
        if not isinstance(links, list):
            raise PreconditionError(
                f"'adjacent' of vertex '{record['id']}' must be a list."
            )
        for link in links:
            if not isinstance(link, dict) or "target" not in link:
                raise PreconditionError(
                    f"Edge of vertex '{record['id']}' has no 'target': {link!r}."
                )
            target_id = restore_id(link["target"])
            if target_id not in graph:
                # Unlisted targets get default vertices; the Vertex checks the id
                graph.add_vertex(Vertex(target_id, GRAPH_CONFIG.default_heuristic))
            graph.add_edge(
                source_id,
                target_id,
                link.get("weight", GRAPH_CONFIG.default_weight),
            )

    root_id = data.get("root")
    if root_id is not None:
        root_id = restore_id(root_id)
        if root_id not in graph:
            raise PreconditionError(f"Root '{root_id}' is not in the graph.")
        graph.root = graph.vertices[root_id]
    return graph


def dumps_json(graph: Graph, indent: Optional[int] = 2) -> str:
    return json.dumps(graph_to_dict(graph), indent=indent)


def loads_json(text: str) -> Graph:
    """Parse a graph from JSON text.

    Raises:
        PreconditionError: If the text is not valid JSON or not a graph.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PreconditionError(f"Invalid graph JSON: {exc}") from exc
    return graph_from_dict(data)


def dumps_yaml(graph: Graph) -> str:
    return yaml.safe_dump(graph_to_dict(graph), sort_keys=False)


def loads_yaml(text: str) -> Graph:
    """Parse a graph from YAML text.

    Raises:
        PreconditionError: If the text is not valid YAML or not a graph.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise PreconditionError(f"Invalid graph YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise PreconditionError("Graph YAML must be a mapping at the top level.")
    return graph_from_dict(data)


def _format_for(path: FilePath) -> str:
    suffix = path.suffix.lower()
    if suffix == ".json":
        return "json"
    if suffix in (".yaml", ".yml"):
        return "yaml"
    raise PreconditionError(
        f"Unsupported graph file '{path}': expected .json, .yaml or .yml."
    )


def load_graph(path: Union[str, FilePath]) -> Graph:
    """Load a graph from a JSON or YAML file, chosen by suffix."""
    path = FilePath(path)
    fmt = _format_for(path)
    text = path.read_text(encoding="utf-8")
    graph = loads_json(text) if fmt == "json" else loads_yaml(text)
    logger.debug("Loaded %s from %s", graph, path)
    return graph


def save_graph(graph: Graph, path: Union[str, FilePath]) -> None:
    """Write a graph to a JSON or YAML file, chosen by suffix."""
    path = FilePath(path)
    fmt = _format_for(path)
    text = dumps_json(graph) if fmt == "json" else dumps_yaml(graph)
    path.write_text(text, encoding="utf-8")
    logger.debug("Saved %s to %s", graph, path)


def edgelist_to_graph(
    lines: Iterable[str],
    separator: Optional[str] = None,
    graph: Optional[Graph] = None,
) -> Graph:
    """Build or extend a Graph from ``src dst [weight]`` lines.

    Vertex ids are kept as strings. Blank lines and lines starting with ``#``
    are skipped. A missing weight uses the configured default.

    Args:
        lines: An iterable of strings, each describing one directed edge.
        separator: Token separator; ``None`` splits on any whitespace.
        graph: Existing graph to extend; a new one is created if None.

    Returns:
        The updated (or newly created) Graph.

    Raises:
        PreconditionError: If a line does not have two or three tokens.
    """
    if graph is None:
        graph = Graph()

    for line_no, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        tokens = line.split(separator)
        if len(tokens) not in (2, 3):
            raise PreconditionError(
                f"Line {line_no} '{line}' does not match 'src dst [weight]'."
            )
        weight = tokens[2] if len(tokens) == 3 else GRAPH_CONFIG.default_weight
        graph.add_edge(tokens[0], tokens[1], weight)

    return graph


def graph_to_edgelist(graph: Graph, separator: str = " ") -> List[str]:
    """Export every edge as a ``src dst weight`` line.

    Heuristics and vertices without edges are not represented.
    """
    return [
        separator.join(
            (str(edge.source.id), str(edge.target.id), repr(edge.weight))  # type: ignore[union-attr]
        )
        for edge in graph.iter_edges()
    ]
