"""Command-line interface for NavGraph."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path as FilePath
from typing import Any, Dict, List, Optional

import yaml

from navgraph.errors import GraphError
from navgraph.graph.graph import Graph
from navgraph.graph.io import load_graph, restore_id
from navgraph.logging import get_logger, level_for_flags, set_global_log_level
from navgraph.types import VertexID

logger = get_logger(__name__)


def _parse_vertex_id(text: str) -> VertexID:
    """Parse a command-line vertex id as a YAML scalar or flow sequence.

    ``3`` becomes an int, ``[1, 2]`` a tuple, anything else stays a string.
    YAML scalars are coerced too, so ``yes`` becomes ``True`` and ``1.0`` a
    float; :func:`_resolve_vertex_id` checks the raw text first.
    """
    try:
        value = yaml.safe_load(text)
    except yaml.YAMLError:
        return text
    if value is None or isinstance(value, dict):
        return text
    return restore_id(value)


def _resolve_vertex_id(graph: Graph, text: str) -> VertexID:
    """Return the graph's vertex id for a command-line argument.

    A string id present in the graph is used verbatim; otherwise the text is
    parsed with :func:`_parse_vertex_id`.
    """
    if text in graph:
        return text
    return _parse_vertex_id(text)


def _emit(payload: Dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2, default=str))


def _inspect_graph(graph: Graph) -> Dict[str, Any]:
    components = graph.components()
    return {
        "vertices": len(graph),
        "edges": graph.edge_count(),
        "root": graph.root.id if graph.root is not None else None,
        "traversal_order": graph.traversal_order.name,
        "components": len(components),
        "zero_out_degree": [
            vid for vid, vertex in graph.vertices.items() if not vertex.adjacent
        ],
    }


def _search_graph(
    graph: Graph,
    start: VertexID,
    end: VertexID,
    steps: Optional[int],
    budget: Optional[float],
) -> Dict[str, Any]:
    path, cost = graph.search(start, end)
    result: Dict[str, Any] = {
        "path": list(path.vertex_ids()),
        "cost": cost,
        "length": path.length(),
        "max_single_cost": path.max_single_cost(),
    }
    if steps is not None:
        reached, taken = path.advance_steps(path.start, steps)
        result["advance"] = {"reached": reached.id, "steps_taken": taken}
    elif budget is not None:
        reached, used, taken = path.advance_by_cost(path.start, budget)
        result["advance"] = {
            "reached": reached.id,
            "cost_used": used,
            "steps_taken": taken,
        }
    return result


def _reach_graph(graph: Graph, root: VertexID, budget: float) -> Dict[str, Any]:
    costs = graph.affordable_vertices(root, budget)
    return {
        "root": root,
        "budget": budget,
        "vertices": [{"id": vid, "cost": cost} for vid, cost in costs.items()],
    }


def _run(args: argparse.Namespace) -> Dict[str, Any]:
    graph = load_graph(args.graph)

    if args.command == "inspect":
        return _inspect_graph(graph)
    if args.command == "search":
        return _search_graph(
            graph,
            _resolve_vertex_id(graph, args.start),
            _resolve_vertex_id(graph, args.end),
            args.steps,
            args.budget,
        )
    return _reach_graph(graph, _resolve_vertex_id(graph, args.root), args.budget)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``navgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="navgraph",
        description="Inspect navigation graphs and query routes.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{inspect,search,reach}",
        help="Available commands",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Summarize a graph file"
    )
    inspect_parser.add_argument("graph", type=FilePath, help="Graph JSON/YAML file")

    search_parser = subparsers.add_parser(
        "search", help="Find the cheapest route between two vertices"
    )
    search_parser.add_argument("graph", type=FilePath, help="Graph JSON/YAML file")
    search_parser.add_argument(
        "start", help="Start vertex id; parsed as YAML unless it is a string id"
    )
    search_parser.add_argument(
        "end", help="End vertex id; parsed as YAML unless it is a string id"
    )
    advance = search_parser.add_mutually_exclusive_group()
    advance.add_argument(
        "--steps",
        type=int,
        default=None,
        help="Also report the vertex reached after this many steps from start",
    )
    advance.add_argument(
        "--budget",
        type=float,
        default=None,
        help="Also report the vertex reached from start within this cost budget",
    )

    reach_parser = subparsers.add_parser(
        "reach", help="List vertices affordable from a root within a budget"
    )
    reach_parser.add_argument("graph", type=FilePath, help="Graph JSON/YAML file")
    reach_parser.add_argument(
        "root", help="Root vertex id; parsed as YAML unless it is a string id"
    )
    reach_parser.add_argument("budget", type=float, help="Aggregate cost budget")

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_for_flags(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    try:
        payload = _run(args)
    except (GraphError, OSError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        raise SystemExit(1) from exc

    _emit(payload)


if __name__ == "__main__":
    main()
