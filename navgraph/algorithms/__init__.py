"""Graph algorithms.

Functions here take a `Graph` and keep all per-call state local:
- ``traversal``: BFS/DFS over vertices or tree edges.
- ``frontier``: cost-bounded greedy frontier expansion.
- ``search``: uniform-cost shortest-path search.
- ``priority_queue``: min-queue with decrease-key used by the search.
- ``session``: visited/aggregate-cost marks scoped to one traversal.
"""

from navgraph.algorithms.frontier import affordable_vertices
from navgraph.algorithms.priority_queue import UpdatablePriorityQueue
from navgraph.algorithms.search import SearchResult, uniform_cost_search
from navgraph.algorithms.session import TraversalSession
from navgraph.algorithms.traversal import traverse, traverse_edges, walk

__all__ = [
    "affordable_vertices",
    "UpdatablePriorityQueue",
    "SearchResult",
    "uniform_cost_search",
    "TraversalSession",
    "traverse",
    "traverse_edges",
    "walk",
]
