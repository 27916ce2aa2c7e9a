"""Path primitives.

``Path`` is the materialized result of a search: a forward successor map over
the graph's vertices that supports stepwise and cost-bounded consumption.
"""

from navgraph.paths.path import Path

__all__ = ["Path"]
