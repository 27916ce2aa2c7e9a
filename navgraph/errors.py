"""Exception types raised by the graph engine.

Programmer errors and corrupted inputs fail fast with ``PreconditionError`` or
``InconsistentPathError``. A valid query with no answer raises ``NoPathError``
so callers can fall back without mistaking it for a bug. Expected misses
(absent edges, absent vertices, unsuccessful seeks) never raise; they return
``NO_EDGE`` or ``None``.
"""

from __future__ import annotations

from typing import Hashable, Optional


class GraphError(Exception):
    """Base class for all graph engine errors."""


class PreconditionError(GraphError, ValueError):
    """Raised when a caller violates an operation's preconditions."""


class InconsistentPathError(GraphError, LookupError):
    """Raised when a path cannot be reconstructed or stepped.

    Indicates a corrupted predecessor map, or a vertex that is not part of the
    path (for example one added to the graph after the path was built).
    """


class NoPathError(GraphError):
    """Raised when the target is unreachable from the start vertex."""

    def __init__(
        self,
        start: Hashable,
        end: Hashable,
        message: Optional[str] = None,
    ) -> None:
        self.start = start
        self.end = end
        super().__init__(message or f"No path from '{start}' to '{end}'.")
