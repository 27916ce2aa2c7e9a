"""Shared type aliases and enums."""

from __future__ import annotations

from enum import IntEnum
from typing import Hashable, Union

#: Vertex identity. Any value supporting equality and hashing, e.g. a string
#: label or a tuple of discretized world coordinates.
VertexID = Hashable

#: Numeric cost of an edge, a vertex, or a route.
Cost = Union[int, float]


class TraversalOrder(IntEnum):
    """Frontier discipline used when walking a graph."""

    #: FIFO frontier.
    BREADTH_FIRST = 1
    #: LIFO frontier.
    DEPTH_FIRST = 2

    @classmethod
    def from_string(cls, value: str) -> "TraversalOrder":
        """Parse a string into a TraversalOrder enum value.

        Args:
            value: Case-insensitive name (e.g., "breadth_first", "DEPTH_FIRST").

        Returns:
            The corresponding TraversalOrder member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid traversal_order '{value}'. Valid values are: {valid}"
            ) from None
