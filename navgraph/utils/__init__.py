"""Small helpers shared across NavGraph modules."""

from navgraph.utils.ids import new_base64_uuid

__all__ = ["new_base64_uuid"]
