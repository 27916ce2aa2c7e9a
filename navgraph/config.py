"""Configuration defaults for NavGraph components."""

from dataclasses import dataclass

from navgraph.types import TraversalOrder


@dataclass
class GraphConfig:
    """Defaults applied when graphs are built, loaded, or checked."""

    # Heuristic given to vertices created implicitly by add_edge
    default_heuristic: float = 0.0

    # Enumeration strategy used when a Graph is iterated directly
    default_traversal_order: TraversalOrder = TraversalOrder.BREADTH_FIRST

    # Edge weight assumed when an imported edge carries none
    default_weight: float = 1.0

    # Absolute slack when comparing a recomputed route cost to a search cost
    cost_tolerance: float = 1e-9

    def costs_match(self, first: float, second: float) -> bool:
        """Return True if two route costs agree within ``cost_tolerance``."""
        if first == second:
            return True
        return abs(first - second) <= self.cost_tolerance


# Global configuration instance
GRAPH_CONFIG = GraphConfig()
