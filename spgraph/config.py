"""Configuration classes for spgraph algorithms."""

from dataclasses import dataclass


@dataclass
class BellmanFordConfig:
    """Defaults for Bellman-Ford shortest paths."""

    # Spread the -inf marker to every node reachable from a node whose
    # distance is still improvable after |V| passes. When False only the
    # direct target of an improvable edge is marked.
    propagate_negative_cycles: bool = False


# Global configuration instance
BELLMAN_FORD_CONFIG = BellmanFordConfig()
