"""spgraph: shortest paths over weighted directed graphs.

spgraph provides a binary-heap priority queue, sparse (adjacency-list) and
dense (weight-matrix) graph representations, and two single-source shortest
path algorithms built on them.

Primary API:
    build_sparse_graph() / build_dense_graph() - Create a graph from node ids
    dijkstra() - Shortest distances for non-negative weights
    bellman_ford() - Shortest distances with negative-cycle detection
    to_networkx() / from_networkx() - Convert to and from NetworkX

Example:
    from spgraph import Edge, build_sparse_graph, dijkstra

    g = build_sparse_graph(["A", "B", "C"])
    g.connect_all([Edge("A", "B", 1.0), Edge("B", "C", 2.0)])
    dijkstra(g, "A")  # {"A": 0.0, "B": 1.0, "C": 3.0}
"""

from __future__ import annotations

from spgraph import logging
from spgraph.config import BELLMAN_FORD_CONFIG, BellmanFordConfig
from spgraph.lib.algorithms.base import NEGATIVE_CYCLE, UNREACHED, DistanceMap
from spgraph.lib.algorithms.bellman_ford import bellman_ford
from spgraph.lib.algorithms.spf import dijkstra
from spgraph.lib.graph import (
    DenseGraph,
    Edge,
    SparseGraph,
    Vertex,
    build_dense_graph,
    build_sparse_graph,
)
from spgraph.lib.priority_queue import PriorityQueue, build_priority_queue
from spgraph.lib.util import from_networkx, to_networkx

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Data structures
    "PriorityQueue",
    "build_priority_queue",
    "Vertex",
    "Edge",
    "SparseGraph",
    "DenseGraph",
    "build_sparse_graph",
    "build_dense_graph",
    # Algorithms
    "dijkstra",
    "bellman_ford",
    "DistanceMap",
    "UNREACHED",
    "NEGATIVE_CYCLE",
    # Configuration
    "BellmanFordConfig",
    "BELLMAN_FORD_CONFIG",
    # NetworkX
    "to_networkx",
    "from_networkx",
    # Utilities
    "logging",
]
