"""Shortest-path algorithms over SparseGraph."""

from spgraph.lib.algorithms.bellman_ford import bellman_ford
from spgraph.lib.algorithms.spf import dijkstra

__all__ = ["bellman_ford", "dijkstra"]
