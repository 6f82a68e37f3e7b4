from __future__ import annotations

from collections import deque
from typing import Iterable, Optional, Set

from spgraph.config import BELLMAN_FORD_CONFIG
from spgraph.lib.algorithms.base import NEGATIVE_CYCLE, UNREACHED, DistanceMap
from spgraph.lib.graph import NodeID, SparseGraph
from spgraph.logging import get_logger

logger = get_logger(__name__)


def _relax_pass(graph: SparseGraph, distances: DistanceMap) -> None:
    """Relax every edge once, in node registration order."""
    for node in graph.nodes():
        for edge in graph.neighbors(node) or ():
            new_dist = distances.get(node, UNREACHED) + edge.weight
            if new_dist < distances.get(edge.target, UNREACHED):
                distances[edge.target] = new_dist


def _propagate_negative_cycles(
    graph: SparseGraph, distances: DistanceMap, marked: Iterable[NodeID]
) -> None:
    """Mark every node reachable from a marked node as NEGATIVE_CYCLE."""
    seen = set(marked)
    queue = deque(seen)
    while queue:
        node = queue.popleft()
        distances[node] = NEGATIVE_CYCLE
        for edge in graph.neighbors(node) or ():
            if edge.target not in seen:
                seen.add(edge.target)
                queue.append(edge.target)


def bellman_ford(
    graph: SparseGraph,
    src_node: NodeID,
    propagate_negative_cycles: Optional[bool] = None,
) -> DistanceMap:
    """
    Single-source shortest distances using the Bellman-Ford algorithm.

    Runs exactly ``graph.size()`` relaxation passes over all edges, then one
    more pass to detect negative cycles: the target of any edge that can still
    be relaxed gets distance -inf.

    By default only those direct targets are marked, so nodes further
    downstream of a negative cycle may keep finite distances. Pass
    propagate_negative_cycles=True to mark everything reachable from them.

    Args:
        graph: The directed graph (SparseGraph). Weights may be negative.
        src_node: The source node.
        propagate_negative_cycles: Spread -inf transitively. None uses
            BELLMAN_FORD_CONFIG.propagate_negative_cycles.

    Returns:
        Maps each reached node to its distance from src_node; nodes affected by
        a negative cycle map to -inf. Unreachable nodes are absent.
    """
    if propagate_negative_cycles is None:
        propagate_negative_cycles = BELLMAN_FORD_CONFIG.propagate_negative_cycles

    distances: DistanceMap = {src_node: 0.0}
    for _ in range(graph.size()):
        _relax_pass(graph, distances)

    marked: Set[NodeID] = set()
    for node in graph.nodes():
        for edge in graph.neighbors(node) or ():
            new_dist = distances.get(node, UNREACHED) + edge.weight
            if new_dist < distances.get(edge.target, UNREACHED):
                distances[edge.target] = NEGATIVE_CYCLE
                marked.add(edge.target)

    if marked:
        logger.warning(
            "Negative cycle reachable from %s: %d node(s) marked unbounded",
            src_node,
            len(marked),
        )
        if propagate_negative_cycles:
            _propagate_negative_cycles(graph, distances, marked)

    return distances
