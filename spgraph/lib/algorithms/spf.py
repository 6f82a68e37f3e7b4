from __future__ import annotations

from typing import Set

from spgraph.lib.algorithms.base import DistanceMap
from spgraph.lib.graph import NodeID, SparseGraph, Vertex
from spgraph.lib.priority_queue import PriorityQueue, build_priority_queue
from spgraph.logging import get_logger

logger = get_logger(__name__)


def dijkstra(graph: SparseGraph, src_node: NodeID) -> DistanceMap:
    """
    Single-source shortest distances using Dijkstra's algorithm.

    Stale queue entries are not removed when a node's distance improves; they
    are skipped when popped because the node is already visited.

    Edge weights must be non-negative. This is not checked; with negative
    weights the result is unspecified.

    Args:
        graph: The directed graph (SparseGraph).
        src_node: The source node. An unknown source yields {src_node: 0.0}.

    Returns:
        Maps each reachable node to its distance from src_node. Unreachable
        nodes are absent.
    """
    to_visit: PriorityQueue[Vertex] = build_priority_queue()
    visited: Set[NodeID] = set()
    distances: DistanceMap = {src_node: 0.0}
    to_visit.push(Vertex(0.0, src_node))

    while (vertex := to_visit.pop()) is not None:
        dist, node = vertex.value, vertex.id
        if node in visited:
            continue
        visited.add(node)

        for edge in graph.neighbors(node) or ():
            new_dist = dist + edge.weight
            current = distances.get(edge.target)
            if current is None or new_dist < current:
                distances[edge.target] = new_dist
                to_visit.push(Vertex(new_dist, edge.target))

    logger.debug(
        "dijkstra from %s: visited %d nodes, reached %d",
        src_node,
        len(visited),
        len(distances),
    )
    return distances
