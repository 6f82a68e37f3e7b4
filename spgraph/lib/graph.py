from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Optional, Tuple

from spgraph.logging import get_logger

logger = get_logger(__name__)

NodeID = Hashable


@total_ordering
@dataclass(frozen=True, eq=False)
class Vertex:
    """
    A node id paired with an ordering value (typically a tentative distance).

    Equality, ordering and hashing look at ``value`` only; ``id`` is payload.
    Two vertices with the same distance compare equal whatever their ids.
    """

    value: Any
    id: NodeID

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: Vertex) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash(self.value)


@dataclass(frozen=True)
class Edge:
    """
    A directed, weighted edge.

    Attributes:
        source: Node the edge leaves.
        target: Node the edge enters.
        weight: Edge weight; may be negative.
    """

    source: NodeID
    target: NodeID
    weight: float

    @property
    def id(self) -> NodeID:
        """Id of the node this edge leads to."""
        return self.target


class SparseGraph:
    """
    Adjacency-list graph keyed by node id.

    Every node given at construction has an (initially empty) outgoing edge
    list. ``connect`` only appends to the source's list; no reverse edge is
    added, and a source that was never registered is created on the fly.
    """

    def __init__(self, nodes: Iterable[NodeID] = ()) -> None:
        self._adj: Dict[NodeID, List[Edge]] = {node: [] for node in nodes}

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def __repr__(self) -> str:
        return f"SparseGraph(nodes={len(self._adj)}, edges={self.num_edges()})"

    def connect(self, source: NodeID, target: NodeID, weight: float) -> None:
        """
        Add a directed edge source -> target.

        Args:
            source: Tail of the edge; registered if unknown.
            target: Head of the edge. Not registered as a node.
            weight: Edge weight.
        """
        self._adj.setdefault(source, []).append(Edge(source, target, weight))

    def connect_all(self, edges: Iterable[Edge]) -> None:
        """Connect every edge, in input order."""
        for edge in edges:
            logger.debug(
                "Connect node %s to %s, weight=%s", edge.source, edge.target, edge.weight
            )
            self.connect(edge.source, edge.target, edge.weight)

    def neighbors(self, node: NodeID) -> Optional[List[Edge]]:
        """
        Outgoing edges of a node, in insertion order.

        Returns:
            The edge list (possibly empty), or None if the node is unknown.
        """
        return self._adj.get(node)

    def nodes(self) -> List[NodeID]:
        return list(self._adj)

    def size(self) -> int:
        """Number of registered nodes."""
        return len(self._adj)

    def edges(self) -> Iterator[Edge]:
        """Iterate all edges, grouped by source in node registration order."""
        for out_edges in self._adj.values():
            yield from out_edges

    def num_edges(self) -> int:
        return sum(len(out_edges) for out_edges in self._adj.values())


class DenseGraph:
    """
    Weight-matrix graph.

    Node ids are mapped to indices in first-seen order; ``matrix[i][j]`` holds
    the weight of edge i -> j and 0.0 means "no edge". A zero-weight edge can
    therefore not be stored. Edges touching unknown nodes are ignored.

    Rows are addressed by index in ``neighbors``, which raises IndexError for
    an index outside the matrix; ``node_neighbors`` takes a node id and returns
    None for an unknown node instead.
    """

    def __init__(self, nodes: Iterable[NodeID] = ()) -> None:
        self._index: Dict[NodeID, int] = {}
        self._labels: List[NodeID] = []
        for node in nodes:
            if node not in self._index:
                self._index[node] = len(self._labels)
                self._labels.append(node)

        n = len(self._labels)
        self._weights: List[List[float]] = [[0.0] * n for _ in range(n)]

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, node: object) -> bool:
        return node in self._index

    def __repr__(self) -> str:
        return f"DenseGraph(nodes={len(self._labels)})"

    def index(self, node: NodeID) -> Optional[int]:
        """Matrix index of a node, or None if unknown."""
        return self._index.get(node)

    def label(self, index: int) -> NodeID:
        """Node id stored at a matrix index."""
        return self._labels[index]

    def nodes(self) -> List[NodeID]:
        return list(self._labels)

    def size(self) -> int:
        return len(self._labels)

    def connect(self, source: NodeID, target: NodeID, weight: float) -> None:
        """Set the weight of source -> target; no-op if either node is unknown."""
        i = self._index.get(source)
        j = self._index.get(target)
        if i is None or j is None:
            logger.debug("Ignoring edge %s -> %s: unknown endpoint", source, target)
            return
        self._weights[i][j] = weight

    def connect_all(self, edges: Iterable[Edge]) -> None:
        """Connect every edge, in input order."""
        for edge in edges:
            logger.debug(
                "Connect node %s to %s, weight=%s", edge.source, edge.target, edge.weight
            )
            self.connect(edge.source, edge.target, edge.weight)

    def weight(self, source: NodeID, target: NodeID) -> float:
        """Weight of source -> target, 0.0 when absent or unknown."""
        i = self._index.get(source)
        j = self._index.get(target)
        if i is None or j is None:
            return 0.0
        return self._weights[i][j]

    def neighbors(self, index: int) -> List[Tuple[int, float]]:
        """
        Non-zero cells of a matrix row.

        Args:
            index: Row index of the source node.

        Returns:
            (column index, weight) pairs in ascending column order.

        Raises:
            IndexError: If index is outside the matrix.
        """
        if not 0 <= index < len(self._labels):
            raise IndexError(f"Node index {index} out of range")
        return [(j, w) for j, w in enumerate(self._weights[index]) if w != 0.0]

    def node_neighbors(self, node: NodeID) -> Optional[List[Tuple[NodeID, float]]]:
        """
        Neighbors of a node by id, mirroring SparseGraph.neighbors.

        Returns:
            (target id, weight) pairs, or None if the node is unknown.
        """
        i = self._index.get(node)
        if i is None:
            return None
        return [(self._labels[j], w) for j, w in self.neighbors(i)]


def build_sparse_graph(nodes: Iterable[NodeID]) -> SparseGraph:
    """Create a SparseGraph with an empty edge list per node."""
    return SparseGraph(nodes)


def build_dense_graph(nodes: Iterable[NodeID]) -> DenseGraph:
    """Create a DenseGraph with a zeroed N x N weight matrix."""
    return DenseGraph(nodes)
