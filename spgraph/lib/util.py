from __future__ import annotations

from typing import Union

import networkx as nx

from spgraph.lib.graph import DenseGraph, SparseGraph


def to_networkx(graph: Union[SparseGraph, DenseGraph]) -> nx.MultiDiGraph:
    """
    Convert a SparseGraph or DenseGraph to a NetworkX MultiDiGraph.

    Nodes are added in registration order. Each sparse edge becomes one
    NetworkX edge with a ``weight`` attribute, so parallel edges are kept.
    Each non-zero dense cell becomes a single edge.

    Args:
        graph: The graph to convert.

    Returns:
        A NetworkX MultiDiGraph.

    Raises:
        TypeError: If graph is neither a SparseGraph nor a DenseGraph.
    """
    if not isinstance(graph, (SparseGraph, DenseGraph)):
        raise TypeError(f"Cannot convert {type(graph).__name__} to networkx")

    nx_graph = nx.MultiDiGraph()
    nx_graph.add_nodes_from(graph.nodes())

    if isinstance(graph, SparseGraph):
        for edge in graph.edges():
            nx_graph.add_edge(edge.source, edge.target, weight=edge.weight)
    else:
        for i in range(graph.size()):
            for j, weight in graph.neighbors(i):
                nx_graph.add_edge(graph.label(i), graph.label(j), weight=weight)
    return nx_graph


def from_networkx(
    nx_graph: nx.Graph,
    weight: str = "weight",
    default_weight: float = 1.0,
) -> SparseGraph:
    """
    Build a SparseGraph from any NetworkX graph.

    Undirected graphs yield one edge per direction. Edges without the weight
    attribute use default_weight.

    Args:
        nx_graph: Source NetworkX graph (Graph, DiGraph or multigraph variants).
        weight: Name of the edge attribute holding the weight.
        default_weight: Weight for edges lacking the attribute.

    Returns:
        A SparseGraph with the same nodes and edges.
    """
    graph = SparseGraph(nx_graph.nodes)
    directed = nx_graph.is_directed()
    for u, v, data in nx_graph.edges(data=True):
        w = float(data.get(weight, default_weight))
        graph.connect(u, v, w)
        if not directed and u != v:
            graph.connect(v, u, w)
    return graph
