import networkx as nx
import pytest

from spgraph.lib.algorithms.spf import dijkstra
from spgraph.lib.graph import build_sparse_graph
from spgraph.lib.util import to_networkx
from tests.lib.algorithms.sample_graphs import *


class TestDijkstra:
    def test_fan10(self, fan10):
        """Direct edges from 0 compete with two-hop paths through 1."""
        dist = dijkstra(fan10, 0)
        assert dist[1] == pytest.approx(1.2)
        assert dist[8] == pytest.approx(1.8)
        assert dist[2] == pytest.approx(3.4)
        assert dist == pytest.approx(
            {
                0: 0.0,
                1: 1.2,
                2: 3.4,
                3: 1.9,
                4: 10.9,
                5: 5.4,
                6: 8.1,
                7: 3.0,
                8: 1.8,
                9: 2.4,
            }
        )

    def test_line1_parallel_edges(self, line1):
        """Cheapest parallel edge wins; isolated node is absent."""
        assert dijkstra(line1, "A") == {"A": 0.0, "B": 1.0, "C": 2.0}

    def test_square1_from_each_node(self, square1):
        assert dijkstra(square1, "A") == {"A": 0.0, "B": 1.0, "D": 2.0, "C": 2.0}
        assert dijkstra(square1, "C") == {"C": 0.0, "A": 1.0, "B": 2.0, "D": 3.0}

    def test_stale_queue_entry_skipped(self, stale_entry):
        assert dijkstra(stale_entry, "A") == {"A": 0.0, "B": 1.0, "C": 2.0, "D": 3.0}

    def test_unreachable_nodes_absent(self, line1):
        dist = dijkstra(line1, "C")
        assert dist == {"C": 0.0}

    def test_unknown_source(self):
        g = build_sparse_graph([1, 2])
        g.connect(1, 2, 1.0)
        assert dijkstra(g, 42) == {42: 0.0}

    def test_unregistered_target(self):
        """Targets never passed at construction are still reached."""
        g = build_sparse_graph([0])
        g.connect(0, 1, 2.0)
        assert dijkstra(g, 0) == {0: 0.0, 1: 2.0}

    def test_self_loop_ignored(self):
        g = build_sparse_graph(["A"])
        g.connect("A", "A", 1.0)
        assert dijkstra(g, "A") == {"A": 0.0}

    def test_zero_weight_edges(self):
        g = build_sparse_graph(["A", "B", "C"])
        g.connect("A", "B", 0.0)
        g.connect("B", "C", 0.0)
        assert dijkstra(g, "A") == {"A": 0.0, "B": 0.0, "C": 0.0}

    def test_string_and_int_ids(self, fan10, line1):
        assert set(dijkstra(fan10, 0)) == set(range(10))
        assert set(dijkstra(line1, "A")) == {"A", "B", "C"}


class TestDijkstraReference:
    @pytest.mark.parametrize("seed", range(15))
    def test_matches_brute_force(self, seed):
        g = random_graph(seed, num_nodes=7, edge_prob=0.35)
        for src in g.nodes():
            assert dijkstra(g, src) == brute_force_distances(g, src)

    @pytest.mark.parametrize("seed", range(15))
    def test_matches_networkx(self, seed):
        g = random_graph(seed, num_nodes=12, edge_prob=0.25)
        nx_graph = to_networkx(g)
        for src in g.nodes():
            expected = nx.single_source_dijkstra_path_length(nx_graph, src, weight="weight")
            assert dijkstra(g, src) == pytest.approx(dict(expected))
