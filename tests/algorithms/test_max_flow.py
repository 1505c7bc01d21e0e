import logging
import random

import networkx as nx
import pytest

from netalgo.algorithms.max_flow import (
    calc_max_flow,
    edmonds_karp,
    find_path_bfs,
    find_path_dfs,
    ford_fulkerson,
)
from netalgo.config import ALGO_CONFIG
from netalgo.graph.adjacency import Graph
from netalgo.graph.residual import ResidualGraph
from netalgo.types.base import AugmentSearch
from netalgo.types.dto import FlowSummary

SEARCHES = [AugmentSearch.DFS, AugmentSearch.BFS]


class TestMaxFlowBasic:
    """
    Flow values on small networks with known answers.
    """

    def test_diamond_both_variants(self, flow_diamond):
        assert ford_fulkerson(flow_diamond, 0, 3) == 20
        assert edmonds_karp(flow_diamond, 0, 3) == 20

    def test_textbook_network(self, flow_textbook):
        assert ford_fulkerson(flow_textbook, 0, 5) == 23
        assert edmonds_karp(flow_textbook, 0, 5) == 23

    @pytest.mark.parametrize("search", SEARCHES)
    def test_parallel_edges_add_up(self, search):
        g = Graph.from_edges([(0, 1, 3), (0, 1, 4), (1, 2, 10)])
        assert calc_max_flow(g, 0, 2, search=search) == 7

    @pytest.mark.parametrize("search", SEARCHES)
    def test_antiparallel_edges(self, search):
        g = Graph.from_edges([(0, 1, 5), (1, 0, 5), (1, 2, 5)])
        assert calc_max_flow(g, 0, 2, search=search) == 5

    @pytest.mark.parametrize("search", SEARCHES)
    def test_self_loop_carries_nothing(self, search):
        g = Graph.from_edges([(0, 0, 5), (0, 1, 3)])
        assert calc_max_flow(g, 0, 1, search=search) == 3

    def test_disconnected_sink(self):
        g = Graph.from_edges([(0, 1, 5), (2, 3, 5)])
        assert calc_max_flow(g, 0, 3) == 0

    def test_zero_capacity_edge(self):
        g = Graph.from_edges([(0, 1, 0), (1, 2, 5)])
        assert calc_max_flow(g, 0, 2) == 0

    def test_source_equals_sink(self, flow_diamond):
        assert calc_max_flow(flow_diamond, 1, 1) == 0

    def test_invalid_vertices_raise(self, flow_diamond):
        with pytest.raises(ValueError, match="Sink 9"):
            calc_max_flow(flow_diamond, 0, 9)
        with pytest.raises(ValueError, match="Source -1"):
            calc_max_flow(flow_diamond, -1, 3)

    def test_default_search_comes_from_config(self, flow_diamond, monkeypatch):
        monkeypatch.setattr(ALGO_CONFIG, "default_augment_search", AugmentSearch.DFS)
        assert calc_max_flow(flow_diamond, 0, 3) == 20

    def test_long_path_does_not_recurse(self):
        n = 20_000
        g = Graph.from_edges([(i, i + 1, 7) for i in range(n - 1)])
        g.add_edge(n // 2, n // 2 + 1, 3)
        assert ford_fulkerson(g, 0, n - 1) == 7


class TestMaxFlowSummary:
    @pytest.mark.parametrize("search", SEARCHES)
    def test_min_cut_equals_flow(self, flow_textbook, search):
        flow, summary = calc_max_flow(
            flow_textbook, 0, 5, search=search, return_summary=True
        )
        assert isinstance(summary, FlowSummary)
        assert summary.total_flow == flow == 23
        assert summary.cut_capacity == flow
        assert 0 in summary.reachable
        assert 5 not in summary.reachable
        assert summary.completed is True

    def test_diamond_cut_is_source_edges(self, flow_diamond):
        _, summary = calc_max_flow(flow_diamond, 0, 3, return_summary=True)
        assert summary.reachable == frozenset({0})
        assert summary.min_cut == ((0, 1, 10), (0, 2, 10))

    def test_edge_flows_respect_capacity_and_conservation(self, flow_textbook):
        flow, summary, residual = calc_max_flow(
            flow_textbook, 0, 5, return_summary=True, return_graph=True
        )
        net = [0] * residual.num_vertices
        for u, index, e in residual.forward_edges():
            carried = summary.edge_flow[(u, index)]
            assert 0 <= carried <= e.capacity
            assert summary.residual_cap[(u, index)] == e.capacity - carried
            net[u] -= carried
            net[e.target] += carried
        assert net[0] == -flow
        assert net[5] == flow
        assert all(net[v] == 0 for v in range(1, 5))

    def test_return_graph_only(self, flow_diamond):
        flow, residual = calc_max_flow(flow_diamond, 0, 3, return_graph=True)
        assert flow == 20
        assert isinstance(residual, ResidualGraph)
        assert residual.check_pair_invariant()
        assert sum(residual.edge_flows().values()) > 0

    def test_pair_invariant_after_every_variant(self, flow_textbook):
        for search in SEARCHES:
            _, residual = calc_max_flow(flow_textbook, 0, 5, search=search, return_graph=True)
            assert residual.check_pair_invariant()


class TestResidualInput:
    def test_residual_graph_copied_by_default(self):
        residual = ResidualGraph(3)
        residual.add_edge(0, 1, 4)
        residual.add_edge(1, 2, 6)
        assert calc_max_flow(residual, 0, 2) == 4
        assert residual.edge_flows() == {(0, 0): 0, (1, 1): 0}

    def test_residual_graph_in_place(self):
        residual = ResidualGraph(3)
        residual.add_edge(0, 1, 4)
        residual.add_edge(1, 2, 6)
        assert calc_max_flow(residual, 0, 2, copy_graph=False) == 4
        assert residual.edge_flows() == {(0, 0): 4, (1, 1): 4}
        # Nothing left to push
        assert calc_max_flow(residual, 0, 2, copy_graph=False) == 0


class TestAugmentationLimit:
    def test_limit_stops_early(self, flow_diamond, caplog):
        with caplog.at_level(logging.WARNING, logger="netalgo"):
            flow, summary = calc_max_flow(
                flow_diamond,
                0,
                3,
                search=AugmentSearch.BFS,
                max_augmentations=1,
                return_summary=True,
            )
        assert flow == 10
        assert summary.augmentations == 1
        assert summary.completed is False
        assert "limit reached" in caplog.text

    def test_zero_limit(self, flow_diamond):
        flow, summary = calc_max_flow(
            flow_diamond, 0, 3, max_augmentations=0, return_summary=True
        )
        assert flow == 0
        assert summary.completed is False

    def test_limit_not_binding_when_flow_is_maximal(self):
        g = Graph.from_edges([(0, 1, 5), (1, 2, 5)])
        flow, summary = calc_max_flow(g, 0, 2, max_augmentations=1, return_summary=True)
        assert flow == 5
        assert summary.completed is True

    def test_limit_from_config(self, flow_diamond, monkeypatch):
        monkeypatch.setattr(ALGO_CONFIG, "max_augmentations", 1)
        assert calc_max_flow(flow_diamond, 0, 3, search=AugmentSearch.BFS) == 10
        # An explicit argument overrides the configured default
        assert calc_max_flow(flow_diamond, 0, 3, max_augmentations=10) == 20

    def test_negative_limit_raises(self, flow_diamond):
        with pytest.raises(ValueError):
            calc_max_flow(flow_diamond, 0, 3, max_augmentations=-1)


class TestPathSearch:
    def test_bfs_finds_fewest_edges(self):
        residual = ResidualGraph(4)
        residual.add_edge(0, 1, 1)
        residual.add_edge(1, 2, 1)
        residual.add_edge(2, 3, 1)
        residual.add_edge(0, 3, 1)
        path = find_path_bfs(residual, 0, 3)
        assert path == [(0, 1)]

    def test_dfs_follows_first_edge(self):
        residual = ResidualGraph(4)
        residual.add_edge(0, 1, 1)
        residual.add_edge(1, 2, 1)
        residual.add_edge(2, 3, 1)
        residual.add_edge(0, 3, 1)
        path = find_path_dfs(residual, 0, 3)
        assert [residual.edge(h).target for h in path] == [1, 2, 3]

    @pytest.mark.parametrize("finder", [find_path_bfs, find_path_dfs])
    def test_no_path(self, finder):
        residual = ResidualGraph(3)
        residual.add_edge(0, 1, 0)
        residual.add_edge(1, 2, 5)
        assert finder(residual, 0, 2) is None


@pytest.mark.parametrize("seed", range(6))
def test_matches_networkx(seed):
    rng = random.Random(seed)
    n = 10
    g = Graph(n)
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(range(n))
    for _ in range(30):
        u, v = rng.sample(range(n), 2)
        cap = rng.randint(1, 20)
        g.add_edge(u, v, cap)
        # networkx keeps one edge per pair, so merge parallel capacities
        if nx_graph.has_edge(u, v):
            nx_graph[u][v]["capacity"] += cap
        else:
            nx_graph.add_edge(u, v, capacity=cap)

    expected = nx.maximum_flow_value(nx_graph, 0, n - 1)
    assert ford_fulkerson(g, 0, n - 1) == expected
    assert edmonds_karp(g, 0, n - 1) == expected
