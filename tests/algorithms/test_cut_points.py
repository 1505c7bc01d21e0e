import random

import networkx as nx
import pytest

from netalgo.algorithms.cut_points import find_cut_points
from netalgo.graph.adjacency import Graph


class TestCutPoints:
    def test_triangle_with_tail(self, triangle_with_tail):
        result = find_cut_points(triangle_with_tail)
        assert result.articulation_points == frozenset({0, 3})
        assert result.bridges == ((3, 4), (0, 3))

    def test_cycle_has_none(self, square_cycle):
        result = find_cut_points(square_cycle)
        assert result.articulation_points == frozenset()
        assert result.bridges == ()

    def test_path_graph(self):
        g = Graph.from_edges([(0, 1, 1), (1, 2, 1), (2, 3, 1)], undirected=True)
        result = find_cut_points(g)
        assert result.articulation_points == frozenset({1, 2})
        assert set(result.bridges) == {(0, 1), (1, 2), (2, 3)}

    def test_root_with_single_child_is_not_articulation(self):
        # 0 is the DFS root and only has one tree child
        g = Graph.from_edges([(0, 1, 1), (1, 2, 1)], undirected=True)
        result = find_cut_points(g)
        assert result.articulation_points == frozenset({1})

    def test_star_center(self):
        g = Graph.from_edges([(0, 1, 1), (0, 2, 1), (0, 3, 1)], undirected=True)
        result = find_cut_points(g)
        assert result.articulation_points == frozenset({0})
        assert len(result.bridges) == 3

    def test_disconnected_components(self):
        g = Graph.from_edges([(0, 1, 1), (2, 3, 1), (3, 4, 1)], undirected=True)
        result = find_cut_points(g)
        assert result.articulation_points == frozenset({3})
        assert set(result.bridges) == {(0, 1), (2, 3), (3, 4)}

    def test_parallel_edges_are_not_bridges(self):
        # 0 = 1 - 2: the doubled pair stays connected if one copy is removed
        g = Graph.from_edges([(0, 1, 1), (0, 1, 1), (1, 2, 1)], undirected=True)
        result = find_cut_points(g)
        assert result.bridges == ((1, 2),)
        assert result.articulation_points == frozenset({1})

        nx_graph = nx.MultiGraph([(0, 1), (0, 1), (1, 2)])
        assert {frozenset(b) for b in result.bridges} == {
            frozenset(b) for b in nx.bridges(nx_graph)
        }

    def test_long_path_is_iterative(self):
        n = 20_000
        g = Graph.from_edges([(i, i + 1, 1) for i in range(n - 1)], undirected=True)
        result = find_cut_points(g)
        assert len(result.articulation_points) == n - 2
        assert len(result.bridges) == n - 1

    @pytest.mark.parametrize("seed", range(5))
    def test_matches_networkx(self, seed):
        rng = random.Random(seed)
        n = 16
        nx_graph = nx.Graph()
        nx_graph.add_nodes_from(range(n))
        g = Graph(n)
        for _ in range(18):
            u, v = rng.sample(range(n), 2)
            if nx_graph.has_edge(u, v):
                continue
            nx_graph.add_edge(u, v)
            g.add_undirected_edge(u, v, 1)

        result = find_cut_points(g)
        assert result.articulation_points == frozenset(nx.articulation_points(nx_graph))
        bridges = {frozenset(b) for b in result.bridges}
        assert bridges == {frozenset(b) for b in nx.bridges(nx_graph)}
