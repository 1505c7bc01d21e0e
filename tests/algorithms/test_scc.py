import random

import networkx as nx
import pytest

from netalgo.algorithms.all_pairs import transitive_closure
from netalgo.algorithms.scc import tarjan_scc
from netalgo.graph.adjacency import Graph
from netalgo.graph.convert import to_networkx


def _as_sets(components):
    return sorted((frozenset(c) for c in components), key=min)


class TestTarjanSCC:
    def test_two_cycles_and_a_singleton(self, two_cycles):
        components = tarjan_scc(two_cycles)
        assert _as_sets(components) == [
            frozenset({0}),
            frozenset({1, 2, 3}),
            frozenset({4, 5, 6, 7}),
        ]

    def test_emission_order_is_reverse_topological(self, two_cycles):
        components = tarjan_scc(two_cycles)
        # Sink component first, the component of the first root last
        assert set(components[0]) == {4, 5, 6, 7}
        assert components[-1] == [0]

    def test_dag_gives_singletons(self, dag6):
        components = tarjan_scc(dag6)
        assert len(components) == 6
        assert all(len(c) == 1 for c in components)

    def test_empty_and_isolated(self):
        assert tarjan_scc(Graph()) == []
        assert sorted(tarjan_scc(Graph(3))) == [[0], [1], [2]]

    def test_self_loop_is_its_own_component(self):
        g = Graph.from_edges([(0, 0, 1), (0, 1, 1)])
        assert _as_sets(tarjan_scc(g)) == [frozenset({0}), frozenset({1})]

    def test_deep_cycle_does_not_hit_recursion_limit(self):
        n = 20_000
        g = Graph.from_edges([(i, (i + 1) % n, 1) for i in range(n)])
        components = tarjan_scc(g)
        assert len(components) == 1
        assert len(components[0]) == n

    @pytest.mark.parametrize("seed", range(5))
    def test_partition_and_mutual_reachability(self, seed):
        rng = random.Random(seed)
        n = 14
        g = Graph(n)
        for _ in range(22):
            g.add_edge(rng.randrange(n), rng.randrange(n), 1)

        components = tarjan_scc(g)
        members = [v for c in components for v in c]
        assert sorted(members) == list(range(n))

        reach = transitive_closure(g)
        component_of = {v: i for i, c in enumerate(components) for v in c}
        for u in range(n):
            for v in range(n):
                same = component_of[u] == component_of[v]
                assert same == bool(reach[u, v] and reach[v, u])

        expected = nx.strongly_connected_components(to_networkx(g))
        assert _as_sets(components) == _as_sets(expected)
