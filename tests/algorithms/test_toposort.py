import pytest

from netalgo.algorithms.toposort import dfs_topological_sort, kahn_topological_sort
from netalgo.graph.adjacency import Graph

SORTS = [kahn_topological_sort, dfs_topological_sort]


def _respects_edges(graph: Graph, order) -> bool:
    position = {v: i for i, v in enumerate(order)}
    return all(position[e.source] < position[e.target] for e in graph.edges())


@pytest.mark.parametrize("sort", SORTS)
class TestTopologicalSort:
    def test_dag_order_respects_every_edge(self, sort, dag6):
        order = sort(dag6)
        assert sorted(order) == list(range(6))
        assert _respects_edges(dag6, order)

    def test_cycle_gives_empty_list(self, sort, lasso):
        assert sort(lasso) == []

    def test_self_loop_is_a_cycle(self, sort):
        assert sort(Graph.from_edges([(0, 1, 1), (1, 1, 1)])) == []

    def test_empty_graph(self, sort):
        assert sort(Graph()) == []

    def test_isolated_vertices(self, sort):
        assert sorted(sort(Graph(3))) == [0, 1, 2]

    def test_parallel_edges(self, sort):
        g = Graph.from_edges([(0, 1, 1), (0, 1, 1), (1, 2, 1)])
        assert sort(g) == [0, 1, 2]


def test_kahn_order_is_fifo():
    g = Graph.from_edges([(5, 2, 1), (5, 0, 1), (4, 0, 1), (4, 1, 1), (2, 3, 1), (3, 1, 1)])
    assert kahn_topological_sort(g) == [4, 5, 2, 0, 3, 1]


def test_dfs_order_is_reverse_finish_order():
    g = Graph.from_edges([(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 3, 1)])
    assert dfs_topological_sort(g) == [0, 2, 1, 3]


def test_dfs_long_chain_is_iterative():
    n = 20_000
    g = Graph.from_edges([(i, i + 1, 1) for i in range(n - 1)])
    assert dfs_topological_sort(g) == list(range(n))
