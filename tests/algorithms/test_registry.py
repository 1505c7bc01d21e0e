import json

import pytest

from netalgo.algorithms.registry import (
    ALGORITHM_REGISTRY,
    RunParams,
    algorithm_names,
    get_runner,
    register_algorithm,
)

EXPECTED_NAMES = {
    "bellman-ford",
    "bfs",
    "bipartite",
    "classify-edges",
    "cut-points",
    "dijkstra",
    "edmonds-karp",
    "floyd-warshall",
    "ford-fulkerson",
    "kruskal",
    "prim",
    "scc",
    "topo-dfs",
    "topo-kahn",
}


def test_all_algorithms_registered():
    assert EXPECTED_NAMES <= set(algorithm_names())


def test_unknown_name_raises():
    with pytest.raises(ValueError, match="Valid names are"):
        get_runner("simplex")


def test_register_algorithm_decorator():
    @register_algorithm("test-echo")
    def _echo(graph, params):
        return {"n": graph.num_vertices, "source": params.source}

    try:
        assert get_runner("test-echo") is _echo
    finally:
        del ALGORITHM_REGISTRY["test-echo"]


@pytest.mark.parametrize("name", sorted(EXPECTED_NAMES))
def test_every_runner_returns_json_serializable(name, flow_diamond):
    result = get_runner(name)(flow_diamond, RunParams(source=0, sink=3))
    assert isinstance(result, dict)
    json.dumps(result)


def test_floyd_warshall_payload(weighted_star):
    result = get_runner("floyd-warshall")(weighted_star, RunParams())
    assert result["negative_cycle"] is False
    assert result["distances"][0] == [0, 4, 1, 2]
    assert result["distances"][1][0] is None
    assert result["diameter"] == 8


def test_cut_points_payload(triangle_with_tail):
    result = get_runner("cut-points")(triangle_with_tail, RunParams())
    assert result == {"articulation_points": [0, 3], "bridges": [[3, 4], [0, 3]]}


def test_classify_edges_payload(lasso):
    result = get_runner("classify-edges")(lasso, RunParams())
    kinds = [e["kind"] for e in result["edges"]]
    assert kinds == ["TREE", "TREE", "BACK", "TREE", "TREE"]


def test_bipartite_payload(square_cycle):
    result = get_runner("bipartite")(square_cycle, RunParams(source=1))
    assert result["bipartite_from_source"] is True
    assert result["coloring"] == [1, 0, 1, 0]
