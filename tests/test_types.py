import pytest

from netalgo.types.base import INF, NO_PARENT, EdgeKind
from netalgo.types.dto import FlowSummary, ShortestPaths, SpanningTree


def test_inf_sum_fits_in_int64():
    assert INF + INF <= 2**63 - 1
    assert INF > 10**18


def test_shortest_paths_helpers():
    result = ShortestPaths(0, (0, 3, INF), (NO_PARENT, 0, NO_PARENT))
    assert result.distance(1) == 3
    assert result.is_reachable(1)
    assert not result.is_reachable(2)
    assert result.path_to(1) == [0, 1]
    assert result.path_to(2) == []
    assert result.as_dict() == {0: 0, 1: 3}


def test_shortest_paths_is_frozen():
    result = ShortestPaths(0, (0,), (NO_PARENT,))
    with pytest.raises(AttributeError):
        result.source = 1


def test_spanning_tree_defaults():
    tree = SpanningTree(cost=0)
    assert tree.edges == ()
    assert tree.num_edges == 0


def test_flow_summary_cut_capacity():
    summary = FlowSummary(
        total_flow=7,
        edge_flow={(0, 0): 7},
        residual_cap={(0, 0): 0},
        reachable=frozenset({0}),
        min_cut=((0, 1, 3), (0, 2, 4)),
    )
    assert summary.cut_capacity == 7
    assert summary.completed is True
    assert summary.augmentations == 0


def test_edge_kind_values():
    assert [k.name for k in EdgeKind] == ["TREE", "BACK", "TWO_WAY", "FORWARD_CROSS"]
