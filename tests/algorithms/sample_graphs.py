import pytest

from netalgo.graph.adjacency import Graph


@pytest.fixture
def weighted_star():
    # 0 → 1 [4], 0 → 2 [1], 0 → 3 [2], 2 → 1 [5], 2 → 3 [8]
    return Graph.from_edges([(0, 1, 4), (0, 2, 1), (0, 3, 2), (2, 1, 5), (2, 3, 8)])


@pytest.fixture
def mst_square():
    # Undirected weights:
    #        [10]
    #   0 ────────── 1
    #   │ \          │
    #  [6] \[5]     [15]
    #   │   \        │
    #   2 ────────── 3
    #        [4]
    return Graph.from_edges(
        [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)], undirected=True
    )


@pytest.fixture
def flow_diamond():
    # Capacity:
    #        [10]       [15]
    #   0 ────────► 1 ────────► 3
    #   │           │           ▲
    #   │ [10]      │ [2]       │ [10]
    #   │           ▼           │
    #   └─────────► 2 ──────────┘
    return Graph.from_edges([(0, 1, 10), (0, 2, 10), (1, 2, 2), (1, 3, 15), (2, 3, 10)])


@pytest.fixture
def flow_textbook():
    # Classic six-vertex network, s=0, t=5, max flow 23.
    return Graph.from_edges(
        [
            (0, 1, 16),
            (0, 2, 13),
            (1, 2, 10),
            (2, 1, 4),
            (1, 3, 12),
            (3, 2, 9),
            (2, 4, 14),
            (4, 3, 7),
            (3, 5, 20),
            (4, 5, 4),
        ]
    )


@pytest.fixture
def two_cycles():
    # 0 → 1;  1 → 3 → 2 → 1;  3 → 4;  4 → 5 → 7 → 6 → 4
    return Graph.from_edges(
        [
            (0, 1, 1),
            (1, 3, 1),
            (2, 1, 1),
            (3, 2, 1),
            (3, 4, 1),
            (4, 5, 1),
            (5, 7, 1),
            (7, 6, 1),
            (6, 4, 1),
        ]
    )


@pytest.fixture
def triangle_with_tail():
    # Undirected:
    #   1 ─── 0 ─── 3 ─── 4
    #    \   /
    #     \ /
    #      2
    return Graph.from_edges(
        [(1, 0, 1), (0, 2, 1), (2, 1, 1), (0, 3, 1), (3, 4, 1)], undirected=True
    )


@pytest.fixture
def square_cycle():
    # Undirected 4-cycle 0-1-2-3-0
    return Graph.from_edges(
        [(0, 1, 1), (1, 2, 1), (2, 3, 1), (3, 0, 1)], undirected=True
    )


@pytest.fixture
def triangle():
    # Undirected 3-cycle 0-1-2-0
    return Graph.from_edges([(0, 1, 1), (1, 2, 1), (2, 0, 1)], undirected=True)


@pytest.fixture
def dag6():
    # 5 → 2, 5 → 0, 4 → 0, 4 → 1, 2 → 3, 3 → 1
    return Graph.from_edges(
        [(5, 2, 1), (5, 0, 1), (4, 0, 1), (4, 1, 1), (2, 3, 1), (3, 1, 1)]
    )


@pytest.fixture
def lasso():
    # 0 → 1 → 2 → 0 (cycle), 1 → 3 → 4
    return Graph.from_edges([(0, 1, 1), (1, 2, 1), (2, 0, 1), (1, 3, 1), (3, 4, 1)])


@pytest.fixture
def negative_dag():
    # Negative weights, no cycle. Distances from 0: [0, 4, 1, 5]
    return Graph.from_edges([(0, 1, 4), (0, 2, 5), (1, 2, -3), (1, 3, 2), (2, 3, 4)])


@pytest.fixture
def negative_cycle():
    # 0 → 1 → 2 → 1 where 1 → 2 → 1 weighs -1 in total
    return Graph.from_edges([(0, 1, 1), (1, 2, 2), (2, 1, -3), (2, 3, 1)])
