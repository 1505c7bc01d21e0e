"""Articulation points and bridges of an undirected graph (Tarjan's DFS)."""

from __future__ import annotations

from typing import Iterator, List, Tuple

from netalgo.graph.adjacency import Graph
from netalgo.logging import get_logger
from netalgo.types.base import NO_PARENT, VertexID
from netalgo.types.dto import CutPoints, EdgePair

logger = get_logger(__name__)

UNVISITED = -1


def find_cut_points(graph: Graph) -> CutPoints:
    """
    Find articulation points and bridges with a low-link DFS.

    Rules, applied when the DFS returns from tree child ``v`` to ``u``:

    * the DFS root is an articulation point iff it has at least two tree children;
    * a non-root ``u`` is an articulation point iff ``dfs_low[v] >= dfs_num[u]``;
    * edge ``(u, v)`` is a bridge iff ``dfs_low[v] > dfs_num[u]``.

    Only one edge back to the direct DFS parent is skipped (the reverse half
    of the tree edge), so a parallel copy counts as a back edge and doubled
    edges are never bridges.

    Args:
        graph: Undirected graph stored as pairs of directed edges.

    Returns:
        CutPoints: Articulation vertices and bridges in discovery order.
    """
    n = graph.num_vertices
    dfs_num = [UNVISITED] * n
    dfs_low = [0] * n
    dfs_parent = [NO_PARENT] * n
    skipped_parent_edge = [False] * n
    articulation = [False] * n
    bridges: List[EdgePair] = []
    counter = 0

    for root in range(n):
        if dfs_num[root] != UNVISITED:
            continue

        root_children = 0
        dfs_num[root] = dfs_low[root] = counter
        counter += 1
        frames: List[Tuple[VertexID, Iterator[VertexID]]] = [
            (root, iter(graph.neighbors(root)))
        ]

        while frames:
            u, neighbors = frames[-1]
            for v in neighbors:
                if dfs_num[v] == UNVISITED:
                    dfs_parent[v] = u
                    if u == root:
                        root_children += 1
                    dfs_num[v] = dfs_low[v] = counter
                    counter += 1
                    frames.append((v, iter(graph.neighbors(v))))
                    break
                if v == dfs_parent[u] and not skipped_parent_edge[u]:
                    skipped_parent_edge[u] = True
                    continue
                dfs_low[u] = min(dfs_low[u], dfs_num[v])
            else:
                frames.pop()
                if not frames:
                    continue
                parent = frames[-1][0]
                if dfs_low[u] >= dfs_num[parent]:
                    articulation[parent] = True
                if dfs_low[u] > dfs_num[parent]:
                    bridges.append((parent, u))
                    logger.debug("Edge (%s, %s) is a bridge", parent, u)
                dfs_low[parent] = min(dfs_low[parent], dfs_low[u])

        articulation[root] = root_children > 1

    points = frozenset(v for v in range(n) if articulation[v])
    logger.debug("Articulation points: %s", sorted(points))
    return CutPoints(articulation_points=points, bridges=tuple(bridges))
