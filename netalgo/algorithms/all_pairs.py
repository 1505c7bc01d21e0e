"""All-pairs shortest paths (Floyd-Warshall) and the queries derived from it.

The dense recurrences run one pivot ``k`` at a time over whole numpy
arrays. Relaxation through ``k`` only happens when both legs are finite, so
unreachable pairs stay exactly at ``INF`` even with negative edges. Values
are floored at ``-INF`` so a negative cycle cannot wrap an ``int64`` cell.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

import numpy as np

from netalgo.graph.adjacency import Graph
from netalgo.graph.matrix import AdjacencyMatrix
from netalgo.logging import get_logger
from netalgo.types.base import INF, Cost, VertexID

logger = get_logger(__name__)

MatrixLike = Union[AdjacencyMatrix, Graph]


def _as_matrix(graph: MatrixLike) -> AdjacencyMatrix:
    if isinstance(graph, AdjacencyMatrix):
        return graph
    if isinstance(graph, Graph):
        return AdjacencyMatrix.from_graph(graph)
    raise TypeError(f"Expected AdjacencyMatrix or Graph, got {type(graph).__name__}")


def _relax_all(dist: np.ndarray, parent: Optional[np.ndarray] = None) -> None:
    """Run the Floyd-Warshall recurrence in place over every pivot."""
    for k in range(dist.shape[0]):
        via_col = dist[:, k : k + 1]
        via_row = dist[k : k + 1, :]
        candidate = via_col + via_row
        better = (via_col < INF) & (via_row < INF) & (candidate < dist)
        if parent is not None:
            np.copyto(parent, np.broadcast_to(parent[k].copy(), parent.shape), where=better)
        np.copyto(dist, candidate, where=better)
        np.maximum(dist, -INF, out=dist)


@dataclass(frozen=True, eq=False)
class AllPairsShortestPaths:
    """Distance and parent matrices produced by a successful Floyd-Warshall run.

    The matrices are computed once; every query below reuses them.

    Attributes:
        dist: ``dist[i, j]`` is the shortest distance from i to j (``INF`` if
            unreachable).
        parent: ``parent[i, j]`` is the predecessor of j on a shortest i->j path.
    """

    dist: np.ndarray
    parent: np.ndarray

    @property
    def num_vertices(self) -> int:
        return self.dist.shape[0]

    def distance(self, i: VertexID, j: VertexID) -> Cost:
        return int(self.dist[i, j])

    def is_reachable(self, i: VertexID, j: VertexID) -> bool:
        return bool(self.dist[i, j] < INF)

    def path(self, i: VertexID, j: VertexID) -> List[VertexID]:
        """Reconstruct a shortest path from i to j (empty if unreachable)."""
        if not self.is_reachable(i, j):
            return []
        path = [j]
        current = j
        for _ in range(self.num_vertices):
            if current == i:
                break
            current = int(self.parent[i, current])
            path.append(current)
        path.reverse()
        return path

    def reachability(self) -> np.ndarray:
        """Boolean matrix: True where j is reachable from i."""
        return self.dist < INF

    def diameter(self) -> Cost:
        """Largest finite off-diagonal distance, or -1 if there is none."""
        off_diagonal = ~np.eye(self.num_vertices, dtype=bool)
        finite = self.dist[(self.dist < INF) & off_diagonal]
        if finite.size == 0:
            return -1
        return int(finite.max())

    def strongly_connected_components(self) -> List[List[VertexID]]:
        """Group vertices that reach each other in both directions.

        Components are listed by their smallest vertex, members ascending.
        """
        reach = self.reachability()
        mutual = reach & reach.T
        assigned = np.zeros(self.num_vertices, dtype=bool)
        components: List[List[VertexID]] = []
        for i in range(self.num_vertices):
            if assigned[i]:
                continue
            members = np.flatnonzero(mutual[i])
            assigned[members] = True
            components.append([int(v) for v in members])
        return components


def floyd_warshall(graph: MatrixLike) -> Optional[AllPairsShortestPaths]:
    """
    Compute shortest distances between every ordered pair of vertices.

    Args:
        graph: Dense adjacency matrix, or an adjacency-list graph to densify.

    Returns:
        Optional[AllPairsShortestPaths]: Distance and parent matrices, or None
        if any ``dist[i][i] < 0`` (a negative cycle exists).

    Complexity:
        O(V^3) time, O(V^2) space.
    """
    matrix = _as_matrix(graph)
    dist = matrix.values.copy()
    n = dist.shape[0]
    parent = np.repeat(np.arange(n, dtype=np.int64)[:, None], n, axis=1)

    _relax_all(dist, parent)

    negative = np.flatnonzero(np.diagonal(dist) < 0)
    if negative.size:
        logger.warning(
            "Graph contains a negative weight cycle through vertices %s",
            negative.tolist(),
        )
        return None
    return AllPairsShortestPaths(dist=dist, parent=parent)


def transitive_closure(
    adjacency: Union[MatrixLike, Sequence[Sequence[int]], np.ndarray],
) -> np.ndarray:
    """
    Compute reachability with the boolean form of the Floyd-Warshall recurrence.

    ``reach[i][j] = reach[i][j] or (reach[i][k] and reach[k][j])``. Every
    vertex reaches itself.

    Args:
        adjacency: A Graph, an AdjacencyMatrix (finite entries are edges), or a
            0/1 matrix where non-zero marks an edge.

    Returns:
        np.ndarray: ``(V, V)`` boolean reachability matrix.
    """
    if isinstance(adjacency, Graph):
        n = adjacency.num_vertices
        reach = np.zeros((n, n), dtype=bool)
        for e in adjacency.edges():
            reach[e.source, e.target] = True
    elif isinstance(adjacency, AdjacencyMatrix):
        reach = adjacency.values < INF
    else:
        reach = np.asarray(adjacency) != 0
        if reach.ndim != 2 or reach.shape[0] != reach.shape[1]:
            raise ValueError(f"Adjacency matrix must be square, got shape {reach.shape}")
    reach = reach.copy()
    np.fill_diagonal(reach, True)

    for k in range(reach.shape[0]):
        reach |= reach[:, k : k + 1] & reach[k : k + 1, :]
    return reach


def minimax_paths(graph: MatrixLike) -> np.ndarray:
    """
    Compute the smallest possible largest edge weight on any path i->j.

    Uses the Floyd-Warshall recurrence with ``max`` inside and ``min``
    outside. The diagonal is 0 and unreachable pairs hold ``INF``.

    Args:
        graph: Dense adjacency matrix, or an adjacency-list graph to densify.

    Returns:
        np.ndarray: ``(V, V)`` ``int64`` minimax matrix.
    """
    matrix = _as_matrix(graph)
    minimax = matrix.values.copy()
    np.fill_diagonal(minimax, 0)

    for k in range(minimax.shape[0]):
        via_col = minimax[:, k : k + 1]
        via_row = minimax[k : k + 1, :]
        candidate = np.maximum(via_col, via_row)
        better = (via_col < INF) & (via_row < INF) & (candidate < minimax)
        np.copyto(minimax, candidate, where=better)
    return minimax


def _cycle_weights(graph: MatrixLike) -> np.ndarray:
    """Closed-walk weights per vertex with the diagonal pre-seeded to INF."""
    matrix = _as_matrix(graph)
    dist = matrix.values.copy()
    # Seed with real self-loops only, so a trivial 0-length "cycle" never wins
    np.fill_diagonal(dist, matrix.loops)
    _relax_all(dist)
    return np.diagonal(dist)


def cheapest_cycle(graph: MatrixLike) -> Optional[Cost]:
    """
    Return the weight of the cheapest directed cycle, or None if acyclic.

    With negative cycles present the value is the cheapest closed walk the
    recurrence finds, which may loop a negative cycle more than once.
    """
    diagonal = _cycle_weights(graph)
    finite = diagonal[diagonal < INF]
    if finite.size == 0:
        return None
    return int(finite.min())


def cheapest_negative_cycle(graph: MatrixLike) -> Optional[Cost]:
    """Return the most negative diagonal value, or None if no negative cycle exists."""
    diagonal = _cycle_weights(graph)
    negative = diagonal[diagonal < 0]
    if negative.size == 0:
        return None
    return int(negative.min())


def diameter(graph: MatrixLike) -> Cost:
    """
    Return the largest finite shortest-path distance between distinct vertices.

    Returns:
        Cost: The diameter, or -1 if no finite off-diagonal path exists or
        the graph has a negative cycle.
    """
    result = floyd_warshall(graph)
    if result is None:
        return -1
    return result.diameter()


def strongly_connected_components(graph: MatrixLike) -> List[List[VertexID]]:
    """
    Group vertices into SCCs via all-pairs reachability.

    Returns:
        List[List[VertexID]]: Components ordered by smallest member, or an
        empty list if the graph has a negative cycle.
    """
    result = floyd_warshall(graph)
    if result is None:
        return []
    return result.strongly_connected_components()
