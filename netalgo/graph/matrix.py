"""Dense adjacency-matrix graph used by the all-pairs algorithms."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from netalgo.graph.adjacency import Graph
from netalgo.types.base import INF, Cost, VertexID


class AdjacencyMatrix:
    """V x V distance matrix backed by a numpy ``int64`` array.

    Missing edges hold the ``INF`` sentinel rather than a dedicated tag, so
    adding two entries never overflows. The diagonal starts at 0; a self-loop
    overrides it only when lighter (a negative self-loop is a negative cycle).
    Parallel edges keep the minimum weight.

    Attributes:
        values: The underlying ``(V, V)`` ``int64`` array.
        loops: Lightest self-loop weight per vertex (``INF`` if none). Kept
            apart from the diagonal so cycle searches can see positive loops.
    """

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError(f"num_vertices must be non-negative, got {num_vertices}")
        self.values: np.ndarray = np.full((num_vertices, num_vertices), INF, dtype=np.int64)
        np.fill_diagonal(self.values, 0)
        self.loops: np.ndarray = np.full(num_vertices, INF, dtype=np.int64)

    @classmethod
    def from_graph(cls, graph: Graph) -> AdjacencyMatrix:
        """Build a matrix holding the lightest edge between every ordered pair."""
        matrix = cls(graph.num_vertices)
        for e in graph.edges():
            matrix.set_edge(e.source, e.target, e.weight)
        return matrix

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cost]]) -> AdjacencyMatrix:
        """
        Wrap an explicit square matrix of distances.

        Entries greater than or equal to ``INF`` are treated as "no edge" and
        normalized to ``INF``. The diagonal is taken as given.

        Raises:
            ValueError: If ``rows`` is not square.
        """
        data = np.asarray(rows, dtype=np.int64)
        if data.size == 0:
            return cls(0)
        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise ValueError(f"Adjacency matrix must be square, got shape {data.shape}")
        matrix = cls(data.shape[0])
        matrix.values = np.clip(data, -INF, INF)
        diagonal = np.diagonal(matrix.values)
        matrix.loops = np.where(diagonal != 0, diagonal, INF).astype(np.int64)
        return matrix

    @classmethod
    def from_edges(
        cls, num_vertices: int, edges: Iterable[tuple[VertexID, VertexID, Cost]]
    ) -> AdjacencyMatrix:
        matrix = cls(num_vertices)
        for u, v, w in edges:
            matrix.set_edge(u, v, w)
        return matrix

    def __len__(self) -> int:
        return self.values.shape[0]

    def __repr__(self) -> str:
        return f"AdjacencyMatrix(num_vertices={len(self)})"

    @property
    def num_vertices(self) -> int:
        return self.values.shape[0]

    def set_edge(self, u: VertexID, v: VertexID, weight: Cost) -> None:
        """Record edge ``u -> v``, keeping the lighter of parallel edges."""
        n = self.values.shape[0]
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"Edge ({u}, {v}) is outside a {n}-vertex matrix.")
        if u == v and weight < self.loops[u]:
            self.loops[u] = weight
        if weight < self.values[u, v]:
            self.values[u, v] = weight

    def has_edge(self, u: VertexID, v: VertexID) -> bool:
        """Return True for a finite off-diagonal entry or a recorded self-loop."""
        if u == v:
            return bool(self.loops[u] < INF)
        return bool(self.values[u, v] < INF)

    def copy(self) -> AdjacencyMatrix:
        clone = AdjacencyMatrix(0)
        clone.values = self.values.copy()
        clone.loops = self.loops.copy()
        return clone
