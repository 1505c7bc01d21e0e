"""Residual flow network with paired forward/backward edges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Sequence, Set, Tuple

from netalgo.graph.adjacency import Graph
from netalgo.types.base import Cost, VertexID

#: Handle of an edge: (owning vertex, index in that vertex's edge list).
EdgeHandle = Tuple[VertexID, int]


@dataclass
class ResidualEdge:
    """One half of a residual edge pair.

    Attributes:
        target: Head vertex of this half.
        residual: Remaining capacity on this half.
        pair: Index of the paired half in ``target``'s edge list.
        capacity: Original capacity for a forward half, 0 for a backward half.
        forward: True for the half that models the caller's edge.
    """

    target: VertexID
    residual: Cost
    pair: int
    capacity: Cost
    forward: bool


class ResidualGraph:
    """
    Capacitated directed graph kept in residual form.

    Every call to ``add_edge(u, v, c)`` stores a forward half ``u -> v`` with
    residual ``c`` and a backward half ``v -> u`` with residual 0, each
    holding the other's index for O(1) lookup. For every pair,
    ``forward.residual + backward.residual == capacity`` at all times.

    Attributes:
        _adj: Residual edge lists indexed by vertex.
    """

    def __init__(self, num_vertices: int = 0) -> None:
        if num_vertices < 0:
            raise ValueError(f"num_vertices must be non-negative, got {num_vertices}")
        self._adj: List[List[ResidualEdge]] = [[] for _ in range(num_vertices)]

    @classmethod
    def from_graph(cls, graph: Graph) -> ResidualGraph:
        """Build a residual network using each edge weight as its capacity."""
        residual = cls(graph.num_vertices)
        for e in graph.edges():
            residual.add_edge(e.source, e.target, e.weight)
        return residual

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"ResidualGraph(num_vertices={self.num_vertices})"

    @property
    def num_vertices(self) -> int:
        return len(self._adj)

    def _ensure_vertex(self, vertex: VertexID) -> None:
        if vertex < 0:
            raise ValueError(f"Vertex ids must be non-negative, got {vertex}")
        while len(self._adj) <= vertex:
            self._adj.append([])

    def add_edge(self, u: VertexID, v: VertexID, capacity: Cost) -> EdgeHandle:
        """
        Add a capacitated edge ``u -> v`` and its zero-capacity reverse.

        Args:
            u: Tail vertex.
            v: Head vertex.
            capacity: Non-negative capacity.

        Returns:
            EdgeHandle: ``(u, index)`` of the forward half.

        Raises:
            ValueError: If ``capacity`` is negative or an id is negative.
        """
        if capacity < 0:
            raise ValueError(f"Capacity of edge ({u}, {v}) must be non-negative, got {capacity}")
        self._ensure_vertex(u)
        self._ensure_vertex(v)
        fwd_index = len(self._adj[u])
        # For a self-loop both halves share one list; the backward half lands after
        bwd_index = len(self._adj[v]) + (1 if u == v else 0)
        self._adj[u].append(ResidualEdge(v, capacity, bwd_index, capacity, True))
        self._adj[v].append(ResidualEdge(u, 0, fwd_index, 0, False))
        return (u, fwd_index)

    def out_edges(self, u: VertexID) -> List[ResidualEdge]:
        return self._adj[u]

    def edge(self, handle: EdgeHandle) -> ResidualEdge:
        u, index = handle
        return self._adj[u][index]

    def pair_of(self, u: VertexID, index: int) -> ResidualEdge:
        """Return the paired half of edge ``index`` in ``u``'s list."""
        e = self._adj[u][index]
        return self._adj[e.target][e.pair]

    def forward_edges(self) -> Iterator[Tuple[VertexID, int, ResidualEdge]]:
        """Iterate ``(u, index, edge)`` over forward halves only."""
        for u, out in enumerate(self._adj):
            for index, e in enumerate(out):
                if e.forward:
                    yield u, index, e

    #
    # Augmentation
    #
    def augment(self, path: Sequence[EdgeHandle], amount: Cost) -> None:
        """
        Push ``amount`` units along ``path``.

        Each traversed half loses ``amount`` residual capacity and its pair
        gains the same, preserving the per-pair capacity sum.

        Args:
            path: Edge handles from source to sink.
            amount: Flow to push; must not exceed the path bottleneck.

        Raises:
            ValueError: If ``amount`` exceeds the residual capacity of any edge.
        """
        for u, index in path:
            e = self._adj[u][index]
            if e.residual < amount:
                raise ValueError(
                    f"Cannot push {amount} over edge ({u}, {e.target}) "
                    f"with residual {e.residual}."
                )
        for u, index in path:
            e = self._adj[u][index]
            e.residual -= amount
            self._adj[e.target][e.pair].residual += amount

    def bottleneck(self, path: Sequence[EdgeHandle]) -> Cost:
        """Return the minimum residual capacity along ``path``."""
        return min(self._adj[u][index].residual for u, index in path)

    #
    # Inspection
    #
    def reachable_from(self, source: VertexID) -> Set[VertexID]:
        """Return vertices reachable from ``source`` over positive residual edges."""
        seen = {source}
        stack = [source]
        while stack:
            u = stack.pop()
            for e in self._adj[u]:
                if e.residual > 0 and e.target not in seen:
                    seen.add(e.target)
                    stack.append(e.target)
        return seen

    def edge_flows(self) -> Dict[EdgeHandle, Cost]:
        """Return flow currently carried by each forward edge."""
        return {(u, i): e.capacity - e.residual for u, i, e in self.forward_edges()}

    def check_pair_invariant(self) -> bool:
        """Return True if every pair's residuals sum to its original capacity."""
        for u, index, e in self.forward_edges():
            back = self._adj[e.target][e.pair]
            if back.forward or back.pair != index or back.target != u:
                return False
            if e.residual + back.residual != e.capacity:
                return False
            if e.residual < 0 or back.residual < 0:
                return False
        return True

    def copy(self) -> ResidualGraph:
        clone = ResidualGraph()
        clone._adj = [
            [ResidualEdge(e.target, e.residual, e.pair, e.capacity, e.forward) for e in out]
            for out in self._adj
        ]
        return clone
