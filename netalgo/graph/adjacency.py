from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from netalgo.types.base import Cost, VertexID
from netalgo.types.dto import GraphStats


@dataclass(frozen=True)
class Edge:
    """A directed weighted edge ``source -> target``."""

    source: VertexID
    target: VertexID
    weight: Cost = 1

    def as_tuple(self) -> Tuple[VertexID, VertexID, Cost]:
        return (self.source, self.target, self.weight)


class Graph:
    """
    Directed weighted graph over dense integer vertices ``0..V-1``.

    Vertices are slots in an arena indexed by id; each slot owns the ordered
    list of its outgoing edges. Insertion order is preserved and only affects
    iteration order. Parallel edges and self-loops are allowed.

    An undirected edge is two directed edges with the same weight; use
    ``add_undirected_edge`` or add both directions explicitly.

    Attributes:
        _adj: Outgoing edge lists, indexed by source vertex.
        _num_edges: Number of directed edges stored.
    """

    def __init__(self, num_vertices: int = 0) -> None:
        if num_vertices < 0:
            raise ValueError(f"num_vertices must be non-negative, got {num_vertices}")
        self._adj: List[List[Edge]] = [[] for _ in range(num_vertices)]
        self._num_edges: int = 0

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[VertexID, VertexID, Cost]],
        num_vertices: int = 0,
        undirected: bool = False,
    ) -> Graph:
        """
        Build a graph from ``(u, v, weight)`` triples.

        Args:
            edges: Edge triples to add in order.
            num_vertices: Minimum number of vertices to allocate; more are
                registered implicitly by the edges.
            undirected: If True, add every edge in both directions.

        Returns:
            Graph: The populated graph.
        """
        graph = cls(num_vertices)
        for u, v, w in edges:
            if undirected:
                graph.add_undirected_edge(u, v, w)
            else:
                graph.add_edge(u, v, w)
        return graph

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, vertex: object) -> bool:
        return isinstance(vertex, int) and 0 <= vertex < len(self._adj)

    def __iter__(self) -> Iterator[VertexID]:
        return iter(range(len(self._adj)))

    def __repr__(self) -> str:
        return f"Graph(num_vertices={self.num_vertices}, num_edges={self.num_edges})"

    @property
    def num_vertices(self) -> int:
        return len(self._adj)

    @property
    def num_edges(self) -> int:
        return self._num_edges

    #
    # Construction
    #
    def add_vertex(self) -> VertexID:
        """Append a new isolated vertex and return its id."""
        self._adj.append([])
        return len(self._adj) - 1

    def ensure_vertex(self, vertex: VertexID) -> None:
        """
        Register ``vertex`` and every lower id that is not yet present.

        Raises:
            ValueError: If ``vertex`` is negative.
        """
        if vertex < 0:
            raise ValueError(f"Vertex ids must be non-negative, got {vertex}")
        while len(self._adj) <= vertex:
            self._adj.append([])

    def add_edge(self, u: VertexID, v: VertexID, weight: Cost = 1) -> Edge:
        """
        Add a directed edge ``u -> v``, registering both endpoints if needed.

        Args:
            u: Source vertex.
            v: Destination vertex.
            weight: Edge weight (may be negative).

        Returns:
            Edge: The stored edge.
        """
        self.ensure_vertex(u)
        self.ensure_vertex(v)
        edge = Edge(u, v, weight)
        self._adj[u].append(edge)
        self._num_edges += 1
        return edge

    def add_undirected_edge(
        self, u: VertexID, v: VertexID, weight: Cost = 1
    ) -> Tuple[Edge, Edge]:
        """Add ``u -> v`` and ``v -> u`` with the same weight.

        A self-loop is stored once; both returned entries are that edge.
        """
        forward = self.add_edge(u, v, weight)
        if u == v:
            return forward, forward
        return forward, self.add_edge(v, u, weight)

    #
    # Queries
    #
    def out_edges(self, u: VertexID) -> List[Edge]:
        """Return the outgoing edge list of ``u`` (not a copy)."""
        return self._adj[u]

    def neighbors(self, u: VertexID) -> List[VertexID]:
        """Return destinations of ``u``'s outgoing edges in insertion order."""
        return [e.target for e in self._adj[u]]

    def edges(self) -> Iterator[Edge]:
        """Iterate over all edges, grouped by source vertex."""
        for out in self._adj:
            yield from out

    def out_degree(self, u: VertexID) -> int:
        return len(self._adj[u])

    def in_degrees(self) -> List[int]:
        """Return the in-degree of every vertex."""
        degrees = [0] * len(self._adj)
        for e in self.edges():
            degrees[e.target] += 1
        return degrees

    def check_vertex(self, vertex: VertexID, role: str = "vertex") -> None:
        """
        Validate that ``vertex`` is a registered id.

        Raises:
            ValueError: If ``vertex`` is outside ``[0, V)``.
        """
        if not 0 <= vertex < len(self._adj):
            raise ValueError(
                f"{role.capitalize()} {vertex} is not in the graph "
                f"(vertices are 0..{len(self._adj) - 1})."
            )

    #
    # Derived graphs
    #
    def copy(self) -> Graph:
        """Return an independent copy (edges are immutable and shared)."""
        clone = Graph()
        clone._adj = [list(out) for out in self._adj]
        clone._num_edges = self._num_edges
        return clone

    def reversed(self) -> Graph:
        """Return a new graph with every edge direction flipped."""
        rev = Graph(len(self._adj))
        for e in self.edges():
            rev.add_edge(e.target, e.source, e.weight)
        return rev

    def stats(self) -> GraphStats:
        """Summarize vertex/edge counts, weight range, self-loops and isolated vertices."""
        weights = [e.weight for e in self.edges()]
        touched = [False] * len(self._adj)
        self_loops = 0
        for e in self.edges():
            touched[e.source] = touched[e.target] = True
            if e.source == e.target:
                self_loops += 1
        return GraphStats(
            num_vertices=len(self._adj),
            num_edges=self._num_edges,
            min_weight=min(weights) if weights else None,
            max_weight=max(weights) if weights else None,
            self_loops=self_loops,
            isolated_vertices=tuple(v for v, t in enumerate(touched) if not t),
        )
