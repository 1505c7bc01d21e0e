"""Types and data structures for algorithm results.

Defines immutable result containers returned by the algorithm entry points.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Tuple

from netalgo.types.base import INF, NO_PARENT, Cost, EdgeKind, VertexID

# Directed edge reference: (source, destination)
EdgePair = Tuple[VertexID, VertexID]

# Weighted edge reference: (source, destination, weight)
WeightedEdge = Tuple[VertexID, VertexID, Cost]


@dataclass(frozen=True)
class ShortestPaths:
    """Single-source shortest path distances and parent pointers.

    Both sequences are indexed by vertex id. Unreachable vertices carry
    ``INF`` as distance and ``NO_PARENT`` as parent; the source has distance
    0 and parent ``NO_PARENT``.

    Attributes:
        source: Vertex the search started from.
        distances: Distance from ``source`` per vertex.
        parents: Predecessor on a shortest path per vertex.
    """

    source: VertexID
    distances: Tuple[Cost, ...]
    parents: Tuple[VertexID, ...]

    def distance(self, vertex: VertexID) -> Cost:
        """Return the distance to ``vertex`` (``INF`` when unreachable)."""
        return self.distances[vertex]

    def is_reachable(self, vertex: VertexID) -> bool:
        """Return True if ``vertex`` has a finite distance from the source."""
        return self.distances[vertex] < INF

    def path_to(self, vertex: VertexID) -> List[VertexID]:
        """Reconstruct the vertex sequence from the source to ``vertex``.

        Returns:
            Vertices from ``source`` to ``vertex`` inclusive, or an empty list
            if ``vertex`` is unreachable.
        """
        if not self.is_reachable(vertex):
            return []
        path = [vertex]
        current = vertex
        # A parent chain never exceeds V hops
        for _ in range(len(self.parents)):
            if current == self.source:
                break
            current = self.parents[current]
            if current == NO_PARENT:
                return []
            path.append(current)
        path.reverse()
        return path

    def as_dict(self) -> Dict[VertexID, Cost]:
        """Return ``{vertex: distance}`` for reachable vertices only."""
        return {v: d for v, d in enumerate(self.distances) if d < INF}


@dataclass(frozen=True)
class SpanningTree:
    """Minimum spanning tree (or forest) produced by Kruskal or Prim.

    Attributes:
        cost: Total weight of the chosen edges.
        edges: Chosen edges as ``(u, v, weight)`` in selection order.
    """

    cost: Cost
    edges: Tuple[WeightedEdge, ...] = ()

    @property
    def num_edges(self) -> int:
        return len(self.edges)


@dataclass(frozen=True)
class CutPoints:
    """Articulation points and bridges of an undirected graph.

    Attributes:
        articulation_points: Vertices whose removal disconnects their component.
        bridges: Edges ``(u, v)`` whose removal disconnects their component,
            oriented as the DFS traversed them (``u`` is the tree parent).
    """

    articulation_points: FrozenSet[VertexID]
    bridges: Tuple[EdgePair, ...]


@dataclass(frozen=True)
class ClassifiedEdge:
    """A directed edge together with its DFS classification."""

    source: VertexID
    target: VertexID
    kind: EdgeKind


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a max-flow computation with min-cut analysis.

    Attributes:
        total_flow: The maximum flow value achieved.
        edge_flow: Flow on each original edge, keyed by ``(u, index)`` handle
            into the residual adjacency of ``u``.
        residual_cap: Remaining forward capacity on each original edge.
        reachable: Vertices reachable from the source in the final residual
            graph (the source side of the minimum cut).
        min_cut: Original edges ``(u, v, capacity)`` crossing from the
            reachable set to the rest of the graph.
        augmentations: Number of augmenting paths applied.
        completed: False if the augmentation limit stopped the search early.
    """

    total_flow: Cost
    edge_flow: Dict[Tuple[VertexID, int], Cost]
    residual_cap: Dict[Tuple[VertexID, int], Cost]
    reachable: FrozenSet[VertexID]
    min_cut: Tuple[WeightedEdge, ...]
    augmentations: int = 0
    completed: bool = True

    @property
    def cut_capacity(self) -> Cost:
        """Total capacity of the min-cut edges."""
        return sum(cap for _, _, cap in self.min_cut)


@dataclass(frozen=True)
class GraphStats:
    """Structural summary of a graph used by ``netalgo inspect``."""

    num_vertices: int
    num_edges: int
    min_weight: Optional[Cost] = None
    max_weight: Optional[Cost] = None
    self_loops: int = 0
    isolated_vertices: Tuple[VertexID, ...] = field(default_factory=tuple)
