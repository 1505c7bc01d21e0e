"""Minimum spanning trees: Kruskal (edge sort + UnionFind) and Prim (heap frontier).

Both expect an undirected graph stored as pairs of directed edges. On a
connected graph they return the same total weight. On a disconnected graph
Kruskal returns the minimum spanning *forest* of every component, while Prim
only spans the component containing ``start``; this difference is part of
the contract.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Iterable, List, Tuple, Union

from netalgo.algorithms.union_find import UnionFind
from netalgo.graph.adjacency import Edge, Graph
from netalgo.logging import get_logger
from netalgo.types.base import Cost, MstMethod, VertexID
from netalgo.types.dto import SpanningTree, WeightedEdge

logger = get_logger(__name__)

EdgeInput = Union[Edge, Tuple[VertexID, VertexID, Cost]]


def _as_triple(edge: EdgeInput) -> WeightedEdge:
    if isinstance(edge, Edge):
        return edge.as_tuple()
    u, v, w = edge
    return (u, v, w)


def kruskal(num_vertices: int, edges: Iterable[EdgeInput]) -> SpanningTree:
    """
    Build a minimum spanning forest with Kruskal's algorithm.

    Edges are taken in ascending weight order (ties keep input order, though
    any tie order gives the same total). An edge is kept iff its endpoints
    are still in different sets; keeping it otherwise would close a cycle.

    Args:
        num_vertices: Number of vertices ``V``; endpoints must lie in ``[0, V)``.
        edges: Undirected edges as ``Edge`` objects or ``(u, v, w)`` triples.
            Both directions of an edge may be present; the second is skipped.

    Returns:
        SpanningTree: Total weight and chosen edges.

    Complexity:
        O(E log E).
    """
    edge_list = sorted((_as_triple(e) for e in edges), key=lambda e: e[2])
    uf = UnionFind(num_vertices)

    cost: Cost = 0
    chosen: List[WeightedEdge] = []
    for u, v, w in edge_list:
        if uf.union(u, v):
            cost += w
            chosen.append((u, v, w))
            if len(chosen) == num_vertices - 1:
                break
        else:
            logger.debug("Skipping edge (%s - %s) with weight %s to avoid cycle", u, v, w)

    return SpanningTree(cost=cost, edges=tuple(chosen))


def prim(graph: Graph, start: VertexID = 0) -> SpanningTree:
    """
    Build a minimum spanning tree of ``start``'s component with Prim's algorithm.

    The heap holds ``(weight, vertex, from_vertex)`` candidates leading out of
    the taken set. There is no decrease-key, so a vertex may be queued several
    times; entries for already-taken vertices are discarded on pop.

    Args:
        graph: Undirected graph stored as pairs of directed edges.
        start: Vertex the tree grows from.

    Returns:
        SpanningTree: Total weight and chosen edges of the component of ``start``.

    Raises:
        ValueError: If ``start`` is not in a non-empty graph.

    Complexity:
        O(E log V).
    """
    if graph.num_vertices == 0:
        return SpanningTree(cost=0)
    graph.check_vertex(start, "start")

    taken = [False] * graph.num_vertices
    min_pq: List[Tuple[Cost, VertexID, VertexID]] = []

    def process(vertex: VertexID) -> None:
        taken[vertex] = True
        for edge in graph.out_edges(vertex):
            if not taken[edge.target]:
                heappush(min_pq, (edge.weight, edge.target, vertex))

    cost: Cost = 0
    chosen: List[WeightedEdge] = []
    process(start)
    while min_pq:
        weight, vertex, from_vertex = heappop(min_pq)
        if taken[vertex]:
            logger.debug(
                "Discarding stale entry for vertex %s with weight %s", vertex, weight
            )
            continue
        cost += weight
        chosen.append((from_vertex, vertex, weight))
        process(vertex)

    return SpanningTree(cost=cost, edges=tuple(chosen))


def mst_cost(
    graph: Graph, method: MstMethod = MstMethod.KRUSKAL, start: VertexID = 0
) -> Cost:
    """
    Return the minimum spanning tree weight of an undirected graph.

    Args:
        graph: Undirected graph stored as pairs of directed edges.
        method: Algorithm to use.
        start: Start vertex for Prim; ignored by Kruskal.

    Returns:
        Cost: Total weight (forest weight for Kruskal on a disconnected graph).
    """
    if method == MstMethod.PRIM:
        return prim(graph, start).cost
    return kruskal(graph.num_vertices, graph.edges()).cost
