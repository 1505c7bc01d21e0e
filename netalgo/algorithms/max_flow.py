"""Maximum flow by augmenting paths: Ford-Fulkerson (DFS) and Edmonds-Karp (BFS)."""

from __future__ import annotations

from collections import deque
from typing import Iterator, List, Literal, Optional, Tuple, Union, overload

from netalgo.config import ALGO_CONFIG
from netalgo.graph.adjacency import Graph
from netalgo.graph.residual import EdgeHandle, ResidualEdge, ResidualGraph
from netalgo.logging import get_logger
from netalgo.types.base import AugmentSearch, Cost, VertexID
from netalgo.types.dto import FlowSummary

logger = get_logger(__name__)

FlowNetwork = Union[Graph, ResidualGraph]


def _trace_path(
    parent_edge: List[Optional[EdgeHandle]], src_node: VertexID, dst_node: VertexID
) -> List[EdgeHandle]:
    path: List[EdgeHandle] = []
    v = dst_node
    while v != src_node:
        handle = parent_edge[v]
        assert handle is not None
        path.append(handle)
        v = handle[0]
    path.reverse()
    return path


def find_path_bfs(
    residual: ResidualGraph, src_node: VertexID, dst_node: VertexID
) -> Optional[List[EdgeHandle]]:
    """
    Find a fewest-edges path with positive residual capacity on every edge.

    Returns:
        Optional[List[EdgeHandle]]: Edge handles from source to sink, or None.
    """
    parent_edge: List[Optional[EdgeHandle]] = [None] * residual.num_vertices
    visited = [False] * residual.num_vertices
    visited[src_node] = True
    queue = deque([src_node])

    while queue:
        u = queue.popleft()
        for index, e in enumerate(residual.out_edges(u)):
            if e.residual > 0 and not visited[e.target]:
                visited[e.target] = True
                parent_edge[e.target] = (u, index)
                if e.target == dst_node:
                    return _trace_path(parent_edge, src_node, dst_node)
                queue.append(e.target)
    return None


def find_path_dfs(
    residual: ResidualGraph, src_node: VertexID, dst_node: VertexID
) -> Optional[List[EdgeHandle]]:
    """
    Find any path with positive residual capacity on every edge, depth first.

    Frames of ``(vertex, edge iterator)`` replace recursion, so long paths do
    not hit the interpreter's recursion limit.

    Returns:
        Optional[List[EdgeHandle]]: Edge handles from source to sink, or None.
    """
    parent_edge: List[Optional[EdgeHandle]] = [None] * residual.num_vertices
    visited = [False] * residual.num_vertices
    visited[src_node] = True
    frames: List[Tuple[VertexID, Iterator[Tuple[int, ResidualEdge]]]] = [
        (src_node, enumerate(residual.out_edges(src_node)))
    ]

    while frames:
        u, edges = frames[-1]
        for index, e in edges:
            if e.residual > 0 and not visited[e.target]:
                visited[e.target] = True
                parent_edge[e.target] = (u, index)
                if e.target == dst_node:
                    return _trace_path(parent_edge, src_node, dst_node)
                frames.append((e.target, enumerate(residual.out_edges(e.target))))
                break
        else:
            frames.pop()
    return None


def _build_summary(
    residual: ResidualGraph,
    src_node: VertexID,
    total_flow: Cost,
    augmentations: int,
    completed: bool,
) -> FlowSummary:
    reachable = residual.reachable_from(src_node)
    edge_flow = {}
    residual_cap = {}
    min_cut = []
    for u, index, e in residual.forward_edges():
        edge_flow[(u, index)] = e.capacity - e.residual
        residual_cap[(u, index)] = e.residual
        if u in reachable and e.target not in reachable:
            min_cut.append((u, e.target, e.capacity))
    return FlowSummary(
        total_flow=total_flow,
        edge_flow=edge_flow,
        residual_cap=residual_cap,
        reachable=frozenset(reachable),
        min_cut=tuple(min_cut),
        augmentations=augmentations,
        completed=completed,
    )


@overload
def calc_max_flow(
    graph: FlowNetwork,
    src_node: VertexID,
    dst_node: VertexID,
    *,
    search: Optional[AugmentSearch] = None,
    return_summary: Literal[False] = False,
    return_graph: Literal[False] = False,
    max_augmentations: Optional[int] = None,
    copy_graph: bool = True,
) -> Cost: ...


@overload
def calc_max_flow(
    graph: FlowNetwork,
    src_node: VertexID,
    dst_node: VertexID,
    *,
    search: Optional[AugmentSearch] = None,
    return_summary: Literal[True],
    return_graph: Literal[False] = False,
    max_augmentations: Optional[int] = None,
    copy_graph: bool = True,
) -> tuple[Cost, FlowSummary]: ...


@overload
def calc_max_flow(
    graph: FlowNetwork,
    src_node: VertexID,
    dst_node: VertexID,
    *,
    search: Optional[AugmentSearch] = None,
    return_summary: Literal[False] = False,
    return_graph: Literal[True],
    max_augmentations: Optional[int] = None,
    copy_graph: bool = True,
) -> tuple[Cost, ResidualGraph]: ...


@overload
def calc_max_flow(
    graph: FlowNetwork,
    src_node: VertexID,
    dst_node: VertexID,
    *,
    search: Optional[AugmentSearch] = None,
    return_summary: Literal[True],
    return_graph: Literal[True],
    max_augmentations: Optional[int] = None,
    copy_graph: bool = True,
) -> tuple[Cost, FlowSummary, ResidualGraph]: ...


def calc_max_flow(
    graph: FlowNetwork,
    src_node: VertexID,
    dst_node: VertexID,
    *,
    search: Optional[AugmentSearch] = None,
    return_summary: bool = False,
    return_graph: bool = False,
    max_augmentations: Optional[int] = None,
    copy_graph: bool = True,
) -> Union[Cost, tuple]:
    """Compute the maximum flow from ``src_node`` to ``dst_node``.

    Each iteration finds a source-to-sink path with strictly positive
    residual capacity on every edge, takes its bottleneck, subtracts it from
    every traversed half and adds it to every paired half, and adds it to the
    total. The loop ends when no augmenting path remains; the total then
    equals the capacity of the minimum s-t cut (the vertices still reachable
    from the source in the residual graph form the source side).

    Args:
        graph: A capacitated ``Graph`` (edge weight is capacity) or a
            ``ResidualGraph``.
        src_node: Source vertex.
        dst_node: Sink vertex.
        search: ``AugmentSearch.DFS`` (Ford-Fulkerson, O(E * maxflow)) or
            ``AugmentSearch.BFS`` (Edmonds-Karp, O(V * E^2)). Defaults to
            ``ALGO_CONFIG.default_augment_search``.
        return_summary: If True, also return a FlowSummary with min-cut data.
        return_graph: If True, also return the final residual graph.
        max_augmentations: Stop after this many augmenting paths; defaults to
            ``ALGO_CONFIG.max_augmentations`` (unbounded when None).
        copy_graph: If True and ``graph`` is a ResidualGraph, work on a copy so
            the caller's network is left unchanged.

    Returns:
        Union[Cost, tuple]:
            - If neither flag: total flow
            - If return_summary only: (total flow, FlowSummary)
            - If return_graph only: (total flow, ResidualGraph)
            - If both flags: (total flow, FlowSummary, ResidualGraph)

    Raises:
        ValueError: If the source or sink is not a vertex of the network.

    Examples:
        >>> g = Graph()
        >>> _ = g.add_edge(0, 1, 10)
        >>> _ = g.add_edge(1, 2, 5)
        >>> calc_max_flow(g, 0, 2)
        5
        >>> flow, summary = calc_max_flow(g, 0, 2, return_summary=True)
        >>> summary.min_cut
        ((1, 2, 5),)
    """
    if isinstance(graph, Graph):
        residual = ResidualGraph.from_graph(graph)
    elif copy_graph:
        residual = graph.copy()
    else:
        residual = graph

    for role, vertex in (("source", src_node), ("sink", dst_node)):
        if not 0 <= vertex < residual.num_vertices:
            raise ValueError(
                f"{role.capitalize()} {vertex} is not in the network "
                f"(vertices are 0..{residual.num_vertices - 1})."
            )

    if search is None:
        search = ALGO_CONFIG.default_augment_search
    find_path = find_path_dfs if search == AugmentSearch.DFS else find_path_bfs
    limit = ALGO_CONFIG.resolve_max_augmentations(max_augmentations)

    total_flow: Cost = 0
    augmentations = 0
    completed = True

    # Degenerate case (s == t): conservation forces the net surplus to zero
    if src_node != dst_node:
        while True:
            if limit is not None and augmentations >= limit:
                # Only incomplete if another path actually exists
                if find_path(residual, src_node, dst_node) is not None:
                    completed = False
                    logger.warning(
                        "Max-flow %s->%s stopped after %d augmentations (limit reached); "
                        "flow %s is a lower bound",
                        src_node,
                        dst_node,
                        augmentations,
                        total_flow,
                    )
                break
            path = find_path(residual, src_node, dst_node)
            if path is None:
                break
            amount = residual.bottleneck(path)
            residual.augment(path, amount)
            total_flow += amount
            augmentations += 1
            if augmentations % ALGO_CONFIG.progress_log_interval == 0:
                logger.debug(
                    "Max-flow %s->%s: %d augmentations, flow so far %s",
                    src_node,
                    dst_node,
                    augmentations,
                    total_flow,
                )

    logger.debug(
        "Max-flow %s->%s via %s: flow %s in %d augmentations",
        src_node,
        dst_node,
        search.name,
        total_flow,
        augmentations,
    )

    if not (return_summary or return_graph):
        return total_flow

    ret: list = [total_flow]
    if return_summary:
        ret.append(
            _build_summary(residual, src_node, total_flow, augmentations, completed)
        )
    if return_graph:
        ret.append(residual)
    return tuple(ret)


def ford_fulkerson(graph: FlowNetwork, src_node: VertexID, dst_node: VertexID) -> Cost:
    """Maximum flow using depth-first augmenting paths."""
    return calc_max_flow(graph, src_node, dst_node, search=AugmentSearch.DFS)


def edmonds_karp(graph: FlowNetwork, src_node: VertexID, dst_node: VertexID) -> Cost:
    """Maximum flow using breadth-first (shortest) augmenting paths."""
    return calc_max_flow(graph, src_node, dst_node, search=AugmentSearch.BFS)
