"""Single-source shortest paths: Dijkstra, Bellman-Ford and unweighted BFS."""

from __future__ import annotations

from collections import deque
from heapq import heappop, heappush
from typing import List, Optional, Tuple

from netalgo.graph.adjacency import Graph
from netalgo.logging import get_logger
from netalgo.types.base import INF, NO_PARENT, Cost, VertexID
from netalgo.types.dto import ShortestPaths

logger = get_logger(__name__)


def dijkstra(graph: Graph, src_node: VertexID) -> ShortestPaths:
    """
    Compute shortest distances from ``src_node`` with Dijkstra's algorithm.

    Edge weights must be non-negative. This is not checked: a finalized vertex
    is never re-relaxed, so negative weights give silently wrong distances.

    The frontier is a binary heap without decrease-key; a popped entry whose
    cost exceeds the vertex's current best distance is stale and skipped.

    Args:
        graph: Directed graph with non-negative weights.
        src_node: Source vertex.

    Returns:
        ShortestPaths: Distances (``INF`` for unreachable vertices) and parents.

    Raises:
        ValueError: If ``src_node`` is not in the graph.

    Complexity:
        O((V + E) log V).
    """
    graph.check_vertex(src_node, "source")

    costs: List[Cost] = [INF] * graph.num_vertices
    pred: List[VertexID] = [NO_PARENT] * graph.num_vertices
    costs[src_node] = 0
    min_pq: List[Tuple[Cost, VertexID]] = [(0, src_node)]
    stale = 0

    while min_pq:
        current_cost, node_id = heappop(min_pq)
        if current_cost > costs[node_id]:
            stale += 1
            continue

        for edge in graph.out_edges(node_id):
            new_cost = current_cost + edge.weight
            if new_cost < costs[edge.target]:
                costs[edge.target] = new_cost
                pred[edge.target] = node_id
                heappush(min_pq, (new_cost, edge.target))

    logger.debug("Dijkstra from %s finished (%d stale heap entries skipped)", src_node, stale)
    return ShortestPaths(src_node, tuple(costs), tuple(pred))


def bellman_ford(graph: Graph, src_node: VertexID) -> Optional[ShortestPaths]:
    """
    Compute shortest distances from ``src_node`` allowing negative weights.

    Every edge is relaxed up to V-1 times (stopping early once a pass changes
    nothing). One more pass follows; if any edge still relaxes, a negative
    cycle is reachable from the source and no distances are returned.

    Args:
        graph: Directed graph, weights may be negative.
        src_node: Source vertex.

    Returns:
        Optional[ShortestPaths]: Distances and parents, or None if a negative
        cycle is reachable from ``src_node``.

    Raises:
        ValueError: If ``src_node`` is not in the graph.

    Complexity:
        O(V * E).
    """
    graph.check_vertex(src_node, "source")
    num_vertices = graph.num_vertices

    costs: List[Cost] = [INF] * num_vertices
    pred: List[VertexID] = [NO_PARENT] * num_vertices
    costs[src_node] = 0

    for _ in range(num_vertices - 1):
        changed = False
        for edge in graph.edges():
            base = costs[edge.source]
            if base == INF:
                continue
            if base + edge.weight < costs[edge.target]:
                costs[edge.target] = base + edge.weight
                pred[edge.target] = edge.source
                changed = True
        if not changed:
            break

    for edge in graph.edges():
        base = costs[edge.source]
        if base != INF and base + edge.weight < costs[edge.target]:
            logger.warning(
                "Negative weight cycle reachable from %s (edge %s->%s still relaxes)",
                src_node,
                edge.source,
                edge.target,
            )
            return None

    return ShortestPaths(src_node, tuple(costs), tuple(pred))


def bfs_shortest_paths(graph: Graph, src_node: VertexID) -> ShortestPaths:
    """
    Compute hop-count distances from ``src_node``, ignoring edge weights.

    Args:
        graph: Directed graph; add both directions for undirected input.
        src_node: Source vertex.

    Returns:
        ShortestPaths: Edge-count distances and BFS-tree parents.

    Raises:
        ValueError: If ``src_node`` is not in the graph.
    """
    graph.check_vertex(src_node, "source")

    costs: List[Cost] = [INF] * graph.num_vertices
    pred: List[VertexID] = [NO_PARENT] * graph.num_vertices
    costs[src_node] = 0
    queue = deque([src_node])

    while queue:
        node_id = queue.popleft()
        for neighbor_id in graph.neighbors(node_id):
            if costs[neighbor_id] == INF:
                costs[neighbor_id] = costs[node_id] + 1
                pred[neighbor_id] = node_id
                queue.append(neighbor_id)

    return ShortestPaths(src_node, tuple(costs), tuple(pred))
