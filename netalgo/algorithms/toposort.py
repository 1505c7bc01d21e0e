"""Topological sorting: Kahn's algorithm and DFS post-order reversal.

Both return an empty list when the graph has a cycle. They may produce
different orders; each is a valid topological order of a DAG.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator, List, Tuple

from netalgo.graph.adjacency import Graph
from netalgo.logging import get_logger
from netalgo.types.base import VertexID, VertexState

logger = get_logger(__name__)


def kahn_topological_sort(graph: Graph) -> List[VertexID]:
    """
    Order vertices by repeatedly removing one with in-degree zero.

    Args:
        graph: Directed graph.

    Returns:
        List[VertexID]: A topological order of all V vertices, or ``[]`` if
        fewer than V vertices could be removed (a cycle exists).
    """
    indegree = graph.in_degrees()
    queue = deque(v for v in range(graph.num_vertices) if indegree[v] == 0)
    order: List[VertexID] = []

    while queue:
        u = queue.popleft()
        order.append(u)
        for v in graph.neighbors(u):
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)

    if len(order) != graph.num_vertices:
        logger.debug(
            "Cycle detected: only %d of %d vertices ordered",
            len(order),
            graph.num_vertices,
        )
        return []
    return order


def dfs_topological_sort(graph: Graph) -> List[VertexID]:
    """
    Order vertices by reversing the DFS finish order.

    A vertex finishes after all its descendants. Meeting an in-progress
    vertex means a back edge, hence a cycle.

    Args:
        graph: Directed graph.

    Returns:
        List[VertexID]: A topological order of all V vertices, or ``[]`` if
        the graph has a cycle.
    """
    n = graph.num_vertices
    state = [VertexState.UNVISITED] * n
    finished: List[VertexID] = []

    for root in range(n):
        if state[root] != VertexState.UNVISITED:
            continue
        state[root] = VertexState.IN_PROGRESS
        frames: List[Tuple[VertexID, Iterator[VertexID]]] = [
            (root, iter(graph.neighbors(root)))
        ]
        while frames:
            u, neighbors = frames[-1]
            for v in neighbors:
                if state[v] == VertexState.UNVISITED:
                    state[v] = VertexState.IN_PROGRESS
                    frames.append((v, iter(graph.neighbors(v))))
                    break
                if state[v] == VertexState.IN_PROGRESS:
                    logger.debug("Cycle detected: back edge (%s, %s)", u, v)
                    return []
            else:
                state[u] = VertexState.DONE
                finished.append(u)
                frames.pop()

    finished.reverse()
    return finished
