"""Tarjan's strongly connected components."""

from __future__ import annotations

from typing import Iterator, List, Tuple

from netalgo.graph.adjacency import Graph
from netalgo.logging import get_logger
from netalgo.types.base import VertexID

logger = get_logger(__name__)

UNVISITED = -1


def tarjan_scc(graph: Graph) -> List[List[VertexID]]:
    """
    Find strongly connected components with Tarjan's low-link DFS.

    Each vertex gets a discovery number ``dfs_num`` and a low-link
    ``dfs_low`` and is pushed on a component stack when discovered. A child's
    low-link flows into its parent only while the child is still on the stack,
    so values from already-emitted components never leak across. When
    ``dfs_low[u] == dfs_num[u]`` the stack is popped down to ``u`` and the
    popped vertices form one component.

    The DFS keeps an explicit stack of ``(vertex, neighbor iterator)``
    frames, so depth is bounded by memory rather than the interpreter's
    recursion limit.

    Args:
        graph: Directed graph.

    Returns:
        List[List[VertexID]]: Components in emission order, which is reverse
        topological order of the condensation. Members are listed in pop order.
        Every vertex appears in exactly one component.
    """
    n = graph.num_vertices
    dfs_num = [UNVISITED] * n
    dfs_low = [0] * n
    on_stack = [False] * n
    stack: List[VertexID] = []
    components: List[List[VertexID]] = []
    counter = 0

    for root in range(n):
        if dfs_num[root] != UNVISITED:
            continue

        dfs_num[root] = dfs_low[root] = counter
        counter += 1
        stack.append(root)
        on_stack[root] = True
        frames: List[Tuple[VertexID, Iterator[VertexID]]] = [
            (root, iter(graph.neighbors(root)))
        ]

        while frames:
            u, neighbors = frames[-1]
            for v in neighbors:
                if dfs_num[v] == UNVISITED:
                    dfs_num[v] = dfs_low[v] = counter
                    counter += 1
                    stack.append(v)
                    on_stack[v] = True
                    frames.append((v, iter(graph.neighbors(v))))
                    break
                if on_stack[v]:
                    dfs_low[u] = min(dfs_low[u], dfs_low[v])
            else:
                frames.pop()
                if dfs_low[u] == dfs_num[u]:
                    component: List[VertexID] = []
                    while True:
                        w = stack.pop()
                        on_stack[w] = False
                        component.append(w)
                        if w == u:
                            break
                    components.append(component)
                    logger.debug("SCC %d: %s", len(components), component)
                if frames:
                    parent = frames[-1][0]
                    if on_stack[u]:
                        dfs_low[parent] = min(dfs_low[parent], dfs_low[u])

    return components
