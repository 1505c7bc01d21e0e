"""Bipartite checks by BFS 2-coloring."""

from __future__ import annotations

from collections import deque
from typing import List, Optional

from netalgo.graph.adjacency import Graph
from netalgo.types.base import VertexID

UNCOLORED = -1


def _color_component(graph: Graph, source: VertexID, colors: List[int]) -> bool:
    """Color ``source``'s component in place; stop at the first conflict."""
    colors[source] = 1
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in graph.neighbors(u):
            if colors[v] == UNCOLORED:
                colors[v] = 1 - colors[u]
                queue.append(v)
            elif colors[v] == colors[u]:
                return False
    return True


def is_bipartite(graph: Graph, source: VertexID) -> bool:
    """
    Check whether the component reachable from ``source`` is 2-colorable.

    Only that component is examined; run per component (or use
    ``is_bipartite_graph``) for a whole-graph answer. The search stops at the
    first edge joining two same-colored vertices.

    Args:
        graph: Undirected graph stored as pairs of directed edges.
        source: Vertex the BFS starts from.

    Returns:
        bool: True if no conflicting edge was found.

    Raises:
        ValueError: If ``source`` is not in the graph.
    """
    graph.check_vertex(source, "source")
    colors = [UNCOLORED] * graph.num_vertices
    return _color_component(graph, source, colors)


def two_coloring(graph: Graph) -> Optional[List[int]]:
    """
    Return a 0/1 color per vertex covering every component, or None.

    Each uncolored vertex starts a fresh BFS with color 1.
    """
    colors = [UNCOLORED] * graph.num_vertices
    for v in range(graph.num_vertices):
        if colors[v] == UNCOLORED and not _color_component(graph, v, colors):
            return None
    return colors


def is_bipartite_graph(graph: Graph) -> bool:
    """Check bipartiteness across all components."""
    return two_coloring(graph) is not None
