"""Three-color DFS edge classification."""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from netalgo.graph.adjacency import Graph
from netalgo.types.base import NO_PARENT, EdgeKind, VertexID, VertexState
from netalgo.types.dto import ClassifiedEdge


def classify_edges(graph: Graph) -> List[ClassifiedEdge]:
    """
    Classify every edge met by a DFS over all vertices.

    For an edge ``(u, v)`` seen while ``u`` is being explored:

    * ``TREE`` if ``v`` is unvisited (the DFS descends into ``v``);
    * ``TWO_WAY`` if ``v`` is in progress and is ``u``'s DFS parent;
    * ``BACK`` if ``v`` is in progress otherwise, which closes a cycle;
    * ``FORWARD_CROSS`` if ``v`` is already done.

    Roots are tried in vertex order, so disconnected parts are covered.

    Args:
        graph: Directed graph.

    Returns:
        List[ClassifiedEdge]: One entry per edge, in DFS encounter order.
    """
    n = graph.num_vertices
    state = [VertexState.UNVISITED] * n
    dfs_parent = [NO_PARENT] * n
    result: List[ClassifiedEdge] = []

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
                    result.append(ClassifiedEdge(u, v, EdgeKind.TREE))
                    dfs_parent[v] = u
                    state[v] = VertexState.IN_PROGRESS
                    frames.append((v, iter(graph.neighbors(v))))
                    break
                if state[v] == VertexState.IN_PROGRESS:
                    kind = EdgeKind.TWO_WAY if dfs_parent[u] == v else EdgeKind.BACK
                    result.append(ClassifiedEdge(u, v, kind))
                else:
                    result.append(ClassifiedEdge(u, v, EdgeKind.FORWARD_CROSS))
            else:
                state[u] = VertexState.DONE
                frames.pop()

    return result


def count_edge_kinds(edges: List[ClassifiedEdge]) -> Dict[EdgeKind, int]:
    """Tally classified edges by kind (every kind present, possibly 0)."""
    counts = {kind: 0 for kind in EdgeKind}
    for e in edges:
        counts[e.kind] += 1
    return counts
