"""Named algorithm runners with JSON-friendly results.

Each runner takes a built ``Graph`` and ``RunParams`` and returns a plain
dictionary. The CLI looks runners up by name in ``ALGORITHM_REGISTRY``.
Infinite distances are reported as ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from netalgo.algorithms.all_pairs import floyd_warshall
from netalgo.algorithms.bipartite import is_bipartite, two_coloring
from netalgo.algorithms.cut_points import find_cut_points
from netalgo.algorithms.edge_classify import classify_edges
from netalgo.algorithms.max_flow import calc_max_flow
from netalgo.algorithms.mst import kruskal, prim
from netalgo.algorithms.scc import tarjan_scc
from netalgo.algorithms.shortest_path import bellman_ford, bfs_shortest_paths, dijkstra
from netalgo.algorithms.toposort import dfs_topological_sort, kahn_topological_sort
from netalgo.graph.adjacency import Graph
from netalgo.types.base import INF, AugmentSearch, Cost, VertexID
from netalgo.types.dto import ShortestPaths, SpanningTree


@dataclass
class RunParams:
    """Parameters shared by the named runners; each uses what it needs."""

    source: VertexID = 0
    sink: Optional[VertexID] = None
    start: VertexID = 0
    max_augmentations: Optional[int] = None


AlgorithmRunner = Callable[[Graph, RunParams], Dict[str, Any]]

# Registry for named algorithm runners
ALGORITHM_REGISTRY: Dict[str, AlgorithmRunner] = {}


def register_algorithm(name: str):
    """Return a decorator that registers a runner under ``name``.

    Args:
        name: Registry key used by ``netalgo run --algorithm``.

    Returns:
        A function decorator that adds the runner to ``ALGORITHM_REGISTRY``.
    """

    def decorator(func: AlgorithmRunner) -> AlgorithmRunner:
        ALGORITHM_REGISTRY[name] = func
        return func

    return decorator


def get_runner(name: str) -> AlgorithmRunner:
    """Look up a runner by name.

    Raises:
        ValueError: If no runner is registered under ``name``.
    """
    try:
        return ALGORITHM_REGISTRY[name]
    except KeyError:
        valid = ", ".join(sorted(ALGORITHM_REGISTRY))
        raise ValueError(f"Unknown algorithm '{name}'. Valid names are: {valid}") from None


def _finite(value: Cost) -> Optional[Cost]:
    return None if value >= INF else int(value)


def _paths_payload(result: ShortestPaths) -> Dict[str, Any]:
    return {
        "source": result.source,
        "distances": [_finite(d) for d in result.distances],
        "parents": list(result.parents),
    }


def _tree_payload(tree: SpanningTree) -> Dict[str, Any]:
    return {"cost": tree.cost, "edges": [list(e) for e in tree.edges]}


def _require_sink(params: RunParams) -> VertexID:
    if params.sink is None:
        raise ValueError("This algorithm requires a sink vertex (--sink)")
    return params.sink


@register_algorithm("dijkstra")
def _run_dijkstra(graph: Graph, params: RunParams) -> Dict[str, Any]:
    return _paths_payload(dijkstra(graph, params.source))


@register_algorithm("bellman-ford")
def _run_bellman_ford(graph: Graph, params: RunParams) -> Dict[str, Any]:
    result = bellman_ford(graph, params.source)
    if result is None:
        return {"source": params.source, "negative_cycle": True}
    return {**_paths_payload(result), "negative_cycle": False}


@register_algorithm("bfs")
def _run_bfs(graph: Graph, params: RunParams) -> Dict[str, Any]:
    return _paths_payload(bfs_shortest_paths(graph, params.source))


@register_algorithm("floyd-warshall")
def _run_floyd_warshall(graph: Graph, params: RunParams) -> Dict[str, Any]:
    result = floyd_warshall(graph)
    if result is None:
        return {"negative_cycle": True}
    return {
        "negative_cycle": False,
        "distances": [[_finite(int(d)) for d in row] for row in result.dist],
        "diameter": result.diameter(),
        "components": result.strongly_connected_components(),
    }


@register_algorithm("kruskal")
def _run_kruskal(graph: Graph, params: RunParams) -> Dict[str, Any]:
    return _tree_payload(kruskal(graph.num_vertices, graph.edges()))


@register_algorithm("prim")
def _run_prim(graph: Graph, params: RunParams) -> Dict[str, Any]:
    return _tree_payload(prim(graph, params.start))


@register_algorithm("scc")
def _run_scc(graph: Graph, params: RunParams) -> Dict[str, Any]:
    return {"components": tarjan_scc(graph)}


@register_algorithm("cut-points")
def _run_cut_points(graph: Graph, params: RunParams) -> Dict[str, Any]:
    result = find_cut_points(graph)
    return {
        "articulation_points": sorted(result.articulation_points),
        "bridges": [list(b) for b in result.bridges],
    }


@register_algorithm("classify-edges")
def _run_classify_edges(graph: Graph, params: RunParams) -> Dict[str, Any]:
    return {
        "edges": [
            {"source": e.source, "target": e.target, "kind": e.kind.name}
            for e in classify_edges(graph)
        ]
    }


@register_algorithm("bipartite")
def _run_bipartite(graph: Graph, params: RunParams) -> Dict[str, Any]:
    return {
        "source": params.source,
        "bipartite_from_source": is_bipartite(graph, params.source),
        "coloring": two_coloring(graph),
    }


@register_algorithm("topo-kahn")
def _run_topo_kahn(graph: Graph, params: RunParams) -> Dict[str, Any]:
    order = kahn_topological_sort(graph)
    return {"order": order, "has_cycle": not order and graph.num_vertices > 0}


@register_algorithm("topo-dfs")
def _run_topo_dfs(graph: Graph, params: RunParams) -> Dict[str, Any]:
    order = dfs_topological_sort(graph)
    return {"order": order, "has_cycle": not order and graph.num_vertices > 0}


def _run_flow(graph: Graph, params: RunParams, search: AugmentSearch) -> Dict[str, Any]:
    flow, summary = calc_max_flow(
        graph,
        params.source,
        _require_sink(params),
        search=search,
        return_summary=True,
        max_augmentations=params.max_augmentations,
    )
    return {
        "source": params.source,
        "sink": params.sink,
        "max_flow": flow,
        "min_cut": [list(e) for e in summary.min_cut],
        "source_side": sorted(summary.reachable),
        "augmentations": summary.augmentations,
        "completed": summary.completed,
    }


@register_algorithm("ford-fulkerson")
def _run_ford_fulkerson(graph: Graph, params: RunParams) -> Dict[str, Any]:
    return _run_flow(graph, params, AugmentSearch.DFS)


@register_algorithm("edmonds-karp")
def _run_edmonds_karp(graph: Graph, params: RunParams) -> Dict[str, Any]:
    return _run_flow(graph, params, AugmentSearch.BFS)


def algorithm_names() -> List[str]:
    return sorted(ALGORITHM_REGISTRY)
