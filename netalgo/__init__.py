"""netalgo: classic graph algorithms on dense integer-id graphs.

Primary API:
    Graph, AdjacencyMatrix, ResidualGraph - graph representations
    dijkstra(), bellman_ford(), floyd_warshall() - shortest paths
    kruskal(), prim() - minimum spanning trees
    tarjan_scc(), find_cut_points(), classify_edges() - DFS structure
    kahn_topological_sort(), dfs_topological_sort() - DAG ordering
    calc_max_flow(), ford_fulkerson(), edmonds_karp() - maximum flow
    from_networkx() / to_networkx() - NetworkX interoperability

Example:
    from netalgo import Graph, dijkstra, edmonds_karp

    g = Graph()
    g.add_edge(0, 1, 4)
    g.add_edge(0, 2, 1)
    g.add_edge(2, 1, 2)

    dijkstra(g, 0).as_dict()   # {0: 0, 1: 3, 2: 1}
    edmonds_karp(g, 0, 1)      # 5
"""

from __future__ import annotations

from netalgo import cli, logging
from netalgo._version import __version__
from netalgo.algorithms import (
    AllPairsShortestPaths,
    UnionFind,
    bellman_ford,
    bfs_shortest_paths,
    calc_max_flow,
    cheapest_cycle,
    cheapest_negative_cycle,
    classify_edges,
    dfs_topological_sort,
    diameter,
    dijkstra,
    edmonds_karp,
    find_cut_points,
    floyd_warshall,
    ford_fulkerson,
    is_bipartite,
    is_bipartite_graph,
    kahn_topological_sort,
    kruskal,
    mst_cost,
    prim,
    tarjan_scc,
    transitive_closure,
    two_coloring,
)
from netalgo.graph import (
    AdjacencyMatrix,
    Edge,
    Graph,
    NodeMap,
    ResidualGraph,
    from_networkx,
    to_networkx,
)
from netalgo.types.base import INF, AugmentSearch, EdgeKind, MstMethod
from netalgo.types.dto import (
    ClassifiedEdge,
    CutPoints,
    FlowSummary,
    ShortestPaths,
    SpanningTree,
)

__all__ = [
    # Version
    "__version__",
    # Graphs
    "Graph",
    "Edge",
    "AdjacencyMatrix",
    "ResidualGraph",
    # Algorithms
    "dijkstra",
    "bellman_ford",
    "bfs_shortest_paths",
    "floyd_warshall",
    "AllPairsShortestPaths",
    "transitive_closure",
    "cheapest_cycle",
    "cheapest_negative_cycle",
    "diameter",
    "kruskal",
    "prim",
    "mst_cost",
    "UnionFind",
    "tarjan_scc",
    "find_cut_points",
    "classify_edges",
    "is_bipartite",
    "is_bipartite_graph",
    "two_coloring",
    "kahn_topological_sort",
    "dfs_topological_sort",
    "calc_max_flow",
    "ford_fulkerson",
    "edmonds_karp",
    # Types
    "INF",
    "AugmentSearch",
    "EdgeKind",
    "MstMethod",
    "ShortestPaths",
    "SpanningTree",
    "CutPoints",
    "ClassifiedEdge",
    "FlowSummary",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
