"""Graph algorithms operating on ``netalgo.graph`` structures."""

from netalgo.algorithms.all_pairs import (
    AllPairsShortestPaths,
    cheapest_cycle,
    cheapest_negative_cycle,
    diameter,
    floyd_warshall,
    minimax_paths,
    strongly_connected_components,
    transitive_closure,
)
from netalgo.algorithms.bipartite import is_bipartite, is_bipartite_graph, two_coloring
from netalgo.algorithms.cut_points import find_cut_points
from netalgo.algorithms.edge_classify import classify_edges, count_edge_kinds
from netalgo.algorithms.max_flow import calc_max_flow, edmonds_karp, ford_fulkerson
from netalgo.algorithms.mst import kruskal, mst_cost, prim
from netalgo.algorithms.scc import tarjan_scc
from netalgo.algorithms.shortest_path import bellman_ford, bfs_shortest_paths, dijkstra
from netalgo.algorithms.toposort import dfs_topological_sort, kahn_topological_sort
from netalgo.algorithms.union_find import UnionFind

__all__ = [
    "AllPairsShortestPaths",
    "UnionFind",
    "bellman_ford",
    "bfs_shortest_paths",
    "calc_max_flow",
    "cheapest_cycle",
    "cheapest_negative_cycle",
    "classify_edges",
    "count_edge_kinds",
    "dfs_topological_sort",
    "diameter",
    "dijkstra",
    "edmonds_karp",
    "find_cut_points",
    "floyd_warshall",
    "ford_fulkerson",
    "is_bipartite",
    "is_bipartite_graph",
    "kahn_topological_sort",
    "kruskal",
    "minimax_paths",
    "mst_cost",
    "prim",
    "strongly_connected_components",
    "tarjan_scc",
    "transitive_closure",
    "two_coloring",
]
