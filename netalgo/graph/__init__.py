"""Graph representations: adjacency list, dense matrix, residual network."""

from netalgo.graph.adjacency import Edge, Graph
from netalgo.graph.convert import NodeMap, from_networkx, to_networkx
from netalgo.graph.matrix import AdjacencyMatrix
from netalgo.graph.residual import ResidualEdge, ResidualGraph

__all__ = [
    "Edge",
    "Graph",
    "AdjacencyMatrix",
    "ResidualEdge",
    "ResidualGraph",
    "NodeMap",
    "from_networkx",
    "to_networkx",
]
