"""NetworkX graph conversion utilities.

Converts between NetworkX graphs with arbitrary hashable node labels and the
dense integer-vertex ``Graph`` the algorithms operate on.

Example:
    >>> import networkx as nx
    >>> from netalgo.graph.convert import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=4)
    >>> G.add_edge("B", "C", weight=2)
    >>>
    >>> graph, node_map = from_networkx(G)
    >>> graph.num_vertices
    3
    >>> G_out = to_networkx(graph, node_map)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Union

import networkx as nx

from netalgo.graph.adjacency import Graph
from netalgo.types.base import VertexID

NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and dense vertex ids.

    Attributes:
        to_index: Maps original node names to vertex ids.
        to_name: Maps vertex ids back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, VertexID] = field(default_factory=dict)
    to_name: Dict[VertexID, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names listed in id order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, vertices: List[VertexID]) -> List[Hashable]:
        """Translate a list of vertex ids back to node names."""
        return [self.to_name[v] for v in vertices]

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: int = 1,
    sort_nodes: bool = True,
) -> tuple[Graph, NodeMap]:
    """Convert a NetworkX graph to a dense-id ``Graph``.

    Undirected NetworkX graphs (``Graph``, ``MultiGraph``) become two directed
    edges per edge, matching the package's convention for undirected input.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        weight_attr: Edge attribute holding the weight (default: "weight").
        default_weight: Weight used when the attribute is missing.
        sort_nodes: If True, assign ids in ``str``-sorted node order for
            determinism; otherwise use NetworkX insertion order.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph.
    """
    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    node_names = sorted(G.nodes(), key=str) if sort_nodes else list(G.nodes())
    node_map = NodeMap.from_names(node_names)
    graph = Graph(len(node_names))

    undirected = not G.is_directed()
    for u, v, data in G.edges(data=True):
        weight = int(data.get(weight_attr, default_weight))
        src_idx = node_map.to_index[u]
        dst_idx = node_map.to_index[v]
        if undirected:
            graph.add_undirected_edge(src_idx, dst_idx, weight)
        else:
            graph.add_edge(src_idx, dst_idx, weight)

    return graph, node_map


def to_networkx(
    graph: Graph,
    node_map: Optional[NodeMap] = None,
    *,
    weight_attr: str = "weight",
) -> nx.MultiDiGraph:
    """Convert a ``Graph`` back to a NetworkX MultiDiGraph.

    Args:
        graph: Graph to convert.
        node_map: Optional NodeMap restoring original node names; without one,
            nodes are labelled by vertex id.
        weight_attr: Edge attribute name for the weight.

    Returns:
        nx.MultiDiGraph with one edge per directed ``Graph`` edge.
    """
    G = nx.MultiDiGraph()

    def name(v: VertexID) -> Any:
        if node_map is None:
            return v
        return node_map.to_name.get(v, v)

    G.add_nodes_from(name(v) for v in range(graph.num_vertices))
    for e in graph.edges():
        G.add_edge(name(e.source), name(e.target), **{weight_attr: e.weight})
    return G
