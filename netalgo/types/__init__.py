"""Type aliases, sentinels and result containers."""

from netalgo.types.base import (
    INF,
    NO_PARENT,
    AugmentSearch,
    Cost,
    EdgeKind,
    MstMethod,
    VertexID,
    VertexState,
)
from netalgo.types.dto import (
    ClassifiedEdge,
    CutPoints,
    FlowSummary,
    GraphStats,
    ShortestPaths,
    SpanningTree,
)

__all__ = [
    "INF",
    "NO_PARENT",
    "AugmentSearch",
    "Cost",
    "EdgeKind",
    "MstMethod",
    "VertexID",
    "VertexState",
    "ClassifiedEdge",
    "CutPoints",
    "FlowSummary",
    "GraphStats",
    "ShortestPaths",
    "SpanningTree",
]
