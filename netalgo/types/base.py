"""Base aliases, sentinels and enums shared by the graph algorithms."""

from __future__ import annotations

from enum import IntEnum

#: Dense vertex identifier in ``[0, V)``.
VertexID = int

#: Edge weight, distance or capacity. Integer-valued throughout the package.
Cost = int

#: "Infinite" distance marker. Half of the largest signed 64-bit value, so the
#: sum of two sentinels still fits in an ``int64`` matrix cell.
INF: Cost = (2**63 - 1) // 2

#: Parent marker for the source vertex and for unreachable vertices.
NO_PARENT: VertexID = -1


class VertexState(IntEnum):
    """DFS color of a vertex during a three-state traversal."""

    UNVISITED = 0
    #: Discovered, descendants still being explored.
    IN_PROGRESS = 1
    #: All descendants finished.
    DONE = 2


class EdgeKind(IntEnum):
    """Classification of a directed edge ``(u, v)`` met during a DFS."""

    #: ``v`` was unvisited; the DFS descended along this edge.
    TREE = 1
    #: ``v`` is an in-progress ancestor other than ``u``'s DFS parent (cycle).
    BACK = 2
    #: ``v`` is ``u``'s DFS parent: the reciprocal half of a two-way pair.
    TWO_WAY = 3
    #: ``v`` was already finished.
    FORWARD_CROSS = 4


class AugmentSearch(IntEnum):
    """Traversal used to find augmenting paths in a residual graph."""

    #: Depth-first search (Ford-Fulkerson).
    DFS = 1
    #: Breadth-first search, shortest path by edge count (Edmonds-Karp).
    BFS = 2

    @classmethod
    def from_string(cls, value: str) -> "AugmentSearch":
        """Parse a string into an AugmentSearch enum value.

        Args:
            value: Case-insensitive member name ("dfs", "BFS").

        Returns:
            The corresponding AugmentSearch member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid augment search '{value}'. Valid values are: {valid}"
            ) from None


class MstMethod(IntEnum):
    """Minimum spanning tree algorithm selector."""

    KRUSKAL = 1
    PRIM = 2
