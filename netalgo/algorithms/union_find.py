"""Disjoint-set forest with path compression and union by rank."""

from __future__ import annotations

from typing import List

from netalgo.types.base import VertexID


class UnionFind:
    """
    Disjoint sets over dense ids ``0..n-1``.

    A root is an element that is its own parent. ``rank`` is an upper bound
    on subtree height and only decides which root is grafted under the other.

    Attributes:
        parent: Parent pointer per element.
        rank: Height bound per root.
    """

    def __init__(self, n: int = 0) -> None:
        self.parent: List[VertexID] = []
        self.rank: List[int] = []
        self._num_sets: int = 0
        self.make_set(n)

    def __len__(self) -> int:
        return len(self.parent)

    def make_set(self, n: int = 1) -> None:
        """
        Append ``n`` singleton sets.

        Raises:
            ValueError: If ``n`` is negative.
        """
        if n < 0:
            raise ValueError(f"Cannot create a negative number of sets ({n})")
        start = len(self.parent)
        self.parent.extend(range(start, start + n))
        self.rank.extend([0] * n)
        self._num_sets += n

    def find(self, x: VertexID) -> VertexID:
        """Return the representative of ``x``'s set, compressing the path to it."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # Re-point every node on the path directly at the root
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: VertexID, y: VertexID) -> bool:
        """
        Merge the sets containing ``x`` and ``y``.

        Returns:
            bool: True if two sets were merged, False if already the same set.
        """
        rx = self.find(x)
        ry = self.find(y)
        if rx == ry:
            return False
        if self.rank[rx] > self.rank[ry]:
            self.parent[ry] = rx
        else:
            self.parent[rx] = ry
            if self.rank[rx] == self.rank[ry]:
                self.rank[ry] += 1
        self._num_sets -= 1
        return True

    def same_set(self, x: VertexID, y: VertexID) -> bool:
        return self.find(x) == self.find(y)

    def count_sets(self) -> int:
        """Return the number of distinct roots."""
        return self._num_sets
