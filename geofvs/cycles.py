"""Cycle detection on threshold graphs using a throwaway union-find."""

from __future__ import annotations

import logging
from typing import Iterable, List

import numpy as np

from .geometry import as_points, pairwise_distances, validate_threshold

logger = logging.getLogger(__name__)


class UnionFind:
    """Disjoint-set forest over ``0..size-1`` with path compression and union by rank."""

    __slots__ = ("parent", "rank")

    def __init__(self, size: int) -> None:
        self.parent: List[int] = list(range(size))
        self.rank: List[int] = [0] * size

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the components of ``x`` and ``y``; ``False`` when already joined."""

        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        if self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        elif self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1
        return True


def matrix_has_cycle(distances: np.ndarray, threshold: float) -> bool:
    """Return ``True`` when the graph implied by ``distances`` contains a cycle.

    Pairs ``(i, j)`` with ``i < j`` are visited in row-major order and the scan
    stops at the first edge that closes a loop.
    """

    size = int(distances.shape[0])
    if size < 3:
        return False
    rows, cols = np.nonzero(np.triu(distances < threshold, k=1))
    # A forest on n vertices has at most n - 1 edges.
    if rows.size >= size:
        return True
    uf = UnionFind(size)
    for i, j in zip(rows.tolist(), cols.tolist()):
        if not uf.union(i, j):
            return True
    return False


def has_cycles(points: Iterable[object], threshold: float) -> bool:
    """Return ``True`` if the threshold graph over ``points`` has a cycle.

    Points are taken position by position, so coincident copies count as
    distinct, mutually adjacent vertices.
    """

    normalized = as_points(points)
    return matrix_has_cycle(pairwise_distances(normalized), validate_threshold(threshold))


__all__ = ["UnionFind", "has_cycles", "matrix_has_cycle"]
