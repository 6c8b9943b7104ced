"""Solve context shared by the construction and refinement stages."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Collection, Dict, Iterable, List

import numpy as np

from .cycles import matrix_has_cycle
from .geometry import as_points, pairwise_distances, validate_threshold
from .model import Point

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class FVSProblem:
    """Immutable input of one solve plus its cached distance matrix.

    ``vertices`` lists each distinct point once in first-seen order; ``copies``
    maps a vertex to every input position holding it. Removing a vertex
    removes all of its copies.
    """

    points: List[Point]
    threshold: float
    vertices: List[Point] = field(init=False)
    copies: Dict[Point, List[int]] = field(init=False)
    distances: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        copies: Dict[Point, List[int]] = {}
        for position, point in enumerate(self.points):
            copies.setdefault(point, []).append(position)
        self.copies = copies
        self.vertices = list(copies)
        self.distances = pairwise_distances(self.points)
        logger.debug(
            "Prepared problem with %d point(s), %d distinct, threshold=%g",
            len(self.points),
            len(self.vertices),
            self.threshold,
        )

    @classmethod
    def from_points(cls, points: Iterable[object], threshold: object) -> "FVSProblem":
        return cls(as_points(points), validate_threshold(threshold))

    @property
    def size(self) -> int:
        return len(self.vertices)

    def __contains__(self, point: object) -> bool:
        return point in self.copies

    def remaining_positions(self, removed: Collection[Point]) -> List[int]:
        """Input positions that survive removing every vertex in ``removed``."""

        removed_set = set(removed)
        return [pos for pos, point in enumerate(self.points) if point not in removed_set]

    def remaining_vertices(self, removed: Collection[Point]) -> List[Point]:
        removed_set = set(removed)
        return [vertex for vertex in self.vertices if vertex not in removed_set]

    def has_cycles_among(self, positions: List[int]) -> bool:
        if len(positions) < 3:
            return False
        index = np.asarray(positions, dtype=np.intp)
        return matrix_has_cycle(self.distances[np.ix_(index, index)], self.threshold)

    def is_valid(self, fvs: Collection[Point]) -> bool:
        """Return ``True`` when removing ``fvs`` leaves an acyclic graph."""

        return not self.has_cycles_among(self.remaining_positions(fvs))

    def degrees(self, vertices: List[Point], removed: Collection[Point]) -> np.ndarray:
        """Neighbour counts of ``vertices`` within the graph left after ``removed``.

        Coincident copies of a vertex count as its neighbours.
        """

        if not vertices:
            return np.zeros(0, dtype=int)
        rows = np.asarray([self.copies[vertex][0] for vertex in vertices], dtype=np.intp)
        cols = np.asarray(self.remaining_positions(removed), dtype=np.intp)
        if cols.size == 0:
            return np.zeros(len(vertices), dtype=int)
        within = self.distances[np.ix_(rows, cols)] < self.threshold
        # Each vertex sees its own first copy at distance zero.
        return within.sum(axis=1) - 1

    def adjacency(self, positions: List[int]) -> np.ndarray:
        """Boolean adjacency among ``positions`` with an empty diagonal."""

        index = np.asarray(positions, dtype=np.intp)
        adj = self.distances[np.ix_(index, index)] < self.threshold
        np.fill_diagonal(adj, False)
        return adj


__all__ = ["FVSProblem"]
