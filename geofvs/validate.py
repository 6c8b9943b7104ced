"""Feasibility checks for candidate feedback vertex sets."""

from __future__ import annotations

from typing import Iterable, List

from .cycles import has_cycles
from .geometry import adjacent, as_point, as_points, validate_threshold
from .model import Point


def is_valid(all_points: Iterable[object], fvs: Iterable[object], threshold: float) -> bool:
    """Return ``True`` if removing ``fvs`` from ``all_points`` leaves no cycle.

    Removal is by value: every copy of a point listed in ``fvs`` is dropped.
    """

    threshold = validate_threshold(threshold)
    removed = set(as_points(fvs))
    remaining = [point for point in as_points(all_points) if point not in removed]
    return not has_cycles(remaining, threshold)


def neighbors(point: object, point_set: Iterable[object], threshold: float) -> List[Point]:
    """Points of ``point_set`` adjacent to ``point``, in enumeration order."""

    threshold = validate_threshold(threshold)
    center = as_point(point)
    return [other for other in as_points(point_set) if adjacent(center, other, threshold)]


__all__ = ["is_valid", "neighbors"]
