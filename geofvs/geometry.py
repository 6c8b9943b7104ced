"""Planar distance helpers and the threshold edge predicate."""

from __future__ import annotations

import math
import numbers
from typing import Iterable, List

import numpy as np

from .model import InputError, Point


def _coordinate(value: object, original: object) -> float:
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InputError(f"point coordinates must be real numbers, got {original!r}")
    if not math.isfinite(value):
        raise InputError(f"point coordinates must be finite, got {original!r}")
    return value


def as_point(value: object) -> Point:
    """Normalize an ``(x, y)`` pair into a hashable tuple."""

    if isinstance(value, np.ndarray):
        value = value.tolist()
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise InputError(f"expected an (x, y) pair, got {value!r}")
    x, y = value
    return (_coordinate(x, value), _coordinate(y, value))


def as_points(values: Iterable[object]) -> List[Point]:
    if isinstance(values, np.ndarray):
        if values.size == 0:
            return []
        values = values.tolist()
    return [as_point(value) for value in values]


def validate_threshold(threshold: object) -> float:
    """Return ``threshold`` as a float, rejecting non-positive values."""

    if isinstance(threshold, bool) or not isinstance(threshold, numbers.Real):
        raise InputError(f"edge threshold must be a real number, got {threshold!r}")
    value = float(threshold)
    if not math.isfinite(value) or value <= 0.0:
        raise InputError(f"edge threshold must be positive and finite, got {threshold!r}")
    return value


def _planar_distances(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Distances between rows of ``a`` and rows of ``b``; the only distance kernel."""

    diff = a[:, None, :] - b[None, :, :]
    return np.hypot(diff[..., 0], diff[..., 1])


def distance(a: Point, b: Point) -> float:
    first = np.asarray([a], dtype=float).reshape(1, 2)
    second = np.asarray([b], dtype=float).reshape(1, 2)
    return float(_planar_distances(first, second)[0, 0])


def adjacent(a: Point, b: Point, threshold: float) -> bool:
    """Edge predicate: distinct points strictly closer than ``threshold``."""

    return tuple(a) != tuple(b) and distance(a, b) < threshold


def pairwise_distances(points: List[Point]) -> np.ndarray:
    """Return the symmetric Euclidean distance matrix of ``points``.

    Entries match :func:`distance` bit for bit, so the cycle checks and
    :func:`adjacent` agree at the threshold boundary.
    """

    if not points:
        return np.zeros((0, 0), dtype=float)
    coords = np.asarray(points, dtype=float).reshape(-1, 2)
    return _planar_distances(coords, coords)


__all__ = [
    "adjacent",
    "as_point",
    "as_points",
    "distance",
    "pairwise_distances",
    "validate_threshold",
]
