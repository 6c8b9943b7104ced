import math

import numpy as np
import pytest

from geofvs import InputError, UnionFind, adjacent, distance, has_cycles


def _triangle():
    return [(0.0, 0.0), (1.0, 0.0), (0.5, math.sqrt(3.0) / 2.0)]


def test_union_find_detects_repeated_connection():
    uf = UnionFind(4)
    assert uf.union(0, 1)
    assert uf.union(2, 3)
    assert uf.union(1, 3)
    assert not uf.union(0, 2)
    assert uf.find(0) == uf.find(3)


def test_union_find_keeps_separate_components():
    uf = UnionFind(3)
    uf.union(0, 1)
    assert uf.find(0) == uf.find(1)
    assert uf.find(2) == 2


def test_triangle_is_a_cycle():
    assert has_cycles(_triangle(), 2)


def test_triangle_below_threshold_has_no_edges():
    assert not has_cycles(_triangle(), 0.5)


def test_square_cycle_needs_side_edges():
    square = [(0, 0), (1, 0), (1, 1), (0, 1)]
    assert has_cycles(square, 1.1)
    # sides exactly at the threshold are not edges
    assert not has_cycles(square, 1)


def test_path_is_a_forest():
    path = [(0, 0), (1, 0), (2, 0), (3, 0)]
    assert not has_cycles(path, 1.5)
    assert has_cycles(path, 2.5)


@pytest.mark.parametrize("points", [[], [(0, 0)], [(0, 0), (0, 0)], [(0, 0), (5, 5)]])
def test_fewer_than_three_points_never_cycle(points):
    assert not has_cycles(points, 100)


def test_coincident_copies_are_mutually_adjacent():
    assert has_cycles([(0, 0), (0, 0), (0, 0)], 1)
    assert has_cycles([(0, 0), (0, 0), (0.5, 0)], 1)
    assert not has_cycles([(0, 0), (0, 0), (5, 0)], 1)


def test_star_is_a_forest():
    star = [(0, 0), (1, 0), (-1, 0), (0, 1), (0, -1)]
    assert not has_cycles(star, 1.2)


def test_boundary_pair_through_midpoint_is_a_path():
    a, b = (27.392, -46.043), (-91.805, -96.694)
    c = ((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0)
    threshold = distance(a, b)
    assert not adjacent(a, b, threshold)
    assert adjacent(a, c, threshold) and adjacent(b, c, threshold)
    assert not has_cycles([a, b, c], threshold)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_cycle_detector_agrees_with_edge_predicate(seed):
    rng = np.random.default_rng(seed)
    points = [tuple(row) for row in rng.uniform(-100.0, 100.0, size=(30, 2)).round(3).tolist()]
    for a, b in zip(points[::2], points[1::2]):
        c = ((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0)
        for threshold in (distance(a, b), np.nextafter(distance(a, b), np.inf)):
            threshold = float(threshold)
            triangle = adjacent(a, b, threshold) and adjacent(a, c, threshold) and adjacent(b, c, threshold)
            assert has_cycles([a, b, c], threshold) == triangle


@pytest.mark.parametrize("threshold", [0, -1, math.nan])
def test_has_cycles_rejects_bad_threshold(threshold):
    with pytest.raises(InputError):
        has_cycles(_triangle(), threshold)
