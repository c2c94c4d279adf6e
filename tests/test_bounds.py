import math

from feature_explorer.bounds import AxisBounds, compute_bounds
from feature_explorer.records import PointRecord


def _pt(x, y, i=0):
    return PointRecord(index=i, x=x, y=y)


def test_two_points_padded_by_five():
    bounds = compute_bounds([_pt(0, 0), _pt(10, 10, 1)])
    assert bounds == AxisBounds(x_min=-5, x_max=15, y_min=-5, y_max=15)


def test_empty_list_has_no_bounds():
    assert compute_bounds([]) is None


def test_single_point():
    bounds = compute_bounds([_pt(2.5, -1.0)], padding=1.0)
    assert bounds == AxisBounds(1.5, 3.5, -2.0, 0.0)


def test_custom_padding_and_ranges(points):
    bounds = compute_bounds(points, padding=0.5)
    assert bounds.x_range == [-2.5, 10.5]
    assert bounds.y_range == [-3.5, 10.5]
    assert all(math.isfinite(v) for v in bounds.x_range + bounds.y_range)


def test_recomputed_from_new_list(points):
    before = compute_bounds(points)
    after = compute_bounds(points + [_pt(100, 100, 99)])
    assert after.x_max == 105
    assert before.x_max == 15
