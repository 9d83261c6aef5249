import numpy as np
import pytest

from rc_core.errors import DegenerateSegment
from rc_core.segment import Segment, intersect
from rc_core.vector import Vector2

FLOOR = Segment(Vector2(0.0, 0.0), Vector2(10.0, 0.0), "floor")


def test_degenerate_segment_rejected():
    with pytest.raises(DegenerateSegment):
        Segment(Vector2(1.0, 1.0), Vector2(1.0, 1.0))
    with pytest.raises(ValueError):
        Segment.from_coords(2, 2, 2, 2)


def test_normals_are_unit_and_perpendicular():
    seg = Segment(Vector2(1.0, 1.0), Vector2(4.0, 5.0))
    d = seg.delta
    for n in (seg.normal_left, seg.normal_right):
        assert np.isclose(n.magnitude(), 1.0)
        assert np.isclose(n.dot(d), 0.0)
    assert np.allclose(seg.normal_left.as_array(), [-0.8, 0.6])
    assert np.allclose(seg.normal_right.as_array(), [0.8, -0.6])
    assert seg.return_normal() is seg.normal_right


def test_facing_normal_points_against_ray():
    assert FLOOR.facing_normal(Vector2(0.0, -1.0)) == Vector2(0.0, 1.0)
    assert FLOOR.facing_normal(Vector2(0.3, 1.0)) == Vector2(0.0, -1.0)


def test_segments_compare_by_identity():
    a = Segment(Vector2(0.0, 0.0), Vector2(1.0, 0.0))
    b = Segment(Vector2(0.0, 0.0), Vector2(1.0, 0.0))
    assert a != b
    assert a == a
    assert len({a, b}) == 2


def test_general_crossing():
    assert intersect(FLOOR, Vector2(5.0, 5.0), Vector2(0.0, -1.0), 100.0) == Vector2(5.0, 0.0)
    # direction magnitude does not matter
    assert intersect(FLOOR, Vector2(5.0, 5.0), Vector2(0.0, -7.0), 100.0) == Vector2(5.0, 0.0)
    hit = intersect(FLOOR, Vector2(0.0, 5.0), Vector2(1.0, -1.0), 100.0)
    assert np.allclose(hit.as_array(), [5.0, 0.0])


def test_endpoint_touch_counts_as_hit():
    assert intersect(FLOOR, Vector2(10.0, 5.0), Vector2(0.0, -1.0), 100.0) == Vector2(10.0, 0.0)
    assert intersect(FLOOR, Vector2(0.0, 5.0), Vector2(0.0, -1.0), 100.0) == Vector2(0.0, 0.0)


@pytest.mark.parametrize(
    "origin, direction, max_distance",
    [
        (Vector2(15.0, 5.0), Vector2(0.0, -1.0), 100.0),  # passes beyond the end
        (Vector2(5.0, 5.0), Vector2(0.0, -1.0), 4.0),  # leg too short
        (Vector2(5.0, 5.0), Vector2(0.0, 1.0), 100.0),  # pointing away
    ],
)
def test_general_misses(origin, direction, max_distance):
    assert intersect(FLOOR, origin, direction, max_distance) is None


def test_parallel_non_collinear_never_hits():
    for y in (5.0, -3.0, 1e-9):
        assert intersect(FLOOR, Vector2(-5.0, y), Vector2(1.0, 0.0), 100.0) is None
        assert intersect(FLOOR, Vector2(15.0, y), Vector2(-1.0, 0.0), 100.0) is None


def test_collinear_overlap_returns_first_endpoint_reached():
    assert intersect(FLOOR, Vector2(-5.0, 0.0), Vector2(1.0, 0.0), 100.0) == Vector2(0.0, 0.0)
    assert intersect(FLOOR, Vector2(15.0, 0.0), Vector2(-1.0, 0.0), 100.0) == Vector2(10.0, 0.0)
    # ray leg starting inside the segment still overlaps
    assert intersect(FLOOR, Vector2(4.0, 0.0), Vector2(1.0, 0.0), 3.0) == Vector2(0.0, 0.0)


def test_collinear_disjoint_is_a_miss():
    assert intersect(FLOOR, Vector2(20.0, 0.0), Vector2(1.0, 0.0), 100.0) is None
    assert intersect(FLOOR, Vector2(-5.0, 0.0), Vector2(-1.0, 0.0), 100.0) is None
    assert intersect(FLOOR, Vector2(-5.0, 0.0), Vector2(1.0, 0.0), 3.0) is None


def test_near_collinear_uses_exact_zero_tests():
    # No tolerance: a ray 1e-9 off the wall's line is parallel, so it misses
    # even though it overlaps the wall to within floating-point noise.
    assert intersect(FLOOR, Vector2(-5.0, 1e-9), Vector2(1.0, 0.0), 100.0) is None
    assert intersect(FLOOR, Vector2(-5.0, 0.0), Vector2(1.0, 0.0), 100.0) is not None


def test_matches_independent_parametric_solve():
    rng = np.random.default_rng(11)
    checked = 0
    for _ in range(400):
        p0, p1, q = rng.uniform(-10, 10, size=(3, 2))
        d = rng.uniform(-1, 1, size=2)
        dist = float(rng.uniform(1, 20))
        if np.linalg.norm(p1 - p0) < 1e-3 or np.linalg.norm(d) < 1e-3:
            continue
        s = d / np.linalg.norm(d) * dist
        mat = np.column_stack([p1 - p0, -s])
        if abs(np.linalg.det(mat)) < 1e-6:
            continue
        t, u = np.linalg.solve(mat, q - p0)
        if min(abs(t), abs(t - 1), abs(u), abs(u - 1)) < 1e-9:
            continue
        expected = 0 <= t <= 1 and 0 <= u <= 1
        seg = Segment(Vector2.from_array(p0), Vector2.from_array(p1))
        got = intersect(seg, Vector2.from_array(q), Vector2.from_array(d), dist)
        assert (got is not None) == expected
        if expected:
            assert np.allclose(got.as_array(), p0 + t * (p1 - p0), atol=1e-9)
        checked += 1
    assert checked > 300
