import math

import pytest

from quadsim.geometry import Rect, Vec2, polar_to_cartesian


def test_vector_arithmetic():
    a = Vec2(1.0, 2.0)
    b = Vec2(3.0, 5.0)
    assert a + b == Vec2(4.0, 7.0)
    assert b - a == Vec2(2.0, 3.0)
    assert a * 2 == Vec2(2.0, 4.0)
    assert 2 * a == a * 2
    assert b / 1 == b
    assert -a == Vec2(-1.0, -2.0)
    assert tuple(a) == (1.0, 2.0)


def test_length_of_axis_vector():
    assert Vec2(0.0, 7.0).length() == 7.0


def test_normalize_gives_unit_length_same_direction():
    v = Vec2(3.0, -4.0)
    n = v.normalize()
    assert math.isclose(n.length(), 1.0)
    assert math.isclose(n.x * v.length(), v.x)
    assert math.isclose(n.y * v.length(), v.y)


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        Vec2(0.0, 0.0).normalize()


def test_overlaps_includes_touching_edges():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    assert a.overlaps(Rect(10.0, 0.0, 5.0, 5.0))
    assert a.overlaps(Rect(5.0, 5.0, 1.0, 1.0))
    assert not a.overlaps(Rect(10.5, 0.0, 5.0, 5.0))
    assert not a.overlaps(Rect(0.0, -3.0, 5.0, 2.0))


def test_overlaps_is_symmetric():
    a = Rect(0.0, 0.0, 4.0, 4.0)
    b = Rect(3.0, 3.0, 4.0, 4.0)
    assert a.overlaps(b) == b.overlaps(a)


def test_contains_excludes_far_edges():
    r = Rect(0.0, 0.0, 10.0, 10.0)
    assert r.contains(Vec2(0.0, 0.0))
    assert r.contains(Vec2(9.9, 9.9))
    assert not r.contains(Vec2(10.0, 5.0))
    assert not r.contains(Vec2(5.0, 10.0))
    assert not r.contains(Vec2(-0.1, 5.0))


def test_polar_to_cartesian():
    p = polar_to_cartesian(2.0, 0.0)
    assert math.isclose(p.x, 2.0)
    assert math.isclose(p.y, 0.0, abs_tol=1e-12)
    q = polar_to_cartesian(3.0, math.pi / 2)
    assert math.isclose(q.x, 0.0, abs_tol=1e-12)
    assert math.isclose(q.y, 3.0)
    assert math.isclose(polar_to_cartesian(5.0, 1.234).length(), 5.0)