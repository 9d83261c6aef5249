import dataclasses
import math

import numpy as np
import pytest

from rc_core.errors import DivisionByZero, RaycastError
from rc_core.vector import ZERO, Vector2


def test_arithmetic_returns_new_instances():
    a = Vector2(1.0, 2.0)
    b = Vector2(3.0, -4.0)
    assert a.add(b) == Vector2(4.0, -2.0)
    assert a.sub(b) == Vector2(-2.0, 6.0)
    assert a.scale(2.5) == Vector2(2.5, 5.0)
    assert a.multiply(b) == Vector2(3.0, -8.0)
    assert a + b == a.add(b)
    assert a - b == a.sub(b)
    assert 2.0 * a == a * 2.0 == Vector2(2.0, 4.0)
    assert -a == Vector2(-1.0, -2.0)
    assert a == Vector2(1.0, 2.0)


def test_vector_is_frozen():
    v = Vector2(1.0, 1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 2.0


def test_divide_by_zero_raises():
    v = Vector2(1.0, 2.0)
    assert v.divide(2.0) == Vector2(0.5, 1.0)
    with pytest.raises(DivisionByZero):
        v.divide(0)
    with pytest.raises(ZeroDivisionError):
        v / 0.0
    with pytest.raises(RaycastError):
        v.divide(0.0)


def test_equality_is_exact():
    assert not Vector2(0.1 + 0.2, 0.0).equals(Vector2(0.3, 0.0))
    assert Vector2(0.5, 0.25).equals(Vector2(0.5, 0.25))


def test_normalized_unit_length_and_zero_policy():
    rng = np.random.default_rng(3)
    for x, y in rng.uniform(-1e3, 1e3, size=(50, 2)):
        n = Vector2(float(x), float(y)).normalized()
        assert np.isclose(n.magnitude(), 1.0, rtol=0, atol=1e-12)
    assert Vector2(0.0, 0.0).normalized() == ZERO
    assert Vector2(1e-300, 0.0).normalized() == Vector2(1.0, 0.0)


def test_cross_dot_distance():
    a = Vector2(2.0, 3.0)
    b = Vector2(5.0, 7.0)
    assert a.cross(b) == 2.0 * 7.0 - 3.0 * 5.0
    assert b.cross(a) == -a.cross(b)
    assert a.dot(b) == 31.0
    assert Vector2(0.0, 0.0).distance(Vector2(3.0, 4.0)) == 5.0


def test_slope():
    assert Vector2(2.0, 1.0).slope() == 0.5
    assert Vector2(0.0, 3.0).slope() == math.inf
    assert Vector2(0.0, -3.0).slope() == -math.inf
    assert math.isnan(Vector2(0.0, 0.0).slope())


def test_numpy_and_angle_interop():
    v = Vector2.from_array(np.array([3.0, 4.0]))
    assert v == Vector2(3.0, 4.0)
    assert np.allclose(v.as_array(), [3.0, 4.0])
    u = Vector2.from_angle(math.pi / 2, 2.0)
    assert np.allclose(u.as_array(), [0.0, 2.0], atol=1e-12)
    assert np.isclose(u.angle(), math.pi / 2)
    assert tuple(v) == (3.0, 4.0)
