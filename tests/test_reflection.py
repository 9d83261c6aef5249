import math

import numpy as np
import pytest

from rc_core.reflection import get_reflector, reflect_angular, reflect_closed_form
from rc_core.vector import Vector2


def _unit(x, y):
    return Vector2(x, y).normalized()


def test_angular_reflection_off_floor_with_facing_normal():
    out = reflect_angular(_unit(1.0, -1.0), Vector2(0.0, 1.0))
    assert np.allclose(out.as_array(), [math.sqrt(0.5), math.sqrt(0.5)])


def test_head_on_reflection_reverses_direction():
    out = reflect_angular(Vector2(1.0, 0.0), Vector2(1.0, 0.0))
    assert np.allclose(out.as_array(), [-1.0, 0.0], atol=1e-12)
    out = reflect_closed_form(Vector2(1.0, 0.0), Vector2(-1.0, 0.0))
    assert np.allclose(out.as_array(), [-1.0, 0.0], atol=1e-12)


def test_angular_matches_closed_form_away_from_the_atan2_cut():
    rng = np.random.default_rng(5)
    for _ in range(200):
        normal_angle = rng.uniform(-math.pi / 2, math.pi / 2)
        n = Vector2.from_angle(normal_angle)
        # incoming ray heading into the surface, at most 80 degrees off the normal
        off = rng.uniform(-math.radians(80), math.radians(80))
        d = Vector2.from_angle(normal_angle + math.pi + off)
        b_angle = (-d).angle()
        if abs(b_angle - normal_angle) > math.pi:
            continue
        a = reflect_angular(d, n)
        c = reflect_closed_form(d, n)
        assert np.allclose(a.as_array(), c.as_array(), atol=1e-9)
        assert np.isclose(a.magnitude(), 1.0)


def test_angular_differs_from_closed_form_across_the_atan2_cut():
    # Normal at +pi, reversed ray just below -pi: the angle difference wraps.
    d = _unit(1.0, 0.1)
    n = Vector2(-1.0, 0.0)
    closed = reflect_closed_form(d, n)
    angular = reflect_angular(d, n)
    assert np.allclose(closed.as_array(), _unit(-1.0, 0.1).as_array())
    assert np.allclose(angular.as_array(), _unit(-1.0, -0.1).as_array())


def test_reflection_preserves_angle_to_normal():
    d = _unit(2.0, -1.0)
    n = Vector2(0.0, 1.0)
    out = reflect_closed_form(d, n)
    assert np.isclose(abs(d.dot(n)), abs(out.dot(n)))


def test_get_reflector():
    assert get_reflector("angular") is reflect_angular
    assert get_reflector("closed_form") is reflect_closed_form
    with pytest.raises(ValueError):
        get_reflector("fresnel")
