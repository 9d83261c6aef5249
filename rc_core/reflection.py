"""Mirror-reflection helpers.

Example:
    >>> from rc_core.reflection import reflect_angular
    >>> from rc_core.vector import Vector2
    >>> out = reflect_angular(Vector2(1.0, 0.0), Vector2(-1.0, 0.0))
    >>> round(out.x, 12), round(out.y, 12)
    (-1.0, 0.0)
"""

from __future__ import annotations

from typing import Callable, Dict

import numpy as np

from rc_core.vector import Vector2


def reflect_angular(direction: Vector2, normal: Vector2) -> Vector2:
    """Reflect by rotating the reversed incoming ray about the normal.

    The reversed ray ``b`` sits ``diff`` radians from the normal ``c``; the
    outgoing ray is placed ``diff`` radians on the other side of ``c``. Angles
    come from atan2 without unwrapping, so when the two atan2 values straddle
    the +-pi cut the result differs from the closed form.
    """

    b = direction.negated()
    c = normal
    angle_b = float(np.arctan2(b.y, b.x))
    angle_c = float(np.arctan2(c.y, c.x))
    denom = b.magnitude() * c.magnitude()
    diff = float(np.arccos(np.clip(b.dot(c) / denom, -1.0, 1.0)))
    angle = angle_c - diff if angle_b > angle_c else angle_c + diff
    return Vector2(float(np.cos(angle)), float(np.sin(angle)))


def reflect_closed_form(direction: Vector2, normal: Vector2) -> Vector2:
    """Specular reflection ``d - 2 (d . n) n`` with unit vectors."""

    d = direction.normalized()
    n = normal.normalized()
    return (d - n * (2.0 * d.dot(n))).normalized()


REFLECTORS: Dict[str, Callable[[Vector2, Vector2], Vector2]] = {
    "angular": reflect_angular,
    "closed_form": reflect_closed_form,
}


def get_reflector(mode: str) -> Callable[[Vector2, Vector2], Vector2]:
    try:
        return REFLECTORS[mode]
    except KeyError:
        raise ValueError(f"Unknown reflection mode {mode!r}; expected one of {sorted(REFLECTORS)}") from None
