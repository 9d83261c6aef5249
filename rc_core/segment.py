"""Line-segment obstacles and the segment/ray intersection test.

Example:
    >>> from rc_core.segment import Segment, intersect
    >>> from rc_core.vector import Vector2
    >>> wall = Segment(Vector2(200.0, 50.0), Vector2(200.0, 150.0))
    >>> intersect(wall, Vector2(150.0, 100.0), Vector2(1.0, 0.0), 2000.0)
    Vector2(x=200.0, y=100.0)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from rc_core.errors import DegenerateSegment
from rc_core.vector import Vector2


@dataclass(frozen=True, eq=False)
class Segment:
    """Directed obstacle from ``start`` to ``end``.

    Compared and hashed by identity: two walls with the same endpoints are
    still two obstacles.
    """

    start: Vector2
    end: Vector2
    label: str = "segment"
    normal_left: Vector2 = field(init=False, repr=False)
    normal_right: Vector2 = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.start.equals(self.end):
            raise DegenerateSegment(f"Segment endpoints coincide at {self.start}")
        d = self.end - self.start
        object.__setattr__(self, "normal_left", Vector2(-d.y, d.x).normalized())
        object.__setattr__(self, "normal_right", Vector2(d.y, -d.x).normalized())

    @classmethod
    def from_coords(cls, x0: float, y0: float, x1: float, y1: float, label: str = "segment") -> "Segment":
        return cls(Vector2(float(x0), float(y0)), Vector2(float(x1), float(y1)), label)

    @property
    def delta(self) -> Vector2:
        return self.end - self.start

    def length(self) -> float:
        return self.start.distance(self.end)

    def midpoint(self) -> Vector2:
        return (self.start + self.end) * 0.5

    def return_normal(self) -> Vector2:
        # Always the right-hand normal, whichever side the ray arrives from.
        return self.normal_right

    def facing_normal(self, direction: Vector2) -> Vector2:
        """Normal pointing against ``direction``."""
        if self.normal_right.dot(direction) < 0:
            return self.normal_right
        return self.normal_left

    def as_array(self) -> NDArray[np.float64]:
        return np.array([[self.start.x, self.start.y], [self.end.x, self.end.y]], dtype=np.float64)


def intersect(segment: Segment, origin: Vector2, direction: Vector2, max_distance: float) -> Optional[Vector2]:
    """Return where the ray leg ``origin + u * direction * max_distance`` (0 <= u <= 1) meets ``segment``.

    Parallel and collinear configurations are resolved here rather than raised:
    parallel lines never hit, collinear ones hit at the segment endpoint the
    ray reaches first when the two parameter intervals overlap.
    """

    p = segment.start
    r = segment.delta
    q = origin
    s = direction.normalized() * max_distance

    r_x_s = r.cross(s)
    q_m_p = q - p
    q_m_p_x_r = q_m_p.cross(r)

    if r_x_s == 0:
        if q_m_p_x_r != 0:
            return None
        rr = r.dot(r)
        t0 = q_m_p.dot(r) / rr
        t1 = t0 + s.dot(r) / rr
        lo, hi = min(t0, t1), max(t0, t1)
        if hi < 0 or lo > 1:
            return None
        return p + r if s.dot(r) < 0 else p

    t = q_m_p.cross(s) / r_x_s
    u = q_m_p_x_r / r_x_s
    if 0 <= t <= 1 and 0 <= u <= 1:
        return p + r * t
    return None
