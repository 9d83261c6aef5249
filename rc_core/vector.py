"""2D vector value type.

Example:
    >>> from rc_core.vector import Vector2
    >>> v = Vector2(3.0, 4.0)
    >>> v.magnitude()
    5.0
    >>> v.normalized()
    Vector2(x=0.6, y=0.8)
    >>> Vector2(0.0, 0.0).normalized()
    Vector2(x=0.0, y=0.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from rc_core.errors import DivisionByZero


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector. Equality is exact, component by component."""

    x: float
    y: float

    @classmethod
    def from_angle(cls, angle: float, length: float = 1.0) -> "Vector2":
        return cls(length * math.cos(angle), length * math.sin(angle))

    @classmethod
    def from_array(cls, arr) -> "Vector2":
        a = np.asarray(arr, dtype=float)
        return cls(float(a[0]), float(a[1]))

    def as_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def sub(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    def multiply(self, other: "Vector2") -> "Vector2":
        """Component-wise product."""
        return Vector2(self.x * other.x, self.y * other.y)

    def divide(self, scalar: float) -> "Vector2":
        if scalar == 0:
            raise DivisionByZero(f"Cannot divide {self} by zero")
        return Vector2(self.x / scalar, self.y / scalar)

    def negated(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def equals(self, other: "Vector2") -> bool:
        return self.x == other.x and self.y == other.y

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> float:
        """Scalar z-component of the 2D cross product."""
        return self.x * other.y - self.y * other.x

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Vector2":
        """Unit vector in the same direction; the zero vector maps to itself."""
        mag = self.magnitude()
        if mag == 0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / mag, self.y / mag)

    def distance(self, other: "Vector2") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def slope(self) -> float:
        """dy/dx; +-inf for vertical vectors and nan for the zero vector."""
        if self.x == 0:
            if self.y == 0:
                return math.nan
            return math.copysign(math.inf, self.y)
        return self.y / self.x

    def angle(self) -> float:
        return math.atan2(self.y, self.x)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def __add__(self, other: "Vector2") -> "Vector2":
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return self.sub(other)

    def __mul__(self, factor: float) -> "Vector2":
        return self.scale(factor)

    def __rmul__(self, factor: float) -> "Vector2":
        return self.scale(factor)

    def __truediv__(self, scalar: float) -> "Vector2":
        return self.divide(scalar)

    def __neg__(self) -> "Vector2":
        return self.negated()

    def __iter__(self):
        yield self.x
        yield self.y


ZERO = Vector2(0.0, 0.0)
