"""Exception types raised while building a scene.

Casting itself never raises; every error below is a construction-time error.
"""

from __future__ import annotations


class RaycastError(Exception):
    """Base class for scene-configuration errors."""


class DegenerateSegment(RaycastError, ValueError):
    """Segment endpoints coincide."""


class ZeroDirection(RaycastError, ValueError):
    """Ray direction is the zero vector."""


class DivisionByZero(RaycastError, ZeroDivisionError):
    """Vector divided by an exact zero."""


class SceneFormatError(RaycastError, ValueError):
    """Scene definition cannot be parsed."""
