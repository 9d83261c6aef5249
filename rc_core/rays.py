"""Ray container and the bounce-casting loop.

Example:
    >>> from rc_core.rays import Ray, RayState
    >>> from rc_core.vector import Vector2
    >>> from rc_core.world import World
    >>> ray = Ray(Vector2(150.0, 100.0), Vector2(1.0, 0.0), max_bounces=2)
    >>> ray.cast(World.box(100.0, 50.0, 200.0, 150.0)).points[1]
    Vector2(x=200.0, y=100.0)
    >>> ray.state is RayState.TERMINATED_MAX_BOUNCES
    True
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from rc_core.config import NORMAL_MODES, CastConfig
from rc_core.errors import ZeroDirection
from rc_core.reflection import get_reflector
from rc_core.segment import Segment
from rc_core.vector import Vector2

if TYPE_CHECKING:
    from rc_core.world import Hit, World

logger = logging.getLogger(__name__)


class RayState(str, Enum):
    ACTIVE = "active"
    TERMINATED_NO_HIT = "terminated_no_hit"
    TERMINATED_MAX_BOUNCES = "terminated_max_bounces"


@dataclass(frozen=True)
class BounceRecord:
    """One reflection: where it happened and the vectors involved."""

    point: Vector2
    incoming: Vector2
    normal: Vector2
    reflected: Vector2
    obstacle: Segment
    intensity: float


@dataclass(eq=False)
class Ray:
    """A ray and its per-bounce history.

    ``points``, ``directions`` and ``intensities`` always hold
    ``bounce_count + 1`` entries; entry ``i`` describes the leg that starts
    at bounce ``i``.
    """

    origin: Vector2
    direction: Vector2
    max_bounces: int = 4
    max_distance: float = 2000.0
    intensity_drop: float = 0.2
    normal_mode: str = "right"
    reflection_mode: str = "angular"
    points: List[Vector2] = field(init=False)
    directions: List[Vector2] = field(init=False)
    intensities: List[float] = field(init=False)
    bounces: List[BounceRecord] = field(init=False, repr=False)
    bounce_count: int = field(init=False, default=0)
    intensity: float = field(init=False, default=1.0)
    state: RayState = field(init=False, default=RayState.ACTIVE)
    terminus: Optional[Vector2] = field(init=False, default=None)

    def __post_init__(self) -> None:
        if self.direction.is_zero():
            raise ZeroDirection(f"Ray from {self.origin} has a zero direction")
        if self.max_bounces < 0:
            raise ValueError(f"max_bounces must be >= 0, got {self.max_bounces}")
        if not (math.isfinite(self.max_distance) and self.max_distance > 0):
            raise ValueError(f"max_distance must be positive and finite, got {self.max_distance}")
        if self.intensity_drop < 0:
            raise ValueError(f"intensity_drop must be >= 0, got {self.intensity_drop}")
        if self.normal_mode not in NORMAL_MODES:
            raise ValueError(f"Unknown normal mode {self.normal_mode!r}")
        self._reflect = get_reflector(self.reflection_mode)
        self._last_obstacle: Optional[Segment] = None
        self.points = [self.origin]
        self.directions = [self.direction.normalized()]
        self.intensities = [self.intensity]
        self.bounces = []

    @classmethod
    def from_config(cls, origin: Vector2, direction: Vector2, config: CastConfig) -> "Ray":
        return cls(
            origin=origin,
            direction=direction,
            max_bounces=config.max_bounces,
            max_distance=config.max_distance,
            intensity_drop=config.intensity_drop,
            normal_mode=config.normal_mode,
            reflection_mode=config.reflection_mode,
        )

    @property
    def terminated(self) -> bool:
        return self.state is not RayState.ACTIVE

    @property
    def last_obstacle(self) -> Optional[Segment]:
        return self._last_obstacle

    def cast(self, world: World) -> "Ray":
        """Bounce through ``world`` until no new hit or ``max_bounces``.

        Casting a terminated ray again does nothing.
        """

        if self.terminated:
            return self
        while self.bounce_count < self.max_bounces:
            hit = world.nearest_hit(self.points[-1], self.directions[-1], self.max_distance, exclude=self._last_obstacle)
            if hit is None:
                self.state = RayState.TERMINATED_NO_HIT
                break
            self._bounce(hit)
        else:
            self.state = RayState.TERMINATED_MAX_BOUNCES
        self.terminus = self._final_leg_end(world)
        logger.debug(
            "ray from (%.3f, %.3f) %s after %d bounce(s)",
            self.origin.x,
            self.origin.y,
            self.state.value,
            self.bounce_count,
        )
        return self

    def _normal_for(self, obstacle: Segment, incoming: Vector2) -> Vector2:
        if self.normal_mode == "facing":
            return obstacle.facing_normal(incoming)
        return obstacle.return_normal()

    def _bounce(self, hit: Hit) -> None:
        incoming = self.directions[-1]
        normal = self._normal_for(hit.obstacle, incoming)
        reflected = self._reflect(incoming, normal)
        self.intensity -= self.intensity_drop
        self.points.append(hit.point)
        self.directions.append(reflected)
        self.intensities.append(self.intensity)
        self.bounces.append(
            BounceRecord(
                point=hit.point,
                incoming=incoming,
                normal=normal,
                reflected=reflected,
                obstacle=hit.obstacle,
                intensity=self.intensity,
            )
        )
        self.bounce_count += 1
        self._last_obstacle = hit.obstacle

    def _far_point(self) -> Vector2:
        return self.points[-1] + self.directions[-1] * self.max_distance

    def _final_leg_end(self, world: World) -> Vector2:
        if self.state is RayState.TERMINATED_NO_HIT:
            return self._far_point()
        hit = world.nearest_hit(self.points[-1], self.directions[-1], self.max_distance, exclude=self._last_obstacle)
        return self._far_point() if hit is None else hit.point

    def path(self) -> List[Vector2]:
        """Points to draw as one connected stroke, terminus included once cast."""
        if self.terminus is None:
            return list(self.points)
        return self.points + [self.terminus]

    def path_array(self) -> NDArray[np.float64]:
        return np.array([[p.x, p.y] for p in self.path()], dtype=np.float64)

    def legs(self) -> List[Tuple[Vector2, Vector2, float]]:
        """(start, end, intensity) per drawn leg."""
        pts = self.path()
        return [(pts[i], pts[i + 1], self.intensities[i]) for i in range(len(pts) - 1)]

    def length(self) -> float:
        pts = self.path()
        return float(sum(pts[i].distance(pts[i + 1]) for i in range(len(pts) - 1)))
