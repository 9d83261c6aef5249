"""Obstacle collection and nearest-hit query.

Example:
    >>> from rc_core.world import World
    >>> from rc_core.vector import Vector2
    >>> room = World.box(100.0, 50.0, 200.0, 150.0)
    >>> hit = room.nearest_hit(Vector2(150.0, 100.0), Vector2(1.0, 0.0), 2000.0)
    >>> hit.point, hit.obstacle.label
    (Vector2(x=200.0, y=100.0), 'right')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from rc_core.config import CastConfig
from rc_core.rays import Ray
from rc_core.segment import Segment, intersect
from rc_core.vector import Vector2


PointLike = Tuple[float, float]


@dataclass(frozen=True)
class Hit:
    point: Vector2
    obstacle: Segment
    index: int
    distance: float


class World:
    """Ordered collection of segment obstacles.

    Queries never mutate the world, so any number of rays can be cast
    against it one after another or side by side.
    """

    def __init__(self, obstacles: Iterable[Segment] = ()) -> None:
        self._obstacles: List[Segment] = []
        self.extend(obstacles)

    @classmethod
    def from_points(cls, pairs: Iterable[Tuple[PointLike, PointLike]]) -> "World":
        world = cls()
        for i, (a, b) in enumerate(pairs):
            world.add_obstacle(Segment(Vector2(float(a[0]), float(a[1])), Vector2(float(b[0]), float(b[1])), f"s{i}"))
        return world

    @classmethod
    def polygon(cls, vertices: Sequence[PointLike], prefix: str = "edge") -> "World":
        """Closed polygon, one segment per edge in vertex order."""
        if len(vertices) < 3:
            raise ValueError("A polygon needs at least 3 vertices")
        pts = [Vector2(float(x), float(y)) for x, y in vertices]
        return cls(Segment(pts[i], pts[(i + 1) % len(pts)], f"{prefix}{i}") for i in range(len(pts)))

    @classmethod
    def box(cls, x0: float, y0: float, x1: float, y1: float) -> "World":
        corners = [Vector2(x0, y0), Vector2(x1, y0), Vector2(x1, y1), Vector2(x0, y1)]
        labels = ["bottom", "right", "top", "left"]
        return cls(Segment(corners[i], corners[(i + 1) % 4], labels[i]) for i in range(4))

    @property
    def obstacles(self) -> Tuple[Segment, ...]:
        return tuple(self._obstacles)

    def add_obstacle(self, segment: Segment) -> None:
        self._obstacles.append(segment)

    def extend(self, segments: Iterable[Segment]) -> None:
        for seg in segments:
            self.add_obstacle(seg)

    def __len__(self) -> int:
        return len(self._obstacles)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._obstacles)

    def bounds(self) -> Tuple[float, float, float, float]:
        """(xmin, ymin, xmax, ymax) over all obstacle endpoints."""
        if not self._obstacles:
            raise ValueError("Empty world has no bounds")
        pts = np.concatenate([s.as_array() for s in self._obstacles], axis=0)
        lo = pts.min(axis=0)
        hi = pts.max(axis=0)
        return float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1])

    def nearest_hit(
        self,
        origin: Vector2,
        direction: Vector2,
        max_distance: float,
        exclude: Optional[Segment] = None,
    ) -> Optional[Hit]:
        """Closest obstacle hit along one ray leg, or None.

        A hit must be strictly closer than the leg's far end and than every
        earlier candidate, so ties go to the first obstacle in insertion
        order. ``exclude`` is skipped by identity.
        """

        far_point = origin + direction.normalized() * max_distance
        best_distance = origin.distance(far_point)
        best: Optional[Hit] = None
        for index, obstacle in enumerate(self._obstacles):
            if obstacle is exclude:
                continue
            point = intersect(obstacle, origin, direction, max_distance)
            if point is None:
                continue
            dist = origin.distance(point)
            if dist < best_distance:
                best_distance = dist
                best = Hit(point=point, obstacle=obstacle, index=index, distance=dist)
        return best

    def cast_ray(self, origin: Vector2, direction: Vector2, config: Optional[CastConfig] = None) -> Ray:
        ray = Ray.from_config(origin, direction, config or CastConfig())
        return ray.cast(self)
