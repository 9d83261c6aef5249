"""Per-frame simulation context, fan casting and collaborator protocols."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Protocol, Sequence

import numpy as np
from numpy.typing import NDArray

from rc_core.config import CastConfig
from rc_core.rays import Ray
from rc_core.segment import Segment
from rc_core.vector import Vector2
from rc_core.world import World

logger = logging.getLogger(__name__)


class PointerSource(Protocol):
    """Supplies the ray origin once per frame."""

    def position(self, frame: int) -> Vector2:
        ...


class Renderer(Protocol):
    """Draws what one frame of casting produced."""

    def begin_frame(self, frame: int) -> None:
        ...

    def draw_segments(self, segments: Sequence[Segment]) -> None:
        ...

    def draw_ray(self, ray: Ray) -> None:
        ...

    def end_frame(self, frame: int) -> None:
        ...


@dataclass(frozen=True)
class FixedPointer:
    point: Vector2

    def position(self, frame: int) -> Vector2:
        return self.point


@dataclass(frozen=True)
class TrackPointer:
    """Scripted pointer that cycles through ``track``, one entry per frame."""

    track: Sequence[Vector2]

    def __post_init__(self) -> None:
        if len(self.track) == 0:
            raise ValueError("TrackPointer needs at least one position")

    @classmethod
    def line(cls, start: Vector2, end: Vector2, frames: int) -> "TrackPointer":
        ts = np.linspace(0.0, 1.0, frames)
        return cls(tuple(start + (end - start) * float(t) for t in ts))

    def position(self, frame: int) -> Vector2:
        return self.track[frame % len(self.track)]


@dataclass(frozen=True)
class SimulationContext:
    world: World
    pointer: Vector2
    config: CastConfig


def angles(config: CastConfig) -> NDArray[np.float64]:
    """Sample angles covering one full turn."""
    n = max(int(round(2.0 * math.pi / config.angle_step)), 1)
    return config.start_angle + np.arange(n, dtype=np.float64) * config.angle_step


def cast_fan(context: SimulationContext) -> List[Ray]:
    """Cast one ray per angular sample from the context's pointer."""
    rays = [
        Ray.from_config(context.pointer, Vector2.from_angle(float(a)), context.config).cast(context.world)
        for a in angles(context.config)
    ]
    logger.debug("cast %d rays from (%.3f, %.3f)", len(rays), context.pointer.x, context.pointer.y)
    return rays


def run_frames(
    world: World,
    pointer: PointerSource,
    config: CastConfig,
    renderer: Renderer,
    frames: int = 1,
) -> List[List[Ray]]:
    """Drive ``frames`` redraws: sample the pointer, cast the fan, render."""

    out: List[List[Ray]] = []
    for frame in range(frames):
        ctx = SimulationContext(world=world, pointer=pointer.position(frame), config=config)
        rays = cast_fan(ctx)
        renderer.begin_frame(frame)
        renderer.draw_segments(world.obstacles)
        for ray in rays:
            renderer.draw_ray(ray)
        renderer.end_frame(frame)
        out.append(rays)
    logger.info("rendered %d frame(s) over %d obstacle(s)", frames, len(world))
    return out
