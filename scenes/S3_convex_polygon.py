"""Closed regular polygon probed from its centroid."""

from __future__ import annotations

import math

from rc_core.vector import Vector2
from rc_core.world import World
from scenes.common import regular_polygon, run_fan

CENTER = (0.0, 0.0)


def build_scene(sides: int = 7, radius: float = 100.0):
    return World.polygon(regular_polygon(CENTER, radius, sides, phase=0.1), prefix="side")


def build_sweep_params():
    return [
        {"case_id": "s3_hept", "sides": 7, "max_bounces": 5, "angle_step": math.pi / 90},
        {"case_id": "s3_tri", "sides": 3, "max_bounces": 5, "angle_step": math.pi / 90},
    ]


def run_case(params):
    return run_fan(build_scene(params.get("sides", 7)), Vector2(*CENTER), params)
