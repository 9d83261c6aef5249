"""Square room probed from its centre."""

from __future__ import annotations

import math

from rc_core.vector import Vector2
from rc_core.world import World
from scenes.common import run_fan


def build_scene():
    return World.polygon([(100.0, 50.0), (200.0, 50.0), (200.0, 150.0), (100.0, 150.0)], prefix="wall")


def build_sweep_params():
    return [
        {"case_id": "s0_pure", "max_bounces": 0, "angle_step": math.pi / 180, "max_distance": 2000.0},
        {"case_id": "s0_b3", "max_bounces": 3, "angle_step": math.pi / 90, "max_distance": 2000.0},
    ]


def run_case(params):
    return run_fan(build_scene(), Vector2(150.0, 100.0), params)
