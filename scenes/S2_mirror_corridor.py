"""Two open-ended parallel mirrors; rays ping-pong until max bounces or escape."""

from __future__ import annotations

import math

from rc_core.segment import Segment
from rc_core.vector import Vector2
from rc_core.world import World
from scenes.common import run_fan


def build_scene(gap: float = 80.0, length: float = 600.0):
    return World(
        [
            Segment(Vector2(0.0, 0.0), Vector2(length, 0.0), "lower"),
            Segment(Vector2(length, gap), Vector2(0.0, gap), "upper"),
        ]
    )


def build_sweep_params():
    return [
        {"case_id": "s2_gap80", "gap": 80.0, "max_bounces": 12, "intensity_drop": 0.05, "angle_step": math.pi / 60},
        {"case_id": "s2_gap80_closed_form", "gap": 80.0, "max_bounces": 12, "intensity_drop": 0.05, "angle_step": math.pi / 60, "reflection_mode": "closed_form"},
    ]


def run_case(params):
    gap = params.get("gap", 80.0)
    return run_fan(build_scene(gap), Vector2(300.0, gap / 2.0), params)
