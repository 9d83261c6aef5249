"""Enclosing box with an inner pillar, pointer off-centre."""

from __future__ import annotations

import math

from rc_core.segment import Segment
from rc_core.vector import Vector2
from rc_core.world import World
from scenes.common import run_fan


def build_scene(pillar: bool = True):
    world = World.box(0.0, 0.0, 400.0, 300.0)
    if pillar:
        world.extend(World.polygon([(250.0, 120.0), (290.0, 120.0), (290.0, 180.0), (250.0, 180.0)], prefix="pillar").obstacles)
    world.add_obstacle(Segment(Vector2(60.0, 240.0), Vector2(160.0, 200.0), "mirror"))
    return world


def build_sweep_params():
    return [
        {"case_id": "s1_pure", "pillar": True, "max_bounces": 0, "angle_step": math.pi / 180},
        {"case_id": "s1_b4", "pillar": True, "max_bounces": 4, "angle_step": math.pi / 90},
        {"case_id": "s1_b4_facing", "pillar": True, "max_bounces": 4, "angle_step": math.pi / 90, "normal_mode": "facing"},
    ]


def run_case(params):
    return run_fan(build_scene(params.get("pillar", True)), Vector2(120.0, 110.0), params)
