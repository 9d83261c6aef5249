"""Seeded random clutter of free-standing segments inside a box."""

from __future__ import annotations

import math

import numpy as np

from rc_core.segment import Segment
from rc_core.vector import Vector2
from rc_core.world import World
from scenes.common import run_fan


def build_scene(n: int = 12, seed: int = 7, size: float = 500.0):
    rng = np.random.default_rng(seed)
    world = World.box(0.0, 0.0, size, size)
    placed = 0
    while placed < n:
        a = rng.uniform(0.1 * size, 0.9 * size, 2)
        angle = rng.uniform(0.0, 2.0 * math.pi)
        length = rng.uniform(0.05 * size, 0.2 * size)
        b = a + length * np.array([math.cos(angle), math.sin(angle)])
        # keep the pointer area clear
        if np.linalg.norm((a + b) / 2.0 - size / 2.0) < 0.1 * size:
            continue
        world.add_obstacle(Segment(Vector2.from_array(a), Vector2.from_array(b), f"clutter{placed}"))
        placed += 1
    return world


def build_sweep_params():
    return [
        {"case_id": "s4_seed7", "n": 12, "seed": 7, "max_bounces": 6, "intensity_drop": 0.15, "angle_step": math.pi / 90},
        {"case_id": "s4_seed11", "n": 20, "seed": 11, "max_bounces": 6, "intensity_drop": 0.15, "angle_step": math.pi / 90},
    ]


def run_case(params):
    return run_fan(build_scene(params.get("n", 12), params.get("seed", 7)), Vector2(250.0, 250.0), params)
