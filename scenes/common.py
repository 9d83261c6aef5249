"""Common scene helpers."""

from __future__ import annotations

import math
from typing import Any, Dict, List, Tuple

import numpy as np

from rc_core.config import CastConfig
from rc_core.context import SimulationContext, cast_fan
from rc_core.rays import Ray
from rc_core.vector import Vector2
from rc_core.world import World

CONFIG_KEYS = ("angle_step", "max_bounces", "max_distance", "intensity_drop", "normal_mode", "reflection_mode", "start_angle")


def config_from_params(params: Dict[str, Any]) -> CastConfig:
    return CastConfig.from_mapping({k: params[k] for k in CONFIG_KEYS if k in params})


def regular_polygon(center: Tuple[float, float], radius: float, sides: int, phase: float = 0.0) -> List[Tuple[float, float]]:
    theta = phase + np.arange(sides) * (2.0 * math.pi / sides)
    return [(center[0] + radius * float(np.cos(t)), center[1] + radius * float(np.sin(t))) for t in theta]


def run_fan(world: World, pointer: Vector2, params: Dict[str, Any]) -> Tuple[World, List[Ray]]:
    ctx = SimulationContext(world=world, pointer=pointer, config=config_from_params(params))
    return world, cast_fan(ctx)
