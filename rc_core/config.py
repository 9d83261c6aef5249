"""Cast configuration shared by every ray of a scene."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

from rc_core.reflection import REFLECTORS

NORMAL_MODES = ("right", "facing")


@dataclass(frozen=True)
class CastConfig:
    """Scene-wide casting parameters.

    angle_step: radians between successive rays of a fan.
    max_bounces: reflections allowed per ray (0 = pure casting).
    max_distance: length of each ray leg.
    intensity_drop: linear intensity loss per bounce.
    normal_mode: "right" always reflects off the right-hand normal,
        "facing" picks the normal pointing against the incoming ray.
    reflection_mode: "angular" or "closed_form".
    start_angle: angle of the first ray of a fan.
    """

    angle_step: float = math.pi / 90
    max_bounces: int = 4
    max_distance: float = 2000.0
    intensity_drop: float = 0.2
    normal_mode: str = "right"
    reflection_mode: str = "angular"
    start_angle: float = 0.0

    def __post_init__(self) -> None:
        if not self.angle_step > 0:
            raise ValueError(f"angle_step must be positive, got {self.angle_step}")
        if self.max_bounces < 0:
            raise ValueError(f"max_bounces must be >= 0, got {self.max_bounces}")
        if not (math.isfinite(self.max_distance) and self.max_distance > 0):
            raise ValueError(f"max_distance must be positive and finite, got {self.max_distance}")
        if self.intensity_drop < 0:
            raise ValueError(f"intensity_drop must be >= 0, got {self.intensity_drop}")
        if self.normal_mode not in NORMAL_MODES:
            raise ValueError(f"Unknown normal mode {self.normal_mode!r}; expected one of {list(NORMAL_MODES)}")
        if self.reflection_mode not in REFLECTORS:
            raise ValueError(f"Unknown reflection mode {self.reflection_mode!r}; expected one of {sorted(REFLECTORS)}")

    @property
    def min_intensity(self) -> float:
        return 1.0 - self.max_bounces * self.intensity_drop

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CastConfig":
        known = set(cls.__dataclass_fields__)
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        kwargs: Dict[str, Any] = dict(data)
        if "max_bounces" in kwargs:
            bounces = kwargs["max_bounces"]
            if isinstance(bounces, float) and not bounces.is_integer():
                raise ValueError(f"max_bounces must be a whole number, got {bounces}")
            kwargs["max_bounces"] = int(bounces)
        for key in ("angle_step", "max_distance", "intensity_drop", "start_angle"):
            if key in kwargs:
                kwargs[key] = float(kwargs[key])
        return cls(**kwargs)
