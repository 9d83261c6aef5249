"""JSON scene definitions.

Schema:
    {
      "obstacles": [[[x0, y0], [x1, y1]], ...],   required, may be empty
      "labels":    ["wall", ...],                  optional, one per obstacle
      "pointer":   [x, y],                         optional
      "config":    {CastConfig fields},            optional
    }

Example:
    >>> scene = {"obstacles": [[[0, 0], [10, 0]]], "pointer": [5, 5]}
    >>> world, pointer, cfg = scene_from_dict(scene)
    >>> len(world), pointer, cfg.max_bounces
    (1, Vector2(x=5.0, y=5.0), 4)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

from rc_core.config import CastConfig
from rc_core.errors import DegenerateSegment, SceneFormatError
from rc_core.segment import Segment
from rc_core.vector import Vector2
from rc_core.world import World

logger = logging.getLogger(__name__)


def _point(raw: Any, where: str) -> Vector2:
    try:
        x, y = raw
        return Vector2(float(x), float(y))
    except (TypeError, ValueError) as exc:
        raise SceneFormatError(f"{where}: expected [x, y], got {raw!r}") from exc


def scene_from_dict(data: Mapping[str, Any]) -> Tuple[World, Optional[Vector2], CastConfig]:
    if not isinstance(data, Mapping):
        raise SceneFormatError(f"Scene must be a JSON object, got {type(data).__name__}")
    if "obstacles" not in data:
        raise SceneFormatError("Scene is missing 'obstacles'")
    raw_obstacles = data["obstacles"]
    if not isinstance(raw_obstacles, list):
        raise SceneFormatError(f"'obstacles' must be a list, got {type(raw_obstacles).__name__}")
    labels = data.get("labels")
    if labels is None:
        labels = [f"s{i}" for i in range(len(raw_obstacles))]
    elif not isinstance(labels, list):
        raise SceneFormatError(f"'labels' must be a list, got {type(labels).__name__}")
    if len(labels) != len(raw_obstacles):
        raise SceneFormatError(f"{len(labels)} labels for {len(raw_obstacles)} obstacles")

    world = World()
    for i, raw in enumerate(raw_obstacles):
        if not isinstance(raw, (list, tuple)) or len(raw) != 2:
            raise SceneFormatError(f"obstacles[{i}]: expected [[x0, y0], [x1, y1]], got {raw!r}")
        start = _point(raw[0], f"obstacles[{i}][0]")
        end = _point(raw[1], f"obstacles[{i}][1]")
        try:
            world.add_obstacle(Segment(start, end, str(labels[i])))
        except DegenerateSegment as exc:
            raise SceneFormatError(f"obstacles[{i}]: {exc}") from exc

    pointer = _point(data["pointer"], "pointer") if data.get("pointer") is not None else None
    try:
        config = CastConfig.from_mapping(data.get("config", {}))
    except (TypeError, ValueError) as exc:
        raise SceneFormatError(f"config: {exc}") from exc
    return world, pointer, config


def load_scene(filepath: str | Path) -> Tuple[World, Optional[Vector2], CastConfig]:
    """Read a scene file into a world, optional pointer and cast config."""

    path = Path(filepath)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SceneFormatError(f"{path}: invalid JSON ({exc})") from exc
    world, pointer, config = scene_from_dict(data)
    logger.info("Loaded scene %s: %d obstacle(s)", path, len(world))
    return world, pointer, config
