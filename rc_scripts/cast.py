"""Cast a fan of rays through a JSON scene and render it.

Usage:
    python -m rc_scripts.cast scene.json --out artifacts/cast --pointer 150 100 --frames 1
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from analysis.path_stats import fan_summary
from plots.render import MatplotlibRenderer
from rc_core.context import FixedPointer, TrackPointer, run_frames
from rc_core.logging_config import setup_logging
from rc_core.vector import Vector2
from rc_io.scene_json import load_scene

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Cast rays through a JSON scene.")
    parser.add_argument("scene", help="Scene JSON file")
    parser.add_argument("--out", default="artifacts/cast", help="Output directory for frames")
    parser.add_argument("--pointer", nargs=2, type=float, metavar=("X", "Y"), help="Ray origin (overrides the scene)")
    parser.add_argument("--to", nargs=2, type=float, metavar=("X", "Y"), help="Move the pointer linearly to this point over the frames")
    parser.add_argument("--frames", type=int, default=1)
    parser.add_argument("--normals", action="store_true", help="Draw obstacle normals")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    world, pointer, config = load_scene(args.scene)
    if args.pointer is not None:
        pointer = Vector2(*args.pointer)
    if pointer is None:
        parser.error("scene has no pointer; pass --pointer X Y")
    if args.to is not None:
        source = TrackPointer.line(pointer, Vector2(*args.to), max(args.frames, 1))
    else:
        source = FixedPointer(pointer)

    renderer = MatplotlibRenderer(str(Path(args.out)), show_normals=args.normals)
    frames = run_frames(world, source, config, renderer, frames=args.frames)
    for i, rays in enumerate(frames):
        logger.info("frame %d: %s", i, fan_summary(rays)["terminations"])
    for path in renderer.written:
        print(path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
