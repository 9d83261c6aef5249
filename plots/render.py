"""Matplotlib renderer for cast fans.

Rays are drawn on a black background, one stroke per leg, shaded in
grayscale by the intensity the ray had while travelling that leg.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence
import warnings

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection

from rc_core.rays import Ray
from rc_core.segment import Segment

logger = logging.getLogger(__name__)


def _save(fig: plt.Figure, outdir: str, name: str) -> str:
    Path(outdir).mkdir(parents=True, exist_ok=True)
    png = Path(outdir) / f"{name}.png"
    pdf = Path(outdir) / f"{name}.pdf"
    fig.savefig(png, dpi=150, bbox_inches="tight")
    try:
        fig.savefig(pdf, bbox_inches="tight")
    except PermissionError:
        warnings.warn(
            f"Could not write '{pdf}' (permission denied). Saved PNG only.",
            RuntimeWarning,
            stacklevel=2,
        )
    plt.close(fig)
    return str(png)


def intensity_gray(intensity: float) -> float:
    return float(np.clip(intensity, 0.0, 1.0))


def _ray_lines(rays: Sequence[Ray]) -> tuple[np.ndarray, np.ndarray]:
    lines = []
    shades = []
    for ray in rays:
        for start, end, inten in ray.legs():
            lines.append([[start.x, start.y], [end.x, end.y]])
            shades.append(intensity_gray(inten))
    return np.asarray(lines, dtype=float).reshape(-1, 2, 2), np.asarray(shades, dtype=float)


def _draw(ax: plt.Axes, segments: Sequence[Segment], rays: Sequence[Ray], show_normals: bool = False) -> None:
    ax.set_facecolor("black")
    lines, shades = _ray_lines(rays)
    if len(lines):
        colors = np.repeat(shades[:, None], 3, axis=1)
        ax.add_collection(LineCollection(lines, colors=colors, linewidths=0.6))
    for seg in segments:
        xy = seg.as_array()
        ax.plot(xy[:, 0], xy[:, 1], color="tab:orange", linewidth=2.0)
        if show_normals:
            mid = seg.midpoint()
            n = seg.return_normal()
            scale = 0.1 * seg.length()
            ax.arrow(mid.x, mid.y, n.x * scale, n.y * scale, color="tab:cyan", width=0.002 * seg.length())
    ax.set_aspect("equal")
    ax.autoscale_view()


def plot_scene(
    segments: Sequence[Segment],
    rays: Sequence[Ray],
    outdir: str,
    name: str = "scene",
    limits: Optional[tuple[float, float, float, float]] = None,
    show_normals: bool = False,
) -> str:
    fig, ax = plt.subplots(figsize=(6, 6))
    _draw(ax, segments, rays, show_normals=show_normals)
    if limits is not None:
        xmin, ymin, xmax, ymax = limits
        ax.set_xlim(xmin, xmax)
        ax.set_ylim(ymin, ymax)
    ax.set_title(f"{name}: {len(rays)} rays, {len(segments)} obstacles")
    return _save(fig, outdir, name)


def plot_bounce_debug(ray: Ray, outdir: str, name: str = "bounces", arrow_len: float = 20.0) -> str:
    """Incoming (red), normal (cyan) and reflected (green) vectors at every bounce."""

    fig, ax = plt.subplots(figsize=(6, 6))
    obstacles: List[Segment] = []
    for rec in ray.bounces:
        if all(rec.obstacle is not o for o in obstacles):
            obstacles.append(rec.obstacle)
    _draw(ax, obstacles, [ray])
    for rec in ray.bounces:
        for vec, color in ((rec.incoming.negated(), "red"), (rec.normal, "cyan"), (rec.reflected, "lime")):
            ax.quiver(rec.point.x, rec.point.y, vec.x, vec.y, color=color, angles="xy", scale_units="xy", scale=1.0 / arrow_len)
    ax.set_title(f"{name}: {ray.bounce_count} bounce(s)")
    return _save(fig, outdir, name)


def plot_bounce_histogram(bounce_counts: np.ndarray, max_bounces: int, outdir: str) -> str:
    fig, ax = plt.subplots()
    bins = np.arange(max_bounces + 2) - 0.5
    ax.hist(np.asarray(bounce_counts, dtype=int), bins=bins)
    ax.set_xlabel("bounces")
    ax.set_ylabel("rays")
    ax.set_title("bounce histogram")
    return _save(fig, outdir, "bounces_hist")


class MatplotlibRenderer:
    """Renderer collaborator that writes one figure per frame."""

    def __init__(self, outdir: str, prefix: str = "frame", show_normals: bool = False) -> None:
        self.outdir = outdir
        self.prefix = prefix
        self.show_normals = show_normals
        self.written: List[str] = []
        self._segments: Sequence[Segment] = ()
        self._rays: List[Ray] = []

    def begin_frame(self, frame: int) -> None:
        self._segments = ()
        self._rays = []

    def draw_segments(self, segments: Sequence[Segment]) -> None:
        self._segments = segments

    def draw_ray(self, ray: Ray) -> None:
        self._rays.append(ray)

    def end_frame(self, frame: int) -> None:
        name = f"{self.prefix}_{frame:03d}"
        self.written.append(plot_scene(self._segments, self._rays, self.outdir, name=name, show_normals=self.show_normals))
        logger.debug("wrote %s", self.written[-1])
