"""Summary statistics over a fan of cast rays."""

from __future__ import annotations

from typing import Dict, List, Sequence

import numpy as np

from rc_core.rays import Ray, RayState
from rc_core.segment import Segment
from rc_core.world import World


def bounce_counts(rays: Sequence[Ray]) -> np.ndarray:
    return np.array([r.bounce_count for r in rays], dtype=int)


def path_lengths(rays: Sequence[Ray]) -> np.ndarray:
    return np.array([r.length() for r in rays], dtype=float)


def final_intensities(rays: Sequence[Ray]) -> np.ndarray:
    return np.array([r.intensity for r in rays], dtype=float)


def termination_counts(rays: Sequence[Ray]) -> Dict[str, int]:
    out = {s.value: 0 for s in RayState}
    for r in rays:
        out[r.state.value] += 1
    return out


def obstacle_hit_counts(rays: Sequence[Ray]) -> Dict[str, int]:
    """Bounces per obstacle label."""
    out: Dict[str, int] = {}
    for r in rays:
        for rec in r.bounces:
            out[rec.obstacle.label] = out.get(rec.obstacle.label, 0) + 1
    return out


def fan_summary(rays: Sequence[Ray]) -> Dict[str, object]:
    b = bounce_counts(rays)
    lengths = path_lengths(rays)
    inten = final_intensities(rays)
    if len(rays) == 0:
        return {"rays": 0, "terminations": termination_counts(rays), "bounce_hist": {}, "obstacle_hits": {}}
    values, counts = np.unique(b, return_counts=True)
    return {
        "rays": len(rays),
        "terminations": termination_counts(rays),
        "bounce_hist": {int(v): int(c) for v, c in zip(values, counts)},
        "mean_bounces": float(np.mean(b)),
        "mean_length": float(np.mean(lengths)),
        "max_length": float(np.max(lengths)),
        "min_intensity": float(np.min(inten)),
        "obstacle_hits": obstacle_hit_counts(rays),
    }


def _on_segment(point, seg: Segment, atol: float) -> bool:
    a = seg.start.as_array()
    b = seg.end.as_array()
    p = point.as_array()
    ab = b - a
    t = float(np.clip(np.dot(p - a, ab) / np.dot(ab, ab), 0.0, 1.0))
    return bool(np.linalg.norm(a + t * ab - p) <= atol)


def invariant_failures(rays: Sequence[Ray], world: World | None = None, atol: float = 1e-6) -> List[str]:
    """Human-readable violations of the ray bookkeeping rules; empty when all hold."""

    failures: List[str] = []
    for i, r in enumerate(rays):
        n = r.bounce_count + 1
        if not (len(r.points) == len(r.directions) == len(r.intensities) == n):
            failures.append(f"ray {i}: history lengths {len(r.points)}/{len(r.directions)}/{len(r.intensities)} != {n}")
        if r.bounce_count > r.max_bounces:
            failures.append(f"ray {i}: {r.bounce_count} bounces > max {r.max_bounces}")
        if np.any(np.diff(r.intensities) > 0):
            failures.append(f"ray {i}: intensity increased")
        floor = 1.0 - r.max_bounces * r.intensity_drop
        if r.intensity < floor - atol:
            failures.append(f"ray {i}: intensity {r.intensity:.6f} below floor {floor:.6f}")
        if not r.points[0].equals(r.origin):
            failures.append(f"ray {i}: first point is not the origin")
        if world is not None and r.max_bounces == 0 and r.terminus is not None:
            if not any(_on_segment(r.terminus, s, atol) for s in world):
                failures.append(f"ray {i}: pure-cast terminus {r.terminus} not on any obstacle")
    return failures
