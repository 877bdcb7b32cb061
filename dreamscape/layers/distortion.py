"""
Distortion layer - post-process warp and glitch.

Runs last. Every destination cell pulls its content from a motion-driven
source position in a snapshot of the composed grid (backward warp).
Destinations whose source falls outside the grid keep their current
content. Above GLITCH_THRESHOLD a sparse glitch pass stamps block glyphs.
"""

from __future__ import annotations

import numpy as np

from ..core.colors import GLITCH_COLOR, hex_to_int
from ..core.scene import SceneSpec, table_key
from ..widget.grid import Grid

SEVERITY_STRENGTHS = {
    "none": 0.0,
    "low": 0.25,
    "medium": 0.5,
    "high": 0.75,
    "extreme": 1.0,
}
DEFAULT_STRENGTH = 0.5

GLITCH_THRESHOLD = 0.7
GLITCH_RATE_SLOPE = 0.15  # 0% at threshold, 4.5% at strength 1.0
GLITCH_CHARS = ("█", "▓", "▒", "░", "╳", "╬", "┼", "≡", "≋")
_GLITCH_CODES = np.array([ord(c) for c in GLITCH_CHARS], dtype=np.uint32)


def distortion_strength(distortion: str) -> float:
    return SEVERITY_STRENGTHS.get(table_key(distortion), DEFAULT_STRENGTH)


def glitch_rate(strength: float) -> float:
    """Per-cell glitch probability; zero below the threshold."""
    if strength < GLITCH_THRESHOLD:
        return 0.0
    return (strength - GLITCH_THRESHOLD) * GLITCH_RATE_SLOPE


def compute_offsets(
    width: int, height: int, motion: str, time: float, seed: float, strength: float,
) -> tuple[np.ndarray, np.ndarray]:
    """Continuous (dx, dy) source offsets for every cell, shape (height, width)."""
    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    cx = width / 2
    cy = height / 2
    # normalized -1..1 around the center
    nx = (xs - cx) / cx if cx else np.zeros_like(xs)
    ny = (ys - cy) / cy if cy else np.zeros_like(ys)
    s = strength
    t = time

    kind = table_key(motion)
    if kind == "falling":
        dy = np.sin(xs * 0.3 + t * 1.5 + seed) * s * 3
        dx = np.cos(ys * 0.2 + t * 0.5) * s * 0.5
    elif kind == "rising":
        dy = -np.sin(xs * 0.3 + t * 1.5 + seed) * s * 3
        dx = np.cos(ys * 0.2 + t * 0.5) * s * 0.5
    elif kind == "spinning":
        angle = t * 0.8 + seed
        dist = np.sqrt(nx * nx + ny * ny)
        dx = np.cos(angle + dist * 3) * s * 4 * dist
        dy = np.sin(angle + dist * 3) * s * 4 * dist
    elif kind == "pulsing":
        pulse = np.sin(t * 2 + seed) * 0.5 + 0.5
        dx = nx * pulse * s * 5
        dy = ny * pulse * s * 5
    elif kind == "drifting":
        dx = np.sin(ys * 0.15 + t * 0.4 + seed) * s * 3 + np.sin(t * 0.2) * s
        dy = np.cos(xs * 0.1 + t * 0.3) * s * 0.5
    elif kind == "expanding":
        pulse = (np.sin(t * 1.2 + seed) + 1) * 0.5
        dx = nx * pulse * s * 6
        dy = ny * pulse * s * 6
    elif kind == "contracting":
        pulse = (np.cos(t * 1.2 + seed) + 1) * 0.5
        dx = -nx * pulse * s * 6
        dy = -ny * pulse * s * 6
    elif kind == "flowing":
        dx = np.sin(ys * 0.1 + t * 0.6 + seed) * s * 4 + np.sin(ys * 0.05 + t * 0.3) * s * 2
        dy = np.cos(xs * 0.08 + t * 0.2) * s
    elif kind == "chaotic":
        dx = np.sin(xs * 0.5 + t * 2 + seed) * s * 4 + np.cos(ys * 0.7 + t * 3) * s * 2
        dy = np.cos(ys * 0.5 + t * 2.5 + seed) * s * 4 + np.sin(xs * 0.3 + t * 1.5) * s * 2
    else:
        # Low-amplitude wobble for static and unrecognized motions
        dx = np.sin(xs * 0.2 + seed) * s * 0.5
        dy = np.cos(ys * 0.2 + seed) * s * 0.5

    return dx, dy


def apply_distortion_layer(grid: Grid, spec: SceneSpec, time: float, seed: int, delta_time: float) -> None:
    """Warp the composed grid, then glitch it at high strength."""
    strength = distortion_strength(spec.distortion)
    if strength <= 0 or grid.size == 0:
        return

    src_chars, src_fg, src_bg = grid.snapshot()

    dx, dy = compute_offsets(grid.width, grid.height, spec.motion, time, float(seed), strength)
    ys, xs = np.indices((grid.height, grid.width))
    # Round half up onto the nearest source cell
    src_x = np.floor(xs + dx + 0.5).astype(np.intp)
    src_y = np.floor(ys + dy + 0.5).astype(np.intp)
    valid = (src_x >= 0) & (src_x < grid.width) & (src_y >= 0) & (src_y < grid.height)

    sy, sx = src_y[valid], src_x[valid]
    grid.chars[valid] = src_chars[sy, sx]
    grid.fg[valid] = src_fg[sy, sx]
    grid.bg[valid] = src_bg[sy, sx]

    rate = glitch_rate(strength)
    if rate > 0:
        _apply_glitch(grid, time, float(seed), rate)


def _apply_glitch(grid: Grid, time: float, seed: float, rate: float) -> None:
    """Stamp glitch glyphs on a time-varying pseudo-random subset of cells."""
    ys, xs = np.indices((grid.height, grid.width)).astype(np.float64)
    h = np.sin(xs * 92.1 + ys * 301.7 + time * 50 + seed * 7.3) * 43758.5
    prob = h - np.floor(h)
    hit = prob < rate

    index = np.floor(prob * 100).astype(np.intp) % len(GLITCH_CHARS)
    grid.chars[hit] = _GLITCH_CODES[index[hit]]
    grid.fg[hit] = hex_to_int(GLITCH_COLOR)
