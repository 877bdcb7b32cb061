"""
Art layer - centers the scene's ASCII art and brings it to life.

- Centers the art on the grid with a per-motion "breathing" offset
- Colors each glyph from the palette with a flowing gradient and shimmer
- Scatters faded echoes of the art's glyphs around it for depth
"""

from __future__ import annotations

import math
from typing import Sequence

from ..core.colors import dim_color, resolve_palette
from ..core.scene import SceneSpec, table_key
from ..widget.grid import Grid

BREATH_AMPLITUDE = 2.0

# Echo particles
ECHO_BASE_COUNT = 8
ECHO_DENSITY_COUNT = 20
ECHO_DIM = 0.35


# =============================================================================
# Motion offsets
# =============================================================================

def _falling(t: float, seed: float, amp: float) -> tuple[float, float]:
    return math.sin(t * 0.3 + seed) * amp * 0.3, math.sin(t * 0.5) * amp


def _rising(t: float, seed: float, amp: float) -> tuple[float, float]:
    return math.sin(t * 0.3 + seed) * amp * 0.3, -math.sin(t * 0.5) * amp


def _drifting(t: float, seed: float, amp: float) -> tuple[float, float]:
    return math.sin(t * 0.2 + seed * 0.1) * amp * 1.5, math.cos(t * 0.15) * amp * 0.4


def _spinning(t: float, seed: float, amp: float) -> tuple[float, float]:
    angle = t * 0.3 + seed
    return math.cos(angle) * amp, math.sin(angle) * amp * 0.5


def _pulsing(t: float, seed: float, amp: float) -> tuple[float, float]:
    pulse = math.sin(t * 1.5 + seed) * 0.5 + 0.5
    return 0.0, pulse * amp * 0.5


def _expanding(t: float, seed: float, amp: float) -> tuple[float, float]:
    return math.sin(t * 0.4) * amp * 0.5, math.cos(t * 0.3) * amp * 0.5


def _flowing(t: float, seed: float, amp: float) -> tuple[float, float]:
    return math.sin(t * 0.25 + seed * 0.1) * amp * 2, math.cos(t * 0.15) * amp * 0.3


def _chaotic(t: float, seed: float, amp: float) -> tuple[float, float]:
    return math.sin(t * 2 + seed) * amp * 1.5, math.cos(t * 1.7 + seed * 1.3) * amp


def _static(t: float, seed: float, amp: float) -> tuple[float, float]:
    return 0.0, 0.0


MOTION_OFFSETS = {
    "falling": _falling,
    "rising": _rising,
    "drifting": _drifting,
    "spinning": _spinning,
    "pulsing": _pulsing,
    "expanding": _expanding,
    "contracting": _static,
    "flowing": _flowing,
    "chaotic": _chaotic,
    "static": _static,
}


def motion_offset(motion: str, time: float, seed: float) -> tuple[float, float]:
    """Closed-form (dx, dy) breathing offset. Unknown motions stay put."""
    offset = MOTION_OFFSETS.get(table_key(motion), _static)
    return offset(time, seed, BREATH_AMPLITUDE)


# =============================================================================
# Deterministic helpers
# =============================================================================

def seeded_float(seed: float, lo: float, hi: float) -> float:
    """Map *seed* to a stable float in [lo, hi)."""
    n = math.sin(seed * 127.1 + 311.7) * 43758.5453
    return lo + (n - math.floor(n)) * (hi - lo)


def hash_int(a: float, b: float) -> int:
    n = math.sin(a * 12.9898 + b * 78.233) * 43758.5453
    return math.floor((n - math.floor(n)) * 2147483647)


def art_dimensions(art: Sequence[str]) -> tuple[int, int]:
    """(width, height) in code points, not storage units."""
    if not art:
        return 0, 0
    return max(len(line) for line in art), len(art)


def char_color(x: int, y: int, art_width: int, art_height: int,
               palette: Sequence[str], time: float, seed: float) -> str:
    """Palette gradient across the art with a brightness shimmer."""
    nx = x / max(1, art_width)
    ny = y / max(1, art_height)

    wave = math.sin(nx * math.pi * 2 + time * 0.3 + seed * 0.01) * 0.5 + 0.5
    vert_wave = math.cos(ny * math.pi * 1.5 + time * 0.2) * 0.5 + 0.5

    color_index = math.floor((wave + vert_wave) * 0.5 * len(palette))
    base = palette[abs(color_index) % len(palette)]

    # 0.7 - 1.0
    pulse = math.sin(time * 1.2 + x * 0.1 + y * 0.15) * 0.15 + 0.85
    return dim_color(base, pulse)


# =============================================================================
# Layer
# =============================================================================

def apply_art_layer(grid: Grid, spec: SceneSpec, time: float, seed: int, delta_time: float) -> None:
    """Draw the centered, shimmering art and its echoes."""
    art = spec.ascii_art
    if not art:
        return

    palette = resolve_palette(spec)
    art_width, art_height = art_dimensions(art)

    offset_x = (grid.width - art_width) // 2
    offset_y = (grid.height - art_height) // 2
    dx, dy = motion_offset(spec.motion, time, seed)

    for row, line in enumerate(art):
        for col, ch in enumerate(line):
            if ch == " ":
                continue
            gx = math.floor(offset_x + col + dx)
            gy = math.floor(offset_y + row + dy)
            if not grid.in_bounds(gx, gy):
                continue
            color = char_color(col, row, art_width, art_height, palette, time, seed)
            grid.set_cell(gx, gy, ch, color)

    _draw_echoes(grid, spec, time, seed, palette, offset_x, offset_y, art_width, art_height)


def _art_glyphs(art: Sequence[str]) -> list[str]:
    """Distinct non-blank glyphs in order of first appearance."""
    glyphs: list[str] = []
    for line in art:
        for ch in line:
            if ch != " " and ch not in glyphs:
                glyphs.append(ch)
    return glyphs


def _draw_echoes(grid: Grid, spec: SceneSpec, time: float, seed: int,
                 palette: Sequence[str], art_x: int, art_y: int,
                 art_width: int, art_height: int) -> None:
    """Scatter dimmed art glyphs outside the art's bounding box.

    Candidates that land on the art box or an occupied cell are dropped
    without retry, so the count is an upper bound.
    """
    glyphs = _art_glyphs(spec.ascii_art)
    if not glyphs:
        return

    echo_count = math.floor(ECHO_BASE_COUNT + spec.density * ECHO_DENSITY_COUNT)
    center_x = grid.width / 2
    center_y = grid.height / 2
    reach = min(grid.width, grid.height) * 0.45

    for i in range(echo_count):
        angle = seeded_float(seed + i * 73, 0.0, math.pi * 2)
        distance = seeded_float(seed + i * 137 + 500, 0.3, 1.0) * reach

        ex = math.floor(center_x + math.cos(angle + time * 0.1) * distance)
        ey = math.floor(center_y + math.sin(angle + time * 0.08) * distance * 0.6)

        mx, my = motion_offset(spec.motion, time * 0.5, seed + i)
        ex += math.floor(mx * 0.5)
        ey += math.floor(my * 0.5)

        if not grid.in_bounds(ex, ey):
            continue
        if art_x <= ex < art_x + art_width and art_y <= ey < art_y + art_height:
            continue
        if not grid.is_blank(ex, ey):
            continue

        ch = glyphs[abs(hash_int(seed + i * 31, i)) % len(glyphs)]
        color = dim_color(palette[i % len(palette)], ECHO_DIM)
        grid.set_cell(ex, ey, ch, color)
