"""
Noise layer - sparse, mood-tinted background texture.

Fills only the cells still blank after the art layer with a 3-octave
fractal value noise field. Density sets the spatial grain, tempo sets how
fast the field evolves (frozen is a static field).
"""

from __future__ import annotations

import math

import numpy as np
from numba import njit

from ..core.colors import mood_tint
from ..core.scene import SceneSpec, table_key
from ..widget.grid import SPACE, Grid

# Glyph ramp, weighted toward blank so the field stays sparse
NOISE_CHARS = (" ", " ", " ", "·", "·", "∘", "░")
_NOISE_CODES = np.array([ord(c) for c in NOISE_CHARS], dtype=np.uint32)

OCTAVES = 3

TEMPO_TIME_SCALES = {
    "frozen": 0.0,
    "slow": 0.02,
    "medium": 0.05,
    "fast": 0.1,
    "frantic": 0.2,
}
DEFAULT_TIME_SCALE = 0.05


# =============================================================================
# Numba JIT-compiled value noise
# =============================================================================

@njit(cache=True)
def _lattice(a: float, b: float, c: float) -> float:
    """Sine-based pseudo-hash of a lattice corner, in [-1, 1)."""
    n = math.sin(a * 127.1 + b * 311.7 + c * 74.7) * 43758.5453
    return (n - math.floor(n)) * 2.0 - 1.0


@njit(cache=True)
def noise3d(x: float, y: float, z: float) -> float:
    """Value noise with smoothstep trilinear interpolation."""
    ix = math.floor(x)
    iy = math.floor(y)
    iz = math.floor(z)
    fx = x - ix
    fy = y - iy
    fz = z - iz

    sx = fx * fx * (3.0 - 2.0 * fx)
    sy = fy * fy * (3.0 - 2.0 * fy)
    sz = fz * fz * (3.0 - 2.0 * fz)

    n000 = _lattice(ix, iy, iz)
    n100 = _lattice(ix + 1, iy, iz)
    n010 = _lattice(ix, iy + 1, iz)
    n110 = _lattice(ix + 1, iy + 1, iz)
    n001 = _lattice(ix, iy, iz + 1)
    n101 = _lattice(ix + 1, iy, iz + 1)
    n011 = _lattice(ix, iy + 1, iz + 1)
    n111 = _lattice(ix + 1, iy + 1, iz + 1)

    nx00 = n000 + sx * (n100 - n000)
    nx10 = n010 + sx * (n110 - n010)
    nx01 = n001 + sx * (n101 - n001)
    nx11 = n011 + sx * (n111 - n011)

    nxy0 = nx00 + sy * (nx10 - nx00)
    nxy1 = nx01 + sy * (nx11 - nx01)

    return nxy0 + sz * (nxy1 - nxy0)


@njit(cache=True)
def fbm(x: float, y: float, t: float, seed: float, octaves: int) -> float:
    """Fractal sum of noise octaves, normalized back to [-1, 1]."""
    value = 0.0
    amplitude = 1.0
    frequency = 1.0
    max_amplitude = 0.0

    for i in range(octaves):
        value += amplitude * noise3d(x * frequency, y * frequency, t + seed + i * 100.0)
        max_amplitude += amplitude
        amplitude *= 0.5
        frequency *= 2.0

    return value / max_amplitude


@njit(cache=True)
def _noise_field(
    chars: np.ndarray, scale: float, t: float, seed: float,
    octaves: int, out: np.ndarray,
):
    """Sample fbm for every blank cell. Non-blank cells are left at 0."""
    height, width = chars.shape
    for y in range(height):
        for x in range(width):
            if chars[y, x] == SPACE:
                out[y, x] = fbm(x * scale, y * scale, t, seed, octaves)


# =============================================================================
# Layer
# =============================================================================

def noise_scale(spec: SceneSpec) -> float:
    """Higher density gives finer grain."""
    return 0.04 + spec.density * 0.08


def tempo_time_scale(tempo: str) -> float:
    return TEMPO_TIME_SCALES.get(table_key(tempo), DEFAULT_TIME_SCALE)


def apply_noise_layer(grid: Grid, spec: SceneSpec, time: float, seed: int, delta_time: float) -> None:
    """Fill blank cells with tinted noise glyphs."""
    if grid.size == 0:
        return

    field = np.zeros(grid.chars.shape, dtype=np.float64)
    _noise_field(
        grid.chars, noise_scale(spec), time * tempo_time_scale(spec.tempo),
        float(seed), OCTAVES, field,
    )

    norm = (field + 1.0) / 2.0
    index = np.clip(np.floor(norm * len(NOISE_CHARS)), 0, len(NOISE_CHARS) - 1).astype(np.intp)
    glyphs = _NOISE_CODES[index]
    write = (grid.chars == SPACE) & (glyphs != SPACE)

    # Brightness follows the field instead of a flat tint
    tint = mood_tint(spec.mood)
    brightness = 0.3 + norm * 0.5
    r = np.floor(tint.r * brightness).astype(np.uint32)
    g = np.floor(tint.g * brightness).astype(np.uint32)
    b = np.floor(tint.b * brightness).astype(np.uint32)
    packed = (r << 16) | (g << 8) | b

    grid.chars[write] = glyphs[write]
    grid.fg[write] = packed[write]
