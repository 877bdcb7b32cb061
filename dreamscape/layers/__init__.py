"""
Render layers - stateless functions that paint onto the grid.

Every layer shares one signature:
    layer(grid, spec, time, seed, delta_time) -> None

The order is load-bearing: art must exist before noise fills the
remaining space and before distortion warps the composite.
"""

from typing import Callable

from ..core.scene import SceneSpec
from ..widget.grid import Grid
from .art import apply_art_layer
from .distortion import apply_distortion_layer
from .noise import apply_noise_layer

Layer = Callable[[Grid, SceneSpec, float, int, float], None]

DEFAULT_LAYERS: tuple[Layer, ...] = (
    apply_art_layer,
    apply_noise_layer,
    apply_distortion_layer,
)

__all__ = [
    "Layer",
    "DEFAULT_LAYERS",
    "apply_art_layer",
    "apply_noise_layer",
    "apply_distortion_layer",
]
