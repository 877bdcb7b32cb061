"""
Frame renderer - composes one grid per frame from the fixed layer stack.

Each frame:
  1. Clear the grid
  2. Apply art -> noise -> distortion
  3. Return the grid (reused every call; valid until the next frame)
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.scene import SceneSpec
from .grid import Grid

logger = logging.getLogger(__name__)


class Renderer:
    """Owns the compositing grid and runs the layers over it."""

    def __init__(self, width: int, height: int, layers: Optional[Sequence] = None):
        if layers is None:
            from ..layers import DEFAULT_LAYERS
            layers = DEFAULT_LAYERS
        self.layers = tuple(layers)
        self._grid = Grid(width, height)

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    def render_frame(self, spec: SceneSpec, time: float, seed: int, delta_time: float) -> Grid:
        """Render a single frame."""
        self._grid.clear()
        for layer in self.layers:
            layer(self._grid, spec, time, seed, delta_time)
        return self._grid

    def resize(self, width: int, height: int) -> None:
        """Discard the grid and allocate a blank one at the new size."""
        logger.debug("Renderer resize %dx%d -> %dx%d", self.width, self.height, width, height)
        self._grid = Grid(width, height)
