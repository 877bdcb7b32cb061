"""Widget rendering - the cell grid and the frame renderer."""

from .grid import BLANK_CELL, Cell, Grid
from .renderer import Renderer

__all__ = [
    "Cell",
    "BLANK_CELL",
    "Grid",
    "Renderer",
]
