"""
Character grid - the compositing surface shared by all render layers.

Core design:
- Three same-shape numpy arrays (chars, fg, bg) indexed [y, x]
- chars holds Unicode code points, fg/bg hold packed 0xRRGGBB colors
- All boundary handling is absorbing: writes outside are ignored,
  reads outside return the blank cell
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..core.colors import DEFAULT_BG, DEFAULT_FG, hex_to_int, int_to_hex

# Space character code - blank cell
SPACE = ord(" ")


@dataclass(frozen=True)
class Cell:
    """A single grid cell with character and hex colors."""
    char: str = " "
    fg: str = DEFAULT_FG
    bg: str = DEFAULT_BG


BLANK_CELL = Cell()


class Grid:
    """width x height grid of (char, fg, bg) cells."""

    def __init__(self, width: int, height: int):
        self.width = max(0, int(width))
        self.height = max(0, int(height))
        shape = (self.height, self.width)

        self.chars = np.full(shape, SPACE, dtype=np.uint32)
        self.fg = np.full(shape, hex_to_int(DEFAULT_FG), dtype=np.uint32)
        self.bg = np.full(shape, hex_to_int(DEFAULT_BG), dtype=np.uint32)

        # Back buffer reused by snapshot()
        self._back_chars = np.empty_like(self.chars)
        self._back_fg = np.empty_like(self.fg)
        self._back_bg = np.empty_like(self.bg)

    @property
    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_cell(self, x: int, y: int, char: str, fg: Optional[str] = None, bg: Optional[str] = None):
        """Write a glyph; each color is only updated when supplied."""
        if not self.in_bounds(x, y):
            return
        self.chars[y, x] = ord(char[0]) if char else SPACE
        if fg:
            self.fg[y, x] = hex_to_int(fg)
        if bg:
            self.bg[y, x] = hex_to_int(bg)

    def get_cell(self, x: int, y: int) -> Cell:
        """Read a cell. Out of bounds returns the blank cell."""
        if not self.in_bounds(x, y):
            return BLANK_CELL
        return Cell(
            chr(int(self.chars[y, x])),
            int_to_hex(self.fg[y, x]),
            int_to_hex(self.bg[y, x]),
        )

    def is_blank(self, x: int, y: int) -> bool:
        """True for a space glyph (and for any out-of-bounds position)."""
        if not self.in_bounds(x, y):
            return True
        return int(self.chars[y, x]) == SPACE

    def clear(self, char: str = " ", fg: str = DEFAULT_FG, bg: str = DEFAULT_BG):
        """Reset every cell to the given defaults."""
        self.chars.fill(ord(char[0]) if char else SPACE)
        self.fg.fill(hex_to_int(fg))
        self.bg.fill(hex_to_int(bg))

    def fill_rect(self, x: int, y: int, w: int, h: int, char: str,
                  fg: Optional[str] = None, bg: Optional[str] = None):
        """Fill a rectangle, clipped at the grid edges."""
        x1, y1 = max(0, x), max(0, y)
        x2, y2 = min(self.width, x + w), min(self.height, y + h)
        if x1 >= x2 or y1 >= y2:
            return
        self.chars[y1:y2, x1:x2] = ord(char[0]) if char else SPACE
        if fg:
            self.fg[y1:y2, x1:x2] = hex_to_int(fg)
        if bg:
            self.bg[y1:y2, x1:x2] = hex_to_int(bg)

    def snapshot(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Copy the current cells into the back buffer and return it.

        The returned arrays are overwritten by the next snapshot() call.
        """
        np.copyto(self._back_chars, self.chars)
        np.copyto(self._back_fg, self.fg)
        np.copyto(self._back_bg, self.bg)
        return self._back_chars, self._back_fg, self._back_bg

    def rows(self) -> list[str]:
        """Glyphs only, one string per row."""
        return ["".join(chr(c) for c in row) for row in self.chars.tolist()]

    def render_plain(self) -> str:
        """Render grid without colors (plain text)."""
        return "\n".join(self.rows())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.chars, other.chars)
            and np.array_equal(self.fg, other.fg)
            and np.array_equal(self.bg, other.bg)
        )
