"""Centralized color definitions and helpers.

Colors travel through the renderer as "#rrggbb" hex strings and are stored
in the grid as packed 0xRRGGBB integers. Mood tables are immutable
constant data keyed by mood value strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .scene import SceneSpec, table_key


@dataclass(frozen=True)
class Tint:
    """Base RGB tint (0-255 channels) for background texture."""
    r: int
    g: int
    b: int

    def scaled(self, factor: float) -> Tuple[int, int, int]:
        """Channels multiplied by *factor* and floored."""
        return int(self.r * factor), int(self.g * factor), int(self.b * factor)


# Blank cell colors
DEFAULT_FG = "#888888"
DEFAULT_BG = "#000000"

# Accent used by the glitch pass
GLITCH_COLOR = "#ff3366"


# =============================================================================
# Mood Tables
# =============================================================================

MOOD_PALETTES: dict[str, tuple[str, ...]] = {
    "surreal": ("#cc44ff", "#ff44cc", "#44ccff", "#ffcc44", "#8844ff"),
    "calm": ("#4488cc", "#66aadd", "#88bbee", "#aaccee", "#88ccaa"),
    "anxious": ("#ff4444", "#ff6644", "#ffaa33", "#ff2222", "#cc2222"),
    "ethereal": ("#aabbff", "#ccddff", "#eeeeff", "#bbccff", "#99aaee"),
    "dark": ("#443355", "#332244", "#554466", "#221133", "#665577"),
    "whimsical": ("#ff88cc", "#88ffcc", "#ccff88", "#ffcc88", "#88ccff"),
    "melancholic": ("#4455aa", "#5566bb", "#334499", "#6677cc", "#223388"),
    "euphoric": ("#ffdd44", "#ffee66", "#ffcc22", "#ffaa00", "#ffff88"),
    "eerie": ("#22ff88", "#44cc66", "#11aa55", "#33dd77", "#00ff66"),
    "nostalgic": ("#cc9966", "#ddaa77", "#bb8855", "#eebb88", "#aa7744"),
}

DEFAULT_PALETTE: tuple[str, ...] = ("#8888cc", "#aa88cc", "#88aacc", "#cc88aa", "#88ccaa")

MOOD_TINTS: dict[str, Tint] = {
    "surreal": Tint(40, 20, 60),
    "calm": Tint(20, 30, 50),
    "anxious": Tint(50, 15, 15),
    "ethereal": Tint(30, 35, 55),
    "dark": Tint(15, 10, 25),
    "whimsical": Tint(45, 25, 40),
    "melancholic": Tint(20, 25, 45),
    "euphoric": Tint(50, 45, 15),
    "eerie": Tint(10, 40, 25),
    "nostalgic": Tint(45, 35, 20),
}

DEFAULT_TINT = Tint(25, 25, 35)


# =============================================================================
# Conversions
# =============================================================================

def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Encode 0-255 channels as "#rrggbb" (channels clamped)."""
    r, g, b = (max(0, min(255, int(c))) for c in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Decode "#rrggbb" into channels. Malformed input yields DEFAULT_FG."""
    value = hex_to_int(hex_color)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def hex_to_int(hex_color: str) -> int:
    """Decode "#rrggbb" into a packed 0xRRGGBB integer."""
    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    try:
        if len(digits) != 6:
            raise ValueError(hex_color)
        return int(digits, 16)
    except ValueError:
        return int(DEFAULT_FG[1:], 16)


def int_to_hex(value: int) -> str:
    """Encode a packed 0xRRGGBB integer as "#rrggbb"."""
    return f"#{int(value) & 0xFFFFFF:06x}"


def dim_color(hex_color: str, factor: float) -> str:
    """Multiply each channel by *factor* (clamped to [0, 1])."""
    factor = max(0.0, min(1.0, factor))
    r, g, b = hex_to_rgb(hex_color)
    return rgb_to_hex(int(r * factor), int(g * factor), int(b * factor))


# =============================================================================
# Lookups
# =============================================================================

def resolve_palette(spec: SceneSpec) -> tuple[str, ...]:
    """Spec palette first, then the mood palette, then the default."""
    if spec.color_palette:
        return tuple(spec.color_palette)
    return MOOD_PALETTES.get(table_key(spec.mood), DEFAULT_PALETTE)


def mood_tint(mood: str) -> Tint:
    return MOOD_TINTS.get(table_key(mood), DEFAULT_TINT)
