"""Scene model: the normalized parameters driving one session.

A SceneSpec is produced once per session by an external interpreter,
read every frame by the layers, and never mutated.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping


class Motion(str, Enum):
    """Dominant motion pattern of the scene."""
    FALLING = "falling"
    RISING = "rising"
    DRIFTING = "drifting"
    SPINNING = "spinning"
    PULSING = "pulsing"
    EXPANDING = "expanding"
    CONTRACTING = "contracting"
    FLOWING = "flowing"
    STATIC = "static"
    CHAOTIC = "chaotic"


class Distortion(str, Enum):
    """Level of visual warping/instability."""
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EXTREME = "extreme"


class Tempo(str, Enum):
    """Animation speed class."""
    FROZEN = "frozen"
    SLOW = "slow"
    MEDIUM = "medium"
    FAST = "fast"
    FRANTIC = "frantic"


class Mood(str, Enum):
    """Emotional tone of the scene."""
    SURREAL = "surreal"
    CALM = "calm"
    ANXIOUS = "anxious"
    ETHEREAL = "ethereal"
    DARK = "dark"
    WHIMSICAL = "whimsical"
    MELANCHOLIC = "melancholic"
    EUPHORIC = "euphoric"
    EERIE = "eerie"
    NOSTALGIC = "nostalgic"


# =============================================================================
# Fallback values
# =============================================================================

DEFAULT_ASCII_ART = ("   ·  ·  ·  ", "  ·  ◎  ·  ", "   ·  ·  ·  ")
DEFAULT_COLOR_PALETTE = ("#8888cc", "#aa88cc", "#88aacc", "#cc88aa", "#88ccaa")
DEFAULT_DOMINANT_ELEMENTS = ("void",)
DEFAULT_DENSITY = 0.5

MAX_DOMINANT_ELEMENTS = 8


@dataclass(frozen=True)
class SceneSpec:
    """Immutable scene parameters shared by all layers."""
    ascii_art: tuple[str, ...] = DEFAULT_ASCII_ART
    color_palette: tuple[str, ...] = DEFAULT_COLOR_PALETTE
    dominant_elements: tuple[str, ...] = DEFAULT_DOMINANT_ELEMENTS
    motion: Motion = Motion.DRIFTING
    distortion: Distortion = Distortion.MEDIUM
    tempo: Tempo = Tempo.MEDIUM
    density: float = DEFAULT_DENSITY
    mood: Mood = Mood.SURREAL

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "SceneSpec":
        """Build a spec from an already-decoded mapping.

        Keys may use spaces or mixed case ("ASCII art" == "ascii_art").
        Invalid values fall back to defaults instead of raising.
        """
        data = {_normalize_key(k): v for k, v in d.items()}
        return cls(
            ascii_art=_string_tuple(data.get("ascii_art"), DEFAULT_ASCII_ART),
            color_palette=_string_tuple(data.get("color_palette"), DEFAULT_COLOR_PALETTE),
            dominant_elements=_string_tuple(data.get("dominant_elements"), DEFAULT_DOMINANT_ELEMENTS),
            motion=_parse_enum(data.get("motion"), Motion, Motion.DRIFTING),
            distortion=_parse_enum(data.get("distortion"), Distortion, Distortion.MEDIUM),
            tempo=_parse_enum(data.get("tempo"), Tempo, Tempo.MEDIUM),
            density=_parse_number(data.get("density"), DEFAULT_DENSITY),
            mood=_parse_enum(data.get("mood"), Mood, Mood.SURREAL),
        )

    def to_dict(self) -> dict:
        return {
            "ascii_art": list(self.ascii_art),
            "color_palette": list(self.color_palette),
            "dominant_elements": list(self.dominant_elements),
            "motion": table_key(self.motion),
            "distortion": table_key(self.distortion),
            "tempo": table_key(self.tempo),
            "density": self.density,
            "mood": table_key(self.mood),
        }


def table_key(value: Any) -> str:
    """Lookup key for constant tables: enum members and raw strings alike."""
    return value.value if isinstance(value, Enum) else str(value)


def normalize_scene_spec(spec: SceneSpec) -> SceneSpec:
    """Clamp density and substitute fallbacks for empty sequences."""
    elements = tuple(spec.dominant_elements[:MAX_DOMINANT_ELEMENTS])
    return replace(
        spec,
        density=max(0.0, min(1.0, float(spec.density))),
        dominant_elements=elements or DEFAULT_DOMINANT_ELEMENTS,
        ascii_art=tuple(spec.ascii_art) or DEFAULT_ASCII_ART,
        color_palette=tuple(spec.color_palette) or DEFAULT_COLOR_PALETTE,
    )


# =============================================================================
# Parsing helpers
# =============================================================================

def _normalize_key(key: str) -> str:
    return "_".join(str(key).split()).lower()


def _string_tuple(value: Any, fallback: tuple[str, ...]) -> tuple[str, ...]:
    if isinstance(value, (list, tuple)):
        return tuple(v for v in value if isinstance(v, str))
    return fallback


def _parse_enum(value: Any, enum_cls: type[Enum], fallback: Enum) -> Any:
    if not isinstance(value, str):
        return fallback
    try:
        return enum_cls(value)
    except ValueError:
        return fallback


def _parse_number(value: Any, fallback: float) -> float:
    # bool is an int subclass; "true" is not a density
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return fallback
    if math.isnan(value):
        return fallback
    return float(value)


