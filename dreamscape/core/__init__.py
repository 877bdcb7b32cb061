"""Core utilities - seeds, scene model, colors, playback timing and the session engine."""

from .seed import seed_from_text, derive_seed
from .scene import (
    Distortion,
    Mood,
    Motion,
    SceneSpec,
    Tempo,
    normalize_scene_spec,
)
from .colors import dim_color, resolve_palette
from .animation_loop import AnimationLoop, AnimationState, fps_from_tempo
from .engine import Engine, EngineEvent

__all__ = [
    # Seeds
    "seed_from_text",
    "derive_seed",
    # Scene
    "SceneSpec",
    "Motion",
    "Distortion",
    "Tempo",
    "Mood",
    "normalize_scene_spec",
    # Colors
    "dim_color",
    "resolve_palette",
    # Playback
    "AnimationLoop",
    "AnimationState",
    "fps_from_tempo",
    "Engine",
    "EngineEvent",
]
