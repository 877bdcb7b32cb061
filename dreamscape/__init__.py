"""Dreamscape - deterministic procedural animation on a character grid."""

from .core import (
    AnimationLoop,
    AnimationState,
    Distortion,
    Engine,
    EngineEvent,
    Mood,
    Motion,
    SceneSpec,
    Tempo,
    derive_seed,
    fps_from_tempo,
    normalize_scene_spec,
    seed_from_text,
)
from .widget import Cell, Grid, Renderer

__version__ = "0.1.0"

__all__ = [
    "AnimationLoop",
    "AnimationState",
    "Cell",
    "Distortion",
    "Engine",
    "EngineEvent",
    "Grid",
    "Mood",
    "Motion",
    "Renderer",
    "SceneSpec",
    "Tempo",
    "derive_seed",
    "fps_from_tempo",
    "normalize_scene_spec",
    "seed_from_text",
]
