"""Shared test fixtures."""

import pytest

from dreamscape.core.scene import Distortion, Mood, Motion, SceneSpec, Tempo


@pytest.fixture
def sample_art():
    """Small multi-glyph art block."""
    return (
        "  /\\  ",
        " /  \\ ",
        "/_◎__\\",
    )


@pytest.fixture
def scene_spec(sample_art):
    """Typical scene with moderate distortion."""
    return SceneSpec(
        ascii_art=sample_art,
        color_palette=("#cc44ff", "#ff44cc", "#44ccff", "#ffcc44", "#8844ff"),
        dominant_elements=("mountain", "eye"),
        motion=Motion.DRIFTING,
        distortion=Distortion.MEDIUM,
        tempo=Tempo.MEDIUM,
        density=0.5,
        mood=Mood.SURREAL,
    )


@pytest.fixture
def calm_spec(sample_art):
    """Scene without distortion."""
    return SceneSpec(
        ascii_art=sample_art,
        motion=Motion.STATIC,
        distortion=Distortion.NONE,
        tempo=Tempo.SLOW,
        density=0.3,
        mood=Mood.CALM,
    )


@pytest.fixture
def raw_scene_dict():
    """Decoded interpreter output using loose key spellings."""
    return {
        "ASCII art": ["  *  ", " *** ", "*****"],
        "color palette": ["#112233", "#445566"],
        "dominant_elements": ["tree", 7, "star"],
        "motion": "spinning",
        "distortion": "extreme",
        "tempo": "fast",
        "density": 0.8,
        "mood": "eerie",
    }
