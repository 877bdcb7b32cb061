"""Playback timing: a stopped/running/paused state machine.

Tracks elapsed seconds (advancing only while running) and the frame rate
the caller should schedule ticks at. Misuse such as resume() while stopped
is a silent no-op.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Optional

from .scene import table_key

logger = logging.getLogger(__name__)

MIN_FPS = 1
MAX_FPS = 60
DEFAULT_FPS = 13

TEMPO_FPS_MULTIPLIERS = {
    "frozen": 0.3,
    "slow": 0.6,
    "medium": 1.0,
    "fast": 1.5,
    "frantic": 2.2,
}


class AnimationState(str, Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def fps_from_tempo(tempo: str, base_fps: float) -> int:
    """Scale *base_fps* by the tempo's multiplier (unknown tempo: 1.0)."""
    multiplier = TEMPO_FPS_MULTIPLIERS.get(table_key(tempo), 1.0)
    return _round_half_up(base_fps * multiplier)


class AnimationLoop:
    """Frame timing state machine driven by an external scheduler.

    Usage::

        loop = AnimationLoop(fps=13)
        loop.start()
        elapsed = loop.tick(delta_ms)   # None while paused/stopped
    """

    def __init__(self, fps: int = DEFAULT_FPS):
        self._state = AnimationState.STOPPED
        self._elapsed_time = 0.0
        self._fps = DEFAULT_FPS
        self.set_fps(fps)

    fps_from_tempo = staticmethod(fps_from_tempo)

    # ------------------------------------------------------------------
    # Ticking
    # ------------------------------------------------------------------

    def tick(self, delta_ms: float) -> Optional[float]:
        """Advance elapsed time. Returns it, or None when not running."""
        if self._state != AnimationState.RUNNING:
            return None
        self._elapsed_time += delta_ms / 1000.0
        return self._elapsed_time

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Enter running from any state. Elapsed time is kept."""
        self._state = AnimationState.RUNNING

    def pause(self) -> None:
        if self._state == AnimationState.RUNNING:
            self._state = AnimationState.PAUSED

    def resume(self) -> None:
        if self._state == AnimationState.PAUSED:
            self._state = AnimationState.RUNNING

    def toggle_pause(self) -> None:
        if self._state == AnimationState.RUNNING:
            self.pause()
        elif self._state == AnimationState.PAUSED:
            self.resume()

    def stop(self) -> None:
        self._state = AnimationState.STOPPED
        self._elapsed_time = 0.0

    def reset(self) -> None:
        """Zero elapsed time without changing state."""
        self._elapsed_time = 0.0

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_state(self) -> AnimationState:
        return self._state

    def get_elapsed_time(self) -> float:
        return self._elapsed_time

    def get_fps(self) -> int:
        return self._fps

    def set_fps(self, fps: float) -> None:
        clamped = max(MIN_FPS, min(MAX_FPS, _round_half_up(fps)))
        if clamped != self._fps:
            logger.debug("Animation fps: %d → %d", self._fps, clamped)
        self._fps = clamped

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def elapsed_time(self) -> float:
        return self._elapsed_time

    @property
    def fps(self) -> int:
        return self._fps
