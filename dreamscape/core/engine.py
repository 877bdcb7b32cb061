"""Session engine - ties the animation loop and renderer together.

The engine owns one scene session: start it, render frames on each
external tick, pause/resume/restart, stop. It performs no device output;
each rendered grid is handed to a caller-supplied sink.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from ..widget.grid import Grid
from ..widget.renderer import Renderer
from .animation_loop import DEFAULT_FPS, AnimationLoop, AnimationState, fps_from_tempo
from .scene import SceneSpec
from .seed import seed_from_text

if TYPE_CHECKING:
    from ..config import EngineConfig

logger = logging.getLogger(__name__)

FrameSink = Callable[[Grid], None]


@dataclass(frozen=True)
class EngineEvent:
    """Notification sent to subscribers.

    kind is "state-change" (state set) or "frame" (fps and elapsed set).
    """
    kind: str
    state: Optional[str] = None
    fps: Optional[int] = None
    elapsed: Optional[float] = None


class Engine:
    """Drives one scene session from external frame ticks."""

    def __init__(self, width: int, height: int, fps: int = DEFAULT_FPS,
                 sink: Optional[FrameSink] = None):
        self.width = width
        self.height = height
        self.base_fps = fps
        self.sink = sink

        self.animation_loop = AnimationLoop(fps)
        self.renderer = Renderer(width, height)

        self._spec: Optional[SceneSpec] = None
        self._text = ""
        self._seed = 0
        self._observers: list[Callable[[EngineEvent], None]] = []

    @classmethod
    def from_config(cls, config: "EngineConfig", sink: Optional[FrameSink] = None) -> "Engine":
        """Build an engine sized and paced from *config*."""
        return cls(config.grid_width, config.grid_height, fps=config.fps, sink=sink)

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    @property
    def spec(self) -> Optional[SceneSpec]:
        return self._spec

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def fps(self) -> int:
        return self.animation_loop.get_fps()

    def start_scene(self, spec: SceneSpec, text: str) -> None:
        """Begin rendering *spec*; *text* seeds the visuals."""
        self._spec = spec
        self._text = text
        self._seed = seed_from_text(text)

        self.renderer = Renderer(self.width, self.height, self.renderer.layers)
        self.animation_loop.set_fps(fps_from_tempo(spec.tempo, self.base_fps))
        self.animation_loop.reset()
        self.animation_loop.start()

        logger.info(
            "Scene started: seed=%d fps=%d size=%dx%d",
            self._seed, self.fps, self.width, self.height,
        )
        self._emit(EngineEvent("state-change", state=AnimationState.RUNNING.value))

    def on_frame(self, delta_ms: float) -> Optional[Grid]:
        """Advance one tick and render. Returns None while not running."""
        if self._spec is None:
            return None

        elapsed = self.animation_loop.tick(delta_ms)
        if elapsed is None:
            return None

        grid = self.renderer.render_frame(self._spec, elapsed, self._seed, delta_ms / 1000.0)
        if self.sink is not None:
            self.sink(grid)

        self._emit(EngineEvent("frame", fps=self.fps, elapsed=elapsed))
        return grid

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.renderer.resize(width, height)

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------

    def pause(self) -> None:
        self.animation_loop.pause()
        self._emit_state()

    def resume(self) -> None:
        self.animation_loop.resume()
        self._emit_state()

    def toggle_pause(self) -> None:
        self.animation_loop.toggle_pause()
        self._emit_state()

    def restart(self) -> None:
        """Replay the current scene from time zero. Needs non-empty seed text."""
        if self._spec is not None and self._text:
            self.start_scene(self._spec, self._text)

    def stop(self) -> None:
        self.animation_loop.stop()
        logger.info("Scene stopped")
        self._emit_state()

    def get_state(self) -> AnimationState:
        return self.animation_loop.get_state()

    def is_running(self) -> bool:
        return self.get_state() == AnimationState.RUNNING

    def is_paused(self) -> bool:
        return self.get_state() == AnimationState.PAUSED

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def subscribe(self, callback: Callable[[EngineEvent], None]) -> Callable[[], None]:
        """
        Subscribe to engine events.

        Args:
            callback: Function called with each EngineEvent

        Returns:
            Unsubscribe function
        """
        self._observers.append(callback)

        def unsubscribe():
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    def _emit_state(self) -> None:
        self._emit(EngineEvent("state-change", state=self.get_state().value))

    def _emit(self, event: EngineEvent) -> None:
        for callback in list(self._observers):
            try:
                callback(event)
            except Exception:
                logger.exception("Engine event listener failed")
