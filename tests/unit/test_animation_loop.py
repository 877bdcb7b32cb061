"""Tests for the playback state machine."""

import pytest

from dreamscape.core.animation_loop import (
    AnimationLoop,
    AnimationState,
    fps_from_tempo,
)
from dreamscape.core.scene import Tempo


class TestAnimationLoopLifecycle:
    def test_initial_state(self):
        loop = AnimationLoop()
        assert loop.get_state() == AnimationState.STOPPED
        assert loop.get_elapsed_time() == 0.0
        assert loop.get_fps() == 13

    def test_tick_while_stopped_skips(self):
        loop = AnimationLoop()
        assert loop.tick(100) is None
        assert loop.get_elapsed_time() == 0.0

    def test_start_and_tick(self):
        loop = AnimationLoop()
        loop.start()
        assert loop.tick(100) == pytest.approx(0.1)
        assert loop.tick(100) == pytest.approx(0.2)

    def test_pause_skips_and_freezes_time(self):
        loop = AnimationLoop()
        loop.start()
        loop.tick(100)
        loop.tick(100)
        loop.pause()
        assert loop.get_state() == AnimationState.PAUSED
        assert loop.tick(100) is None
        assert loop.get_elapsed_time() == pytest.approx(0.2)

    def test_resume_continues(self):
        loop = AnimationLoop()
        loop.start()
        loop.tick(200)
        loop.pause()
        loop.resume()
        assert loop.tick(100) == pytest.approx(0.3)

    def test_stop_resets_and_skips_until_start(self):
        loop = AnimationLoop()
        loop.start()
        loop.tick(500)
        loop.stop()
        assert loop.get_state() == AnimationState.STOPPED
        assert loop.get_elapsed_time() == 0.0
        assert loop.tick(100) is None
        assert loop.tick(100) is None
        loop.start()
        assert loop.tick(100) == pytest.approx(0.1)

    def test_start_does_not_reset_time(self):
        loop = AnimationLoop()
        loop.start()
        loop.tick(400)
        loop.pause()
        loop.start()
        assert loop.get_state() == AnimationState.RUNNING
        assert loop.get_elapsed_time() == pytest.approx(0.4)

    def test_reset_keeps_state(self):
        loop = AnimationLoop()
        loop.start()
        loop.tick(400)
        loop.reset()
        assert loop.get_state() == AnimationState.RUNNING
        assert loop.get_elapsed_time() == 0.0

    def test_reset_while_paused_stays_paused(self):
        loop = AnimationLoop()
        loop.start()
        loop.pause()
        loop.reset()
        assert loop.get_state() == AnimationState.PAUSED


class TestAnimationLoopMisuse:
    def test_pause_while_stopped_is_noop(self):
        loop = AnimationLoop()
        loop.pause()
        assert loop.get_state() == AnimationState.STOPPED

    def test_resume_while_stopped_is_noop(self):
        loop = AnimationLoop()
        loop.resume()
        assert loop.get_state() == AnimationState.STOPPED

    def test_resume_while_running_is_noop(self):
        loop = AnimationLoop()
        loop.start()
        loop.resume()
        assert loop.get_state() == AnimationState.RUNNING

    def test_toggle_pause(self):
        loop = AnimationLoop()
        loop.start()
        loop.toggle_pause()
        assert loop.get_state() == AnimationState.PAUSED
        loop.toggle_pause()
        assert loop.get_state() == AnimationState.RUNNING

    def test_toggle_pause_while_stopped_is_noop(self):
        loop = AnimationLoop()
        loop.toggle_pause()
        assert loop.get_state() == AnimationState.STOPPED


class TestFps:
    def test_set_fps(self):
        loop = AnimationLoop()
        loop.set_fps(30)
        assert loop.get_fps() == 30

    def test_set_fps_clamps(self):
        loop = AnimationLoop()
        loop.set_fps(0)
        assert loop.get_fps() == 1
        loop.set_fps(-10)
        assert loop.get_fps() == 1
        loop.set_fps(240)
        assert loop.get_fps() == 60

    def test_constructor_clamps(self):
        assert AnimationLoop(fps=500).get_fps() == 60

    @pytest.mark.parametrize("tempo,expected", [
        ("medium", 10),
        ("frantic", 22),
        ("frozen", 3),
        ("slow", 6),
        ("fast", 15),
    ])
    def test_fps_from_tempo(self, tempo, expected):
        assert fps_from_tempo(tempo, 10) == expected

    def test_fps_from_tempo_accepts_enum(self):
        assert fps_from_tempo(Tempo.FRANTIC, 10) == 22

    def test_fps_from_tempo_unknown_is_unscaled(self):
        assert fps_from_tempo("glacial", 13) == 13

    def test_fps_from_tempo_rounds(self):
        # 13 * 0.3 = 3.9
        assert fps_from_tempo("frozen", 13) == 4

    @pytest.mark.parametrize("base,expected", [(2.5, 3), (-2.5, -2), (-2.6, -3), (-0.5, 0)])
    def test_fps_from_tempo_rounds_half_up(self, base, expected):
        assert fps_from_tempo("medium", base) == expected

    def test_static_method_alias(self):
        assert AnimationLoop.fps_from_tempo("medium", 10) == 10
