"""Tests for frame composition."""

from dreamscape.layers import DEFAULT_LAYERS, apply_art_layer, apply_noise_layer
from dreamscape.widget.grid import Grid
from dreamscape.widget.renderer import Renderer


class TestRenderer:
    def test_default_layer_order(self):
        assert Renderer(10, 5).layers == DEFAULT_LAYERS

    def test_returns_owned_grid(self, scene_spec):
        renderer = Renderer(30, 12)
        first = renderer.render_frame(scene_spec, 0.5, 42, 0.07)
        second = renderer.render_frame(scene_spec, 0.6, 42, 0.07)
        assert first is second is renderer.grid

    def test_deterministic(self, scene_spec):
        a = Renderer(40, 16).render_frame(scene_spec, 3.1, 1234, 0.07)
        b = Renderer(40, 16).render_frame(scene_spec, 3.1, 1234, 0.07)
        assert a == b

    def test_seed_changes_frame(self, scene_spec):
        a = Renderer(40, 16).render_frame(scene_spec, 3.1, 1, 0.07)
        b = Renderer(40, 16).render_frame(scene_spec, 3.1, 2, 0.07)
        assert a != b

    def test_no_distortion_is_art_plus_noise(self, calm_spec):
        full = Renderer(40, 16).render_frame(calm_spec, 2.0, 55, 0.07)
        partial = Renderer(40, 16, (apply_art_layer, apply_noise_layer)).render_frame(calm_spec, 2.0, 55, 0.07)
        assert full == partial

    def test_clears_between_frames(self, calm_spec):
        calls = []

        def probe(grid, spec, time, seed, delta_time):
            calls.append(grid.render_plain())
            grid.set_cell(0, 0, "X")

        renderer = Renderer(4, 2, (probe,))
        renderer.render_frame(calm_spec, 0.0, 1, 0.07)
        renderer.render_frame(calm_spec, 0.1, 1, 0.07)
        assert calls == ["    \n    ", "    \n    "]

    def test_layers_receive_arguments(self, calm_spec):
        seen = []
        renderer = Renderer(4, 2, (lambda *args: seen.append(args),))
        renderer.render_frame(calm_spec, 1.5, 9, 0.25)
        grid, spec, time, seed, delta_time = seen[0]
        assert grid is renderer.grid
        assert (spec, time, seed, delta_time) == (calm_spec, 1.5, 9, 0.25)

    def test_resize(self, scene_spec):
        renderer = Renderer(20, 10)
        renderer.render_frame(scene_spec, 1.0, 3, 0.07)
        renderer.resize(8, 4)
        assert (renderer.width, renderer.height) == (8, 4)
        assert renderer.grid == Grid(8, 4)
        frame = renderer.render_frame(scene_spec, 1.0, 3, 0.07)
        assert (frame.width, frame.height) == (8, 4)
