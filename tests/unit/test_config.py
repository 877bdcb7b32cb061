"""Tests for engine configuration."""

import json

import pytest

from dreamscape.config import (
    CONFIG_ENV_VAR,
    CONFIG_PATH,
    DisplayConfig,
    EngineConfig,
    default_config_path,
    get_config,
    reset_config,
)
from dreamscape.core.animation_loop import DEFAULT_FPS


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    reset_config()
    yield
    reset_config()


class TestEngineConfig:
    def test_defaults(self):
        config = EngineConfig()
        assert (config.grid_width, config.grid_height, config.fps) == (80, 24, DEFAULT_FPS)

    def test_round_trip(self):
        config = EngineConfig(display=DisplayConfig(grid_width=40, grid_height=10, fps=30))
        assert EngineConfig.from_dict(config.to_dict()) == config

    def test_unknown_keys_ignored(self):
        config = EngineConfig.from_dict({"display": {"grid_width": 100, "colour": "red"}, "extra": 1})
        assert config.grid_width == 100
        assert config.grid_height == 24

    @pytest.mark.parametrize("fps,expected", [(0, 1), (500, 60), (24, 24)])
    def test_fps_clamped(self, fps, expected):
        assert EngineConfig.from_dict({"display": {"fps": fps}}).fps == expected

    def test_non_dict_input(self):
        assert EngineConfig.from_dict(["not", "a", "dict"]) == EngineConfig()
        assert EngineConfig.from_dict({"display": 5}) == EngineConfig()


class TestLoad:
    def test_missing_file(self, tmp_path):
        assert EngineConfig.load(tmp_path / "absent.json") == EngineConfig()

    def test_valid_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"display": {"grid_width": 120, "fps": 20}}))
        config = EngineConfig.load(path)
        assert (config.grid_width, config.fps) == (120, 20)

    def test_invalid_json_falls_back(self, tmp_path, caplog):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        assert EngineConfig.load(path) == EngineConfig()
        assert "Failed to load config" in caplog.text

    def test_bad_value_falls_back(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"display": {"fps": "fast"}}))
        assert EngineConfig.load(path) == EngineConfig()


class TestGlobalConfig:
    def test_default_path(self):
        assert default_config_path() == CONFIG_PATH

    def test_env_override(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"display": {"grid_height": 40}}))
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert default_config_path() == path
        assert get_config().grid_height == 40

    def test_cached_until_reset(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"display": {"grid_height": 40}}))
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        first = get_config()
        path.write_text(json.dumps({"display": {"grid_height": 50}}))
        assert get_config() is first
        reset_config()
        assert get_config().grid_height == 50
