"""Engine configuration with clean, readable structure."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional

from .core.animation_loop import DEFAULT_FPS, MAX_FPS, MIN_FPS

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DREAMSCAPE_CONFIG"
CONFIG_PATH = Path.home() / ".dreamscape" / "config.json"


@dataclass
class DisplayConfig:
    """Grid size and playback cadence."""
    grid_width: int = 80
    grid_height: int = 24

    # Base fps before tempo scaling
    fps: int = DEFAULT_FPS


@dataclass
class EngineConfig:
    """Main configuration combining all sections."""
    display: DisplayConfig = field(default_factory=DisplayConfig)

    def to_dict(self) -> dict:
        return {
            "display": asdict(self.display),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "EngineConfig":
        if not isinstance(d, dict):
            return cls()
        display_dict = d.get("display", {})
        if not isinstance(display_dict, dict):
            display_dict = {}
        display_known = {f.name for f in DisplayConfig.__dataclass_fields__.values()}
        display = DisplayConfig(**{k: v for k, v in display_dict.items() if k in display_known})
        display.fps = max(MIN_FPS, min(MAX_FPS, int(display.fps)))

        return cls(display=display)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "EngineConfig":
        """Load from *path* (or the default location), falling back to defaults."""
        if path is None:
            path = default_config_path()
        try:
            if path.exists():
                return cls.from_dict(json.loads(path.read_text()))
        except (json.JSONDecodeError, OSError, TypeError, ValueError) as e:
            logger.warning("Failed to load config %s: %s", path, e)
        return cls()

    # Convenience accessors
    @property
    def grid_width(self) -> int:
        return self.display.grid_width

    @property
    def grid_height(self) -> int:
        return self.display.grid_height

    @property
    def fps(self) -> int:
        return self.display.fps


def default_config_path() -> Path:
    """Config path from the environment, else ~/.dreamscape/config.json."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    return Path(env_path) if env_path else CONFIG_PATH


# Global instance
_config: Optional[EngineConfig] = None


def get_config() -> EngineConfig:
    """Get current config."""
    global _config
    if _config is None:
        _config = EngineConfig.load()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next get_config() reloads it."""
    global _config
    _config = None
