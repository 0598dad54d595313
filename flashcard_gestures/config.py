"""
Configuration management for the gesture answer system.
"""
import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field, fields


CONFIG_ENV_VAR = "FLASHCARD_GESTURES_CONFIG"


class ConfigError(ValueError):
    """Raised when a configuration value is invalid."""


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int = 0
    width: int = 640
    height: int = 480
    fps: int = 30


@dataclass
class MediaPipeConfig:
    """MediaPipe Hands configuration settings."""
    max_num_hands: int = 1
    min_detection_confidence: float = 0.6
    min_tracking_confidence: float = 0.6


@dataclass
class HoldConfig:
    """Hold-to-confirm timing."""
    hold_duration_ms: int = 3000
    tick_interval_ms: int = 50


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    show_landmarks: bool = True
    show_countdown: bool = True
    window_name: str = "Flashcard Gestures"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig = field(default_factory=CameraConfig)
    mediapipe: MediaPipeConfig = field(default_factory=MediaPipeConfig)
    hold: HoldConfig = field(default_factory=HoldConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses $FLASHCARD_GESTURES_CONFIG,
            then config.default.yaml in the project root

    Returns:
        Configuration object with all settings
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if path is None:
        project_root = Path(__file__).parent.parent
        path = project_root / "config.default.yaml"
        if not path.exists():
            # Installed without the source tree
            return Cfg()

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    return _dict_to_config({} if data is None else data)


def _positive_int(section: str, key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{section}.{key} must be a positive integer, got {value!r}")
    return value


def _mapping(name: str, value: Any) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{name}' section must be a mapping, got {value!r}")
    return value


def _check_value(name: str, key: str, expected: type, value: Any) -> Any:
    if expected is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"{name}.{key} must be a number, got {value!r}")
        return float(value)
    if expected is int and isinstance(value, bool):
        raise ConfigError(f"{name}.{key} must be an integer, got {value!r}")
    if not isinstance(value, expected):
        raise ConfigError(f"{name}.{key} must be {expected.__name__}, got {value!r}")
    return value


def _section(cls, name: str, data: Dict[str, Any]):
    values = _mapping(name, data.get(name))
    types = {f.name: f.type for f in fields(cls)}
    unknown = set(values) - set(types)
    if unknown:
        raise ConfigError(f"Unknown keys in '{name}' section: {', '.join(sorted(unknown))}")
    return cls(**{key: _check_value(name, key, types[key], value) for key, value in values.items()})


def _dict_to_config(data: Any) -> Cfg:
    """Convert dictionary to configuration object, filling in defaults."""
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping of sections, got {type(data).__name__}")

    camera = _section(CameraConfig, 'camera', data)
    mediapipe = _section(MediaPipeConfig, 'mediapipe', data)

    hold_data = _mapping('hold', data.get('hold'))
    hold = HoldConfig(
        hold_duration_ms=_positive_int(
            'hold', 'hold_duration_ms', hold_data.get('hold_duration_ms', 3000)),
        tick_interval_ms=_positive_int(
            'hold', 'tick_interval_ms', hold_data.get('tick_interval_ms', 50)),
    )

    display = _section(DisplayConfig, 'display', data)

    logging_data = _mapping('logging', data.get('logging'))
    logging_cfg = LoggingConfig(level=str(logging_data.get('level', 'INFO')).upper())

    return Cfg(
        camera=camera,
        mediapipe=mediapipe,
        hold=hold,
        display=display,
        logging=logging_cfg
    )
