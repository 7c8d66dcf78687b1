from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULTS_PATH = Path(__file__).resolve().parent.parent / "data" / "settings.yaml"
USER_SETTINGS_PATH = Path.home() / ".typespeed" / "settings.yaml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    default_opacity: int = 40
    log_level: str = "INFO"
    window_title: str = "Typing Speed and Memorization"
    font_point_size: int = 14


def _read_yaml(path: Path) -> Dict[str, Any]:
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name}: expected a mapping of setting names to values")
    return raw


def _validate(values: Dict[str, Any], source: str) -> Dict[str, Any]:
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"{source}: unknown setting(s): {', '.join(unknown)}")

    out = dict(values)
    for key in ("default_opacity", "font_point_size"):
        if key in out:
            value = out[key]
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{source}: '{key}' must be an integer")
    if "default_opacity" in out and not 0 <= out["default_opacity"] <= 100:
        raise ValueError(f"{source}: 'default_opacity' must be between 0 and 100")
    if "font_point_size" in out and out["font_point_size"] <= 0:
        raise ValueError(f"{source}: 'font_point_size' must be positive")
    if "log_level" in out:
        level = str(out["log_level"]).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"{source}: 'log_level' must be one of {', '.join(_LOG_LEVELS)}")
        out["log_level"] = level
    if "window_title" in out:
        title = out["window_title"]
        title = title.strip() if isinstance(title, str) else ""
        if not title:
            raise ValueError(f"{source}: missing or invalid 'window_title'")
        out["window_title"] = title
    return out


def load_settings(
    defaults_path: Path = DEFAULTS_PATH,
    user_path: Optional[Path] = USER_SETTINGS_PATH,
) -> Settings:
    """Load packaged defaults, then overlay the user's settings file if present.

    Problems in the packaged file raise ``ValueError``. A broken user file is
    logged and ignored.
    """
    if not defaults_path.exists():
        raise FileNotFoundError(f"Settings file not found: {defaults_path}")
    values = _validate(_read_yaml(defaults_path), defaults_path.name)

    if user_path is not None and user_path.exists():
        try:
            overrides = _validate(_read_yaml(user_path), str(user_path))
        except (yaml.YAMLError, OSError, ValueError) as e:
            logger.warning("Ignoring user settings in %s: %s", user_path, e)
        else:
            values.update(overrides)
            logger.info("Loaded user settings from %s", user_path)

    return Settings(**values)
