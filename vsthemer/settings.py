"""Persistent settings for the vsthemer TUI."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from vsthemer.logger import get_logger
from vsthemer.themes import DEFAULT_THEME_NAME, THEME_LABELS
from vsthemer.vstheme.files import DEFAULT_EXPORT_SUFFIX

logger = get_logger(__name__)

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VIEW_MODES: tuple[str, ...] = ("grid", "list")
DEFAULT_VIEW_MODE = "grid"
DEFAULT_LOG_LEVEL = "INFO"
MIN_LOG_LINES = 200
DEFAULT_MAX_LOG_LINES = 2000
MAX_EXPORT_SUFFIX_LENGTH = 40


@dataclass(frozen=True)
class Settings:
    """User-configurable settings stored on disk."""

    theme: str = DEFAULT_THEME_NAME
    log_level: str = DEFAULT_LOG_LEVEL
    max_log_lines: int = DEFAULT_MAX_LOG_LINES
    # "grid" shows one row per distinct color value, "list" one row per color rule
    view_mode: str = DEFAULT_VIEW_MODE
    export_suffix: str = DEFAULT_EXPORT_SUFFIX

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> Settings:
        """Create settings from a mapping, applying defaults for invalid values.

        Args:
            data: Mapping containing raw settings values.

        Returns:
            A Settings instance with validated values.
        """
        theme_value = _coerce_str(data.get("theme"))
        theme = theme_value if theme_value is not None and theme_value in THEME_LABELS else DEFAULT_THEME_NAME

        log_level_value = _coerce_str(data.get("log_level"))
        log_level = log_level_value if log_level_value in LOG_LEVELS else DEFAULT_LOG_LEVEL

        max_log_lines = _coerce_int(data.get("max_log_lines"))
        if max_log_lines is None or max_log_lines < MIN_LOG_LINES:
            max_log_lines = DEFAULT_MAX_LOG_LINES

        view_mode_value = _coerce_str(data.get("view_mode"))
        view_mode = view_mode_value if view_mode_value in VIEW_MODES else DEFAULT_VIEW_MODE

        export_suffix = _coerce_str(data.get("export_suffix"))
        if (
            export_suffix is None
            or len(export_suffix) > MAX_EXPORT_SUFFIX_LENGTH
            or "/" in export_suffix
            or "\\" in export_suffix
        ):
            export_suffix = DEFAULT_EXPORT_SUFFIX

        return cls(
            theme=theme,
            log_level=log_level,
            max_log_lines=max_log_lines,
            view_mode=view_mode,
            export_suffix=export_suffix,
        )

    def to_dict(self) -> dict[str, object]:
        """Serialize settings to a dictionary.

        Returns:
            Dictionary representation of settings.
        """
        return {
            "theme": self.theme,
            "log_level": self.log_level,
            "max_log_lines": self.max_log_lines,
            "view_mode": self.view_mode,
            "export_suffix": self.export_suffix,
        }


def get_config_dir() -> Path:
    """Get the directory used for persistent configuration.

    Returns:
        Path to the configuration directory.
    """
    override_dir = os.environ.get("VSTHEMER_CONFIG_DIR")
    if override_dir:
        return Path(override_dir).expanduser()

    base_dir = os.environ.get("XDG_CONFIG_HOME")
    if base_dir:
        return Path(base_dir).expanduser() / "vsthemer"

    return Path.home() / ".config" / "vsthemer"


def get_settings_path() -> Path:
    """Get the full path to the settings file."""
    return get_config_dir() / "settings.json"


def load_settings() -> Settings:
    """Load settings from disk.

    Returns:
        Loaded settings, or defaults if none exist.
    """
    settings_path = get_settings_path()
    if not settings_path.exists():
        return Settings()

    try:
        raw = json.loads(settings_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        logger.warning(f"Failed to parse settings file {settings_path}: {exc}")
        return Settings()
    except OSError as exc:
        logger.warning(f"Failed to read settings file {settings_path}: {exc}")
        return Settings()

    if not isinstance(raw, dict):
        logger.warning(f"Settings file {settings_path} contains invalid data")
        return Settings()

    return Settings.from_mapping(raw)


def save_settings(settings: Settings) -> None:
    """Persist settings to disk.

    Args:
        settings: Settings to persist.
    """
    settings_path = get_settings_path()
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        settings_path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
    except OSError as exc:
        logger.warning(f"Failed to save settings to {settings_path}: {exc}")


def _coerce_str(value: object) -> str | None:
    """Return the value if it is a string, otherwise None."""
    if isinstance(value, str):
        return value
    return None


def _coerce_int(value: object) -> int | None:
    """Coerce a value into an integer if possible.

    Args:
        value: Raw value to coerce.

    Returns:
        Integer value or None.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None
