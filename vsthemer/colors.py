"""Theme-aware color utilities for Rich markup.

Widgets use these to pick hex colors from the active UI theme so markup
stays consistent regardless of terminal settings.

Usage:
    colors = get_theme_colors(self.app)
    markup = f"[{colors.warning}]modified[/{colors.warning}]"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from vsthemer.vstheme.files import is_valid_hex

# Fallback colors when no app/theme is available
FALLBACK_COLORS = {
    "primary": "#3794ff",
    "accent": "#c586c0",
    "success": "#89d185",
    "warning": "#cca700",
    "error": "#f48771",
    "foreground": "#d4d4d4",
    "text_muted": "#858585",
}


@dataclass(frozen=True)
class ThemeColors:
    """Semantic hex colors taken from the current UI theme."""

    success: str
    warning: str
    error: str
    primary: str
    accent: str
    foreground: str
    text_muted: str

    def level_color(self, level: str) -> str:
        """Get color for a log level.

        Args:
            level: Log level string (DEBUG, INFO, WARNING, ERROR, etc.).

        Returns:
            Hex color string for the log level.
        """
        level_map = {
            "DEBUG": self.text_muted,
            "INFO": self.success,
            "SUCCESS": self.success,
            "WARNING": self.warning,
            "ERROR": self.error,
            "CRITICAL": self.error,
        }
        return level_map.get(level.upper(), self.foreground)


def get_theme_colors(app: Any) -> ThemeColors:
    """Get theme colors from the current application theme.

    Args:
        app: The Textual App instance, or None for fallback colors.

    Returns:
        ThemeColors instance with hex colors from the current theme.
    """
    if app is None:
        return ThemeColors(**FALLBACK_COLORS)

    theme = app.current_theme

    def hex_or_fallback(value: Any, attr: str) -> str:
        if value is None:
            return FALLBACK_COLORS[attr]
        # Theme attributes may be Color objects or plain strings
        color = value.hex if hasattr(value, "hex") else str(value)
        # ANSI themes use names such as "ansi_green" that Rich cannot parse
        return color if is_valid_hex(color) else FALLBACK_COLORS[attr]

    def get_color(attr: str) -> str:
        return hex_or_fallback(getattr(theme, attr, None), attr)

    variables = getattr(theme, "variables", {}) or {}

    return ThemeColors(
        success=get_color("success"),
        warning=get_color("warning"),
        error=get_color("error"),
        primary=get_color("primary"),
        accent=get_color("accent"),
        foreground=get_color("foreground"),
        text_muted=hex_or_fallback(variables.get("text-muted"), "text_muted"),
    )
