"""UI theme definitions for the vsthemer TUI.

The palettes mirror the built-in Visual Studio color themes so the viewer
looks at home next to the files it edits.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass

from textual.theme import Theme

from vsthemer.vstheme.files import is_valid_hex

# Textual built-in that follows the terminal palette
TERMINAL_THEME_NAME = "ansi-dark"

VS_DARK_THEME_NAME = "vs-dark"
VS_BLUE_THEME_NAME = "vs-blue"
VS_LIGHT_THEME_NAME = "vs-light"
VS_HIGH_CONTRAST_THEME_NAME = "vs-high-contrast"

DEFAULT_THEME_NAME = VS_DARK_THEME_NAME


@dataclass(frozen=True)
class EditorThemePalette:
    """Palette values for one UI theme."""

    name: str
    theme_id: str
    dark: bool
    primary: str
    accent: str
    warning: str
    error: str
    success: str
    background: str
    surface: str
    panel: str
    border: str
    text_base: str
    text_muted: str


EDITOR_THEME_PALETTES = (
    EditorThemePalette(
        name="Dark",
        theme_id=VS_DARK_THEME_NAME,
        dark=True,
        primary="#3794ff",
        accent="#c586c0",
        warning="#cca700",
        error="#f48771",
        success="#89d185",
        background="#1e1e1e",
        surface="#252526",
        panel="#2d2d30",
        border="#3f3f46",
        text_base="#d4d4d4",
        text_muted="#858585",
    ),
    EditorThemePalette(
        name="Blue",
        theme_id=VS_BLUE_THEME_NAME,
        dark=False,
        primary="#0e70c0",
        accent="#5d6b99",
        warning="#b78600",
        error="#c42b1c",
        success="#107c10",
        background="#f5f5f5",
        surface="#cfd6e5",
        panel="#bcc7d8",
        border="#8e9bbc",
        text_base="#1e1e1e",
        text_muted="#5f6b80",
    ),
    EditorThemePalette(
        name="Light",
        theme_id=VS_LIGHT_THEME_NAME,
        dark=False,
        primary="#005fb8",
        accent="#af00db",
        warning="#bf8803",
        error="#e51400",
        success="#388a34",
        background="#ffffff",
        surface="#f3f3f3",
        panel="#eeeef2",
        border="#cccedb",
        text_base="#1e1e1e",
        text_muted="#717171",
    ),
    EditorThemePalette(
        name="High Contrast",
        theme_id=VS_HIGH_CONTRAST_THEME_NAME,
        dark=True,
        primary="#1aebff",
        accent="#ffff00",
        warning="#ffd700",
        error="#ff0000",
        success="#3ff23f",
        background="#000000",
        surface="#000000",
        panel="#0c0c0c",
        border="#6fc3df",
        text_base="#ffffff",
        text_muted="#c0c0c0",
    ),
)


def _normalize_color(value: str, fallback: str) -> str:
    """Return the value if it is a hex color, otherwise the fallback."""
    return value if is_valid_hex(value) else fallback


def _theme_from_palette(palette: EditorThemePalette) -> Theme:
    """Build a Textual Theme from a palette.

    Args:
        palette: Palette data.

    Returns:
        A Textual Theme instance.
    """
    background = _normalize_color(palette.background, "#1e1e1e" if palette.dark else "#ffffff")
    foreground = _normalize_color(palette.text_base, "#d4d4d4" if palette.dark else "#1e1e1e")
    surface = _normalize_color(palette.surface, background)
    panel = _normalize_color(palette.panel, surface)
    text_muted = _normalize_color(palette.text_muted, foreground)

    return Theme(
        name=palette.theme_id,
        primary=palette.primary,
        secondary=palette.accent,
        accent=palette.accent,
        warning=palette.warning,
        error=palette.error,
        success=palette.success,
        foreground=foreground,
        background=background,
        surface=surface,
        panel=panel,
        dark=palette.dark,
        variables={
            "border": _normalize_color(palette.border, surface),
            "text-muted": text_muted,
        },
    )


REGISTERED_THEMES = tuple(_theme_from_palette(palette) for palette in EDITOR_THEME_PALETTES)

THEME_LABELS: dict[str, str] = {
    **{palette.theme_id: palette.name for palette in EDITOR_THEME_PALETTES},
    TERMINAL_THEME_NAME: "Terminal (ANSI)",
}


def next_theme_name(current: str, available: Collection[str] | None = None) -> str:
    """Return the theme that follows ``current`` in THEME_LABELS order.

    Args:
        current: Name of the active theme.
        available: Theme names the running app can switch to; themes not in
            it are skipped. None allows every labelled theme.

    Returns:
        The next theme name, wrapping around; the default for unknown names.
    """
    names = [name for name in THEME_LABELS if available is None or name in available]
    if current not in names:
        return DEFAULT_THEME_NAME
    return names[(names.index(current) + 1) % len(names)]
