"""TUI widgets for vsthemer."""

from vsthemer.widgets.color_browser import ColorBrowser
from vsthemer.widgets.help_screen import HelpScreen
from vsthemer.widgets.log_pane import LogPane
from vsthemer.widgets.screens import ColorEditResult, ColorEditScreen, OpenThemeScreen
from vsthemer.widgets.theme_stats import ThemeStats

__all__ = [
    "ColorBrowser",
    "ColorEditResult",
    "ColorEditScreen",
    "HelpScreen",
    "LogPane",
    "OpenThemeScreen",
    "ThemeStats",
]
