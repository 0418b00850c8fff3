"""Main Textual TUI application for vsthemer."""

from dataclasses import replace
from functools import partial
from pathlib import Path
from typing import ClassVar

from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Footer, Header, Static
from textual.worker import Worker

from vsthemer.logger import add_tui_sink, get_logger, remove_tui_sink
from vsthemer.settings import Settings, load_settings, save_settings
from vsthemer.themes import DEFAULT_THEME_NAME, REGISTERED_THEMES, THEME_LABELS, next_theme_name
from vsthemer.vstheme.browse import all_colors, calculate_stats, category_names
from vsthemer.vstheme.errors import VSThemeError
from vsthemer.vstheme.files import read_theme_file, write_theme_file
from vsthemer.vstheme.models import ThemeColor, VSTheme
from vsthemer.widgets.color_browser import ColorBrowser
from vsthemer.widgets.help_screen import HelpScreen
from vsthemer.widgets.log_pane import LogPane
from vsthemer.widgets.screens import ColorEditResult, ColorEditScreen, OpenThemeScreen
from vsthemer.widgets.theme_stats import ThemeStats

logger = get_logger(__name__)

# Path to styles directory
STYLES_DIR = Path(__file__).parent / "styles"


class ThemeViewerApp(App[None]):
    """Textual TUI app for viewing and editing Visual Studio themes."""

    TITLE = "vsthemer"
    ENABLE_COMMAND_PALETTE = False
    CSS_PATH: ClassVar[list[Path]] = [
        STYLES_DIR / "app.tcss",
        STYLES_DIR / "modals.tcss",
    ]
    BINDINGS: ClassVar[tuple[tuple[str, str, str], ...]] = (
        ("q", "quit", "Quit"),
        ("o", "open_theme", "Open"),
        ("s", "export_theme", "Export"),
        ("v", "toggle_view", "Grid/List"),
        ("slash", "focus_search", "Search"),
        ("t", "cycle_theme", "UI Theme"),
        ("question_mark", "help", "Help"),
    )

    def __init__(
        self,
        path: str | Path | None = None,
        export_dir: str | Path | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the theme viewer.

        Args:
            path: Theme file to load on startup.
            export_dir: Directory for exported files; defaults to the
                directory of the loaded file.
            settings: Settings to use instead of the ones on disk.
        """
        super().__init__()
        self.settings: Settings = settings or load_settings()
        self.initial_path: Path | None = Path(path).expanduser() if path else None
        self.export_dir: Path | None = Path(export_dir).expanduser() if export_dir else None
        self.vs_theme: VSTheme | None = None
        self.loaded_path: Path | None = None
        self._colors: list[ThemeColor] = []
        self._load_worker: Worker[None] | None = None
        self._log_sink_id: int | None = None
        logger.info("Initializing ThemeViewerApp")

    def compose(self) -> ComposeResult:
        """Create the UI layout.

        Yields:
            The widgets that make up the application UI.
        """
        yield Header()

        with Horizontal(id="main-panel"):
            yield ThemeStats(id="theme-stats")
            with Vertical(id="browser-panel"):
                yield ColorBrowser(self.settings.view_mode, id="color-browser")

        with Container(id="log-panel"):
            yield Static("[bold]📝 Log[/bold]", id="log-title")
            yield LogPane(max_lines=self.settings.max_log_lines, id="log_pane")

        yield Footer()

    def on_mount(self) -> None:
        """Apply settings, hook up logging and load the initial file."""
        for ui_theme in REGISTERED_THEMES:
            self.register_theme(ui_theme)
        if self.settings.theme in self.available_themes:
            self.theme = self.settings.theme
        else:
            logger.warning(f"UI theme {self.settings.theme!r} is not available, using {DEFAULT_THEME_NAME!r}")
            self.theme = DEFAULT_THEME_NAME

        log_pane = self.query_one("#log_pane", LogPane)
        self._log_sink_id = add_tui_sink(log_pane.sink, level=self.settings.log_level)

        if self.initial_path is not None:
            self.load_theme(self.initial_path)
        else:
            logger.info("No theme loaded, press o to open a .vstheme file")

    @property
    def browser(self) -> ColorBrowser:
        """The color browser widget."""
        return self.query_one("#color-browser", ColorBrowser)

    def load_theme(self, path: str | Path) -> None:
        """Read and decode a theme file in a background worker.

        Args:
            path: Path of the theme file.
        """
        theme_path = Path(path).expanduser()
        logger.info(f"Loading theme from {theme_path}")
        self._load_worker = self.run_worker(
            partial(self._read_theme, theme_path),
            name="load_theme",
            exclusive=True,
            thread=True,
        )

    def _read_theme(self, path: Path) -> None:
        """Read the theme file (runs in background worker thread).

        Args:
            path: Path of the theme file.
        """
        try:
            theme = read_theme_file(path)
        except VSThemeError as exc:
            logger.error(f"Failed to load {path}: {exc}")
            self.call_from_thread(self._show_load_error, str(exc))
            return

        self.call_from_thread(self.show_theme, theme, path)

    def _show_load_error(self, message: str) -> None:
        """Report a failed load; the current theme stays loaded.

        Args:
            message: Error description.
        """
        self.notify(f"Error loading theme file: {message}", severity="error", timeout=8)

    def show_theme(self, theme: VSTheme, path: Path | None = None) -> None:
        """Replace the displayed theme (must run on main thread).

        Args:
            theme: The decoded theme.
            path: File the theme was read from.
        """
        self.vs_theme = theme
        self.loaded_path = path
        self._colors = all_colors(theme)

        self.browser.set_colors(self._colors, category_names(theme))
        self._update_stats()

        self.sub_title = theme.name
        self.notify(f"Loaded {theme.name} ({len(self._colors)} colors)")
        self.query_one("#color-table").focus()

    def _update_stats(self) -> None:
        """Refresh the sidebar statistics."""
        if self.vs_theme is None:
            return
        stats = calculate_stats(self._colors)
        self.query_one("#theme-stats", ThemeStats).update_stats(self.vs_theme, stats)

    def on_color_browser_color_selected(self, event: ColorBrowser.ColorSelected) -> None:
        """Open the editor for the selected color.

        Args:
            event: The selection message from the browser.
        """
        color = event.color

        def handle_result(result: ColorEditResult | None) -> None:
            if result is not None:
                self.apply_edit(color, result)

        self.push_screen(ColorEditScreen(color), handle_result)

    def apply_edit(self, color: ThemeColor, result: ColorEditResult) -> None:
        """Apply the outcome of the edit dialog to a color.

        Args:
            color: The edited color rule.
            result: What the user chose in the dialog.
        """
        if result.action == "reset":
            color.reset()
            logger.info(f"Reset {color.category}/{color.name} to {color.original_value}")
        elif result.value is not None:
            color.apply(result.value)
            logger.info(f"Set {color.category}/{color.name} to {result.value}")

        self.browser.refresh_rows()
        self._update_stats()

    def action_open_theme(self) -> None:
        """Ask for a file path and load it."""

        def handle_path(path: str | None) -> None:
            if path:
                self.load_theme(path)

        initial = str(self.loaded_path) if self.loaded_path else ""
        self.push_screen(OpenThemeScreen(initial), handle_path)

    def export_directory(self) -> Path:
        """Directory that exported files are written to."""
        if self.export_dir is not None:
            return self.export_dir
        if self.loaded_path is not None:
            return self.loaded_path.parent
        return Path.cwd()

    def action_export_theme(self) -> None:
        """Write the current theme next to the original file."""
        if self.vs_theme is None:
            self.notify("No theme loaded", severity="warning")
            return

        try:
            target = write_theme_file(self.vs_theme, self.export_directory(), self.settings.export_suffix)
        except VSThemeError as exc:
            logger.error(f"Export failed: {exc}")
            self.notify(f"Export failed: {exc}", severity="error")
            return

        self.notify(f"Exported to {target}")

    def action_toggle_view(self) -> None:
        """Switch between grid and list view and remember the choice."""
        view_mode = "list" if self.browser.view_mode == "grid" else "grid"
        self.browser.set_view_mode(view_mode)
        self.settings = replace(self.settings, view_mode=view_mode)
        save_settings(self.settings)

    def action_cycle_theme(self) -> None:
        """Switch to the next UI theme and remember the choice."""
        theme_name = next_theme_name(self.theme, self.available_themes)
        self.theme = theme_name
        self.settings = replace(self.settings, theme=theme_name)
        save_settings(self.settings)
        self.browser.refresh_rows()
        self.notify(f"UI theme: {THEME_LABELS[theme_name]}", timeout=2)

    def action_focus_search(self) -> None:
        """Focus the search input."""
        self.browser.focus_search()

    def action_help(self) -> None:
        """Show the keyboard shortcuts."""
        self.push_screen(HelpScreen())

    async def action_quit(self) -> None:
        """Quit the application."""
        logger.info("Quitting application")
        self.exit()

    def on_unmount(self) -> None:
        """Stop mirroring log records once the widgets are gone."""
        if self._log_sink_id is not None:
            remove_tui_sink(self._log_sink_id)
            self._log_sink_id = None


def main(path: str | None = None, export_dir: str | None = None) -> None:
    """Run the theme viewer TUI app.

    Args:
        path: Theme file to open on startup.
        export_dir: Directory for exported files.
    """
    logger.info("Starting vsthemer")
    app = ThemeViewerApp(path=path, export_dir=export_dir)
    app.run()
    logger.info("vsthemer exited")
