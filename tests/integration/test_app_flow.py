"""End-to-end tests driving ThemeViewerApp through the pilot."""

from pathlib import Path
from unittest.mock import patch

import pytest
from textual.pilot import Pilot
from textual.widgets import DataTable, Input

from vsthemer.app import ThemeViewerApp
from vsthemer.settings import Settings, load_settings
from vsthemer.themes import (
    DEFAULT_THEME_NAME,
    TERMINAL_THEME_NAME,
    THEME_LABELS,
    VS_HIGH_CONTRAST_THEME_NAME,
    next_theme_name,
)
from vsthemer.vstheme.files import read_theme_file
from vsthemer.widgets.color_browser import ColorBrowser
from vsthemer.widgets.help_screen import HelpScreen
from vsthemer.widgets.screens import ColorEditScreen, OpenThemeScreen
from vsthemer.widgets.theme_stats import ThemeStats

APP_SIZE = (140, 40)


async def _wait_for_load(app: ThemeViewerApp, pilot: Pilot) -> None:
    """Let the load worker finish and its UI update run."""
    await pilot.pause()
    await app.workers.wait_for_complete()
    await pilot.pause()


class TestLoading:
    """Tests for loading theme files."""

    @pytest.mark.asyncio
    async def test_loads_initial_path(self, sample_theme_file: Path) -> None:
        """Test the file given on startup is loaded and displayed."""
        app = ThemeViewerApp(path=sample_theme_file, settings=Settings())
        async with app.run_test(size=APP_SIZE) as pilot:
            await _wait_for_load(app, pilot)

            assert app.vs_theme is not None
            assert app.vs_theme.name == "Solarized Dark"
            assert app.loaded_path == sample_theme_file
            assert app.sub_title == "Solarized Dark"
            assert app.query_one("#color-table", DataTable).row_count == 5
            assert app.query_one("#theme-stats", ThemeStats).theme_name == "Solarized Dark"
            assert app.focused is app.query_one("#color-table", DataTable)

    @pytest.mark.asyncio
    async def test_missing_file_reports_error(self, tmp_path: Path) -> None:
        """Test a missing file is reported and nothing is loaded."""
        app = ThemeViewerApp(path=tmp_path / "missing.vstheme", settings=Settings())
        with patch.object(app, "notify") as mock_notify:
            async with app.run_test(size=APP_SIZE) as pilot:
                await _wait_for_load(app, pilot)

                assert app.vs_theme is None
                messages = [call.args[0] for call in mock_notify.call_args_list]
                assert any(message.startswith("Error loading theme file:") for message in messages)

    @pytest.mark.asyncio
    async def test_invalid_file_keeps_current_theme(self, sample_theme_file: Path, tmp_path: Path) -> None:
        """Test a failed load leaves the previous theme in place."""
        broken = tmp_path / "broken.vstheme"
        broken.write_text("<Themes></Themes>", encoding="utf-8")

        app = ThemeViewerApp(path=sample_theme_file, settings=Settings())
        async with app.run_test(size=APP_SIZE) as pilot:
            await _wait_for_load(app, pilot)

            with patch.object(app, "notify") as mock_notify:
                app.load_theme(broken)
                await _wait_for_load(app, pilot)

            assert app.vs_theme is not None
            assert app.vs_theme.name == "Solarized Dark"
            message = mock_notify.call_args.args[0]
            assert "No Theme element found" in message

    @pytest.mark.asyncio
    async def test_open_dialog_loads_file(self, sample_theme_file: Path) -> None:
        """Test the open dialog loads the entered path."""
        app = ThemeViewerApp(settings=Settings())
        async with app.run_test(size=APP_SIZE) as pilot:
            await pilot.pause()
            app.action_open_theme()
            await pilot.pause()
            assert isinstance(app.screen, OpenThemeScreen)

            app.screen.query_one("#theme-path-input", Input).value = str(sample_theme_file)
            await pilot.press("enter")
            await _wait_for_load(app, pilot)

            assert app.vs_theme is not None
            assert app.vs_theme.name == "Solarized Dark"


class TestEditing:
    """Tests for editing colors."""

    @pytest.mark.asyncio
    async def test_edit_color_through_dialog(self, sample_theme_file: Path) -> None:
        """Test selecting a row and applying a new value."""
        app = ThemeViewerApp(path=sample_theme_file, settings=Settings())
        async with app.run_test(size=APP_SIZE) as pilot:
            await _wait_for_load(app, pilot)

            await pilot.press("enter")
            await pilot.pause()
            assert isinstance(app.screen, ColorEditScreen)
            assert app.screen.color.name == "Plain Text"

            app.screen.query_one("#color-hex-input", Input).value = "#ABCDEF"
            await pilot.press("enter")
            await pilot.pause()

            assert app.vs_theme is not None
            plain_text = app.vs_theme.categories["Text Editor Text Marker Items"].colors[0]
            assert plain_text.foreground == "#ABCDEF"
            assert plain_text.background == "#ABCDEF"
            assert plain_text.is_modified is True
            assert app.query_one("#theme-stats", ThemeStats).stats.modified_colors == 1

    @pytest.mark.asyncio
    async def test_reset_color_through_dialog(self, sample_theme_file: Path) -> None:
        """Test ctrl+r in the dialog restores the original value."""
        app = ThemeViewerApp(path=sample_theme_file, settings=Settings())
        async with app.run_test(size=APP_SIZE) as pilot:
            await _wait_for_load(app, pilot)
            assert app.vs_theme is not None
            comment = app.vs_theme.categories["Text Editor Text Marker Items"].colors[1]
            comment.apply("#FFFFFF")
            app.browser.refresh_rows()

            app.browser.set_view_mode("list")
            table = app.query_one("#color-table", DataTable)
            table.move_cursor(row=1)
            await pilot.pause()

            await pilot.press("enter")
            await pilot.pause()
            assert isinstance(app.screen, ColorEditScreen)

            await pilot.press("ctrl+r")
            await pilot.pause()

            assert comment.foreground == "#586E75"
            assert comment.is_modified is False

    @pytest.mark.asyncio
    async def test_cancel_leaves_color_unchanged(self, sample_theme_file: Path) -> None:
        """Test escape closes the dialog without changes."""
        app = ThemeViewerApp(path=sample_theme_file, settings=Settings())
        async with app.run_test(size=APP_SIZE) as pilot:
            await _wait_for_load(app, pilot)

            await pilot.press("enter")
            await pilot.pause()
            app.screen.query_one("#color-hex-input", Input).value = "#000000"
            await pilot.press("escape")
            await pilot.pause()

            assert app.vs_theme is not None
            plain_text = app.vs_theme.categories["Text Editor Text Marker Items"].colors[0]
            assert plain_text.foreground == "#839496"
            assert plain_text.is_modified is False


class TestExport:
    """Tests for exporting the edited theme."""

    @pytest.mark.asyncio
    async def test_export_writes_modified_file(self, sample_theme_file: Path, tmp_path: Path) -> None:
        """Test s writes the edited theme into the export directory."""
        export_dir = tmp_path / "out"
        app = ThemeViewerApp(path=sample_theme_file, export_dir=export_dir, settings=Settings())
        async with app.run_test(size=APP_SIZE) as pilot:
            await _wait_for_load(app, pilot)
            assert app.vs_theme is not None
            app.vs_theme.categories["Environment"].colors[0].apply("#123456")

            await pilot.press("s")
            await pilot.pause()

        target = export_dir / "Solarized Dark_modified.vstheme"
        assert target.exists()
        exported = read_theme_file(target)
        assert exported.categories["Environment"].colors[0].background == "#123456"
        assert exported.base_id == "{1ded0138-47ce-435e-84ef-9ec1f439b749}"

    @pytest.mark.asyncio
    async def test_export_defaults_next_to_source(self, sample_theme_file: Path) -> None:
        """Test the export lands beside the opened file by default."""
        app = ThemeViewerApp(path=sample_theme_file, settings=Settings())
        async with app.run_test(size=APP_SIZE) as pilot:
            await _wait_for_load(app, pilot)
            await pilot.press("s")
            await pilot.pause()

        assert (sample_theme_file.parent / "Solarized Dark_modified.vstheme").exists()

    @pytest.mark.asyncio
    async def test_export_without_theme_warns(self, tmp_path: Path) -> None:
        """Test exporting with nothing loaded only warns."""
        app = ThemeViewerApp(export_dir=tmp_path / "out", settings=Settings())
        with patch.object(app, "notify") as mock_notify:
            async with app.run_test(size=APP_SIZE) as pilot:
                await pilot.pause()
                app.action_export_theme()
                await pilot.pause()

        mock_notify.assert_called_with("No theme loaded", severity="warning")
        assert not (tmp_path / "out").exists()


class TestViewAndSettings:
    """Tests for view toggles that persist settings."""

    @pytest.mark.asyncio
    async def test_toggle_view_persists(self, sample_theme_file: Path) -> None:
        """Test v switches to list view and saves the choice."""
        app = ThemeViewerApp(path=sample_theme_file, settings=Settings())
        async with app.run_test(size=APP_SIZE) as pilot:
            await _wait_for_load(app, pilot)

            await pilot.press("v")
            await pilot.pause()

            assert app.query_one("#color-browser", ColorBrowser).view_mode == "list"
            assert app.settings.view_mode == "list"

        assert load_settings().view_mode == "list"

    @pytest.mark.asyncio
    async def test_saved_view_mode_used_on_start(self) -> None:
        """Test the browser starts in the configured view."""
        app = ThemeViewerApp(settings=Settings(view_mode="list"))
        async with app.run_test(size=APP_SIZE) as pilot:
            await pilot.pause()
            assert app.browser.view_mode == "list"

    @pytest.mark.asyncio
    async def test_cycle_ui_theme_persists(self) -> None:
        """Test t switches the UI theme and saves it."""
        app = ThemeViewerApp(settings=Settings())
        async with app.run_test(size=APP_SIZE) as pilot:
            await pilot.pause()
            assert app.theme == DEFAULT_THEME_NAME

            app.action_cycle_theme()
            await pilot.pause()

            expected = next_theme_name(DEFAULT_THEME_NAME)
            assert app.theme == expected

        assert load_settings().theme == expected

    @pytest.mark.asyncio
    async def test_cycle_through_every_ui_theme(self, sample_theme_file: Path) -> None:
        """Test pressing t once per theme visits each one and ends at the start."""
        app = ThemeViewerApp(path=sample_theme_file, settings=Settings())
        async with app.run_test(size=APP_SIZE) as pilot:
            await _wait_for_load(app, pilot)

            visited = []
            for _ in THEME_LABELS:
                await pilot.press("t")
                await pilot.pause()
                visited.append(app.theme)

            assert sorted(visited) == sorted(THEME_LABELS)
            assert app.theme == DEFAULT_THEME_NAME
            assert app.query_one("#color-table", DataTable).row_count == 5

    @pytest.mark.asyncio
    async def test_cycle_to_terminal_theme(self, sample_theme_file: Path) -> None:
        """Test the terminal theme follows high contrast and keeps the table usable."""
        app = ThemeViewerApp(path=sample_theme_file, settings=Settings(theme=VS_HIGH_CONTRAST_THEME_NAME))
        async with app.run_test(size=APP_SIZE) as pilot:
            await _wait_for_load(app, pilot)

            await pilot.press("t")
            await pilot.pause()

            assert app.theme == TERMINAL_THEME_NAME
            assert app.query_one("#color-table", DataTable).row_count > 0

        assert load_settings().theme == TERMINAL_THEME_NAME

    @pytest.mark.asyncio
    async def test_unregistered_theme_falls_back_to_default(self) -> None:
        """Test a saved theme name Textual does not know starts the default theme."""
        app = ThemeViewerApp(settings=Settings(theme="textual-ansi"))
        async with app.run_test(size=APP_SIZE) as pilot:
            await pilot.pause()

            assert app.theme == DEFAULT_THEME_NAME

    @pytest.mark.asyncio
    async def test_help_screen(self, sample_theme_file: Path) -> None:
        """Test ? opens the help screen."""
        app = ThemeViewerApp(path=sample_theme_file, settings=Settings())
        async with app.run_test(size=APP_SIZE) as pilot:
            await _wait_for_load(app, pilot)

            await pilot.press("question_mark")
            await pilot.pause()

            assert isinstance(app.screen, HelpScreen)

    @pytest.mark.asyncio
    async def test_slash_focuses_search(self, sample_theme_file: Path) -> None:
        """Test / moves focus to the search box."""
        app = ThemeViewerApp(path=sample_theme_file, settings=Settings())
        async with app.run_test(size=APP_SIZE) as pilot:
            await _wait_for_load(app, pilot)

            await pilot.press("slash")
            await pilot.pause()

            assert app.focused is app.query_one("#color-search", Input)
