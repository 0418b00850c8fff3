"""Searchable, filterable table of theme colors."""

from __future__ import annotations

from typing import ClassVar

from rich.style import Style
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import DataTable, Input, Select, Static

from vsthemer.colors import get_theme_colors
from vsthemer.logger import get_logger
from vsthemer.settings import DEFAULT_VIEW_MODE, VIEW_MODES
from vsthemer.vstheme.browse import filter_colors, unique_swatches
from vsthemer.vstheme.files import is_valid_hex
from vsthemer.vstheme.models import ThemeColor

logger = get_logger(__name__)

SWATCH_WIDTH = 6

GRID_COLUMNS: tuple[str, ...] = ("Swatch", "Value", "Name", "Category", "")
LIST_COLUMNS: tuple[str, ...] = ("Swatch", "Name", "Foreground", "Background", "Category", "")


def swatch(value: str | None) -> Text:
    """Render a color value as a block of background color.

    Args:
        value: Color value, or None.

    Returns:
        A Rich Text block, or a placeholder for values Rich cannot render.
    """
    if not value:
        return Text("")
    if not is_valid_hex(value):
        # e.g. eight-digit values that kept a non-opaque alpha prefix
        return Text(" ?? ".center(SWATCH_WIDTH), style="dim")
    return Text(" " * SWATCH_WIDTH, style=Style(bgcolor=value))


class ColorBrowser(Vertical):
    """Search bar, category filter and table over a theme's colors.

    In ``grid`` view each distinct color value gets one row, pointing at the
    first color rule that uses it. In ``list`` view every color rule gets a
    row with both of its values.
    """

    DEFAULT_CSS: ClassVar[str] = """
    ColorBrowser {
        height: 1fr;
        width: 1fr;
    }

    ColorBrowser #filter-bar {
        height: auto;
    }

    ColorBrowser #color-search {
        width: 2fr;
    }

    ColorBrowser #category-filter {
        width: 1fr;
    }

    ColorBrowser #color-count {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }

    ColorBrowser DataTable {
        height: 1fr;
    }
    """

    class ColorSelected(Message):
        """Posted when the user picks a color row."""

        def __init__(self, color: ThemeColor) -> None:
            """Initialize the message.

            Args:
                color: The selected color rule.
            """
            super().__init__()
            self.color = color

    def __init__(self, view_mode: str = DEFAULT_VIEW_MODE, *, id: str | None = None) -> None:
        """Initialize the ColorBrowser.

        Args:
            view_mode: "grid" or "list".
            id: The ID of the widget in the DOM.
        """
        super().__init__(id=id)
        self.view_mode = view_mode if view_mode in VIEW_MODES else DEFAULT_VIEW_MODE
        self._colors: list[ThemeColor] = []
        self._rows: dict[str, ThemeColor] = {}

    def compose(self) -> ComposeResult:
        """Create the filter bar and the table.

        Yields:
            The widgets that make up the browser.
        """
        with Horizontal(id="filter-bar"):
            yield Input(placeholder="Search name or value...", id="color-search")
            yield Select[str]([], prompt="All Categories", allow_blank=True, id="category-filter")
        yield Static("", id="color-count")
        yield DataTable(id="color-table", cursor_type="row", zebra_stripes=True)

    def on_mount(self) -> None:
        """Render the empty table."""
        self.refresh_rows()

    @property
    def search_term(self) -> str:
        """Current search text."""
        return self.query_one("#color-search", Input).value.strip()

    @property
    def selected_category(self) -> str | None:
        """Category chosen in the filter, or None for all categories."""
        value = self.query_one("#category-filter", Select).value
        return value if isinstance(value, str) else None

    @property
    def visible_colors(self) -> list[ThemeColor]:
        """Color rules currently shown in the table, in row order."""
        return list(self._rows.values())

    def set_colors(self, colors: list[ThemeColor], categories: list[str]) -> None:
        """Replace the colors being browsed.

        Args:
            colors: All colors of the loaded theme.
            categories: Category names for the filter.
        """
        self._colors = colors
        category_filter = self.query_one("#category-filter", Select)
        category_filter.set_options([(name, name) for name in categories])
        self.query_one("#color-search", Input).value = ""
        self.refresh_rows()

    def set_view_mode(self, view_mode: str) -> None:
        """Switch between grid and list view.

        Args:
            view_mode: "grid" or "list".
        """
        if view_mode not in VIEW_MODES:
            raise ValueError(f"Unknown view mode: {view_mode}")
        self.view_mode = view_mode
        self.refresh_rows()

    def refresh_rows(self) -> None:
        """Rebuild the table from the current filter and view mode."""
        table = self.query_one("#color-table", DataTable)
        cursor_row = table.cursor_row
        table.clear(columns=True)
        self._rows = {}

        filtered = filter_colors(self._colors, self.search_term, self.selected_category)
        modified_marker = Text("●", style=get_theme_colors(self.app).warning)

        if self.view_mode == "grid":
            table.add_columns(*GRID_COLUMNS)
            for index, (value, color) in enumerate(unique_swatches(filtered).items()):
                key = str(index)
                self._rows[key] = color
                table.add_row(
                    swatch(value),
                    value,
                    color.name,
                    color.category,
                    modified_marker if color.is_modified else "",
                    key=key,
                )
        else:
            table.add_columns(*LIST_COLUMNS)
            for index, color in enumerate(filtered):
                key = str(index)
                self._rows[key] = color
                table.add_row(
                    swatch(color.display_value),
                    color.name,
                    color.foreground or "",
                    color.background or "",
                    color.category,
                    modified_marker if color.is_modified else "",
                    key=key,
                )

        unit = "values" if self.view_mode == "grid" else "colors"
        self.query_one("#color-count", Static).update(
            f"{table.row_count} {unit} shown ({len(filtered)} of {len(self._colors)} colors match)"
        )

        if table.row_count > 0:
            table.move_cursor(row=min(cursor_row, table.row_count - 1))

    def focus_search(self) -> None:
        """Move focus to the search input."""
        self.query_one("#color-search", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-filter as the search text changes.

        Args:
            event: The input change event.
        """
        event.stop()
        self.refresh_rows()

    def on_select_changed(self, event: Select.Changed) -> None:
        """Re-filter when the category changes.

        Args:
            event: The select change event.
        """
        event.stop()
        logger.debug(f"Category filter set to {self.selected_category!r}")
        self.refresh_rows()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Post ColorSelected for the chosen row.

        Args:
            event: The row selection event from the DataTable.
        """
        event.stop()
        key = event.row_key.value
        color = self._rows.get(key) if key is not None else None
        if color is None:
            logger.warning(f"No color for table row {key!r}")
            return
        self.post_message(self.ColorSelected(color))
