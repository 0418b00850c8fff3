"""Sidebar widget summarizing the loaded theme."""

from typing import ClassVar

from rich.markup import escape
from textual.widgets import Static

from vsthemer.colors import get_theme_colors
from vsthemer.vstheme.browse import ColorStats
from vsthemer.vstheme.models import VSTheme


class ThemeStats(Static):
    """Widget to display the loaded theme's name and color counts."""

    DEFAULT_CSS: ClassVar[str] = """
    ThemeStats {
        width: 34;
        height: 100%;
        border: round $primary;
        padding: 0 1;
    }
    """

    def __init__(self, *, id: str | None = None) -> None:
        """Initialize the ThemeStats widget.

        Args:
            id: The ID of the widget in the DOM.
        """
        super().__init__("", id=id)
        self.theme_name: str | None = None
        self.theme_id: str = ""
        self.base_id: str | None = None
        self.category_count: int = 0
        self.stats: ColorStats = ColorStats()

    def on_mount(self) -> None:
        """Render the initial (empty) state."""
        self.update(self._render_stats())

    def update_stats(self, theme: VSTheme, stats: ColorStats) -> None:
        """Update the summary for a theme.

        Args:
            theme: The loaded theme.
            stats: Statistics over all of the theme's colors.
        """
        self.theme_name = theme.name
        self.theme_id = theme.id
        self.base_id = theme.base_id
        self.category_count = len(theme.categories)
        self.stats = stats
        self.update(self._render_stats())

    def _render_stats(self) -> str:
        """Render the summary as Rich markup.

        Returns:
            Formatted statistics string.
        """
        if self.theme_name is None:
            return "[bold]Theme[/bold]\n\n[dim]No theme loaded.\nPress [bold]o[/bold] to open a .vstheme file.[/dim]"

        colors = get_theme_colors(self.app if self.is_mounted else None)
        lines = [
            f"[bold]{escape(self.theme_name)}[/bold]",
            f"[dim]{escape(self.theme_id) or 'no GUID'}[/dim]",
        ]
        if self.base_id:
            lines.append(f"[dim]Base: {escape(self.base_id)}[/dim]")
        lines.extend(
            [
                "",
                f"Categories:   {self.category_count}",
                f"Colors:       {self.stats.total_colors}",
                f"Foregrounds:  {len(self.stats.unique_foregrounds)}",
                f"Backgrounds:  {len(self.stats.unique_backgrounds)}",
            ]
        )
        if self.stats.modified_colors:
            lines.append(f"[bold {colors.warning}]Modified:     {self.stats.modified_colors}[/]")
        return "\n".join(lines)
