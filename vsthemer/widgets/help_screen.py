"""Help screen listing the keyboard shortcuts."""

from typing import ClassVar

from textual.app import ComposeResult
from textual.containers import Container, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Static

HELP_SECTIONS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "Files",
        (
            ("o", "Open a .vstheme file"),
            ("s", "Export the modified theme"),
        ),
    ),
    (
        "Browsing",
        (
            ("/", "Search by name or color value"),
            ("↑/↓", "Move through colors"),
            ("v", "Toggle grid / list view"),
            ("Tab", "Cycle search, category filter and table"),
        ),
    ),
    (
        "Editing",
        (
            ("Enter", "Edit the selected color"),
            ("Enter", "Apply the typed value (in the editor)"),
            ("Ctrl+R", "Reset to the original value (in the editor)"),
            ("Esc", "Close the editor without changes"),
        ),
    ),
    (
        "General",
        (
            ("t", "Switch UI theme"),
            ("?", "Show this help screen"),
            ("q", "Quit"),
        ),
    ),
)


def format_section(title: str, items: tuple[tuple[str, str], ...]) -> str:
    """Format a help section.

    Args:
        title: Section title.
        items: (key, description) pairs.

    Returns:
        Rich markup for the section.
    """
    lines = [f"[bold underline]{title}[/bold underline]"]
    lines.extend(f"  [bold]{key:<8}[/bold] {description}" for key, description in items)
    return "\n".join(lines)


class HelpScreen(Screen[None]):
    """Modal screen displaying all keybindings."""

    BINDINGS: ClassVar[tuple[tuple[str, str, str], ...]] = (
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("question_mark", "close", "Close"),
    )

    def compose(self) -> ComposeResult:
        """Create the help screen layout.

        Yields:
            The widgets that make up the help screen.
        """
        with Vertical(id="help-container"):
            yield Static("[bold]Keyboard Shortcuts[/bold]", id="help-title")
            with VerticalScroll(id="help-content"):
                yield Static(self.help_text(), id="help-text")
            with Container(id="help-footer"):
                yield Static("[bold]?[/bold] or [bold]Esc[/bold] to close", id="help-hint")
                yield Button("Close", variant="default", id="help-close-button")

    @staticmethod
    def help_text() -> str:
        """Build the full help text."""
        return "\n\n".join(format_section(title, items) for title, items in HELP_SECTIONS)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Close when the button is pressed.

        Args:
            event: The button press event.
        """
        if event.button.id == "help-close-button":
            self.dismiss(None)

    def action_close(self) -> None:
        """Close the help screen."""
        self.dismiss(None)
