"""Dialog screens for opening theme files and editing colors."""

from dataclasses import dataclass
from typing import ClassVar, Literal

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Input, Static

from vsthemer.logger import get_logger
from vsthemer.vstheme.files import THEME_EXTENSION, is_valid_hex
from vsthemer.vstheme.models import ThemeColor

logger = get_logger(__name__)


@dataclass(frozen=True)
class ColorEditResult:
    """Outcome of the color edit dialog."""

    action: Literal["apply", "reset"]
    value: str | None = None


class OpenThemeScreen(Screen[str | None]):
    """Modal screen to enter the path of a theme file."""

    BINDINGS: ClassVar[tuple[tuple[str, str, str], ...]] = (("escape", "cancel", "Cancel"),)

    def __init__(self, initial_path: str = "") -> None:
        """Initialize the open dialog.

        Args:
            initial_path: Path pre-filled in the input.
        """
        super().__init__()
        self.initial_path = initial_path

    def compose(self) -> ComposeResult:
        """Create the input dialog layout.

        Yields:
            The widgets that make up the input dialog.
        """
        with Vertical(id="open-container"):
            yield Static("📂  [bold]Open Theme[/bold]", id="open-title")
            yield Static(f"Path to a Visual Studio {THEME_EXTENSION} file", id="open-hint")
            yield Input(
                value=self.initial_path,
                placeholder=f"e.g. ~/themes/Dark+{THEME_EXTENSION}",
                id="theme-path-input",
            )
            with Container(id="open-button-row"):
                yield Button("Open", variant="primary", id="open-btn")
                yield Button("✕ Cancel", variant="default", id="open-cancel-btn")

    def on_mount(self) -> None:
        """Focus the input field on mount."""
        self.query_one("#theme-path-input", Input).focus()

    def _submit(self) -> None:
        """Dismiss with the entered path, if any."""
        path = self.query_one("#theme-path-input", Input).value.strip()
        if path:
            self.dismiss(path)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key in input field.

        Args:
            event: The input submission event.
        """
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button press.

        Args:
            event: The button press event.
        """
        if event.button.id == "open-btn":
            self._submit()
        elif event.button.id == "open-cancel-btn":
            self.dismiss(None)

    def action_cancel(self) -> None:
        """Cancel and close the modal."""
        self.dismiss(None)


class ColorEditScreen(Screen[ColorEditResult | None]):
    """Modal screen to change or reset a single color.

    The screen does not modify the color itself; it dismisses with a
    ColorEditResult that the app applies.
    """

    BINDINGS: ClassVar[tuple[tuple[str, str, str], ...]] = (
        ("escape", "cancel", "Cancel"),
        ("ctrl+r", "reset", "Reset to original"),
    )

    def __init__(self, color: ThemeColor) -> None:
        """Initialize the edit screen.

        Args:
            color: The color rule being edited.
        """
        super().__init__()
        self.color = color

    def compose(self) -> ComposeResult:
        """Create the edit dialog layout.

        Yields:
            The widgets that make up the edit dialog.
        """
        color = self.color
        with Vertical(id="edit-container"):
            yield Static(f"🎨  [bold]{escape(color.name)}[/bold]", id="edit-title")
            yield Static(
                f"Category: [bold]{escape(color.category)}[/bold]\nType: {color.kinds}",
                id="edit-details",
            )
            with Horizontal(classes="swatch-row"):
                yield Static("Original", classes="swatch-label")
                yield Static("", id="original-swatch", classes="swatch")
                yield Static(color.original_value, id="original-value")
            with Horizontal(classes="swatch-row"):
                yield Static("New", classes="swatch-label")
                yield Static("", id="preview-swatch", classes="swatch")
                yield Input(value=color.display_value, placeholder="#RRGGBB", id="color-hex-input")
            with Container(id="edit-button-row"):
                yield Button("Apply", variant="primary", id="apply-color-btn")
                yield Button("↺ Reset", variant="warning", id="reset-color-btn")
                yield Button("✕ Cancel", variant="default", id="edit-cancel-btn")

    def on_mount(self) -> None:
        """Paint the swatches and focus the input."""
        self._paint_swatch("#original-swatch", self.color.original_value)
        self._paint_swatch("#preview-swatch", self.color.display_value)
        self.query_one("#color-hex-input", Input).focus()

    def _paint_swatch(self, selector: str, value: str) -> None:
        """Set a swatch's background if the value is a #RRGGBB color.

        Args:
            selector: CSS selector of the swatch.
            value: Color value.
        """
        if is_valid_hex(value):
            self.query_one(selector, Static).styles.background = value

    def on_input_changed(self, event: Input.Changed) -> None:
        """Update the preview as the value is typed.

        Args:
            event: The input change event.
        """
        self._paint_swatch("#preview-swatch", event.value.strip())

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Apply on Enter.

        Args:
            event: The input submission event.
        """
        event.stop()
        self._apply()

    def _apply(self) -> None:
        """Dismiss with the new value, or report an invalid one."""
        value = self.query_one("#color-hex-input", Input).value.strip()
        if not is_valid_hex(value):
            logger.debug(f"Rejected color value {value!r} for {self.color.name!r}")
            self.app.notify(f"Invalid color {value!r}: use #RRGGBB", severity="error")
            return
        self.dismiss(ColorEditResult(action="apply", value=value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button press.

        Args:
            event: The button press event.
        """
        if event.button.id == "apply-color-btn":
            self._apply()
        elif event.button.id == "reset-color-btn":
            self.action_reset()
        elif event.button.id == "edit-cancel-btn":
            self.dismiss(None)

    def action_reset(self) -> None:
        """Reset the color to its original value."""
        self.dismiss(ColorEditResult(action="reset"))

    def action_cancel(self) -> None:
        """Close without changes."""
        self.dismiss(None)
