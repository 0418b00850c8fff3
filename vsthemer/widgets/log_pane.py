"""Log pane widget for displaying application logs in the TUI."""

from datetime import datetime
from typing import ClassVar

from rich.text import Text
from textual.widgets import RichLog

from vsthemer.colors import get_theme_colors


class LogPane(RichLog):
    """Widget that shows loguru records as they are emitted."""

    DEFAULT_CSS: ClassVar[str] = """
    LogPane {
        height: 100%;
        width: 100%;
        scrollbar-size: 1 1;
    }
    """

    def __init__(self, max_lines: int | None = None, *, id: str | None = None) -> None:
        """Initialize the LogPane widget.

        Args:
            max_lines: Number of lines kept before the oldest are dropped.
            id: The ID of the widget in the DOM.
        """
        super().__init__(max_lines=max_lines, wrap=True, highlight=False, markup=False, auto_scroll=True, id=id)

    def add_log(self, level: str, message: str, timestamp: datetime | None = None) -> None:
        """Add a log entry to the pane.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, etc.).
            message: The log message.
            timestamp: Optional timestamp (defaults to now).
        """
        if timestamp is None:
            timestamp = datetime.now()

        colors = get_theme_colors(self.app if self.is_mounted else None)
        level_upper = level.upper()

        # Messages may contain theme names with brackets, so no markup parsing
        log_text = Text()
        log_text.append(f"{timestamp:%H:%M:%S} ", style="dim")
        log_text.append(f"[{level_upper:^8}] ", style=colors.level_color(level_upper))
        log_text.append(message)

        self.write(log_text)

    def sink(self, message: object) -> None:
        """Loguru sink that forwards records to add_log.

        Args:
            message: Loguru message object.
        """
        record = getattr(message, "record", None)
        if record is None:
            return
        level = record["level"].name
        msg = str(record["message"])
        timestamp = record["time"].replace(tzinfo=None)

        try:
            self.app.call_from_thread(self.add_log, level, msg, timestamp)
        except RuntimeError:
            # Already on the app thread (or no app running)
            self.add_log(level, msg, timestamp)
