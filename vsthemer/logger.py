"""Logging configuration using loguru.

Logs go to a daily file under ~/.local/share/vsthemer/logs and are kept for
one week. Nothing is written to stdout so the TUI stays clean; while the app
runs, records are mirrored into the in-app log pane through a TUI sink.
"""

import os
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    import loguru


# Remove default handler
logger.remove()

# Default ~/.local/share/vsthemer/logs, overridable via VSTHEMER_LOG_DIR
_default_log_dir = Path.home() / ".local" / "share" / "vsthemer" / "logs"
LOG_DIR = Path(os.environ.get("VSTHEMER_LOG_DIR", str(_default_log_dir))).expanduser().resolve()
LOG_DIR.mkdir(parents=True, exist_ok=True)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}"

logger.configure(extra={"name": "vsthemer"})

logger.add(
    LOG_DIR / "vsthemer_{time:YYYY-MM-DD}.log",
    level="DEBUG",
    format=FILE_FORMAT,
    rotation="00:00",  # New file at midnight
    retention="1 week",
    compression="gz",
    backtrace=True,
    diagnose=False,
)


def get_logger(name: str) -> "loguru.Logger":
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured logger instance.
    """
    return logger.bind(name=name)


def add_tui_sink(sink_func: Callable[[object], None], level: str = "INFO") -> int:
    """Mirror log records into a TUI widget.

    Args:
        sink_func: A callable that accepts loguru message objects.
        level: Minimum log level for the TUI sink.

    Returns:
        The sink ID that can be used to remove the sink later.
    """
    return logger.add(sink_func, level=level, format="{message}")


def remove_tui_sink(sink_id: int) -> None:
    """Remove a sink added with add_tui_sink.

    Args:
        sink_id: The sink ID returned by add_tui_sink.
    """
    logger.remove(sink_id)
