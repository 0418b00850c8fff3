"""Reading theme files from disk and writing modified copies."""

from __future__ import annotations

import re
from pathlib import Path

from vsthemer.logger import get_logger
from vsthemer.vstheme.codec import decode, encode
from vsthemer.vstheme.errors import ThemeFileError
from vsthemer.vstheme.models import VSTheme

logger = get_logger(__name__)

THEME_EXTENSION = ".vstheme"
DEFAULT_EXPORT_SUFFIX = "_modified"

_HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")
_UNSAFE_FILENAME_CHARS = re.compile(r"[\\/]")


def is_valid_hex(value: str) -> bool:
    """Check whether a value is a ``#RRGGBB`` color.

    Args:
        value: Candidate color value.

    Returns:
        True if the value is a six-digit hex color.
    """
    return bool(_HEX_COLOR_PATTERN.match(value))


def read_theme_file(path: str | Path) -> VSTheme:
    """Read and decode a theme file.

    Args:
        path: Path to the ``.vstheme`` file.

    Returns:
        The decoded theme.

    Raises:
        ThemeFileError: If the file cannot be read.
        FormatError: If the file is not a valid theme document.
    """
    theme_path = Path(path).expanduser()
    try:
        # utf-8-sig drops the BOM that Visual Studio writes
        content = theme_path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ThemeFileError(f"File is not UTF-8 text: {theme_path}") from exc
    except OSError as exc:
        raise ThemeFileError(f"Could not read {theme_path}: {exc.strerror or exc}") from exc

    theme = decode(content)
    logger.info(f"Loaded theme {theme.name!r} from {theme_path}")
    return theme


def export_filename(theme: VSTheme, suffix: str = DEFAULT_EXPORT_SUFFIX) -> str:
    """Build the file name suggested for an exported theme.

    Args:
        theme: The theme being exported.
        suffix: Text appended to the theme name.

    Returns:
        File name such as ``Dark+_modified.vstheme``.
    """
    stem = _UNSAFE_FILENAME_CHARS.sub("_", theme.name)
    return f"{stem}{suffix}{THEME_EXTENSION}"


def write_theme_file(
    theme: VSTheme,
    directory: str | Path,
    suffix: str = DEFAULT_EXPORT_SUFFIX,
) -> Path:
    """Encode a theme and write it into a directory.

    Args:
        theme: The theme to write.
        directory: Target directory, created if missing.
        suffix: Text appended to the theme name in the file name.

    Returns:
        Path of the written file.

    Raises:
        ThemeFileError: If the file cannot be written.
    """
    target_dir = Path(directory).expanduser()
    target = target_dir / export_filename(theme, suffix)
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        target.write_text(encode(theme), encoding="utf-8")
    except OSError as exc:
        raise ThemeFileError(f"Could not write {target}: {exc.strerror or exc}") from exc

    logger.info(f"Exported theme {theme.name!r} to {target}")
    return target
