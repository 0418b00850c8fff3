"""Visual Studio theme file model and codec."""

from vsthemer.vstheme.browse import (
    ColorStats,
    all_colors,
    calculate_stats,
    category_names,
    filter_colors,
    unique_swatches,
)
from vsthemer.vstheme.codec import decode, encode, encode_color, normalize_color
from vsthemer.vstheme.errors import FormatError, ThemeFileError, VSThemeError
from vsthemer.vstheme.files import export_filename, is_valid_hex, read_theme_file, write_theme_file
from vsthemer.vstheme.models import ThemeCategory, ThemeColor, VSTheme

__all__ = [
    "ColorStats",
    "FormatError",
    "ThemeCategory",
    "ThemeColor",
    "ThemeFileError",
    "VSTheme",
    "VSThemeError",
    "all_colors",
    "calculate_stats",
    "category_names",
    "decode",
    "encode",
    "encode_color",
    "export_filename",
    "filter_colors",
    "is_valid_hex",
    "normalize_color",
    "read_theme_file",
    "unique_swatches",
    "write_theme_file",
]
