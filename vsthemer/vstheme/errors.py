"""Exceptions raised while reading and writing theme files."""


class VSThemeError(Exception):
    """Base class for theme file errors."""


class FormatError(VSThemeError):
    """Raised when a document is not a usable theme file."""


class ThemeFileError(VSThemeError):
    """Raised when a theme file cannot be read or written."""
