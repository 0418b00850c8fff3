"""In-memory model for Visual Studio color themes."""

from __future__ import annotations

from dataclasses import dataclass, field

FALLBACK_SWATCH = "#000000"


@dataclass
class ThemeColor:
    """A named color rule with a foreground and/or background value.

    The ``original_*`` values are the ones read from the source document and
    are never changed after decoding; they are the baseline for ``reset``.
    """

    name: str
    category: str
    foreground: str | None = None
    background: str | None = None
    original_foreground: str | None = None
    original_background: str | None = None
    is_modified: bool = False

    @property
    def display_value(self) -> str:
        """Current value shown for the color."""
        return self.foreground or self.background or FALLBACK_SWATCH

    @property
    def original_value(self) -> str:
        """Value the color had when it was loaded."""
        return self.original_foreground or self.original_background or FALLBACK_SWATCH

    @property
    def kinds(self) -> str:
        """Describe which channels the color defines.

        Returns:
            "Foreground", "Background" or "Foreground & Background".
        """
        kinds = []
        if self.foreground:
            kinds.append("Foreground")
        if self.background:
            kinds.append("Background")
        return " & ".join(kinds)

    def reset(self) -> None:
        """Restore the values the color was loaded with."""
        if self.original_foreground:
            self.foreground = self.original_foreground
        if self.original_background:
            self.background = self.original_background
        self.is_modified = False

    def apply(self, value: str) -> None:
        """Assign a new value to every channel the color defines.

        Args:
            value: New hex color (``#RRGGBB``).
        """
        if self.foreground:
            self.foreground = value
        if self.background:
            self.background = value

        unchanged = (
            self.foreground == self.original_foreground and self.background == self.original_background
        )
        self.is_modified = not unchanged


@dataclass
class ThemeCategory:
    """A named group of color rules."""

    name: str
    id: str = ""
    colors: list[ThemeColor] = field(default_factory=list)


@dataclass
class VSTheme:
    """A complete theme: metadata plus categories keyed by name."""

    name: str
    id: str = ""
    base_id: str | None = None
    categories: dict[str, ThemeCategory] = field(default_factory=dict)
