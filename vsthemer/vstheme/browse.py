"""Searching, filtering and summarizing the colors of a theme."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from vsthemer.vstheme.models import ThemeColor, VSTheme


@dataclass
class ColorStats:
    """Summary counts for a set of colors."""

    total_colors: int = 0
    unique_foregrounds: set[str] = field(default_factory=set)
    unique_backgrounds: set[str] = field(default_factory=set)
    modified_colors: int = 0


def all_colors(theme: VSTheme) -> list[ThemeColor]:
    """Flatten the colors of every category, in category order.

    Args:
        theme: The theme to flatten.

    Returns:
        List of all colors.
    """
    colors: list[ThemeColor] = []
    for category in theme.categories.values():
        colors.extend(category.colors)
    return colors


def category_names(theme: VSTheme) -> list[str]:
    """Return the category names in alphabetical order."""
    return sorted(theme.categories)


def filter_colors(
    colors: Iterable[ThemeColor],
    search: str = "",
    category: str | None = None,
) -> list[ThemeColor]:
    """Filter colors by a search term and a category.

    The search term is matched case-insensitively against the color name and
    its current foreground and background values.

    Args:
        colors: Colors to filter.
        search: Search term; empty matches everything.
        category: Category name to keep; None or empty keeps all categories.

    Returns:
        The matching colors, in their original order.
    """
    term = search.lower()

    def matches(color: ThemeColor) -> bool:
        if category and color.category != category:
            return False
        if not term:
            return True
        return (
            term in color.name.lower()
            or (color.foreground is not None and term in color.foreground.lower())
            or (color.background is not None and term in color.background.lower())
        )

    return [color for color in colors if matches(color)]


def unique_swatches(colors: Iterable[ThemeColor]) -> dict[str, ThemeColor]:
    """Map each distinct color value to the first color that uses it.

    Args:
        colors: Colors to scan.

    Returns:
        Ordered mapping of color value to color.
    """
    swatches: dict[str, ThemeColor] = {}
    for color in colors:
        if color.foreground and color.foreground not in swatches:
            swatches[color.foreground] = color
        if color.background and color.background not in swatches:
            swatches[color.background] = color
    return swatches


def calculate_stats(colors: Iterable[ThemeColor]) -> ColorStats:
    """Count colors, distinct values and modifications.

    Args:
        colors: Colors to summarize.

    Returns:
        The computed statistics.
    """
    stats = ColorStats()
    for color in colors:
        stats.total_colors += 1
        if color.foreground:
            stats.unique_foregrounds.add(color.foreground)
        if color.background:
            stats.unique_backgrounds.add(color.background)
        if color.is_modified:
            stats.modified_colors += 1
    return stats
