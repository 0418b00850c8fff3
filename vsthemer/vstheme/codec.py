"""Decode and encode Visual Studio ``.vstheme`` documents.

Colors are stored in the document as ``AARRGGBB`` tokens (``FF1E1E1E``) and
kept in the model as ``#RRGGBB`` strings for display and editing.
"""

from __future__ import annotations

from xml.etree import ElementTree

from vsthemer.logger import get_logger
from vsthemer.vstheme.errors import FormatError
from vsthemer.vstheme.models import ThemeCategory, ThemeColor, VSTheme

logger = get_logger(__name__)

UNKNOWN_THEME_NAME = "Unknown Theme"
UNKNOWN_CATEGORY_NAME = "Unknown Category"

OPAQUE_ALPHA_PREFIX = "FF"
RAW_COLOR_TYPE = "CT_RAW"
XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'


def normalize_color(source: str) -> str:
    """Convert a ``Source`` token into a ``#``-prefixed hex color.

    Only the fully opaque ``FF`` prefix is stripped. Any other alpha prefix
    is kept, so ``80FFFFFF`` becomes ``#80FFFFFF``.

    Args:
        source: Raw token from the document.

    Returns:
        The normalized color string.
    """
    if source.startswith(OPAQUE_ALPHA_PREFIX):
        return "#" + source[len(OPAQUE_ALPHA_PREFIX) :]
    if source.startswith("#"):
        return source
    return "#" + source


def encode_color(value: str) -> str:
    """Convert a ``#RRGGBB`` color into an opaque ``FFRRGGBB`` token.

    Args:
        value: Color value from the model.

    Returns:
        The token written to the ``Source`` attribute.
    """
    return OPAQUE_ALPHA_PREFIX + value[1:].upper()


def decode(document_text: str) -> VSTheme:
    """Build a theme model from a ``.vstheme`` document.

    Args:
        document_text: The XML document.

    Returns:
        The decoded theme.

    Raises:
        FormatError: If the text is not XML or contains no Theme element.
    """
    try:
        root = ElementTree.fromstring(document_text)
    except ElementTree.ParseError as exc:
        raise FormatError(f"Invalid theme file: {exc}") from exc

    theme_element = next(root.iter("Theme"), None)
    if theme_element is None:
        raise FormatError("Invalid theme file: No Theme element found")

    theme = VSTheme(
        name=theme_element.get("Name") or UNKNOWN_THEME_NAME,
        id=theme_element.get("GUID") or "",
        base_id=theme_element.get("BaseGUID") or None,
    )

    # Categories are collected from the whole document, not only the Theme element
    for category_element in root.iter("Category"):
        category = _decode_category(category_element)
        if category.name in theme.categories:
            logger.debug(f"Category {category.name!r} appears more than once, keeping the last one")
        theme.categories[category.name] = category

    logger.debug(f"Decoded theme {theme.name!r} with {len(theme.categories)} categories")
    return theme


def _decode_category(element: ElementTree.Element) -> ThemeCategory:
    """Build a category and its colors from a Category element.

    Args:
        element: The Category element.

    Returns:
        The decoded category.
    """
    category = ThemeCategory(
        name=element.get("Name") or UNKNOWN_CATEGORY_NAME,
        id=element.get("GUID") or "",
    )

    for color_element in element.iter("Color"):
        color = _decode_color(color_element, category.name)
        if color is not None:
            category.colors.append(color)

    return category


def _decode_color(element: ElementTree.Element, category_name: str) -> ThemeColor | None:
    """Build a color from a Color element.

    Args:
        element: The Color element.
        category_name: Name of the owning category.

    Returns:
        The decoded color, or None if it has no name or no values.
    """
    name = element.get("Name")
    if not name:
        logger.debug(f"Skipping unnamed color in category {category_name!r}")
        return None

    color = ThemeColor(name=name, category=category_name)

    foreground = _read_source(element, "Foreground")
    if foreground is not None:
        color.foreground = foreground
        color.original_foreground = foreground

    background = _read_source(element, "Background")
    if background is not None:
        color.background = background
        color.original_background = background

    if not (color.foreground or color.background):
        logger.debug(f"Skipping color {name!r} without foreground or background")
        return None

    return color


def _read_source(element: ElementTree.Element, tag: str) -> str | None:
    """Read and normalize the Source attribute of the first matching child.

    Args:
        element: The Color element.
        tag: "Foreground" or "Background".

    Returns:
        The normalized color, or None if there is no usable Source.
    """
    child = element.find(f".//{tag}")
    if child is None:
        return None
    source = child.get("Source")
    if not source:
        return None
    return normalize_color(source)


def encode(theme: VSTheme) -> str:
    """Serialize a theme model into a ``.vstheme`` document.

    Attribute values are written as-is, without XML escaping.

    Args:
        theme: The theme to serialize.

    Returns:
        The XML document.
    """
    theme_attributes = f'Name="{theme.name}" GUID="{theme.id}"'
    if theme.base_id:
        theme_attributes += f' BaseGUID="{theme.base_id}"'

    lines = [XML_DECLARATION, "<Themes>", f"  <Theme {theme_attributes}>"]

    for category in theme.categories.values():
        lines.append(f'    <Category Name="{category.name}" GUID="{category.id}">')
        for color in category.colors:
            lines.append(f'      <Color Name="{color.name}">')
            if color.foreground:
                lines.append(
                    f'        <Foreground Type="{RAW_COLOR_TYPE}" Source="{encode_color(color.foreground)}" />'
                )
            if color.background:
                lines.append(
                    f'        <Background Type="{RAW_COLOR_TYPE}" Source="{encode_color(color.background)}" />'
                )
            lines.append("      </Color>")
        lines.append("    </Category>")

    lines.extend(["  </Theme>", "</Themes>"])

    logger.debug(f"Encoded theme {theme.name!r}")
    return "\n".join(lines)
