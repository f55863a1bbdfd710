import json
from functools import cache
from importlib import resources
from types import MappingProxyType

TRANSPARENT = "#00000000"


@cache
def color_names() -> MappingProxyType:
    """Return the table of CSS color names, loaded once from the packaged JSON asset.

    Returns:
        MappingProxyType: read-only mapping of lowercase color name to "#rrggbb" hex string
    """
    with resources.files("svg2vd").joinpath("assets/css_color_names.json").open("r", encoding="utf-8") as f:
        return MappingProxyType(json.load(f))


def from_hex(value: str) -> str | None:
    """Return a hex color (e.g. "#FFF" or "#ff000080") unchanged, or None if `value` is not one."""
    if value.startswith("#"):
        return value


def from_none(value: str) -> str | None:
    """Return the fully transparent color for "none" (and "transparent"), or None otherwise."""
    if value in ("none", "transparent"):
        return TRANSPARENT


def from_name(value: str) -> str | None:
    """Return the hex value for a color name (e.g. "blue" or "DarkSlateGrey").

    Returns:
        str | None: a "#rrggbb" string if the name is known, or None otherwise
    """
    return color_names().get(value.lower())


def color_svg2vd(value: str) -> str | None:
    """Convert an SVG color to its vector drawable representation using any of the
    aforementioned methods. Functional notations such as "rgb(...)" are not handled.

    Args:
        value (str): color as found in the SVG attribute

    Returns:
        str | None: the converted color, or None if no method matched
    """
    value = value.strip()
    if not value:
        return None
    color = from_hex(value)
    color = from_none(value) if color is None else color
    color = from_name(value) if color is None else color
    return color
