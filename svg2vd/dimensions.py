import math
import re
from enum import Enum
from typing import Mapping, NamedTuple

from svg2vd.common import UNKNOWN_SOURCE
from svg2vd.exceptions import InvalidDimensionsException
from svg2vd.res import SVG_HEIGHT, SVG_VIEW_BOX, SVG_WIDTH

SIZE_PATTERN = re.compile(r"^\s*(?P<value>[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


class ViewBox(NamedTuple):
    min_x: float
    min_y: float
    width: float
    height: float


class Unit(Enum):
    PIXELS = "px"
    PERCENT = "%"


class Size(NamedTuple):
    value: float
    unit: Unit = Unit.PIXELS

    def to_pixels(self, reference: float) -> float:
        """Return the size in pixels; percentages are taken relative to `reference`."""
        if self.unit == Unit.PERCENT:
            return reference * self.value / 100
        return self.value


def parse_view_box(value: str | None) -> ViewBox | None:
    """Parse a `viewBox` attribute, i.e. exactly four whitespace separated numbers.

    Returns:
        ViewBox | None: the view box, or None if the value is missing or malformed
    """
    if value is None:
        return None
    try:
        numbers = [float(x) for x in value.split()]
    except ValueError:
        return None
    if len(numbers) != 4 or not all(math.isfinite(x) for x in numbers):
        return None
    return ViewBox(*numbers)


def parse_size(value: str | None) -> Size | None:
    """Parse a `width` or `height` attribute such as "24", "24px" or "50%".

    Only the leading number is read; a trailing "%" makes it a percentage and any other unit is
    treated as pixels.

    Returns:
        Size | None: the size, or None if the value is missing or doesn't start with a number
    """
    if value is None:
        return None
    match = SIZE_PATTERN.match(value)
    if not match:
        return None
    unit = Unit.PERCENT if value.strip().endswith("%") else Unit.PIXELS
    return Size(float(match.group("value")), unit)


def resolve_dimensions(attributes: Mapping[str, str], source: str = UNKNOWN_SOURCE) -> tuple[ViewBox, float, float]:
    """Compute the view box and pixel size of a document from the attributes of its `<svg>` tag.

    Accepted combinations are width and height without a view box, a view box without width
    and height, or all three.

    Args:
        attributes (Mapping[str, str]): attributes of the root `<svg>` tag
        source (str, optional): name of the file being converted, used in error messages

    Raises:
        InvalidDimensionsException: on any other combination, or if the view box is empty

    Returns:
        tuple[ViewBox, float, float]: the view box, the width and the height in pixels
    """
    view_box = parse_view_box(attributes.get(SVG_VIEW_BOX))
    width = parse_size(attributes.get(SVG_WIDTH))
    height = parse_size(attributes.get(SVG_HEIGHT))

    match (view_box, width, height):
        case (None, Size(), Size()):
            # without a view box there is nothing to take a percentage of
            view_box = ViewBox(0.0, 0.0, width.value, height.value)
            pixel_width, pixel_height = width.value, height.value
        case (ViewBox(), None, None):
            pixel_width, pixel_height = view_box.width, view_box.height
        case (ViewBox(), Size(), Size()):
            pixel_width = width.to_pixels(view_box.width)
            pixel_height = height.to_pixels(view_box.height)
        case _:
            raise InvalidDimensionsException(source)

    if view_box.width <= 0 or view_box.height <= 0:
        raise InvalidDimensionsException(source, f"invalid <svg> viewBox: {view_box.width} x {view_box.height}")

    return view_box, pixel_width, pixel_height
