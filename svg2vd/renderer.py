from xml.sax.saxutils import escape

from svg2vd.color import TRANSPARENT, color_svg2vd
from svg2vd.common import format_number
from svg2vd.nodes import IrNode, PathNode, RootNode
from svg2vd.path import PathDataNode
from svg2vd.res import ANDROID_NAMESPACE, PRESENTATION_MAP, SVG_FILL, SVG_STROKE_WIDTH


def quote(value: str) -> str:
    return escape(value, {'"': "&quot;"})


def path_data_to_string(path_data: list[PathDataNode] | tuple[PathDataNode, ...]) -> str:
    """Write path commands back to the path data mini-language.

    Parameters are separated by "," before odd indices and " " before even ones, and the extra
    coordinate pairs of a moveto are written as explicit linetos of the same case, e.g.
    ("M", (0, 0, 10, 10)) -> "M0,0L10,10".
    """
    parts = []
    for command, params in path_data:
        parts.append(command)
        line_to = "l" if command == "m" else "L"
        for i, param in enumerate(params):
            if command in "Mm" and i >= 2 and i % 2 == 0:
                parts.append(line_to)
            elif i > 0:
                parts.append("," if i % 2 != 0 else " ")
            parts.append(format_number(param))
    return "".join(parts)


def vector_value(value: str) -> str:
    """Convert an SVG attribute value to the vector drawable one: colors are converted, and
    anything else loses its "px" unit."""
    value = value.strip()
    color = color_svg2vd(value)
    if color is not None:
        return color
    if value.endswith("px"):
        return value[:-2]
    return value


class VectorDrawableRenderer:
    """Class used to render the intermediate representation of an SVG to vector drawable XML."""

    INDENT = "    "
    ATTRIBUTE_INDENT = INDENT * 2
    DEFAULT_FILL_COLOR = "#ff000000"
    DEFAULT_STROKE_WIDTH = "1"
    EMPTY_FILL_VALUES = frozenset({None, "", "none", "transparent", TRANSPARENT})

    def reset(self):
        self.lines = []

    def __init__(self):
        self.reset()

    @property
    def text(self) -> str:
        return "\n".join(self.lines) + "\n"

    def render_root(self, node: RootNode):
        self.lines.extend(
            [
                '<?xml version="1.0" encoding="utf-8"?>',
                f'<vector xmlns:android="{ANDROID_NAMESPACE}"',
                f'{self.ATTRIBUTE_INDENT}android:width="{format_number(node.width)}dp"',
                f'{self.ATTRIBUTE_INDENT}android:height="{format_number(node.height)}dp"',
                f'{self.ATTRIBUTE_INDENT}android:viewportWidth="{format_number(node.view_box.width)}"',
                f'{self.ATTRIBUTE_INDENT}android:viewportHeight="{format_number(node.view_box.height)}">',
            ]
        )
        for child in node.children:
            self.render_node(child)
        self.lines.append("</vector>")

    def render_path(self, node: PathNode):
        """Render a `<path>` tag, or nothing at all if the path can't be visible."""
        if not node.path_data:
            return

        fill = node.attributes.get(SVG_FILL)
        fill = fill.strip() if fill is not None else None
        empty_fill = fill in self.EMPTY_FILL_VALUES
        # TODO: decide with the product owners whether stroke emptiness should look at the
        # stroke attribute; it follows the fill attribute for now.
        empty_stroke = fill in self.EMPTY_FILL_VALUES
        if empty_fill and empty_stroke:
            return

        attributes = []
        if empty_fill:
            attributes.append(("android:fillColor", self.DEFAULT_FILL_COLOR))
        if not empty_stroke and SVG_STROKE_WIDTH not in node.attributes:
            attributes.append(("android:strokeWidth", self.DEFAULT_STROKE_WIDTH))
        attributes.append(("android:pathData", path_data_to_string(node.path_data)))
        for name, value in node.attributes.items():
            if name in PRESENTATION_MAP:
                attributes.append((PRESENTATION_MAP[name], vector_value(value)))

        self.lines.append(f"{self.INDENT}<path")
        self.lines.extend(f'{self.ATTRIBUTE_INDENT}{name}="{quote(value)}"' for name, value in attributes)
        self.lines[-1] += " />"

    def render_node(self, node: IrNode):
        match node:
            case RootNode():
                self.render_root(node)
            case PathNode():
                self.render_path(node)

    def render(self, root: RootNode):
        """Render an intermediate representation tree to `self.text`.

        Args:
            root (RootNode): the document to render
        """
        self.reset()
        self.render_node(root)
        return self
