import xml.etree.ElementTree
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from loguru import logger

from svg2vd.attributes import map_attributes
from svg2vd.common import UNKNOWN_SOURCE, local_name, report
from svg2vd.dimensions import ViewBox, resolve_dimensions
from svg2vd.exceptions import UnsupportedConstructException
from svg2vd.path import PathDataNode, parse_path_data
from svg2vd.res import SVG_D, SVG_PATH, UNSUPPORTED_SVG_NODES


@dataclass(frozen=True)
class PathNode:
    """A `<path>` tag: its presentation attributes (sorted by name) and parsed path data."""

    attributes: Mapping[str, str] = field(default_factory=dict)
    path_data: tuple[PathDataNode, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "attributes", MappingProxyType(dict(sorted(self.attributes.items()))))
        object.__setattr__(self, "path_data", tuple(self.path_data))

    def __hash__(self):
        return hash((tuple(self.attributes.items()), self.path_data))


@dataclass(frozen=True)
class RootNode:
    """The `<svg>` tag: resolved dimensions and its supported children, in painting order."""

    view_box: ViewBox
    width: float
    height: float
    children: tuple["IrNode", ...] = ()


IrNode = RootNode | PathNode


def build_path(element: xml.etree.ElementTree.Element, diagnostics: list, source: str = UNKNOWN_SOURCE) -> PathNode:
    tag = local_name(element.tag)
    return PathNode(
        attributes=map_attributes(tag, element.attrib.items(), diagnostics, source),
        path_data=tuple(parse_path_data(element.get(SVG_D, ""), source)),
    )


def build_children(
    element: xml.etree.ElementTree.Element, diagnostics: list, source: str = UNKNOWN_SOURCE
) -> tuple[IrNode, ...]:
    """Convert the direct children of `element`, skipping the ones we can't convert.

    Args:
        element (xml.etree.ElementTree.Element): parent node
        diagnostics (list): receives an `UnsupportedConstructException` for every skipped child
        source (str, optional): name of the file being converted

    Returns:
        tuple[IrNode, ...]: converted children, in document order
    """
    children = []
    for child in element:
        tag = local_name(child.tag)
        if tag in UNSUPPORTED_SVG_NODES:
            report(diagnostics, UnsupportedConstructException(source, tag, f"unsupported tag <{tag}>"))
            continue
        if tag == SVG_PATH:
            children.append(build_path(child, diagnostics, source))
        else:
            report(diagnostics, UnsupportedConstructException(source, tag, f"tag <{tag}> is not implemented"))
    return tuple(children)


def build_root(element: xml.etree.ElementTree.Element, diagnostics: list, source: str = UNKNOWN_SOURCE) -> RootNode:
    """Build the intermediate representation of a whole document from its `<svg>` element.

    Raises:
        InvalidDimensionsException: if width, height and viewBox don't describe the document size
        NumericParseException: if the path data of one of the paths is invalid
    """
    view_box, width, height = resolve_dimensions(element.attrib, source)
    logger.debug("{}: view box {}, size {} x {}", source, view_box, width, height)
    return RootNode(view_box, width, height, build_children(element, diagnostics, source))
