import xml.etree.ElementTree
from pathlib import Path
from typing import NamedTuple

from loguru import logger

from svg2vd.common import UNKNOWN_SOURCE, local_name
from svg2vd.exceptions import (
    MalformedMarkupException,
    NotExpectedRootException,
    OutputWriteException,
    SourceUnreadableException,
    UnsupportedConstructException,
)
from svg2vd.names import to_res_name
from svg2vd.nodes import build_root
from svg2vd.renderer import VectorDrawableRenderer
from svg2vd.res import SVG_ROOT


class Conversion(NamedTuple):
    """Result of converting one document: the vector drawable XML and the constructs that
    were skipped on the way."""

    text: str
    diagnostics: list[UnsupportedConstructException]


def parse_xml(text: str, source: str = UNKNOWN_SOURCE) -> xml.etree.ElementTree.Element:
    """Parse SVG markup and return its root element.

    Raises:
        MalformedMarkupException: if the markup isn't well formed
        NotExpectedRootException: if the root tag isn't `<svg>`
    """
    try:
        root = xml.etree.ElementTree.fromstring(text)
    except xml.etree.ElementTree.ParseError as e:
        raise MalformedMarkupException(source, f"can't parse SVG: {e}") from e
    if local_name(root.tag) != SVG_ROOT:
        raise NotExpectedRootException(source, local_name(root.tag))
    return root


def load_document(source_path: str | Path) -> xml.etree.ElementTree.Element:
    """Read an SVG file and return its root element.

    Raises:
        SourceUnreadableException: if the file can't be read
        MalformedMarkupException: if the markup isn't well formed
        NotExpectedRootException: if the root tag isn't `<svg>`
    """
    source = str(source_path)
    try:
        text = Path(source_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnreadableException(source, f"can't read file: {e}") from e
    return parse_xml(text, source)


def convert_tree(root: xml.etree.ElementTree.Element, source: str = UNKNOWN_SOURCE, strict: bool = False) -> Conversion:
    """Convert a parsed `<svg>` element to vector drawable XML.

    Args:
        root (xml.etree.ElementTree.Element): root `<svg>` element
        source (str, optional): name of the document, used in messages
        strict (bool, optional): raise the first unsupported construct instead of skipping it

    Raises:
        NotExpectedRootException: if the root tag isn't `<svg>`
        InvalidDimensionsException: if the document size can't be resolved
        NumericParseException: if some path data is invalid
        UnsupportedConstructException: in strict mode, on the first unsupported construct

    Returns:
        Conversion: the XML text and the diagnostics
    """
    if local_name(root.tag) != SVG_ROOT:
        raise NotExpectedRootException(source, local_name(root.tag))
    diagnostics = []
    ir = build_root(root, diagnostics, source)
    if strict and diagnostics:
        raise diagnostics[0]
    return Conversion(VectorDrawableRenderer().render(ir).text, diagnostics)


def convert_string(text: str, source: str = UNKNOWN_SOURCE, strict: bool = False) -> Conversion:
    """Convert SVG markup to vector drawable XML; see `convert_tree`."""
    return convert_tree(parse_xml(text, source), source, strict)


def convert(source_path: str | Path, output_dir: str | Path | None = None, strict: bool = False) -> Path:
    """Convert an SVG file to a vector drawable XML file.

    The output is named after the Android resource name of the source file and written next to
    it, or into `output_dir` when given.

    Args:
        source_path (str | Path): path to the SVG file
        output_dir (str | Path | None, optional): directory for the XML file
        strict (bool, optional): fail on unsupported constructs instead of skipping them

    Raises:
        ConversionException: a subclass describing why the file couldn't be converted

    Returns:
        Path: path of the written XML file
    """
    source_path = Path(source_path)
    source = str(source_path)
    conversion = convert_tree(load_document(source_path), source, strict)

    output_path = Path(output_dir or source_path.parent) / f"{to_res_name(source_path.stem)}.xml"
    if output_path.exists():
        logger.warning("{}: overwriting existing {}", source, output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(conversion.text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteException(source, f"can't write {output_path}: {e}") from e

    logger.debug("{}: written {} ({} skipped constructs)", source, output_path, len(conversion.diagnostics))
    return output_path
