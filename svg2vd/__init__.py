from loguru import logger

from svg2vd.color import color_svg2vd
from svg2vd.converter import Conversion, convert, convert_string, convert_tree
from svg2vd.exceptions import (
    ConversionException,
    ImageConversionException,
    InvalidDimensionsException,
    MalformedMarkupException,
    NotExpectedRootException,
    NumericParseException,
    OutputWriteException,
    SourceUnreadableException,
    UnsupportedConstructException,
)
from svg2vd.names import to_res_name
from svg2vd.path import PathDataNode, parse_path_data
from svg2vd.webp import image_to_webp

# silent until an application calls svg2vd.log.setup_logging()
logger.disable("svg2vd")

__all__ = [
    "Conversion",
    "ConversionException",
    "ImageConversionException",
    "InvalidDimensionsException",
    "MalformedMarkupException",
    "NotExpectedRootException",
    "NumericParseException",
    "OutputWriteException",
    "PathDataNode",
    "SourceUnreadableException",
    "UnsupportedConstructException",
    "color_svg2vd",
    "convert",
    "convert_string",
    "convert_tree",
    "image_to_webp",
    "parse_path_data",
    "to_res_name",
]
