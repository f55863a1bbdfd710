import argparse
import sys
from pathlib import Path

from svg2vd.converter import convert
from svg2vd.exceptions import ConversionException
from svg2vd.log import setup_logging
from svg2vd.webp import DEFAULT_QUALITY, image_to_webp

RASTER_SUFFIXES = {".png", ".jpg", ".jpeg"}


def get_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Convert SVG files to Android vector drawables and raster images to WEBP."
    )
    parser.add_argument("inputs", type=Path, nargs="+", help="SVG, PNG or JPEG files to convert")
    parser.add_argument(
        "-o", "--output-dir", type=Path, default=None, help="output directory (default is next to each input)"
    )
    parser.add_argument(
        "--strict", action="store_true", help="fail on unsupported SVG tags and attributes instead of skipping them"
    )
    parser.add_argument(
        "--webp-quality",
        type=float,
        default=DEFAULT_QUALITY,
        help=f"WEBP encoding quality from 0 to 100, 100 is lossless (default is {DEFAULT_QUALITY})",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="show debug messages")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="only show errors")

    args = parser.parse_args(argv)
    return args


def convert_file(path: Path, args) -> Path:
    suffix = path.suffix.lower()
    if suffix == ".svg":
        return convert(path, args.output_dir, strict=args.strict)
    if suffix in RASTER_SUFFIXES:
        return image_to_webp(path, args.webp_quality, args.output_dir)
    raise ConversionException(str(path), f'unsupported file type "{path.suffix}"')


def main(argv=None) -> int:
    args = get_args(argv)
    setup_logging("DEBUG" if args.verbose else "ERROR" if args.quiet else "WARNING")

    failures = 0
    for path in args.inputs:
        try:
            output_path = convert_file(path, args)
            print(f'\033[92mSuccessfully converted "{path}" to: "{output_path}"\033[0m')
        except ConversionException as e:
            failures += 1
            exception_name = type(e).__name__
            print(f"\033[91mError while converting file ({exception_name}): \033[0m{e}")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
