from decimal import Decimal

from loguru import logger

# largest finite IEEE 754 single precision value
FLOAT32_MAX = 3.4028234663852886e38

UNKNOWN_SOURCE = "<string>"


def local_name(tag: str) -> str:
    """Return a tag or attribute name without its "{namespace}" prefix."""
    return tag.split("}")[-1]


def is_float32_infinite(value: float) -> bool:
    return abs(value) > FLOAT32_MAX


def format_number(value: float) -> str:
    """Format a number in plain decimal notation, without exponent and without a
    trailing ".0" for integral values (e.g. 24.0 -> "24", 1e-07 -> "0.0000001").

    Args:
        value (float): finite number to format

    Returns:
        str: the formatted number
    """
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def report(diagnostics: list, diagnostic: Exception) -> None:
    """Record a recoverable problem on the diagnostics side channel and log it."""
    logger.warning("{}", diagnostic)
    diagnostics.append(diagnostic)
