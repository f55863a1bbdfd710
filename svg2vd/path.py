import re
from enum import Enum
from typing import NamedTuple

from svg2vd.common import UNKNOWN_SOURCE, is_float32_infinite
from svg2vd.exceptions import NumericParseException

NUMBER_PATTERN = re.compile(r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?")
SEPARATOR_PATTERN = re.compile(r"[\s,]+")


class PathDataNode(NamedTuple):
    """A single path command, e.g. ("L", (10.0, 10.0)).

    The command letter keeps its case; lowercase commands are relative.
    """

    command: str
    params: tuple[float, ...]


class PathCommandTypes(Enum):
    C = 6
    S = 4
    L = 2
    H = 1
    V = 1
    Z = 0
    M = 2
    Q = 4
    T = 2
    A = 7

    def get_length(command: str):
        if len(command) != 1:
            raise ValueError(f"Invalid command {command}; must be 1 letter")
        command_upper = command.upper()
        if command_upper not in PathCommandTypes.__members__:
            raise ValueError(f"Invalid command {command}; not in list {list(PathCommandTypes.__members__.keys())}")
        return PathCommandTypes.__members__[command_upper].value


def split_segments(path_data: str) -> list[str]:
    """Split path data into segments, each starting with a command letter.

    "e" and "E" never start a segment, since they belong to the scientific notation of numbers.
    Anything in front of the first letter is returned as its own segment.
    """
    segments = []
    start = 0
    for i, ch in enumerate(path_data):
        if i > 0 and ch.isascii() and ch.isalpha() and ch not in "eE":
            segments.append(path_data[start:i])
            start = i
    segments.append(path_data[start:])
    return segments


def parse_number(token: str) -> list[float]:
    """Parse one separator-free token, which may hold several numbers in compact
    notation (e.g. "10-5" or ".5.5").

    Raises:
        ValueError: if the token is not made only of numbers
    """
    if NUMBER_PATTERN.fullmatch(token):
        return [float(token)]
    numbers = []
    position = 0
    while position < len(token):
        match = NUMBER_PATTERN.match(token, position)
        if not match:
            raise ValueError(f"Invalid number {token}")
        numbers.append(float(match.group()))
        position = match.end()
    return numbers


def parse_params(command: str, text: str) -> tuple[float, ...]:
    values = []
    for token in SEPARATOR_PATTERN.split(text.strip()):
        if token:
            values.extend(parse_number(token))

    length = PathCommandTypes.get_length(command)
    if len(values) == 0 or len(values) % length != 0:
        raise ValueError(f'Wrong length of arguments ({len(values)}) for command "{command}"')

    if command in "aA":
        # negative radii are replaced by their absolute value
        for i in range(0, len(values), length):
            values[i] = abs(values[i])
            values[i + 1] = abs(values[i + 1])
    return tuple(values)


def parse_path_data(path_data: str, source: str = UNKNOWN_SOURCE) -> list[PathDataNode]:
    """Return the list of commands found in a path data string, i.e. the `d` attribute of
    `<path>` tags in SVGs.

    Args:
        path_data (str): path data string
        source (str, optional): name of the file being converted, used in error messages

    Raises:
        NumericParseException: if a command or one of its numbers can't be parsed, or a number
        is infinite

    Returns:
        list[PathDataNode]: commands in given order, always starting with a moveto; empty if the
        path data is empty
    """
    data = path_data.strip()
    if not data:
        return []

    nodes = []
    for i, segment in enumerate(split_segments(data)):
        command = segment[0]
        if i == 0:
            if not (command.isascii() and command.isalpha()):
                raise NumericParseException(source, path_data, "missing initial command")
            if command not in "Mm":
                nodes.append(PathDataNode("M", (0.0, 0.0)))

        if command in "Zz":
            nodes.append(PathDataNode(command, ()))
            continue

        try:
            params = parse_params(command, segment[1:])
        except ValueError as e:
            raise NumericParseException(source, path_data, str(e)) from e

        if any(is_float32_infinite(x) for x in params):
            raise NumericParseException(source, path_data, "infinite number")
        nodes.append(PathDataNode(command, params))

    return nodes
