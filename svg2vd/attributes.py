from typing import Iterable

from svg2vd.common import UNKNOWN_SOURCE, report
from svg2vd.exceptions import UnsupportedConstructException
from svg2vd.res import (
    FILL_RULE_VALUES,
    PRESENTATION_MAP,
    SVG_CLIP_RULE,
    SVG_FILL_RULE,
    SVG_STROKE,
    SVG_STROKE_WIDTH,
)


def map_attributes(
    tag: str,
    attributes: Iterable[tuple[str, str]],
    diagnostics: list,
    source: str = UNKNOWN_SOURCE,
) -> dict[str, str]:
    """Collect the presentation attributes of a node.

    Fill and clip rules are renamed to their vector drawable spelling, `url(...)` references
    (gradients, patterns) are dropped, and a zero stroke width removes the stroke color recorded
    so far. Every other attribute (transform, id, class, style...) is ignored.

    Args:
        tag (str): name of the node, used in diagnostics
        attributes (Iterable[tuple[str, str]]): raw (name, value) pairs in document order
        diagnostics (list): receives an `UnsupportedConstructException` for every dropped value
        source (str, optional): name of the file being converted

    Returns:
        dict[str, str]: SVG attribute name -> value, sorted by name
    """
    output = {}
    for name, value in attributes:
        if name not in PRESENTATION_MAP:
            continue
        value = value.strip()
        if name in (SVG_FILL_RULE, SVG_CLIP_RULE):
            value = FILL_RULE_VALUES.get(value, value)
        if value.startswith("url("):
            report(
                diagnostics,
                UnsupportedConstructException(
                    source, tag, f'unsupported URL value {value} for attribute "{name}" in <{tag}>', attribute=name
                ),
            )
            continue
        if name == SVG_STROKE_WIDTH and value == "0":
            output.pop(SVG_STROKE, None)
        output[name] = value
    return dict(sorted(output.items()))
