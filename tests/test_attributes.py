"""Tests for the presentation attribute mapping."""

from svg2vd.attributes import map_attributes
from svg2vd.exceptions import UnsupportedConstructException


def mapped(*attributes):
    diagnostics = []
    return map_attributes("path", attributes, diagnostics, source="icon.svg"), diagnostics


class TestMapAttributes:
    def test_only_presentation_attributes(self):
        attributes, diagnostics = mapped(
            ("d", "M0 0"), ("id", "shape"), ("transform", "scale(2)"), ("style", "fill:red"), ("fill", "red")
        )
        assert attributes == {"fill": "red"}
        assert diagnostics == []

    def test_sorted_by_name(self):
        attributes, _ = mapped(("stroke", "blue"), ("fill", "red"), ("fill-opacity", "0.5"), ("clip", "auto"))
        assert list(attributes) == ["clip", "fill", "fill-opacity", "stroke"]

    def test_fill_rule_values(self):
        assert mapped(("fill-rule", "evenodd"))[0] == {"fill-rule": "evenOdd"}
        assert mapped(("fill-rule", "nonzero"))[0] == {"fill-rule": "nonZero"}
        assert mapped(("fill-rule", "inherit"))[0] == {"fill-rule": "inherit"}

    def test_clip_rule_is_not_collected(self):
        assert mapped(("clip-rule", "evenodd"))[0] == {}

    def test_url_values_are_dropped(self):
        attributes, diagnostics = mapped(("fill", "url(#gradient)"), ("stroke", "red"))
        assert attributes == {"stroke": "red"}
        assert len(diagnostics) == 1
        assert isinstance(diagnostics[0], UnsupportedConstructException)
        assert diagnostics[0].tag == "path"
        assert diagnostics[0].attribute == "fill"
        assert "icon.svg" in str(diagnostics[0])

    def test_zero_stroke_width_removes_stroke(self):
        attributes, _ = mapped(("stroke", "red"), ("stroke-width", "0"))
        assert attributes == {"stroke-width": "0"}

    def test_zero_stroke_width_only_removes_earlier_stroke(self):
        attributes, _ = mapped(("stroke-width", "0"), ("stroke", "red"))
        assert attributes == {"stroke": "red", "stroke-width": "0"}

    def test_non_zero_stroke_width_keeps_stroke(self):
        attributes, _ = mapped(("stroke", "red"), ("stroke-width", "0.5"))
        assert attributes == {"stroke": "red", "stroke-width": "0.5"}

    def test_values_are_trimmed(self):
        attributes, diagnostics = mapped(("fill", " url(#gradient)"), ("fill-rule", " evenodd "), ("stroke", " red "))
        assert attributes == {"fill-rule": "evenOdd", "stroke": "red"}
        assert [d.attribute for d in diagnostics] == ["fill"]
