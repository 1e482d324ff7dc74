"""Tests for fill prop injection and root sizing."""

from tests.conftest import CIRCLE_SVG, FILLED_COMPLEX_SVG

from svgnative.engine.flavors import GENERIC, THEMED
from svgnative.engine.templater import apply_flavor
from svgnative.models.markup import MarkupNode, PropRef
from svgnative.svg.normalizer import normalize
from svgnative.svg.parser import parse_markup


def _prepared(text: str):
    return normalize(parse_markup(text))


def test_themed_replaces_existing_fill_only():
    tree, sizing = _prepared(FILLED_COMPLEX_SVG)
    out = apply_flavor(tree, THEMED, sizing)

    first, second, circle = out.elements
    assert first.attributes["fill"] == PropRef(expr="fillColor")
    assert "fill" not in second.attributes
    assert circle.attributes["fill"] == "#FF6B6B"


def test_themed_keeps_attribute_order_and_other_values():
    tree, sizing = _prepared('<svg><path d="M0 0" fill="red" stroke="blue"/></svg>')
    before = tree.elements[0].attributes
    after = apply_flavor(tree, THEMED, sizing).elements[0].attributes

    assert list(after) == list(before) == ["d", "fill", "stroke"]
    assert {k: v for k, v in after.items() if k != "fill"} == {"d": "M0 0", "stroke": "blue"}


def test_fill_tags_are_configurable():
    tree, sizing = _prepared(FILLED_COMPLEX_SVG)
    flavor = THEMED.with_overrides(fill_tags={"Path", "Circle"})
    out = apply_flavor(tree, flavor, sizing)
    assert out.elements[2].attributes["fill"] == PropRef(expr="fillColor")


def test_nested_paths_are_templated():
    tree, sizing = _prepared('<svg><g><g><path fill="#000" d="M1 1"/></g></g></svg>')
    out = apply_flavor(tree, THEMED, sizing)
    assert out.elements[0].elements[0].elements[0].attributes["fill"] == PropRef(expr="fillColor")


def test_generic_leaves_fills_literal():
    tree, sizing = _prepared(FILLED_COMPLEX_SVG)
    out = apply_flavor(tree, GENERIC, sizing)
    assert out.elements[0].attributes["fill"] == "#4ECDC4"


def test_generic_static_sizing_first():
    tree, sizing = _prepared(CIRCLE_SVG)
    out = apply_flavor(tree, GENERIC, sizing)
    assert list(out.attributes)[:3] == ["width", "height", "viewBox"]
    assert out.attributes["width"] == "24"
    assert out.attributes["height"] == "24"
    assert out.attributes["viewBox"] == "0 0 24 24"
    assert out.attributes["strokeWidth"] == "2"


def test_generic_default_sizing():
    tree, sizing = _prepared("<svg/>")
    out = apply_flavor(tree, GENERIC, sizing)
    assert out.attributes == {"width": "100", "height": "100", "viewBox": "0 0 100 100"}


def test_themed_dynamic_sizing():
    tree, sizing = _prepared('<svg width="24" height="12" fill="none"/>')
    out = apply_flavor(tree, THEMED, sizing)
    assert out.attributes == {
        "width": PropRef(expr="width"),
        "height": PropRef(expr="height"),
        "viewBox": "0 0 24 12",
        "fill": "none",
    }


def test_input_tree_not_modified():
    tree, sizing = _prepared('<svg><path fill="red"/></svg>')
    apply_flavor(tree, THEMED, sizing)
    assert tree.elements[0].attributes == {"fill": "red"}
    assert isinstance(tree, MarkupNode)
    assert tree.attributes == {}
