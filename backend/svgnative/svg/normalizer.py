"""Rewrite a parsed SVG tree into react-native-svg vocabulary.

Tag names map to component names, attribute names to camelCase props, and the
root's width/height/viewBox move out of the tree into SizingInfo.
"""

from __future__ import annotations

import logging

from svgnative.errors import NormalizeError
from svgnative.models.markup import MarkupNode, SizingInfo, TextRun

logger = logging.getLogger(__name__)

TAG_COMPONENTS: dict[str, str] = {
    "svg": "Svg",
    "path": "Path",
    "circle": "Circle",
    "rect": "Rect",
    "ellipse": "Ellipse",
    "g": "G",
    "defs": "Defs",
    "lineargradient": "LinearGradient",
    "radialgradient": "RadialGradient",
    "stop": "Stop",
    "polygon": "Polygon",
    "polyline": "Polyline",
    "line": "Line",
    "text": "Text",
    "tspan": "TSpan",
    "textpath": "TextPath",
    "use": "Use",
    "symbol": "Symbol",
    "clippath": "ClipPath",
    "mask": "Mask",
    "pattern": "Pattern",
    "image": "Image",
    "marker": "Marker",
    "foreignobject": "ForeignObject",
}

# Prefixes react-native-svg understands as plain camelCase props.
_KEPT_PREFIXES = {"xlink", "xml"}

_SIZING_ATTRS = ("width", "height", "viewBox")


def component_name(tag: str) -> str:
    """Map a lowercase SVG tag to its component name."""
    known = TAG_COMPONENTS.get(tag)
    if known is not None:
        return known
    return tag[:1].upper() + tag[1:]


def camel_case(name: str) -> str:
    """stroke-width → strokeWidth, stroke-dash-offset → strokeDashOffset."""
    while "-" in name:
        head, _, tail = name.partition("-")
        name = head + tail[:1].upper() + tail[1:]
    return name


def prop_name(attr: str) -> str | None:
    """Target prop name for an SVG attribute, or None when it is dropped."""
    if attr == "xmlns" or attr.startswith("xmlns:"):
        return None
    if ":" in attr:
        prefix, _, local = attr.partition(":")
        if prefix not in _KEPT_PREFIXES or not local:
            return None
        attr = prefix + local[:1].upper() + local[1:]
    if attr == "class":
        return "className"
    return camel_case(attr)


def normalize(tree: MarkupNode) -> tuple[MarkupNode, SizingInfo]:
    """Return a rewritten copy of ``tree`` plus the root's sizing."""
    if tree.tag != "svg":
        raise NormalizeError(f"expected an <svg> root, got <{tree.tag}>")

    original = tree.attributes
    sizing = SizingInfo.resolve(
        _as_str(original.get("width")),
        _as_str(original.get("height")),
        _as_str(original.get("viewBox")),
    )

    root_attrs = {k: v for k, v in original.items() if k not in _SIZING_ATTRS}
    root = _rewrite(tree.model_copy(update={"attributes": root_attrs}))

    logger.debug("Normalized tree: viewBox=%r width=%r height=%r", sizing.view_box, sizing.width, sizing.height)
    return root, sizing


def _rewrite(node: MarkupNode) -> MarkupNode:
    attributes: dict[str, str] = {}
    for name, value in node.attributes.items():
        target = prop_name(name)
        if target is None:
            continue
        if target in attributes:
            logger.debug("Keeping first %s on <%s>, dropping %s", target, node.tag, name)
            continue
        attributes[target] = value

    children: list[MarkupNode | TextRun] = []
    for child in node.children:
        if isinstance(child, TextRun):
            children.append(child)
        elif ":" in child.tag:
            logger.debug("Dropping namespaced element <%s>", child.tag)
        else:
            children.append(_rewrite(child))

    return MarkupNode(
        tag=component_name(node.tag),
        attributes=attributes,
        children=children,
        self_closing=node.self_closing,
    )


def _as_str(value) -> str | None:
    return None if value is None else str(value)
