"""Prop injection — turns literal values into component prop references."""

from __future__ import annotations

from svgnative.engine.flavors import HEIGHT_VAR, WIDTH_PROP, OutputFlavor
from svgnative.models.markup import MarkupNode, PropRef, SizingInfo


def apply_flavor(tree: MarkupNode, flavor: OutputFlavor, sizing: SizingInfo) -> MarkupNode:
    """Return a copy of ``tree`` with fills templated and root sizing applied.

    Only nodes that already carry ``fill`` are rewritten; the value changes,
    its position among the attributes does not.
    """
    templated = _inject_fill(tree, flavor)

    if flavor.dynamic_size:
        sizing_attrs: dict[str, str | PropRef] = {
            "width": PropRef(expr=WIDTH_PROP),
            "height": PropRef(expr=HEIGHT_VAR),
            "viewBox": sizing.view_box,
        }
    else:
        sizing_attrs = {
            "width": sizing.resolved_width,
            "height": sizing.resolved_height,
            "viewBox": sizing.view_box,
        }

    return templated.model_copy(update={"attributes": {**sizing_attrs, **templated.attributes}})


def _inject_fill(node: MarkupNode, flavor: OutputFlavor) -> MarkupNode:
    attributes = node.attributes
    if flavor.fill_prop and node.tag in flavor.fill_tags and "fill" in attributes:
        ref = PropRef(expr=flavor.fill_prop)
        attributes = {k: (ref if k == "fill" else v) for k, v in attributes.items()}

    children = [
        _inject_fill(child, flavor) if isinstance(child, MarkupNode) else child
        for child in node.children
    ]
    return node.model_copy(update={"attributes": attributes, "children": children})
