"""Serialize a templated tree into component source text."""

from __future__ import annotations

import html
import json

from svgnative.engine.config import RenderConfig
from svgnative.engine.flavors import HEIGHT_VAR, WIDTH_PROP, OutputFlavor
from svgnative.models.markup import MarkupNode, PropRef, SizingInfo, TextRun

ROOT_COMPONENT = "Svg"

_JSX_SPECIAL = set("{}<>")


def render(
    tree: MarkupNode,
    flavor: OutputFlavor,
    sizing: SizingInfo,
    config: RenderConfig | None = None,
) -> str:
    """Wrap the serialized tree in the flavor's imports, signature and export."""
    config = config or RenderConfig()
    indent = config.indent
    components = used_components(tree)
    name = _component_identifier(flavor.component_name, components)

    lines = _imports(components, flavor, config)
    lines.append("")

    if flavor.typed_props and flavor.prop_names:
        lines.append(f"interface {flavor.props_interface} {{")
        for prop in flavor.prop_names:
            lines.append(f"{indent}{prop}: {'number' if prop == WIDTH_PROP else 'string'}")
        lines.append("}")
        lines.append("")

    params = _params(flavor)
    if flavor.typed_props:
        annotation = f": React.FC<{flavor.props_interface}>" if flavor.prop_names else ": React.FC"
    else:
        annotation = ""

    if flavor.dynamic_size:
        aspect_w, aspect_h = sizing.aspect()
        lines.append(f"const {name}{annotation} = ({params}) => {{")
        lines.append(
            f"{indent}const {HEIGHT_VAR} = ({WIDTH_PROP} * {_number(aspect_h)}) / {_number(aspect_w)}"
        )
        lines.append("")
        lines.append(f"{indent}return (")
        _render_node(tree, 2, lines, indent, flavor.spread_props)
        lines.append(f"{indent})")
        lines.append("}")
    else:
        lines.append(f"const {name}{annotation} = ({params}) => (")
        _render_node(tree, 1, lines, indent, flavor.spread_props)
        lines.append(")")

    lines.append("")
    lines.append(f"export default {name}")
    return "\n".join(lines)


def used_components(tree: MarkupNode) -> list[str]:
    """Component names in first-use order, root first."""
    seen: dict[str, None] = {}
    for node in tree.iter():
        seen.setdefault(node.tag, None)
    return list(seen)


def _imports(components: list[str], flavor: OutputFlavor, config: RenderConfig) -> list[str]:
    named = [c for c in components if c != ROOT_COMPONENT]
    if named:
        clause = f"{ROOT_COMPONENT}, {{ {', '.join(named)} }}"
    else:
        clause = ROOT_COMPONENT
    return [
        f'import React from "{config.react_module}"',
        f'import {clause} from "{flavor.library}"',
    ]


def _params(flavor: OutputFlavor) -> str:
    if flavor.typed_props:
        names = flavor.prop_names + (["...props"] if flavor.spread_props else [])
        return "{ " + ", ".join(names) + " }" if names else ""
    return "props" if flavor.spread_props else ""


def _render_node(
    node: MarkupNode,
    depth: int,
    lines: list[str],
    indent: str,
    spread_props: bool = False,
) -> None:
    pad = indent * depth
    attrs = "".join(f" {_attribute(k, v)}" for k, v in node.attributes.items())
    if spread_props:
        attrs += " {...props}"

    if node.is_empty:
        lines.append(f"{pad}<{node.tag}{attrs} />")
        return

    lines.append(f"{pad}<{node.tag}{attrs}>")
    for child in node.children:
        if isinstance(child, TextRun):
            lines.append(f"{pad}{indent}{_text(child.text)}")
        else:
            _render_node(child, depth + 1, lines, indent)
    lines.append(f"{pad}</{node.tag}>")


def _attribute(name: str, value: str | PropRef) -> str:
    if isinstance(value, PropRef):
        return f"{name}={str(value)}"
    if '"' in value:
        return f"{name}={{{_js_string(value)}}}"
    return f'{name}="{value}"'


def _text(text: str) -> str:
    if _JSX_SPECIAL.intersection(text):
        return "{" + _js_string(text) + "}"
    return text


def _js_string(value: str) -> str:
    """JSON-quoted JS string literal with XML entities decoded."""
    return json.dumps(html.unescape(value), ensure_ascii=False)


def _number(value: float) -> str:
    return str(int(value)) if value.is_integer() else repr(value)


def _component_identifier(name: str, components: list[str]) -> str:
    """The generated component must not shadow an imported one (Circle → CircleIcon)."""
    while name in components or name in (ROOT_COMPONENT, "React"):
        name += "Icon"
    return name
