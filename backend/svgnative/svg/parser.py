"""SVG parser — sanitized markup text → MarkupNode tree.

Accepts the subset of XML that icon and illustration exports use: nested
elements, quoted attributes, self-closing and paired tags, text and CDATA.
Anything it does not understand raises ParseError; it never hands back a
partial tree.
"""

from __future__ import annotations

import logging
import re

from svgnative.errors import ParseError
from svgnative.models.markup import MarkupNode, TextRun

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(
    r"<(?P<close>/)?"
    r"(?P<name>[A-Za-z_][\w:.-]*)"
    r"(?P<attrs>(?:\"[^\"]*\"|'[^']*'|[^'\">])*?)"
    r"(?P<self>/)?>",
    re.DOTALL,
)
_ATTR_RE = re.compile(
    r"""\s*(?P<name>[^\s=/>"']+)\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)')"""
)

_CDATA_OPEN = "<![CDATA["
_CDATA_CLOSE = "]]>"

ROOT_TAG = "svg"


def parse_markup(text: str) -> MarkupNode:
    """Parse sanitized markup and return the root <svg> node."""
    stack: list[MarkupNode] = []
    top_level: list[MarkupNode] = []
    stray_text = False

    def add_text(chunk: str) -> None:
        nonlocal stray_text
        stripped = chunk.strip()
        if not stripped:
            return
        if stack:
            stack[-1].children.append(TextRun(text=stripped))
        else:
            stray_text = True

    pos = 0
    length = len(text)
    while pos < length:
        lt = text.find("<", pos)
        if lt == -1:
            add_text(text[pos:])
            break
        if lt > pos:
            add_text(text[pos:lt])

        if text.startswith(_CDATA_OPEN, lt):
            end = text.find(_CDATA_CLOSE, lt)
            if end == -1:
                raise ParseError(f"unterminated CDATA section at offset {lt}")
            add_text(text[lt + len(_CDATA_OPEN) : end])
            pos = end + len(_CDATA_CLOSE)
            continue

        m = _TAG_RE.match(text, lt)
        if m is None:
            raise ParseError(_describe_bad_markup(text, lt))
        pos = m.end()

        name = m.group("name").lower()
        if m.group("close"):
            if m.group("attrs").strip() or m.group("self"):
                raise ParseError(f"malformed closing tag </{name}>")
            if not stack:
                raise ParseError(f"unexpected closing tag </{name}>")
            if stack[-1].tag != name:
                raise ParseError(
                    f"mismatched closing tag </{name}>, expected </{stack[-1].tag}>"
                )
            node = stack.pop()
            if not stack:
                top_level.append(node)
            continue

        node = MarkupNode(
            tag=name,
            attributes=_parse_attributes(name, m.group("attrs")),
            self_closing=bool(m.group("self")),
        )
        if stack:
            stack[-1].children.append(node)
        if node.self_closing:
            if not stack:
                top_level.append(node)
        else:
            stack.append(node)

    if stack:
        raise ParseError(f"unterminated element <{stack[-1].tag}>")

    roots = [n for n in top_level if n.tag == ROOT_TAG]
    if not roots:
        raise ParseError("no root <svg> element")
    if len(top_level) > 1:
        raise ParseError(f"expected a single root element, found {len(top_level)}")
    if stray_text:
        raise ParseError("unexpected text outside the root <svg> element")

    root = roots[0]
    logger.debug("Parsed markup: %d elements", sum(1 for _ in root.iter()))
    return root


def _parse_attributes(tag: str, raw: str) -> dict[str, str]:
    attrs: dict[str, str] = {}
    pos = 0
    while True:
        m = _ATTR_RE.match(raw, pos)
        if m is None:
            break
        name = m.group("name")
        if name in attrs:
            raise ParseError(f"duplicate attribute '{name}' on <{tag}>")
        value = m.group("dq")
        attrs[name] = value if value is not None else m.group("sq")
        pos = m.end()

    leftover = raw[pos:].strip()
    if leftover:
        raise ParseError(f"malformed attribute syntax on <{tag}>: {leftover[:40]!r}")
    return attrs


def _describe_bad_markup(text: str, offset: int) -> str:
    snippet = text[offset : offset + 20]
    if text.startswith(("<!", "<?"), offset):
        return f"unexpected markup construct {snippet!r} at offset {offset}"
    if ">" not in text[offset:]:
        return f"unterminated tag at offset {offset}"
    return f"invalid tag {snippet!r} at offset {offset}"
