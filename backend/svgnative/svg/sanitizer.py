"""Markup sanitizer — drops constructs that have no react-native-svg counterpart.

Removes XML declarations / processing instructions, DOCTYPE (with any internal
subset), comments, and whole <style> / <script> blocks. Ordinary tags are
matched whole, quoted attribute values included, so text inside an attribute
value that happens to look like a comment or a <style> tag is never touched.
"""

from __future__ import annotations

import logging
import re

from svgnative.errors import SanitizeError

logger = logging.getLogger(__name__)

# A quoted attribute value or any character that cannot end a tag.
_TAG_BODY = r"""(?:"[^"]*"|'[^']*'|[^'">])*"""

_TOKEN_RE = re.compile(
    r"(?P<pi><\?.*?\?>)"
    r"|(?P<doctype><!DOCTYPE(?:\[[^\]]*\]|[^>\[])*>)"
    r"|(?P<comment><!--.*?-->)"
    r"|(?P<cdata><!\[CDATA\[.*?\]\]>)"
    rf"|(?P<block><(?P<block_tag>style|script)\b{_TAG_BODY}?(?:/>|>.*?</(?P=block_tag)\s*>))"
    rf"|(?P<tag></?[A-Za-z_][^\s/>'\"]*{_TAG_BODY}>)",
    re.DOTALL | re.IGNORECASE,
)

_DROPPED = ("pi", "doctype", "comment", "block")


def sanitize(raw: str) -> str:
    """Strip declarations, doctype, comments, style and script blocks."""
    if not isinstance(raw, str):
        raise SanitizeError(f"expected markup text, got {type(raw).__name__}")

    removed: dict[str, int] = {}

    def _replace(match: re.Match[str]) -> str:
        for name in _DROPPED:
            if match.group(name) is not None:
                removed[name] = removed.get(name, 0) + 1
                return ""
        return match.group(0)

    cleaned = _TOKEN_RE.sub(_replace, raw)
    if removed:
        logger.debug("Sanitized markup: removed %s", removed)
    return cleaned
