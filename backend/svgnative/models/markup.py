"""Parsed markup tree model."""

from __future__ import annotations

import math
import re
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field

# Fallback canvas edge when the root carries no width/height.
DEFAULT_DIMENSION = "100"

_NUMBER_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*(?:px|pt)?\s*$")


class TextRun(BaseModel):
    """Character data between tags."""

    text: str


class PropRef(BaseModel):
    """An attribute value that refers to a component prop or expression."""

    model_config = ConfigDict(frozen=True)

    expr: str

    def __str__(self) -> str:
        return "{" + self.expr + "}"


class MarkupNode(BaseModel):
    tag: str
    attributes: dict[str, str | PropRef] = Field(default_factory=dict)
    children: list[MarkupNode | TextRun] = Field(default_factory=list)
    self_closing: bool = False

    @property
    def elements(self) -> list[MarkupNode]:
        return [c for c in self.children if isinstance(c, MarkupNode)]

    @property
    def is_empty(self) -> bool:
        """True when nothing would render between an open and a close tag."""
        return not self.children

    def iter(self) -> Iterator[MarkupNode]:
        """Depth-first walk over this node and every descendant element."""
        yield self
        for child in self.elements:
            yield from child.iter()


class SizingInfo(BaseModel):
    """Canvas sizing pulled off the root <svg>."""

    model_config = ConfigDict(frozen=True)

    width: str | None = None
    height: str | None = None
    view_box: str

    @property
    def resolved_width(self) -> str:
        return self.width if self.width is not None else DEFAULT_DIMENSION

    @property
    def resolved_height(self) -> str:
        return self.height if self.height is not None else DEFAULT_DIMENSION

    @classmethod
    def resolve(
        cls,
        width: str | None,
        height: str | None,
        view_box: str | None,
    ) -> SizingInfo:
        """Explicit viewBox wins; otherwise synthesize one from width/height."""
        if view_box is None or not view_box.strip():
            w = width if width is not None else DEFAULT_DIMENSION
            h = height if height is not None else DEFAULT_DIMENSION
            view_box = f"0 0 {w} {h}"
        return cls(width=width, height=height, view_box=view_box)

    def aspect(self) -> tuple[float, float]:
        """Numeric (width, height) for deriving a height from a width.

        Numeric width/height attributes first (px/pt suffixes tolerated), then
        the viewBox extent, then the 100x100 default.
        """
        w = _to_number(self.width)
        h = _to_number(self.height)
        if w and h:
            return w, h

        parts = self.view_box.replace(",", " ").split()
        if len(parts) == 4:
            vb_w = _to_number(parts[2])
            vb_h = _to_number(parts[3])
            if vb_w and vb_h:
                return vb_w, vb_h

        return float(DEFAULT_DIMENSION), float(DEFAULT_DIMENSION)


def _to_number(value: str | None) -> float | None:
    if value is None:
        return None
    m = _NUMBER_RE.match(value)
    if not m:
        return None
    number = float(m.group(1))
    return number if math.isfinite(number) and number > 0 else None


MarkupNode.model_rebuild()
