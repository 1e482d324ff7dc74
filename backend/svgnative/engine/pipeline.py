"""Pipeline orchestrator — runs the conversion stages in order and never raises."""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable, Iterable

from svgnative.engine.config import RenderConfig
from svgnative.engine.context import ConversionContext, Stage
from svgnative.engine.flavors import FlavorRegistry, OutputFlavor, get_registry
from svgnative.engine.renderer import render
from svgnative.engine.templater import apply_flavor
from svgnative.errors import ConversionError, UnsupportedInputError
from svgnative.svg.normalizer import normalize
from svgnative.svg.parser import parse_markup
from svgnative.svg.sanitizer import sanitize

logger = logging.getLogger(__name__)

# Names the generated `const` declaration can carry.
_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


class Pipeline:
    """Sanitize → parse → normalize → template → render."""

    def __init__(
        self,
        registry: FlavorRegistry | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or RenderConfig()

    def run(
        self,
        raw: object,
        flavor: str | OutputFlavor = "generic",
        *,
        component_name: str | None = None,
        fill_tags: Iterable[str] | None = None,
    ) -> ConversionContext:
        """Run every stage; the first failure stops the run and is recorded on the context."""
        start = time.perf_counter()
        ctx = ConversionContext(raw=raw)

        def _input(c: ConversionContext) -> None:
            c.flavor = self._resolve_flavor(flavor).with_overrides(component_name, fill_tags)
            c.flavor_id = c.flavor.id
            if not _IDENTIFIER_RE.fullmatch(c.flavor.component_name):
                raise UnsupportedInputError(f"invalid component name {c.flavor.component_name!r}")
            if not isinstance(c.raw, str):
                raise UnsupportedInputError(f"input must be a string, got {type(c.raw).__name__}")
            if not c.raw.strip():
                raise UnsupportedInputError("empty input")

        stages: list[tuple[Stage, Callable[[ConversionContext], None]]] = [
            (Stage.INPUT, _input),
            (Stage.SANITIZE, self._sanitize),
            (Stage.PARSE, self._parse),
            (Stage.NORMALIZE, self._normalize),
            (Stage.TEMPLATE, self._template),
            (Stage.RENDER, self._render),
        ]

        for stage, fn in stages:
            t0 = time.perf_counter()
            try:
                fn(ctx)
            except ConversionError as e:
                ctx.fail(stage, e.reason)
                logger.warning("  %s FAILED: %s", stage.value, e.reason)
                break
            except Exception as e:
                ctx.fail(stage, f"unexpected {type(e).__name__}: {e}")
                logger.exception("  %s crashed", stage.value)
                break
            finally:
                ctx.timings_ms[stage.value] = round((time.perf_counter() - t0) * 1000, 3)
            logger.debug("  %s completed in %.1fms", stage.value, ctx.timings_ms[stage.value])

        total = (time.perf_counter() - start) * 1000
        if ctx.ok:
            logger.info(
                "Converted %d chars with flavor %s in %.1fms",
                len(ctx.raw),
                ctx.flavor_id,
                total,
            )
        return ctx

    def _resolve_flavor(self, flavor: str | OutputFlavor) -> OutputFlavor:
        if isinstance(flavor, OutputFlavor):
            return flavor
        if flavor not in self.registry:
            known = ", ".join(f.id for f in self.registry.all())
            raise UnsupportedInputError(f"unknown flavor {flavor!r} (expected one of: {known})")
        return self.registry.get(flavor)

    def _sanitize(self, ctx: ConversionContext) -> None:
        ctx.sanitized = sanitize(ctx.raw)

    def _parse(self, ctx: ConversionContext) -> None:
        ctx.tree = parse_markup(ctx.sanitized)

    def _normalize(self, ctx: ConversionContext) -> None:
        ctx.normalized, ctx.sizing = normalize(ctx.tree)

    def _template(self, ctx: ConversionContext) -> None:
        ctx.templated = apply_flavor(ctx.normalized, ctx.flavor, ctx.sizing)

    def _render(self, ctx: ConversionContext) -> None:
        ctx.output = render(ctx.templated, ctx.flavor, ctx.sizing, self.config)


def create_pipeline(config: RenderConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(config=config)


def convert(
    raw_markup: object,
    flavor: str | OutputFlavor = "generic",
    *,
    component_name: str | None = None,
    fill_tags: Iterable[str] | None = None,
) -> str:
    """Convert SVG markup to component source; failures come back as sentinel strings."""
    return create_pipeline().run(
        raw_markup,
        flavor,
        component_name=component_name,
        fill_tags=fill_tags,
    ).result
