"""Tests for the pipeline orchestrator and the convert() entry point."""

import pytest

from tests.conftest import EXPORTED_SVG, FILLED_COMPLEX_SVG, SMILEY_SVG, THEMED_EXAMPLE_SVG

from svgnative import SENTINEL_PREFIX, convert, is_failure
from svgnative.engine.context import ConversionContext, Stage
from svgnative.engine.pipeline import Pipeline


def test_themed_end_to_end():
    out = convert(THEMED_EXAMPLE_SVG, "themed")
    assert not is_failure(out)
    assert "width: number" in out
    assert "fillColor: string" in out
    assert "({ width, fillColor })" in out
    assert "const height = " in out
    assert 'viewBox="0 0 10 10"' in out
    assert '<Path fill={fillColor} d="M0 0h10v10H0z" />' in out
    assert "red" not in out


def test_generic_end_to_end():
    out = convert(EXPORTED_SVG)
    assert out.startswith('import React from "react"\n')
    assert 'import Svg, { Defs, LinearGradient, Stop, G, Rect, Path, Use } from "react-native-svg"' in out
    assert '<Svg width="48px" height="32px" viewBox="0 0 48 32" {...props}>' in out
    assert '<Stop offset="1" stopColor="#45B7D1" />' in out
    assert '<Rect x="0" y="0" width="48" height="32" fill="url(#grad)" />' in out
    assert "xmlns" not in out
    assert "sodipodi" not in out.lower()
    assert "<style" not in out.lower()


def test_missing_root_fails_cleanly():
    out = convert('<g><path d="M0 0"/></g>', "generic")
    assert is_failure(out)
    assert out.startswith(SENTINEL_PREFIX)
    assert "[parse]" in out
    assert "no root <svg> element" in out
    assert "<G" not in out


@pytest.mark.parametrize("bad", [None, 42, b"<svg/>"])
def test_non_string_input(bad):
    out = convert(bad)
    assert is_failure(out)
    assert "[input]" in out


def test_blank_input():
    out = convert("  \n ")
    assert out == f"{SENTINEL_PREFIX} [input]: empty input"


def test_unknown_flavor():
    out = convert("<svg/>", "fancy")
    assert is_failure(out)
    assert "unknown flavor 'fancy'" in out


def test_comment_only_input():
    out = convert("<!-- nothing here -->")
    assert is_failure(out)
    assert "no root <svg> element" in out


def test_parse_error_never_renders_partial_tree():
    out = convert('<svg><g><path d="M0 0"/></svg>', "themed")
    assert is_failure(out)
    assert "import" not in out


def test_deterministic():
    for flavor in ("generic", "themed"):
        assert convert(SMILEY_SVG, flavor) == convert(SMILEY_SVG, flavor)


def test_themed_never_adds_fill():
    out = convert(SMILEY_SVG, "themed")
    assert "fillColor}" not in out.split("return (")[1]


def test_component_name_override():
    out = convert("<svg/>", "themed", component_name="HomeIcon")
    assert "const HomeIcon: React.FC<ThemeSVGProps>" in out
    assert out.endswith("export default HomeIcon")


@pytest.mark.parametrize("name", ["my icon", "1Icon", "Icon-Left", "Icon\n", "<Svg>"])
def test_invalid_component_name(name):
    out = convert("<svg/>", "generic", component_name=name)
    assert is_failure(out)
    assert out.startswith(f"{SENTINEL_PREFIX} [input]: invalid component name")


def test_component_name_allows_js_identifiers():
    out = convert("<svg/>", "generic", component_name="$icon_2")
    assert out.endswith("export default $icon_2")


def test_infinite_size_falls_back_to_viewbox():
    out = convert('<svg width="1e999" height="10" viewBox="0 0 40 20"/>', "themed")
    assert "const height = (width * 20) / 40" in out
    assert "inf" not in out


def test_fill_tags_override():
    out = convert(FILLED_COMPLEX_SVG, "themed", fill_tags=["Path", "Circle"])
    assert '<Circle cx="128" cy="130" r="30" fill={fillColor} />' in out
    assert "#FF6B6B" not in out


def test_sentinel_is_single_line():
    out = convert("<svg><path d='a'\n d='b'/></svg>")
    assert is_failure(out)
    assert "\n" not in out


def test_run_records_stages():
    ctx = Pipeline().run(SMILEY_SVG, "generic")
    assert ctx.ok
    assert ctx.flavor_id == "generic"
    assert list(ctx.timings_ms) == [s.value for s in Stage]
    assert ctx.tree.tag == "svg"
    assert ctx.normalized.tag == "Svg"
    assert ctx.result == ctx.output


def test_run_stops_at_first_failure():
    ctx = Pipeline().run("<g/>")
    assert not ctx.ok
    assert ctx.failed_stage is Stage.PARSE
    assert "normalize" not in ctx.timings_ms
    assert ctx.output == ""


def test_unexpected_error_becomes_sentinel():
    class BrokenPipeline(Pipeline):
        def _render(self, ctx: ConversionContext) -> None:
            raise RuntimeError("boom")

    ctx = BrokenPipeline().run("<svg/>")
    assert ctx.failed_stage is Stage.RENDER
    assert ctx.result == f"{SENTINEL_PREFIX} [render]: unexpected RuntimeError: boom"
