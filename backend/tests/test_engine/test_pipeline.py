"""Tests for the pipeline orchestrator."""

import dataclasses

import pytest

from tests.conftest import (
    EVENODD_RING_SVG,
    NO_PATH_SVG,
    RING_WITH_DOT_SVG,
    SPLIT_RING_SVG,
    TWO_SQUARES_SVG,
    BrokenRasterizer,
    RecordingRasterizer,
)

from logo_outline.engine.config import OutlineConfig
from logo_outline.engine.context import OutlineClass, OutlineContext
from logo_outline.engine.pipeline import Pipeline, outline_svg
from logo_outline.engine.registry import Phase, StageRegistry, StageSpec
from logo_outline.errors import (
    MissingGeometryError,
    ParseError,
    SurfaceUnavailableError,
    UnclassifiedSegmentWarning,
)


def test_pipeline_runs_stages():
    reg = StageRegistry()
    results = []

    def s1(ctx: OutlineContext) -> None:
        results.append("s1")

    def s2(ctx: OutlineContext) -> None:
        results.append("s2")

    reg.register(StageSpec(id="S0.02", phase=Phase.PARSING, fn=s2, dependencies=["S0.01"]))
    reg.register(StageSpec(id="S0.01", phase=Phase.PARSING, fn=s1))

    pipeline = Pipeline(registry=reg, rasterizer=BrokenRasterizer())
    ctx = pipeline.run(OutlineContext())

    assert results == ["s1", "s2"]
    assert ctx.completed_stages == {"S0.01", "S0.02"}


def test_pipeline_records_and_raises_errors():
    reg = StageRegistry()
    ran = []

    def fail(ctx: OutlineContext) -> None:
        raise ValueError("test error")

    def after(ctx: OutlineContext) -> None:
        ran.append("after")

    reg.register(StageSpec(id="S0.01", phase=Phase.PARSING, fn=fail))
    reg.register(StageSpec(id="S0.02", phase=Phase.PARSING, fn=after, dependencies=["S0.01"]))

    ctx = OutlineContext()
    with pytest.raises(ValueError, match="test error"):
        Pipeline(registry=reg, rasterizer=BrokenRasterizer()).run(ctx)

    assert "test error" in ctx.errors["S0.01"]
    assert ran == []
    assert ctx.completed_stages == set()


def test_pipeline_injects_rasterizer():
    reg = StageRegistry()
    seen = []
    reg.register(StageSpec(id="S0.01", phase=Phase.PARSING, fn=lambda ctx: seen.append(ctx.rasterizer)))
    rasterizer = BrokenRasterizer()
    Pipeline(registry=reg, rasterizer=rasterizer).run(OutlineContext())
    assert seen == [rasterizer]


# ── End to end (CairoSVG) ──


def _strokes(ctx: OutlineContext) -> dict[int, str | None]:
    return {index: style.stroke for index, style in ctx.styles.items()}


def test_two_squares_are_both_red():
    ctx = outline_svg(TWO_SQUARES_SVG)
    assert ctx.num_subpaths == 2
    assert _strokes(ctx) == {0: "#FF0000", 1: "#FF0000"}
    assert ctx.outline_svg.count('stroke="#FF0000"') == 2
    assert 'viewBox="-10 -10 120 70"' in ctx.outline_svg


def test_ring_with_dot():
    ctx = outline_svg(RING_WITH_DOT_SVG)

    assert [sp.index for sp in ctx.subpaths] == [0, 1, 2]
    assert ctx.child_counts == {0: 2, 1: 1, 2: 0}
    assert ctx.styles[0].classification is OutlineClass.DOMINANT_MATCH
    assert ctx.styles[1].classification is OutlineClass.NON_MATCH
    assert ctx.styles[2].classification is OutlineClass.DOMINANT_MATCH
    assert _strokes(ctx) == {0: "#FF0000", 1: "#0000FF", 2: "#FF0000"}
    assert ctx.completed_stages == {"S0.01", "S0.02", "S1.01", "S2.01", "S3.01"}


def test_ring_split_over_two_paths():
    ctx = outline_svg(SPLIT_RING_SVG)
    # The inner contour winds the other way, so nonzero leaves it empty
    assert _strokes(ctx) == {0: "#FF0000", 1: "#0000FF"}


def test_evenodd_ring_hole_is_blue():
    ctx = outline_svg(EVENODD_RING_SVG)
    assert _strokes(ctx) == {0: "#FF0000", 1: "#0000FF"}


def test_outline_order_follows_nesting():
    svg = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M45 45 H55 V55 H45 Z M10 10 H90 V90 H10 Z" fill="#000"/>
</svg>'''
    ctx = outline_svg(svg)
    assert [sp.index for sp in ctx.subpaths] == [1, 0]
    first_path = ctx.outline_svg.splitlines()[1]
    assert 'd="M10 10L90 10L90 90L10 90Z"' in first_path
    # The dot paints over the square in the segmented pass
    assert _strokes(ctx) == {0: "#FF0000", 1: "#FF0000"}


def test_seed_does_not_change_classification():
    a = outline_svg(RING_WITH_DOT_SVG, config=OutlineConfig(synthetic_color_seed=1))
    b = outline_svg(RING_WITH_DOT_SVG, config=OutlineConfig(synthetic_color_seed=99))
    assert a.outline_svg == b.outline_svg
    assert [s.color for s in a.segments] != [s.color for s in b.segments]


def test_custom_strokes_from_config():
    cfg = dataclasses.replace(OutlineConfig(), match_stroke="#00AA00", non_match_stroke="#AA00AA")
    ctx = outline_svg(RING_WITH_DOT_SVG, config=cfg)
    assert _strokes(ctx) == {0: "#00AA00", 1: "#AA00AA", 2: "#00AA00"}



def _two_squares(d: str) -> str:
    return f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100"><path d="{d}" fill="#000"/></svg>'


def test_unknown_command_after_closepath():
    ctx = outline_svg(_two_squares("M10 10 H40 V40 H10 Z X M60 10 H90 V40 H60 Z"))
    assert ctx.num_subpaths == 2
    assert _strokes(ctx) == {0: "#FF0000", 1: "#FF0000"}
    assert any("Unsupported command 'X'" in d for d in ctx.diagnostics)


def test_unknown_command_mid_path_adds_no_geometry():
    ctx = outline_svg(_two_squares("M10 10 H40 X5 5 V40 H10 Z M60 10 H90 V40 H60 Z"))
    assert _strokes(ctx) == {0: "#FF0000", 1: "#FF0000"}
    # (5, 8) lies in the triangle a stray vertex at (0, 5) would add
    assert ctx.original_raster.pixels[16, 10, 3] == 0
    assert ctx.original_raster.pixels[50, 50, 3] == 255


def test_original_pass_draws_interpreted_geometry():
    rasterizer = RecordingRasterizer()
    with pytest.warns(UnclassifiedSegmentWarning):
        outline_svg(
            _two_squares("M10 10 H40 V40 H10 Z X M60 10 H90 A5 5 0 0 1 90 40 H60 Z"),
            rasterizer=rasterizer,
        )
    original_markup = rasterizer.markup[1]
    assert 'd="M10 10L40 10L40 40L10 40Z M60 10L90 10L90 40L60 40Z"' in original_markup
    assert 'fill="#000"' in original_markup


# ── Failures ──


def test_broken_rasterizer_aborts():
    ctx = OutlineContext(svg_raw=TWO_SQUARES_SVG)
    with pytest.raises(SurfaceUnavailableError):
        Pipeline(rasterizer=BrokenRasterizer()).run(ctx)
    assert "S2.01" in ctx.errors
    assert ctx.outline_svg == ""
    assert "S1.01" in ctx.completed_stages


def test_missing_geometry():
    ctx = OutlineContext(svg_raw=NO_PATH_SVG)
    with pytest.raises(MissingGeometryError):
        Pipeline(rasterizer=BrokenRasterizer()).run(ctx)
    assert "S0.01" in ctx.errors


def test_malformed_path_data():
    svg = '<svg viewBox="0 0 10 10"><path d="M0 0 L5"/></svg>'
    with pytest.raises(ParseError):
        outline_svg(svg, rasterizer=BrokenRasterizer())
