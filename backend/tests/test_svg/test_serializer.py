"""Tests for outline SVG serialization."""

from logo_outline.engine.context import BoundingBox, OutlineClass, Style, SubPath
from logo_outline.engine.interpreter import interpret
from logo_outline.svg.primitives import ClosePath, CurveTo, LineTo, MoveTo, QuadCurveTo
from logo_outline.svg.serializer import format_number, serialize_outline, subpath_to_d


def test_format_number():
    assert format_number(10.0) == "10"
    assert format_number(-0.0) == "0"
    assert format_number(1.5) == "1.50"
    assert format_number(1.23456) == "1.23"
    assert format_number(2.999) == "3"


def test_subpath_to_d():
    sp = SubPath(
        index=0,
        commands=[
            MoveTo(0, 0),
            LineTo(10.5, 0),
            CurveTo(1, 2, 3, 4, 5, 6),
            QuadCurveTo(1.234, 2, 3, 4),
            ClosePath(),
        ],
        closed=True,
    )
    assert subpath_to_d(sp) == "M0 0L10.50 0C1 2 3 4 5 6Q1.23 2 3 4Z"


def test_serialize_outline():
    result = interpret("M0,0 L10,0 L10,10 L0,10 Z M2 2 L4 2 L4 4 Z")
    styles = {
        0: Style(classification=OutlineClass.DOMINANT_MATCH, stroke="#FF0000"),
        1: Style(classification=OutlineClass.NON_MATCH, stroke="#0000FF"),
    }
    svg = serialize_outline(result.subpaths, styles, result.bbox)
    assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg" viewBox="-20 -20 50 50">')
    assert '<path d="M0 0L10 0L10 10L0 10Z" fill="none" stroke="#FF0000" />' in svg
    assert '<path d="M2 2L4 2L4 4Z" fill="none" stroke="#0000FF" />' in svg
    assert svg.endswith("</svg>")


def test_unclassified_path_has_no_stroke():
    result = interpret("M0 0 H10 V10 Z")
    styles = {0: Style(classification=OutlineClass.UNCLASSIFIED)}
    svg = serialize_outline(result.subpaths, styles, result.bbox)
    assert 'fill="none"' in svg
    assert "stroke" not in svg


def test_empty_outline():
    svg = serialize_outline([], {}, BoundingBox.empty())
    assert 'viewBox="0 0 0 0"' in svg
    assert "<path" not in svg
