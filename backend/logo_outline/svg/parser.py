"""SVG parser — reads the viewport, dominant fill and path data of a logo.

Converts raw SVG string → SvgDocument.
"""

from __future__ import annotations

import logging
import re

from logo_outline.engine.config import OutlineConfig
from logo_outline.errors import MissingGeometryError
from logo_outline.models.svg_document import SvgDocument

logger = logging.getLogger(__name__)

_SVG_TAG_RE = re.compile(r"<svg\b[^>]*>", re.IGNORECASE)
_PATH_TAG_RE = re.compile(r"<path\b[^>]*>", re.IGNORECASE)
_ATTR_RE = re.compile(r"""([\w:-]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")
_LENGTH_RE = re.compile(r"^\s*([-+]?(?:\d*\.\d+|\d+\.?)(?:[eE][-+]?\d+)?)\s*(px|pt)?\s*$")
_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")

# SVG initial value of the fill property
_DEFAULT_FILL = "#000000"


def parse_svg(svg_text: str, config: OutlineConfig | None = None) -> SvgDocument:
    """Parse raw SVG string into an SvgDocument.

    Raises:
        MissingGeometryError: no <svg> root, or no <path> carrying path data.
    """
    config = config or OutlineConfig()

    svg_match = _SVG_TAG_RE.search(svg_text)
    if not svg_match:
        raise MissingGeometryError("No <svg> element found")
    root_attrs = _extract_attrs(svg_match.group(0))

    doc = SvgDocument(raw_svg=svg_text, width=config.default_width, height=config.default_height)

    viewbox = _parse_viewbox(root_attrs.get("viewBox", ""))
    if viewbox is not None:
        doc.viewbox = viewbox
        doc.width, doc.height = viewbox[2], viewbox[3]
    else:
        width = _parse_length(root_attrs.get("width", ""))
        height = _parse_length(root_attrs.get("height", ""))
        if width and height:
            doc.width, doc.height = width, height

    first = True
    for match in _PATH_TAG_RE.finditer(svg_text, svg_match.end()):
        attrs = _extract_attrs(match.group(0))
        if first:
            doc.fill = attrs.get("fill", _DEFAULT_FILL)
            doc.fill_rule = attrs.get("fill-rule", "nonzero")
            first = False
        d = attrs.get("d", "")
        if d.strip():
            doc.path_data.append(d)

    if not doc.path_data:
        raise MissingGeometryError("No <path> elements with path data found")

    logger.info(
        "Parsed SVG: %d path elements, viewport %.0f×%.0f, fill %s",
        len(doc.path_data),
        doc.width,
        doc.height,
        doc.fill,
    )
    return doc


def _extract_attrs(tag_text: str) -> dict[str, str]:
    """Extract attributes from an SVG tag string."""
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(tag_text):
        value = m.group(2) if m.group(2) is not None else m.group(3)
        attrs[m.group(1)] = value
    return attrs


def _parse_viewbox(value: str) -> tuple[float, float, float, float] | None:
    parts = [p for p in _VIEWBOX_SPLIT_RE.split(value.strip()) if p]
    if len(parts) != 4:
        return None
    try:
        min_x, min_y, width, height = (float(p) for p in parts)
    except ValueError:
        return None
    if width <= 0 or height <= 0:
        return None
    return (min_x, min_y, width, height)


def _parse_length(value: str) -> float | None:
    """Numeric width/height in user units; percentages and em are ignored."""
    m = _LENGTH_RE.match(value)
    if not m:
        return None
    length = float(m.group(1))
    return length if length > 0 else None
