"""Write SVG output: path data from commands, and the stroked outline document."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from xml.sax.saxutils import quoteattr

from logo_outline.engine.context import BoundingBox, Style, SubPath
from logo_outline.svg.primitives import ClosePath, CurveTo, LineTo, MoveTo, PathCommand, QuadCurveTo

SVG_NS = "http://www.w3.org/2000/svg"


def format_number(value: float, precision: int = 2) -> str:
    """Integral values without decimals, everything else rounded to ``precision``."""
    rounded = round(value, precision)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.{precision}f}"


def command_to_d(cmd: PathCommand, precision: int = 2) -> str:
    def fmt(*values: float) -> str:
        return " ".join(format_number(v, precision) for v in values)

    if isinstance(cmd, MoveTo):
        return "M" + fmt(cmd.x, cmd.y)
    if isinstance(cmd, LineTo):
        return "L" + fmt(cmd.x, cmd.y)
    if isinstance(cmd, CurveTo):
        return "C" + fmt(cmd.x1, cmd.y1, cmd.x2, cmd.y2, cmd.x, cmd.y)
    if isinstance(cmd, QuadCurveTo):
        return "Q" + fmt(cmd.x1, cmd.y1, cmd.x, cmd.y)
    if isinstance(cmd, ClosePath):
        return "Z"
    raise TypeError(f"Not a path command: {cmd!r}")


def subpath_to_d(subpath: SubPath, precision: int = 2) -> str:
    """Regenerate the ``d`` attribute of one sub-path."""
    return "".join(command_to_d(cmd, precision) for cmd in subpath.commands)


def viewbox_string(bbox: BoundingBox, precision: int = 2) -> str:
    if bbox.is_empty:
        return "0 0 0 0"
    parts = (bbox.min_x, bbox.min_y, bbox.width, bbox.height)
    return " ".join(format_number(v, precision) for v in parts)


def serialize_outline(
    subpaths: Iterable[SubPath],
    styles: Mapping[int, Style],
    bbox: BoundingBox,
    precision: int = 2,
) -> str:
    """Generate the outline document: one unfilled, stroked path per sub-path.

    Sub-paths without a classified stroke are emitted unstroked.
    """
    lines = [f'<svg xmlns="{SVG_NS}" viewBox="{viewbox_string(bbox, precision)}">']

    for sp in subpaths:
        style = styles.get(sp.index)
        attrs = {
            "d": subpath_to_d(sp, precision),
            "fill": style.fill if style is not None else "none",
        }
        if style is not None and style.stroke:
            attrs["stroke"] = style.stroke
        attr_str = " ".join(f"{k}={quoteattr(v)}" for k, v in attrs.items())
        lines.append(f"  <path {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)
