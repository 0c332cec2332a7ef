"""Path command interpreter — path data → ordered closed sub-paths + bounding box.

Streams the absolute command list, normalizing every command into MoveTo,
LineTo, CurveTo, QuadCurveTo or ClosePath. A sub-path is finalized on a new
moveto (when non-empty), on closepath, and at the end of the stream.
"""

from __future__ import annotations

import logging

from logo_outline.engine.context import BoundingBox, PathsWithBoundingBox, SubPath
from logo_outline.svg.path_data import AbsoluteCommand, to_absolute, tokenize_path
from logo_outline.svg.primitives import (
    ClosePath,
    CurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadCurveTo,
)

logger = logging.getLogger(__name__)

# Margin added to each edge of the accumulated bounding box
BBOX_PADDING = 20.0


def interpret(path_data: str, padding: float = BBOX_PADDING) -> PathsWithBoundingBox:
    """Interpret combined path data into sub-paths and a padded bounding box.

    Raises:
        ParseError: malformed path syntax.
    """
    result = PathsWithBoundingBox()
    if not path_data.strip():
        return result

    commands = to_absolute(tokenize_path(path_data))
    bbox = BoundingBox.empty()
    current = SubPath(index=0)
    prev: AbsoluteCommand | None = None

    def finalize(closed: bool) -> None:
        nonlocal current
        current.closed = closed
        result.subpaths.append(current)
        current = SubPath(index=len(result.subpaths))

    for cmd in commands:
        code = cmd.code
        normalized = _normalize(cmd, prev, result.diagnostics)

        if code == "M":
            if current.commands:
                finalize(closed=False)
            current.commands.append(normalized)
        elif code == "Z":
            if current.commands:
                current.commands.append(ClosePath())
                finalize(closed=True)
            else:
                logger.debug("Closepath at offset %d has nothing to close", cmd.offset)
        elif normalized is not None:
            if not current.commands:
                # Drawing after a closepath restarts from the closed sub-path's start
                current.commands.append(MoveTo(cmd.x0, cmd.y0))
            current.commands.append(normalized)

        if normalized is not None:
            for x, y in normalized.coordinates():
                bbox.include(x, y)

        prev = cmd

    if current.commands:
        # Open trailing run: kept, but not closed
        finalize(closed=False)

    result.bbox = bbox.padded(padding)
    logger.debug(
        "Interpreted %d commands into %d sub-paths", len(commands), len(result.subpaths)
    )
    return result


def _normalize(
    cmd: AbsoluteCommand,
    prev: AbsoluteCommand | None,
    diagnostics: list[str],
) -> PathCommand | None:
    """Map one absolute command onto the canonical command set.

    Returns None for closepath (handled by the caller) and for skipped
    commands.
    """
    code = cmd.code

    if code == "M":
        return MoveTo(cmd.x, cmd.y)
    if code in ("L", "H", "V"):
        return LineTo(cmd.x, cmd.y)
    if code == "C":
        return CurveTo(cmd.x1, cmd.y1, cmd.x2, cmd.y2, cmd.x, cmd.y)
    if code == "S":
        x1, y1 = _reflect_cubic(cmd, prev)
        return CurveTo(x1, y1, cmd.x2, cmd.y2, cmd.x, cmd.y)
    if code == "Q":
        return QuadCurveTo(cmd.x1, cmd.y1, cmd.x, cmd.y)
    if code == "T":
        x1, y1 = _reflect_quad(cmd, prev)
        return QuadCurveTo(x1, y1, cmd.x, cmd.y)
    if code == "A":
        message = f"Arc command at offset {cmd.offset} is not supported; falling back to a line"
        logger.warning(message)
        diagnostics.append(message)
        return LineTo(cmd.x, cmd.y)
    if code == "Z":
        return None

    message = f"Unsupported command {code!r} at offset {cmd.offset} skipped"
    logger.warning(message)
    diagnostics.append(message)
    return None


def _reflect_cubic(cmd: AbsoluteCommand, prev: AbsoluteCommand | None) -> tuple[float, float]:
    """First control point of a smooth cubic.

    Reflection of the previous second control point through the current
    point when the previous command was C or S; the current point otherwise.
    """
    if prev is not None and prev.code in ("C", "S"):
        return (2 * cmd.x0 - prev.x2, 2 * cmd.y0 - prev.y2)
    return (cmd.x0, cmd.y0)


def _reflect_quad(cmd: AbsoluteCommand, prev: AbsoluteCommand | None) -> tuple[float, float]:
    """Control point of a smooth quadratic.

    Only a plain Q carries an explicit control point to reflect; after T or
    any other command the current point is used.
    """
    if prev is not None and prev.code == "Q":
        return (2 * cmd.x0 - prev.x1, 2 * cmd.y0 - prev.y1)
    return (cmd.x0, cmd.y0)
