"""Containment classifier — nesting order by polygon point containment.

For every ordered pair (A, B), B is a child of A when every point of B lies
inside A's polygon (even-odd ray casting over command end points). Sub-paths
are then ordered by child count, most children first, so enclosing shapes
are drawn before the shapes they enclose.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from logo_outline.engine.context import SubPath
from logo_outline.svg.primitives import Point

logger = logging.getLogger(__name__)

# A polygon needs three vertices to enclose any area
_MIN_POLYGON_POINTS = 3


def is_point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Even-odd ray casting.

    A horizontal ray from the point toggles ``inside`` at every edge it
    crosses. Points on the boundary get whatever the crossing formula gives:
    for an axis-aligned square the min-x edge counts as inside, the max-x
    edge as outside.
    """
    px, py = point
    inside = False
    n = len(polygon)
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if ((yi > py) != (yj > py)) and (px < (xj - xi) * (py - yi) / (yj - yi) + xi):
            inside = not inside
        j = i
    return inside


def is_path_inside(parent: SubPath, child: SubPath) -> bool:
    """True when every point of ``child`` lies inside ``parent``."""
    if parent is child:
        return False
    parent_points = parent.points()
    child_points = child.points()
    if len(parent_points) < _MIN_POLYGON_POINTS or len(child_points) < _MIN_POLYGON_POINTS:
        return False
    return all(is_point_in_polygon(p, parent_points) for p in child_points)


def count_children(subpaths: Sequence[SubPath]) -> list[int]:
    """Number of other sub-paths fully contained in each sub-path."""
    counts = [0] * len(subpaths)
    for i, parent in enumerate(subpaths):
        for j, child in enumerate(subpaths):
            if i != j and is_path_inside(parent, child):
                counts[i] += 1
    return counts


def order_by_nesting(
    subpaths: Sequence[SubPath],
    counts: Sequence[int] | None = None,
) -> list[SubPath]:
    """Same sub-paths, most children first; ties keep encounter order.

    ``counts`` may carry precomputed child counts aligned with ``subpaths``.
    """
    if counts is None:
        counts = count_children(subpaths)
    order = sorted(range(len(subpaths)), key=lambda i: -counts[i])
    if subpaths:
        logger.debug("Nesting order: %s", [(subpaths[i].index, counts[i]) for i in order])
    return [subpaths[i] for i in order]
