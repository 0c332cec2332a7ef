"""Canonical absolute path commands.

Every SVG path command is normalized into one of five shapes. Relative,
shorthand and smooth forms never survive past interpretation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Point = tuple[float, float]


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float

    code = "M"

    @property
    def end(self) -> Point:
        return (self.x, self.y)

    def coordinates(self) -> list[Point]:
        return [(self.x, self.y)]


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float

    code = "L"

    @property
    def end(self) -> Point:
        return (self.x, self.y)

    def coordinates(self) -> list[Point]:
        return [(self.x, self.y)]


@dataclass(frozen=True)
class CurveTo:
    """Cubic bezier with both control points explicit."""

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float

    code = "C"

    @property
    def end(self) -> Point:
        return (self.x, self.y)

    def coordinates(self) -> list[Point]:
        return [(self.x1, self.y1), (self.x2, self.y2), (self.x, self.y)]


@dataclass(frozen=True)
class QuadCurveTo:
    x1: float
    y1: float
    x: float
    y: float

    code = "Q"

    @property
    def end(self) -> Point:
        return (self.x, self.y)

    def coordinates(self) -> list[Point]:
        return [(self.x1, self.y1), (self.x, self.y)]


@dataclass(frozen=True)
class ClosePath:
    code = "Z"

    @property
    def end(self) -> None:
        return None

    def coordinates(self) -> list[Point]:
        return []


PathCommand = Union[MoveTo, LineTo, CurveTo, QuadCurveTo, ClosePath]
