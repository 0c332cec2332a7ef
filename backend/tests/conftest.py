"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from logo_outline.engine.context import RasterSample
from logo_outline.errors import SurfaceUnavailableError
from logo_outline.utils.rasterizer import Rasterizer


UNIT_SQUARE_D = "M0,0 L10,0 L10,10 L0,10 Z"

# Two separate black squares
TWO_SQUARES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M10 10 H40 V40 H10 Z M60 10 H90 V40 H60 Z" fill="#000000"/>
</svg>'''

# Square ring with a dot in the hole: outer and dot wind clockwise, the
# hole counter-clockwise, so nonzero filling leaves the hole empty.
RING_WITH_DOT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M10 10 H90 V90 H10 Z M30 30 V70 H70 V30 Z M45 45 H55 V55 H45 Z" fill="#1A2B3C"/>
</svg>'''

# Same ring split over two <path> elements
SPLIT_RING_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <path d="M10 10 H90 V90 H10 Z" fill="black"/>
  <path d="M30 30 V70 H70 V30 Z" fill="black"/>
</svg>'''

# Evenodd ring: both contours wind the same way
EVENODD_RING_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M10 10 H90 V90 H10 Z M30 30 H70 V70 H30 Z" fill="#336699" fill-rule="evenodd"/>
</svg>'''

CURVED_LOGO_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 120 60">
  <path d="M10 30 C10 10 50 10 50 30 S90 50 90 30 Q100 10 110 30 T110 50 A5 5 0 0 1 100 50 Z" fill="#ff6600"/>
</svg>'''

NO_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <circle cx="12" cy="12" r="10" fill="#000"/>
</svg>'''

BAD_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M0 0 L10 # 10 Z" fill="#000"/>
</svg>'''


def make_raster(height: int, width: int, regions: list[tuple[slice, slice, tuple[int, int, int]]]) -> RasterSample:
    """Transparent raster with opaque rectangular regions painted in order."""
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    for rows, cols, (r, g, b) in regions:
        pixels[rows, cols] = (r, g, b, 255)
    return RasterSample(pixels=pixels)


class RecordingRasterizer(Rasterizer):
    """Returns a blank raster and keeps the markup it was asked to draw."""

    def __init__(self):
        super().__init__()
        self.markup: list[str] = []

    def render(self, svg_markup, pixel_width, pixel_height):
        self.markup.append(svg_markup)
        return np.zeros((pixel_height, pixel_width, 4), dtype=np.uint8)


class BrokenRasterizer(Rasterizer):
    """Rasterizer whose render step always fails."""

    def render(self, svg_markup, pixel_width, pixel_height):
        raise SurfaceUnavailableError("Raster context not available: test")


@pytest.fixture
def two_squares_svg() -> str:
    return TWO_SQUARES_SVG


@pytest.fixture
def ring_with_dot_svg() -> str:
    return RING_WITH_DOT_SVG


@pytest.fixture
def broken_rasterizer() -> Rasterizer:
    return BrokenRasterizer()
