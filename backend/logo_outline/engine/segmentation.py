"""Segmentation rasterizer — per-sub-path synthetic colors and the true-color pass.

Draw 1 fills every sub-path with its own synthetic color, in nesting order,
so enclosed shapes paint over their containers. Draw 2 fills the combined
geometry once with the logo's real fill color. Comparing the two at the
same pixel tells whether a sub-path's area shows the dominant fill.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from logo_outline.engine.context import ImageSegment, RasterSample, SubPath
from logo_outline.svg.serializer import subpath_to_d
from logo_outline.utils.colors import rgb_to_hex
from logo_outline.utils.rasterizer import DrawPath, Surface

logger = logging.getLogger(__name__)

# 24-bit color space without pure black (0x000000) and pure white
# (0xFFFFFF). Transparent background pixels read back as black.
_FIRST_COLOR = 0x000001
_COLOR_COUNT = 0xFFFFFE - _FIRST_COLOR + 1


class SyntheticPalette:
    """Distinct pseudo-random 24-bit colors, reproducible for a given seed."""

    def __init__(self, seed: int | None = 0) -> None:
        self.seed = seed

    def colors(self, n: int) -> list[str]:
        if n > _COLOR_COUNT:
            raise ValueError(f"Cannot allocate {n} distinct colors")
        if n == 0:
            return []
        rng = np.random.default_rng(self.seed)
        values = rng.choice(_COLOR_COUNT, size=n, replace=False) + _FIRST_COLOR
        return [rgb_to_hex((v >> 16) & 0xFF, (v >> 8) & 0xFF, v & 0xFF) for v in values.tolist()]


def rasterize_segmented(
    surface: Surface,
    subpaths: Sequence[SubPath],
    palette: SyntheticPalette,
    precision: int = 2,
) -> tuple[RasterSample, list[ImageSegment]]:
    """Fill each sub-path with its own synthetic color, no stroke.

    Segments come back in the order of ``subpaths``.
    """
    colors = palette.colors(len(subpaths))
    segments = [ImageSegment(subpath=sp, color=color) for sp, color in zip(subpaths, colors)]
    draws = [DrawPath(d=subpath_to_d(seg.subpath, precision), fill=seg.color) for seg in segments]

    sample = surface.draw(draws)
    logger.debug("Segmented raster: %d segments on %d×%d px", len(segments), sample.width, sample.height)
    return sample, segments


def geometry_path_data(subpaths: Sequence[SubPath], precision: int = 2) -> str:
    """Path data rebuilt from interpreted geometry.

    Skipped commands are gone and arcs are already lines, so both passes
    draw exactly the same shapes.
    """
    return " ".join(subpath_to_d(sp, precision) for sp in subpaths)


def rasterize_original(
    surface: Surface,
    combined_path_data: str,
    fill_color: str,
    fill_rule: str = "nonzero",
) -> RasterSample:
    """Fill the combined geometry once with the logo's true fill color.

    ``combined_path_data`` must be interpreter output (see
    ``geometry_path_data``); raw source data may contain commands the
    renderer does not understand.
    """
    sample = surface.draw([DrawPath(d=combined_path_data, fill=fill_color, fill_rule=fill_rule)])
    logger.debug("Original raster: fill %s on %d×%d px", fill_color, sample.width, sample.height)
    return sample
