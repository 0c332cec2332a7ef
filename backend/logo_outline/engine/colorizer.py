"""Outline colorizer — classify each sub-path against the dominant fill color.

For each segment: find the first pixel (row-major) of the segmented raster
carrying the segment's synthetic color, then read the original raster at
that coordinate. Dominant fill there → red outline; anything else, including
an unpainted pixel, → blue.
A segment with no visible pixel stays unclassified.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Sequence

import numpy as np

from logo_outline.engine.context import ImageSegment, OutlineClass, RasterSample, Style
from logo_outline.errors import UnclassifiedSegmentWarning
from logo_outline.utils.colors import normalize_color, rgb_to_hex

logger = logging.getLogger(__name__)

MATCH_STROKE = "#FF0000"
NON_MATCH_STROKE = "#0000FF"


def find_first_pixel(raster: RasterSample, rgb: tuple[int, int, int]) -> tuple[int, int] | None:
    """(row, col) of the first pixel whose RGB equals ``rgb``, in raster order.

    Fully transparent pixels are background and never match.
    """
    pixels = raster.pixels
    mask = np.all(pixels[:, :, :3] == np.asarray(rgb, dtype=np.uint8), axis=2) & (pixels[:, :, 3] > 0)
    hits = np.flatnonzero(mask)
    if hits.size == 0:
        return None
    row, col = divmod(int(hits[0]), raster.width)
    return (row, col)


def classify(
    segmented: RasterSample,
    original: RasterSample,
    segments: Sequence[ImageSegment],
    logo_fill_color: str,
    match_stroke: str = MATCH_STROKE,
    non_match_stroke: str = NON_MATCH_STROKE,
) -> dict[int, Style]:
    """Outline style per sub-path index.

    Raises:
        ValueError: the two rasters differ in size.
    """
    if segmented.pixels.shape != original.pixels.shape:
        raise ValueError(
            f"Raster size mismatch: {segmented.pixels.shape} vs {original.pixels.shape}"
        )

    reference = normalize_color(logo_fill_color)
    if reference is None:
        logger.warning("Logo fill %r has no RGB value; no segment can match it", logo_fill_color)

    styles: dict[int, Style] = {}
    for segment in segments:
        index = segment.subpath.index
        hit = find_first_pixel(segmented, segment.rgb)

        if hit is None:
            message = f"Sub-path {index} (color {segment.color}) has no visible pixels"
            logger.warning(message)
            warnings.warn(message, UnclassifiedSegmentWarning, stacklevel=2)
            styles[index] = Style(classification=OutlineClass.UNCLASSIFIED)
            continue

        row, col = hit
        r, g, b, a = (int(c) for c in original.pixels[row, col])
        # Transparent reads as black; an unpainted pixel never shows the fill
        if reference is not None and a > 0 and rgb_to_hex(r, g, b) == reference:
            styles[index] = Style(classification=OutlineClass.DOMINANT_MATCH, stroke=match_stroke)
        else:
            styles[index] = Style(classification=OutlineClass.NON_MATCH, stroke=non_match_stroke)

    counts = {cls: 0 for cls in OutlineClass}
    for style in styles.values():
        counts[style.classification] += 1
    logger.info(
        "Classified %d segments: %d match, %d non-match, %d unclassified",
        len(styles),
        counts[OutlineClass.DOMINANT_MATCH],
        counts[OutlineClass.NON_MATCH],
        counts[OutlineClass.UNCLASSIFIED],
    )
    return styles
