"""Pipeline configuration — geometry, raster and output constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class OutlineConfig:
    """Controls padding, raster scale and outline styling."""

    # Margin added to every edge of the accumulated bounding box
    padding: float = 20.0

    # Raster upscaling relative to the declared viewport
    scale_factor: int = 2

    # Decimal places for regenerated path data
    precision: int = 2

    # Outline strokes
    match_stroke: str = "#FF0000"
    non_match_stroke: str = "#0000FF"

    # Seed for the synthetic segmentation palette
    synthetic_color_seed: int = 0

    # W3C CSS 2.1 §10.3.2: replaced elements without intrinsic size
    # default to 300×150.
    default_width: float = 300.0
    default_height: float = 150.0
