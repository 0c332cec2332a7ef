"""S2.01 — Segmentation + Classification.

Both rasters and the pixel comparison happen under one surface
acquisition, so no other pipeline can draw in between.
"""

from __future__ import annotations

import logging

from logo_outline.engine.colorizer import classify
from logo_outline.engine.context import OutlineContext
from logo_outline.engine.registry import Phase, stage
from logo_outline.engine.segmentation import (
    SyntheticPalette,
    geometry_path_data,
    rasterize_original,
    rasterize_segmented,
)
from logo_outline.errors import SurfaceUnavailableError

logger = logging.getLogger(__name__)


@stage(
    id="S2.01",
    phase=Phase.RASTER,
    dependencies=["S1.01"],
    description="Rasterize segments and original fill, classify outlines",
)
def segment_and_classify(ctx: OutlineContext) -> None:
    if not ctx.subpaths:
        logger.info("No sub-paths to rasterize")
        return

    if ctx.rasterizer is None:
        ctx.diagnostics.append("Raster context not available")
        raise SurfaceUnavailableError("No rasterizer configured")

    doc = ctx.document
    cfg = ctx.config
    palette = SyntheticPalette(cfg.synthetic_color_seed)

    with ctx.rasterizer.acquire(doc.width, doc.height, cfg.scale_factor, doc.viewbox) as surface:
        ctx.segmented_raster, ctx.segments = rasterize_segmented(
            surface, ctx.subpaths, palette, cfg.precision
        )
        ctx.original_raster = rasterize_original(
            surface,
            geometry_path_data(ctx.subpaths, cfg.precision),
            doc.fill,
            doc.fill_rule,
        )
        ctx.styles = classify(
            ctx.segmented_raster,
            ctx.original_raster,
            ctx.segments,
            doc.fill,
            match_stroke=cfg.match_stroke,
            non_match_stroke=cfg.non_match_stroke,
        )
