"""POST /api/outline — outline-only rendering of a logo."""

from __future__ import annotations

import dataclasses
import time

from fastapi import APIRouter, Depends

from logo_outline.config import Settings
from logo_outline.dependencies import get_rasterizer, get_settings
from logo_outline.engine.config import OutlineConfig
from logo_outline.engine.context import OutlineContext
from logo_outline.engine.pipeline import create_pipeline
from logo_outline.models.requests import OutlineRequest
from logo_outline.models.responses import (
    BoundingBoxModel,
    ErrorResponse,
    OutlineResponse,
    SegmentResult,
)
from logo_outline.utils.rasterizer import Rasterizer

router = APIRouter()


def _build_config(req: OutlineRequest, settings: Settings) -> OutlineConfig:
    seed = req.seed if req.seed is not None else settings.synthetic_color_seed
    return dataclasses.replace(
        OutlineConfig(),
        synthetic_color_seed=seed,
        scale_factor=settings.raster_scale,
    )


def _to_response(ctx: OutlineContext, elapsed_ms: float) -> OutlineResponse:
    colors = {seg.subpath.index: seg.color for seg in ctx.segments}
    segments = []
    for sp in ctx.subpaths:
        style = ctx.style_for(sp)
        segments.append(
            SegmentResult(
                index=sp.index,
                classification=style.classification.value if style else "unclassified",
                stroke=style.stroke if style else None,
                synthetic_color=colors.get(sp.index),
                child_count=ctx.child_counts.get(sp.index, 0),
            )
        )

    bbox = None
    if not ctx.bbox.is_empty:
        bbox = BoundingBoxModel(
            min_x=ctx.bbox.min_x,
            min_y=ctx.bbox.min_y,
            max_x=ctx.bbox.max_x,
            max_y=ctx.bbox.max_y,
        )

    return OutlineResponse(
        svg=ctx.outline_svg,
        subpath_count=ctx.num_subpaths,
        bounding_box=bbox,
        segments=segments,
        diagnostics=ctx.diagnostics,
        processing_time_ms=round(elapsed_ms, 1),
    )


@router.post(
    "/outline",
    response_model=OutlineResponse,
    responses={422: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
def outline(
    req: OutlineRequest,
    rasterizer: Rasterizer = Depends(get_rasterizer),
    settings: Settings = Depends(get_settings),
) -> OutlineResponse:
    # Sync handler: FastAPI runs it in the threadpool, the surface lock
    # serializes concurrent requests.
    start = time.perf_counter()

    pipeline = create_pipeline(rasterizer=rasterizer, config=_build_config(req, settings))
    ctx = pipeline.outline(req.svg)

    elapsed = (time.perf_counter() - start) * 1000
    return _to_response(ctx, elapsed)
