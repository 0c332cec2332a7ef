"""S3.01 — Outline Serialization.

Stroked, unfilled paths inside the padded bounding box.
"""

from __future__ import annotations

from logo_outline.engine.context import OutlineContext
from logo_outline.engine.registry import Phase, stage
from logo_outline.svg.serializer import serialize_outline


@stage(
    id="S3.01",
    phase=Phase.OUTPUT,
    dependencies=["S2.01"],
    description="Serialize the outline SVG",
)
def serialize(ctx: OutlineContext) -> None:
    ctx.outline_svg = serialize_outline(ctx.subpaths, ctx.styles, ctx.bbox, ctx.config.precision)
