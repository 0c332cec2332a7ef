"""S0.01 — Parse Document.

Read viewport, dominant fill color and the path data of every <path>.
"""

from __future__ import annotations

from logo_outline.engine.context import OutlineContext
from logo_outline.engine.registry import Phase, stage
from logo_outline.svg.parser import parse_svg


@stage(
    id="S0.01",
    phase=Phase.PARSING,
    description="Parse SVG document: viewport, dominant fill, path data",
)
def parse_document(ctx: OutlineContext) -> None:
    ctx.document = parse_svg(ctx.svg_raw, ctx.config)
