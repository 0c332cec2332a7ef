"""S0.02 — Path Interpretation.

Combined path data → ordered sub-paths and the padded bounding box.
"""

from __future__ import annotations

from logo_outline.engine.context import OutlineContext
from logo_outline.engine.interpreter import interpret
from logo_outline.engine.registry import Phase, stage


@stage(
    id="S0.02",
    phase=Phase.PARSING,
    dependencies=["S0.01"],
    description="Interpret path commands into sub-paths and bounding box",
)
def interpret_paths(ctx: OutlineContext) -> None:
    result = interpret(ctx.document.combined_path_data, padding=ctx.config.padding)
    ctx.subpaths = result.subpaths
    ctx.bbox = result.bbox
    ctx.diagnostics.extend(result.diagnostics)
