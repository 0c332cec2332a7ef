"""S1.01 — Nesting Order.

Count contained sub-paths per sub-path and reorder, most children first.
Geometry is untouched; only the sequence changes.
"""

from __future__ import annotations

from logo_outline.engine.containment import count_children, order_by_nesting
from logo_outline.engine.context import OutlineContext
from logo_outline.engine.registry import Phase, stage


@stage(
    id="S1.01",
    phase=Phase.STRUCTURE,
    dependencies=["S0.02"],
    description="Order sub-paths by number of contained sub-paths",
)
def nesting_order(ctx: OutlineContext) -> None:
    counts = count_children(ctx.subpaths)
    ctx.child_counts = {sp.index: n for sp, n in zip(ctx.subpaths, counts)}
    ctx.subpaths = order_by_nesting(ctx.subpaths, counts)
