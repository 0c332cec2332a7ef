"""Pipeline orchestrator — runs stages in dependency order.

Any stage failure aborts the run: the error is recorded on the context,
logged, and re-raised to the caller. Nothing is retried.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from logo_outline.engine.config import OutlineConfig
from logo_outline.engine.context import OutlineContext
from logo_outline.engine.registry import StageRegistry, get_registry
from logo_outline.utils.rasterizer import CairoRasterizer, Rasterizer

logger = logging.getLogger(__name__)


def register_stages() -> None:
    """Import all stage modules so @stage decorators fire."""
    package = importlib.import_module("logo_outline.engine.stages")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")


class Pipeline:
    """Orchestrates the outline pipeline."""

    def __init__(
        self,
        rasterizer: Rasterizer | None = None,
        registry: StageRegistry | None = None,
        config: OutlineConfig | None = None,
    ) -> None:
        if registry is None:
            register_stages()
            registry = get_registry()
        self.registry = registry
        self.rasterizer = rasterizer or CairoRasterizer()
        self.config = config or OutlineConfig()

    def run(self, ctx: OutlineContext) -> OutlineContext:
        """Run every stage on the given context."""
        start = time.perf_counter()
        ctx.rasterizer = self.rasterizer
        ordered = self.registry.resolve_order()

        logger.info("Pipeline: %d stages queued", len(ordered))

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)
                raise
            ctx.completed_stages.add(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.1fms", spec.id, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d sub-paths, %d stages in %.0fms",
            ctx.num_subpaths,
            len(ctx.completed_stages),
            total,
        )
        return ctx

    def outline(self, svg_text: str) -> OutlineContext:
        """Parse, classify and serialize one SVG document."""
        ctx = OutlineContext(svg_raw=svg_text, config=self.config)
        return self.run(ctx)


def create_pipeline(
    rasterizer: Rasterizer | None = None,
    config: OutlineConfig | None = None,
) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(rasterizer=rasterizer, config=config)


def outline_svg(
    svg_text: str,
    rasterizer: Rasterizer | None = None,
    config: OutlineConfig | None = None,
) -> OutlineContext:
    """Run the whole pipeline on raw SVG text."""
    return create_pipeline(rasterizer, config).outline(svg_text)
