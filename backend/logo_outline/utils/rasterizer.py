"""Rasterizing surface — SVG paths to an RGBA pixel grid.

A Rasterizer owns one surface. Callers scope their use of it with
``acquire()``; while held, no other caller can draw, so a
rasterize-then-classify sequence never sees another pipeline's pixels.

    with rasterizer.acquire(width, height, scale=2) as surface:
        sample = surface.draw([DrawPath(d, fill="#ff0000")])
"""

from __future__ import annotations

import io
import logging
import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from xml.sax.saxutils import quoteattr

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from logo_outline.engine.context import RasterSample
from logo_outline.errors import SurfaceUnavailableError

logger = logging.getLogger(__name__)

_SVG_NS = "http://www.w3.org/2000/svg"


@dataclass(frozen=True)
class DrawPath:
    """One filled, unstroked path to draw."""

    d: str
    fill: str
    fill_rule: str = "nonzero"


class Surface:
    """An acquired drawing surface of fixed size, scale and viewport."""

    def __init__(
        self,
        rasterizer: Rasterizer,
        width: float,
        height: float,
        scale: float,
        viewbox: tuple[float, float, float, float] | None = None,
    ) -> None:
        self._rasterizer = rasterizer
        self.width = width
        self.height = height
        self.scale = scale
        self.viewbox = viewbox or (0.0, 0.0, width, height)
        self.pixel_width = max(1, int(round(width * scale)))
        self.pixel_height = max(1, int(round(height * scale)))
        self.released = False

    def draw(self, paths: Sequence[DrawPath]) -> RasterSample:
        """Clear the surface, draw ``paths`` in order, return the pixels."""
        if self.released:
            raise SurfaceUnavailableError("Surface used after release")
        markup = self.to_svg(paths)
        pixels = self._rasterizer.render(markup, self.pixel_width, self.pixel_height)
        return RasterSample(pixels=pixels, scale=self.scale)

    def to_svg(self, paths: Sequence[DrawPath]) -> str:
        vx, vy, vw, vh = self.viewbox
        lines = [
            f'<svg xmlns="{_SVG_NS}" width="{self.width}" height="{self.height}" '
            f'viewBox="{vx} {vy} {vw} {vh}" shape-rendering="crispEdges">'
        ]
        for p in paths:
            lines.append(
                f"<path d={quoteattr(p.d)} fill={quoteattr(p.fill)} "
                f'fill-rule={quoteattr(p.fill_rule)} stroke="none" shape-rendering="crispEdges"/>'
            )
        lines.append("</svg>")
        return "\n".join(lines)


class Rasterizer:
    """Base rasterizing capability: a single-slot surface plus a renderer."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    @contextmanager
    def acquire(
        self,
        width: float,
        height: float,
        scale: float = 2,
        viewbox: tuple[float, float, float, float] | None = None,
        blocking: bool = True,
    ) -> Iterator[Surface]:
        """Hold the surface for the duration of the ``with`` block.

        Raises:
            SurfaceUnavailableError: the surface is busy (non-blocking) or the
                requested size is not drawable.
        """
        if width <= 0 or height <= 0 or scale <= 0:
            raise SurfaceUnavailableError(
                f"Cannot allocate a {width}×{height} surface at scale {scale}"
            )
        if not self._lock.acquire(blocking=blocking):
            raise SurfaceUnavailableError("Rasterizing surface is busy")
        surface = Surface(self, width, height, scale, viewbox)
        logger.debug("Surface acquired: %d×%d px", surface.pixel_width, surface.pixel_height)
        try:
            yield surface
        finally:
            surface.released = True
            self._lock.release()
            logger.debug("Surface released")

    def render(self, svg_markup: str, pixel_width: int, pixel_height: int) -> NDArray[np.uint8]:
        raise NotImplementedError


class CairoRasterizer(Rasterizer):
    """Renders with CairoSVG and decodes the PNG with Pillow."""

    def render(self, svg_markup: str, pixel_width: int, pixel_height: int) -> NDArray[np.uint8]:
        try:
            import cairosvg
        except (ImportError, OSError) as e:
            logger.error("Raster context not available: %s", e)
            raise SurfaceUnavailableError(f"Raster context not available: {e}") from e

        try:
            png_data = cairosvg.svg2png(
                bytestring=svg_markup.encode("utf-8"),
                output_width=pixel_width,
                output_height=pixel_height,
            )
        except (MemoryError, OSError, ValueError) as e:
            logger.error("Rendering failed: %s", e)
            raise SurfaceUnavailableError(f"Rendering failed: {e}") from e

        return np.array(Image.open(io.BytesIO(png_data)).convert("RGBA"))
