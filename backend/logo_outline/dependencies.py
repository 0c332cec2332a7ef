"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from logo_outline.config import settings
from logo_outline.utils.rasterizer import CairoRasterizer, Rasterizer


def get_settings():
    return settings


@lru_cache(maxsize=1)
def get_rasterizer() -> Rasterizer:
    """One surface per process; requests take turns on it."""
    return CairoRasterizer()
