"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from logo_outline import __version__
from logo_outline.engine.pipeline import register_stages
from logo_outline.engine.registry import get_registry
from logo_outline.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    register_stages()
    return HealthResponse(
        status="ok",
        version=__version__,
        stages_registered=get_registry().count,
    )
