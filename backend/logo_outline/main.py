"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from logo_outline import __version__
from logo_outline.config import settings
from logo_outline.errors import (
    MissingGeometryError,
    OutlineError,
    ParseError,
    SurfaceUnavailableError,
)
from logo_outline.models.responses import ErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.logo_outline_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[OutlineError], int] = {
    ParseError: 422,
    MissingGeometryError: 422,
    SurfaceUnavailableError: 503,
}


def create_app() -> FastAPI:
    app = FastAPI(
        title="Logo Outline",
        description="Outline-only renderings of multi-path SVG logos",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(OutlineError)
    async def outline_error_handler(request: Request, exc: OutlineError) -> JSONResponse:
        status = _STATUS_BY_ERROR.get(type(exc), 500)
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status,
            content=ErrorResponse(error=type(exc).__name__, message=str(exc)).model_dump(),
        )

    from logo_outline.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
