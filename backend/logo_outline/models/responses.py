"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    stages_registered: int = 0


class BoundingBoxModel(BaseModel):
    min_x: float
    min_y: float
    max_x: float
    max_y: float


class SegmentResult(BaseModel):
    index: int
    classification: str
    stroke: str | None = None
    synthetic_color: str | None = None
    child_count: int = 0


class OutlineResponse(BaseModel):
    svg: str
    subpath_count: int = 0
    bounding_box: BoundingBoxModel | None = None
    segments: list[SegmentResult] = Field(default_factory=list)
    diagnostics: list[str] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class ErrorResponse(BaseModel):
    error: str
    message: str
