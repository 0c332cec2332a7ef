"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutlineRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code of the logo")
    seed: int | None = Field(
        default=None,
        description="Seed for synthetic segmentation colors (defaults to the configured seed)",
    )
