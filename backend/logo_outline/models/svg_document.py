"""Parsed SVG document model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SvgDocument(BaseModel):
    """The parts of a source logo the outline pipeline reads."""

    viewbox: tuple[float, float, float, float] | None = None
    width: float = 300.0
    height: float = 150.0
    # `d` attribute of every <path>, in document order
    path_data: list[str] = Field(default_factory=list)
    # Fill of the first <path>: the dominant fill color
    fill: str = "#000000"
    fill_rule: str = "nonzero"
    raw_svg: str = ""

    @property
    def combined_path_data(self) -> str:
        return " ".join(self.path_data)
