"""OutlineContext — the single mutable state object flowing through all stages.

Geometry (SubPath, BoundingBox) is produced once by the interpreter and only
reordered afterwards. Classification results live in Style values keyed by
sub-path index, never on the geometry itself.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from logo_outline.engine.config import OutlineConfig
from logo_outline.models.svg_document import SvgDocument
from logo_outline.svg.primitives import PathCommand, Point
from logo_outline.utils.colors import hex_to_rgb

if TYPE_CHECKING:
    from logo_outline.utils.rasterizer import Rasterizer


@dataclass
class SubPath:
    """One contiguous contour of the composite path."""

    # Identity: position in interpretation order
    index: int
    commands: list[PathCommand] = field(default_factory=list)
    # False only for a trailing run that never saw a Z
    closed: bool = False

    def __len__(self) -> int:
        return len(self.commands)

    def points(self) -> list[Point]:
        """Command end points; curves are approximated by their end points."""
        return [cmd.end for cmd in self.commands if cmd.end is not None]


@dataclass
class BoundingBox:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def empty(cls) -> BoundingBox:
        """Sentinel for path data without any coordinates."""
        return cls(math.inf, math.inf, -math.inf, -math.inf)

    @property
    def is_empty(self) -> bool:
        return self.max_x < self.min_x or self.max_y < self.min_y

    @property
    def width(self) -> float:
        return 0.0 if self.is_empty else self.max_x - self.min_x

    @property
    def height(self) -> float:
        return 0.0 if self.is_empty else self.max_y - self.min_y

    def include(self, x: float, y: float) -> None:
        self.min_x = min(self.min_x, x)
        self.min_y = min(self.min_y, y)
        self.max_x = max(self.max_x, x)
        self.max_y = max(self.max_y, y)

    def padded(self, margin: float) -> BoundingBox:
        if self.is_empty:
            return BoundingBox.empty()
        return BoundingBox(
            self.min_x - margin,
            self.min_y - margin,
            self.max_x + margin,
            self.max_y + margin,
        )

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)


@dataclass
class PathsWithBoundingBox:
    """Interpreter output."""

    subpaths: list[SubPath] = field(default_factory=list)
    bbox: BoundingBox = field(default_factory=BoundingBox.empty)
    diagnostics: list[str] = field(default_factory=list)


class OutlineClass(str, enum.Enum):
    DOMINANT_MATCH = "dominant_match"
    NON_MATCH = "non_match"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class Style:
    """Outline styling for one sub-path."""

    classification: OutlineClass
    stroke: str | None = None
    fill: str = "none"


@dataclass(frozen=True)
class ImageSegment:
    """A sub-path paired with the synthetic color it was rasterized with."""

    subpath: SubPath
    color: str

    @property
    def rgb(self) -> tuple[int, int, int]:
        return hex_to_rgb(self.color)


@dataclass(frozen=True)
class RasterSample:
    """Immutable H×W×4 RGBA pixel grid."""

    pixels: NDArray[np.uint8]
    scale: float = 1.0

    def __post_init__(self) -> None:
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError(f"expected an H×W×4 RGBA array, got shape {self.pixels.shape}")
        if self.pixels.flags.writeable:
            frozen = np.array(self.pixels, dtype=np.uint8, copy=True)
            frozen.setflags(write=False)
            object.__setattr__(self, "pixels", frozen)

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])


@dataclass
class OutlineContext:
    """Shared state flowing through the entire pipeline."""

    # Raw SVG code
    svg_raw: str = ""
    config: OutlineConfig = field(default_factory=OutlineConfig)
    # Parsed source document
    document: SvgDocument | None = None

    # --- Interpretation ---
    subpaths: list[SubPath] = field(default_factory=list)
    bbox: BoundingBox = field(default_factory=BoundingBox.empty)
    # child count per sub-path index
    child_counts: dict[int, int] = field(default_factory=dict)

    # --- Rasterization ---
    segments: list[ImageSegment] = field(default_factory=list)
    segmented_raster: RasterSample | None = None
    original_raster: RasterSample | None = None

    # --- Classification ---
    styles: dict[int, Style] = field(default_factory=dict)

    # --- Output ---
    outline_svg: str = ""

    # --- Pipeline metadata ---
    diagnostics: list[str] = field(default_factory=list)
    completed_stages: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)
    # Injected rasterizing capability, set by the pipeline
    rasterizer: Rasterizer | None = None

    @property
    def num_subpaths(self) -> int:
        return len(self.subpaths)

    def style_for(self, subpath: SubPath) -> Style | None:
        return self.styles.get(subpath.index)
