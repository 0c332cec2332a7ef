"""Error taxonomy for the outline pipeline.

Structural errors abort the pipeline and reach the caller. Per-segment
anomalies are reported as warnings.
"""

from __future__ import annotations


class OutlineError(Exception):
    """Base class for unrecoverable pipeline failures."""


class ParseError(OutlineError):
    """Malformed SVG path data."""

    def __init__(self, message: str, offset: int | None = None) -> None:
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)
        self.offset = offset


class MissingGeometryError(OutlineError):
    """No <svg> root or no <path> elements with path data."""


class SurfaceUnavailableError(OutlineError):
    """The rasterizing surface could not be acquired or rendered to."""


class UnclassifiedSegmentWarning(UserWarning):
    """A sub-path's synthetic color never appeared in the segmented raster."""
