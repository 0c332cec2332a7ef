"""Logo Outline — outline-only renderings of multi-path SVG logos."""

__version__ = "0.1.0"
