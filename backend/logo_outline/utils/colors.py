"""RGB ↔ hex helpers. Lowercase ``#rrggbb`` everywhere."""

from __future__ import annotations

from PIL import ImageColor


def rgb_to_hex(r: int, g: int, b: int) -> str:
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ValueError(f"Channel out of range: {channel}")
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Parse ``#rgb`` / ``#rrggbb`` (``#`` optional)."""
    value = color.strip().lstrip("#")
    if len(value) == 3:
        value = "".join(c * 2 for c in value)
    if len(value) != 6:
        raise ValueError(f"Not a hex color: {color!r}")
    n = int(value, 16)
    return ((n >> 16) & 0xFF, (n >> 8) & 0xFF, n & 0xFF)


def normalize_color(color: str) -> str | None:
    """Any CSS color Pillow understands → ``#rrggbb``; None if it has no RGB value."""
    try:
        rgb = ImageColor.getrgb(color.strip())
    except ValueError:
        return None
    return rgb_to_hex(*rgb[:3])
