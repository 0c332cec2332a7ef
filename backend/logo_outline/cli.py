"""
Logo Outline CLI — outline-only rendering of an SVG logo.

Usage:
  logo-outline logo.svg                  # prints the outline SVG
  logo-outline logo.svg -o outline.svg   # saves it
  logo-outline logo.svg --seed 7 -v      # other segmentation colors, debug logging
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from logo_outline.engine.config import OutlineConfig
from logo_outline.engine.pipeline import outline_svg
from logo_outline.errors import OutlineError

logger = logging.getLogger("logo_outline.cli")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Logo Outline — red/blue outline of a filled SVG logo")
    parser.add_argument("input", help="SVG file")
    parser.add_argument("-o", "--output", help="Output SVG file (default: stdout)")
    parser.add_argument("--seed", type=int, default=0, help="Seed for synthetic segmentation colors")
    parser.add_argument("--scale", type=int, default=2, help="Raster upscaling factor")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        svg_text = Path(args.input).read_text(encoding="utf-8")
    except OSError as e:
        print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    config = dataclasses.replace(OutlineConfig(), synthetic_color_seed=args.seed, scale_factor=args.scale)
    try:
        ctx = outline_svg(svg_text, config=config)
    except OutlineError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for message in ctx.diagnostics:
        logger.info(message)

    if args.output:
        Path(args.output).write_text(ctx.outline_svg + "\n", encoding="utf-8")
        print(f"Saved: {args.output} ({ctx.num_subpaths} sub-paths)")
    else:
        print(ctx.outline_svg)
    return 0


if __name__ == "__main__":
    sys.exit(main())
