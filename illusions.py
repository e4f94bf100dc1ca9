#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Concentric-ring optical illusions — SVG generator
=================================================

Two illusions, each written with two palettes:

  - Illusion 1: four concentric circles of tilted squares alternating light
    and dark. The circles appear to spiral although they are concentric.
  - Illusion 2: two concentric braids, each three circles of ellipses with
    alternating colors and gaps. The braids appear to twist.

Outputs (SVG, 800x800):
  - output1.svg   squares, black/white on gray
  - output1a.svg  squares, blue/yellow on forestgreen
  - output2.svg   braids, black/white on gray
  - output2a.svg  braids, blue/yellow on forestgreen

With ``--png`` a raster preview ``<name>.png`` is written next to each SVG.

Dependencies
------------
  - Python 3.9+
  - numpy
  - pillow (PIL), for the PNG previews

Install:
  pip install numpy pillow

Quick start
-----------
  python illusions.py --out illusions_out --png

An output that cannot be created (missing folder, no permission) is skipped
with a warning; the remaining images are still generated.
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

from png_preview import PngCanvas
from ring_layout import braid, square_ring
from svg_writer import (
    DEFAULT_AUTHOR,
    Canvas,
    EllipseShape,
    OutputCreationError,
    Palette,
    RectShape,
    SvgWriter,
    check_comment_text,
)

logger = logging.getLogger(__name__)

GRAYSCALE = Palette(dark="black", light="white", background="gray")
COLORED = Palette(dark="blue", light="yellow", background="forestgreen")


# -----------------------------
# Image configurations
# -----------------------------

@dataclass(frozen=True)
class IllusionOneSpec:
    """Concentric circles of tilted squares."""

    output_name: str
    palette: Palette = GRAYSCALE
    canvas_size: int = 800
    ring_count: int = 4
    base_radius: float = 100.0
    radius_step: float = 72.0
    square_width: int = 24


@dataclass(frozen=True)
class IllusionTwoSpec:
    """Two concentric braids of ellipses; the inner braid is shrunk and flipped."""

    output_name: str
    palette: Palette = GRAYSCALE
    canvas_size: int = 800
    braid_radius: float = 300.0
    long_radius: float = 12.0
    short_radius: float = 6.0
    ellipses_per_ring: int = 36
    inner_braid_offset: float = 64.0
    inner_braid_scale: float = 0.8


ImageSpec = Union[IllusionOneSpec, IllusionTwoSpec]

DEFAULT_SPECS: List[ImageSpec] = [
    IllusionOneSpec("output1", GRAYSCALE),
    IllusionOneSpec("output1a", COLORED),
    IllusionTwoSpec("output2", GRAYSCALE),
    IllusionTwoSpec("output2a", COLORED),
]


# -----------------------------
# Rendering onto a canvas
# -----------------------------

def render_illusion_one(spec: IllusionOneSpec, canvas: Canvas) -> None:
    """
    Draw the circles of squares onto an open canvas (SVG or PNG).

    Ring ``i`` has radius ``base_radius + i * radius_step``; odd rings tilt
    their squares the other way.
    """
    sw = spec.square_width
    c = spec.canvas_size // 2 - sw // 2
    pivot = (c, c)
    shape = RectShape(sw)

    canvas.write_style(shape, spec.palette, pivot)
    canvas.write_background(spec.palette.background)

    for i in range(spec.ring_count):
        r = spec.base_radius + i * spec.radius_step
        for placement in square_ring(r, sw, bool(i & 1)):
            canvas.write_shape(placement, shape, pivot)


def render_illusion_two(spec: IllusionTwoSpec, canvas: Canvas) -> None:
    """Draw the outer braid, then the smaller flipped inner braid."""
    c = spec.canvas_size // 2
    pivot = (c, c)
    outer_shape = EllipseShape(spec.long_radius, spec.short_radius)
    inner_shape = EllipseShape(spec.inner_braid_scale * spec.long_radius,
                               spec.inner_braid_scale * spec.short_radius)

    canvas.write_style(outer_shape, spec.palette, pivot)
    canvas.write_background(spec.palette.background)

    braids = [
        (outer_shape, spec.braid_radius, False),
        (inner_shape, spec.braid_radius - spec.inner_braid_offset, True),
    ]
    for shape, radius, flipped in braids:
        for ring in braid(radius, shape.ry, spec.ellipses_per_ring, flipped):
            for placement in ring:
                canvas.write_shape(placement, shape, pivot)


def render(spec: ImageSpec, canvas: Canvas) -> None:
    if isinstance(spec, IllusionOneSpec):
        render_illusion_one(spec, canvas)
    else:
        render_illusion_two(spec, canvas)


# -----------------------------
# File generation
# -----------------------------

def generate_one(spec: ImageSpec, out_dir: str = ".", png: bool = False,
                 author: str = DEFAULT_AUTHOR) -> Dict[str, str]:
    """
    Write one illusion to ``<out_dir>/<output_name>.svg`` (and ``.png``).

    Returns a dict of file paths. Raises ``OutputCreationError`` if the SVG
    cannot be written; an SVG is never left half written. A PNG that cannot
    be saved is logged and left out of the dict, the SVG is kept.
    """
    base = os.path.join(out_dir, spec.output_name)
    paths = {"svg": base + ".svg"}

    with SvgWriter(paths["svg"], spec.canvas_size, author=author) as svg:
        render(spec, svg)

    if png:
        png_path = base + ".png"
        try:
            with PngCanvas(png_path, spec.canvas_size) as canvas:
                render(spec, canvas)
        except OutputCreationError as exc:
            logger.warning("no preview for %s: %s", spec.output_name, exc)
        else:
            paths["png"] = png_path

    return paths


def generate_all(specs: Sequence[ImageSpec], out_dir: str = ".", png: bool = False,
                 author: str = DEFAULT_AUTHOR) -> List[Dict[str, str]]:
    """Generate every spec in order, skipping (and logging) those that cannot be written."""
    all_paths = []
    for spec in specs:
        try:
            all_paths.append(generate_one(spec, out_dir, png=png, author=author))
        except OutputCreationError as exc:
            logger.warning("skipping %s: %s", spec.output_name, exc)
    return all_paths


# -----------------------------
# Main / CLI
# -----------------------------

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Generate the concentric squares and braided ellipses optical illusions as SVG.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    p.add_argument("--out", type=str, default=".", help="Output folder")
    p.add_argument("--only", type=str, nargs="+", default=None,
                   help="Only generate these outputs (e.g. output1 output2a)")
    p.add_argument("--png", action="store_true", help="Also write a PNG preview of each image")
    p.add_argument("--author", type=check_comment_text, default=DEFAULT_AUTHOR, help="Name for the SVG author comment")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    specs = DEFAULT_SPECS
    if args.only:
        specs = [s for s in DEFAULT_SPECS if s.output_name in args.only]
        unknown = set(args.only) - {s.output_name for s in specs}
        if unknown:
            logger.warning("unknown outputs ignored: %s", ", ".join(sorted(unknown)))

    try:
        os.makedirs(args.out, exist_ok=True)
    except OSError as exc:
        logger.warning("cannot create output folder %s: %s", args.out, exc)
    all_paths = generate_all(specs, args.out, png=args.png, author=args.author)

    # Print a compact summary for the console
    print("Saved files:")
    for pack in all_paths:
        for v in pack.values():
            print(f"  {os.path.basename(v)}")
    print(f"\nOutput folder: {os.path.abspath(args.out)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
