#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Raster preview of an illusion, drawn with Pillow.

``PngCanvas`` accepts the same calls as ``svg_writer.SvgWriter`` and applies
the same ``translate(...) rotate(phi cx cy)`` transform to each shape, so the
PNG matches what an SVG viewer shows. Squares are drawn as outlines, ellipses
as filled polygons. The image is saved when the ``with`` block exits cleanly.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

import numpy as np
from PIL import Image, ImageColor, ImageDraw

from ring_layout import ColorClass, ShapePlacement
from svg_writer import STROKE_WIDTH, OutputCreationError, Palette, Shape

logger = logging.getLogger(__name__)

ELLIPSE_SEGMENTS = 48


def rotation_matrix(phi_deg: float) -> np.ndarray:
    """SVG rotation (y axis pointing down, positive angles clockwise on screen)."""
    a = np.radians(phi_deg)
    return np.array([[np.cos(a), -np.sin(a)],
                     [np.sin(a), np.cos(a)]])


def shape_outline(shape: Shape) -> np.ndarray:
    """
    Outline points of a primitive, relative to the rotation pivot.

    A rect sits with its top-left corner on the pivot; an ellipse is centered
    on it (both mirror the CSS rules written into the SVG).
    """
    if shape.filled:
        t = np.linspace(0.0, 2 * np.pi, ELLIPSE_SEGMENTS, endpoint=False)
        return np.stack([shape.rx * np.cos(t), shape.ry * np.sin(t)], axis=1)
    w = shape.width
    return np.array([[0, 0], [w, 0], [w, w], [0, w]], dtype=float)


def transformed_outline(placement: ShapePlacement, shape: Shape,
                        pivot: Tuple[int, int]) -> List[Tuple[float, float]]:
    pts = shape_outline(shape) @ rotation_matrix(placement.rotation).T
    pts += np.asarray(pivot, dtype=float)
    pts += (placement.x + shape.offset, placement.y + shape.offset)
    return [(float(x), float(y)) for x, y in pts]


class PngCanvas:
    """Pillow-backed canvas saved to ``path`` on a clean exit."""

    def __init__(self, path: str, size: int):
        self.path = path
        self.size = size
        self.image = None
        self._draw = None
        self._colors = {}

    def __enter__(self) -> "PngCanvas":
        self.image = Image.new("RGB", (self.size, self.size), (255, 255, 255))
        self._draw = ImageDraw.Draw(self.image)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            try:
                self.image.save(self.path)
            except OSError as exc:
                raise OutputCreationError(f"cannot create {self.path}: {exc}") from exc
            logger.debug("wrote %s", self.path)
        return False

    def write_style(self, shape: Shape, palette: Palette, pivot: Tuple[int, int]) -> None:
        self._colors = {
            ColorClass.DARK: ImageColor.getrgb(palette.dark),
            ColorClass.LIGHT: ImageColor.getrgb(palette.light),
        }

    def write_background(self, color: str) -> None:
        self._draw.rectangle([0, 0, self.size - 1, self.size - 1], fill=ImageColor.getrgb(color))

    def write_shape(self, placement: ShapePlacement, shape: Shape, pivot: Tuple[int, int]) -> None:
        if placement.color_class is ColorClass.NONE:
            return
        color = self._colors[placement.color_class]
        pts = transformed_outline(placement, shape, pivot)
        if shape.filled:
            self._draw.polygon(pts, fill=color)
        else:
            self._draw.line(pts + pts[:1], fill=color, width=STROKE_WIDTH, joint="curve")
