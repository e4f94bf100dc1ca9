#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Minimal SVG writer for the illusion images.

Each image is one file: XML declaration, ``<svg>`` tag, an author comment, a
``<style>`` block holding the two color classes, a background rectangle and
one ``<g transform=...>`` group per shape. Shapes are written as they are
computed, so nothing is buffered beyond the open file.

Usage::

    with SvgWriter("out/output1.svg", 800) as svg:
        svg.write_style(shape, palette, pivot)
        svg.write_background(palette.background)
        for p in placements:
            svg.write_shape(p, shape, pivot)

Leaving the ``with`` block normally closes the ``<svg>`` tag. Leaving it on
an exception, or failing to write the closing tag (disk full), deletes the
partial file; I/O failures surface as ``OutputCreationError``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Protocol, Tuple, Union

from ring_layout import ColorClass, ShapePlacement

logger = logging.getLogger(__name__)

STROKE_WIDTH = 3
DEFAULT_AUTHOR = "ring-illusions"


def fmt(v: float) -> str:
    """One decimal place, with -0.0 printed as 0.0."""
    return f"{round(v, 1) + 0.0:.1f}"


class OutputCreationError(OSError):
    """The output file could not be created or fully written."""


@dataclass(frozen=True)
class Palette:
    dark: str
    light: str
    background: str


# -----------------------------
# Shape primitives
# -----------------------------

@dataclass(frozen=True)
class RectShape:
    """Stroked square; its top-left corner is parked on the pivot by CSS."""

    width: int
    filled = False

    @property
    def offset(self) -> int:
        # translate to the square's center rather than its corner
        return self.width // 2

    def style_rules(self, palette: Palette, pivot: Tuple[int, int]) -> Dict[str, str]:
        cx, cy = pivot
        return {
            "rect": f"fill:none;stroke-width:{STROKE_WIDTH}",
            "rect.b": f"x:{cx};y:{cy};stroke:{palette.dark};",
            "rect.w": f"x:{cx};y:{cy};stroke:{palette.light};",
        }

    def element(self, css_class: str) -> str:
        return f'<rect width="{self.width}" height="{self.width}" class="{css_class}"/>'


@dataclass(frozen=True)
class EllipseShape:
    """Filled ellipse centered on the pivot by CSS."""

    rx: float
    ry: float
    filled = True
    offset = 0

    def style_rules(self, palette: Palette, pivot: Tuple[int, int]) -> Dict[str, str]:
        cx, cy = pivot
        return {
            "ellipse": f"fill:none;stroke-width:{STROKE_WIDTH}",
            "ellipse.b": f"cx:{cx};cy:{cy};stroke:none;fill:{palette.dark};",
            "ellipse.w": f"cx:{cx};cy:{cy};stroke:none;fill:{palette.light};",
        }

    def element(self, css_class: str) -> str:
        return f'<ellipse rx="{self.rx:.1f}" ry="{self.ry:.1f}" class="{css_class}"/>'


Shape = Union[RectShape, EllipseShape]


class Canvas(Protocol):
    """Anything a renderer can draw an illusion onto (SVG file, PNG preview)."""

    def write_style(self, shape: Shape, palette: Palette, pivot: Tuple[int, int]) -> None: ...

    def write_background(self, color: str) -> None: ...

    def write_shape(self, placement: ShapePlacement, shape: Shape, pivot: Tuple[int, int]) -> None: ...


def check_comment_text(text: str) -> str:
    """Return ``text`` if it can sit inside an XML comment, else raise ValueError."""
    if "--" in text or text.endswith("-"):
        raise ValueError(f"comment text may not contain '--' or end with '-': {text!r}")
    return text


# -----------------------------
# Writer
# -----------------------------

class SvgWriter:
    """Scoped SVG file: opened on ``__enter__``, finalized or removed on exit."""

    def __init__(self, path: str, size: int, author: str = DEFAULT_AUTHOR):
        self.path = path
        self.size = size
        self.author = check_comment_text(author)
        self.shapes_written = 0
        self._fh = None

    def __enter__(self) -> "SvgWriter":
        try:
            self._fh = open(self.path, "w", encoding="utf-8", newline="\n")
        except OSError as exc:
            raise OutputCreationError(f"cannot create {self.path}: {exc}") from exc

        try:
            self._write_header()
        except OSError as exc:
            self._discard()
            raise OutputCreationError(f"cannot write {self.path}: {exc}") from exc
        except BaseException:
            self._discard()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is not None:
            logger.debug("discarding partial %s", self.path)
            self._discard()
            if issubclass(exc_type, OSError) and not issubclass(exc_type, OutputCreationError):
                raise OutputCreationError(f"cannot write {self.path}: {exc}") from exc
            return False

        try:
            self._fh.write("</svg>\n")
            self._fh.close()
        except OSError as err:
            self._discard()
            raise OutputCreationError(f"cannot finish {self.path}: {err}") from err
        self._fh = None
        logger.debug("wrote %s (%d shapes)", self.path, self.shapes_written)
        return False

    def _discard(self) -> None:
        fh, self._fh = self._fh, None
        try:
            fh.close()
        except OSError as err:
            # the write that failed is what gets reported
            logger.debug("close failed while discarding %s: %s", self.path, err)
        finally:
            os.remove(self.path)

    def _write_header(self) -> None:
        w = self.size
        self._fh.write('<?xml version="1.0" encoding="UTF-8"?>\n')
        self._fh.write(f'<svg width="{w}" height="{w}" viewBox="0 0 {w} {w}" '
                       'xmlns="http://www.w3.org/2000/svg">\n')
        self._fh.write(f"<!-- Created by {self.author} -->\n")

    def write_style(self, shape: Shape, palette: Palette, pivot: Tuple[int, int]) -> None:
        rules = shape.style_rules(palette, pivot)
        body = "".join(f"{selector}{{{props}}}" for selector, props in rules.items())
        self._fh.write(f"<style>{body}</style>\n")

    def write_background(self, color: str) -> None:
        w = self.size
        self._fh.write(f'<rect width="{w}" height="{w}" style="fill:{color}"/>\n')

    def write_shape(self, placement: ShapePlacement, shape: Shape, pivot: Tuple[int, int]) -> None:
        """Append one translated-then-rotated shape group; gaps write nothing."""
        if placement.color_class is ColorClass.NONE:
            return
        cx, cy = pivot
        tx = placement.x + shape.offset
        ty = placement.y + shape.offset
        self._fh.write(f'<g transform="translate({fmt(tx)} {fmt(ty)})'
                       f'rotate({fmt(placement.rotation)} {cx} {cy})">'
                       f"{shape.element(placement.color_class.value)}</g>\n")
        self.shapes_written += 1
