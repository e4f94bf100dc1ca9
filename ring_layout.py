#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Ring layout — where each square/ellipse of an illusion goes
===========================================================

Every shape in both illusions sits on a circle around the canvas pivot. This
module computes, for one circle at a time, the position, orientation and
color class of each shape. Nothing here touches a file; the results are
handed to a canvas (see ``svg_writer`` and ``png_preview``).

Square rings (illusion 1)
-------------------------
Squares are spaced about half a square width apart, tilted 12 degrees away
from the tangent, and alternate light/dark by index. The count is rounded
down to an even number so the alternation closes around the ring.

Ellipse rings (illusion 2)
--------------------------
Ellipses lie tangent to the circle. Every ring has twice as many slots as
ellipses; odd slots are gaps. A *braid* is three such rings (middle, inner,
outer) offset by the short ellipse radius, with the color order of the inner
and outer rings flipped halfway round.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)

SQUARE_TILT_DEG = 12.0   # tilt away from the tangent, sign set by parity
SQUARE_SPACING = 1.5     # center-to-center arc length, in square widths


class ColorClass(enum.Enum):
    """Visual class of one shape slot; the value is the SVG class name."""

    DARK = "b"
    LIGHT = "w"
    NONE = None


@dataclass(frozen=True)
class ShapePlacement:
    """Position (relative to the ring center), rotation in degrees and color."""

    x: float
    y: float
    rotation: float
    color_class: ColorClass


@dataclass(frozen=True)
class RingSpec:
    """One ring of ellipse slots."""

    radius: float
    count: int
    start_angle: float
    angle_step: float
    parity: bool
    flip_index: Optional[int] = None


# -----------------------------
# Square rings
# -----------------------------

def square_ring_count(radius: float, square_width: float) -> int:
    """
    Number of squares that fit on a circle, rounded down to an even number.

    Parameters
    ----------
    radius : float
        Circle radius in pixels.
    square_width : float
        Square side in pixels.

    Returns
    -------
    n : int
        ``ceil(2*pi*r / (1.5*sw))`` with the low bit cleared, never below 2.
    """
    n = math.ceil(2 * math.pi * radius / (SQUARE_SPACING * square_width)) & ~1
    return max(n, 2)


def square_ring(radius: float, square_width: float, parity: bool) -> List[ShapePlacement]:
    """
    Evenly spaced tilted squares around one circle.

    ``parity`` only picks the tilt direction; color alternates by index,
    light at even indices and dark at odd ones.
    """
    n = square_ring_count(radius, square_width)
    theta = np.arange(n) * (2 * np.pi / n)
    xs = radius * np.cos(theta)
    ys = radius * np.sin(theta)
    phis = SQUARE_TILT_DEG * (1 if parity else -1) + np.degrees(theta)

    logger.debug("square ring r=%.1f sw=%s -> %d squares", radius, square_width, n)
    return [
        ShapePlacement(float(xs[i]), float(ys[i]), float(phis[i]),
                       ColorClass.DARK if i & 1 else ColorClass.LIGHT)
        for i in range(n)
    ]


# -----------------------------
# Ellipse rings
# -----------------------------

def ellipse_color(i: int, parity: bool) -> ColorClass:
    """Four-phase color cycle: parity true gives dark, gap, light, gap."""
    j = i % 4
    if j == 0:
        return ColorClass.DARK if parity else ColorClass.LIGHT
    if j == 2:
        return ColorClass.LIGHT if parity else ColorClass.DARK
    return ColorClass.NONE


def ellipse_ring(radius: float, count: int, start_angle: float, angle_step: float,
                 parity: bool, flip_index: Optional[int] = None) -> List[ShapePlacement]:
    """
    Ellipse slots around one circle, long axis along the tangent.

    Parameters
    ----------
    radius : float
        Circle radius in pixels.
    count : int
        Number of slots, gaps included.
    start_angle, angle_step : float
        Angle of slot 0 and the delta between slots, in radians.
    parity : bool
        True if slot 0 is dark, False if light.
    flip_index : int, optional
        Slot after which the parity inverts for the rest of the ring.

    Returns
    -------
    list of ShapePlacement
        ``count`` entries; gaps carry ``ColorClass.NONE``.
    """
    theta = start_angle + np.arange(count) * angle_step
    xs = radius * np.cos(theta)
    ys = radius * np.sin(theta)
    phis = 90.0 + np.degrees(theta)

    placements = []
    for i in range(count):
        placements.append(ShapePlacement(float(xs[i]), float(ys[i]), float(phis[i]),
                                         ellipse_color(i, parity)))
        if i == flip_index:
            parity = not parity
    return placements


def ring_from_spec(spec: RingSpec) -> List[ShapePlacement]:
    return ellipse_ring(spec.radius, spec.count, spec.start_angle, spec.angle_step,
                        spec.parity, spec.flip_index)


# -----------------------------
# Braids (three rings)
# -----------------------------

def braid_specs(radius: float, short_radius: float, n: int,
                flipped: bool = False) -> Tuple[RingSpec, RingSpec, RingSpec]:
    """
    Middle, inner and outer ring specs for one braid of ``n`` ellipses per ring.

    The middle ring starts with a dark ellipse at the top (bottom when
    ``flipped``). The inner and outer rings are offset half a slot and by the
    short radius; each flips its color order near the opposite side so that
    gaps line up and the braid appears to twist.
    """
    dtheta = math.pi / n
    theta = (math.pi if flipped else -math.pi) / 2
    m = 2 * n

    middle = RingSpec(radius, m, theta, dtheta, True)
    inner = RingSpec(radius - short_radius, m, theta + dtheta, dtheta, True, m // 2 - 1)
    outer = RingSpec(radius + short_radius, m, theta + dtheta, dtheta, False, m // 2 - 2)
    return middle, inner, outer


def braid(radius: float, short_radius: float, n: int,
          flipped: bool = False) -> List[List[ShapePlacement]]:
    """Placements for one braid, in drawing order (middle, inner, outer)."""
    rings = [ring_from_spec(spec) for spec in braid_specs(radius, short_radius, n, flipped)]
    logger.debug("braid r=%.1f n=%d flipped=%s -> %d slots",
                 radius, n, flipped, sum(len(ring) for ring in rings))
    return rings
