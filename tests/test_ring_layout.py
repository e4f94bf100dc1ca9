"""Tests for ring placement math."""

import math

import pytest

from ring_layout import (
    ColorClass,
    braid,
    braid_specs,
    ellipse_color,
    ellipse_ring,
    square_ring,
    square_ring_count,
)

D, L, N = ColorClass.DARK, ColorClass.LIGHT, ColorClass.NONE


@pytest.mark.parametrize("radius", [0.5, 1, 5, 37.5, 100, 172, 244, 316, 1000])
@pytest.mark.parametrize("width", [1, 7, 24, 50])
def test_square_count_even_and_at_least_two(radius, width):
    n = square_ring_count(radius, width)
    assert n % 2 == 0
    assert n >= 2


def test_square_count_rounds_down_to_even():
    # ceil(2*pi*100 / 36) = 18, already even
    assert square_ring_count(100, 24) == 18
    # ceil(2*pi*172 / 36) = 31 -> 30
    assert square_ring_count(172, 24) == 30
    assert square_ring_count(244, 24) == 42
    assert square_ring_count(316, 24) == 56


def test_square_ring_scenario():
    ring = square_ring(100, 24, parity=False)
    assert len(ring) == 18
    assert [p.color_class for p in ring[:4]] == [L, D, L, D]
    assert ring[0].x == pytest.approx(100)
    assert ring[0].y == pytest.approx(0)


def test_square_ring_even_spacing():
    ring = square_ring(244, 24, parity=True)
    n = len(ring)
    step = 360.0 / n
    for a, b in zip(ring, ring[1:]):
        assert b.rotation - a.rotation == pytest.approx(step)
    # the last square is one step short of closing the circle
    assert ring[-1].rotation - ring[0].rotation == pytest.approx(360.0 - step)
    for p in ring:
        assert math.hypot(p.x, p.y) == pytest.approx(244)


def test_square_parity_sets_tilt_only():
    left = square_ring(172, 24, parity=True)
    right = square_ring(172, 24, parity=False)
    assert left[0].rotation == pytest.approx(12.0)
    assert right[0].rotation == pytest.approx(-12.0)
    assert [p.color_class for p in left] == [p.color_class for p in right]


def test_ellipse_color_cycle():
    assert [ellipse_color(i, True) for i in range(8)] == [D, N, L, N] * 2
    assert [ellipse_color(i, False) for i in range(8)] == [L, N, D, N] * 2


def test_ellipse_ring_without_flip():
    ring = ellipse_ring(300, 12, 0.0, math.pi / 6, parity=True)
    assert [p.color_class for p in ring] == [D, N, L, N] * 3
    assert ring[0].rotation == pytest.approx(90.0)
    assert ring[3].rotation == pytest.approx(180.0)
    assert ring[3].x == pytest.approx(0, abs=1e-9)
    assert ring[3].y == pytest.approx(300)


def test_ellipse_ring_flip_inverts_after_index():
    k = 5
    plain = ellipse_ring(100, 16, 0.0, math.pi / 8, parity=True)
    flipped = ellipse_ring(100, 16, 0.0, math.pi / 8, parity=True, flip_index=k)

    assert plain[k + 1].color_class is L
    assert flipped[k + 1].color_class is D
    assert [p.color_class for p in flipped[:k + 1]] == [p.color_class for p in plain[:k + 1]]
    for p, q in zip(plain[k + 1:], flipped[k + 1:]):
        if p.color_class is N:
            assert q.color_class is N
        else:
            assert q.color_class is not p.color_class


def test_flip_index_beyond_ring_is_ignored():
    plain = ellipse_ring(50, 8, 0.0, math.pi / 4, parity=False)
    late = ellipse_ring(50, 8, 0.0, math.pi / 4, parity=False, flip_index=8)
    assert plain == late


def test_braid_specs():
    middle, inner, outer = braid_specs(300, 6, 36)
    assert (middle.radius, inner.radius, outer.radius) == (300, 294, 306)
    assert middle.count == inner.count == outer.count == 72
    assert middle.start_angle == pytest.approx(-math.pi / 2)
    assert inner.start_angle == pytest.approx(-math.pi / 2 + math.pi / 36)
    assert (middle.parity, inner.parity, outer.parity) == (True, True, False)
    assert (middle.flip_index, inner.flip_index, outer.flip_index) == (None, 35, 34)


def test_flipped_braid_starts_at_bottom():
    middle, _, _ = braid_specs(236, 4.8, 36, flipped=True)
    assert middle.start_angle == pytest.approx(math.pi / 2)
    first = braid(236, 4.8, 36, flipped=True)[0][0]
    assert first.y == pytest.approx(236)
    assert first.color_class is D


def test_braid_slot_count():
    rings = braid(300, 6, 36)
    assert len(rings) == 3
    slots = [p for ring in rings for p in ring]
    assert len(slots) == 216
    gaps = [p for p in slots if p.color_class is N]
    assert len(gaps) == 108


@pytest.mark.parametrize("n", [4, 10, 36])
def test_braid_slot_count_any_size(n):
    assert sum(len(ring) for ring in braid(200, 5, n)) == 3 * 2 * n
