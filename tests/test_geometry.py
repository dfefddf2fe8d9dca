"""Tests for fret and string geometry -- scale length, fret offsets, string offsets."""
from __future__ import annotations

import math

import pytest

from fretchart.geometry import scale_length, fret_positions, string_positions


def gaps(offsets: list[float], start: float = 0.0) -> list[float]:
    points = [start] + offsets
    return [b - a for a, b in zip(points, points[1:])]


# ============================================================================
# Scale length
# ============================================================================


class TestScaleLength:
    def test_twelfth_fret_is_half_the_scale(self):
        assert scale_length(12, 100) == pytest.approx(200)

    def test_single_fret_is_finite_and_positive(self):
        scale = scale_length(1, 500)
        assert math.isfinite(scale)
        assert scale > 500

    @pytest.mark.parametrize("fret_count", [1, 2, 5, 12, 24, 36])
    def test_last_fret_lands_on_board_height(self, fret_count):
        height = 437.5
        scale = scale_length(fret_count, height)
        assert scale * (1 - 2 ** (-fret_count / 12)) == pytest.approx(height)

    def test_rejects_zero_frets(self):
        with pytest.raises(ValueError, match="fret_count"):
            scale_length(0, 100)

    def test_rejects_non_positive_height(self):
        with pytest.raises(ValueError, match="board_height"):
            scale_length(12, 0)


# ============================================================================
# Fret offsets
# ============================================================================


class TestFretPositions:
    @pytest.mark.parametrize("fret_count", [1, 2, 3, 4, 5, 12, 17, 22, 24])
    def test_returns_one_increasing_offset_per_fret(self, fret_count):
        height = 560
        offsets = fret_positions(fret_count, scale_length(fret_count, height), 2)
        assert len(offsets) == fret_count
        assert all(b > a for a, b in zip(offsets, offsets[1:]))
        assert offsets[0] > 0
        assert offsets[-1] <= height

    @pytest.mark.parametrize("fret_count", [2, 3, 12, 17, 24])
    def test_gaps_shrink_toward_the_bridge(self, fret_count):
        offsets = fret_positions(fret_count, scale_length(fret_count, 560), 2)
        spacing = gaps(offsets)
        assert all(b < a for a, b in zip(spacing, spacing[1:]))

    def test_last_fret_line_ends_on_board_bottom(self):
        offsets = fret_positions(12, scale_length(12, 100), 2)
        assert offsets[-1] == pytest.approx(98)
        assert offsets[-1] + 2 == pytest.approx(100)

    def test_single_fret(self):
        offsets = fret_positions(1, scale_length(1, 50), 2)
        assert offsets == [pytest.approx(48)]

    def test_zero_width_fret_lines_sit_on_ideal_positions(self):
        scale = scale_length(12, 100)
        offsets = fret_positions(12, scale, 0)
        assert offsets[6] == pytest.approx(scale * (1 - 2 ** (-7 / 12)))

    def test_line_thicker_than_board_is_not_shifted(self):
        offsets = fret_positions(2, scale_length(2, 1), 5)
        assert offsets[-1] == pytest.approx(1)
        assert offsets[0] > 0

    def test_rejects_zero_frets(self):
        with pytest.raises(ValueError):
            fret_positions(0, 100, 2)


# ============================================================================
# String offsets
# ============================================================================


class TestStringPositions:
    def test_spreads_strings_evenly_between_insets(self):
        offsets = string_positions(6, 180, 2, 8)
        assert len(offsets) == 6
        assert offsets[0] == pytest.approx(8)
        assert offsets[-1] == pytest.approx(170)
        spacing = gaps(offsets[1:], start=offsets[0])
        assert all(g == pytest.approx(32.4) for g in spacing)

    @pytest.mark.parametrize("string_count", [1, 2, 4, 5, 6, 7, 12])
    def test_strictly_increasing_within_insets(self, string_count):
        width, inset = 400, 8
        offsets = string_positions(string_count, width, 2, inset)
        assert len(offsets) == string_count
        assert all(b > a for a, b in zip(offsets, offsets[1:]))
        assert offsets[0] >= inset
        assert offsets[-1] <= width - inset

    def test_single_string_is_centered(self):
        assert string_positions(1, 100, 2, 8) == [49.0]

    def test_narrow_board_shrinks_insets(self):
        offsets = string_positions(2, 14, 2, 8)
        assert offsets == [pytest.approx(6), pytest.approx(6)]

    def test_board_without_room_collapses_strings_onto_center(self):
        offsets = string_positions(6, 10, 2, 8)
        assert offsets == [pytest.approx(4)] * 6

    @pytest.mark.parametrize("width", [0, -25, 1, 3])
    def test_degenerate_widths_never_go_negative_or_nan(self, width):
        offsets = string_positions(5, width, 2, 8)
        assert len(offsets) == 5
        assert all(math.isfinite(x) and x >= 0 for x in offsets)
        assert all(b >= a for a, b in zip(offsets, offsets[1:]))

    def test_rejects_zero_strings(self):
        with pytest.raises(ValueError, match="string_count"):
            string_positions(0, 100, 2, 8)
