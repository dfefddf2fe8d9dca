"""Tests for marker placement and the shared marker radius."""
from __future__ import annotations

import pytest

from fretchart.markers import place_marker, marker_radius, smallest_gap
from fretchart.types import Marker


def make_marker(**overrides) -> Marker:
    """Helper to build a marker."""
    defaults = dict(string=0, fret=1, label="F", note="F", fill="#ffcc00")
    defaults.update(overrides)
    return Marker(**defaults)


FRETS = [10.0, 19.0, 27.0]
STRINGS = [8.0, 40.0, 72.0]


class TestPlaceMarker:
    def test_open_string_marker_floats_above_nut(self):
        placed = place_marker(make_marker(string=1, fret=0), FRETS, STRINGS, 2, 15)
        assert placed.x == 40.0
        assert placed.y == -15

    def test_first_fret_is_centered_between_nut_and_fret_line(self):
        placed = place_marker(make_marker(fret=1), FRETS, STRINGS, 2, 15)
        assert placed.y == pytest.approx(6)

    def test_later_fret_is_centered_between_fret_lines(self):
        placed = place_marker(make_marker(string=2, fret=2), FRETS, STRINGS, 2, 15)
        assert placed.x == 72.0
        assert placed.y == pytest.approx(15.5)

    def test_keeps_the_source_marker(self):
        marker = make_marker(fret=3)
        assert place_marker(marker, FRETS, STRINGS, 2, 15).marker is marker


class TestSmallestGap:
    def test_includes_start_point(self):
        assert smallest_gap([10.0, 30.0], start=0.0) == 10.0

    def test_single_offset_without_start_has_no_gap(self):
        assert smallest_gap([5.0]) is None


class TestMarkerRadius:
    def test_tightest_fret_cell_wins(self):
        # Fret cells 10, 9, 8 -> (8 - 2) / 2 = 3, minus 1px clearance
        assert marker_radius(FRETS, STRINGS, 2, 2, 30, 15) == pytest.approx(2)

    def test_string_gap_wins_when_strings_are_crowded(self):
        frets = [100.0, 190.0]
        strings = [8.0, 18.0, 28.0]
        # (10 - 2) / 2 = 4, minus 1
        assert marker_radius(frets, strings, 2, 2, 30, 15) == pytest.approx(3)

    def test_open_string_clearance_to_nut_wins(self):
        frets = [100.0, 190.0]
        strings = [8.0, 100.0]
        assert marker_radius(frets, strings, 2, 2, 30, 6) == pytest.approx(5)

    def test_open_string_clearance_to_top_wins(self):
        frets = [100.0, 190.0]
        strings = [8.0, 100.0]
        assert marker_radius(frets, strings, 2, 2, 30, 26) == pytest.approx(3)

    def test_floors_at_one_pixel(self):
        frets = [1.0, 1.5, 1.9]
        strings = [0.0, 0.0]
        assert marker_radius(frets, strings, 2, 2, 30, 15) == 1

    def test_single_string_ignores_string_budget(self):
        frets = [100.0, 190.0]
        assert marker_radius(frets, [49.0], 2, 2, 30, 15) == pytest.approx(14)

    def test_single_fret_measures_from_nut(self):
        assert marker_radius([12.0], STRINGS, 2, 2, 30, 15) == pytest.approx(4)
