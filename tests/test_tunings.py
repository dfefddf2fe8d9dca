"""Tests for tuning presets, note naming, and the input value types."""
from __future__ import annotations

import pytest

from fretchart.tunings import TUNINGS, get_tuning, note_at, pitch_class, fretted_markers
from fretchart.types import Marker, Tuning


class TestTuning:
    def test_list_notes_become_a_tuple(self):
        tuning = Tuning("guitar", ["E", "A", "D"])
        assert tuning.notes == ("E", "A", "D")
        assert tuning.string_count == 3

    def test_empty_tuning_is_rejected(self):
        with pytest.raises(ValueError, match="no strings"):
            Tuning("guitar", ())

    def test_is_immutable(self):
        tuning = Tuning("guitar", ("E",))
        with pytest.raises(AttributeError):
            tuning.instrument = "banjo"


class TestMarker:
    @pytest.mark.parametrize("string,fret", [(-1, 0), (0, -1)])
    def test_negative_coordinates_are_rejected(self, string, fret):
        with pytest.raises(ValueError):
            Marker(string=string, fret=fret, label="", note="C", fill="white")


class TestPresets:
    def test_guitar_standard(self):
        tuning = get_tuning("guitar-standard")
        assert tuning.instrument == "guitar"
        assert tuning.string_count == 6

    def test_banjo_lists_short_string_first(self):
        for name, tuning in TUNINGS.items():
            if tuning.instrument == "banjo":
                assert tuning.notes[0] == "G4", name
                assert tuning.string_count == 5

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown tuning 'lute'"):
            get_tuning("lute")


class TestNoteNaming:
    @pytest.mark.parametrize(
        "note,expected",
        [("E2", "E"), ("c", "C"), ("F#3", "F#"), ("Bb", "A#"), ("Eb4", "D#")],
    )
    def test_pitch_class(self, note, expected):
        assert pitch_class(note) == expected

    def test_invalid_note(self):
        with pytest.raises(ValueError, match="Not a note name"):
            pitch_class("H2")

    @pytest.mark.parametrize(
        "open_note,fret,expected",
        [("E2", 0, "E"), ("E2", 3, "G"), ("B3", 1, "C"), ("G4", 12, "G"), ("Bb", 2, "C")],
    )
    def test_note_at(self, open_note, fret, expected):
        assert note_at(open_note, fret) == expected


class TestFrettedMarkers:
    def test_labels_with_sounding_note(self):
        markers = fretted_markers(get_tuning("guitar-standard"), [(0, 3), (1, 2)], fill="gold")
        assert markers == [
            Marker(string=0, fret=3, label="G", note="G", fill="gold"),
            Marker(string=1, fret=2, label="B", note="B", fill="gold"),
        ]

    def test_rejects_missing_string(self):
        with pytest.raises(ValueError, match="out of range"):
            fretted_markers(get_tuning("banjo-open-g"), [(5, 0)])
