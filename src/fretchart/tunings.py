from __future__ import annotations

import re
from collections.abc import Iterable

from .types import Tuning, Marker

# ============================================================================
# Tuning presets and note naming
#
# Notes are pitch classes with an optional octave ("G", "D#3"). Banjo
# tunings list the short fifth string first.
# ============================================================================

CHROMATIC = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

_FLATS = {"Db": "C#", "Eb": "D#", "Gb": "F#", "Ab": "G#", "Bb": "A#"}

_NOTE_RE = re.compile(r"^([A-Ga-g])([#b]?)(-?\d+)?$")

TUNINGS: dict[str, Tuning] = {
    "guitar-standard": Tuning("guitar", ("E2", "A2", "D3", "G3", "B3", "E4")),
    "guitar-drop-d": Tuning("guitar", ("D2", "A2", "D3", "G3", "B3", "E4")),
    "guitar-dadgad": Tuning("guitar", ("D2", "A2", "D3", "G3", "A3", "D4")),
    "banjo-open-g": Tuning("banjo", ("G4", "D3", "G3", "B3", "D4")),
    "banjo-double-c": Tuning("banjo", ("G4", "C3", "G3", "C4", "D4")),
}


def get_tuning(name: str) -> Tuning:
    try:
        return TUNINGS[name]
    except KeyError:
        raise ValueError(
            f"Unknown tuning {name!r}; expected one of {', '.join(sorted(TUNINGS))}"
        ) from None


def pitch_class(note: str) -> str:
    """Sharp-spelled pitch class of ``note`` ("Bb3" -> "A#")."""
    match = _NOTE_RE.match(note.strip())
    if not match:
        raise ValueError(f"Not a note name: {note!r}")
    name = match.group(1).upper() + match.group(2)
    return _FLATS.get(name, name)


def note_at(open_note: str, fret: int) -> str:
    """Pitch class sounding at ``fret`` on a string tuned to ``open_note``."""
    index = CHROMATIC.index(pitch_class(open_note))
    return CHROMATIC[(index + fret) % len(CHROMATIC)]


def fretted_markers(
    tuning: Tuning,
    positions: Iterable[tuple[int, int]],
    fill: str = "white",
) -> list[Marker]:
    """Markers labelled with their note for each (string, fret) position."""
    markers: list[Marker] = []
    for string, fret in positions:
        if not 0 <= string < tuning.string_count:
            raise ValueError(
                f"String {string} out of range for a {tuning.string_count}-string tuning"
            )
        note = note_at(tuning.notes[string], fret)
        markers.append(Marker(string=string, fret=fret, label=note, note=note, fill=fill))
    return markers
