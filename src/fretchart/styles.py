from __future__ import annotations

# ============================================================================
# Layout constants (px), overridable per call via RenderOptions
# ============================================================================

LAYOUT = {
    # Minimum horizontal gap between the fretboard and the viewport edge
    "min_margin": 20,
    # Room above the nut for open-string markers
    "top_margin": 30,
    "bottom_margin": 10,
    # Fretboard never grows wider than this per string
    "max_string_spacing": 30,
    # Gap between the board edge and the outermost strings
    "string_inset": 8,
    "nut_width": 4,
    "fret_width": 2,
    "string_width": 2,
    # Distance from the nut up to the center of an open-string marker
    "open_string_offset": 15,
}

# Frets that get a numeric inlay label, when rendered
INLAY_FRETS = (3, 5, 7, 9, 12)

# Semitones per octave in twelve-tone equal temperament
SEMITONES = 12

# ============================================================================
# Text
# ============================================================================

FONT_SIZES = {
    "fret_number": 12,
}

FONT_WEIGHTS = {
    "fret_number": 500,
    "marker_label": 600,
}

# Marker labels are stretched to this fraction of the marker diameter
MARKER_LABEL_FILL = 0.85

STROKE_WIDTHS = {
    "marker": 1,
}

TEXT_BASELINE_SHIFT = "0.35em"


def resolve_layout(options: object | None) -> dict[str, float]:
    """Merge non-None layout overrides from ``options`` onto LAYOUT."""
    merged = dict(LAYOUT)
    if options is None:
        return merged
    for key in LAYOUT:
        value = getattr(options, key, None)
        if value is not None:
            merged[key] = value
    return merged
