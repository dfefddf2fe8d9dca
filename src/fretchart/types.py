from __future__ import annotations

from dataclasses import dataclass, field

# ============================================================================
# Instrument inputs -- what the caller wants drawn
# ============================================================================

# Known instrument kinds. Any other string is accepted and drawn with the
# standard policy (see instruments.py).
Instrument = str


@dataclass(frozen=True, slots=True)
class Tuning:
    instrument: Instrument
    # Open-string pitches, lowest-index string drawn leftmost
    notes: tuple[str, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.notes, tuple):
            object.__setattr__(self, "notes", tuple(self.notes))
        if len(self.notes) == 0:
            raise ValueError(f"Tuning for {self.instrument!r} has no strings")

    @property
    def string_count(self) -> int:
        return len(self.notes)


@dataclass(frozen=True, slots=True)
class Marker:
    string: int
    fret: int
    label: str
    note: str
    fill: str

    def __post_init__(self) -> None:
        if self.string < 0:
            raise ValueError(f"Marker string index must be >= 0, got {self.string}")
        if self.fret < 0:
            raise ValueError(f"Marker fret must be >= 0, got {self.fret}")


@dataclass(frozen=True, slots=True)
class ViewportSize:
    width: float
    height: float

    @property
    def is_valid(self) -> bool:
        return self.width > 0 and self.height > 0


# ============================================================================
# Positioned fretboard -- after layout, ready for SVG rendering
#
# Coordinates are relative to the top-left corner of the fretboard (the nut
# sits at y=0). `origin` is where that corner lands inside the viewport.
# ============================================================================


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class PositionedMarker:
    # The caller's Marker object, unmodified, handed back on activation
    marker: Marker
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class FretNumberLabel:
    fret: int
    y: float


@dataclass(slots=True)
class FretboardLayout:
    width: float
    height: float
    origin: Point = field(default_factory=lambda: Point(0, 0))
    board_width: float = 0
    board_height: float = 0
    fret_offsets: list[float] = field(default_factory=list)
    string_offsets: list[float] = field(default_factory=list)
    nut_width: float = 0
    fret_width: float = 0
    string_width: float = 0
    marker_radius: float = 0
    markers: list[PositionedMarker] = field(default_factory=list)
    fret_numbers: list[FretNumberLabel] = field(default_factory=list)
    # Masked-out region, None when the instrument has no cutaway
    cutaway: list[Point] | None = None

    @property
    def is_empty(self) -> bool:
        return not self.fret_offsets


# ============================================================================
# Render options -- user-facing configuration
# ============================================================================


@dataclass(slots=True)
class RenderOptions:
    # Layout overrides (None = value from styles.LAYOUT)
    min_margin: float | None = None
    top_margin: float | None = None
    bottom_margin: float | None = None
    max_string_spacing: float | None = None
    string_inset: float | None = None
    nut_width: float | None = None
    fret_width: float | None = None
    string_width: float | None = None
    open_string_offset: float | None = None
    # Appearance
    theme: str | None = None
    board: str | None = None
    nut: str | None = None
    fret: str | None = None
    string: str | None = None
    text: str | None = None
    bg: str | None = None
    font: str | None = None
    transparent: bool | None = None
