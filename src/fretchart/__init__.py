"""fretchart: lay out and render fretted-instrument diagrams as SVG."""

from __future__ import annotations

from collections.abc import Iterable

from .types import (
    Tuning,
    Marker,
    ViewportSize,
    RenderOptions,
    FretboardLayout,
    PositionedMarker,
    FretNumberLabel,
    Point,
)
from .theme import FretboardColors, THEMES, DEFAULTS, resolve_colors
from .geometry import scale_length, fret_positions, string_positions
from .instruments import (
    InstrumentPolicy,
    StandardPolicy,
    ShortStringPolicy,
    policy_for,
    register_instrument,
)
from .layout import layout_fretboard
from .renderer import render_svg, render_with_options
from .viewport import SizeProvider, FixedSize, ObservedSize
from .chart import FretboardChart
from .tunings import TUNINGS, get_tuning, note_at, fretted_markers

__version__ = "0.1.0"

__all__ = [
    "render_fretboard",
    "layout_fretboard",
    "render_svg",
    "render_with_options",
    "scale_length",
    "fret_positions",
    "string_positions",
    "Tuning",
    "Marker",
    "ViewportSize",
    "RenderOptions",
    "FretboardLayout",
    "PositionedMarker",
    "FretNumberLabel",
    "Point",
    "FretboardColors",
    "THEMES",
    "DEFAULTS",
    "InstrumentPolicy",
    "StandardPolicy",
    "ShortStringPolicy",
    "policy_for",
    "register_instrument",
    "SizeProvider",
    "FixedSize",
    "ObservedSize",
    "FretboardChart",
    "TUNINGS",
    "get_tuning",
    "note_at",
    "fretted_markers",
]


def render_fretboard(
    tuning: Tuning,
    fret_count: int,
    markers: Iterable[Marker],
    width: float,
    height: float,
    options: RenderOptions | None = None,
) -> str:
    """Lay out and render a fretboard diagram to an SVG string."""
    positioned = layout_fretboard(tuning, fret_count, markers, width, height, options)
    return render_with_options(positioned, options)
