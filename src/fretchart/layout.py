from __future__ import annotations

import logging
from collections.abc import Iterable

from .types import (
    Tuning,
    Marker,
    RenderOptions,
    FretboardLayout,
    FretNumberLabel,
    Point,
)
from .styles import INLAY_FRETS, resolve_layout
from .geometry import scale_length, fret_positions, string_positions
from .instruments import policy_for
from .markers import MIN_MARKER_RADIUS, place_marker, marker_radius

logger = logging.getLogger(__name__)

# ============================================================================
# Fretboard layout engine
#
# Pure function of (tuning, fret count, markers, viewport size). Steps:
#   1. Drop markers the instrument can't show
#   2. Size the fretboard and center it horizontally
#   3. Fret and string offsets
#   4. Shared marker radius, clamped against every clearance budget
#   5. Fret-number inlays that fall inside the rendered range
#   6. Instrument cutaway, if any
#   7. Place the visible markers
#
# A viewport with no usable area yields an empty layout (nothing to draw).
# ============================================================================


def layout_fretboard(
    tuning: Tuning,
    fret_count: int,
    markers: Iterable[Marker],
    width: float,
    height: float,
    options: RenderOptions | None = None,
) -> FretboardLayout:
    """Lay out a fretboard diagram inside a ``width`` x ``height`` viewport.

    Returns a fully positioned layout ready for SVG rendering.
    """
    if fret_count < 1:
        raise ValueError(f"fret_count must be >= 1, got {fret_count}")
    markers = list(markers)
    for m in markers:
        if m.string >= tuning.string_count:
            raise ValueError(
                f"Marker on string {m.string} but tuning has "
                f"{tuning.string_count} strings"
            )

    cfg = resolve_layout(options)
    policy = policy_for(tuning.instrument)

    if width <= 0 or height <= 0:
        logger.debug("No drawable area in %sx%s viewport, rendering nothing", width, height)
        return FretboardLayout(width=max(width, 0), height=max(height, 0))

    board_height = height - cfg["top_margin"] - cfg["bottom_margin"]
    if board_height <= 0:
        # Margins eat the whole viewport: nothing to draw, radius still clamped
        logger.debug("Margins leave no room in %sx%s viewport, rendering nothing", width, height)
        return FretboardLayout(width=width, height=height, marker_radius=MIN_MARKER_RADIUS)

    # 1. Instrument visibility
    visible = [m for m in markers if policy.is_marker_visible(m)]

    # 2. Fretboard rectangle
    board_width = max(
        0.0,
        min(
            width - 2 * cfg["min_margin"],
            tuning.string_count * cfg["max_string_spacing"],
        ),
    )
    left_margin = (width - board_width) / 2

    # 3. Frets and strings
    scale = scale_length(fret_count, board_height)
    frets = fret_positions(fret_count, scale, cfg["fret_width"])
    strings = string_positions(
        tuning.string_count,
        board_width,
        cfg["string_width"],
        cfg["string_inset"],
    )

    # 4. Shared marker radius
    radius = marker_radius(
        frets,
        strings,
        cfg["fret_width"],
        cfg["string_width"],
        cfg["top_margin"],
        cfg["open_string_offset"],
    )

    # 5. Fret-number inlays
    fret_numbers = [
        FretNumberLabel(fret=n, y=frets[n - 1]) for n in INLAY_FRETS if n <= fret_count
    ]

    # 6. Cutaway
    cutaway = policy.cutaway_polygon(
        strings, frets, cfg["string_inset"], board_width, board_height
    )

    # 7. Markers (past the last rendered fret there is nowhere to put them)
    placed = [
        place_marker(m, frets, strings, cfg["fret_width"], cfg["open_string_offset"])
        for m in visible
        if m.fret <= fret_count
    ]
    if len(placed) < len(visible):
        logger.debug(
            "Dropped %d marker(s) beyond fret %d", len(visible) - len(placed), fret_count
        )

    logger.debug(
        "Laid out %s with %d frets in %sx%s: board %.1fx%.1f, radius %.2f, %d/%d markers",
        tuning.instrument,
        fret_count,
        width,
        height,
        board_width,
        board_height,
        radius,
        len(placed),
        len(markers),
    )

    return FretboardLayout(
        width=width,
        height=height,
        origin=Point(left_margin, cfg["top_margin"]),
        board_width=board_width,
        board_height=board_height,
        fret_offsets=frets,
        string_offsets=strings,
        nut_width=cfg["nut_width"],
        fret_width=cfg["fret_width"],
        string_width=cfg["string_width"],
        marker_radius=radius,
        markers=placed,
        fret_numbers=fret_numbers,
        cutaway=cutaway,
    )
