from __future__ import annotations

from .types import Marker, PositionedMarker

# ============================================================================
# Marker placement
#
# Markers sit on their string, vertically centered in the cell between the
# previous fret line (or the nut) and their own fret line. Open-string
# markers float above the nut. All markers share one radius.
# ============================================================================

# Pixels of clearance kept between a marker and anything it could touch
MARKER_CLEARANCE = 1
MIN_MARKER_RADIUS = 1


def place_marker(
    marker: Marker,
    fret_offsets: list[float],
    string_offsets: list[float],
    fret_width: float,
    open_string_offset: float,
) -> PositionedMarker:
    """Position ``marker`` relative to the fretboard's top-left corner."""
    x = string_offsets[marker.string]
    if marker.fret == 0:
        return PositionedMarker(marker=marker, x=x, y=-open_string_offset)

    prev = 0.0 if marker.fret == 1 else fret_offsets[marker.fret - 2]
    curr = fret_offsets[marker.fret - 1]
    y = (prev + curr) / 2 + fret_width / 2
    return PositionedMarker(marker=marker, x=x, y=y)


def smallest_gap(offsets: list[float], start: float | None = None) -> float | None:
    """Smallest distance between consecutive offsets, ``start`` prepended."""
    points = ([start] if start is not None else []) + list(offsets)
    if len(points) < 2:
        return None
    return min(b - a for a, b in zip(points, points[1:]))


def marker_radius(
    fret_offsets: list[float],
    string_offsets: list[float],
    fret_width: float,
    string_width: float,
    top_margin: float,
    open_string_offset: float,
) -> float:
    """Largest radius that keeps every marker clear of its neighbours.

    The smallest of four budgets wins: half the tightest fret cell, half the
    tightest string gap, the room between an open-string marker and the nut,
    and the room between it and the top of the viewport. A string gap only
    exists with two or more strings.
    """
    budgets = [
        top_margin - open_string_offset,
        open_string_offset,
    ]
    fret_gap = smallest_gap(fret_offsets, start=0.0)
    if fret_gap is not None:
        budgets.append((fret_gap - fret_width) / 2)
    string_gap = smallest_gap(string_offsets)
    if string_gap is not None:
        budgets.append((string_gap - string_width) / 2)

    return max(MIN_MARKER_RADIUS, min(budgets) - MARKER_CLEARANCE)
