from __future__ import annotations

from .types import FretboardLayout, PositionedMarker, FretNumberLabel, Point, RenderOptions
from .theme import FretboardColors, svg_open_tag, build_style_block, resolve_colors
from .styles import (
    FONT_SIZES,
    FONT_WEIGHTS,
    STROKE_WIDTHS,
    MARKER_LABEL_FILL,
    TEXT_BASELINE_SHIFT,
)

# ============================================================================
# SVG renderer -- converts a FretboardLayout into an SVG string.
#
# Render order (back to front):
#   1. Cutaway mask definition
#   2. Fretboard, nut, frets, strings (masked group)
#   3. Fret-number inlay labels
#   4. Markers with their labels
# ============================================================================

CUTAWAY_MASK_ID = "cutawayMask"


def render_svg(
    layout: FretboardLayout,
    colors: FretboardColors,
    font: str = "Inter",
    transparent: bool = False,
) -> str:
    """Render a positioned fretboard as an SVG string."""
    parts: list[str] = []

    parts.append(svg_open_tag(layout.width, layout.height, colors, transparent))
    if layout.is_empty:
        parts.append("</svg>")
        return "\n".join(parts)

    parts.append(build_style_block(font))

    # 1. Mask
    if layout.cutaway is not None:
        parts.append("<defs>")
        parts.append(_render_cutaway_mask(layout.cutaway, layout.board_width, layout.board_height))
        parts.append("</defs>")

    parts.append(f'<g transform="translate({layout.origin.x},{layout.origin.y})">')

    # 2. Board
    mask_attr = f' mask="url(#{CUTAWAY_MASK_ID})"' if layout.cutaway is not None else ""
    parts.append(f"<g{mask_attr}>")
    parts.append(_rect(0, 0, layout.board_width, layout.board_height, "var(--board)", "Fretboard"))
    parts.append(_rect(0, 0, layout.board_width, layout.nut_width, "var(--nut)", "Nut"))
    for y in layout.fret_offsets:
        parts.append(_rect(0, y, layout.board_width, layout.fret_width, "var(--fret)", "Fret"))
    for x in layout.string_offsets:
        parts.append(_rect(x, 0, layout.string_width, layout.board_height, "var(--string)", "String"))
    parts.append("</g>")

    # 3. Fret numbers
    for label in layout.fret_numbers:
        parts.append(_render_fret_number(label))

    # 4. Markers
    for i, placed in enumerate(layout.markers):
        parts.append(_render_marker(placed, i, layout.marker_radius))

    parts.append("</g>")
    parts.append("</svg>")
    return "\n".join(parts)


def render_with_options(
    layout: FretboardLayout,
    options: RenderOptions | None = None,
) -> str:
    """Render ``layout`` with colors, font and background taken from ``options``."""
    if options is None:
        options = RenderOptions()
    return render_svg(
        layout,
        resolve_colors(options),
        options.font or "Inter",
        options.transparent or False,
    )


# ============================================================================
# Mask
# ============================================================================


def _render_cutaway_mask(polygon: list[Point], width: float, height: float) -> str:
    points = " ".join(f"{p.x},{p.y}" for p in polygon)
    return (
        f'  <mask id="{CUTAWAY_MASK_ID}">\n'
        f'    <rect width="{width}" height="{height}" fill="white" />\n'
        f'    <polygon points="{points}" fill="black" />\n'
        f"  </mask>"
    )


# ============================================================================
# Board parts
# ============================================================================


def _rect(x: float, y: float, w: float, h: float, fill: str, cls: str) -> str:
    return f'<rect class="{cls}" x="{x}" y="{y}" width="{w}" height="{h}" fill="{fill}" />'


def _render_fret_number(label: FretNumberLabel) -> str:
    # Right-aligned against the left edge of the board, one space clear
    return (
        f'<text class="FretNumber" x="0" y="{label.y}" text-anchor="end" '
        f'dominant-baseline="middle" font-size="{FONT_SIZES["fret_number"]}" '
        f'font-weight="{FONT_WEIGHTS["fret_number"]}">{label.fret}&#160;</text>'
    )


# ============================================================================
# Markers
# ============================================================================


def _render_marker(placed: PositionedMarker, index: int, radius: float) -> str:
    marker = placed.marker
    parts = [
        f'<g transform="translate({placed.x},{placed.y})">',
        f'  <circle class="FretMarker" data-marker-index="{index}" r="{radius}" '
        f'fill="{escape_xml(marker.fill)}" stroke="black" '
        f'stroke-width="{STROKE_WIDTHS["marker"]}" />',
    ]
    if marker.label:
        parts.append(
            f'  <text class="FretMarkerLabel" text-rendering="optimizeLegibility" '
            f'textLength="{radius * 2 * MARKER_LABEL_FILL}" text-anchor="middle" '
            f'dy="{TEXT_BASELINE_SHIFT}" font-weight="{FONT_WEIGHTS["marker_label"]}" '
            f'pointer-events="none">{escape_xml(marker.label)}</text>'
        )
    parts.append("</g>")
    return "\n".join(parts)


# ============================================================================
# Utilities
# ============================================================================


def escape_xml(text: str) -> str:
    """Escape special XML characters in text content."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )
