from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from .types import RenderOptions

# ============================================================================
# Types
# ============================================================================


@dataclass(slots=True)
class FretboardColors:
    """Fretboard color configuration.

    Marker fills are not part of the theme; each marker carries its own.
    """

    board: str
    nut: str
    fret: str
    string: str
    text: str
    bg: str


# ============================================================================
# Defaults
# ============================================================================

DEFAULTS = {
    "board": "wheat",
    "nut": "black",
    "fret": "darkslategray",
    "string": "#6d432f",
    "text": "#27272A",
    "bg": "#FFFFFF",
}

# ============================================================================
# Well-known fretboard palettes
# ============================================================================

THEMES: dict[str, FretboardColors] = {
    "classic": FretboardColors(**DEFAULTS),
    "rosewood": FretboardColors(
        board="#4a2c21", nut="#f4ecd8", fret="#c0c0c0",
        string="#d9d4c7", text="#27272A", bg="#FFFFFF",
    ),
    "maple": FretboardColors(
        board="#f3d9a4", nut="#1f1f1f", fret="#8a8a8a",
        string="#5b4636", text="#27272A", bg="#FFFFFF",
    ),
    "ebony": FretboardColors(
        board="#1c1a19", nut="#efe6d2", fret="#b8b8b8",
        string="#e0dcd0", text="#FAFAFA", bg="#18181B",
    ),
}


def resolve_colors(options: RenderOptions | None) -> FretboardColors:
    """Start from the named theme (or DEFAULTS) and apply explicit overrides."""
    if options is None:
        return FretboardColors(**DEFAULTS)
    if options.theme is not None and options.theme not in THEMES:
        raise ValueError(
            f"Unknown theme {options.theme!r}; expected one of {', '.join(sorted(THEMES))}"
        )
    base = THEMES[options.theme] if options.theme else FretboardColors(**DEFAULTS)
    return FretboardColors(
        board=options.board or base.board,
        nut=options.nut or base.nut,
        fret=options.fret or base.fret,
        string=options.string or base.string,
        text=options.text or base.text,
        bg=options.bg or base.bg,
    )


# ============================================================================
# SVG style block
# ============================================================================


def build_style_block(font: str) -> str:
    """Build the <style> block: font import and marker/label classes."""
    return "\n".join([
        "<style>",
        f"  @import url('https://fonts.googleapis.com/css2?family={quote(font)}:wght@400;500;600;700&amp;display=swap');",
        f"  text {{ font-family: '{font}', system-ui, sans-serif; fill: var(--text); }}",
        "  .FretMarker { cursor: pointer; }",
        "  .FretMarkerLabel { fill: #000; user-select: none; }",
        "</style>",
    ])


def svg_open_tag(
    width: float,
    height: float,
    colors: FretboardColors,
    transparent: bool = False,
) -> str:
    """Build the SVG opening tag with CSS variables set as inline styles."""
    vars_str = ";".join([
        f"--board:{colors.board}",
        f"--nut:{colors.nut}",
        f"--fret:{colors.fret}",
        f"--string:{colors.string}",
        f"--text:{colors.text}",
        f"--bg:{colors.bg}",
    ])
    bg_style = "" if transparent else ";background:var(--bg)"

    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}" '
        f'width="{width}" height="{height}" style="{vars_str}{bg_style}">'
    )
