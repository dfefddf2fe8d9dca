from __future__ import annotations

from .styles import SEMITONES

# ============================================================================
# Fretboard geometry
#
# Frets follow twelve-tone equal temperament: fret n sits at
#
#     scale * (1 - 2 ** (-n / 12))
#
# from the nut. The scale length is not a physical constant here; it is
# solved so that the last rendered fret lands on the bottom of the board,
# which makes any fret range fill the available height.
# ============================================================================


def _fret_ratio(fret: int) -> float:
    """Fraction of the scale length between the nut and ``fret``."""
    return 1 - 2 ** (-fret / SEMITONES)


def scale_length(fret_count: int, board_height: float) -> float:
    """Scale length that puts fret ``fret_count`` exactly at ``board_height``."""
    if fret_count < 1:
        raise ValueError(f"fret_count must be >= 1, got {fret_count}")
    if board_height <= 0:
        raise ValueError(f"board_height must be > 0, got {board_height}")
    # _fret_ratio(1) ~ 0.056, so the divisor is never zero for fret_count >= 1
    return board_height / _fret_ratio(fret_count)


def fret_positions(
    fret_count: int,
    scale: float,
    fret_width: float,
) -> list[float]:
    """Top edge offset of every fret line (frets 1..fret_count) from the nut.

    Ideal fret positions are compressed into ``board_height - fret_width`` so
    the bottom edge of the last line sits on the bottom of the board. The
    compression is a uniform factor, so offsets stay strictly increasing and
    the gaps between them strictly decreasing.
    """
    if fret_count < 1:
        raise ValueError(f"fret_count must be >= 1, got {fret_count}")
    board_height = scale * _fret_ratio(fret_count)
    if board_height <= 0:
        raise ValueError(f"scale must be > 0, got {scale}")

    # A line thicker than the whole board can't fit; draw it unshifted.
    usable = board_height - fret_width if board_height > fret_width else board_height
    factor = usable / board_height
    return [scale * _fret_ratio(n) * factor for n in range(1, fret_count + 1)]


def string_positions(
    string_count: int,
    board_width: float,
    string_width: float,
    inset: float,
) -> list[float]:
    """Left edge offset of every string line, spread evenly across the board.

    The outer strings sit ``inset`` in from either edge. A single string is
    centered. When the board is too narrow for the insets, the insets shrink
    to whatever room is left; with no room at all every string collapses onto
    the center line (offsets coincide rather than cross).
    """
    if string_count < 1:
        raise ValueError(f"string_count must be >= 1, got {string_count}")

    board_width = max(board_width, 0.0)
    room = max(board_width - string_width, 0.0)
    if string_count == 1:
        return [room / 2]

    inset = min(max(inset, 0.0), room / 2)
    span = room - 2 * inset
    gap = span / (string_count - 1)
    return [inset + i * gap for i in range(string_count)]
