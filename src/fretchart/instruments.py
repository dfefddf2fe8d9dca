from __future__ import annotations

from abc import ABC, abstractmethod

from .types import Instrument, Marker, Point

# ============================================================================
# Instrument policies
#
# Everything that differs between instruments goes through one policy object
# picked by instrument kind. New instruments register a policy; call sites
# never check the instrument themselves.
# ============================================================================


class InstrumentPolicy(ABC):
    """Instrument-specific drawing rules."""

    @abstractmethod
    def is_marker_visible(self, marker: Marker) -> bool:
        """Whether ``marker`` lands on a playable part of the neck."""

    @abstractmethod
    def cutaway_polygon(
        self,
        string_offsets: list[float],
        fret_offsets: list[float],
        string_inset: float,
        width: float,
        height: float,
    ) -> list[Point] | None:
        """Region of the fretboard to mask out, or None."""


class StandardPolicy(InstrumentPolicy):
    """Every string runs from the nut; nothing is hidden."""

    def is_marker_visible(self, marker: Marker) -> bool:
        return True

    def cutaway_polygon(
        self,
        string_offsets: list[float],
        fret_offsets: list[float],
        string_inset: float,
        width: float,
        height: float,
    ) -> list[Point] | None:
        return None


class ShortStringPolicy(InstrumentPolicy):
    """One string starts partway up the neck (the banjo's fifth string).

    Markers on that string below its start fret are dropped, and the board
    above the start is masked with an L-shaped cut: down the inset edge of
    the neighbouring string to the fret before the start, then across to the
    outer edge at the start fret.
    """

    def __init__(self, string: int = 0, start_fret: int = 5) -> None:
        if start_fret < 1:
            raise ValueError(f"start_fret must be >= 1, got {start_fret}")
        self.string = string
        self.start_fret = start_fret

    def is_marker_visible(self, marker: Marker) -> bool:
        return marker.string != self.string or marker.fret >= self.start_fret

    def cutaway_polygon(
        self,
        string_offsets: list[float],
        fret_offsets: list[float],
        string_inset: float,
        width: float,
        height: float,
    ) -> list[Point] | None:
        neighbour = self.string + 1
        if neighbour < len(string_offsets):
            inset_edge_x = max(string_offsets[neighbour] - string_inset, 0.0)
        else:
            inset_edge_x = width

        # Fret n is fret_offsets[n - 1]; missing frets fall back to the board bottom
        inner_index = self.start_fret - 2
        outer_index = self.start_fret - 1
        inset_edge_y = fret_offsets[inner_index] if 0 <= inner_index < len(fret_offsets) else height
        outer_edge_y = fret_offsets[outer_index] if outer_index < len(fret_offsets) else height

        return [
            Point(0, 0),
            Point(inset_edge_x, 0),
            Point(inset_edge_x, inset_edge_y),
            Point(0, outer_edge_y),
        ]


# ============================================================================
# Registry
# ============================================================================

_DEFAULT_POLICY: InstrumentPolicy = StandardPolicy()

_POLICIES: dict[Instrument, InstrumentPolicy] = {
    "guitar": _DEFAULT_POLICY,
    "banjo": ShortStringPolicy(string=0, start_fret=5),
}


def register_instrument(instrument: Instrument, policy: InstrumentPolicy) -> None:
    """Add or replace the policy used for ``instrument``."""
    _POLICIES[instrument] = policy


def policy_for(instrument: Instrument) -> InstrumentPolicy:
    """Policy for ``instrument``; unknown kinds use the standard policy."""
    return _POLICIES.get(instrument, _DEFAULT_POLICY)


def known_instruments() -> list[Instrument]:
    return sorted(_POLICIES)
