from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from .types import Tuning, Marker, RenderOptions, FretboardLayout
from .viewport import SizeProvider
from .layout import layout_fretboard
from .renderer import render_with_options

logger = logging.getLogger(__name__)

MarkerHandler = Callable[[Marker], None]


class FretboardChart:
    """A fretboard diagram bound to a host-supplied viewport.

    Nothing is laid out until the size provider reports a size. Clicks are
    hit-tested against the current layout and handed to a single handler
    with the caller's original Marker.
    """

    def __init__(
        self,
        tuning: Tuning,
        fret_count: int,
        markers: Sequence[Marker],
        size_provider: SizeProvider,
        on_marker_click: MarkerHandler | None = None,
        options: RenderOptions | None = None,
    ) -> None:
        self.tuning = tuning
        self.fret_count = fret_count
        self.markers = list(markers)
        self.size_provider = size_provider
        self.on_marker_click = on_marker_click
        self.options = options

    def layout(self) -> FretboardLayout | None:
        size = self.size_provider.current_size()
        if size is None:
            return None
        return layout_fretboard(
            self.tuning,
            self.fret_count,
            self.markers,
            size.width,
            size.height,
            self.options,
        )

    def render(self) -> str:
        """SVG for the current size, or "" while the size is unknown."""
        layout = self.layout()
        if layout is None:
            return ""
        return render_with_options(layout, self.options)

    def marker_at(self, x: float, y: float) -> Marker | None:
        """Marker drawn under viewport point (x, y); the last drawn wins."""
        layout = self.layout()
        if layout is None or layout.is_empty:
            return None
        local_x = x - layout.origin.x
        local_y = y - layout.origin.y
        r_sq = layout.marker_radius ** 2
        for placed in reversed(layout.markers):
            if (local_x - placed.x) ** 2 + (local_y - placed.y) ** 2 <= r_sq:
                return placed.marker
        return None

    def click(self, x: float, y: float) -> Marker | None:
        """Dispatch a click at (x, y) to the marker handler, if one was hit."""
        marker = self.marker_at(x, y)
        if marker is None:
            return None
        logger.debug("Marker activated: string %d fret %d", marker.string, marker.fret)
        if self.on_marker_click is not None:
            self.on_marker_click(marker)
        return marker
