from __future__ import annotations

from abc import ABC, abstractmethod

from .types import ViewportSize

# ============================================================================
# Viewport size providers
#
# The host owns size observation. Layout only ever sees a concrete size: a
# provider answers either with one or with None ("not measured yet").
# ============================================================================


class SizeProvider(ABC):
    """Source of the current drawing-area size."""

    @abstractmethod
    def current_size(self) -> ViewportSize | None:
        """Current size, or None while it is not yet known."""


class FixedSize(SizeProvider):
    """A size known up front (files, tests, the CLI)."""

    def __init__(self, width: float, height: float) -> None:
        self._size = ViewportSize(width, height)

    def current_size(self) -> ViewportSize | None:
        return self._size if self._size.is_valid else None


class ObservedSize(SizeProvider):
    """Size pushed by the host whenever its container is resized.

    Reports with a non-positive dimension mean the container is collapsed or
    not attached yet; they reset the provider to "unknown".
    """

    def __init__(self) -> None:
        self._size: ViewportSize | None = None

    def resize(self, width: float, height: float) -> None:
        size = ViewportSize(width, height)
        self._size = size if size.is_valid else None

    def current_size(self) -> ViewportSize | None:
        return self._size
