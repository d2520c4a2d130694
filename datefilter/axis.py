# datefilter/axis.py
from __future__ import annotations

from numbers import Real
from typing import Any, Iterable, Tuple

from .model import DAY_MS, DisplayWindow, Range, TimedItem


class InvalidInputError(ValueError):
    """Raised when a display window cannot be derived from the given dataset."""


class DegenerateWindowError(ValueError):
    """Raised when a display window has zero (or negative) span."""


def _require_number(v: Any, what: str) -> Real:
    if isinstance(v, bool) or not isinstance(v, Real):
        raise InvalidInputError(f"{what} must be a number, got {v!r}")
    return v


def derive_window(
    items: Iterable[TimedItem],
    rng: Range,
    *,
    margin_ms: int = DAY_MS,
) -> DisplayWindow:
    """
    Padded window covering every item span and the filter range:
      - start = min(item starts, range start if bounded) - margin
      - end   = max(item ends, range end if bounded) + margin

    Requires at least one item. Open range sides do not contribute.
    """
    items = list(items)
    if not items:
        raise InvalidInputError("cannot derive display window from an empty item sequence")
    _require_number(margin_ms, "margin_ms")
    if margin_ms < 0:
        raise InvalidInputError(f"margin_ms must be >= 0, got {margin_ms}")

    starts = [_require_number(it.start_ms, f"items[{i}].start_ms") for i, it in enumerate(items)]
    ends = [_require_number(it.end_ms, f"items[{i}].end_ms") for i, it in enumerate(items)]
    if rng.start_ms is not None:
        starts.append(_require_number(rng.start_ms, "range.start_ms"))
    if rng.end_ms is not None:
        ends.append(_require_number(rng.end_ms, "range.end_ms"))

    return DisplayWindow(
        start_ms=min(starts) - margin_ms,
        end_ms=max(ends) + margin_ms,
    )


def require_nondegenerate(window: DisplayWindow) -> DisplayWindow:
    if window.end_ms <= window.start_ms:
        raise DegenerateWindowError(
            f"display window has no span: start_ms={window.start_ms} end_ms={window.end_ms}"
        )
    return window


def project(window: DisplayWindow, timestamp_ms: int) -> float:
    """Linear position of timestamp_ms in window, in percent.

    start -> 0, end -> 100. Timestamps outside the window land outside
    [0, 100]; clipping is left to the renderer.
    """
    require_nondegenerate(window)
    return (timestamp_ms - window.start_ms) / window.span_ms * 100


class Projector:
    """Projection bound to one window, checked once at construction."""

    def __init__(self, window: DisplayWindow) -> None:
        self.window = require_nondegenerate(window)
        self._span = float(window.span_ms)

    def percent(self, timestamp_ms: int) -> float:
        return (timestamp_ms - self.window.start_ms) / self._span * 100

    def bar(self, start_ms: int, end_ms: int) -> Tuple[float, float]:
        """(left, width) in percent. Width is negative for start > end."""
        left = self.percent(start_ms)
        return left, self.percent(end_ms) - left


__all__ = [
    "InvalidInputError",
    "DegenerateWindowError",
    "derive_window",
    "require_nondegenerate",
    "project",
    "Projector",
]
