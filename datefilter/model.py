# datefilter/model.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

MIN_MS = 60_000
HOUR_MS = 60 * MIN_MS
DAY_MS = 24 * HOUR_MS


@dataclass(frozen=True)
class TimedItem:
    id: int
    label: str
    start_ms: int
    end_ms: int      # start_ms <= end_ms is the caller's responsibility


@dataclass(frozen=True)
class Range:
    """Filter range. A side set to None is unbounded (no constraint), not zero."""

    start_ms: Optional[int] = None
    end_ms: Optional[int] = None

    @property
    def is_bounded(self) -> bool:
        return self.start_ms is not None and self.end_ms is not None

    @property
    def is_unbounded(self) -> bool:
        return self.start_ms is None and self.end_ms is None

    def with_open(self, *, start: bool = False, end: bool = False) -> "Range":
        """Return a copy with the selected sides removed."""
        return replace(
            self,
            start_ms=None if start else self.start_ms,
            end_ms=None if end else self.end_ms,
        )


@dataclass(frozen=True)
class DisplayWindow:
    start_ms: int
    end_ms: int

    @property
    def span_ms(self) -> int:
        return self.end_ms - self.start_ms


__all__ = [
    "MIN_MS",
    "HOUR_MS",
    "DAY_MS",
    "TimedItem",
    "Range",
    "DisplayWindow",
]
