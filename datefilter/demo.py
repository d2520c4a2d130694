# datefilter/demo.py
from __future__ import annotations

import datetime as dt
from typing import Tuple

from .model import HOUR_MS, Range, TimedItem

BASE_DATE = dt.date(2026, 1, 15)
BASE_MS = int(dt.datetime(2026, 1, 15, tzinfo=dt.timezone.utc).timestamp() * 1000)

FILTER_START_MS = BASE_MS + 9 * HOUR_MS
FILTER_END_MS = BASE_MS + 17 * HOUR_MS


def demo_range() -> Range:
    return Range(start_ms=FILTER_START_MS, end_ms=FILTER_END_MS)


def demo_items() -> Tuple[TimedItem, ...]:
    """The six reference cases, positioned around the 09:00-17:00 filter."""
    fs, fe = FILTER_START_MS, FILTER_END_MS
    return (
        # straddles both bounds
        TimedItem(1, "Case 1", fs - 2 * HOUR_MS, fe + 2 * HOUR_MS),
        # entirely after the range
        TimedItem(2, "Case 2", fe + 1 * HOUR_MS, fe + 5 * HOUR_MS),
        # crosses the start bound only
        TimedItem(3, "Case 3", fs - 2 * HOUR_MS, fs + 2 * HOUR_MS),
        # crosses the end bound only
        TimedItem(4, "Case 4", fe - 2 * HOUR_MS, fe + 2 * HOUR_MS),
        # entirely before the range
        TimedItem(5, "Case 5", fs - 5 * HOUR_MS, fs - 1 * HOUR_MS),
        # fully inside
        TimedItem(6, "Case 6", fs + 2 * HOUR_MS, fs + 5 * HOUR_MS),
    )


__all__ = [
    "BASE_DATE",
    "BASE_MS",
    "FILTER_START_MS",
    "FILTER_END_MS",
    "demo_range",
    "demo_items",
]
