"""datefilter.classify

Interval-relation algorithms used to decide whether an item matches a filter range.

Both variants are pure and total:
  - either range side may be None (unbounded on that side)
  - a fully unbounded range (both sides None) never matches; this is a
    documented contract, not "matches everything"
  - malformed spans (start > end) are not rejected; the comparisons decide
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from .model import Range, TimedItem

Algorithm = Callable[[int, int, Optional[int], Optional[int]], bool]

INCLUSIVE = "inclusive"
CONTAINED = "contained"


class UnknownAlgorithmError(ValueError):
    """Raised when an algorithm name does not resolve to a known variant."""


def inclusive_overlap(
    item_start: int,
    item_end: int,
    range_start: Optional[int] = None,
    range_end: Optional[int] = None,
) -> bool:
    """Item and range share at least one instant (closed bounds)."""
    if range_start is not None and range_end is not None:
        return item_start <= range_end and item_end >= range_start
    if range_start is not None:
        # must not end before the range begins
        return item_end >= range_start
    if range_end is not None:
        # must not start after the range ends
        return item_start <= range_end
    return False


def fully_contained(
    item_start: int,
    item_end: int,
    range_start: Optional[int] = None,
    range_end: Optional[int] = None,
) -> bool:
    """Whole item span lies within the range. The open side is vacuously satisfied."""
    if range_start is not None and range_end is not None:
        return item_start >= range_start and item_end <= range_end
    if range_start is not None:
        return item_start >= range_start
    if range_end is not None:
        return item_end <= range_end
    return False


# Insertion order is the display order (A1, A2).
ALGORITHMS: Dict[str, Algorithm] = {
    INCLUSIVE: inclusive_overlap,
    CONTAINED: fully_contained,
}

ALGORITHM_LABELS: Dict[str, str] = {
    INCLUSIVE: "Inclusive Overlap Algo",
    CONTAINED: "Fully Contained Algo",
}

ALGO_SHORT: Dict[str, str] = {
    INCLUSIVE: "A1",
    CONTAINED: "A2",
}

_ALIASES: Dict[str, str] = {
    "inclusive": INCLUSIVE,
    "overlap": INCLUSIVE,
    "inclusive-overlap": INCLUSIVE,
    "inclusive_overlap": INCLUSIVE,
    "a1": INCLUSIVE,
    "contained": CONTAINED,
    "containment": CONTAINED,
    "fully-contained": CONTAINED,
    "fully_contained": CONTAINED,
    "a2": CONTAINED,
}


def resolve_algorithm(name: str) -> str:
    """Map a user-facing algorithm name (or alias) to its canonical key."""
    key = (name or "").strip().lower()
    canon = _ALIASES.get(key)
    if canon is None:
        known = ", ".join(ALGORITHMS)
        raise UnknownAlgorithmError(f"Unknown algorithm: {name!r} (known: {known})")
    return canon


def classify(
    algorithm: str,
    item_start: int,
    item_end: int,
    range_start: Optional[int] = None,
    range_end: Optional[int] = None,
) -> bool:
    fn = ALGORITHMS[resolve_algorithm(algorithm)]
    return fn(item_start, item_end, range_start, range_end)


def classify_item(algorithm: str, item: TimedItem, rng: Range) -> bool:
    return classify(algorithm, item.start_ms, item.end_ms, rng.start_ms, rng.end_ms)


def classify_all(item: TimedItem, rng: Range) -> Dict[str, bool]:
    """Result of every variant for one item, keyed by canonical name."""
    return {
        name: fn(item.start_ms, item.end_ms, rng.start_ms, rng.end_ms)
        for name, fn in ALGORITHMS.items()
    }


__all__ = [
    "Algorithm",
    "INCLUSIVE",
    "CONTAINED",
    "UnknownAlgorithmError",
    "inclusive_overlap",
    "fully_contained",
    "ALGORITHMS",
    "ALGORITHM_LABELS",
    "ALGO_SHORT",
    "resolve_algorithm",
    "classify",
    "classify_item",
    "classify_all",
]
