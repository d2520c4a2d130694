"""Input sanity checks (library-facing).

The classifier and projector accept any input; these helpers only report
what a caller probably did not intend.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from .model import Range, TimedItem


class ItemValidationError(ValueError):
    """Raised by assert_valid_items when an item list fails validation."""


def _require(cond: bool, msg: str, errs: List[str]) -> None:
    if not cond:
        errs.append(msg)


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def validate_items(items: Sequence[TimedItem], *, label: str = "items") -> List[str]:
    errs: List[str] = []
    seen: set[int] = set()
    for i, it in enumerate(items):
        if not isinstance(it, TimedItem):
            errs.append(f"{label}[{i}] must be TimedItem")
            continue
        ok_start = _is_int(it.start_ms)
        ok_end = _is_int(it.end_ms)
        _require(ok_start, f"{label}[{i}].start_ms must be int", errs)
        _require(ok_end, f"{label}[{i}].end_ms must be int", errs)
        if ok_start and ok_end:
            _require(
                it.start_ms <= it.end_ms,
                f"{label}[{i}]: start_ms > end_ms (id={it.id!r})",
                errs,
            )
        if it.id in seen:
            errs.append(f"{label}[{i}]: duplicate id {it.id!r}")
        seen.add(it.id)
    return errs


def validate_range(rng: Range, *, label: str = "range") -> List[str]:
    errs: List[str] = []
    for side in ("start_ms", "end_ms"):
        v = getattr(rng, side)
        _require(v is None or _is_int(v), f"{label}.{side} must be int or None", errs)
    if rng.is_bounded and _is_int(rng.start_ms) and _is_int(rng.end_ms):
        _require(rng.start_ms <= rng.end_ms, f"{label}: start_ms > end_ms", errs)
    return errs


def assert_valid_items(items: Sequence[TimedItem]) -> None:
    errs = validate_items(items)
    if errs:
        raise ItemValidationError(errs[0])


__all__ = [
    "ItemValidationError",
    "validate_items",
    "validate_range",
    "assert_valid_items",
]
