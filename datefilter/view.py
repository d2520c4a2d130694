# datefilter/view.py
from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Sequence

from .axis import Projector, derive_window
from .classify import ALGO_SHORT, ALGORITHM_LABELS, classify_all, resolve_algorithm
from .model import DAY_MS, Range, TimedItem
from .util.console import obs_warn
from .util.tz import format_ms
from .validate import validate_items, validate_range

OPEN_LABEL = "Open"


def row_meta(results: Dict[str, bool]) -> str:
    """e.g. "A1:in | A2:out"."""
    return " | ".join(
        f"{ALGO_SHORT[name]}:{'in' if ok else 'out'}" for name, ok in results.items()
    )


def build_view(
    items: Sequence[TimedItem],
    rng: Range,
    *,
    algorithm: str,
    open_start: bool = False,
    open_end: bool = False,
    margin_ms: int = DAY_MS,
    tz: dt.tzinfo = dt.timezone.utc,
) -> Dict[str, Any]:
    """
    Compose everything a renderer needs for one frame:
      - window: derived from items and the configured range (open toggles do not move it)
      - filter bar: open sides stretch to the lane edge; width never negative
      - boundaries: one marker per closed side
      - rows: bar geometry plus every variant's result; `inside` follows `algorithm`
    """
    algo = resolve_algorithm(algorithm)
    items = list(items)

    for msg in validate_items(items) + validate_range(rng):
        obs_warn("view", msg)

    window = derive_window(items, rng, margin_ms=margin_ms)
    proj = Projector(window)

    start_open = bool(open_start) or rng.start_ms is None
    end_open = bool(open_end) or rng.end_ms is None
    effective = rng.with_open(start=start_open, end=end_open)

    bar_left = 0.0 if start_open else proj.percent(rng.start_ms)
    bar_right = 100.0 if end_open else proj.percent(rng.end_ms)

    boundaries: List[Dict[str, Any]] = []
    if not start_open:
        boundaries.append({"side": "start", "left": bar_left})
    if not end_open:
        boundaries.append({"side": "end", "left": bar_right})

    rows: List[Dict[str, Any]] = []
    for it in items:
        results = classify_all(it, effective)
        left, width = proj.bar(it.start_ms, it.end_ms)
        rows.append(
            {
                "id": it.id,
                "label": it.label,
                "start_ms": int(it.start_ms),
                "end_ms": int(it.end_ms),
                "left": left,
                "width": width,
                "results": results,
                "inside": results[algo],
                "meta": row_meta(results),
            }
        )

    start_label = OPEN_LABEL if start_open else format_ms(rng.start_ms, tz)
    end_label = OPEN_LABEL if end_open else format_ms(rng.end_ms, tz)

    return {
        "algorithm": algo,
        "algorithm_label": ALGORITHM_LABELS[algo],
        "window": {
            "start_ms": window.start_ms,
            "end_ms": window.end_ms,
            "start_label": format_ms(window.start_ms, tz),
            "end_label": format_ms(window.end_ms, tz),
        },
        "range": {
            "start_ms": rng.start_ms,
            "end_ms": rng.end_ms,
            "effective_start_ms": effective.start_ms,
            "effective_end_ms": effective.end_ms,
            "label": f"{start_label} - {end_label}",
        },
        "filter_bar": {
            "left": bar_left,
            "width": max(bar_right - bar_left, 0.0),
            "open_start": start_open,
            "open_end": end_open,
        },
        "boundaries": boundaries,
        "rows": rows,
        "summary": {
            "count": len(rows),
            "inside_count": sum(1 for r in rows if r["inside"]),
        },
    }


__all__ = [
    "OPEN_LABEL",
    "row_meta",
    "build_view",
]
