"""datefilter.api

Stable *library* entrypoint for datefilter.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from datefilter.axis import (
    DegenerateWindowError,
    InvalidInputError,
    Projector,
    derive_window,
    project,
)
from datefilter.classify import (
    ALGORITHMS,
    UnknownAlgorithmError,
    classify,
    classify_all,
    classify_item,
    fully_contained,
    inclusive_overlap,
    resolve_algorithm,
)
from datefilter.demo import demo_items, demo_range
from datefilter.model import DAY_MS, HOUR_MS, DisplayWindow, Range, TimedItem
from datefilter.render.json_view import render_json
from datefilter.render.text import render_text
from datefilter.validate import ItemValidationError, assert_valid_items, validate_items
from datefilter.view import build_view


# --- Public API exports (locked by contract tests) ------------------------
# Keep changes intentional and reviewable.
_PUBLIC_EXPORTS = (
    "ALGORITHMS",
    "DAY_MS",
    "DegenerateWindowError",
    "DisplayWindow",
    "HOUR_MS",
    "InvalidInputError",
    "ItemValidationError",
    "Projector",
    "Range",
    "TimedItem",
    "UnknownAlgorithmError",
    "assert_valid_items",
    "build_view",
    "classify",
    "classify_all",
    "classify_item",
    "demo_items",
    "demo_range",
    "derive_window",
    "fully_contained",
    "inclusive_overlap",
    "project",
    "render_json",
    "render_text",
    "resolve_algorithm",
    "validate_items",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------
