# datefilter/render/json_view.py
from __future__ import annotations

import json
from typing import Any, Dict


def render_json(view: Dict[str, Any], *, pretty: bool = False) -> str:
    if not isinstance(view, dict):
        raise TypeError(f"view must be dict, got {type(view).__name__}")
    if pretty:
        return json.dumps(view, ensure_ascii=False, indent=2, sort_keys=True) + "\n"
    return json.dumps(view, ensure_ascii=False, separators=(",", ":"), sort_keys=True) + "\n"
