# datefilter/render/text.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

TITLE = "Date Filter Timeline Demo"

_INSIDE = "#"
_OUTSIDE = "."
_FILTER = "="
_BOUNDARY = ":"
_EMPTY = " "


def _span_cols(left: float, width: float, cols: int) -> Optional[Tuple[int, int]]:
    """Map a percent bar to a half-open column span, clipped to the lane."""
    if width < 0:
        return None
    a = round(left / 100.0 * cols)
    b = round((left + width) / 100.0 * cols)
    if b <= a:
        b = a + 1  # keep zero-width bars visible
    a = max(a, 0)
    b = min(b, cols)
    if b <= a:
        return None
    return a, b


def _boundary_cols(view: Dict[str, Any], cols: int) -> List[int]:
    out: List[int] = []
    for b in view.get("boundaries") or []:
        pos = float(b["left"])
        if 0.0 <= pos <= 100.0:
            out.append(min(round(pos / 100.0 * cols), cols - 1))
    return out


def _lane(cols: int, span: Optional[Tuple[int, int]], glyph: str, marks: List[int]) -> str:
    cells = [_EMPTY] * cols
    for c in marks:
        cells[c] = _BOUNDARY
    if span is not None:
        for c in range(span[0], span[1]):
            cells[c] = glyph
    return "".join(cells)


def _axis_header(head_l: str, head_r: str, cols: int) -> str:
    """Window labels at both lane edges; exactly cols wide."""
    if len(head_l) + len(head_r) + 1 > cols:
        # not enough room for both: keep the start label only
        return head_l[:cols].ljust(cols)
    return head_l + " " * (cols - len(head_l) - len(head_r)) + head_r


def render_text(view: Dict[str, Any], *, width: int = 60) -> str:
    """Fixed-width timeline: header, filter row, one lane per item."""
    cols = int(width)
    if cols < 10:
        raise ValueError(f"width must be >= 10, got {width}")

    rows = view.get("rows") or []
    label_w = max([len("Filter range")] + [len(str(r.get("label") or "")) for r in rows])
    marks = _boundary_cols(view, cols)

    win = view["window"]
    header = _axis_header(str(win["start_label"]), str(win["end_label"]), cols)

    lines = [
        TITLE,
        f"Algorithm: {view['algorithm_label']}",
        "",
        f"{'':<{label_w}} |{header}|",
    ]

    fb = view["filter_bar"]
    span = _span_cols(float(fb["left"]), float(fb["width"]), cols)
    lines.append(
        f"{'Filter range':<{label_w}} |{_lane(cols, span, _FILTER, marks)}| {view['range']['label']}"
    )

    for r in rows:
        glyph = _INSIDE if r.get("inside") else _OUTSIDE
        span = _span_cols(float(r["left"]), float(r["width"]), cols)
        lines.append(
            f"{str(r.get('label') or ''):<{label_w}} |{_lane(cols, span, glyph, marks)}| {r['meta']}"
        )

    s = view.get("summary") or {}
    lines.append("")
    lines.append(f"{s.get('inside_count', 0)}/{s.get('count', 0)} inside")
    return "\n".join(lines) + "\n"
