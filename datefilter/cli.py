from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .axis import DegenerateWindowError, InvalidInputError
from .classify import ALGORITHMS, UnknownAlgorithmError, resolve_algorithm
from .demo import demo_items, demo_range
from .model import HOUR_MS
from .render.json_view import render_json
from .render.text import render_text
from .util.console import eprint
from .util.tz import normalize_tz_name, resolve_tz
from .view import build_view


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name, "") or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise SystemExit(f"Invalid {name} value: {raw!r} (expected integer)")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="datefilter",
        description="Compare how date filter algorithms classify the demo timeline items.",
    )
    ap.add_argument(
        "--algorithm",
        default=os.getenv("DATEFILTER_ALGORITHM") or "inclusive",
        help=f"Selected algorithm: {', '.join(ALGORITHMS)} (default: env DATEFILTER_ALGORITHM or 'inclusive')",
    )
    ap.add_argument("--open-start", action="store_true", help="Remove the filter start bound")
    ap.add_argument("--open-end", action="store_true", help="Remove the filter end bound")
    ap.add_argument("--format", choices=("text", "json"), default="text", help="Output format (default: text)")
    ap.add_argument(
        "--width",
        type=int,
        default=None,
        help="Lane width in characters for text output (default: env DATEFILTER_WIDTH or 60)",
    )
    ap.add_argument(
        "--margin-hours",
        type=int,
        default=24,
        help="Padding added on each side of the display window, in hours (default: 24)",
    )
    ap.add_argument(
        "--tz",
        default=os.getenv("DATEFILTER_TZ") or "UTC",
        help="Timezone for labels (default: env DATEFILTER_TZ or 'UTC')",
    )
    ap.add_argument("--pretty", action="store_true", help="Pretty JSON output")
    ap.add_argument("--out", default=None, help="Write output to this path instead of stdout")

    args = ap.parse_args(argv)

    try:
        algorithm = resolve_algorithm(args.algorithm)
    except UnknownAlgorithmError as e:
        raise SystemExit(f"Invalid --algorithm value: {e}")

    width = args.width if args.width is not None else _env_int("DATEFILTER_WIDTH", 60)
    if width < 10:
        raise SystemExit(f"Invalid --width value: {width} (must be >= 10)")

    try:
        tzinfo = resolve_tz(normalize_tz_name(args.tz))
    except ValueError as e:
        raise SystemExit(f"Invalid --tz value: {e}")

    try:
        view = build_view(
            demo_items(),
            demo_range(),
            algorithm=algorithm,
            open_start=bool(args.open_start),
            open_end=bool(args.open_end),
            margin_ms=int(args.margin_hours) * HOUR_MS,
            tz=tzinfo,
        )
    except (InvalidInputError, DegenerateWindowError) as e:
        raise SystemExit(f"Cannot build timeline: {e}")

    if args.format == "json":
        text = render_json(view, pretty=bool(args.pretty))
    else:
        text = render_text(view, width=int(width))

    if args.out:
        out_path = Path(args.out)
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SystemExit(f"Cannot create output directory '{out_path.parent}': {e}")
        out_path.write_text(text, encoding="utf-8", newline="\n")
        eprint(f"[datefilter] wrote {out_path}")
    else:
        sys.stdout.write(text)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
