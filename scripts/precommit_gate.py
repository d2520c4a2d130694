#!/usr/bin/env python3
"""Commit gate for datefilter: contract suite plus a CLI smoke matrix.

  python3 scripts/precommit_gate.py             # run the gate
  python3 scripts/precommit_gate.py --no-tests  # smoke matrix only
  python3 scripts/precommit_gate.py --install   # install as .git/hooks/pre-commit
"""
from __future__ import annotations

import argparse
import json
import os
import stat
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

REPO_ROOT = Path(__file__).resolve().parents[1]

HOOK_BODY = '''#!/usr/bin/env bash
set -euo pipefail
if [[ "${DATEFILTER_SKIP_PRECOMMIT:-0}" == "1" ]]; then
  exit 0
fi
cd "$(git rev-parse --show-toplevel)"
exec "${PYTHON:-python3}" scripts/precommit_gate.py
'''

# (algorithm, open_start, open_end) -> expected inside count on the demo dataset
SMOKE_MATRIX: Dict[Tuple[str, bool, bool], int] = {
    ("inclusive", False, False): 4,
    ("inclusive", True, False): 5,
    ("inclusive", False, True): 5,
    ("inclusive", True, True): 0,
    ("contained", False, False): 1,
    ("contained", True, False): 3,
    ("contained", False, True): 3,
    ("contained", True, True): 0,
}


def _cli(root: Path, args: List[str]) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    for k in ("DATEFILTER_ALGORITHM", "DATEFILTER_WIDTH", "DATEFILTER_TZ", "DATEFILTER_OBS_LOG"):
        env.pop(k, None)
    return subprocess.run(
        [sys.executable, "-m", "datefilter.cli", *args],
        cwd=str(root),
        env=env,
        capture_output=True,
        text=True,
    )


def smoke_errors(root: Path = REPO_ROOT) -> List[str]:
    """Run the CLI over every algorithm/open-side combination and check inside counts."""
    errs: List[str] = []
    for (algo, open_start, open_end), expected in SMOKE_MATRIX.items():
        args = ["--algorithm", algo, "--format", "json"]
        if open_start:
            args.append("--open-start")
        if open_end:
            args.append("--open-end")
        tag = " ".join(args)
        p = _cli(root, args)
        if p.returncode != 0:
            errs.append(f"{tag}: exit {p.returncode}: {p.stderr.strip()}")
            continue
        try:
            got = json.loads(p.stdout)["summary"]["inside_count"]
        except (ValueError, KeyError, TypeError) as e:
            errs.append(f"{tag}: unreadable JSON view ({e})")
            continue
        if got != expected:
            errs.append(f"{tag}: inside_count={got}, expected {expected}")

    p = _cli(root, ["--width", "10"])
    if p.returncode != 0 or "inside" not in p.stdout:
        errs.append(f"--width 10: text render failed: {p.stderr.strip()}")
    return errs


def run_contracts(root: Path = REPO_ROOT) -> int:
    cmd = [sys.executable, "-m", "unittest", "discover", "-s", "tests", "-p", "test_contract_*.py"]
    return subprocess.run(cmd, cwd=str(root)).returncode


def _git_root() -> Optional[Path]:
    try:
        p = subprocess.run(["git", "rev-parse", "--show-toplevel"], capture_output=True, text=True)
    except OSError:
        return None
    out = (p.stdout or "").strip()
    if p.returncode != 0 or not out:
        return None
    root = Path(out)
    return root if root.exists() else None


def install_hook(force: bool = False) -> int:
    root = _git_root()
    if root is None:
        print("[precommit-gate] ERROR: not inside a git repo (or git is not installed).")
        return 2
    hook_path = root / ".git" / "hooks" / "pre-commit"
    if hook_path.exists() and not force:
        print(f"[precommit-gate] ERROR: hook already exists: {hook_path} (use --force)")
        return 2
    hook_path.parent.mkdir(parents=True, exist_ok=True)
    hook_path.write_text(HOOK_BODY, encoding="utf-8", newline="\n")
    hook_path.chmod(hook_path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    print(f"[precommit-gate] Installed: {hook_path}")
    print("[precommit-gate] Bypass: DATEFILTER_SKIP_PRECOMMIT=1 git commit ...")
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="precommit_gate.py", description="datefilter commit gate")
    ap.add_argument("--no-tests", action="store_true", help="Skip the unittest contract suite")
    ap.add_argument("--install", action="store_true", help="Install this gate as the git pre-commit hook")
    ap.add_argument("--force", action="store_true", help="Overwrite an existing pre-commit hook")
    ns = ap.parse_args(argv)

    if ns.install:
        return install_hook(force=bool(ns.force))

    errs = smoke_errors()
    for e in errs:
        print(f"[precommit-gate] smoke FAIL: {e}", file=sys.stderr)
    if errs:
        return 1
    print(f"[precommit-gate] smoke OK ({len(SMOKE_MATRIX)} combinations)")

    if ns.no_tests:
        return 0
    rc = run_contracts()
    print(f"[precommit-gate] contracts rc={rc}")
    return rc


if __name__ == "__main__":
    raise SystemExit(main())
