#!/usr/bin/env python3
# Copyright 2026 TokenLab Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the local CI pipeline: formatting, lint, types, tests, a demo smoke run, and packaging."""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=tokenlab", "--cov-report=term-missing"]),
    ("Demo smoke run", ["uv", "run", "tokenlab", "demo"]),
    ("Build", ["uv", "build"]),
]


def main() -> int:
    """Run every step, then print a pass/fail summary."""
    root = Path(__file__).resolve().parent.parent
    outcomes = [_run_step(name, cmd, root) for name, cmd in STEPS]

    print(f"\n{_banner('Summary')}")
    for name, passed, elapsed in outcomes:
        label = "PASS" if passed else "FAIL"
        color = chalk.green if passed else chalk.red
        print(color(f"  {label}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in outcomes) else 1


# ################
# Implementation
# ################


def _banner(title: str) -> str:
    rule = chalk.blue("=" * 60)
    return f"{rule}\n{chalk.blue(title)}\n{rule}"


def _run_step(name: str, cmd: list[str], cwd: Path) -> tuple[str, bool, float]:
    print(f"\n{_banner(name)}")
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=cwd)
    return name, proc.returncode == 0, time.monotonic() - start


if __name__ == "__main__":
    sys.exit(main())
