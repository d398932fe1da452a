#!/usr/bin/env python3
# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the local CI pipeline: format, lint, type check, tests, and build."""

import argparse
import subprocess
import sys
import time
from dataclasses import dataclass
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Step:
    """One CI step and the command that runs it."""

    name: str
    command: list[str]


STEPS: list[Step] = [
    Step("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    Step("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    Step("Type check", ["uv", "run", "ty", "check", "src/"]),
    Step("Tests", ["uv", "run", "pytest", "--cov=py2ts", "--cov-report=term-missing"]),
    Step("Build", ["uv", "build"]),
]


def main() -> int:
    """Run the CI steps and print a summary; returns the process exit code."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--fail-fast", action="store_true", help="Stop at the first failing step")
    args = parser.parse_args()

    results: list[tuple[Step, bool, float]] = []
    for step in STEPS:
        passed, elapsed = _run(step)
        results.append((step, passed, elapsed))
        if args.fail_fast and not passed:
            break

    _print_banner("Summary")
    for step, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {step.name} ({elapsed:.1f}s)"))
    skipped = STEPS[len(results) :]
    for step in skipped:
        print(chalk.yellow(f"  SKIP  {step.name}"))
    print()
    return 0 if all(passed for _, passed, _ in results) and not skipped else 1


# ################
# Implementation
# ################

_REPO_ROOT = Path(__file__).resolve().parent.parent


def _run(step: Step) -> tuple[bool, float]:
    _print_banner(step.name)
    start = time.monotonic()
    proc = subprocess.run(step.command, cwd=_REPO_ROOT)
    return proc.returncode == 0, time.monotonic() - start


def _print_banner(title: str) -> None:
    rule = chalk.blue("=" * 60)
    print(f"\n{rule}\n{chalk.blue(title)}\n{rule}")


if __name__ == "__main__":
    sys.exit(main())
