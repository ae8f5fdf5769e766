#!/usr/bin/env python3
"""
Run every example's `main()` in-process and print a pass/fail summary.

Requires the package to be installed (`pip install -e .`). Each example is
imported by module name from this directory, its stdout is captured, and
the tail of that output is echoed after it finishes.
"""

from __future__ import annotations

import contextlib
import importlib
import io
import sys
import time
from dataclasses import dataclass
from typing import List, Optional

EXAMPLES = [
    ("example_sigma_algebra", "Sigma-algebra generation and measurability"),
    ("example_distributions", "Monte Carlo moments and empirical CDF"),
    ("example_law_of_large_numbers", "Law of large numbers (Bernoulli and Cauchy)"),
    ("example_markov_text", "Markov text generation and transition graph"),
]

TAIL_LINES = 5


@dataclass(frozen=True)
class ExampleOutcome:
    module: str
    description: str
    elapsed: float
    error: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.error is None


def run_example(module_name: str, description: str) -> ExampleOutcome:
    print(f"\n== {description} ({module_name}) ==")
    buffer = io.StringIO()
    start = time.perf_counter()
    error = None
    try:
        module = importlib.import_module(module_name)
        with contextlib.redirect_stdout(buffer):
            module.main()
    # Library errors are ValueErrors; OSError covers writing plots to disk.
    except (ValueError, OSError) as exc:
        error = f"{type(exc).__name__}: {exc}"
    elapsed = time.perf_counter() - start

    for line in buffer.getvalue().strip().splitlines()[-TAIL_LINES:]:
        print(f"  {line}")
    return ExampleOutcome(module_name, description, elapsed, error)


def main() -> int:
    outcomes: List[ExampleOutcome] = [run_example(m, d) for m, d in EXAMPLES]

    print("\nSummary")
    for o in outcomes:
        status = "ok" if o.passed else "FAILED"
        print(f"  {status:7} {o.description:50} {o.elapsed:6.2f}s")
        if o.error:
            print(f"          {o.error}")

    failed = sum(1 for o in outcomes if not o.passed)
    print(f"{len(outcomes) - failed}/{len(outcomes)} examples passed")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
