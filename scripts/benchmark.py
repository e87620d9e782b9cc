"""Measure StringCalculator throughput over representative inputs.

Usage:
    python scripts/benchmark.py --iterations 10000
"""

from __future__ import annotations

import argparse
import timeit
from typing import Any, Callable

from strcalc.calculator import StringCalculator

CASES: dict[str, str] = {
    "simple": "1,2,3",
    "medium": ",".join(str(i) for i in range(1, 101)),
    "large": ",".join(str(i) for i in range(1, 1001)),
    "customDelimiter": "//;\n1;2;3;4;5",
    "multiplication": "//*\n2*3*4*5",
    "withWhitespace": " 1 , 2 , 3 , 4 , 5 ",
    "mixedDelimiters": "1\n2,3\n4,5",
}

BATCH_SIZE = 100


def build_benchmarks(calculator: StringCalculator) -> dict[str, Callable[[], Any]]:
    """Return a zero-argument callable per benchmark case, keyed by label."""
    benchmarks: dict[str, Callable[[], Any]] = {}
    for name, numbers in CASES.items():
        label = f"{name} ({len(numbers)} chars)"
        benchmarks[label] = lambda numbers=numbers: calculator.calculate(numbers)

    batch = [CASES["simple"]] * BATCH_SIZE
    benchmarks[f"batch ({BATCH_SIZE} inputs)"] = lambda: calculator.batch_calculate(batch)
    return benchmarks


def run_benchmarks(iterations: int, calculator: StringCalculator | None = None) -> dict[str, float]:
    """Run every case ``iterations`` times and return ops/sec per label."""
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}")
    calculator = calculator or StringCalculator()

    results: dict[str, float] = {}
    for label, fn in build_benchmarks(calculator).items():
        elapsed = timeit.timeit(fn, number=iterations)
        results[label] = iterations / elapsed if elapsed > 0 else float("inf")
    return results


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark the string calculator")
    parser.add_argument("--iterations", type=int, default=10_000)
    args = parser.parse_args()

    print("String Calculator Performance Benchmark\n")
    results = run_benchmarks(args.iterations)
    for label, ops in results.items():
        print(f"  {label:<35} {ops:>15,.0f} ops/sec")

    fastest = max(results, key=results.__getitem__)
    slowest = min(results, key=results.__getitem__)
    average = sum(results.values()) / len(results)
    print(f"\nFastest: {fastest}")
    print(f"Slowest: {slowest}")
    print(f"Average: {average:,.0f} ops/sec over {len(results)} cases")


if __name__ == "__main__":
    main()
