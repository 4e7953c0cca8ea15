"""
Benchmark: seqdist on the classic edit-distance workloads.

    §1  Baseline string pairs (identical / same length / different length)
    §2  Affix trimming on near-identical inputs
    §3  Weighted cost models vs. unit cost
    §4  Scaling with input length
    §5  Comparison with rapidfuzz (if installed)

Run:  python benchmark.py
"""

import importlib
import time

from seqdist import (
    ElementWeightCost,
    FunctionCost,
    TableCost,
    distance,
    distance_with,
)


# ═══════════════════════════════════════════════════════════════════
#  TEST DATA
# ═══════════════════════════════════════════════════════════════════

ALNUM = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

BASELINE = [
    ("identical strings", ALNUM, ALNUM),
    ("same length strings",
     "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789", ALNUM),
    ("different length strings",
     "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789&#'(-_@)=+", ALNUM),
]

PARAGRAPH = (
    "It was the best of times, it was the worst of times, it was the age of "
    "wisdom, it was the age of foolishness, it was the epoch of belief, it was "
    "the epoch of incredulity, it was the season of Light, it was the season "
    "of Darkness"
)

REPEAT = 200


def _try_import(name):
    """Safely attempt to import an optional dependency by name."""
    try:
        return importlib.import_module(name)
    except ImportError:
        return None


def _time(fn, *args, repeat=REPEAT):
    """Average wall time of fn(*args) in microseconds, plus its result."""
    result = fn(*args)
    t0 = time.perf_counter()
    for _ in range(repeat):
        fn(*args)
    return result, (time.perf_counter() - t0) / repeat * 1e6


# ═══════════════════════════════════════════════════════════════════
#  BENCHMARKS
# ═══════════════════════════════════════════════════════════════════

def benchmark_baseline():
    print("=" * 70)
    print("  §1  BASELINE STRING PAIRS")
    print("=" * 70)
    print()

    for name, a, b in BASELINE:
        d, us = _time(distance, a, b)
        print(f"  {name:<26} d={d:>4}  {us:>10.1f}µs")
    print()


def benchmark_trimming():
    print("=" * 70)
    print("  §2  AFFIX TRIMMING (one word changed in the middle)")
    print("=" * 70)
    print()

    edited = PARAGRAPH.replace("foolishness", "folly")
    # FunctionCost() has unit costs but does not vouch for trimming
    untrimmed = FunctionCost()

    d_trim, us_trim = _time(distance, PARAGRAPH, edited, repeat=20)
    d_full, us_full = _time(distance_with, PARAGRAPH, edited, untrimmed, repeat=5)

    print(f"  trimmed   d={d_trim:>4}  {us_trim:>12.1f}µs")
    print(f"  full DP   d={d_full:>4}  {us_full:>12.1f}µs")
    if us_trim:
        print(f"  speed-up  {us_full / us_trim:>8.1f}×")
    print()


def benchmark_weighted():
    print("=" * 70)
    print("  §3  WEIGHTED COST MODELS")
    print("=" * 70)
    print()

    a, b = BASELINE[2][1], BASELINE[2][2]
    models = [
        ("unit", None),
        ("element weights", ElementWeightCost(lambda c: 2 if c.isupper() else 1)),
        ("lookup table", TableCost(substitutions={("O", "0"): 0.1, ("l", "1"): 0.2})),
        ("closures", FunctionCost(substitution=lambda x, y: 0 if x == y else 1.5)),
    ]

    for name, model in models:
        d, us = _time(distance_with, a, b, model, repeat=50)
        print(f"  {name:<18} d={d:>8.2f}  {us:>10.1f}µs")
    print()


def benchmark_scaling():
    print("=" * 70)
    print("  §4  SCALING")
    print("=" * 70)
    print()

    for n in [10, 50, 100, 500]:
        a = list(range(n))
        b = list(range(1, n + 1))  # shifted by one: no common affixes
        d, us = _time(distance, a, b, repeat=3)
        print(f"  Seq length {n:>4}: d={d:>6}  time={us / 1000:>8.2f}ms")
    print()


def benchmark_vs_rapidfuzz():
    print("=" * 70)
    print("  §5  COMPARISON WITH rapidfuzz")
    print("=" * 70)
    print()

    rapidfuzz = _try_import("rapidfuzz.distance.Levenshtein")
    if rapidfuzz is None:
        print("  rapidfuzz:        NOT INSTALLED (pip install rapidfuzz)")
        print()
        return

    for name, a, b in BASELINE:
        ours, us_ours = _time(distance, a, b)
        theirs, us_theirs = _time(rapidfuzz.distance, a, b)
        match = "✓" if ours == theirs else "✗"
        print(f"  {match} {name:<26} seqdist {us_ours:>9.1f}µs   rapidfuzz {us_theirs:>7.1f}µs")
    print()
    print("  rapidfuzz is compiled and unit-cost only; seqdist takes any")
    print("  element type and any cost model.")
    print()


def main():
    print()
    print("╔══════════════════════════════════════════════════════════════════════╗")
    print("║          WEIGHTED LEVENSHTEIN — BENCHMARK SUITE                      ║")
    print("║          seqdist v0.1.0                                              ║")
    print("╚══════════════════════════════════════════════════════════════════════╝")
    print()

    benchmark_baseline()
    benchmark_trimming()
    benchmark_weighted()
    benchmark_scaling()
    benchmark_vs_rapidfuzz()


if __name__ == "__main__":
    main()
