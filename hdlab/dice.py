"""Histogram of dice rolls shown as star bars."""

import argparse
import random
import time
from collections import Counter
from collections.abc import Mapping

_CHUNK = 100_000


def roll_histogram(
    rolls: int, sides: int = 6, rng: random.Random | None = None
) -> dict[int, int]:
    """Roll a fair die ``rolls`` times; return counts per face, ordered by face."""
    if rolls < 0:
        raise ValueError("rolls must not be negative")
    if sides < 1:
        raise ValueError("a die needs at least one side")
    rng = rng or random.Random()
    faces = range(1, sides + 1)
    counts: Counter[int] = Counter()
    remaining = rolls
    while remaining:
        k = min(remaining, _CHUNK)
        counts.update(rng.choices(faces, k=k))
        remaining -= k
    return dict(sorted(counts.items()))


def star_bars(histogram: Mapping[int, int], width: int = 25) -> list[str]:
    """Return one bar per face, the largest count drawn ``width`` stars long."""
    if not histogram:
        return []
    max_val = max(histogram.values())
    if max_val == 0:
        return [f"{face:2}: " for face in histogram]
    return [
        f"{face:2}: " + "*" * (count * width // max_val)
        for face, count in histogram.items()
    ]


def main(argv: list[str] | None = None) -> int:
    """Roll a die many times and print counts, extremes and a bar chart."""
    parser = argparse.ArgumentParser(description="Histogram of dice rolls.")
    parser.add_argument("--rolls", type=int, default=10_000_000)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    t0 = time.perf_counter()
    histogram = roll_histogram(args.rolls, 6, random.Random(args.seed))

    print()
    for face, count in histogram.items():
        print(f"{face:2}: {count}")

    if histogram:
        print(f"\nmin_val = {min(histogram.values())}")
        print(f"max_val = {max(histogram.values())}\n")

    for bar in star_bars(histogram):
        print(bar)
    print()

    elapsed_ms = int((time.perf_counter() - t0) * 1000)
    print(f"Execution time was {elapsed_ms} ms.\n")
    return 0