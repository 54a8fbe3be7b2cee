"""Lottery drawings: unique sorted numbers from a half-open range."""

import argparse
import random


def draw_unique(
    count: int, range_min: int, range_max: int, rng: random.Random | None = None
) -> list[int]:
    """Return ``count`` distinct numbers from [range_min, range_max), sorted."""
    if count < 0:
        raise ValueError("count must not be negative")
    if range_max <= range_min:
        raise ValueError("range_max must be greater than range_min")
    if count > range_max - range_min:
        raise ValueError("range holds fewer numbers than requested")
    rng = rng or random.Random()
    return sorted(rng.sample(range(range_min, range_max), count))


def draw_lotto(
    drawings: int = 5,
    per_drawing: int = 6,
    range_min: int = 1,
    range_max: int = 91,
    rng: random.Random | None = None,
) -> list[list[int]]:
    """Return ``drawings`` independent drawings of ``per_drawing`` numbers each."""
    if drawings < 0:
        raise ValueError("drawings must not be negative")
    rng = rng or random.Random()
    return [draw_unique(per_drawing, range_min, range_max, rng) for _ in range(drawings)]


def main(argv: list[str] | None = None) -> int:
    """Print five drawings of six numbers from 1 to 90."""
    parser = argparse.ArgumentParser(description="Draw lottery numbers.")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    for i, drawing in enumerate(draw_lotto(rng=rng), start=1):
        numbers = " ".join(f"{n:>2}" for n in drawing)
        print(f"Ziehung {i:>2}: {numbers}")
    return 0