"""Adapter array: chain joltage adapters and count their arrangements."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Sequence
from itertools import groupby, pairwise
from pathlib import Path

DEFAULT_INPUT = Path("data/day10.txt")
DEVICE_OFFSET = 3


def joltage_differences(ratings: Iterable[int]) -> list[int]:
    """Differences met chaining adapters up from the outlet.

    The device's own step of 3 is added once the last adapter is reached.
    The chain stops early, without that step, if no adapter is within 3.
    """
    remaining = sorted(ratings)
    current = 0
    differences: list[int] = []
    while len(remaining) != 1:
        for offset, rating in enumerate(remaining):
            if 1 <= rating - current <= 3:
                break
        else:
            return differences
        differences.append(rating - current)
        current = rating
        remaining = remaining[offset:]
    differences.append(DEVICE_OFFSET)
    return differences


def difference_product(ratings: Iterable[int]) -> int:
    """Number of 1-jolt differences times number of 3-jolt differences."""
    differences = joltage_differences(ratings)
    return differences.count(1) * differences.count(3)


def tribonacci(n: int) -> int:
    """Ways to cross a run of ``n`` one-jolt steps: 1, 1, 2, 4, 7, ..."""
    if n < 0:
        raise ValueError("n must not be negative")
    first, second, third = 1, 1, 2
    if n < 2:
        return 1
    for _ in range(n - 2):
        first, second, third = second, third, first + second + third
    return third


def _chain(ratings: Iterable[int]) -> list[int]:
    chain = sorted([0, *ratings])
    chain.append(chain[-1] + DEVICE_OFFSET)
    return chain


def count_arrangements_by_chains(ratings: Iterable[int]) -> int:
    """Count arrangements from the lengths of runs of 1-jolt steps."""
    chain = _chain(ratings)
    steps = {low: high - low for low, high in pairwise(chain)}
    runs = (
        sum(1 for _ in run)
        for is_one, run in groupby(steps[key] for key in sorted(steps))
        if is_one == 1
    )
    return math.prod(tribonacci(length) for length in runs if length >= 2)


def count_arrangements(ratings: Iterable[int]) -> int:
    """Count every distinct adapter chain from the outlet to the device."""
    chain = _chain(ratings)
    ways = {chain[-1]: 1}
    for index in range(len(chain) - 2, -1, -1):
        value = chain[index]
        total = 0
        for following in chain[index + 1 :]:
            if following - value > 3:
                break
            total += ways[following]
        ways[value] = total
    return ways[chain[0]]


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    ratings = [int(line) for line in _read_input(argv).splitlines()]
    print(f"Part1: {difference_product(ratings)}")
    print(f"Part2: {count_arrangements(ratings)}")


if __name__ == "__main__":
    main()