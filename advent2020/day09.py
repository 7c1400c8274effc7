"""Encoding error: find the number that breaks the XMAS rule."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from itertools import combinations
from pathlib import Path

DEFAULT_INPUT = Path("data/day09.txt")
PREAMBLE = 25


def find_breaking_number(numbers: Sequence[int], preamble: int) -> int:
    """First number not the sum of two of the ``preamble`` numbers before it."""
    for index in range(preamble, len(numbers)):
        value = numbers[index]
        window = numbers[index - preamble : index]
        if not any(a + b == value for a, b in combinations(window, 2)):
            return value
    raise ValueError("every number is a sum of two earlier numbers")


def find_contiguous_set(numbers: Sequence[int], target: int) -> list[int]:
    """First contiguous run of numbers whose sum is exactly ``target``."""
    for start in range(len(numbers)):
        total = 0
        run: list[int] = []
        for number in numbers[start:]:
            if total >= target:
                break
            total += number
            run.append(number)
        if total == target:
            return run
    raise ValueError(f"no contiguous run sums to {target}")


def encryption_weakness(numbers: Sequence[int], target: int) -> int:
    run = find_contiguous_set(numbers, target)
    return min(run) + max(run)


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    numbers = [int(line) for line in _read_input(argv).splitlines()]
    part1 = find_breaking_number(numbers, PREAMBLE)
    part2 = encryption_weakness(numbers, part1)
    print(f"Part1: {part1}")
    print(f"Part2: {part2}")


if __name__ == "__main__":
    main()