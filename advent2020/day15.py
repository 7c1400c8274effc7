"""Rambunctious recitation: play the elves' memory game."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

DEFAULT_INPUT = Path("data/day15.txt")
PART1_TURN = 2020
PART2_TURN = 30_000_000


def parse_numbers(text: str) -> list[int]:
    """Read the comma-separated starting numbers on the first line."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("no starting numbers")
    return [int(entry) for entry in lines[0].split(",")]


def play_memory_game(initial_numbers: Sequence[int], turn: int) -> int:
    """Return the number spoken on ``turn`` (1-based)."""
    numbers = list(initial_numbers)
    if not numbers:
        raise ValueError("at least one starting number is required")
    if turn < 1:
        raise ValueError("turn must be at least 1")
    if turn <= len(numbers):
        return numbers[turn - 1]
    spoken = numbers[-1]
    # the last starting number always counts as newly spoken
    last_seen = {
        number: index
        for index, number in enumerate(numbers[:-1], start=1)
        if number != spoken
    }
    for current in range(len(numbers), turn):
        previous = last_seen.get(spoken)
        last_seen[spoken] = current
        spoken = 0 if previous is None else current - previous
    return spoken


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    numbers = parse_numbers(_read_input(argv))
    print(f"Part1: {play_memory_game(numbers, PART1_TURN)}")
    print(f"Part2: {play_memory_game(numbers, PART2_TURN)}")


if __name__ == "__main__":
    main()