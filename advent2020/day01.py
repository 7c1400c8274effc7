"""Report repair: find expense entries that sum to 2020."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

TARGET = 2020
DEFAULT_INPUT = Path("data/day01.txt")


def parse_entries(text: str) -> list[int]:
    """Parse one integer per line; raise ValueError on anything else."""
    return [int(line) for line in text.splitlines()]


def find_pair_product(entries: Iterable[int]) -> int | None:
    """Return the product of the first two entries summing to 2020, or None."""
    seen: set[int] = set()
    for entry in entries:
        complement = TARGET - entry
        if complement in seen:
            return entry * complement
        seen.add(entry)
    return None


def find_triple_product(entries: Iterable[int]) -> int | None:
    """Return the product of three entries summing to 2020, or None."""
    unique = dict.fromkeys(entries)
    for first in unique:
        for second in unique:
            if second == first:
                continue
            third = TARGET - first - second
            if third in unique:
                return first * second * third
    return None


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    entries = parse_entries(_read_input(argv))
    pair = find_pair_product(entries)
    if pair is not None:
        print(f"Part1: {pair}")
    triple = find_triple_product(entries)
    if triple is not None:
        print(f"Part2: {triple}")


if __name__ == "__main__":
    main()