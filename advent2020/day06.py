"""Custom customs: count questions answered yes within groups."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from pathlib import Path

DEFAULT_INPUT = Path("data/day06.txt")


def parse_groups(text: str) -> list[list[str]]:
    """Split blank-line separated groups into lists of per-person answers."""
    groups: list[list[str]] = []
    current: list[str] = []
    for line in text.splitlines():
        if line:
            current.append(line)
        elif current:
            groups.append(current)
            current = []
    if current:
        groups.append(current)
    return groups


def count_any_yes(groups: Iterable[Sequence[str]]) -> int:
    """Sum over groups of questions anyone answered yes."""
    return sum(len(set("".join(group))) for group in groups)


def count_all_yes(groups: Iterable[Sequence[str]]) -> int:
    """Sum over groups of questions answered as often as there are people."""
    return sum(
        sum(1 for count in Counter("".join(group)).values() if count == len(group))
        for group in groups
    )


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    groups = parse_groups(_read_input(argv))
    print(f"Part1: {count_any_yes(groups)}")
    print(f"Part2: {count_all_yes(groups)}")


if __name__ == "__main__":
    main()