"""Binary boarding: decode seat codes and find the missing seat."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

DEFAULT_INPUT = Path("data/day05.txt")
ROWS = 128
COLUMNS = 8
_LOWER = frozenset("FL")
_UPPER = frozenset("BR")


def decode_partition(code: str, size: int) -> int:
    """Narrow ``range(size)`` by halves: F/L keep the lower, B/R the upper."""
    seats = range(size)
    for ch in code:
        middle = len(seats) // 2
        if ch in _LOWER:
            seats = seats[:middle]
        elif ch in _UPPER:
            seats = seats[middle:]
        else:
            raise ValueError(f"invalid partition character: {ch!r}")
    if not seats:
        raise ValueError(f"code {code!r} leaves no seat in a range of {size}")
    return seats[-1] if code and code[-1] in _UPPER else seats[0]


def seat_id(boarding_pass: str) -> int:
    row = decode_partition(boarding_pass[:7], ROWS)
    column = decode_partition(boarding_pass[7:], COLUMNS)
    return row * COLUMNS + column


def highest_seat_id(boarding_passes: Iterable[str]) -> int:
    return max((seat_id(p) for p in boarding_passes), default=-1)


def find_my_seat(seat_ids: Iterable[int]) -> int:
    """Return the seat between the last pair of ids two apart, or 0."""
    ids = sorted(set(seat_ids))
    found = 0
    for current, following in zip(ids, ids[1:]):
        if following - current == 2:
            found = current + 1
    return found


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    passes = _read_input(argv).splitlines()
    print(f"Part1: {highest_seat_id(passes)}")
    print(f"Part2: {find_my_seat(seat_id(p) for p in passes)}")


if __name__ == "__main__":
    main()