"""Seating system: run seat occupancy rules until nothing changes."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from enum import Enum
from pathlib import Path

DEFAULT_INPUT = Path("data/day11.txt")

FLOOR = "."
EMPTY = "L"
OCCUPIED = "#"
_STATES = frozenset((FLOOR, EMPTY, OCCUPIED))

Position = tuple[int, int]
Seats = dict[Position, str]


class Direction(Enum):
    """The eight compass directions as (row, column) steps."""

    NORTH = (-1, 0)
    NORTH_EAST = (-1, 1)
    EAST = (0, 1)
    SOUTH_EAST = (1, 1)
    SOUTH = (1, 0)
    SOUTH_WEST = (1, -1)
    WEST = (0, -1)
    NORTH_WEST = (-1, -1)


def parse_seats(text: str) -> Seats:
    """Map (row, column) to the state character at that place."""
    seats: Seats = {}
    for row, line in enumerate(text.splitlines()):
        for column, state in enumerate(line):
            if state not in _STATES:
                raise ValueError(f"unknown seat state: {state!r}")
            seats[(row, column)] = state
    return seats


def visible_occupied(seats: Mapping[Position, str], position: Position, direction: Direction) -> int:
    """1 if the first seat seen from ``position`` along ``direction`` is occupied."""
    row_step, column_step = direction.value
    row, column = position
    while True:
        row += row_step
        column += column_step
        state = seats.get((row, column))
        if state is None or state == EMPTY:
            return 0
        if state == OCCUPIED:
            return 1


def _adjacent_occupied(seats: Mapping[Position, str], position: Position) -> int:
    row, column = position
    return sum(
        seats.get((row + dr, column + dc)) == OCCUPIED
        for dr, dc in (direction.value for direction in Direction)
    )


def _visible_occupied_count(seats: Mapping[Position, str], position: Position) -> int:
    return sum(visible_occupied(seats, position, direction) for direction in Direction)


def stable_occupied_count(seats: Mapping[Position, str], line_of_sight: bool) -> int:
    """Apply the rules until stable and count occupied seats.

    With ``line_of_sight`` seats look past floor and tolerate five occupied
    neighbours; otherwise only adjacent seats count and four is too many.
    """
    grid = dict(seats)
    count_neighbours = _visible_occupied_count if line_of_sight else _adjacent_occupied
    tolerance = 5 if line_of_sight else 4
    while True:
        changes: Seats = {}
        for position, state in grid.items():
            if state == EMPTY:
                if count_neighbours(grid, position) == 0:
                    changes[position] = OCCUPIED
            elif state == OCCUPIED:
                if count_neighbours(grid, position) >= tolerance:
                    changes[position] = EMPTY
            elif state != FLOOR:
                raise ValueError(f"unknown seat state: {state!r}")
        if not changes:
            break
        grid.update(changes)
    return sum(state == OCCUPIED for state in grid.values())


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    seats = parse_seats(_read_input(argv))
    print(f"Part1: {stable_occupied_count(seats, line_of_sight=False)}")
    print(f"Part2: {stable_occupied_count(seats, line_of_sight=True)}")


if __name__ == "__main__":
    main()