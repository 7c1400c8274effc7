"""Lobby layout: flip hexagonal floor tiles and let them evolve."""

from __future__ import annotations

import re
import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from enum import Enum
from pathlib import Path

DEFAULT_INPUT = Path("data/day24.txt")
DAYS = 100

Position = tuple[int, int]

_DIRECTION_PATTERN = re.compile(r"[ns][ew]|.")


class Direction(Enum):
    """The six neighbours of a hexagonal tile."""

    NORTH_EAST = "ne"
    EAST = "e"
    SOUTH_EAST = "se"
    SOUTH_WEST = "sw"
    WEST = "w"
    NORTH_WEST = "nw"


# offset coordinates: odd rows are shifted half a tile east
_STEPS = {
    True: {
        Direction.NORTH_EAST: (0, -1),
        Direction.EAST: (1, 0),
        Direction.SOUTH_EAST: (0, 1),
        Direction.SOUTH_WEST: (-1, 1),
        Direction.WEST: (-1, 0),
        Direction.NORTH_WEST: (-1, -1),
    },
    False: {
        Direction.NORTH_EAST: (1, -1),
        Direction.EAST: (1, 0),
        Direction.SOUTH_EAST: (1, 1),
        Direction.SOUTH_WEST: (0, 1),
        Direction.WEST: (-1, 0),
        Direction.NORTH_WEST: (0, -1),
    },
}


def parse_directions(line: str) -> list[Direction]:
    """Split a line such as ``esenee`` into directions."""
    return [Direction(match.group()) for match in _DIRECTION_PATTERN.finditer(line)]


def _step(position: Position, direction: Direction) -> Position:
    x, y = position
    dx, dy = _STEPS[y % 2 == 0][direction]
    return x + dx, y + dy


def move_to_tile(position: Position, directions: Iterable[Direction]) -> Position:
    for direction in directions:
        position = _step(position, direction)
    return position


def tile_neighbours(position: Position) -> list[Position]:
    """The six adjacent tiles, in the order of ``Direction``."""
    return [_step(position, direction) for direction in Direction]


def initial_black_tiles(paths: Iterable[Iterable[Direction]]) -> set[Position]:
    """Tiles left black after flipping the tile at the end of each path."""
    black: set[Position] = set()
    for path in paths:
        black ^= {move_to_tile((0, 0), path)}
    return black


def count_black_tiles(paths: Iterable[Iterable[Direction]]) -> int:
    return len(initial_black_tiles(paths))


def count_black_tiles_after_days(paths: Iterable[Iterable[Direction]], days: int) -> int:
    """Black tiles after the daily flipping rules run ``days`` times."""
    if days < 0:
        raise ValueError("days must not be negative")
    black = initial_black_tiles(paths)
    for _ in range(days):
        counts = Counter(n for tile in black for n in tile_neighbours(tile))
        black = {
            tile
            for tile, count in counts.items()
            if count == 2 or (count == 1 and tile in black)
        }
    return len(black)


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    paths = [parse_directions(line) for line in _read_input(argv).splitlines() if line]
    print(f"Part1: {count_black_tiles(paths)}")
    print(f"Part2: {count_black_tiles_after_days(paths, DAYS)}")


if __name__ == "__main__":
    main()