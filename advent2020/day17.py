"""Conway cubes: run a game of life in three or four dimensions."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import product
from pathlib import Path

DEFAULT_INPUT = Path("data/day17.txt")
ACTIVE = "#"
CYCLES = 6

Cube = tuple[int, int, int, int]

_OFFSETS_3D = [(*d, 0) for d in product((-1, 0, 1), repeat=3) if any(d)]
_OFFSETS_4D = [d for d in product((-1, 0, 1), repeat=4) if any(d)]


def parse_cubes(text: str) -> set[Cube]:
    """Active cubes of the starting slice, at z = w = 0."""
    return {
        (row, column, 0, 0)
        for row, line in enumerate(text.splitlines())
        for column, ch in enumerate(line)
        if ch == ACTIVE
    }


def neighbours(cube: Cube, four_d: bool) -> list[Cube]:
    """Surrounding cubes; in three dimensions the w coordinate is 0."""
    x, y, z, w = cube
    offsets = _OFFSETS_4D if four_d else _OFFSETS_3D
    return [
        (x + dx, y + dy, z + dz, w + dw if four_d else 0)
        for dx, dy, dz, dw in offsets
    ]


def count_active_neighbours(cube: Cube, active: Iterable[Cube], four_d: bool) -> int:
    active = active if isinstance(active, (set, frozenset)) else set(active)
    return sum(neighbour in active for neighbour in neighbours(cube, four_d))


def simulate(active: Iterable[Cube], cycles: int, four_d: bool) -> set[Cube]:
    """Active cubes after ``cycles`` rounds of the boot process."""
    current = set(active)
    for _ in range(cycles):
        counts = Counter(n for cube in current for n in neighbours(cube, four_d))
        current = {
            cube
            for cube, count in counts.items()
            if count == 3 or (count == 2 and cube in current)
        }
    return current


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    cubes = parse_cubes(_read_input(argv))
    print(f"Part1: {len(simulate(cubes, CYCLES, four_d=False))}")
    print(f"Part2: {len(simulate(cubes, CYCLES, four_d=True))}")


if __name__ == "__main__":
    main()