"""Toboggan trajectory: count trees hit on a repeating forest map."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_INPUT = Path("data/day03.txt")
TREE = "#"
PART1_SLOPE = (3, 1)
PART2_SLOPES = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))


@dataclass(frozen=True)
class Forest:
    """A forest map that repeats endlessly to the right."""

    rows: tuple[str, ...]

    @classmethod
    def parse(cls, text: str) -> Forest:
        return cls(tuple(text.splitlines()))

    @property
    def width(self) -> int:
        return len(self.rows[-1]) if self.rows else 0

    def trees_hit(self, right: int, down: int) -> int:
        """Count trees met going ``right`` across and ``down`` each step."""
        if down < 1:
            raise ValueError("down must be at least 1")
        width = self.width
        hits = 0
        for step, row in enumerate(self.rows[::down]):
            column = (step * right) % width
            if column < len(row) and row[column] == TREE:
                hits += 1
        return hits


def product_of_slopes(forest: Forest, slopes: Iterable[tuple[int, int]]) -> int:
    return math.prod(forest.trees_hit(right, down) for right, down in slopes)


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    forest = Forest.parse(_read_input(argv))
    print(f"Part1: {forest.trees_hit(*PART1_SLOPE)}")
    print(f"Part2: {product_of_slopes(forest, PART2_SLOPES)}")


if __name__ == "__main__":
    main()