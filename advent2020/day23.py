"""Crab cups: shuffle a circle of labelled cups."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from itertools import pairwise
from pathlib import Path

DEFAULT_INPUT = Path("data/day23.txt")
PART1_MOVES = 100
PART2_CUPS = 1_000_000
PART2_MOVES = 10_000_000


def parse_cups(text: str) -> list[int]:
    """Read cup labels, one digit each."""
    digits = "".join(text.split())
    if not digits:
        raise ValueError("no cups given")
    return [int(ch) for ch in digits]


def _check_cups(cups: Sequence[int]) -> None:
    if len(cups) < 4:
        raise ValueError("at least four cups are needed")
    if sorted(cups) != list(range(1, len(cups) + 1)):
        raise ValueError("cups must be labelled 1 to n, each once")


def _link(order: Sequence[int]) -> list[int]:
    successor = [0] * (len(order) + 1)
    for label, following in pairwise(order):
        successor[label] = following
    successor[order[-1]] = order[0]
    return successor


def _play(successor: list[int], current: int, moves: int, highest: int) -> int:
    """Run the moves in place; return the cup that would play next."""
    for _ in range(moves):
        a = successor[current]
        b = successor[a]
        c = successor[b]
        successor[current] = successor[c]
        destination = current - 1 or highest
        while destination in (a, b, c):
            destination = destination - 1 or highest
        successor[c] = successor[destination]
        successor[destination] = a
        current = successor[current]
    return current


def play_crab_cups(cups: Iterable[int], moves: int) -> list[int]:
    """The circle after ``moves``, with the next cup to play at index moves % n."""
    order = list(cups)
    _check_cups(order)
    if moves < 0:
        raise ValueError("moves must not be negative")
    successor = _link(order)
    current = _play(successor, order[0], moves, len(order))
    circle = [current]
    for _ in range(len(order) - 1):
        circle.append(successor[circle[-1]])
    shift = moves % len(order)
    return circle[len(circle) - shift :] + circle[: len(circle) - shift]


def labels_after_one(cups: Sequence[int]) -> str:
    """Labels clockwise after cup 1, joined together."""
    index = list(cups).index(1)
    following = [*cups[index + 1 :], *cups[:index]]
    return "".join(str(label) for label in following)


def play_crab_cups_linked(cups: Iterable[int], moves: int, total: int) -> int:
    """Fill the circle up to ``total`` cups, play, and multiply the two after 1."""
    order = list(cups)
    _check_cups(order)
    if total < len(order):
        raise ValueError("total must be at least the number of cups given")
    if moves < 0:
        raise ValueError("moves must not be negative")
    order.extend(range(len(order) + 1, total + 1))
    successor = _link(order)
    _play(successor, order[0], moves, total)
    first = successor[1]
    return first * successor[first]


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    cups = parse_cups(_read_input(argv))
    print(f"Part1: {labels_after_one(play_crab_cups(cups, PART1_MOVES))}")
    print(f"Part2: {play_crab_cups_linked(cups, PART2_MOVES, PART2_CUPS)}")


if __name__ == "__main__":
    main()