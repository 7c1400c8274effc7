"""Crab combat: play the card game, plain and recursive."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Sequence
from itertools import islice
from pathlib import Path

DEFAULT_INPUT = Path("data/day22.txt")


def parse_decks(text: str) -> tuple[list[int], list[int]]:
    """Return the two players' decks, top card first."""
    decks: list[list[int]] = []
    current: list[int] | None = None
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            if current is not None:
                decks.append(current)
                current = None
            continue
        if current is None:
            if not line.startswith("Player"):
                raise ValueError(f"expected a player header: {line!r}")
            current = []
            continue
        current.append(int(line))
    if current is not None:
        decks.append(current)
    if len(decks) != 2:
        raise ValueError(f"expected two decks, found {len(decks)}")
    return decks[0], decks[1]


def score(deck: Sequence[int]) -> int:
    """Each card times its position counted from the bottom, summed."""
    return sum(position * card for position, card in enumerate(reversed(deck), start=1))


def play_combat(deck1: Sequence[int], deck2: Sequence[int]) -> int:
    """Play until one deck is empty and return the winner's score."""
    first, second = deque(deck1), deque(deck2)
    while first and second:
        card1, card2 = first.popleft(), second.popleft()
        if card1 > card2:
            first.extend((card1, card2))
        else:
            second.extend((card2, card1))
    return score(first if len(first) > len(second) else second)


def _play_recursive(deck1: Sequence[int], deck2: Sequence[int]) -> tuple[int, list[int] | None]:
    """Return the winner and their deck, or (1, None) when a deck repeats."""
    first, second = deque(deck1), deque(deck2)
    seen1: set[tuple[int, ...]] = set()
    seen2: set[tuple[int, ...]] = set()
    while first and second:
        state1, state2 = tuple(first), tuple(second)
        if state1 in seen1 or state2 in seen2:
            return 1, None
        seen1.add(state1)
        seen2.add(state2)
        card1, card2 = first.popleft(), second.popleft()
        if card1 <= len(first) and card2 <= len(second):
            winner, _ = _play_recursive(
                list(islice(first, card1)), list(islice(second, card2))
            )
        else:
            winner = 1 if card1 > card2 else 2
        if winner == 1:
            first.extend((card1, card2))
        else:
            second.extend((card2, card1))
    if len(first) > len(second):
        return 1, list(first)
    return 2, list(second)


def play_recursive_combat(deck1: Sequence[int], deck2: Sequence[int]) -> tuple[int, int]:
    """Return (winning player, score); a game ended by repetition scores 0."""
    winner, deck = _play_recursive(deck1, deck2)
    return winner, 0 if deck is None else score(deck)


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    deck1, deck2 = parse_decks(_read_input(argv))
    print(f"Part1: {play_combat(deck1, deck2)}")
    _, part2 = play_recursive_combat(deck1, deck2)
    print(f"Part2: {part2}")


if __name__ == "__main__":
    main()