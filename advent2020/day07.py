"""Handy haversacks: reason about bags that hold other bags."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

DEFAULT_INPUT = Path("data/day07.txt")
TARGET = "shiny gold"

Rules = dict[str, list[tuple[int, str]]]


def parse_rules(text: str) -> Rules:
    """Map each bag colour to the (quantity, colour) pairs it must contain."""
    rules: Rules = {}
    for line in text.splitlines():
        container, separator, contents = line.partition(" contain ")
        if not separator:
            raise ValueError(f"malformed rule: {line!r}")
        colour = container.replace(" bags", "")
        if contents == "no other bags.":
            rules[colour] = []
            continue
        held = []
        for item in contents.split(", "):
            words = item.split(" ")
            if len(words) < 3:
                raise ValueError(f"malformed bag contents: {item!r}")
            held.append((int(words[0]), f"{words[1]} {words[2]}"))
        rules[colour] = held
    return rules


def can_hold(rules: Mapping[str, list[tuple[int, str]]], colour: str, target: str) -> bool:
    """True if a ``colour`` bag eventually contains a ``target`` bag."""
    return any(
        inner == target or can_hold(rules, inner, target)
        for _, inner in rules.get(colour, ())
    )


def count_holders(rules: Mapping[str, list[tuple[int, str]]], target: str) -> int:
    return sum(1 for colour in rules if colour != target and can_hold(rules, colour, target))


def count_contained(rules: Mapping[str, list[tuple[int, str]]], colour: str) -> int:
    """Total number of bags inside one ``colour`` bag."""
    return sum(
        quantity * (1 + count_contained(rules, inner))
        for quantity, inner in rules.get(colour, ())
    )


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    rules = parse_rules(_read_input(argv))
    print(f"Part1: {count_holders(rules, TARGET)}")
    print(f"Part2: {count_contained(rules, TARGET)}")


if __name__ == "__main__":
    main()