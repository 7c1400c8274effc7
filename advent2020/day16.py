"""Ticket translation: validate tickets and work out which field is which."""

from __future__ import annotations

import math
import re
import sys
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_INPUT = Path("data/day16.txt")
DEPARTURE = "departure"
_RULE = re.compile(r"(.+): (\d+)-(\d+) or (\d+)-(\d+)")


@dataclass(frozen=True)
class Bound:
    """One inclusive range allowed for a named field."""

    name: str
    lower: int
    upper: int

    def contains(self, value: int) -> bool:
        return self.lower <= value <= self.upper


@dataclass
class Notes:
    """Field rules, our own ticket and the nearby tickets."""

    bounds: list[Bound] = field(default_factory=list)
    my_ticket: list[int] = field(default_factory=list)
    nearby: list[list[int]] = field(default_factory=list)


def _ticket(line: str) -> list[int]:
    return [int(entry) for entry in line.split(",")]


def parse_notes(text: str) -> Notes:
    notes = Notes()
    lines = iter(text.splitlines())
    for line in lines:
        if not line:
            continue
        if "your ticket:" in line:
            notes.my_ticket = _ticket(next(lines, ""))
        elif "nearby tickets:" in line:
            notes.nearby = [_ticket(entry) for entry in lines if entry]
        else:
            match = _RULE.fullmatch(line)
            if match is None:
                raise ValueError(f"malformed field rule: {line!r}")
            name = match.group(1)
            low1, high1, low2, high2 = (int(g) for g in match.groups()[1:])
            notes.bounds.append(Bound(name, low1, high1))
            notes.bounds.append(Bound(name, low2, high2))
    return notes


def find_invalid_tickets(
    bounds: Sequence[Bound], tickets: Iterable[Sequence[int]]
) -> tuple[list[int], list[int]]:
    """Return the first invalid value of each invalid ticket, and their indices."""
    invalid: list[int] = []
    indices: list[int] = []
    for index, ticket in enumerate(tickets):
        bad = next(
            (value for value in ticket if not any(b.contains(value) for b in bounds)),
            None,
        )
        if bad is not None:
            invalid.append(bad)
            indices.append(index)
    return invalid, indices


def determine_fields(
    number_of_fields: int, bounds: Sequence[Bound], tickets: Iterable[Sequence[int]]
) -> list[int]:
    """Positions of the fields whose names contain "departure".

    Positions are listed in the order they were resolved.
    """
    tickets = list(tickets)
    ranges: dict[str, list[Bound]] = defaultdict(list)
    for bound in bounds:
        ranges[bound.name].append(bound)

    determined: set[str] = set()
    pending: dict[int, set[str]] = {}
    departures: list[int] = []

    def settle(name: str, position: int) -> None:
        determined.add(name)
        if DEPARTURE in name:
            departures.append(position)
        for candidates in pending.values():
            candidates.discard(name)

    for position in range(number_of_fields):
        counts = Counter(
            name
            for ticket in tickets
            for name, allowed in ranges.items()
            if name not in determined
            and any(b.contains(ticket[position]) for b in allowed)
        )
        candidates = {name for name, count in counts.items() if count == len(tickets)}
        if len(candidates) != 1:
            pending[position] = candidates
            continue
        settle(candidates.pop(), position)
        while True:
            single = next(
                ((key, next(iter(names))) for key, names in pending.items() if len(names) == 1),
                None,
            )
            if single is None:
                break
            key, name = single
            settle(name, key)
    return departures


def departure_product(notes: Notes) -> int:
    """Product of our ticket's values in the departure fields."""
    _, bad = find_invalid_tickets(notes.bounds, notes.nearby)
    rejected = set(bad)
    valid = [ticket for index, ticket in enumerate(notes.nearby) if index not in rejected]
    valid.append(notes.my_ticket)
    positions = determine_fields(len(notes.my_ticket), notes.bounds, valid)
    return math.prod(notes.my_ticket[position] for position in positions)


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    notes = parse_notes(_read_input(argv))
    invalid, _ = find_invalid_tickets(notes.bounds, notes.nearby)
    print(f"Part1: {sum(invalid)}")
    print(f"Part2: {departure_product(notes)}")


if __name__ == "__main__":
    main()