"""Shuttle search: find the earliest bus and the earliest aligned departure."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from pathlib import Path

DEFAULT_INPUT = Path("data/day13.txt")


def parse_notes(text: str) -> tuple[int, list[int | None]]:
    """Return the timestamp and bus ids, with None where a bus is out of service."""
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("notes need a timestamp line and a bus line")
    buses: list[int | None] = []
    for entry in lines[1].split(","):
        try:
            buses.append(int(entry))
        except ValueError:
            buses.append(None)
    return int(lines[0]), buses


def earliest_bus(timestamp: int, bus_ids: Sequence[int]) -> tuple[int, int]:
    """Return (bus id, minutes to wait) for the first bus at or after ``timestamp``."""
    if not bus_ids:
        raise ValueError("no buses in service")
    if any(bus <= 0 for bus in bus_ids):
        raise ValueError("bus ids must be positive")
    bus = min(bus_ids, key=lambda b: -timestamp % b)
    return bus, -timestamp % bus


def crt(remainders: Sequence[int], moduli: Sequence[int]) -> int:
    """Smallest non-negative x with x = r (mod n) for each pair."""
    if not moduli:
        raise ValueError("at least one modulus is required")
    if len(remainders) != len(moduli):
        raise ValueError("remainders and moduli differ in length")
    product = math.prod(moduli)
    total = 0
    for remainder, modulus in zip(remainders, moduli):
        partial = product // modulus
        if math.gcd(modulus, partial) != 1:
            raise ValueError(f"{modulus} not coprime")
        total += remainder * pow(partial, -1, modulus) * partial
    return total % product


def earliest_sequence_time(buses: Sequence[int | None]) -> int:
    """Earliest t where each bus departs at t plus its offset in the list."""
    time = 0
    step = 1
    for offset, bus in enumerate(buses):
        if bus is None:
            continue
        for _ in range(bus):
            if (time + offset) % bus == 0:
                break
            time += step
        else:
            raise ValueError(f"bus {bus} can never depart at offset {offset}")
        step *= bus
    return time


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    timestamp, buses = parse_notes(_read_input(argv))
    bus, wait = earliest_bus(timestamp, [b for b in buses if b is not None])
    print(f"Part1: {wait * bus}")
    remainders = [-offset for offset, b in enumerate(buses) if b is not None]
    moduli = [b for b in buses if b is not None]
    try:
        print(f"Part2: {crt(remainders, moduli)}")
    except ValueError as exc:
        print(f"Part2: no solution ({exc})")
    print(f"Part2 (Alternative): {earliest_sequence_time(buses)}")


if __name__ == "__main__":
    main()