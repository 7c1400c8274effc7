"""Combo breaker: break the handshake between a card and a door."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

DEFAULT_INPUT = Path("data/day25.txt")
MODULUS = 20201227
SUBJECT = 7


def find_loop_size(public_key: int) -> int:
    """Smallest loop count that turns subject 7 into ``public_key``."""
    if not 0 < public_key < MODULUS:
        raise ValueError(f"public key must lie between 1 and {MODULUS - 1}")
    value = 1
    for loops in range(1, MODULUS):
        value = value * SUBJECT % MODULUS
        if value == public_key:
            return loops
    raise ValueError(f"{public_key} cannot be reached from subject {SUBJECT}")


def transform(subject: int, loops: int) -> int:
    """Multiply 1 by ``subject`` ``loops`` times modulo 20201227."""
    if loops < 0:
        raise ValueError("loops must not be negative")
    return pow(subject, loops, MODULUS)


def encryption_key(card_key: int, door_key: int) -> int:
    """The key both sides derive during the handshake."""
    return transform(door_key, find_loop_size(card_key))


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    lines = _read_input(argv).splitlines()
    if len(lines) < 2:
        raise SystemExit("input needs a card key and a door key")
    card_key, door_key = int(lines[0]), int(lines[1])
    print(f"Part1: {encryption_key(card_key, door_key)}")


if __name__ == "__main__":
    main()