"""Docking data: run a bitmask initialisation program."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator, Sequence
from itertools import product
from pathlib import Path

DEFAULT_INPUT = Path("data/day14.txt")
WIDTH = 36
_MASK_CHARS = frozenset("01X")
_MEMORY_WRITE = re.compile(r"mem\[(\d+)\] = (\d+)")


def _check_mask(mask: str) -> None:
    if len(mask) != WIDTH:
        raise ValueError(f"mask must be {WIDTH} characters long: {mask!r}")
    if not set(mask) <= _MASK_CHARS:
        raise ValueError(f"mask may only hold 0, 1 and X: {mask!r}")


def _check_word(value: int) -> None:
    if not 0 <= value < 1 << WIDTH:
        raise ValueError(f"{value} does not fit in {WIDTH} bits")


def apply_value_mask(mask: str, value: int) -> int:
    """Overwrite the bits of ``value`` where the mask holds 0 or 1."""
    _check_mask(mask)
    _check_word(value)
    set_bits = int(mask.replace("X", "0"), 2)
    kept_bits = int(mask.replace("X", "1"), 2)
    return (value & kept_bits) | set_bits


def floating_addresses(mask: str, address: int) -> list[int]:
    """Every address decoded from ``address`` by a version 2 mask.

    A 1 sets the bit, a 0 leaves it and an X takes both values. Addresses
    are listed with the leftmost floating bit varying slowest.
    """
    _check_mask(mask)
    _check_word(address)
    positions = [WIDTH - 1 - index for index, ch in enumerate(mask) if ch == "X"]
    base = address | int(mask.replace("X", "0"), 2)
    for position in positions:
        base &= ~(1 << position)
    return [
        base | sum(bit << position for bit, position in zip(combo, positions))
        for combo in product((0, 1), repeat=len(positions))
    ]


def _memory_writes(text: str) -> Iterator[tuple[str, int, int]]:
    """Yield (mask in force, address, value) for each memory write."""
    mask: str | None = None
    for line in text.splitlines():
        if not line.strip():
            continue
        if "mask" in line:
            _, separator, mask = line.partition(" = ")
            if not separator:
                raise ValueError(f"malformed mask line: {line!r}")
            _check_mask(mask)
            continue
        match = _MEMORY_WRITE.fullmatch(line.strip())
        if match is None:
            raise ValueError(f"malformed memory write: {line!r}")
        if mask is None:
            raise ValueError("memory written before any mask was set")
        yield mask, int(match.group(1)), int(match.group(2))


def run_version1(text: str) -> int:
    """Sum of memory after masking every value written."""
    memory: dict[int, int] = {}
    for mask, address, value in _memory_writes(text):
        memory[address] = apply_value_mask(mask, value)
    return sum(memory.values())


def run_version2(text: str) -> int:
    """Sum of memory after writing each value to every decoded address."""
    memory: dict[int, int] = {}
    for mask, address, value in _memory_writes(text):
        for decoded in floating_addresses(mask, address):
            memory[decoded] = value
    return sum(memory.values())


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    text = _read_input(argv)
    print(f"Part1: {run_version1(text)}")
    print(f"Part2: {run_version2(text)}")


if __name__ == "__main__":
    main()