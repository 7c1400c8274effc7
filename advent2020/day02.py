"""Password philosophy: check passwords against their policies."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_INPUT = Path("data/day02.txt")


@dataclass(frozen=True)
class PasswordEntry:
    """A password together with the policy it was set under."""

    lower: int
    upper: int
    letter: str
    password: str

    @classmethod
    def parse(cls, line: str) -> PasswordEntry:
        """Parse a line such as ``1-3 a: abcde``."""
        parts = line.split(" ")
        if len(parts) < 3 or not parts[1]:
            raise ValueError(f"malformed password line: {line!r}")
        bounds = parts[0].split("-")
        if len(bounds) < 2:
            raise ValueError(f"malformed policy: {parts[0]!r}")
        return cls(int(bounds[0]), int(bounds[1]), parts[1][0], parts[2])

    def is_valid_by_count(self) -> bool:
        """The letter occurs between lower and upper times inclusive."""
        return self.lower <= self.password.count(self.letter) <= self.upper

    def is_valid_by_position(self) -> bool:
        """Exactly one of the two 1-based positions holds the letter."""
        return (self._char_at(self.lower) == self.letter) != (
            self._char_at(self.upper) == self.letter
        )

    def _char_at(self, position: int) -> str:
        if not 1 <= position <= len(self.password):
            raise IndexError(f"position {position} outside password {self.password!r}")
        return self.password[position - 1]


def parse_entries(text: str) -> list[PasswordEntry]:
    return [PasswordEntry.parse(line) for line in text.splitlines()]


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    entries = parse_entries(_read_input(argv))
    print(f"Part1: {sum(entry.is_valid_by_count() for entry in entries)}")
    print(f"Part2: {sum(entry.is_valid_by_position() for entry in entries)}")


if __name__ == "__main__":
    main()