"""Passport processing: check passports for required and valid fields."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

DEFAULT_INPUT = Path("data/day04.txt")

_INTEGER = re.compile(r"[+-]?[0-9]+")
_HAIR_COLOUR = re.compile(r"#[0-9a-f]{6}")
_EYE_COLOUR = re.compile(r"amb|blu|brn|gry|grn|hzl|oth")
_YEAR_RANGES = {"byr": (1920, 2002), "iyr": (2010, 2020), "eyr": (2020, 2030)}
_HEIGHT_RANGES = {"cm": (150, 193), "in": (59, 76)}


def within_range(value: str, lower: int, upper: int) -> bool:
    """True if ``value`` is an integer between lower and upper inclusive."""
    if not _INTEGER.fullmatch(value):
        return False
    return lower <= int(value) <= upper


def _field_valid(key: str, value: str) -> bool:
    if key in _YEAR_RANGES:
        return within_range(value, *_YEAR_RANGES[key])
    if key == "hgt":
        bounds = _HEIGHT_RANGES.get(value[-2:])
        return bounds is not None and within_range(value[:-2], *bounds)
    if key == "hcl":
        return _HAIR_COLOUR.search(value) is not None
    if key == "ecl":
        return _EYE_COLOUR.search(value) is not None
    if key == "pid":
        return len(value) == 9 and _INTEGER.fullmatch(value) is not None
    return True


def is_credentials_valid(credentials: Mapping[str, str]) -> bool:
    """True if every field present holds an acceptable value."""
    return all(_field_valid(key, value) for key, value in credentials.items())


def has_required_fields(credentials: Mapping[str, str]) -> bool:
    """All eight fields are present, or all but ``cid``."""
    return len(credentials) == 8 or (len(credentials) == 7 and "cid" not in credentials)


def _split_field(field: str) -> tuple[str, str]:
    parts = field.split(":")
    if len(parts) < 2:
        raise ValueError(f"malformed passport field: {field!r}")
    return parts[0], parts[1]


def parse_passports(text: str) -> list[dict[str, str]]:
    """Split blank-line separated records into field dictionaries."""
    passports: list[dict[str, str]] = []
    current: dict[str, str] = {}
    for line in text.splitlines():
        if not line.strip():
            if current:
                passports.append(current)
                current = {}
            continue
        for field in line.split():
            key, value = _split_field(field)
            current[key] = value
    if current:
        passports.append(current)
    return passports


def count_passports(passports: Iterable[Mapping[str, str]]) -> tuple[int, int]:
    """Return (passports with required fields, those that are also valid)."""
    complete = [p for p in passports if has_required_fields(p)]
    return len(complete), sum(is_credentials_valid(p) for p in complete)


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    part1, part2 = count_passports(parse_passports(_read_input(argv)))
    print(f"Part1: {part1}")
    print(f"Part2: {part2}")


if __name__ == "__main__":
    main()