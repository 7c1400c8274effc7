"""Monster messages: match messages against a grammar of numbered rules."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

DEFAULT_INPUT = Path("data/day19.txt")

_LOOP_42 = 8
_LOOP_PAIR = 11
_MAX_REPEATS = 10
_MAX_PAIRS = 7


def _has_digit(text: str) -> bool:
    return any(ch.isdigit() for ch in text)


def parse_input(text: str) -> tuple[dict[int, str], list[str]]:
    """Return the rules, keyed by number, and the messages after the blank line.

    Literal rules have their quotation marks removed; other rules keep their
    text of rule numbers and ``|`` separators.
    """
    rules: dict[int, str] = {}
    lines = iter(text.splitlines())
    for line in lines:
        if not line:
            break
        key, separator, body = line.partition(": ")
        if not separator:
            raise ValueError(f"malformed rule: {line!r}")
        rules[int(key)] = body if _has_digit(body) else body.replace('"', "")
    messages = list(lines)
    return rules, messages


def build_pattern(rules: Mapping[int, str], rule_id: int) -> str:
    """Regular expression, without anchors, matching what ``rule_id`` accepts."""
    cache: dict[int, str] = {}

    def resolve(key: int, active: frozenset[int]) -> str:
        if key in cache:
            return cache[key]
        if key not in rules:
            raise ValueError(f"rule {key} is not defined")
        if key in active:
            raise ValueError(f"rule {key} refers to itself")
        body = rules[key]
        if not _has_digit(body):
            pattern = body
        else:
            inner = active | {key}
            parts = [
                token if token == "|" else resolve(int(token), inner)
                for token in body.split()
            ]
            pattern = "(" + "".join(parts) + ")"
        cache[key] = pattern
        return pattern

    return resolve(rule_id, frozenset()).replace(" ", "")


def _count(pattern: str, messages: Iterable[str]) -> int:
    compiled = re.compile(pattern)
    return sum(1 for message in messages if compiled.fullmatch(message))


def count_matches(rules: Mapping[int, str], messages: Iterable[str]) -> int:
    """Number of messages that rule 0 matches completely."""
    return _count(build_pattern(rules, 0), messages)


def _looped_rules(rules: Mapping[int, str]) -> dict[int, str]:
    looped = dict(rules)
    looped[_LOOP_42] = " | ".join(
        " ".join(["42"] * count) for count in range(1, _MAX_REPEATS + 1)
    )
    looped[_LOOP_PAIR] = " | ".join(
        " ".join(["42"] * count + ["31"] * count) for count in range(1, _MAX_PAIRS + 1)
    )
    return looped


def count_matches_with_loops(rules: Mapping[int, str], messages: Iterable[str]) -> int:
    """Number of messages matching rule 8 then rule 11 once both loop.

    Rule 8 becomes one to ten copies of rule 42 and rule 11 becomes one to
    seven copies of rule 42 followed by as many of rule 31.
    """
    looped = _looped_rules(rules)
    pattern = build_pattern(looped, _LOOP_42) + build_pattern(looped, _LOOP_PAIR)
    return _count(pattern, messages)


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    rules, messages = parse_input(_read_input(argv))
    print(f"Part1: {count_matches(rules, messages)}")
    print(f"Part2: {count_matches_with_loops(rules, messages)}")


if __name__ == "__main__":
    main()