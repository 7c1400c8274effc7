"""Rain risk: steer a ferry directly or by a waypoint."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_INPUT = Path("data/day12.txt")

NORTH, EAST, SOUTH, WEST = "N", "E", "S", "W"
LEFT, RIGHT = "L", "R"
FORWARD = "F"
_HEADINGS = (NORTH, EAST, SOUTH, WEST)
_ACTIONS = frozenset((*_HEADINGS, LEFT, RIGHT, FORWARD))


@dataclass(frozen=True)
class Instruction:
    action: str
    value: int


def parse_navigation(text: str) -> list[Instruction]:
    navigation = []
    for line in text.splitlines():
        if not line or line[0] not in _ACTIONS:
            raise ValueError(f"invalid navigation instruction: {line!r}")
        navigation.append(Instruction(line[0], int(line[1:])))
    return navigation


def _quarter_turns(degrees: int) -> int:
    turns = abs(degrees) // 90
    return turns if degrees >= 0 else -turns


def rotate_heading(facing: str, turn: str, degrees: int) -> str:
    """Turn a compass heading left or right by a multiple of 90 degrees."""
    if facing not in _HEADINGS:
        raise ValueError(f"invalid heading: {facing!r}")
    if turn not in (LEFT, RIGHT):
        raise ValueError(f"invalid turn: {turn!r}")
    turns = _quarter_turns(degrees)
    if turn == LEFT:
        turns = -turns
    index = abs(4 + _HEADINGS.index(facing) + turns) % 4
    return _HEADINGS[index]


def navigate_ship(navigation: Iterable[Instruction]) -> int:
    """Manhattan distance travelled when instructions move the ship itself."""
    movements = dict.fromkeys(_HEADINGS, 0)
    facing = EAST
    for instruction in navigation:
        action = instruction.action
        if action in movements:
            movements[action] += instruction.value
        elif action in (LEFT, RIGHT):
            facing = rotate_heading(facing, action, instruction.value)
        elif action == FORWARD:
            movements[facing] += instruction.value
        else:
            raise ValueError(f"invalid action: {action!r}")
    return abs(movements[NORTH] - movements[SOUTH]) + abs(movements[EAST] - movements[WEST])


def _trig(degrees: int) -> tuple[int, int]:
    radians = math.radians(degrees)
    return int(math.cos(radians)), int(math.sin(radians))


def rotate_waypoint_clockwise(x: int, y: int, degrees: int) -> tuple[int, int]:
    cos, sin = _trig(degrees)
    return x * cos + y * sin, -(x * sin) + y * cos


def rotate_waypoint_anticlockwise(x: int, y: int, degrees: int) -> tuple[int, int]:
    cos, sin = _trig(degrees)
    return x * cos - y * sin, x * sin + y * cos


def navigate_waypoint(navigation: Iterable[Instruction]) -> int:
    """Manhattan distance travelled when most instructions move a waypoint."""
    waypoint_x, waypoint_y = 10, 1
    ship_x = ship_y = 0
    for instruction in navigation:
        action, value = instruction.action, instruction.value
        if action == NORTH:
            waypoint_y += value
        elif action == EAST:
            waypoint_x += value
        elif action == SOUTH:
            waypoint_y -= value
        elif action == WEST:
            waypoint_x -= value
        elif action == LEFT:
            waypoint_x, waypoint_y = rotate_waypoint_anticlockwise(waypoint_x, waypoint_y, value)
        elif action == RIGHT:
            waypoint_x, waypoint_y = rotate_waypoint_clockwise(waypoint_x, waypoint_y, value)
        elif action == FORWARD:
            ship_x += waypoint_x * value
            ship_y += waypoint_y * value
        else:
            raise ValueError(f"invalid action: {action!r}")
    return abs(ship_x) + abs(ship_y)


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    navigation = parse_navigation(_read_input(argv))
    print(f"Part1: {navigate_ship(navigation)}")
    print(f"Part2: {navigate_waypoint(navigation)}")


if __name__ == "__main__":
    main()