"""Handheld halting: run boot code and repair its infinite loop."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

DEFAULT_INPUT = Path("data/day08.txt")


class Operation(str, Enum):
    ACC = "acc"
    JMP = "jmp"
    NOP = "nop"


@dataclass(frozen=True)
class Instruction:
    op: Operation
    value: int


def parse_program(text: str) -> list[Instruction]:
    program = []
    for line in text.splitlines():
        parts = line.split(" ")
        if len(parts) < 2:
            raise ValueError(f"malformed instruction: {line!r}")
        program.append(Instruction(Operation(parts[0]), int(parts[1])))
    return program


def run_boot_code(program: Sequence[Instruction]) -> tuple[int, bool]:
    """Run until an instruction repeats or the program ends.

    Returns the accumulator and whether the program terminated.
    """
    index = 0
    accumulator = 0
    visited: set[int] = set()
    while index < len(program):
        if index < 0:
            raise IndexError(f"jump to negative instruction {index}")
        if index in visited:
            return accumulator, False
        visited.add(index)
        instruction = program[index]
        if instruction.op is Operation.ACC:
            accumulator += instruction.value
            index += 1
        elif instruction.op is Operation.JMP:
            index += instruction.value
        else:
            index += 1
    return accumulator, True


def repair_program(program: Sequence[Instruction]) -> int:
    """Swap one jmp/nop so the program terminates; return its accumulator."""
    for index, instruction in enumerate(program):
        if instruction.op is Operation.ACC:
            continue
        swapped = Operation.NOP if instruction.op is Operation.JMP else Operation.JMP
        patched = list(program)
        patched[index] = replace(instruction, op=swapped)
        accumulator, terminated = run_boot_code(patched)
        if terminated:
            return accumulator
    raise ValueError("no single jmp/nop change makes the program terminate")


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    program = parse_program(_read_input(argv))
    part1, _ = run_boot_code(program)
    try:
        part2 = repair_program(program)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    print(f"Part1: {part1}")
    print(f"Part2: {part2}")


if __name__ == "__main__":
    main()