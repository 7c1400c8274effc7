import pytest

from advent2020.day08 import (
    Instruction,
    Operation,
    main,
    parse_program,
    repair_program,
    run_boot_code,
)

EXAMPLE = """\
nop +0
acc +1
jmp +4
acc +3
jmp -3
acc -99
acc +1
jmp -4
acc +6
"""


def test_parse_program():
    program = parse_program(EXAMPLE)
    assert program[0] == Instruction(Operation.NOP, 0)
    assert program[4] == Instruction(Operation.JMP, -3)


def test_parse_unknown_operation():
    with pytest.raises(ValueError):
        parse_program("hop +1")


def test_run_detects_loop():
    assert run_boot_code(parse_program(EXAMPLE)) == (5, False)


def test_run_terminates():
    assert run_boot_code(parse_program("nop +0\nacc +1\nacc +2")) == (1 + 2, True)


def test_run_negative_jump():
    with pytest.raises(IndexError):
        run_boot_code(parse_program("jmp -5"))


def test_repair_program():
    assert repair_program(parse_program(EXAMPLE)) == 8


def test_repair_leaves_program_unchanged():
    program = parse_program(EXAMPLE)
    original = list(program)
    repair_program(program)
    assert program == original


def test_repair_impossible():
    with pytest.raises(ValueError):
        repair_program(parse_program("jmp +0\njmp +0"))


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    program = parse_program(EXAMPLE)
    assert capsys.readouterr().out.splitlines() == [
        f"Part1: {run_boot_code(program)[0]}",
        f"Part2: {repair_program(program)}",
    ]