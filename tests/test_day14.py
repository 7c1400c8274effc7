import pytest

from advent2020.day14 import (
    apply_value_mask,
    floating_addresses,
    main,
    run_version1,
    run_version2,
)

VERSION1_EXAMPLE = (
    "mask = " + "X" * 29 + "1XXXX0X" + "\n"
    "mem[8] = 11\n"
    "mem[7] = 101\n"
    "mem[8] = 0\n"
)

FLOATING_MASK = "0" * 30 + "X1001X"

VERSION2_EXAMPLE = (
    "mask = " + FLOATING_MASK + "\n"
    "mem[42] = 100\n"
    "mask = " + "0" * 32 + "X0XX" + "\n"
    "mem[26] = 1\n"
)


@pytest.mark.parametrize("value", [0, 11, 101, 123456789])
def test_all_floating_mask_keeps_value(value):
    assert apply_value_mask("X" * 36, value) == value


def test_mask_without_floating_bits_ignores_value():
    mask = "1" * 18 + "0" * 18
    assert apply_value_mask(mask, 5) == apply_value_mask(mask, 999999)


@pytest.mark.parametrize("value", [0, 11, 101, 2**36 - 1])
def test_value_mask_is_idempotent(value):
    mask = "X" * 29 + "1XXXX0X"
    once = apply_value_mask(mask, value)
    assert apply_value_mask(mask, once) == once


def test_floating_addresses_example():
    assert floating_addresses(FLOATING_MASK, 42) == [26, 27, 58, 59]


def test_floating_address_count_and_distinctness():
    mask = "X" * 3 + "0" * 30 + "X1X"
    addresses = floating_addresses(mask, 1000)
    assert len(addresses) == 2 ** mask.count("X")
    assert len(set(addresses)) == len(addresses)


def test_floating_addresses_without_floating_bits():
    assert floating_addresses("0" * 36, 1000) == [1000]


@pytest.mark.parametrize("mask", ["X" * 35, "X" * 37, "X" * 35 + "2"])
def test_invalid_mask_raises(mask):
    with pytest.raises(ValueError):
        apply_value_mask(mask, 1)


def test_value_too_wide_raises():
    with pytest.raises(ValueError):
        apply_value_mask("X" * 36, 2**36)


def test_run_version1_example():
    assert run_version1(VERSION1_EXAMPLE) == 165


def test_run_version2_example():
    assert run_version2(VERSION2_EXAMPLE) == 208


def test_memory_write_before_mask_raises():
    with pytest.raises(ValueError):
        run_version1("mem[8] = 11\n")


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        run_version1("mask = " + "X" * 36 + "\nmemory 8 11\n")


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(VERSION2_EXAMPLE)
    main([str(path)])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Part1: ")
    assert lines[1] == "Part2: 208"