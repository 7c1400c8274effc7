import pytest

from advent2020.day04 import (
    count_passports,
    has_required_fields,
    is_credentials_valid,
    main,
    parse_passports,
    within_range,
)

VALID = "pid:087499704 hgt:74in ecl:grn iyr:2012\neyr:2030 byr:1980 hcl:#623a2f"
BAD_VALUES = "eyr:1972 cid:100\nhcl:#18171d ecl:amb hgt:170 pid:186cm iyr:2018 byr:1926"
INCOMPLETE = "hcl:#cfa07d eyr:2025 pid:166559648\niyr:2011 ecl:brn hgt:59in"


@pytest.mark.parametrize(
    "value, expected",
    [("2002", True), ("1920", True), ("2003", False), ("1919", False), ("abc", False), ("", False)],
)
def test_within_range(value, expected):
    assert within_range(value, 1920, 2002) is expected


@pytest.mark.parametrize(
    "key, value, expected",
    [
        ("byr", "2002", True),
        ("byr", "2003", False),
        ("hgt", "60in", True),
        ("hgt", "190cm", True),
        ("hgt", "190in", False),
        ("hgt", "190", False),
        ("hcl", "#123abc", True),
        ("hcl", "#123abz", False),
        ("hcl", "123abc", False),
        ("ecl", "brn", True),
        ("ecl", "wat", False),
        ("pid", "000000001", True),
        ("pid", "0123456789", False),
        ("cid", "anything", True),
    ],
)
def test_field_rules(key, value, expected):
    assert is_credentials_valid({key: value}) is expected


def test_has_required_fields():
    passport = parse_passports(VALID)[0]
    assert has_required_fields(passport)
    assert has_required_fields({**passport, "cid": "1"})
    without_byr = {k: v for k, v in passport.items() if k != "byr"}
    assert not has_required_fields({**without_byr, "cid": "1"})


def test_parse_passports():
    passports = parse_passports("\n\n".join([VALID, BAD_VALUES]))
    assert len(passports) == 2
    assert passports[0]["hcl"] == "#623a2f"
    assert passports[1]["cid"] == "100"


def test_parse_rejects_field_without_colon():
    with pytest.raises(ValueError):
        parse_passports("byr1980")


def test_count_passports():
    passports = parse_passports("\n\n".join([VALID, BAD_VALUES, INCOMPLETE]))
    assert count_passports(passports) == (2, 1)


def test_main(tmp_path, capsys):
    text = "\n\n".join([VALID, BAD_VALUES, INCOMPLETE]) + "\n"
    path = tmp_path / "input.txt"
    path.write_text(text)
    main([str(path)])
    part1, part2 = count_passports(parse_passports(text))
    assert capsys.readouterr().out.splitlines() == [f"Part1: {part1}", f"Part2: {part2}"]