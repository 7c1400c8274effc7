import pytest

from advent2020.day16 import (
    Bound,
    Notes,
    departure_product,
    determine_fields,
    find_invalid_tickets,
    main,
    parse_notes,
)

ERROR_EXAMPLE = """class: 1-3 or 5-7
row: 6-11 or 33-44
seat: 13-40 or 45-50

your ticket:
7,1,14

nearby tickets:
7,3,47
40,4,50
55,2,20
38,6,12
"""

FIELD_EXAMPLE = """class: 0-1 or 4-19
departure row: 0-5 or 8-19
departure seat: 0-13 or 16-19

your ticket:
11,12,13

nearby tickets:
3,9,18
15,1,5
5,14,9
"""


def test_parse_notes_reads_rules_and_tickets():
    notes = parse_notes(ERROR_EXAMPLE)
    assert notes.bounds[0] == Bound("class", 1, 3)
    assert notes.bounds[1] == Bound("class", 5, 7)
    assert len(notes.bounds) == 6
    assert notes.my_ticket == [7, 1, 14]
    assert notes.nearby[0] == [7, 3, 47]
    assert len(notes.nearby) == 4


def test_bound_contains_is_inclusive():
    bound = Bound("row", 6, 11)
    assert bound.contains(6)
    assert bound.contains(11)
    assert not bound.contains(5)
    assert not bound.contains(12)


def test_find_invalid_tickets_example():
    notes = parse_notes(ERROR_EXAMPLE)
    invalid, indices = find_invalid_tickets(notes.bounds, notes.nearby)
    assert invalid == [4, 55, 12]
    assert len(indices) == len(invalid)
    assert all(value in notes.nearby[index] for value, index in zip(invalid, indices))


def test_valid_tickets_are_not_reported():
    notes = parse_notes(FIELD_EXAMPLE)
    invalid, indices = find_invalid_tickets(notes.bounds, notes.nearby)
    assert invalid == []
    assert indices == []


def test_determine_fields_example():
    notes = parse_notes(FIELD_EXAMPLE)
    tickets = [*notes.nearby, notes.my_ticket]
    positions = determine_fields(len(notes.my_ticket), notes.bounds, tickets)
    assert sorted(positions) == [0, 2]


def test_determine_fields_without_departures():
    notes = parse_notes(ERROR_EXAMPLE)
    assert determine_fields(3, notes.bounds, [[7, 1, 14]]) == []


def test_departure_product_example():
    assert departure_product(parse_notes(FIELD_EXAMPLE)) == 143


def test_departure_product_with_no_departure_fields_is_empty_product():
    notes = Notes([Bound("class", 0, 100)], [42], [[7]])
    assert departure_product(notes) == 1


def test_malformed_rule_raises():
    with pytest.raises(ValueError):
        parse_notes("class: 1-3 and 5-7\n")


def test_main_prints_error_rate(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(FIELD_EXAMPLE)
    main([str(path)])
    assert capsys.readouterr().out.splitlines() == ["Part1: 0", "Part2: 143"]