import pytest

from advent2020.day11 import (
    Direction,
    parse_seats,
    stable_occupied_count,
    visible_occupied,
)

EXAMPLE = """\
L.LL.LL.LL
LLLLLLL.LL
L.L.L..L..
LLLL.LL.LL
L.LL.LL.LL
L.LLLLL.LL
..L.L.....
LLLLLLLLLL
L.LLLLLL.L
L.LLLLL.LL
"""


def test_example_adjacent_rules():
    assert stable_occupied_count(parse_seats(EXAMPLE), line_of_sight=False) == 37


def test_example_line_of_sight_rules():
    assert stable_occupied_count(parse_seats(EXAMPLE), line_of_sight=True) == 26


@pytest.mark.parametrize("line_of_sight", [False, True])
def test_isolated_seats_all_fill(line_of_sight):
    text = "L.L.L\n.....\nL...L\n"
    # with floor between them no seat ever crowds another under adjacency rules
    result = stable_occupied_count(parse_seats(text), line_of_sight=False)
    assert result == text.count("L")
    assert stable_occupied_count(parse_seats("L\n"), line_of_sight) == "L".count("L")


@pytest.mark.parametrize("line_of_sight", [False, True])
def test_floor_only_grid_has_no_occupants(line_of_sight):
    text = "...\n...\n"
    assert stable_occupied_count(parse_seats(text), line_of_sight) == text.count("L")


@pytest.mark.parametrize("line_of_sight", [False, True])
def test_result_bounded_and_input_untouched(line_of_sight):
    seats = parse_seats(EXAMPLE)
    before = dict(seats)
    result = stable_occupied_count(seats, line_of_sight)
    assert seats == before
    assert 0 < result <= EXAMPLE.count("L")


def test_visible_occupied_looks_past_floor():
    text = "#.L"
    seats = parse_seats(text)
    total = sum(visible_occupied(seats, (0, 2), d) for d in Direction)
    assert total == text.count("#")
    assert visible_occupied(seats, (0, 0), Direction.EAST) == visible_occupied(
        seats, (0, 0), Direction.WEST
    )


def test_parse_rejects_unknown_state():
    with pytest.raises(ValueError):
        parse_seats("L.X\n")