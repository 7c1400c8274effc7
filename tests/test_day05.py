import pytest

from advent2020.day05 import (
    decode_partition,
    find_my_seat,
    highest_seat_id,
    main,
    seat_id,
)


def test_decode_row_example():
    assert decode_partition("FBFBBFF", 128) == 44


def test_decode_column_example():
    assert decode_partition("RLR", 8) == 5


def test_seat_id_example():
    assert seat_id("FBFBBFFRLR") == 357


def test_decode_extremes():
    assert decode_partition("FFFFFFF", 128) == 0
    assert decode_partition("BBBBBBB", 128) == 128 - 1
    assert decode_partition("LLL", 8) == 0
    assert decode_partition("RRR", 8) == 8 - 1


def test_decode_invalid_character():
    with pytest.raises(ValueError):
        decode_partition("FXF", 128)


def test_highest_seat_id():
    assert highest_seat_id(["FBFBBFFRLR", "BBBBBBBRRR"]) == seat_id("BBBBBBBRRR")


def test_highest_seat_id_empty():
    assert highest_seat_id([]) == -1


def test_find_my_seat():
    assert find_my_seat([14, 10, 11, 13]) == 11 + 1


def test_find_my_seat_without_gap():
    assert find_my_seat([1, 2, 3]) == 0


def test_main(tmp_path, capsys):
    passes = ["FBFBBFFRLR", "FBFBBFFRRR", "FBFBBFBLLR"]
    path = tmp_path / "input.txt"
    path.write_text("\n".join(passes) + "\n")
    main([str(path)])
    ids = [seat_id(p) for p in passes]
    assert capsys.readouterr().out.splitlines() == [
        f"Part1: {max(ids)}",
        f"Part2: {find_my_seat(ids)}",
    ]