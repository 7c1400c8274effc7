from advent2020.day06 import count_all_yes, count_any_yes, main, parse_groups

EXAMPLE = "abc\n\na\nb\nc\n\nab\nac\n\na\na\na\na\n\nb\n"


def test_parse_groups():
    assert parse_groups("ab\nac\n\nb\n") == [["ab", "ac"], ["b"]]


def test_parse_groups_ignores_extra_blank_lines():
    assert parse_groups("\n\nab\n\n\n\nc\n\n") == [["ab"], ["c"]]


def test_count_any_yes_example():
    assert count_any_yes(parse_groups(EXAMPLE)) == 11


def test_count_all_yes_example():
    assert count_all_yes(parse_groups(EXAMPLE)) == 6


def test_single_person_counts_agree():
    groups = [["xyz"]]
    assert count_any_yes(groups) == count_all_yes(groups) == len("xyz")


def test_all_yes_never_exceeds_any_yes():
    groups = parse_groups(EXAMPLE)
    for group in groups:
        assert count_all_yes([group]) <= count_any_yes([group])


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    groups = parse_groups(EXAMPLE)
    assert capsys.readouterr().out.splitlines() == [
        f"Part1: {count_any_yes(groups)}",
        f"Part2: {count_all_yes(groups)}",
    ]