import pytest

from advent2020.day19 import (
    build_pattern,
    count_matches,
    count_matches_with_loops,
    parse_input,
)

SIMPLE = '0: 1 2\n1: "a"\n2: 1 3 | 3 1\n3: "b"\n\naab\naba\nabb\n'

LOOPING = {0: "8 11", 8: "42", 11: "42 31", 42: "a", 31: "b"}


def test_parse_input_strips_quotes_and_reads_messages():
    rules, messages = parse_input('0: 1 2\n1: "a"\n2: "b"\n\nab\nba\n')
    assert rules == {0: "1 2", 1: "a", 2: "b"}
    assert messages == ["ab", "ba"]


def test_parse_input_rejects_malformed_rule():
    with pytest.raises(ValueError):
        parse_input("0 1 2\n\nab\n")


def test_build_pattern_for_literal_is_literal():
    rules, _ = parse_input(SIMPLE)
    assert build_pattern(rules, 1) == "a"


def test_build_pattern_for_alternation():
    rules, _ = parse_input(SIMPLE)
    assert build_pattern(rules, 2) == "(ab|ba)"


def test_count_matches_accepts_and_rejects():
    rules, _ = parse_input(SIMPLE)
    matching = ["aab", "aba"]
    assert count_matches(rules, matching) == len(matching)
    assert count_matches(rules, ["abb", "ab", "aaba"]) == 0


def test_count_matches_over_parsed_messages():
    rules, messages = parse_input(SIMPLE)
    assert count_matches(rules, messages) == count_matches(rules, ["aab", "aba"])


def test_loops_accept_more_than_plain_rules():
    messages = ["aab", "aaab", "aaaabb", "ab", "abab"]
    assert count_matches(LOOPING, ["aab"]) == 1
    assert count_matches(LOOPING, ["aaaabb"]) == 0
    assert count_matches_with_loops(LOOPING, ["aaaabb", "aaab"]) == 2
    assert count_matches(LOOPING, messages) <= count_matches_with_loops(LOOPING, messages)


def test_loops_respect_repeat_limits():
    longest = "a" * 17 + "b" * 7
    too_long = "a" * 18 + "b" * 7
    assert count_matches_with_loops(LOOPING, [longest]) == 1
    assert count_matches_with_loops(LOOPING, [too_long]) == 0


def test_loops_reject_unbalanced_pairs():
    assert count_matches_with_loops(LOOPING, ["abb", "b", "a"]) == 0


def test_cyclic_rule_raises():
    with pytest.raises(ValueError):
        build_pattern({0: "1 0", 1: "a"}, 0)


def test_missing_rule_raises():
    with pytest.raises(ValueError):
        build_pattern({0: "1 2", 1: "a"}, 0)