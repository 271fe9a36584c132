import pytest

from adventsolve.y2024_d19 import count_arrangements, solve


def test_two_ways():
    assert count_arrangements("ab", ["a", "b", "ab"]) == 2


def test_empty_design():
    assert count_arrangements("", ["a"]) == 1


def test_impossible():
    assert count_arrangements("c", ["a", "b"]) == 0


def test_single_towel_repeated():
    assert count_arrangements("aaaa", ["a"]) == 1


def test_solve_counts():
    possible, total = solve("a, b, ab\n\nab\nc\nba\n")
    assert possible == 2
    assert total == count_arrangements("ab", ["a", "b", "ab"]) + 1


def test_missing_separator():
    with pytest.raises(ValueError):
        solve("a, b\n")