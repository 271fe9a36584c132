import pytest

from adventsolve.y2024_d07 import can_make, main, solve

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_example():
    assert solve(EXAMPLE) == (3749, 11387)


def test_multiplication_equation():
    assert can_make(190, [10, 19], False) is True


def test_concatenation_needed():
    assert can_make(156, [15, 6], False) is False
    assert can_make(156, [15, 6], True) is True


def test_leading_numbers_can_vanish_into_zero():
    assert can_make(5, [3, 5], False) is True


def test_unreachable_target():
    assert can_make(83, [17, 5], True) is False


def test_extended_total_includes_plain_total():
    plain, extended = solve(EXAMPLE)
    assert extended >= plain


def test_missing_separator_raises():
    with pytest.raises(ValueError):
        solve("190 10 19\n")


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    plain, extended = solve(EXAMPLE)
    assert capsys.readouterr().out.splitlines() == [f"p1: {plain}", f"p2: {extended}"]