import pytest

from adventsolve.y2015_d02 import main, ribbon, solve, wrapping_paper


def test_example_box():
    assert wrapping_paper("2x3x4") == 58
    assert ribbon("2x3x4") == 34


@pytest.mark.parametrize("order", ["2x3x4", "4x2x3", "3x4x2"])
def test_dimension_order_does_not_matter(order):
    assert solve(order) == solve("2x3x4")


def test_totals_add_over_lines():
    first, second = "2x3x4", "1x1x10"
    combined = solve(f"{first}\n{second}\n")
    assert combined[0] == wrapping_paper(first) + wrapping_paper(second)
    assert combined[1] == ribbon(first) + ribbon(second)


def test_blank_lines_are_skipped():
    assert solve("\n2x3x4\n\n") == solve("2x3x4")


def test_too_few_dimensions_raise():
    with pytest.raises(ValueError):
        wrapping_paper("2x3")


def test_non_numeric_dimension_raises():
    with pytest.raises(ValueError):
        ribbon("2xAx4")


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("2x3x4\n1x1x10\n")
    assert main([str(path)]) == 0
    paper, length = solve("2x3x4\n1x1x10\n")
    assert capsys.readouterr().out.splitlines() == [f"p1: {paper}", f"p2: {length}"]