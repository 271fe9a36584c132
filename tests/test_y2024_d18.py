import pytest

from adventsolve.y2024_d18 import shortest_path, solve


@pytest.mark.parametrize("size", [2, 3, 5, 8])
def test_open_grid(size):
    assert shortest_path(set(), size) == 2 * (size - 1)


def test_wall_blocks():
    assert shortest_path({(1, 0), (1, 1), (1, 2)}, 3) is None


def test_solve_finds_cutting_byte():
    text = "0,1\n1,1\n2,1\n"
    length, index = solve(text, size=3, fallen=1)
    assert length == 4
    assert index == 2


def test_never_cut():
    with pytest.raises(ValueError):
        solve("0,1\n", size=3, fallen=0)