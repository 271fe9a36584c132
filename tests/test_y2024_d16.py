import pytest

from adventsolve.y2024_d16 import solve


def test_straight_corridor():
    assert solve("#####\n#S.E#\n#####\n") == (2, 3)


def test_turn_costs_more_than_step():
    lowest, tiles = solve("####\n#.E#\n#S.#\n####\n")
    assert lowest > 1000
    assert tiles >= 3


def test_open_edge_is_an_error():
    with pytest.raises(ValueError):
        solve("S..\n")