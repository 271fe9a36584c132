from adventsolve.y2024_d21 import DIRECTIONAL, NUMERIC, keypad_paths, solve


def test_zero_from_a():
    paths = keypad_paths(NUMERIC, "0A", (4, 3))
    assert min(len(p) for p in paths) == 4
    assert "<A>A" in paths


def test_every_path_presses_a_once_per_key():
    for path in keypad_paths(NUMERIC, "029A", (4, 3)):
        assert path.count("A") == 4
        assert path.endswith("A")


def test_directional_press_a():
    assert keypad_paths(DIRECTIONAL, "A", (3, 3)) == ["A"]


def test_empty_code():
    assert keypad_paths(NUMERIC, "", (4, 3)) == [""]


def test_solve_skips_blank_lines():
    value = solve("1A\n")
    assert value > 0
    assert solve("1A\n\n") == value
    assert solve("") == 0