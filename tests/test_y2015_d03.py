from adventsolve.y2015_d03 import main, solve


def test_back_and_forth_example():
    assert solve("^v^v^v^v^v") == (2, 11)


def test_square_example():
    assert solve("^>v<")[0] == 4


def test_other_characters_do_not_move_santa():
    assert solve("^>\nv<")[0] == solve("^>v<")[0]


def test_visited_count_is_bounded_by_moves():
    text = "^^>>vv<<<>^v>>>^"
    alone, shared = solve(text)
    assert 1 <= alone <= len(text) + 1
    assert 1 <= shared <= len(text) + 1


def test_empty_route_visits_only_the_start():
    alone, shared = solve("")
    assert alone == shared == solve("x")[0]


def test_mirrored_route_visits_same_number_of_houses():
    text = "^>>v<^^<"
    mirrored = text.translate(str.maketrans("<>^v", "><v^"))
    assert solve(mirrored) == solve(text)


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("^>v<")
    assert main([str(path)]) == 0
    alone, shared = solve("^>v<")
    assert capsys.readouterr().out.splitlines() == [f"p1: {alone}", f"p2: {shared}"]