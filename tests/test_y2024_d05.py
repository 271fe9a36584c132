import pytest

from adventsolve.y2024_d05 import main, solve

RULES = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13"""

UPDATES = """75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""

EXAMPLE = RULES + "\n\n" + UPDATES


def test_example():
    assert solve(EXAMPLE) == (143, 123)


def test_single_ordered_update_gives_its_middle():
    assert solve(RULES + "\n\n75,47,61\n") == (47, 0)


def test_reordering_a_bad_update_makes_it_ordered():
    _, fixed = solve(RULES + "\n\n61,13,29\n")
    ordered, _ = solve(RULES + "\n\n61,29,13\n")
    assert fixed == ordered


def test_missing_separator_raises():
    with pytest.raises(ValueError):
        solve(RULES)


def test_malformed_rule_raises():
    with pytest.raises(ValueError):
        solve("47\n\n47,53\n")


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    ordered, fixed = solve(EXAMPLE)
    assert capsys.readouterr().out.splitlines() == [str(ordered), str(fixed)]