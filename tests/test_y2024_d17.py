import pytest

from adventsolve.y2024_d17 import find_quine, run_program, solve

EXPECTED = [4, 6, 3, 5, 6, 3, 5, 2, 1, 0]


def test_run_example():
    assert run_program([729, 0, 0], [0, 1, 5, 4, 3, 0]) == EXPECTED


def test_quine_reproduces_program():
    program = [0, 3, 5, 4, 3, 0]
    a = find_quine(program)
    assert run_program([a, 0, 0], program) == program


def test_quine_is_lowest():
    program = [0, 3, 5, 4, 3, 0]
    a = find_quine(program)
    assert all(run_program([k, 0, 0], program) != program for k in range(0, a, 97))


def test_solve_output_string():
    text = "Register A: 729\nRegister B: 0\nRegister C: 0\n\nProgram: 0,1,5,4,3,0\n"
    output, _ = solve(text)
    assert output == ",".join(str(n) for n in EXPECTED)


def test_invalid_combo():
    with pytest.raises(ValueError):
        run_program([0, 0, 0], [5, 7])


def test_literal_output():
    assert run_program([0, 0, 0], [5, 3]) == [3]