from adventsolve.y2024_d03 import main, solve

FIRST = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
SECOND = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_examples():
    plain_first, conditional_first = solve(FIRST)
    assert plain_first == 161
    assert conditional_first == plain_first
    plain_second, conditional_second = solve(SECOND)
    assert plain_second == plain_first
    assert conditional_second == 48


def test_four_digit_operand_is_rejected():
    assert solve("mul(1234,5)") == (0, 0)


def test_single_instruction_counts_in_both_parts():
    plain, conditional = solve("mul(7,6)")
    assert plain == conditional == solve("junk mul(7,6) junk")[0]


def test_do_reenables_multiplication():
    text = "don't()mul(3,3)do()mul(2,5)x"
    assert solve(text)[1] == solve("mul(2,5)")[1]


def test_conditional_never_exceeds_plain_on_examples():
    for text in (FIRST, SECOND):
        plain, conditional = solve(text)
        assert conditional <= plain


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SECOND + "\n")
    assert main([str(path)]) == 0
    plain, conditional = solve(SECOND)
    assert capsys.readouterr().out.splitlines() == [str(plain), str(conditional)]