import hashlib

import pytest

from adventsolve.y2015_d04 import find_suffix


def _hex(secret, number):
    return hashlib.md5(f"{secret}{number}".encode()).hexdigest()


def test_known_five_zero_answer():
    assert find_suffix("abcdef", 5) == 609043


def test_no_zeros_needed_gives_first_number():
    assert find_suffix("anything", 0) == 1


@pytest.mark.parametrize("secret", ["abc", "xyz", "key"])
def test_two_zero_answer_is_the_lowest(secret):
    found = find_suffix(secret, 2)
    assert _hex(secret, found).startswith("00")
    assert not any(_hex(secret, n).startswith("00") for n in range(1, found))


def test_more_zeros_never_found_earlier():
    assert find_suffix("abc", 3) >= find_suffix("abc", 2)