import pytest

from adventsolve.y2024_d09 import solve


def test_block_compaction_checksum():
    assert solve("12345\n")[0] == 60


def test_small_map():
    assert solve("123")[0] == 6


def test_single_file_has_zero_checksum():
    assert solve("9\n") == (0, 0)


def test_empty_map_is_an_error():
    with pytest.raises(ValueError):
        solve("\n")