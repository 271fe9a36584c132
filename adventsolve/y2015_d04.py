"""Mine AdventCoins: find MD5 hashes that start with runs of zeros."""

import argparse
import hashlib
from itertools import count
from pathlib import Path

DEFAULT_INPUT = Path("input/2015/04")


def _digest(secret, number):
    data = bytes(ord(char) & 0xFF for char in f"{secret}{number}")
    return hashlib.md5(data).hexdigest()


def _search(secret, zeros, start):
    prefix = "0" * zeros
    return next(n for n in count(start) if _digest(secret, n).startswith(prefix))


def find_suffix(secret, zeros):
    """Return the lowest positive number whose hash with ``secret`` starts with ``zeros`` hex zeros."""
    return _search(secret, zeros, 1)


def solve(text):
    """Return the numbers giving five and then six leading zeros.

    The search for six zeros continues after the number found for five.
    """
    secret = text.strip()
    five = _search(secret, 5, 1)
    six = _search(secret, 6, five + 1)
    return five, six


def main(argv=None):
    parser = argparse.ArgumentParser(description="Mine hashes with leading zeros.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    five, six = solve(args.path.read_text())
    print(f"Part 1: {five}")
    print(f"Part 2: {six}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())