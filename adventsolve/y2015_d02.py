"""Wrapping paper and ribbon needed for a list of presents."""

import argparse
from pathlib import Path

DEFAULT_INPUT = Path("input/2015/02")


def _boxes(text):
    for line in text.splitlines():
        if not line:
            continue
        dims = sorted(int(n) for n in line.split("x"))
        if len(dims) < 3:
            raise ValueError(f"expected three dimensions in {line!r}")
        yield dims[:3]


def wrapping_paper(text):
    """Return the total square feet of paper for every present in ``text``."""
    return sum(
        2 * a * b + 2 * b * c + 2 * a * c + a * b for a, b, c in _boxes(text)
    )


def ribbon(text):
    """Return the total feet of ribbon for every present in ``text``."""
    return sum(2 * a + 2 * b + a * b * c for a, b, c in _boxes(text))


def solve(text):
    """Return both answers for the puzzle input."""
    return wrapping_paper(text), ribbon(text)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Measure paper and ribbon.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    paper, length = solve(args.path.read_text())
    print(f"p1: {paper}")
    print(f"p2: {length}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())