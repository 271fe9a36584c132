"""Check reactor reports for safely changing levels."""

import argparse
from pathlib import Path

DEFAULT_INPUT = Path("input/2024/02")


def first_violation(levels):
    """Return the index of the first level breaking a safe decrease, or None.

    A safe step goes strictly down by at most three.
    """
    if not levels:
        raise ValueError("a report needs at least one level")
    for index, (a, b) in enumerate(zip(levels, levels[1:]), start=1):
        if not (a > b and a - b <= 3):
            return index
    return None


def _without(levels, index):
    return levels[:index] + levels[index + 1:]


def solve(text):
    """Return the number of safe reports, without and with the dampener."""
    safe = dampened = 0
    for line in text.splitlines():
        if not line:
            continue
        levels = [int(n) for n in line.split(" ")]
        reverse = levels[::-1]
        forward = first_violation(levels)
        backward = first_violation(reverse)

        if forward is None or backward is None:
            safe += 1
            dampened += 1
            continue

        candidates = (
            (levels, forward),
            (levels, forward - 1),
            (reverse, backward),
            (reverse, backward - 1),
        )
        if any(first_violation(_without(seq, i)) is None for seq, i in candidates):
            dampened += 1

    return safe, dampened


def main(argv=None):
    parser = argparse.ArgumentParser(description="Count safe reactor reports.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    safe, dampened = solve(args.path.read_text())
    print(safe)
    print(dampened)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())