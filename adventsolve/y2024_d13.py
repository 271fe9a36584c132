"""Solve claw machines for the cheapest number of button presses."""

import argparse
from pathlib import Path

DEFAULT_INPUT = Path("input/2024/13")

_OFFSET = 10000000000000


def prize_cost(a, b, prize):
    """Return the token cost of reaching ``prize`` with buttons ``a`` and ``b``, or 0.

    Button A costs 3 tokens and B costs 1.  Raises ZeroDivisionError when
    the buttons are parallel or B does not move along X.
    """
    determinant = a[0] * b[1] - a[1] * b[0]
    numerator = prize[0] * b[1] - prize[1] * b[0]
    if numerator % determinant != 0:
        return 0
    presses_a = numerator // determinant
    remainder = prize[0] - a[0] * presses_a
    if remainder % b[0] != 0:
        return 0
    return presses_a * 3 + remainder // b[0]


def _machines(text):
    for entry in text.split("\n\n"):
        if not entry.strip():
            continue
        lines = entry.splitlines()
        if len(lines) < 3:
            raise ValueError(f"incomplete machine description: {entry!r}")
        _, _, ax, ay = lines[0].split(" ")
        _, _, bx, by = lines[1].split(" ")
        _, px, py = lines[2].split(" ")
        yield (
            (int(ax[2:-1]), int(ay[2:])),
            (int(bx[2:-1]), int(by[2:])),
            (int(px[2:-1]), int(py[2:])),
        )


def solve(text):
    """Return the total cost as given and with prizes moved far away."""
    near = far = 0
    for a, b, prize in _machines(text):
        near += prize_cost(a, b, prize)
        far += prize_cost(a, b, (prize[0] + _OFFSET, prize[1] + _OFFSET))
    return near, far


def main(argv=None):
    parser = argparse.ArgumentParser(description="Win prizes from claw machines.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    near, far = solve(args.path.read_text())
    print(f"p1: {near}")
    print(f"p2: {far}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())