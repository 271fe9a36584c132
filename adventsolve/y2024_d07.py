"""Find calibration equations that operators can make true."""

import argparse
from pathlib import Path

DEFAULT_INPUT = Path("input/2024/07")


def _reachable(target, numbers, index, current, allow_concat):
    if index == len(numbers):
        return target == current
    value = numbers[index]
    following = index + 1
    if allow_concat and _reachable(
        target, numbers, following, int(f"{current}{value}"), allow_concat
    ):
        return True
    return _reachable(
        target, numbers, following, current + value, allow_concat
    ) or _reachable(target, numbers, following, current * value, allow_concat)


def can_make(target, numbers, allow_concat):
    """Tell whether +, * (and || when allowed) turn ``numbers`` into ``target``.

    Evaluation goes left to right from a running value of zero, so the first
    numbers may also be multiplied into that zero.
    """
    return _reachable(target, tuple(numbers), 0, 0, allow_concat)


def _equations(text):
    for line in text.splitlines():
        if not line:
            continue
        head, separator, tail = line.partition(": ")
        if not separator:
            raise ValueError(f"expected 'target: numbers', got {line!r}")
        yield int(head), [int(n) for n in tail.split(" ")]


def solve(text):
    """Return the calibration totals without and with concatenation."""
    plain = extended = 0
    for target, numbers in _equations(text):
        if can_make(target, numbers, False):
            plain += target
        if can_make(target, numbers, True):
            extended += target
    return plain, extended


def main(argv=None):
    parser = argparse.ArgumentParser(description="Repair bridge calibrations.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    plain, extended = solve(args.path.read_text())
    print(f"p1: {plain}")
    print(f"p2: {extended}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())