"""Elevator directions: '(' goes up a floor, ')' goes down one."""

import argparse
from pathlib import Path

DEFAULT_INPUT = Path("input/2015/01")


def final_floor(text):
    """Return the floor reached after following every parenthesis in ``text``."""
    return text.count("(") - text.count(")")


def basement_position(text):
    """Return the 1-based position of the first character that enters the basement.

    Every character other than '(' counts as a step down.  If the floor never
    drops below zero, the floor reached at the end is returned instead.
    """
    floor = 0
    for position, char in enumerate(text, start=1):
        floor += 1 if char == "(" else -1
        if floor < 0:
            return position
    return floor


def solve(text):
    """Return both answers for the puzzle input."""
    return final_floor(text), basement_position(text)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Follow the elevator directions.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    floor, position = solve(args.path.read_text())
    print(f"p1: {floor}")
    print(f"p2: {position}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())