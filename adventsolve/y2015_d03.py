"""Houses visited by Santa, alone and taking turns with a robot."""

import argparse
from pathlib import Path

DEFAULT_INPUT = Path("input/2015/03")

_MOVES = {">": (1, 0), "v": (0, 1), "^": (0, -1), "<": (-1, 0)}


def solve(text):
    """Return how many houses Santa alone, and Santa with the robot, visit.

    Santa and the robot alternate on every character, including ones that
    are not moves.
    """
    santa = (0, 0)
    workers = [(0, 0), (0, 0)]
    turn = 0
    alone = {santa}
    shared = {santa}

    for char in text:
        dx, dy = _MOVES.get(char, (0, 0))
        santa = (santa[0] + dx, santa[1] + dy)
        x, y = workers[turn]
        workers[turn] = (x + dx, y + dy)
        alone.add(santa)
        shared.add(workers[turn])
        turn = 1 - turn

    return len(alone), len(shared)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Count houses that get presents.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    alone, shared = solve(args.path.read_text())
    print(f"p1: {alone}")
    print(f"p2: {shared}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())