"""Type door codes through a chain of robot-operated keypads."""

import argparse
from pathlib import Path

DEFAULT_INPUT = Path("input/2024/21")

NUMERIC = 0
DIRECTIONAL = 1

_PADS = (
    (
        "#####",
        "#789#",
        "#456#",
        "#123#",
        "##0A#",
        "#####",
    ),
    (
        "#####",
        "#####",
        "#####",
        "##^A#",
        "#<v>#",
        "#####",
    ),
)
_NUMERIC_A = (4, 3)
_DIRECTIONAL_A = (3, 3)
_MOVES = (("v", 1, 0), ("^", -1, 0), ("<", 0, -1), (">", 0, 1))


def keypad_paths(pad, code, start):
    """Return the button sequences that type ``code`` on keypad ``pad`` from ``start``.

    Branches reaching a key state later than an earlier branch are pruned,
    so the result holds every shortest sequence and possibly some longer ones.
    """
    layout = _PADS[pad]
    best = {}
    results = []

    def walk(index, pos, steps):
        remaining = len(code) - index
        if remaining == 0:
            results.append("".join(steps))
            return
        py, px = pos
        if code[index] == layout[py][px]:
            steps = steps + ["A"]
            best[(remaining - 1, py, px)] = len(steps)
            walk(index + 1, pos, steps)
            return
        best[(remaining, py, px)] = len(steps)
        for symbol, dy, dx in _MOVES:
            ny, nx = py + dy, px + dx
            if layout[ny][nx] == "#":
                continue
            known = best.get((remaining, ny, nx))
            if known is not None and known < len(steps) + 1:
                continue
            walk(index, (ny, nx), steps + [symbol])

    walk(0, tuple(start), [])
    return results


def _complexity(code):
    digits = "".join(c for c in code if c.isdigit())
    number = int(digits)
    paths = keypad_paths(NUMERIC, code, _NUMERIC_A)
    shortest = min(len(p) for p in paths)
    best = None
    for door in (p for p in paths if len(p) == shortest):
        for first in keypad_paths(DIRECTIONAL, door, _DIRECTIONAL_A):
            for second in keypad_paths(DIRECTIONAL, first, _DIRECTIONAL_A):
                value = number * len(second)
                if best is None or value < best:
                    best = value
    return best


def solve(text):
    """Return the summed complexity of every code in ``text``."""
    return sum(_complexity(code) for code in text.splitlines() if code)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Type codes through robot keypads.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    print(solve(args.path.read_text()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())