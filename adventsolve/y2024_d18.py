"""Find a way through memory while bytes keep falling."""

import argparse
from collections import deque
from pathlib import Path

DEFAULT_INPUT = Path("input/2024/18")

_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def shortest_path(blocked, size):
    """Return the fewest steps from the top-left to the bottom-right corner, or None.

    ``blocked`` holds (row, column) cells of a ``size`` by ``size`` grid.
    """
    end = (size - 1, size - 1)
    queue = deque([((0, 0), 0)])
    seen = set()
    best = None
    while queue:
        (y, x), steps = queue.popleft()
        if (y, x) == end:
            best = steps if best is None else min(best, steps)
            continue
        if (y, x) in seen:
            continue
        seen.add((y, x))
        for dy, dx in _STEPS:
            ny, nx = y + dy, x + dx
            if 0 <= ny < size and 0 <= nx < size and (ny, nx) not in blocked:
                queue.append(((ny, nx), steps + 1))
    return best


def _bytes(text):
    for line in text.splitlines():
        x, y = (int(n) for n in line.split(","))
        yield y, x


def solve(text, size=71, fallen=1024):
    """Return the path length after ``fallen`` bytes and the index of the first byte that cuts it."""
    falling = list(_bytes(text))
    blocked = set(falling[:fallen])
    length = shortest_path(blocked, size)
    for index in range(fallen, len(falling)):
        blocked.add(falling[index])
        if shortest_path(blocked, size) is None:
            return length, index
    raise ValueError("no byte ever cuts off the exit")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Escape the falling bytes.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    length, index = solve(args.path.read_text())
    print(f"p1: {length}")
    print(f"p2: {index}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())