"""Find the cheapest routes through the reindeer maze."""

import argparse
from collections import deque
from pathlib import Path

DEFAULT_INPUT = Path("input/2024/16")

_UNREACHED = 2**31 - 1
_TURNS = {
    (1, 0): ((0, -1), (0, 1)),
    (-1, 0): ((0, 1), (0, -1)),
    (0, 1): ((1, 0), (-1, 0)),
    (0, -1): ((-1, 0), (1, 0)),
}


def _best_routes(grid):
    start = (0, 0)
    for i, row in enumerate(grid):
        for j, char in enumerate(row):
            if char == "S":
                start = (i, j)

    best = {}
    lowest = _UNREACHED
    on_best = set()
    queue = deque([((0, 1), start, 0, frozenset())])

    while queue:
        (dy, dx), (py, px), cost, path = queue.popleft()
        if not (0 <= py < len(grid) and 0 <= px < len(grid[py])):
            raise ValueError("the route leaves the maze")
        if grid[py][px] == "#" or cost > lowest:
            continue
        previous = best.get((py, px, dy, dx))
        if previous is not None and previous < cost:
            continue

        path = path | {(py, px)}
        if grid[py][px] == "E":
            if lowest > cost:
                lowest = cost
                on_best = set(path)
            elif lowest == cost:
                on_best |= path
        best[(py, px, dy, dx)] = cost

        for turn in _TURNS[(dy, dx)]:
            queue.append((turn, (py, px), cost + 1000, path))
        queue.append(((dy, dx), (py + dy, px + dx), cost + 1, path))

    return lowest, on_best


def solve(text):
    """Return the lowest score and the number of tiles on any best route."""
    grid = [line for line in text.splitlines() if line]
    lowest, tiles = _best_routes(grid)
    return lowest, len(tiles)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Score the reindeer maze.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    grid = [line for line in args.path.read_text().splitlines() if line]
    lowest, tiles = _best_routes(grid)
    for i, row in enumerate(grid):
        print("".join("O" if (i, j) in tiles else char for j, char in enumerate(row)))
    print(lowest)
    print(len(tiles))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())