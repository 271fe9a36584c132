"""Trace a patrolling guard and find obstacles that trap it in a loop."""

import argparse
from pathlib import Path

DEFAULT_INPUT = Path("input/2024/06")

_MOVES = {"^": (-1, 0), "v": (1, 0), ">": (0, 1), "<": (0, -1)}
_TURN_RIGHT = {"^": ">", ">": "v", "v": "<", "<": "^"}


def _find_start(grid):
    for i, row in enumerate(grid):
        for j, char in enumerate(row):
            if char in _MOVES:
                return (i, j), char
    raise ValueError("no guard found in the map")


def _step(grid, pos, facing):
    """Return the next (position, facing), or None when the guard leaves."""
    dy, dx = _MOVES[facing]
    y, x = pos[0] + dy, pos[1] + dx
    if y < 0 or y >= len(grid) or x < 0 or x >= len(grid[pos[0]]):
        return None
    if grid[y][x] == "#":
        return pos, _TURN_RIGHT[facing]
    return (y, x), facing


def _loops(grid, start, facing):
    limit = len(grid) * len(grid[0])
    pos = start
    steps = 0
    while True:
        steps += 1
        moved = _step(grid, pos, facing)
        if moved is None:
            break
        pos, facing = moved
        if steps == limit:
            break
    return steps == limit


def solve(text):
    """Return the cells visited and the number of obstacle spots causing a loop.

    A walk counts as a loop once it takes as many steps, turns included, as
    the map has cells.
    """
    grid = [list(line) for line in text.splitlines() if line]
    start, facing = _find_start(grid)

    visited = {start}
    state = (start, facing)
    while (state := _step(grid, *state)) is not None:
        visited.add(state[0])

    traps = 0
    for i, row in enumerate(grid):
        for j, char in enumerate(row):
            if (i, j) == start or char == "#":
                continue
            row[j] = "#"
            if _loops(grid, start, facing):
                traps += 1
            row[j] = " "

    return len(visited), traps


def main(argv=None):
    parser = argparse.ArgumentParser(description="Follow the guard's patrol.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    visited, traps = solve(args.path.read_text())
    print(visited)
    print(traps)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())