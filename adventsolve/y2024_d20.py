"""Count race-track cheats that save enough time."""

import argparse
from collections import deque
from pathlib import Path

DEFAULT_INPUT = Path("input/2024/20")

_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))
_REACH = 20


def _locate(grid, mark):
    for i, row in enumerate(grid):
        for j, char in enumerate(row):
            if char == mark:
                return i, j
    raise ValueError(f"no {mark!r} on the track")


def _distances(grid, start, end):
    queue = deque([(start, 0)])
    dist = {}
    while queue:
        (y, x), steps = queue.popleft()
        if (y, x) in dist:
            continue
        dist[(y, x)] = steps
        if (y, x) == end:
            break
        for dy, dx in _STEPS:
            ny, nx = y + dy, x + dx
            if grid[ny][nx] != "#":
                queue.append(((ny, nx), steps + 1))
    return dist


def solve(text, threshold=100):
    """Return the cheats of length 2 and of up to 20 that save at least ``threshold``."""
    grid = [line for line in text.splitlines() if line]
    dist = _distances(grid, _locate(grid, "S"), _locate(grid, "E"))
    rows, cols = len(grid), len(grid[0])
    short = long = 0
    for (fy, fx), here in dist.items():
        for ty in range(-_REACH, _REACH + 1):
            for tx in range(-_REACH, _REACH + 1):
                if ty == 0 and tx == 0:
                    continue
                py, px = fy + ty, fx + tx
                if not (0 <= py < rows and 0 <= px < cols) or grid[py][px] == "#":
                    continue
                span = abs(ty) + abs(tx)
                if span > _REACH:
                    continue
                if threshold <= dist[(py, px)] - here - span:
                    if span == 2:
                        short += 1
                    long += 1
    return short, long


def main(argv=None):
    parser = argparse.ArgumentParser(description="Count race-track cheats.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    short, long = solve(args.path.read_text())
    print(f"p1: {short}")
    print(f"p2: {long}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())