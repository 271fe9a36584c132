"""Push boxes around a warehouse, on a normal and a double-width map."""

import argparse
from pathlib import Path

DEFAULT_INPUT = Path("input/2024/15")

_MOVES = {"v": (1, 0), "^": (-1, 0), "<": (0, -1), ">": (0, 1)}


def _find_robot(grid):
    position = (0, 0)
    for i, row in enumerate(grid):
        for j, char in enumerate(row):
            if char == "@":
                position = (i, j)
    return position


def _narrow(grid, moves):
    grid = [list(row) for row in grid]
    y, x = _find_robot(grid)
    for move in moves:
        dy, dx = _MOVES[move]
        ny, nx = y + dy, x + dx
        target = grid[ny][nx]
        if target == "O":
            oy, ox = ny, nx
            while grid[oy][ox] == "O":
                oy, ox = oy + dy, ox + dx
            if grid[oy][ox] == "#":
                continue
            grid[oy][ox] = grid[ny][nx]
            grid[ny][nx] = grid[y][x]
            grid[y][x] = "."
            y, x = ny, nx
        elif target == ".":
            grid[y][x] = "."
            grid[ny][nx] = "@"
            y, x = ny, nx
    return sum(
        100 * i + j for i, row in enumerate(grid) for j, char in enumerate(row) if char == "O"
    )


def _widen(grid):
    wide = [["."] * (len(grid[0]) * 2) for _ in grid]
    robot = (0, 0)
    for i, row in enumerate(grid):
        for j, char in enumerate(row):
            if char == "O":
                wide[i][2 * j], wide[i][2 * j + 1] = "[", "]"
            elif char == "@":
                wide[i][2 * j] = "@"
                robot = (i, 2 * j)
            elif char == "#":
                wide[i][2 * j], wide[i][2 * j + 1] = "#", "#"
    return wide, robot


def _push_vertical(grid, start, move):
    """Move every box stacked above or below ``start``; return False if blocked."""
    dy, dx = _MOVES[move]
    stack = [start]
    targets = set()
    while stack:
        sy, sx = stack.pop()
        oy, ox = sy + dy, sx + dx
        char = grid[sy][sx]
        if char == "[":
            pair = [(oy, ox), (oy, ox + 1)]
        elif char == "]":
            pair = [(oy, ox), (oy, ox - 1)]
        elif char == ".":
            continue
        elif char == "#":
            return False
        else:
            raise ValueError(f"unexpected tile {char!r} in a box stack")
        stack.extend(pair)
        targets.update(pair)

    for ty, tx in sorted(targets, reverse=(move != "^")):
        fy, fx = ty - dy, tx - dx
        grid[ty][tx] = grid[fy][fx]
        grid[fy][fx] = "."
    return True


def _wide(grid, moves):
    grid, (y, x) = _widen(grid)
    for move in moves:
        dy, dx = _MOVES[move]
        ny, nx = y + dy, x + dx
        target = grid[ny][nx]
        if target in "[]":
            if move in "v^":
                if not _push_vertical(grid, (ny, nx), move):
                    continue
                grid[y][x] = "."
                grid[ny][nx] = "@"
                y, x = ny, nx
            else:
                oy, ox = ny, nx
                while grid[oy][ox] in "[]":
                    oy, ox = oy + dy, ox + dx
                if grid[oy][ox] == "#":
                    continue
                while x != ox:
                    previous = ox
                    ox -= dx
                    grid[y][previous] = grid[y][ox]
                grid[y][x] = "."
                y, x = ny, nx
        elif target == ".":
            grid[y][x] = "."
            grid[ny][nx] = "@"
            y, x = ny, nx
    return sum(
        100 * i + j for i, row in enumerate(grid) for j, char in enumerate(row) if char == "["
    )


def solve(text):
    """Return the box GPS sums on the normal and on the widened warehouse."""
    map_text, separator, moves_text = text.partition("\n\n")
    if not separator:
        raise ValueError("expected a blank line between map and moves")
    grid = map_text.splitlines()
    moves = [char for line in moves_text.splitlines() if line for char in line]
    unknown = set(moves) - set(_MOVES)
    if unknown:
        raise ValueError(f"unknown moves: {sorted(unknown)}")
    return _narrow(grid, moves), _wide(grid, moves)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Simulate the warehouse robot.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    narrow, wide = solve(args.path.read_text())
    print(f"p1: {narrow}")
    print(f"p2: {wide}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())