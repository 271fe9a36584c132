"""Word search for XMAS in every direction and for crossed MAS."""

import argparse
from pathlib import Path

DEFAULT_INPUT = Path("input/2024/04")

_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1), (1, 1), (-1, -1), (1, -1), (-1, 1))
# Corners in the order top-left, top-right, bottom-left, bottom-right.
_CROSS_CORNERS = ("MSMS", "SMSM", "SSMM", "MMSS")


def _char(grid, row, col):
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return ""


def solve(text):
    """Return the number of XMAS words and of X-shaped MAS pairs.

    Starting columns run over as many columns as the grid has rows.
    """
    grid = [line for line in text.splitlines() if line]
    rows = len(grid)
    words = crosses = 0

    for i, row in enumerate(grid):
        for j in range(rows):
            if j + 2 < len(row) and i + 2 < rows:
                corners = (
                    _char(grid, i, j)
                    + _char(grid, i, j + 2)
                    + _char(grid, i + 2, j)
                    + _char(grid, i + 2, j + 2)
                )
                if _char(grid, i + 1, j + 1) == "A" and corners in _CROSS_CORNERS:
                    crosses += 1

            if _char(grid, i, j) != "X":
                continue
            for di, dj in _DIRECTIONS:
                end_i, end_j = i + 3 * di, j + 3 * dj
                if not (0 <= end_i < rows and 0 <= end_j < len(row)):
                    continue
                if all(
                    _char(grid, i + k * di, j + k * dj) == letter
                    for k, letter in enumerate("MAS", start=1)
                ):
                    words += 1

    return words, crosses


def main(argv=None):
    parser = argparse.ArgumentParser(description="Search the grid for XMAS.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    words, crosses = solve(args.path.read_text())
    print(words)
    print(crosses)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())