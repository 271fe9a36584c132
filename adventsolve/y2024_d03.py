"""Add up the mul(X,Y) instructions hidden in corrupted memory."""

import argparse
import re
from pathlib import Path

DEFAULT_INPUT = Path("input/2024/03")

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DO = "do()"
_DONT = "don't()"
_MUL = "mul("


def _parse_int(text):
    return int(text) if _INTEGER.fullmatch(text) else None


def _plain_products(line):
    total = 0
    for piece in line.split("mul"):
        fields = piece.split(",")
        if len(fields) < 2:
            continue
        first, second = fields[0], fields[1]
        if len(first) <= 1 or not first.startswith("("):
            continue
        close = second.find(")")
        if close == -1:
            close = len(second)
        if len(first) > 4 or close == 0 or close > 4 or close >= len(second):
            continue
        left = _parse_int(first[1:])
        right = _parse_int(second[:close])
        if left is not None and right is not None:
            total += left * right
    return total


def _enabled_products(line, enabled):
    total = 0
    size = len(line)
    i = 0
    while i < size:
        char = line[i]
        if char == "d":
            if i + 4 < size and line.startswith(_DO, i):
                enabled = True
                i += 4
                continue
            if i + 7 < size and line.startswith(_DONT, i):
                enabled = False
                i += 6
            i += 1
        elif char == "m":
            if not enabled or (i + 4 < size and not line.startswith(_MUL, i)):
                i += 1
                continue
            i += 4
            resume = i
            comma = line.find(",", i)
            if comma == -1:
                comma = size
            left = _parse_int(line[i:comma])
            if comma - i > 3 or left is None:
                continue
            i = comma + 1
            close = line.find(")", i)
            if close == -1:
                close = size
            right = _parse_int(line[i:close])
            if close - i > 3 or right is None:
                i = resume
                continue
            total += left * right
            i = close
        else:
            i += 1
    return total, enabled


def solve(text):
    """Return the sum of all products, and of those enabled by do()/don't()."""
    plain = conditional = 0
    enabled = True
    for line in text.splitlines():
        if not line:
            continue
        found, enabled = _enabled_products(line, enabled)
        conditional += found
        plain += _plain_products(line)
    return plain, conditional


def main(argv=None):
    parser = argparse.ArgumentParser(description="Sum uncorrupted multiplications.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    plain, conditional = solve(args.path.read_text())
    print(plain)
    print(conditional)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())