"""Count stones that split and change every time you blink."""

import argparse
from collections import Counter
from pathlib import Path

DEFAULT_INPUT = Path("input/2024/11")


def blink(counts):
    """Return the stone counts after one blink, given counts keyed by engraving."""
    result = Counter()
    for stone, amount in counts.items():
        digits = str(stone)
        if len(digits) % 2 == 0:
            half = len(digits) // 2
            result[int(digits[:half])] += amount
            result[int(digits[half:])] += amount
        elif stone == 0:
            result[1] += amount
        else:
            result[stone * 2024] += amount
    return result


def solve(text):
    """Return the number of stones after 25 and after 75 blinks."""
    counts = Counter(int(part.strip()) for part in text.split(" ") if part)
    after_25 = 0
    for blinks in range(75):
        if blinks == 25:
            after_25 = sum(counts.values())
        counts = blink(counts)
    return after_25, sum(counts.values())


def main(argv=None):
    parser = argparse.ArgumentParser(description="Watch the plutonian pebbles.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    short, long = solve(args.path.read_text())
    print(f"p1: {short}")
    print(f"p2: {long}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())