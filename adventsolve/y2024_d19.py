"""Count the ways towel patterns can form each design."""

import argparse
from pathlib import Path

DEFAULT_INPUT = Path("input/2024/19")


def count_arrangements(design, towels):
    """Return how many towel sequences spell ``design`` exactly."""
    towels = set(towels)
    longest = max((len(t) for t in towels), default=0)
    memo = {}

    def ways(start):
        remaining = len(design) - start
        if remaining == 0:
            return 1
        if remaining in memo:
            return memo[remaining]
        total = sum(
            ways(start + size)
            for size in range(1, min(longest, remaining) + 1)
            if design[start:start + size] in towels
        )
        memo[remaining] = total
        return total

    return ways(0)


def solve(text):
    """Return the number of possible designs and the total number of arrangements."""
    towels_text, separator, designs_text = text.partition("\n\n")
    if not separator:
        raise ValueError("expected a blank line between towels and designs")
    towels = towels_text.split(", ")
    counts = [count_arrangements(d, towels) for d in designs_text.splitlines() if d]
    return sum(1 for c in counts if c > 0), sum(counts)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Arrange towels into designs.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    possible, total = solve(args.path.read_text())
    print(f"p1: {possible}")
    print(f"p2: {total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())