"""Compare two lists of location ids."""

import argparse
from collections import Counter
from pathlib import Path

DEFAULT_INPUT = Path("input/2024/01")


def _columns(text):
    left, right = [], []
    for line in text.splitlines():
        fields = [field for field in line.split(" ") if field]
        if not fields:
            continue
        if len(fields) < 2:
            raise ValueError(f"expected two ids in {line!r}")
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    return left, right


def solve(text):
    """Return the total distance and the similarity score of the two lists."""
    left, right = _columns(text)
    distance = sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))
    counts = Counter(right)
    similarity = sum(value * counts[value] for value in left)
    return distance, similarity


def main(argv=None):
    parser = argparse.ArgumentParser(description="Reconcile two location lists.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    distance, similarity = solve(args.path.read_text())
    print(distance)
    print(similarity)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())