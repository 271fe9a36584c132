"""Check page updates against ordering rules and fix the bad ones."""

import argparse
from pathlib import Path

DEFAULT_INPUT = Path("input/2024/05")


def _parse(text):
    rules_text, separator, updates_text = text.partition("\n\n")
    if not separator:
        raise ValueError("expected a blank line between rules and updates")

    follows = {}
    for line in rules_text.splitlines():
        numbers = [int(n) for n in line.split("|")]
        if len(numbers) < 2:
            raise ValueError(f"expected a rule of the form A|B, got {line!r}")
        follows.setdefault(numbers[0], set()).add(numbers[1])

    updates = [
        [int(n) for n in line.split(",")]
        for line in updates_text.splitlines()
        if line
    ]
    return follows, updates


def solve(text):
    """Return the sum of middle pages of ordered updates, and of reordered ones."""
    follows, updates = _parse(text)
    ordered_total = fixed_total = 0

    for update in updates:
        in_order = all(
            after in follows.get(before, ()) for before, after in zip(update, update[1:])
        )
        if in_order:
            ordered_total += update[len(update) // 2]
            continue

        ranks = sorted(
            (
                sum(
                    1
                    for j, other in enumerate(update)
                    if j != i and page in follows.get(other, ())
                ),
                i,
            )
            for i, page in enumerate(update)
        )
        fixed_total += update[ranks[len(ranks) // 2][1]]

    return ordered_total, fixed_total


def main(argv=None):
    parser = argparse.ArgumentParser(description="Check print queue ordering.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    ordered, fixed = solve(args.path.read_text())
    print(ordered)
    print(fixed)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())