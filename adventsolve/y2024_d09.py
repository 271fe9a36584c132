"""Compact a disk map block by block and file by file."""

import argparse
from pathlib import Path

DEFAULT_INPUT = Path("input/2024/09")

FREE = -1


def _layout(text):
    blocks = []
    for index, char in enumerate(c for c in text if c != "\n"):
        owner = index // 2 if index % 2 == 0 else FREE
        blocks.extend([owner] * int(char))
    return blocks


def _compact_blocks(blocks):
    blocks = list(blocks)
    lhs, rhs = 0, len(blocks) - 1
    while lhs < rhs:
        while lhs < len(blocks) and blocks[lhs] != FREE:
            lhs += 1
        while rhs >= 0 and blocks[rhs] == FREE:
            rhs -= 1
        if lhs >= rhs:
            break
        blocks[lhs], blocks[rhs] = blocks[rhs], FREE
        lhs += 1
    total = 0
    for position, owner in enumerate(blocks):
        if owner == FREE:
            break
        total += position * owner
    return total


def _compact_files(blocks, highest_id):
    blocks = list(blocks)
    size = len(blocks)
    bound = size - 1
    for file_id in range(highest_id, -1, -1):
        start = next((k for k, owner in enumerate(blocks) if owner == file_id), size)
        end = start
        while end < size and blocks[end] == file_id:
            end += 1
        length = end - start

        lhs = 0
        while lhs < bound:
            while lhs < bound and blocks[lhs] != FREE:
                lhs += 1
            gap = lhs
            while lhs < bound and blocks[lhs] == FREE:
                lhs += 1
            if lhs - gap >= length:
                for k in range(length):
                    blocks[gap + k] = file_id
                    blocks[start + k] = FREE
                break
        bound = start
    return sum(position * owner for position, owner in enumerate(blocks) if owner != FREE)


def solve(text):
    """Return the checksums after moving single blocks and after moving whole files."""
    digits = [c for c in text if c != "\n"]
    if not digits:
        raise ValueError("the disk map is empty")
    blocks = _layout(text)
    if not blocks:
        raise ValueError("the disk map holds no blocks")
    return _compact_blocks(blocks), _compact_files(blocks, len(digits) // 2)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Defragment a disk map.")
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    blocks, files = solve(args.path.read_text())
    print(f"p1: {blocks}")
    print(f"p2: {files}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())