"""Disk map: compact file blocks and compute the filesystem checksum."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

_DIGITS = frozenset("0123456789")

Block = Optional[int]
Span = tuple[int, int]


@dataclass
class Disk:
    """Blocks holding file ids (None for free space) and the layout of the map."""

    blocks: list[Block]
    next_gap: int = 0
    last_block: int = 0
    files: list[Span] = field(default_factory=list)
    gaps: list[Span] = field(default_factory=list)


def _last_used(blocks: Sequence[Block]) -> int | None:
    return next((i for i in reversed(range(len(blocks))) if blocks[i] is not None), None)


def parse_disk(text: str) -> Disk:
    """Expand a dense map of alternating file and free-space lengths."""
    blocks: list[Block] = []
    files: list[Span] = []
    gaps: list[Span] = []
    for i, char in enumerate(text):
        if char not in _DIGITS:
            raise ValueError(f"not a digit: {char!r}")
        length = int(char)
        if length == 0:
            continue
        span = (len(blocks), len(blocks) + length - 1)
        if i % 2 == 0:
            blocks.extend([i // 2] * length)
            files.append(span)
        else:
            blocks.extend([None] * length)
            gaps.append(span)
    try:
        next_gap = blocks.index(None)
    except ValueError:
        raise ValueError("disk has no free space") from None
    last_block = _last_used(blocks)
    if last_block is None:
        raise ValueError("disk has no file blocks")
    return Disk(blocks, next_gap, last_block, files, gaps)


def read_input(path: str | Path) -> Disk:
    """Read a disk map from a file."""
    return parse_disk(Path(path).read_text(encoding="utf-8"))


def refrag(disk: Disk) -> None:
    """Move blocks one at a time from the end into the leftmost free space."""
    blocks = disk.blocks
    while disk.next_gap < disk.last_block:
        blocks[disk.next_gap] = blocks[disk.last_block]
        blocks[disk.last_block] = None
        while blocks[disk.last_block] is None and disk.last_block > disk.next_gap:
            disk.last_block -= 1
        while blocks[disk.next_gap] is not None and disk.last_block > disk.next_gap:
            disk.next_gap += 1


def refrag_checksum(disk: Disk) -> int:
    """Checksum the disk would have after refrag, without changing it."""
    blocks = disk.blocks
    end = _last_used(blocks)
    if end is None:
        raise ValueError("disk has no file blocks")
    total = 0
    cur = 0
    while cur <= end:
        file_id = blocks[cur]
        if file_id is not None:
            total += cur * file_id
        else:
            total += blocks[end] * cur
            end -= 1
        while blocks[end] is None and end > cur:
            end -= 1
        cur += 1
    return total


def defrag(disk: Disk) -> None:
    """Move whole files, highest id first, into the leftmost gap that fits."""
    blocks = disk.blocks
    for file_id, (lo, hi) in reversed(list(enumerate(disk.files))):
        size = hi - lo + 1
        for index, (left, right) in enumerate(disk.gaps):
            if right - left + 1 >= size and lo > right:
                blocks[left:left + size] = [file_id] * size
                disk.gaps[index] = (left + size, right)
                blocks[lo:hi + 1] = [None] * size
                break


def checksum(disk: Disk) -> int:
    """Sum of each block's position times its file id; free blocks count zero."""
    return sum(i * (file_id or 0) for i, file_id in enumerate(disk.blocks))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day09", description=__doc__)
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("path", nargs="?", default=None)
    args = parser.parse_args(argv)

    if args.part == 1:
        disk = read_input(args.path or "input.txt")
        print(refrag_checksum(disk))
    else:
        started = time.perf_counter()
        disk = read_input(args.path or "evil-input.txt")
        defrag(disk)
        total = checksum(disk)
        print(f"got {total} in {time.perf_counter() - started:.6f}s")
    return 0