"""Plutonian pebbles: count stones as they change and split on every blink."""

from __future__ import annotations

import argparse
import re
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

_UNSIGNED = re.compile(r"\+?[0-9]+")


def apply_rules(stone: int) -> list[int]:
    """The stones that replace one stone after a blink."""
    if stone == 0:
        return [1]
    digits = str(stone)
    half, odd = divmod(len(digits), 2)
    if not odd:
        return [int(digits[:half]), int(digits[half:])]
    return [stone * 2024]


@dataclass
class Stones:
    """How many stones carry each engraved number; their order does not matter."""

    counts: Counter[int] = field(default_factory=Counter)

    def count(self) -> int:
        """Total number of stones."""
        return sum(self.counts.values())

    def blink(self) -> None:
        """Replace every stone according to the rules."""
        after: Counter[int] = Counter()
        for stone, number in self.counts.items():
            for new in apply_rules(stone):
                after[new] += number
        self.counts = after


def parse_stones(text: str) -> Stones:
    """Numbers separated by single spaces."""
    counts: Counter[int] = Counter()
    for token in text.split(" "):
        if not _UNSIGNED.fullmatch(token):
            raise ValueError(f"not a stone number: {token!r}")
        value = int(token)
        if value >= 1 << 64:
            raise ValueError(f"stone number out of range: {token!r}")
        counts[value] += 1
    return Stones(counts)


def read_stones(path: str | Path) -> Stones:
    """Read stones from a file."""
    return parse_stones(Path(path).read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day11", description=__doc__)
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    stones = read_stones(args.path)
    for _ in range(25 if args.part == 1 else 75):
        stones.blink()
    print(stones.count())
    return 0