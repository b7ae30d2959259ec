"""Two location lists: total pairwise distance and similarity score."""

from __future__ import annotations

import argparse
import re
from collections import Counter
from pathlib import Path
from typing import Iterable

_UNSIGNED = re.compile(r"\+?[0-9]+")
_SEPARATOR = "   "


def _parse_u32(token: str) -> int:
    if not _UNSIGNED.fullmatch(token):
        raise ValueError(f"not an unsigned number: {token!r}")
    value = int(token)
    if value >= 1 << 32:
        raise ValueError(f"number out of range: {token!r}")
    return value


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split lines of the form 'A   B' into a left and a right list."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        first, sep, second = line.partition(_SEPARATOR)
        if not sep:
            raise ValueError(f"line has no separator: {line!r}")
        left.append(_parse_u32(first))
        right.append(_parse_u32(second))
    return left, right


def read_lists(path: str | Path) -> tuple[list[int], list[int]]:
    """Read both lists from a file."""
    return parse_lists(Path(path).read_text(encoding="utf-8"))


def total_distance(left: Iterable[int], right: Iterable[int]) -> int:
    """Sum of distances between the lists once both are sorted."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def appearances(values: Iterable[int]) -> dict[int, int]:
    """How many times each value occurs."""
    return dict(Counter(values))


def similarity(left: Iterable[int], right: Iterable[int]) -> int:
    """Sum of each left value times its number of occurrences on the right."""
    counts = appearances(right)
    return sum(value * counts[value] for value in left if value in counts)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day01", description=__doc__)
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    left, right = read_lists(args.path)
    if args.part == 1:
        print(total_distance(left, right))
    else:
        print(similarity(left, right))
    return 0