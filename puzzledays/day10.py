"""Topographic map: score and rate hiking trails from height 0 up to 9."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

Position = tuple[int, int]

_DIGITS = frozenset("0123456789")
_PEAK = 9


@dataclass
class TopoMap:
    """Grid of heights, one digit per square."""

    heights: list[list[int]]

    def __getitem__(self, position: Position) -> int:
        row, col = position
        return self.heights[row][col]

    def _in_bounds(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < len(self.heights) and 0 <= col < len(self.heights[row])

    def _uphill(self, position: Position) -> Iterator[Position]:
        row, col = position
        target = self[position] + 1
        for neighbour in ((row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1)):
            if self._in_bounds(neighbour) and self[neighbour] == target:
                yield neighbour

    def _summits(self, position: Position) -> set[Position]:
        if self[position] == _PEAK:
            return {position}
        return set().union(*(self._summits(n) for n in self._uphill(position)))

    def _paths(self, position: Position) -> int:
        if self[position] == _PEAK:
            return 1
        return sum(self._paths(n) for n in self._uphill(position))

    def trailheads(self) -> list[Position]:
        """Squares of height 0, row by row."""
        return [
            (r, c)
            for r, row in enumerate(self.heights)
            for c, height in enumerate(row)
            if height == 0
        ]

    def trail_scores(self) -> list[int]:
        """For each trailhead, how many peaks it can reach."""
        return [len(self._summits(head)) for head in self.trailheads()]

    def trail_ratings(self) -> list[int]:
        """For each trailhead, how many distinct trails lead to a peak."""
        return [self._paths(head) for head in self.trailheads()]


def parse_map(text: str) -> TopoMap:
    """One row of digit heights per line."""
    heights = []
    for line in text.splitlines():
        bad = next((c for c in line if c not in _DIGITS), None)
        if bad is not None:
            raise ValueError(f"not a height: {bad!r}")
        heights.append([int(c) for c in line])
    return TopoMap(heights)


def read_input(path: str | Path) -> TopoMap:
    """Read a map from a file."""
    return parse_map(Path(path).read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day10", description=__doc__)
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    topo = read_input(args.path)
    values = topo.trail_scores() if args.part == 1 else topo.trail_ratings()
    print(sum(values))
    return 0