"""Antenna map: find antinodes for each pair of same-frequency antennas."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from itertools import combinations
from pathlib import Path
from typing import Iterator, Mapping, Sequence

SIZE = 50


@dataclass(frozen=True, order=True)
class Vector:
    """A (row, column) position or offset on the map."""

    row: int
    col: int

    def in_bounds(self) -> bool:
        """True when the position lies on the square map."""
        return 0 <= self.row < SIZE and 0 <= self.col < SIZE

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.row + other.row, self.col + other.col)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.row - other.row, self.col - other.col)


Antennas = Mapping[str, Sequence[Vector]]


def parse_map(text: str) -> dict[str, list[Vector]]:
    """Positions of every antenna, grouped by frequency; '.' is empty ground."""
    antennas: dict[str, list[Vector]] = {}
    for i, line in enumerate(text.splitlines()):
        for j, char in enumerate(line):
            if char != ".":
                antennas.setdefault(char, []).append(Vector(i, j))
    return antennas


def read_input(path: str | Path) -> dict[str, list[Vector]]:
    """Read the antenna map from a file."""
    return parse_map(Path(path).read_text(encoding="utf-8"))


def _pairs(antennas: Antennas) -> Iterator[tuple[Vector, Vector]]:
    for positions in antennas.values():
        yield from combinations(positions, 2)


def find_nodes(antennas: Antennas) -> list[Vector]:
    """Distinct on-map antinodes one pair-distance beyond each antenna of a pair."""
    nodes: set[Vector] = set()
    for tower, other in _pairs(antennas):
        diff = tower - other
        for node in (other - diff, tower + diff):
            if node.in_bounds():
                nodes.add(node)
    return list(nodes)


def find_nodes_harmonic(antennas: Antennas) -> list[Vector]:
    """Distinct on-map positions in line with a pair at whole multiples of their spacing."""
    nodes: set[Vector] = set()
    for tower, other in _pairs(antennas):
        diff = tower - other
        node = other
        while node.in_bounds():
            nodes.add(node)
            node = node - diff
        node = tower
        while node.in_bounds():
            nodes.add(node)
            node = node + diff
    return list(nodes)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day08", description=__doc__)
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    antennas = read_input(args.path)
    finder = find_nodes if args.part == 1 else find_nodes_harmonic
    print(len(finder(antennas)))
    return 0