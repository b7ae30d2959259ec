"""Word search: count XMAS in all directions and X-shaped MAS crosses."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

Grid = Sequence[str]

_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0), (1, 1), (-1, -1), (-1, 1), (1, -1))
_CROSS_CORNERS = frozenset({"MMSS", "SMMS", "SSMM", "MSSM"})


def parse_grid(text: str) -> list[str]:
    """One row of letters per line."""
    return text.splitlines()


def read_word_search(path: str | Path) -> list[str]:
    """Read the grid from a file."""
    return parse_grid(Path(path).read_text(encoding="utf-8"))


def _cell(grid: Grid, row: int, col: int) -> str | None:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return None


def find_char(char: str, grid: Grid) -> list[tuple[int, int]]:
    """All positions holding the given character, row by row."""
    return [
        (i, j)
        for i, row in enumerate(grid)
        for j, c in enumerate(row)
        if c == char
    ]


def check_xmas(grid: Grid, position: tuple[int, int]) -> int:
    """Number of directions in which MAS follows the given position."""
    row, col = position
    return sum(
        1
        for dr, dc in _DIRECTIONS
        if all(
            _cell(grid, row + dr * k, col + dc * k) == letter
            for k, letter in enumerate("MAS", 1)
        )
    )


def num_xmas(grid: Grid) -> int:
    """Total occurrences of XMAS in all eight directions."""
    return sum(check_xmas(grid, position) for position in find_char("X", grid))


def check_x_mas(grid: Grid, position: tuple[int, int]) -> bool:
    """True when the diagonals through position both read MAS or SAM."""
    row, col = position
    corners = [
        _cell(grid, row - 1, col - 1),
        _cell(grid, row - 1, col + 1),
        _cell(grid, row + 1, col + 1),
        _cell(grid, row + 1, col - 1),
    ]
    if None in corners:
        raise IndexError(f"position {position} lacks a diagonal neighbour")
    return "".join(corners) in _CROSS_CORNERS


def num_x_mas(grid: Grid) -> int:
    """Number of MAS crosses; positions on the grid's edge are skipped."""
    last_row = len(grid) - 1
    return sum(
        1
        for row, col in find_char("A", grid)
        if row not in (0, last_row)
        and col not in (0, len(grid[row]) - 1)
        and check_x_mas(grid, (row, col))
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day04", description=__doc__)
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    grid = read_word_search(args.path)
    print(num_xmas(grid) if args.part == 1 else num_x_mas(grid))
    return 0