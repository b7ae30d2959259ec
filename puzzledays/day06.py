"""Patrolling guard: trace the route and find obstacles that trap it in a loop."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

Position = tuple[int, int]


class Direction(Enum):
    """Heading of the guard, valued by its (row, column) step."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self) -> Position:
        return self.value

    @property
    def turned(self) -> Direction:
        """The heading after a right turn."""
        return _CLOCKWISE[self]


_CLOCKWISE = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}


class MoveResult(Enum):
    """Outcome of a single step of the guard."""

    TURN = "turn"
    FORWARD = "forward"
    GONE = "gone"
    LOOP = "loop"


@dataclass(frozen=True)
class Cell:
    """A square of the map: an obstacle, or empty with the headings seen on it."""

    obstacle: bool = False
    directions: frozenset[Direction] = frozenset()

    def visited(self) -> bool:
        """True when the guard has been on this square in any heading."""
        return not self.obstacle and bool(self.directions)

    def visited_directed(self, direction: Direction) -> bool:
        """True when the guard has been on this square with this heading."""
        return not self.obstacle and direction in self.directions

    def __add__(self, direction: Direction) -> Cell:
        seen = frozenset() if self.obstacle else self.directions
        return Cell(False, seen | {direction})


EMPTY = Cell()
OBSTACLE = Cell(obstacle=True)


class Map:
    """The lab floor with the guard's position, heading and trail."""

    def __init__(
        self,
        grid: list[list[Cell]],
        start: Position = (0, 0),
        location: Position | None = None,
        direction: Direction = Direction.UP,
    ) -> None:
        self.grid = grid
        self.start = start
        self.location = start if location is None else location
        self.direction = direction

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def __getitem__(self, position: Position) -> Cell:
        row, col = position
        return self.grid[row][col]

    def __setitem__(self, position: Position, cell: Cell) -> None:
        row, col = position
        self.grid[row][col] = cell

    def _in_bounds(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.rows and 0 <= col < self.cols

    def copy(self) -> Map:
        """An independent copy of the map and the guard's state."""
        return Map([row[:] for row in self.grid], self.start, self.location, self.direction)

    def step(self) -> MoveResult:
        """Turn right at an obstacle, otherwise move one square ahead."""
        row, col = self.location
        dr, dc = self.direction.delta
        ahead = (row + dr, col + dc)
        if not self._in_bounds(ahead):
            return MoveResult.GONE
        if self[ahead].obstacle:
            turned = self.direction.turned
            if self[self.location].visited_directed(turned):
                return MoveResult.LOOP
            self.direction = turned
            self[self.location] += turned
            return MoveResult.TURN
        if self[ahead].visited_directed(self.direction):
            return MoveResult.LOOP
        self.location = ahead
        self[ahead] += self.direction
        return MoveResult.FORWARD

    def run_route(self) -> MoveResult:
        """Walk until the guard leaves the map or repeats itself."""
        while True:
            result = self.step()
            if result in (MoveResult.GONE, MoveResult.LOOP):
                return result

    def loop_obstacles(self) -> set[Position]:
        """Squares where a new obstacle would trap the guard in a loop."""
        found: set[Position] = set()
        while True:
            row, col = self.location
            dr, dc = self.direction.delta
            ahead = (row + dr, col + dc)
            if (
                self._in_bounds(ahead)
                and not self[ahead].visited()
                and ahead != self.start
                and not self[ahead].obstacle
            ):
                candidate = self.copy()
                candidate[ahead] = OBSTACLE
                if candidate.run_route() is MoveResult.LOOP:
                    found.add(ahead)
            if self.step() is MoveResult.GONE:
                return found

    def count_visited(self) -> int:
        """Number of squares the guard has stood on."""
        return sum(1 for row in self.grid for cell in row if cell.visited())


def parse_map(text: str) -> Map:
    """Build a map from lines of '.', '#' and a single '^' for the guard."""
    lines = text.splitlines()
    cols = max((len(line) for line in lines), default=0)
    grid = [[EMPTY] * cols for _ in lines]
    result = Map(grid)
    for i, line in enumerate(lines):
        for j, char in enumerate(line):
            if char == "^":
                result.start = result.location = (i, j)
                result.direction = Direction.UP
                result[(i, j)] += Direction.UP
            elif char == "#":
                result[(i, j)] = OBSTACLE
    return result


def read_map(path: str | Path) -> Map:
    """Read a map from a file."""
    return parse_map(Path(path).read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day06", description=__doc__)
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    if args.part == 1:
        started = time.perf_counter()
        lab = read_map(args.path)
        lab.run_route()
        visited = lab.count_visited()
        elapsed = time.perf_counter() - started
        print(f"got result {visited} in {elapsed:.6f}s")
    else:
        print(len(read_map(args.path).loop_obstacles()))
    return 0