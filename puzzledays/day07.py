"""Calibration equations: find operators that make each equation true."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Sequence


class Operator(Enum):
    """Binary operators, always applied left to right."""

    PLUS = "+"
    TIMES = "*"
    CONCAT = "||"

    def apply(self, a: int, b: int) -> int:
        if self is Operator.PLUS:
            return a + b
        if self is Operator.TIMES:
            return a * b
        if b < 0:
            raise ValueError(f"cannot concatenate a negative number: {b}")
        # Appending a zero collapses to zero, as the logarithmic width formula does.
        if b == 0:
            return 0
        return a * 10 ** len(str(b)) + b


_BASIC = (Operator.PLUS, Operator.TIMES)
_WITH_CONCAT = (Operator.PLUS, Operator.TIMES, Operator.CONCAT)


@dataclass
class Equation:
    """A test value and the operands that should combine into it."""

    value: int
    operands: list[int] = field(default_factory=list)

    def evaluate(self, operators: Iterable[Operator]) -> int:
        """Combine the operands left to right with the given operators."""
        if not self.operands:
            raise ValueError("equation has no operands")
        first, *rest = self.operands
        result = first
        for operand, operator in zip(rest, operators):
            result = operator.apply(result, operand)
        return result

    def find_operators(self) -> list[Operator] | None:
        """First choice of + and * that yields the value, or None."""
        return self._search(_BASIC)

    def find_operators_concat(self) -> list[Operator] | None:
        """First choice of +, * and || that yields the value, or None."""
        return self._search(_WITH_CONCAT)

    def _search(self, choices: Sequence[Operator]) -> list[Operator] | None:
        operands = self.operands
        if not operands:
            raise ValueError("equation has no operands")
        # positive_tail[i]: every operand from i on is at least 1, so the
        # running total can no longer shrink once it is non-negative.
        positive_tail = [True] * (len(operands) + 1)
        for i in range(len(operands) - 1, -1, -1):
            positive_tail[i] = positive_tail[i + 1] and operands[i] >= 1
        chosen: list[Operator] = []

        def search(index: int, total: int) -> bool:
            if index == len(operands):
                return total == self.value
            if total > self.value and total >= 0 and positive_tail[index]:
                return False
            for operator in choices:
                chosen.append(operator)
                if search(index + 1, operator.apply(total, operands[index])):
                    return True
                chosen.pop()
            return False

        return chosen if search(1, operands[0]) else None


def parse_equations(text: str) -> list[Equation]:
    """Lines of the form 'value: a b c'."""
    equations = []
    for line in text.splitlines():
        value, sep, rest = line.partition(": ")
        if not sep:
            raise ValueError(f"line has no ': ' separator: {line!r}")
        equations.append(Equation(int(value), [int(token) for token in rest.split(" ")]))
    return equations


def read_input(path: str | Path) -> list[Equation]:
    """Read equations from a file."""
    return parse_equations(Path(path).read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day07", description=__doc__)
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    equations = read_input(args.path)
    if args.part == 1:
        print(sum(eq.value for eq in equations if eq.find_operators() is not None))
    else:
        started = time.perf_counter()
        total = sum(eq.value for eq in equations if eq.find_operators_concat() is not None)
        print(f"got {total} in {time.perf_counter() - started:.6f}s")
    return 0