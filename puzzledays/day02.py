"""Reactor reports: count the safe ones, with and without the dampener."""

from __future__ import annotations

import argparse
import re
from pathlib import Path
from typing import Sequence

_SIGNED = re.compile(r"[+-]?[0-9]+")


def _parse_i16(token: str) -> int:
    if not _SIGNED.fullmatch(token):
        raise ValueError(f"not a number: {token!r}")
    value = int(token)
    if not -(1 << 15) <= value < 1 << 15:
        raise ValueError(f"number out of range: {token!r}")
    return value


def parse_reports(text: str) -> list[list[int]]:
    """One report per line, levels separated by whitespace."""
    return [[_parse_i16(token) for token in line.split()] for line in text.splitlines()]


def read_reports(path: str | Path) -> list[list[int]]:
    """Read reports from a file."""
    return parse_reports(Path(path).read_text(encoding="utf-8"))


def is_safe(report: Sequence[int]) -> bool:
    """True when levels move steadily in one direction by 1 to 3 each step."""
    pairs = list(zip(report, report[1:]))
    ascending = bool(pairs) and pairs[0][0] < pairs[0][1]
    if ascending:
        return all(1 <= second - first <= 3 for first, second in pairs)
    return all(-3 <= second - first < 0 for first, second in pairs)


def is_safe_dampened(report: Sequence[int]) -> bool:
    """True when removing some single level makes the report safe."""
    report = list(report)
    return any(is_safe(report[:i] + report[i + 1:]) for i in range(len(report)))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day02", description=__doc__)
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    check = is_safe if args.part == 1 else is_safe_dampened
    print(sum(1 for report in read_reports(args.path) if check(report)))
    return 0