"""Corrupted memory: find mul(a,b) instructions, honouring do() and don't()."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

_MUL = re.compile(r"mul\((\d+),(\d+)\)")
_DO = re.compile(r"do\(\)")
_DONT = re.compile(r"don't\(\)")


def read_memory(path: str | Path) -> str:
    """Read the whole memory dump."""
    return Path(path).read_text(encoding="utf-8")


def find_muls(mem: str) -> list[tuple[int, int]]:
    """Operand pairs of every well-formed mul instruction."""
    return [(int(m.group(1)), int(m.group(2))) for m in _MUL.finditer(mem)]


def do_indices(mem: str) -> list[int]:
    """Positions just after each do()."""
    return [m.end() for m in _DO.finditer(mem)]


def dont_indices(mem: str) -> list[int]:
    """Positions where each don't() starts."""
    return [m.start() for m in _DONT.finditer(mem)]


def switch_indices(mem: str) -> list[int]:
    """Alternating enable/disable positions, starting enabled at 0."""
    sources = (dont_indices(mem), do_indices(mem))
    switches = [0]
    parity = 0
    while True:
        following = next((i for i in sources[parity] if i > switches[-1]), None)
        if following is None:
            return switches
        switches.append(following)
        parity ^= 1


def enabled_muls(mem: str) -> list[tuple[int, int]]:
    """Operand pairs of mul instructions in enabled stretches of memory."""
    out: list[tuple[int, int]] = []
    switches = iter(switch_indices(mem))
    for start in switches:
        end = next(switches, len(mem))
        out.extend(find_muls(mem[start:end]))
    return out


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day03", description=__doc__)
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    mem = read_memory(args.path)
    pairs = find_muls(mem) if args.part == 1 else enabled_muls(mem)
    print(sum(a * b for a, b in pairs))
    return 0