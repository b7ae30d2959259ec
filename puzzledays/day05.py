"""Page ordering rules: validate print updates and fix the invalid ones."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from functools import cmp_to_key
from pathlib import Path
from typing import AbstractSet, Sequence

_UNSIGNED = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Rule:
    """Page ``before`` must be printed ahead of page ``after``."""

    before: int
    after: int


def _parse_u16(token: str) -> int:
    if not _UNSIGNED.fullmatch(token):
        raise ValueError(f"not a page number: {token!r}")
    value = int(token)
    if value >= 1 << 16:
        raise ValueError(f"page number out of range: {token!r}")
    return value


def parse_rule(text: str) -> Rule:
    """Parse a rule written as 'A|B'."""
    parts = text.split("|")
    try:
        before = _parse_u16(parts[0])
    except ValueError as exc:
        raise ValueError(f"could not parse first number in {text!r}") from exc
    if len(parts) < 2:
        raise ValueError(f"no second number in {text!r}")
    try:
        after = _parse_u16(parts[1])
    except ValueError as exc:
        raise ValueError(f"could not parse second number in {text!r}") from exc
    return Rule(before, after)


def parse_input(text: str) -> tuple[set[Rule], list[list[int]]]:
    """Rules up to the first blank line, then comma-separated revisions."""
    lines = iter(text.splitlines())
    rules: set[Rule] = set()
    for line in lines:
        if not line:
            break
        rules.add(parse_rule(line))
    revisions = [[_parse_u16(page) for page in line.split(",")] for line in lines]
    return rules, revisions


def read_input(path: str | Path) -> tuple[set[Rule], list[list[int]]]:
    """Read rules and revisions from a file."""
    return parse_input(Path(path).read_text(encoding="utf-8"))


def relevant_pages(page: int, rules: AbstractSet[Rule]) -> tuple[list[int], list[int]]:
    """Pages that must come before and after the given page."""
    befores = [rule.before for rule in rules if rule.after == page]
    afters = [rule.after for rule in rules if rule.before == page]
    return befores, afters


def valid_revision(revision: Sequence[int], rules: AbstractSet[Rule]) -> bool:
    """True when no rule is broken by the order of the revision."""
    for i, page in enumerate(revision):
        befores, afters = relevant_pages(page, rules)
        if any(edit in afters for edit in revision[:i]):
            return False
        if any(edit in befores for edit in revision[i + 1:]):
            return False
    return True


def correct_revision(revision: Sequence[int], rules: AbstractSet[Rule]) -> list[int]:
    """The revision reordered so that it follows the rules."""

    def compare(a: int, b: int) -> int:
        if Rule(a, b) in rules:
            return -1
        if Rule(b, a) in rules:
            return 1
        return 0

    return sorted(revision, key=cmp_to_key(compare))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day05", description=__doc__)
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    rules, revisions = read_input(args.path)
    if args.part == 1:
        chosen = [r for r in revisions if valid_revision(r, rules)]
    else:
        chosen = [
            correct_revision(r, rules) for r in revisions if not valid_revision(r, rules)
        ]
    print(sum(revision[len(revision) // 2] for revision in chosen))
    return 0