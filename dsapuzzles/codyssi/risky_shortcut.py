"""Risky shortcut: cancelling digits against neighbouring letters."""

from __future__ import annotations

from collections.abc import Callable

Reducer = Callable[[str, str], bool]


def can_reduce_hyphenated(c1: str, c2: str) -> bool:
    """A digit cancels next to a letter or a hyphen."""
    return (c1.isnumeric() and (c2.isalpha() or c2 == "-")) or (
        c2.isnumeric() and (c1.isalpha() or c1 == "-")
    )


def can_reduce(c1: str, c2: str) -> bool:
    """A digit cancels next to a letter."""
    return (c1.isnumeric() and c2.isalpha()) or (c2.isnumeric() and c1.isalpha())


def _reduce_pass(chars: str, can: Reducer) -> tuple[str, bool]:
    kept: list[str] = []
    reduced = False
    i = 0
    while i < len(chars):
        if i + 1 < len(chars) and can(chars[i], chars[i + 1]):
            i += 2
            reduced = True
            continue
        kept.append(chars[i])
        i += 1
    return "".join(kept), reduced


def reduce_line(line: str, can: Reducer) -> str:
    """Repeatedly remove cancelling pairs until none are left."""
    current = line
    reduced = True
    while reduced:
        current, reduced = _reduce_pass(current, can)
    return current


def solve(text: str) -> tuple[int, int, int]:
    """Return the letter count and the reduced lengths under both rules."""
    lines = text.splitlines()
    return (
        sum(sum(1 for c in line if c.isalpha()) for line in lines),
        sum(len(reduce_line(line, can_reduce_hyphenated)) for line in lines),
        sum(len(reduce_line(line, can_reduce)) for line in lines),
    )