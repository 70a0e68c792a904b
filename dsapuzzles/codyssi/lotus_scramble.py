"""Lotus scramble: scoring a corrupted line of letters."""

from __future__ import annotations


def _value(c: str) -> int:
    if "a" <= c <= "z":
        return ord(c) - ord("a") + 1
    if "A" <= c <= "Z":
        return ord(c) - ord("A") + 27
    return 0


def _correct(previous: int) -> int:
    corrected = previous * 2 - 5
    return corrected if 1 <= corrected <= 52 else corrected % 52


def solve(text: str) -> tuple[int, int, int]:
    """Return the letter count, their value sum, and the repaired line's value."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("no line given")
    line = lines[0]

    letters = [c for c in line if c.isalpha()]

    total = 0
    previous = 0
    for c in line:
        previous = _value(c) if c.isalpha() else _correct(previous)
        total += previous

    return len(letters), sum(_value(c) for c in letters), total