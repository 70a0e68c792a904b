"""Supplies in surplus: counting boxes covered by label ranges."""

from __future__ import annotations

from collections.abc import Iterable

Range = tuple[int, int]


def _parse_range(text: str) -> Range:
    start, sep, end = text.partition("-")
    if not sep:
        raise ValueError(f"not a range: {text!r}")
    return int(start), int(end)


def _parse_pile(line: str) -> tuple[Range, Range]:
    first, sep, second = line.partition(" ")
    if not sep:
        raise ValueError(f"not a pile: {line!r}")
    return _parse_range(first), _parse_range(second)


def _size(span: Range) -> int:
    start, end = span
    return max(0, end - start + 1)


def _union_size(spans: Iterable[Range]) -> int:
    total = 0
    current: Range | None = None
    for start, end in sorted(s for s in spans if _size(s)):
        if current is not None and start <= current[1]:
            current = (current[0], max(current[1], end))
            continue
        if current is not None:
            total += _size(current)
        current = (start, end)
    if current is not None:
        total += _size(current)
    return total


def solve(text: str) -> tuple[int, int, int]:
    """Return total range sizes, distinct boxes per pile, and the best adjacent pair."""
    piles = [_parse_pile(line) for line in text.splitlines()]

    total = sum(_size(r1) + _size(r2) for r1, r2 in piles)
    per_pile = sum(_union_size(pile) for pile in piles)

    pairs = [_union_size(a + b) for a, b in zip(piles, piles[1:])]
    if not pairs:
        raise ValueError("at least two piles are needed")
    return total, per_pile, max(pairs)