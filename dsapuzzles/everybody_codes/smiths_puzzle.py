"""The royal smith's puzzle: levelling nails with the fewest strikes."""

from __future__ import annotations


def _nails(text: str) -> list[int]:
    nails = [int(line) for line in text.splitlines()]
    if not nails:
        raise ValueError("no nails given")
    if any(n < 0 for n in nails):
        raise ValueError("nail heights must not be negative")
    return nails


def _strikes_down_to_lowest(text: str) -> int:
    nails = _nails(text)
    return sum(nails) - min(nails) * len(nails)


def part1(text: str) -> int:
    """Strikes to hammer every nail down to the lowest one."""
    return _strikes_down_to_lowest(text)


def part2(text: str) -> int:
    """Same as part 1 for a larger set of nails."""
    return _strikes_down_to_lowest(text)


def part3(text: str) -> int:
    """Strikes, pulling or hammering, to bring every nail to the median height."""
    ordered = sorted(_nails(text))
    median = ordered[len(ordered) // 2]
    return sum(abs(n - median) for n in ordered)