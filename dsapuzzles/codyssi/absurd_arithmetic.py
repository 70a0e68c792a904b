"""Absurd arithmetic: pricing rooms through a fixed chain of functions."""

from __future__ import annotations

_LIMIT = 15_000_000_000_000


def apply_functions(quality: int) -> int:
    """Cube the quality, multiply by 83 and add 218."""
    return quality**3 * 83 + 218


def solve(text: str) -> tuple[int, int, int]:
    """Return the median price, the price of the even sum, and the best affordable room."""
    rooms = sorted(int(line) for line in text.splitlines()[4:])
    if not rooms:
        raise ValueError("no room qualities given")

    median_price = apply_functions(rooms[len(rooms) // 2])
    even_price = apply_functions(sum(q for q in rooms if q % 2 == 0))

    affordable = [q for q in rooms if apply_functions(q) < _LIMIT]
    if not affordable:
        raise ValueError("no room is affordable")
    return median_price, even_price, max(affordable)