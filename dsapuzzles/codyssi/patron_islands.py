"""Patron islands: Manhattan distances between islands and a greedy tour."""

from __future__ import annotations

from collections.abc import Iterable

Point = tuple[int, int]

_ORIGIN: Point = (0, 0)


def manhattan(p1: Point, p2: Point) -> int:
    """Return the Manhattan distance between two points."""
    return abs(p1[0] - p2[0]) + abs(p1[1] - p2[1])


def _parse_point(line: str) -> Point:
    x_part, sep, y_part = line.partition(", ")
    if not sep:
        raise ValueError(f"not a coordinate: {line!r}")
    return int(x_part[1:]), int(y_part[:-1])


def _closest(point: Point, points: Iterable[Point]) -> tuple[Point, int]:
    others = {p for p in points if p != point}
    if not others:
        raise ValueError("no other island to reach")
    best = min(others, key=lambda p: (manhattan(point, p), p))
    return best, manhattan(point, best)


def solve(text: str) -> tuple[int, int, int]:
    """Return the near/far spread, the hop from the nearest island, and the tour length."""
    points = [_parse_point(line) for line in text.splitlines()]
    if not points:
        raise ValueError("no islands given")

    from_boat = {p: manhattan(p, _ORIGIN) for p in points}
    nearest = min(from_boat, key=lambda p: (from_boat[p], p))
    spread = abs(from_boat[nearest] - max(from_boat.values()))

    hop = _closest(nearest, points)[1]

    to_visit = list(points)
    current, total = _closest(_ORIGIN, to_visit)
    while len(to_visit) > 1:
        following, step = _closest(current, to_visit)
        total += step
        to_visit.remove(current)
        current = following
    total += manhattan(current, to_visit[0])

    return spread, hop, total