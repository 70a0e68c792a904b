"""Pseudo-random clap dance: dancers moving between columns."""

from __future__ import annotations

from collections.abc import Sequence

Floor = list[list[int]]


def parse_dance_floor(text: str) -> Floor:
    """Read rows of numbers into columns."""
    floor: Floor = []
    for line in text.splitlines():
        for col, n in enumerate(line.split()):
            if col == len(floor):
                floor.append([])
            floor[col].append(int(n))
    if not floor:
        raise ValueError("empty dance floor")
    return floor


def _landing_index(length: int, clapper: int) -> int:
    side = (clapper // length) % 2
    row = clapper % length
    if side == 0:
        return 1 if row == 0 else row - 1
    return length - 1 if row == 0 else length - row + 1


def dance(floor: Floor, column: int) -> int:
    """Move the head of ``column`` into the next column and shout the number."""
    target = (column + 1) % len(floor)
    clapper = floor[column].pop(0)
    floor[target].insert(_landing_index(len(floor[target]), clapper), clapper)
    return int("".join(str(col[0]) for col in floor))


def _copy(floor: Sequence[Sequence[int]]) -> Floor:
    return [list(col) for col in floor]


def part1(floor: Sequence[Sequence[int]], iterations: int) -> int:
    """The number shouted after ``iterations`` rounds."""
    state = _copy(floor)
    shouted = 0
    for i in range(iterations):
        shouted = dance(state, i % len(state))
    return shouted


def part2(floor: Sequence[Sequence[int]], shouts: int) -> int:
    """The first number shouted ``shouts`` times, multiplied by the round count."""
    state = _copy(floor)
    counts: dict[int, int] = {}
    most = 0
    shouted = 0
    rounds = 0
    while most < shouts:
        shouted = dance(state, rounds % len(state))
        counts[shouted] = counts.get(shouted, 0) + 1
        most = max(most, counts[shouted])
        rounds += 1
    return shouted * rounds


def part3(floor: Sequence[Sequence[int]]) -> int:
    """The largest number shouted before the floor repeats a state."""
    state = _copy(floor)
    seen: set[tuple[tuple[int, ...], ...]] = set()
    best = 0
    rounds = 0
    while True:
        key = tuple(tuple(col) for col in state)
        if key in seen:
            return best
        seen.add(key)
        best = max(best, dance(state, rounds % len(state)))
        rounds += 1