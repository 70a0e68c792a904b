"""Siren disruption: shuffling tracks by swap instructions."""

from __future__ import annotations


def _position(text: str) -> int:
    value = int(text)
    if value < 1:
        raise ValueError(f"positions start at 1, got {value}")
    return value - 1


def _parse(text: str) -> tuple[list[int], list[tuple[int, int]], int]:
    sections = text.split("\n\n")
    if len(sections) < 3:
        raise ValueError("input needs tracks, swaps and a query position")

    tracks = [int(line) for line in sections[0].splitlines() if line]
    swaps = []
    for line in sections[1].splitlines():
        if not line:
            continue
        left, sep, right = line.partition("-")
        if not sep:
            raise ValueError(f"not a swap: {line!r}")
        swaps.append((_position(left), _position(right)))
    index = _position(sections[2].strip())
    return tracks, swaps, index


def solve(text: str) -> tuple[int, int, int]:
    """Return the queried track after pair swaps, three-way swaps and block swaps."""
    tracks, swaps, index = _parse(text)

    paired = list(tracks)
    for x, y in swaps:
        paired[x], paired[y] = paired[y], paired[x]

    rotated = list(tracks)
    for i, (x, y) in enumerate(swaps):
        z = swaps[(i + 1) % len(swaps)][0]
        moved = rotated[x]
        rotated[x] = rotated[z]
        rotated[z] = rotated[y]
        rotated[y] = moved

    blocks = list(tracks)
    for x, y in swaps:
        width = min(len(tracks) - max(x, y), abs(x - y))
        for i in range(width):
            blocks[x + i], blocks[y + i] = blocks[y + i], blocks[x + i]

    return paired[index], rotated[index], blocks[index]