"""Cyclops chaos: finding the least dangerous route across a grid."""

from __future__ import annotations

import heapq
from collections.abc import Sequence

Grid = Sequence[Sequence[int]]
Position = tuple[int, int]


def _check_inside(grid: Grid, position: Position) -> None:
    x, y = position
    if not (0 <= x < len(grid) and 0 <= y < len(grid[x])):
        raise IndexError(f"position {position} is outside the grid")


def find_safest_path(grid: Grid, start: Position, end: Position) -> int:
    """Lowest total danger from ``start`` to ``end`` moving only down or right.

    Returns 0 when ``end`` cannot be reached.
    """
    _check_inside(grid, start)
    _check_inside(grid, end)
    end_x, end_y = end

    heap: list[tuple[int, int, int]] = [(grid[start[0]][start[1]], *start)]
    visited: set[Position] = set()
    while heap:
        danger, x, y = heapq.heappop(heap)
        if (x, y) == end:
            return danger
        if (x, y) in visited:
            continue
        visited.add((x, y))
        if x < end_x:
            heapq.heappush(heap, (danger + grid[x + 1][y], x + 1, y))
        if y < end_y:
            heapq.heappush(heap, (danger + grid[x][y + 1], x, y + 1))
    return 0


def _parse_grid(text: str) -> list[list[int]]:
    grid = [[int(v) for v in line.split()] for line in text.splitlines() if line.strip()]
    if not grid:
        raise ValueError("no grid given")
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("grid rows differ in length")
    return grid


def solve(text: str) -> tuple[int, int, int]:
    """Return the safest row or column, the safest path to (14, 14) and to the corner."""
    grid = _parse_grid(text)
    row_sums = (sum(row) for row in grid)
    col_sums = (sum(col) for col in zip(*grid))
    safest_line = min((*row_sums, *col_sums))

    corner = (len(grid) - 1, len(grid[0]) - 1)
    return (
        safest_line,
        find_safest_path(grid, (0, 0), (14, 14)),
        find_safest_path(grid, (0, 0), corner),
    )