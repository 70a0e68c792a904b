"""Mining maestro: how deep each block of earth can be dug."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Matrix = list[list[str]]

_ORTHOGONAL = ((0, 1), (1, 0), (0, -1), (-1, 0))
_DIAGONAL = ((1, 1), (-1, 1), (1, -1), (-1, -1))


def build_matrix(text: str) -> Matrix:
    """Split the input into a grid of single-character cells."""
    return [list(line) for line in text.splitlines()]


def wrap_in_dots(matrix: Sequence[Sequence[str]]) -> Matrix:
    """Return a copy of ``matrix`` surrounded by a border of '.' cells."""
    if not matrix:
        raise ValueError("cannot wrap an empty matrix")
    rows = [[".", *row, "."] for row in matrix]
    width = len(rows[0])
    return [["."] * width, *rows, ["."] * width]


def mine(matrix: Sequence[Sequence[str]], count_diagonals: bool = False) -> int:
    """Sum, over every '#' cell, its distance to the nearest '.' cell."""
    grid = [list(row) for row in matrix]
    directions = _ORTHOGONAL + (_DIAGONAL if count_diagonals else ())

    queue = deque(
        (x, y, 0) for x, row in enumerate(grid) for y, cell in enumerate(row) if cell == "."
    )
    total = 0
    while queue:
        x, y, cost = queue.popleft()
        total += cost
        for dx, dy in directions:
            nx, ny = x + dx, y + dy
            if 0 <= nx < len(grid) and 0 <= ny < len(grid[nx]) and grid[nx][ny] == "#":
                grid[nx][ny] = str(cost + 1)
                queue.append((nx, ny, cost + 1))
    return total


def part1(text: str) -> int:
    """Blocks dug with orthogonal neighbours only."""
    return mine(build_matrix(text), False)


def part2(text: str) -> int:
    """Same rule as part 1 on a larger map."""
    return mine(build_matrix(text), False)


def part3(text: str) -> int:
    """Blocks dug counting diagonals, with the map edge treated as ground level."""
    return mine(wrap_in_dots(build_matrix(text)), True)