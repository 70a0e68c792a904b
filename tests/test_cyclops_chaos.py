import pytest

from dsapuzzles.codyssi.cyclops_chaos import find_safest_path, solve


def _grid_text(rows):
    return "\n".join(" ".join(str(v) for v in row) for row in rows) + "\n"


def test_small_grid():
    assert find_safest_path([[1, 2], [3, 4]], (0, 0), (1, 1)) == 7


def test_follows_the_cheap_cells():
    grid = [[1, 9, 9], [1, 1, 9], [9, 1, 1]]
    assert find_safest_path(grid, (0, 0), (2, 2)) == len(grid) + len(grid[0]) - 1


def test_end_equal_to_start():
    grid = [[6, 2], [3, 4]]
    assert find_safest_path(grid, (0, 0), (0, 0)) == grid[0][0]


def test_bounded_by_edge_routes():
    n = 15
    grid = [[(3 * i + 5 * j) % 9 + 1 for j in range(n)] for i in range(n)]
    result = find_safest_path(grid, (0, 0), (n - 1, n - 1))
    along_top = sum(grid[0]) + sum(grid[i][-1] for i in range(1, n))
    along_left = sum(row[0] for row in grid) + sum(grid[-1][1:])
    assert result <= min(along_top, along_left)
    assert result >= grid[0][0] + grid[-1][-1]


def test_end_outside_grid():
    with pytest.raises(IndexError):
        find_safest_path([[1, 2], [3, 4]], (0, 0), (2, 2))


def test_solve_uniform_grid():
    n = 16
    text = _grid_text([[1] * n for _ in range(n)])
    assert solve(text) == (n, 2 * 15 - 1, 2 * n - 1)


def test_solve_needs_fifteen_rows():
    with pytest.raises(IndexError):
        solve(_grid_text([[1, 2], [3, 4]]))


def test_solve_rejects_ragged_grid():
    with pytest.raises(ValueError):
        solve("1 2\n3\n")