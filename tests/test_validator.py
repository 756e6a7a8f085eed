import numpy as np
import pytest

from sudoku_core.grid import INVALID
from sudoku_core.validator import (
    check_solved,
    find_duplicate_givens,
    is_cell_valid,
    is_cell_valid_in_block,
    is_cell_valid_in_col,
    is_cell_valid_in_row,
    is_grid_valid,
)


def test_solved_grid_is_valid(solution):
    assert is_grid_valid(solution)
    assert check_solved(solution)


def test_check_solved_accepts_nested_lists(solution):
    assert check_solved(solution.tolist())


def test_every_cell_of_solution_is_valid(solution):
    for r in range(9):
        for c in range(9):
            assert is_cell_valid(solution, r, c)


def test_empty_cell_is_invalid(solution):
    solution[4, 4] = 0
    assert not is_cell_valid(solution, 4, 4)
    assert not check_solved(solution)


@pytest.mark.parametrize("value", [INVALID, 10, -5])
def test_out_of_range_value_is_invalid(solution, value):
    solution[2, 7] = value
    assert not is_cell_valid(solution, 2, 7)
    assert not is_grid_valid(solution)


def test_row_duplicate_makes_grid_invalid(solution):
    # copy the neighbour's digit into (0, 0)
    solution[0, 0] = solution[0, 1]
    assert not is_cell_valid_in_row(solution, 0, 0)
    assert not is_cell_valid(solution, 0, 0)
    assert not check_solved(solution)


def test_col_duplicate_detected(solution):
    solution[0, 0] = solution[5, 0]
    assert not is_cell_valid_in_col(solution, 0, 0)
    assert not is_cell_valid(solution, 0, 0)


def test_block_duplicate_detected_when_row_and_col_are_clean():
    grid = np.zeros((9, 9), dtype=int)
    grid[0, 0] = 5
    grid[1, 1] = 5
    assert is_cell_valid_in_row(grid, 0, 0)
    assert is_cell_valid_in_col(grid, 0, 0)
    assert not is_cell_valid_in_block(grid, 0, 0)
    assert not is_cell_valid(grid, 0, 0)


def test_block_check_uses_block_boundaries():
    grid = np.zeros((9, 9), dtype=int)
    grid[2, 2] = 7
    # (3, 3) shares neither row, column nor block with (2, 2)
    grid[3, 3] = 7
    assert is_cell_valid(grid, 2, 2)
    assert is_cell_valid(grid, 3, 3)


def test_cell_never_conflicts_with_itself():
    grid = np.zeros((9, 9), dtype=int)
    for value in range(1, 10):
        grid[4, 4] = value
        assert is_cell_valid(grid, 4, 4)


def test_partial_grid_is_not_solved(puzzle):
    assert not is_grid_valid(puzzle)


def test_is_cell_valid_does_not_mutate(solution):
    before = solution.copy()
    is_grid_valid(solution)
    np.testing.assert_array_equal(solution, before)


def test_no_duplicate_givens_in_classic_puzzle(puzzle):
    assert find_duplicate_givens(puzzle) == []


def test_duplicate_givens_reported():
    grid = np.zeros((9, 9), dtype=int)
    grid[0, 0] = 5
    grid[0, 1] = 5
    notes = find_duplicate_givens(grid)
    assert len(notes) == 2  # row 1 and the top-left block
    assert notes[0].startswith("Row 1")
    assert "3x3 block (1,1)" in notes[1]


def test_column_duplicate_givens_reported():
    grid = np.zeros((9, 9), dtype=int)
    grid[0, 4] = 3
    grid[8, 4] = 3
    assert find_duplicate_givens(grid) == ["Column 5 has duplicate given digit '3' at (1,5) and (9,5)"]


def test_fractional_value_fails_check_solved(solution):
    grid = solution.astype(float)
    assert check_solved(grid)
    grid[0, 0] = 7.5
    assert not check_solved(grid)
    assert not check_solved(grid.tolist())


def test_check_solved_reads_display_text(solution):
    rows = [[str(v) for v in row] for row in solution]
    assert check_solved(rows)
    rows[3][3] = "²"
    assert not check_solved(rows)


def test_cell_and_grid_checks_accept_nested_lists(solution):
    rows = solution.tolist()
    assert is_grid_valid(rows)
    assert is_cell_valid(rows, 0, 0)
    rows[0][0] = rows[0][1]
    assert not is_cell_valid(rows, 0, 0)
    assert not is_grid_valid(rows)
