"""
Rule checks for a single cell and for the whole grid.

A cell is valid when it holds a digit 1-9 that no other cell in its row,
column or 3x3 block repeats. Peers are compared one at a time and the scan
stops at the first conflict (row, then column, then block).
"""

from typing import List, Tuple

import numpy as np

from .grid import EMPTY, GRID_SIZE, MAX_NUM, MIN_NUM, block_cells, grid_from_display


def _has_digit(grid: np.ndarray, row: int, col: int) -> bool:
    return MIN_NUM <= grid[row, col] <= MAX_NUM


def is_cell_valid_in_row(grid: np.ndarray, row: int, col: int) -> bool:
    value = grid[row, col]
    for c in range(GRID_SIZE):
        if c == col:
            continue
        if grid[row, c] == value:
            return False
    return True


def is_cell_valid_in_col(grid: np.ndarray, row: int, col: int) -> bool:
    value = grid[row, col]
    for r in range(GRID_SIZE):
        if r == row:
            continue
        if grid[r, col] == value:
            return False
    return True


def is_cell_valid_in_block(grid: np.ndarray, row: int, col: int) -> bool:
    value = grid[row, col]
    for r, c in block_cells(row, col):
        if r == row and c == col:
            continue
        if grid[r, c] == value:
            return False
    return True


def is_cell_valid(grid: np.ndarray, row: int, col: int) -> bool:
    """
    Check the value at (row, col) against Sudoku rules.

    Empty cells and anything outside 1-9 (including the INVALID sentinel used
    for unreadable display text) fail before any peer is looked at.

    Args:
        grid: 9x9 grid (array or nested lists)
        row, col: coordinate in 0-8, not bounds-checked

    Returns:
        bool: True if the digit is unique in its row, column and block
    """
    grid = np.asarray(grid)
    if not _has_digit(grid, row, col):
        return False
    if not is_cell_valid_in_row(grid, row, col):
        return False
    if not is_cell_valid_in_col(grid, row, col):
        return False
    if not is_cell_valid_in_block(grid, row, col):
        return False
    return True


def is_grid_valid(grid: np.ndarray) -> bool:
    """True if every one of the 81 cells passes is_cell_valid."""
    grid = np.asarray(grid)
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            if not is_cell_valid(grid, row, col):
                return False
    return True


def check_solved(grid) -> bool:
    """
    Decide whether a grid, as currently displayed, is a finished solution.

    Accepts nested lists or an array of ints, floats or display text. Cells
    that are not a whole number 1-9 count as invalid rather than raising.
    """
    return is_grid_valid(grid_from_display(grid))


def find_duplicate_givens(grid: np.ndarray) -> List[str]:
    """
    Report repeated non-empty digits in rows, columns and blocks.

    Returns:
        list of notes, empty when the givens do not contradict each other
    """
    grid = np.asarray(grid)
    notes: List[str] = []

    def check_unit(cells: List[Tuple[int, int]], label: str):
        seen = {}
        for r, c in cells:
            v = int(grid[r, c])
            if v == EMPTY:
                continue
            if v in seen:
                pr, pc = seen[v]
                notes.append(f"{label} has duplicate given digit '{v}' at ({pr+1},{pc+1}) and ({r+1},{c+1})")
            else:
                seen[v] = (r, c)

    for i in range(GRID_SIZE):
        check_unit([(i, c) for c in range(GRID_SIZE)], f"Row {i+1}")

    for i in range(GRID_SIZE):
        check_unit([(r, i) for r in range(GRID_SIZE)], f"Column {i+1}")

    for br in range(3):
        for bc in range(3):
            check_unit(block_cells(br * 3, bc * 3), f"3x3 block ({br+1},{bc+1})")

    return notes
