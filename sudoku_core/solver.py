"""
Backtracking Sudoku solver driven by the cell validator.
"""

from typing import Dict, List, Optional, Tuple

import numpy as np

from .grid import EMPTY, MAX_NUM, MIN_NUM, cell_order, original_grid, working_copy
from .validator import find_duplicate_givens, is_cell_valid


def solve_board(board: np.ndarray, original: np.ndarray, cells: List[Tuple[int, int]],
                index: int, stats: Dict[str, int], max_steps: Optional[int] = None,
                debug: bool = False) -> bool:
    """
    In-place depth-first search from cursor position `index`. Returns True if solved.

    Cells that are non-zero in `original` are skipped. Every abandoned cell is
    reset to 0 before returning False.

    `stats` counts candidate assignments in stats["steps"] and sets
    stats["cutoff"] when max_steps stops the search.
    """
    while index < len(cells) and original[cells[index]] != EMPTY:
        index += 1
    if index == len(cells):
        return True

    r, c = cells[index]
    for val in range(MIN_NUM, MAX_NUM + 1):
        if max_steps is not None and stats["steps"] >= max_steps:
            stats["cutoff"] = True
            board[r, c] = EMPTY
            return False

        board[r, c] = val
        stats["steps"] += 1
        if debug:
            print(f"      board[{r}][{c}] = {val}")
        if is_cell_valid(board, r, c) and solve_board(board, original, cells, index + 1,
                                                       stats, max_steps, debug):
            return True

    board[r, c] = EMPTY
    if debug:
        print(f"      board[{r}][{c}] = 0 (backtrack)")
    return False


def solve_puzzle(puzzle, max_steps: Optional[int] = None, debug: bool = False,
                 check_givens: bool = True) -> Tuple[Optional[np.ndarray], str]:
    """
    Return a solved copy of the puzzle, or (None, reason) if none was found.

    Contradictory givens are rejected before searching unless check_givens is
    False (the caller has already run find_duplicate_givens). With max_steps
    set the search gives up after that many candidate assignments.

    Raises:
        ValueError: if the puzzle is not a 9x9 grid of 0-9 integers
    """
    original = original_grid(puzzle)

    if check_givens:
        notes = find_duplicate_givens(original)
        if notes:
            return None, notes[0]

    working = working_copy(original)
    stats = {"steps": 0, "cutoff": False}
    solved = solve_board(working, original, cell_order(), 0, stats, max_steps, debug)

    if solved:
        return working, f"Solved in {stats['steps']} steps"
    if stats["cutoff"]:
        return None, f"Stopped after {stats['steps']} steps (limit {max_steps})"
    return None, "No solution found"


def solve(puzzle, max_steps: Optional[int] = None, debug: bool = False) -> Tuple[bool, np.ndarray]:
    """
    Find one completion of the puzzle.

    Returns:
        (found, grid): the solution when found, otherwise a copy of the
        puzzle exactly as given
    """
    solution, _ = solve_puzzle(puzzle, max_steps=max_steps, debug=debug)
    if solution is None:
        return False, working_copy(original_grid(puzzle))
    return True, solution
