"""
Sudoku Solver - Main Application Module
"""

import argparse
import os
import sys

import numpy as np

from .grid import CLASSIC_PUZZLE, as_grid, format_board, load_puzzle, original_grid
from .solver import solve_puzzle
from .validator import check_solved, find_duplicate_givens


class SudokuSolver:
    """
    Main class for the Sudoku Solver application.

    One instance is a solving session: it loads a puzzle, keeps the puzzle as
    given, and either checks it as a finished grid or searches for a
    completion.
    """

    def __init__(self, max_steps=None, debug=False, verbose=True):
        """
        Initialize the Sudoku Solver.

        Args:
            max_steps (int): Abandon the search after this many candidate
                assignments (default: no limit)
            debug (bool): Print every assignment and backtrack
            verbose (bool): Print pipeline progress
        """
        self.max_steps = max_steps
        self.debug = debug
        self.verbose = verbose

    def _log(self, message):
        if self.verbose:
            print(message)

    def process_puzzle(self, puzzle_path=None, check_only=False):
        """
        Run a puzzle through the pipeline.

        Pipeline steps:
        1. Load the puzzle (built-in classic puzzle when no path is given)
        2. Check the givens for contradictions
        3. Solve, or with check_only validate the grid as a finished solution

        Args:
            puzzle_path (str): Path to a puzzle text file
            check_only (bool): Validate instead of solving

        Returns:
            dict: Results with the puzzle, solution (or None), status flag and message
        """
        label = os.path.basename(puzzle_path) if puzzle_path else "built-in puzzle"
        self._log(f"\n{'='*60}")
        self._log(f"Processing: {label}")
        self._log(f"{'='*60}")

        self._log("\n[1/3] Loading puzzle...")
        if puzzle_path:
            board = load_puzzle(puzzle_path)
        else:
            board = as_grid(CLASSIC_PUZZLE)
        self._log(format_board(board))
        self._log(f"      Givens: {np.count_nonzero(board > 0)}")

        if check_only:
            self._log("\n[2/3] Skipping givens check (check mode)")
            self._log("\n[3/3] Checking solution...")
            solved = check_solved(board)
            message = "Puzzle is solved!" if solved else "Wrong answer!"
            self._log(f"      {'✓' if solved else '✗'} {message}")
            return {
                'puzzle': board,
                'solution': board if solved else None,
                'solved': solved,
                'message': message,
            }

        self._log("\n[2/3] Checking givens...")
        original = original_grid(board)
        notes = find_duplicate_givens(original)
        if notes:
            self._log("      Note: contradictory givens:")
            for note in notes:
                self._log(f"        - {note}")
            self._log("\n[3/3] Skipping search (no completion can exist)")
            return {
                'puzzle': original,
                'solution': None,
                'solved': False,
                'message': notes[0],
            }
        self._log("      ✓ No duplicate givens")

        self._log("\n[3/3] Solving...")
        solution, message = solve_puzzle(original, max_steps=self.max_steps, debug=self.debug,
                                         check_givens=False)
        if solution is None:
            self._log(f"      ✗ Could not solve: {message}")
        else:
            self._log(f"      ✓ Solved puzzle ({message}):")
            self._log(format_board(solution))

        return {
            'puzzle': original,
            'solution': solution,
            'solved': solution is not None,
            'message': message,
        }


def main(argv=None):
    """
    Main entry point for the Sudoku Solver application.

    Handles command-line arguments and processes a puzzle.
    """
    parser = argparse.ArgumentParser(
        description='Sudoku Solver - validate or solve a 9x9 puzzle',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Solve the built-in puzzle:
    python -m sudoku_core

  Solve a puzzle file:
    python -m sudoku_core --puzzle puzzles/classic.txt

  Check a filled-in grid:
    python -m sudoku_core --puzzle puzzles/classic_solution.txt --check
        """
    )

    parser.add_argument('--puzzle', '-p', default=None,
                        help='Path to a puzzle text file (default: built-in puzzle)')
    parser.add_argument('--check', action='store_true',
                        help='Check the grid as a finished solution instead of solving it')
    parser.add_argument('--max-steps', type=int, default=None,
                        help='Give up after this many candidate assignments (default: no limit)')
    parser.add_argument('--debug', action='store_true',
                        help='Print every assignment and backtrack')

    args = parser.parse_args(argv)

    if args.puzzle and not os.path.exists(args.puzzle):
        print(f"Error: Puzzle file not found: {args.puzzle}")
        sys.exit(1)

    solver = SudokuSolver(max_steps=args.max_steps, debug=args.debug)

    try:
        result = solver.process_puzzle(args.puzzle, check_only=args.check)
    except ValueError as e:
        print(f"\nError: {e}")
        sys.exit(1)

    if not result['solved']:
        sys.exit(1)


if __name__ == '__main__':
    main()
