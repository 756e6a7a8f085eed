"""
Entry point for running the sudoku_core package.

Usage:
    python -m sudoku_core --puzzle path/to/puzzle.txt
"""

from .sudoku_solver import main

if __name__ == '__main__':
    main()
