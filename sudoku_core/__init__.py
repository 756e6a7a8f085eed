"""
Sudoku Core - validity checking and backtracking search

This package contains modules for:
- Grid conversion, puzzle file loading and rendering
- Per-cell and whole-grid rule validation
- Depth-first backtracking solving
- A command-line front end
"""

from .solver import solve, solve_puzzle
from .validator import check_solved, is_cell_valid, is_grid_valid

__version__ = "1.0.0"
__author__ = "Sudoku Core Team"
