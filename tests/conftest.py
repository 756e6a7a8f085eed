import os

import numpy as np
import pytest

from sudoku_core.grid import CLASSIC_PUZZLE, CLASSIC_SOLUTION


PUZZLE_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "puzzles")


@pytest.fixture
def puzzle():
    return np.array(CLASSIC_PUZZLE)


@pytest.fixture
def solution():
    return np.array(CLASSIC_SOLUTION)


@pytest.fixture
def unsolvable():
    # (0, 8) can only be 9, which column 8 already holds.
    grid = np.zeros((9, 9), dtype=int)
    grid[0, :8] = [1, 2, 3, 4, 5, 6, 7, 8]
    grid[1, 8] = 9
    return grid


@pytest.fixture
def puzzle_dir():
    return PUZZLE_DIR
