"""
Grid representation and conversion helpers.

A grid is a 9x9 numpy integer array where 0 marks an empty cell and 1-9 are
filled digits. Display text that cannot be read as a digit is stored as
INVALID so the validator rejects that cell instead of raising.
"""

from typing import List, Sequence, Tuple

import numpy as np


GRID_SIZE = 9
BLOCK_SIZE = 3
MIN_NUM = 1
MAX_NUM = 9
EMPTY = 0
INVALID = -1

CLASSIC_PUZZLE = [
    [0, 0, 8, 6, 0, 1, 9, 0, 4],
    [9, 5, 0, 0, 0, 0, 0, 2, 0],
    [2, 0, 0, 5, 4, 0, 0, 0, 3],
    [0, 9, 0, 7, 0, 2, 1, 0, 0],
    [0, 0, 0, 4, 8, 3, 0, 0, 0],
    [0, 0, 3, 1, 0, 5, 0, 4, 0],
    [5, 0, 0, 0, 1, 4, 0, 0, 2],
    [0, 2, 0, 0, 0, 0, 0, 1, 7],
    [3, 0, 1, 2, 0, 6, 8, 0, 0],
]

CLASSIC_SOLUTION = [
    [7, 3, 8, 6, 2, 1, 9, 5, 4],
    [9, 5, 4, 8, 3, 7, 6, 2, 1],
    [2, 1, 6, 5, 4, 9, 7, 8, 3],
    [4, 9, 5, 7, 6, 2, 1, 3, 8],
    [1, 6, 2, 4, 8, 3, 5, 7, 9],
    [8, 7, 3, 1, 9, 5, 2, 4, 6],
    [5, 8, 7, 9, 1, 4, 3, 6, 2],
    [6, 2, 9, 3, 5, 8, 4, 1, 7],
    [3, 4, 1, 2, 7, 6, 8, 9, 5],
]

# Characters format_board draws between blocks; skipped when reading text back.
_SEPARATORS = set("|-+")
_EMPTY_MARKS = {"", ".", "0"}
_DIGITS = set("123456789")


def as_grid(values) -> np.ndarray:
    """
    Copy nested rows (or an existing array) into a fresh 9x9 int array.

    Raises:
        ValueError: if the input is not 9x9 or holds non-integer data
    """
    try:
        raw = np.asarray(values)
        grid = raw.astype(int)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Grid must contain integers: {e}") from e

    if grid.shape != (GRID_SIZE, GRID_SIZE):
        raise ValueError(f"Grid must be {GRID_SIZE}x{GRID_SIZE}, got shape {grid.shape}")
    if raw.dtype.kind in "fO" and not np.array_equal(raw.astype(float), grid):
        raise ValueError("Grid must contain whole numbers")
    return grid


def original_grid(values) -> np.ndarray:
    """Read-only snapshot of the puzzle as given. Values must be 0-9."""
    grid = as_grid(values)
    bad = np.argwhere((grid < EMPTY) | (grid > MAX_NUM))
    if bad.size:
        r, c = bad[0]
        raise ValueError(f"Cell ({r+1},{c+1}) holds {grid[r, c]}, expected 0-{MAX_NUM}")
    grid.flags.writeable = False
    return grid


def working_copy(original: np.ndarray) -> np.ndarray:
    return np.array(original, dtype=int, copy=True)


def block_anchor(row: int, col: int) -> Tuple[int, int]:
    """Top-left coordinate of the 3x3 block holding (row, col)."""
    return (row // BLOCK_SIZE) * BLOCK_SIZE, (col // BLOCK_SIZE) * BLOCK_SIZE


def block_cells(row: int, col: int) -> List[Tuple[int, int]]:
    r0, c0 = block_anchor(row, col)
    return [(r, c) for r in range(r0, r0 + BLOCK_SIZE) for c in range(c0, c0 + BLOCK_SIZE)]


def cell_order() -> List[Tuple[int, int]]:
    """Row-major visitation order: (0,0), (0,1), ..., (8,8)."""
    return [(r, c) for r in range(GRID_SIZE) for c in range(GRID_SIZE)]


def parse_cell(text) -> int:
    """
    Map a displayed cell value to an int.

    Blank, '.' and '0' are empty; a single ASCII digit 1-9 (or a whole
    number 0-9) is that digit; anything else becomes INVALID.
    """
    if text is None:
        return EMPTY
    if isinstance(text, (int, np.integer)):
        return int(text) if EMPTY <= text <= MAX_NUM else INVALID
    if isinstance(text, (float, np.floating)):
        return parse_cell(int(text)) if float(text).is_integer() else INVALID

    text = str(text).strip()
    if text in _EMPTY_MARKS:
        return EMPTY
    if text in _DIGITS:
        return int(text)
    return INVALID


def grid_from_display(rows: Sequence[Sequence]) -> np.ndarray:
    """Convert 9x9 displayed values (strings, ints or None) into a grid."""
    return as_grid([[parse_cell(v) for v in row] for row in rows])


def _tokenize(line: str) -> List[str]:
    return [ch for ch in line if not ch.isspace() and ch not in _SEPARATORS]


def parse_puzzle(text: str) -> np.ndarray:
    """
    Parse puzzle text into a grid.

    Accepts nine lines of nine cells or a single 81-character line. Digits are
    givens, '0' or '.' are empty, whitespace and the block separators drawn by
    format_board are ignored. Any other character becomes INVALID.

    Raises:
        ValueError: if the text does not hold exactly 81 cells
    """
    lines = [_tokenize(line) for line in text.splitlines()]
    lines = [tokens for tokens in lines if tokens]

    if len(lines) == 1:
        cells = lines[0]
    elif len(lines) == GRID_SIZE:
        for i, tokens in enumerate(lines):
            if len(tokens) != GRID_SIZE:
                raise ValueError(f"Line {i+1} has {len(tokens)} cells, expected {GRID_SIZE}")
        cells = [tok for tokens in lines for tok in tokens]
    else:
        raise ValueError(f"Puzzle must have {GRID_SIZE} rows, found {len(lines)}")

    if len(cells) != GRID_SIZE * GRID_SIZE:
        raise ValueError(f"Puzzle must have {GRID_SIZE * GRID_SIZE} cells, found {len(cells)}")

    rows = [cells[i:i + GRID_SIZE] for i in range(0, len(cells), GRID_SIZE)]
    return grid_from_display(rows)


def load_puzzle(path: str) -> np.ndarray:
    with open(path, encoding="utf-8") as fh:
        return parse_puzzle(fh.read())


def format_board(board: np.ndarray) -> str:
    """Render the 9x9 board as a human-friendly string."""
    lines = []
    for r, row in enumerate(board):
        parts = []
        for c, val in enumerate(row):
            if val == EMPTY:
                parts.append(".")
            elif MIN_NUM <= val <= MAX_NUM:
                parts.append(str(val))
            else:
                parts.append("?")
            if c in {2, 5}:
                parts.append("|")
        line = " ".join(parts)
        lines.append(line)
        if r in {2, 5}:
            lines.append("-" * len(line))
    return "\n".join(lines)
