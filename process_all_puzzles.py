#!/usr/bin/env python3
"""
Solve all Sudoku puzzle files in a directory and print a summary.

Usage:
    python process_all_puzzles.py            # puzzles/*.txt
    python process_all_puzzles.py my_puzzles/
"""

import glob
import os
import sys

from sudoku_core.sudoku_solver import SudokuSolver


def main(argv=None):
    """Solve every .txt puzzle in the given directory (default: puzzles/)."""
    argv = sys.argv[1:] if argv is None else argv
    puzzle_dir = argv[0] if argv else "puzzles"

    puzzle_files = sorted(glob.glob(os.path.join(puzzle_dir, "*.txt")))

    if not puzzle_files:
        print(f"No .txt files found in {puzzle_dir}/!")
        return None

    print(f"Found {len(puzzle_files)} puzzles to process")
    print("=" * 60)

    solver = SudokuSolver(verbose=False)

    results = {
        'solved': [],
        'unsolved': [],
        'error': []
    }

    for i, puzzle_path in enumerate(puzzle_files, 1):
        print(f"\n[{i}/{len(puzzle_files)}] Processing {puzzle_path}...")

        try:
            result = solver.process_puzzle(puzzle_path)
        except (OSError, ValueError) as e:
            print(f"Error processing {puzzle_path}: {e}")
            results['error'].append(puzzle_path)
            continue

        print(f"      {result['message']}")
        if result['solved']:
            results['solved'].append(puzzle_path)
        else:
            results['unsolved'].append(puzzle_path)

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"✅ Solved:    {len(results['solved'])}/{len(puzzle_files)}")
    print(f"❌ Unsolved:  {len(results['unsolved'])}/{len(puzzle_files)}")
    print(f"⚠️  Errors:    {len(results['error'])}/{len(puzzle_files)}")

    if results['solved']:
        print(f"\nSolved puzzles: {', '.join(results['solved'])}")

    return results


if __name__ == '__main__':
    main()
