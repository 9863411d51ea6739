"""Terminal-driven exercises with progress tracking, hints and watch mode, plus small Sudoku and Wordle programs."""

__version__ = "4.7.0"