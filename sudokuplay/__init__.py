"""Generate, solve and play 9x9 Sudoku puzzles in the terminal."""

__version__ = "1.0.0"
__all__ = ["board", "solver", "generator", "game"]