"""Random Sudoku puzzle generation at a chosen difficulty."""

from __future__ import annotations

import random
from enum import Enum
from typing import Optional, Union

from .board import SudokuBoard
from .solver import solve

_SIZE = 9


class Difficulty(Enum):
    """Difficulty levels, valued by the number of cells removed."""

    EASY = 32
    MEDIUM = 46
    HARD = 52


def _parse_level(level: Union[Difficulty, str]) -> Optional[Difficulty]:
    if isinstance(level, Difficulty):
        return level
    by_name = {difficulty.name.lower(): difficulty for difficulty in Difficulty}
    return by_name.get(str(level).lower())


class SudokuGenerator:
    """Builds random puzzles and remembers the full solution behind them."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._solution: list[list[int]] = [[0] * _SIZE for _ in range(_SIZE)]

    def get_cell(self, row: int, col: int) -> int:
        """Return the solution value at (row, col); 0 when nothing is generated."""
        if not (0 <= row < _SIZE and 0 <= col < _SIZE):
            raise IndexError(f"cell ({row}, {col}) is outside the board")
        return self._solution[row][col]

    def generate(self, board: SudokuBoard, level: Union[Difficulty, str]) -> None:
        """Fill board with a random puzzle of the given difficulty.

        The level is matched case-insensitively. For an unknown level the
        board is left fully solved and ValueError is raised.
        """
        board.erase_all()
        self._fill(board, 0)
        difficulty = _parse_level(level)
        if difficulty is None:
            raise ValueError(f"unknown difficulty level: {level!r}")
        self._remove_to_level(board, difficulty.value)

    def solution_text(self) -> str:
        """Return the stored solution as nine lines of nine digits."""
        return "\n".join("".join(str(cell) for cell in row) for row in self._solution)

    def erase_all(self) -> None:
        """Forget the stored solution."""
        for row in self._solution:
            row[:] = [0] * _SIZE

    def _fill(self, board: SudokuBoard, index: int) -> bool:
        if index == _SIZE * _SIZE:
            return True
        row, col = divmod(index, _SIZE)
        values = list(range(1, _SIZE + 1))
        self._rng.shuffle(values)
        for value in values:
            if board.set_cell(row, col, value):
                self._solution[row][col] = value
                if self._fill(board, index + 1):
                    return True
                board.undo_cell(row, col)
        return False

    def _remove_to_level(self, board: SudokuBoard, removals: int) -> None:
        while removals:
            row = self._rng.randrange(_SIZE)
            col = self._rng.randrange(_SIZE)
            if board.get_cell(row, col) == 0:
                continue
            trial = board.copy()
            trial.undo_cell(row, col)
            if solve(trial) and trial.get_cell(row, col) == self._solution[row][col]:
                board.undo_cell(row, col)
                removals -= 1