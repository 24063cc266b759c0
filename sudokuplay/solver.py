"""Backtracking Sudoku solver."""

from __future__ import annotations

from .board import SudokuBoard

_SIZE = 9


def _fill(board: SudokuBoard, empties: list[tuple[int, int]], index: int) -> bool:
    if index == len(empties):
        return True
    row, col = empties[index]
    for value in range(1, _SIZE + 1):
        if board.set_cell(row, col, value):
            if _fill(board, empties, index + 1):
                return True
            board.undo_cell(row, col)
    return False


def solve(board: SudokuBoard) -> bool:
    """Fill the board's empty cells in place; return whether a solution was found.

    On failure the board is left as it was given.
    """
    empties = [
        (row, col)
        for row in range(_SIZE)
        for col in range(_SIZE)
        if board.get_cell(row, col) == 0
    ]
    return _fill(board, empties, 0)