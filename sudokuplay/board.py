"""The 9x9 Sudoku grid with rule-checked placement and file persistence."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Union

_SIZE = 9
_BOX = 3
_BORDER = "---------------------"
_BAND_SEPARATOR = "------+-------+------"

StrPath = Union[str, "PathLike[str]"]

logger = logging.getLogger(__name__)


def _in_range(row: int, col: int) -> bool:
    return 0 <= row < _SIZE and 0 <= col < _SIZE


class SudokuBoard:
    """A Sudoku grid; 0 marks an empty cell."""

    def __init__(self) -> None:
        self._grid: list[list[int]] = [[0] * _SIZE for _ in range(_SIZE)]

    @classmethod
    def from_file(cls, path: StrPath) -> SudokuBoard:
        """Build a board from a puzzle file, falling back to an empty board."""
        board = cls()
        try:
            board.load(path)
        except (OSError, ValueError) as exc:
            logger.warning(
                "Failed to load puzzle from file '%s' (%s). Using empty board.", path, exc
            )
        return board

    def copy(self) -> SudokuBoard:
        """Return an independent copy of this board."""
        other = SudokuBoard()
        other._grid = [list(row) for row in self._grid]
        return other

    def _conflicts(self, row: int, col: int, value: int) -> bool:
        """Whether value clashes with another cell in the row, column or box."""
        top, left = (row // _BOX) * _BOX, (col // _BOX) * _BOX
        box = (
            (r, c)
            for r in range(top, top + _BOX)
            for c in range(left, left + _BOX)
        )
        line = ((row, c) for c in range(_SIZE))
        column = ((r, col) for r in range(_SIZE))
        for cells in (box, line, column):
            if any(
                (r, c) != (row, col) and self._grid[r][c] == value for r, c in cells
            ):
                return True
        return False

    def set_cell(self, row: int, col: int, value: int) -> bool:
        """Place value in an empty cell if it breaks no rule; report success."""
        if not _in_range(row, col) or self._grid[row][col] != 0:
            return False
        if self._conflicts(row, col, value):
            return False
        self._grid[row][col] = value
        return True

    def get_cell(self, row: int, col: int) -> int:
        """Return the value at (row, col); raise IndexError when off the board."""
        if not _in_range(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside the board")
        return self._grid[row][col]

    def undo_cell(self, row: int, col: int) -> None:
        """Clear a cell; positions off the board are ignored."""
        if _in_range(row, col):
            self._grid[row][col] = 0

    def erase_all(self) -> None:
        """Clear every cell."""
        for row in self._grid:
            row[:] = [0] * _SIZE

    def load(self, path: StrPath) -> None:
        """Read a puzzle stored as one line of cells in row order.

        Digits overwrite the matching cell; any other character leaves it
        untouched. Raises OSError when the file cannot be read and ValueError
        when it is empty.
        """
        data = Path(path).read_bytes()
        if not data:
            raise ValueError(f"puzzle file '{path}' is empty")
        line = data.split(b"\n", 1)[0]
        for row, start in enumerate(range(0, _SIZE * _SIZE, _SIZE)):
            if start >= len(line):
                break
            for col, byte in enumerate(line[start:start + _SIZE]):
                if ord("0") <= byte <= ord("9"):
                    self._grid[row][col] = byte - ord("0")

    def save(self, path: StrPath) -> None:
        """Write the board as one line of 81 characters in row order."""
        text = "".join(chr(cell + ord("0")) for row in self._grid for cell in row)
        with open(path, "w", encoding="latin-1", newline="") as stream:
            stream.write(text)

    def is_valid(self) -> bool:
        """Whether no filled cell repeats in its row, column or box.

        Solvability is not checked.
        """
        return not any(
            value != 0 and self._conflicts(row, col, value)
            for row, cells in enumerate(self._grid)
            for col, value in enumerate(cells)
        )

    def is_solved(self) -> bool:
        """Whether every cell is filled."""
        return all(cell != 0 for row in self._grid for cell in row)

    def render(self) -> str:
        """Return the board drawn as text, empty cells shown as dots."""
        lines = ["", _BORDER]
        for index, row in enumerate(self._grid, start=1):
            parts = []
            for col, cell in enumerate(row):
                if col % _BOX == 0 and col != 0:
                    parts.append("| ")
                parts.append(". " if cell == 0 else f"{cell} ")
            lines.append("".join(parts))
            if index % _BOX == 0 and index != _SIZE:
                lines.append(_BAND_SEPARATOR)
        lines.extend([_BORDER, "", ""])
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()