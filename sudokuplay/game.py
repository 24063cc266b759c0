"""Interactive console Sudoku game."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence, TextIO

from .board import SudokuBoard
from .generator import SudokuGenerator
from .solver import solve

_RULE = "=============================================="
_RETRY = "No Option Choosen try again"
_SOLVED = "Great job! The Sudoku is solved!"


def _parse_int(text: str) -> int:
    try:
        return int(text.split()[0])
    except (ValueError, IndexError):
        return 0


class SudokuGame:
    """Menu-driven game over a board and a generator."""

    def __init__(
        self,
        board: SudokuBoard,
        generator: SudokuGenerator,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self.board = board
        self.generator = generator
        self._input = input_func if input_func is not None else input
        self._output = output

    @property
    def _out(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def _say(self, text: str) -> None:
        self._out.write(text + "\n")

    def _ask(self, prompt: str) -> str:
        return self._input(prompt)

    def enter_move(self, row: int, col: int, value: int) -> bool:
        """Place value at the 1-based (row, col); report whether it was accepted.

        When a generated solution exists, a value differing from it is refused.
        """
        r, c = row - 1, col - 1
        if not (0 <= r < 9 and 0 <= c < 9):
            return False
        expected = self.generator.get_cell(r, c)
        if expected != 0 and value != expected:
            return False
        return self.board.set_cell(r, c, value)

    def _read_move(self) -> bool:
        text = self._ask("Enter row (1-9), column (1-9), and value (1-9): ")
        try:
            row, col, value = (int(part) for part in text.split()[:3])
        except ValueError:
            return False
        return self.enter_move(row, col, value)

    def _load(self) -> bool:
        path = self._ask("Enter File Path: ")
        try:
            self.board.load(path)
        except (OSError, ValueError) as exc:
            self._say(f"Error: {exc}")
            return False
        return True

    def _save(self) -> bool:
        path = self._ask("Enter File Path: ")
        try:
            self.board.save(path)
        except OSError as exc:
            self._say(f"Error: {exc}")
            return False
        return True

    def _start_menu(self) -> bool:
        self._say("1) retrieve game from file")
        self._say("2) Generate a game automatically")
        option = _parse_int(self._ask("Choice: "))
        self._say(_RULE)
        if option == 1:
            if self._load():
                self._say("Board is loaded successfully.")
            else:
                self._say("Board failed to load.")
        elif option == 2:
            difficulty = self._ask("Enter Game difficulty 'easy', 'medium', 'hard': ")
            try:
                self.generator.generate(self.board, difficulty.strip())
            except ValueError:
                self._say("ERROR in Generation")
        else:
            return False
        return True

    def _game_menu(self) -> bool:
        while True:
            self._out.write(self.board.render())
            self._say("1) Enter a move")
            self._say("2) Solve automatically")
            self._say("3) Load puzzle from file")
            self._say("4) Save current puzzle to file")
            self._say("5) Exit")
            option = _parse_int(self._ask("Choice: "))
            if option == 1:
                if self._read_move():
                    self._say("Move accepted!")
                    if self.board.is_solved():
                        self._out.write(self.board.render())
                        self._say(_SOLVED)
                        return True
                else:
                    self._say(
                        "Invalid move. That cell might be occupied or the "
                        "placement breaks Sudoku rules."
                    )
            elif option == 2:
                if solve(self.board):
                    self._out.write(self.board.render())
                    self._say(_SOLVED)
                else:
                    self._say("These board cannot be solved!!!")
                return True
            elif option == 3:
                if self._load():
                    self.generator.erase_all()
                    self._say("Board is loaded successfully.")
                else:
                    self._say("Board failed to load.")
            elif option == 4:
                if self._save():
                    self._say("Board is saved successfully.")
                else:
                    self._say("Save failed try again.")
            elif option == 5:
                self._say("Thanks For Playing . . .")
                return True
            else:
                return False

    def start(self) -> None:
        """Run games until the player declines to play again."""
        while True:
            while not self._start_menu():
                self._say(_RETRY)
            while not self._game_menu():
                self._say(_RETRY)
            self.generator.erase_all()
            answer = self._ask("Do you want to Play Again (yes(y) / no(n)): ").strip()
            if answer[:1] == "n":
                break


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play Sudoku on the console."""
    parser = argparse.ArgumentParser(prog="sudokuplay", description="Play Sudoku.")
    parser.parse_args(argv)
    game = SudokuGame(SudokuBoard(), SudokuGenerator())
    try:
        game.start()
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())