# sudokuplay

A terminal Sudoku game. You can load a puzzle from a file or generate a new one
at `easy`, `medium` or `hard` difficulty. You can then enter moves one at a
time, let the solver finish the board, or save your progress.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Playing

```
sudokuplay
```

The command takes no options apart from `--help`. The start menu offers two
choices:

1. retrieve a game from a file
2. generate a game automatically (you are then asked for `easy`, `medium` or
   `hard`, in any letter case)

During play you can:

1. enter a move as row, column and value, each from 1 to 9, separated by spaces
2. solve the board automatically
3. load a puzzle from a file
4. save the current puzzle to a file
5. exit

A move is rejected in these cases:

- the position is off the board
- the cell is already filled
- the number repeats in the cell's row, column or 3x3 box
- the puzzle was generated and the number does not match the stored solution

If you load a puzzle during play, the stored solution is forgotten. Moves are
then checked against the rules only.

The game ends when the board is full, when the board is solved automatically,
or when you choose exit. You are then asked whether to play again. An answer
starting with `n` quits. Ending input (Ctrl-D) or pressing Ctrl-C also quits.

## Puzzle files

A puzzle is stored as one line of 81 characters, row by row, where `0` marks an
empty cell:

```
530070000600195000098000060800060003400803001700020006060000280000419005000080079
```

When a file is loaded, only its first line is read. Each digit overwrites the
matching cell. Any other character leaves that cell as it was. A short line
fills only the cells it covers. `SudokuBoard.save` writes the 81 characters with
no trailing newline.

## Using it as a library

```python
import random

from sudokuplay.board import SudokuBoard
from sudokuplay.generator import Difficulty, SudokuGenerator
from sudokuplay.solver import solve

board = SudokuBoard.from_file("puzzle.txt")   # empty board if the file can't be read
if solve(board):
    print(board)

generator = SudokuGenerator(random.Random(42))  # rng is optional
fresh = SudokuBoard()
generator.generate(fresh, Difficulty.MEDIUM)     # or the string "medium"
print(fresh.render())
print(generator.solution_text())
fresh.save("mine.txt")
```

### `sudokuplay.board.SudokuBoard`

- `set_cell(row, col, value)` uses 0-based positions. It places the value only
  when the position is on the board, the cell is empty and the value breaks no
  rule. It returns whether the value was placed.
- `get_cell(row, col)` returns the value, with 0 for an empty cell. It raises
  `IndexError` when the position is off the board.
- `undo_cell(row, col)` clears a cell. `erase_all()` clears every cell.
- `load(path)` reads a puzzle file. It raises `OSError` if the file cannot be
  read and `ValueError` if the file is empty. `save(path)` writes one.
- `from_file(path)` builds a board from a file. If loading fails, it logs a
  warning and returns an empty board.
- `copy()` returns an independent copy of the board.
- `is_valid()` reports whether any filled cell repeats in its row, column or
  box. It does not check that the board can be solved.
- `is_solved()` reports whether every cell is filled.
- `render()` returns the board drawn as text, with `.` for empty cells.
  `str(board)` gives the same text.

### `sudokuplay.solver.solve(board)`

Fills the empty cells in place by backtracking and returns `True` on success.
If no solution exists, it returns `False` and leaves the board as it was.

### `sudokuplay.generator`

`Difficulty` has three levels: `EASY`, `MEDIUM` and `HARD`. Their values are the
number of cells removed: 32, 46 and 52.

`SudokuGenerator.generate(board, level)` fills the board with a random
complete grid and stores that grid as the solution. It then removes cells at
random. A cell is removed only if solving the board without it gives back the
stored value. For an unknown level, `generate` raises `ValueError` and leaves
the board fully solved.

`SudokuGenerator` also has these members:

- `get_cell(row, col)` reads the stored solution, with 0 when nothing has been
  generated.
- `solution_text()` returns the solution as nine lines of nine digits.
- `erase_all()` forgets the solution.

### `sudokuplay.game`

`SudokuGame(board, generator, input_func=None, output=None)` runs the menus.
By default it reads with `input` and writes to standard output.
`enter_move(row, col, value)` uses 1-based positions and applies the move rules
listed above. `start()` runs games until the player declines to play again.
`main(argv=None)` is the `sudokuplay` command.

## What it does not do

- The game has no way to clear a cell once a move is placed.
- It gives no hints.
- It does not check that a loaded puzzle is valid or has only one solution.
- Only 9x9 boards are supported.