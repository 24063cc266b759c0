import io
import random

from sudokuplay.board import SudokuBoard
from sudokuplay.game import SudokuGame
from sudokuplay.generator import SudokuGenerator


def _grid():
    return [[(r * 3 + r // 3 + c) % 9 + 1 for c in range(9)] for r in range(9)]


def _script(*answers):
    it = iter(answers)

    def feed(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return feed


def _make_game(*answers, seed=0):
    out = io.StringIO()
    board = SudokuBoard()
    generator = SudokuGenerator(random.Random(seed))
    game = SudokuGame(board, generator, _script(*answers), out)
    return game, board, generator, out


def _write_puzzle(tmp_path, blank_last=True):
    cells = [str(v) for row in _grid() for v in row]
    if blank_last:
        cells[-1] = "0"
    path = tmp_path / "puzzle.txt"
    path.write_text("".join(cells))
    return path


def test_load_and_finish_with_last_move(tmp_path):
    path = _write_puzzle(tmp_path)
    last = _grid()[8][8]
    game, board, _, out = _make_game("1", str(path), "1", f"9 9 {last}", "n")
    game.start()
    text = out.getvalue()
    assert "Board is loaded successfully." in text
    assert "Move accepted!" in text
    assert "Great job! The Sudoku is solved!" in text
    assert board.is_solved()
    assert board.get_cell(8, 8) == last


def test_invalid_move_then_exit(tmp_path):
    path = _write_puzzle(tmp_path)
    wrong = _grid()[8][0]
    game, board, _, out = _make_game("1", str(path), "1", f"9 9 {wrong}", "5", "n")
    game.start()
    text = out.getvalue()
    assert "Invalid move." in text
    assert "Thanks For Playing . . ." in text
    assert board.get_cell(8, 8) == 0


def test_generate_then_solve_clears_generator():
    game, board, generator, out = _make_game("2", "easy", "2", "n", seed=4)
    game.start()
    assert "Great job! The Sudoku is solved!" in out.getvalue()
    assert board.is_solved()
    assert board.is_valid()
    assert all(generator.get_cell(r, c) == 0 for r in range(9) for c in range(9))


def test_bad_start_option_retries(tmp_path):
    path = _write_puzzle(tmp_path)
    game, _, _, out = _make_game("7", "1", str(path), "5", "n")
    game.start()
    assert out.getvalue().count("No Option Choosen try again") == 1


def test_bad_game_option_retries(tmp_path):
    path = _write_puzzle(tmp_path)
    game, _, _, out = _make_game("1", str(path), "0", "5", "n")
    game.start()
    assert "No Option Choosen try again" in out.getvalue()
    assert "Thanks For Playing . . ." in out.getvalue()


def test_missing_file_reports_failure(tmp_path):
    game, board, _, out = _make_game("1", str(tmp_path / "absent.txt"), "5", "n")
    game.start()
    assert "Board failed to load." in out.getvalue()
    assert not board.is_solved()


def test_save_writes_board(tmp_path):
    puzzle = _write_puzzle(tmp_path)
    target = tmp_path / "saved.txt"
    game, _, _, out = _make_game("1", str(puzzle), "4", str(target), "5", "n")
    game.start()
    assert "Board is saved successfully." in out.getvalue()
    assert target.read_text() == puzzle.read_text()


def test_play_again_runs_second_game(tmp_path):
    path = _write_puzzle(tmp_path)
    game, _, _, out = _make_game(
        "1", str(path), "5", "y", "1", str(path), "5", "n"
    )
    game.start()
    assert out.getvalue().count("Thanks For Playing . . .") == 2


def test_unknown_difficulty_reports_error():
    game, board, _, out = _make_game("2", "extreme", "5", "n")
    game.start()
    assert "ERROR in Generation" in out.getvalue()
    assert board.is_solved()


def test_enter_move_respects_generated_solution():
    game, board, generator, _ = _make_game(seed=12)
    generator.generate(board, "easy")
    row, col = next(
        (r, c) for r in range(9) for c in range(9) if board.get_cell(r, c) == 0
    )
    expected = generator.get_cell(row, col)
    wrong = expected % 9 + 1
    assert game.enter_move(row + 1, col + 1, wrong) is False
    assert board.get_cell(row, col) == 0
    assert game.enter_move(row + 1, col + 1, expected) is True
    assert board.get_cell(row, col) == expected


def test_enter_move_off_board_rejected():
    game, board, _, _ = _make_game()
    assert game.enter_move(0, 1, 5) is False
    assert game.enter_move(10, 1, 5) is False
    assert board.is_valid()


def test_enter_move_on_empty_board_without_solution():
    game, board, _, _ = _make_game()
    assert game.enter_move(1, 1, 5) is True
    assert board.get_cell(0, 0) == 5
    assert game.enter_move(1, 2, 5) is False