"""
Tests for the TicTacToe win checker.
"""

import pytest

from tictactoe.game_state import GameState, Player
from tictactoe.win_checker import WinChecker


def board_from(layout: str):
    return [None if ch == "." else Player(ch) for ch in layout]


@pytest.fixture
def checker():
    return WinChecker()


def test_eight_lines(checker):
    assert len(checker.WINNING_LINES) == 8
    assert len(set(checker.WINNING_LINES)) == 8


@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
@pytest.mark.parametrize("player", list(Player))
def test_every_line_wins(checker, line, player):
    board = [None] * 9
    for square in line:
        board[square] = player

    assert checker.check_board(board) == player


def test_empty_board_has_no_winner(checker):
    # Three empty squares in a row must not count as a line
    assert checker.check_board([None] * 9) is None
    assert checker.check_winner(GameState.new()) is None


def test_mixed_line_is_not_a_win(checker):
    assert checker.check_board(board_from("XXO......")) is None
    assert checker.check_board(board_from("XO.XO.O..")) is None


def test_column_win(checker):
    assert checker.check_board(board_from("OX.OX..X.")) == Player.X


def test_diagonal_win(checker):
    assert checker.check_board(board_from("..OXOXO..")) == Player.O


def test_rows_scanned_before_columns(checker):
    game = GameState(board=board_from("XXXXOOXOO"))

    assert checker.get_winning_line(game) == (0, 1, 2)


def test_winning_line(checker):
    game = GameState(board=board_from("O.X.OX..O"))

    assert checker.get_winning_line(game) == (0, 4, 8)


def test_no_winning_line(checker):
    assert checker.get_winning_line(GameState.new()) is None


def test_draw(checker):
    game = GameState(board=board_from("XOXXOOOXX"))

    assert checker.check_winner(game) is None
    assert checker.check_draw(game)


def test_not_a_draw_while_squares_open(checker):
    assert not checker.check_draw(GameState(board=board_from("XOXXOO...")))


def test_full_board_with_winner_is_not_a_draw(checker):
    game = GameState(board=board_from("XXXOOXXOO"))

    assert checker.check_winner(game) == Player.X
    assert not checker.check_draw(game)
