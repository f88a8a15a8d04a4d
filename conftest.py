"""
Shared fixtures for the TicTacToe tests.
"""

import pytest

from tictactoe.game_state import GameState, Player


@pytest.fixture
def state_from():
    """Build a state from 9 characters like 'XO.X.....' (row by row, '.' = empty)."""
    def build(layout: str, next_player: Player) -> GameState:
        board = [None if ch == "." else Player(ch) for ch in layout]
        return GameState(board=board, next_player=next_player)
    return build
