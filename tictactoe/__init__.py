"""
TicTacToe against a computer that never loses.
Game state, rules, and the minimax opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import GameState, GameStatus, IllegalMoveError, Player, Selection
from .win_checker import WinChecker
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, GameResult, best_moves, evaluate, random_best_move
