"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import random
from enum import IntEnum
from typing import Optional, List, Tuple

from .config import GameConfig
from .game_state import GameState, Player, Selection, IllegalMoveError


class GameResult(IntEnum):
    """
    Outcome of a position for one player, ordered LOSS < TIE < WIN.
    """
    LOSS = -1
    TIE = 0
    WIN = 1

    def flipped(self) -> "GameResult":
        """The same outcome seen by the other player."""
        return GameResult(-self.value)


def _minimax(state: GameState, perspective: Player, counter: List[int]) -> GameResult:
    counter[0] += 1

    if state.winner is not None:
        return GameResult.WIN if state.winner == perspective else GameResult.LOSS

    possible_moves = state.open_squares()
    if not possible_moves:
        return GameResult.TIE

    results = (
        _minimax(state.with_move(square), perspective, counter)
        for square in possible_moves
    )

    # The mover picks what is best for itself, the opponent what is worst for us
    if state.next_player == perspective:
        return max(results)
    return min(results)


def _best_moves(state: GameState, perspective: Player, counter: List[int]) -> Tuple[List[int], GameResult]:
    """Every square tied for the best result, and that result."""
    if state.is_terminal():
        raise IllegalMoveError("No moves to search, the game is already over")

    open_squares = state.open_squares()
    scores = [
        _minimax(state.with_move(square), perspective, counter)
        for square in open_squares
    ]
    best = max(scores)
    return [square for square, score in zip(open_squares, scores) if score == best], best


def evaluate(state: GameState, perspective: Player) -> GameResult:
    """
    Result `perspective` gets from this state if both sides play perfectly.

    Exhaustive search: no pruning, no depth limit.
    """
    return _minimax(state, perspective, [0])


def best_moves(state: GameState, perspective: Player) -> List[int]:
    """
    All open squares that reach the best result for `perspective`.

    Args:
        state: A position that is not over yet.
        perspective: The player to optimise for.

    Returns:
        Square indices in ascending order, never empty.

    Raises:
        IllegalMoveError: If the game is already over.
    """
    moves, _ = _best_moves(state, perspective, [0])
    return moves


def random_best_move(
    state: GameState,
    perspective: Player,
    rng: Optional[random.Random] = None
) -> int:
    """
    Pick one of the best moves at random so games don't repeat.
    Only equally good moves are ever considered.
    """
    chooser = rng if rng is not None else random
    return chooser.choice(best_moves(state, perspective))


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    When several moves are equally good it picks one at random.
    """

    def __init__(
        self,
        player: Player = Player.O,
        rng: Optional[random.Random] = None,
        verbose: Optional[bool] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
            rng: Random source for choosing between equal moves.
                Seeded from GameConfig.RANDOM_SEED if not provided.
            verbose: Print search statistics (default: GameConfig.DEBUG_MODE)
        """
        self.player = player
        self.rng = rng if rng is not None else random.Random(GameConfig.RANDOM_SEED)
        self.verbose = GameConfig.DEBUG_MODE if verbose is None else verbose

        # Keep track of how many positions the last search visited (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, game_state: GameState) -> Optional[Selection]:
        """
        Get the best move for the current position.

        Args:
            game_state: Current game state.

        Returns:
            The chosen square, or None if it is not our turn or the game is over.
        """
        self.positions_evaluated = 0

        if game_state.is_terminal():
            return None

        # Check if it's our turn
        if game_state.next_player != self.player:
            print(f"Warning: It's not {self.player}'s turn!")
            return None

        counter = [0]
        candidates, best = _best_moves(game_state, self.player, counter)
        square = self.rng.choice(candidates)
        self.positions_evaluated = counter[0]

        move = Selection.for_square(square)
        if self.verbose:
            print(
                f"AI evaluated {self.positions_evaluated} positions. "
                f"Best move: {move} (result: {best.name}, {len(candidates)} equal choices)"
            )

        return move

    def evaluate_position(self, game_state: GameState) -> GameResult:
        """How the game ends for this AI from here with perfect play."""
        return evaluate(game_state, self.player)
