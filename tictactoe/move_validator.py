"""
Move validator for TicTacToe.
Checks human choices before they are played.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Can only place on empty squares
    2. Square must be on the board (0-8)
    3. Game must not be over
    """

    def validate_move(self, game_state: GameState, square: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            square: Square to play (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if game_state.is_terminal():
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if square is in valid range
        if not 0 <= square < GameConfig.NUM_SQUARES:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid square {square}. Must be 0-{GameConfig.NUM_SQUARES - 1}."
            )

        # Check if square is empty
        if game_state.board[square] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"{GameConfig.SQUARE_NAMES[square]} is already taken by {game_state.board[square]}"
            )

        return ValidationResult(is_valid=True)

    def parse_choice(self, game_state: GameState, text: str) -> Tuple[Optional[int], ValidationResult]:
        """
        Turn a menu answer into a square.

        Accepts the 1-based number shown next to an open square,
        or a square name such as "top left" (any case).

        Args:
            game_state: Current game state.
            text: What the user typed.

        Returns:
            (square, result). square is None when the answer is not valid.
        """
        choice = text.strip()
        if not choice:
            return None, ValidationResult(False, "Please choose a square.")

        open_squares = self.get_valid_moves(game_state)

        if choice.isdigit():
            number = int(choice)
            if not 1 <= number <= len(open_squares):
                return None, ValidationResult(
                    False, f"Please type a number 1..{len(open_squares)}."
                )
            square = open_squares[number - 1]
        else:
            names = [name.lower() for name in GameConfig.SQUARE_NAMES]
            if choice.lower() not in names:
                return None, ValidationResult(False, f"Unknown square '{choice}'.")
            square = names.index(choice.lower())

        result = self.validate_move(game_state, square)
        if not result.is_valid:
            return None, result
        return square, result

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of open square indices, empty once the game is over.
        """
        if game_state.is_terminal():
            return []

        return game_state.open_squares()
