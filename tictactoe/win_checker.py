"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from .game_state import GameState, Player


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, as square indices
    WINNING_LINES: List[Tuple[int, int, int]] = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    def check_winner(self, game_state: "GameState") -> Optional["Player"]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Player, or None if no winner yet.
        """
        return self.check_board(game_state.board)

    def check_board(self, board: Sequence[Optional["Player"]]) -> Optional["Player"]:
        """Check a raw board. Lines are scanned rows, columns, then diagonals."""
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(
        self,
        board: Sequence[Optional["Player"]],
        line: Tuple[int, int, int]
    ) -> Optional["Player"]:
        """
        Check if a single line has a winner.

        Args:
            board: The game board.
            line: The three square indices to check.

        Returns:
            The winning Player if all 3 hold the same mark, None otherwise.
        """
        a, b, c = (board[i] for i in line)

        # Three empty squares are equal too, they must not count
        if a is None:
            return None

        if a == b == c:
            return a

        return None

    def check_draw(self, game_state: "GameState") -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all squares are filled AND there is no winner.

        Args:
            game_state: The current game state.

        Returns:
            True if the game is a draw.
        """
        if self.check_winner(game_state) is not None:
            return False

        return len(game_state.open_squares()) == 0

    def get_winning_line(self, game_state: "GameState") -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            game_state: The game state.

        Returns:
            The winning line as three square indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(game_state.board, line) is not None:
                return line
        return None
