"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, and the winner.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field

from .config import GameConfig
from .win_checker import WinChecker


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    def __str__(self) -> str:
        return self.value


class GameStatus(Enum):
    """Where a game stands."""
    AWAITING_MOVE = "awaiting_move"
    WON = "won"
    TIED = "tied"


class IllegalMoveError(ValueError):
    """Raised when a move or search is requested on a position that does not allow it."""


@dataclass(frozen=True)
class Selection:
    """
    A square paired with its display name (e.g. "Top Left").
    Only used for menus and messages.
    """
    square: int
    label: str

    @classmethod
    def for_square(cls, square: int) -> "Selection":
        return cls(square, GameConfig.SQUARE_NAMES[square])

    def __str__(self) -> str:
        return self.label


# Shared checker, it holds no state
_win_checker = WinChecker()


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The board, 9 squares indexed 0-8 row by row (None = empty)
    - The player who moves next
    - The winner, computed from the board on creation and after every move
    - Which player the computer controls, if any
    """

    board: List[Optional[Player]] = field(
        default_factory=lambda: [None] * GameConfig.NUM_SQUARES
    )

    next_player: Player = Player.X

    computer_player: Optional[Player] = None

    winner: Optional[Player] = field(default=None, init=False)

    def __post_init__(self):
        self.winner = _win_checker.check_board(self.board)

    @classmethod
    def new(
        cls,
        first_player: Optional[Player] = None,
        computer_player: Optional[Player] = None
    ) -> "GameState":
        """
        Create the initial state: an empty board.

        Args:
            first_player: Who moves first (default: GameConfig.FIRST_PLAYER).
            computer_player: Which player the computer controls, if any.
        """
        if first_player is None:
            first_player = Player(GameConfig.FIRST_PLAYER)
        return cls(next_player=first_player, computer_player=computer_player)

    def apply_move(self, square: int) -> None:
        """
        Place the next player's mark at the given square.

        Args:
            square: Square index (0-8). Must be empty.

        Raises:
            IllegalMoveError: If the square is taken or out of range,
                or the game already has a winner.
        """
        if self.winner is not None:
            raise IllegalMoveError(f"Game is already won by {self.winner}")

        if not 0 <= square < GameConfig.NUM_SQUARES:
            raise IllegalMoveError(f"Invalid square {square}. Must be 0-{GameConfig.NUM_SQUARES - 1}.")

        if self.board[square] is not None:
            raise IllegalMoveError(f"Square {square} is already occupied by {self.board[square]}")

        self.board[square] = self.next_player
        self.next_player = self.next_player.opposite()
        self.winner = _win_checker.check_board(self.board)

    def with_move(self, square: int) -> "GameState":
        """Return a new state with the move applied. This state is unchanged."""
        new_state = self.copy()
        new_state.apply_move(square)
        return new_state

    def open_squares(self) -> List[int]:
        """
        Get all empty squares on the board.

        Returns:
            Square indices in ascending order.
        """
        return [i for i, square in enumerate(self.board) if square is None]

    def open_selections(self) -> List[Selection]:
        """Open squares paired with their names, for menus."""
        return [Selection.for_square(i) for i in self.open_squares()]

    def occupied_count(self) -> int:
        return GameConfig.NUM_SQUARES - len(self.open_squares())

    def check_winner(self) -> Optional[Player]:
        return _win_checker.check_winner(self)

    def is_terminal(self) -> bool:
        """True if someone has won or the board is full."""
        return self.winner is not None or not self.open_squares()

    def status(self) -> GameStatus:
        if self.winner is not None:
            return GameStatus.WON
        if not self.open_squares():
            return GameStatus.TIED
        return GameStatus.AWAITING_MOVE

    def copy(self) -> "GameState":
        """Create an independent copy of the game state."""
        return GameState(
            board=list(self.board),
            next_player=self.next_player,
            computer_player=self.computer_player
        )

    def render(self) -> str:
        """
        Render the board as text, e.g.

             X | O | .
            ---|---|---
             . | X | .
            ---|---|---
             . | . | O
        """
        size = GameConfig.BOARD_SIZE
        rows = []
        for start in range(0, GameConfig.NUM_SQUARES, size):
            cells = [
                str(square) if square is not None else GameConfig.EMPTY_CHAR
                for square in self.board[start:start + size]
            ]
            rows.append(" " + f" {GameConfig.CELL_DIVIDER} ".join(cells) + " ")
        return f"\n{GameConfig.ROW_DIVIDER}\n".join(rows)

    def __str__(self) -> str:
        return self.render()
