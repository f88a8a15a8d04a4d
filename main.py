"""
Main script for TicTacToe.

This script ties together:
- Logic (game state, move validation, AI)
- The console game (board display, square menu)

Run this script to play TicTacToe against the computer!
"""

import argparse
import random
from typing import Optional, Tuple

from rich.console import Console
from rich.prompt import Prompt

from tictactoe.config import GameConfig
from tictactoe.game_state import GameState, GameStatus, Player, Selection
from tictactoe.move_validator import MoveValidator, ValidationResult
from tictactoe.win_checker import WinChecker
from tictactoe.ai_player import AIPlayer


console = Console()


class TicTacToeGame:
    """
    One game between a human and the computer.

    Game flow:
    1. X moves first (human or computer)
    2. Human picks an open square, it is validated and played
    3. Computer answers with one of its best moves
    4. Repeat until someone wins or the board is full
    """

    def __init__(
        self,
        human_player: Player = Player.X,
        rng: Optional[random.Random] = None,
        verbose: Optional[bool] = None
    ):
        """
        Set up a new game.

        Args:
            human_player: Which mark the human plays.
            rng: Random source for the computer's choice between equal moves.
            verbose: Print search statistics for every computer move.
        """
        self.human_player = human_player
        self.computer_player = human_player.opposite()

        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(self.computer_player, rng=rng, verbose=verbose)

        self.game_state = GameState.new(computer_player=self.computer_player)

    def is_human_turn(self) -> bool:
        return not self.is_over() and self.game_state.next_player == self.human_player

    def is_over(self) -> bool:
        return self.game_state.is_terminal()

    def human_move(self, square: int) -> ValidationResult:
        """
        Play the human's move if it is legal.

        Args:
            square: Square index (0-8).

        Returns:
            ValidationResult, the move is only played when valid.
        """
        result = self.validator.validate_move(self.game_state, square)
        if not result.is_valid:
            return result

        if not self.is_human_turn():
            return ValidationResult(False, "It's not your turn!")

        self.game_state.apply_move(square)
        return result

    def computer_move(self) -> Optional[Selection]:
        """Let the computer play. Returns its move, or None if it can't move."""
        move = self.ai.get_best_move(self.game_state)
        if move is None:
            return None

        self.game_state.apply_move(move.square)
        return move

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.win_checker.get_winning_line(self.game_state)

    def result_message(self) -> str:
        """Describe how the game ended, from the human's point of view."""
        status = self.game_state.status()

        if status == GameStatus.WON:
            if self.game_state.winner == self.human_player:
                return "Congratulations, you won!"
            return "You lost, better luck next time."
        if status == GameStatus.TIED:
            return "The game ended in a tie."
        return f"Waiting for {self.game_state.next_player} to move."

    def reset(self):
        """Start a new round with the same players."""
        self.game_state = GameState.new(computer_player=self.computer_player)


def ask_human_player() -> Player:
    """Ask which mark the human wants to play."""
    answer = Prompt.ask(
        "Will you play X or O?",
        choices=[p.value for p in Player],
        default=GameConfig.FIRST_PLAYER,
        console=console
    )
    return Player(answer)


def ask_human_move(game: TicTacToeGame) -> int:
    """
    Show the open squares as a numbered menu and read a choice.
    Keeps asking until the answer is a legal move.
    """
    selections = game.game_state.open_selections()

    console.print()
    for idx, selection in enumerate(selections, 1):
        console.print(f"  {idx}. {selection}")

    while True:
        answer = Prompt.ask("Where will you move?", console=console)
        square, result = game.validator.parse_choice(game.game_state, answer)
        if square is not None:
            return square
        console.print(f"[red]{result.error_message}[/red]")


def play_console(game: TicTacToeGame):
    """Main game loop for the console."""
    while not game.is_over():
        if game.is_human_turn():
            console.print()
            console.print(game.game_state.render())
            square = ask_human_move(game)
            game.human_move(square)
        else:
            move = game.computer_move()
            if move is None:
                console.print("[bold red]ERROR: Computer could not find a move![/bold red]")
                return
            console.print(f"Computer moved to [bold]{move}[/bold]")

    console.print()
    console.print(game.game_state.render())
    console.print()

    if game.game_state.winner == game.human_player:
        console.print(f"[bold green]{game.result_message()}[/bold green]")
    elif game.game_state.winner is not None:
        console.print(f"[bold red]{game.result_message()}[/bold red]")
    else:
        console.print(f"[bold yellow]{game.result_message()}[/bold yellow]")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="TicTacToe against an unbeatable computer")
    parser.add_argument(
        "--play-as",
        choices=[p.value for p in Player],
        default=None,
        help="Your mark (asked interactively if not given). X always moves first."
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=GameConfig.RANDOM_SEED,
        help="Seed for the computer's choice between equally good moves"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=GameConfig.DEBUG_MODE,
        help="Print search statistics for every computer move"
    )
    parser.add_argument(
        "--ui",
        action="store_true",
        help="Open the graphical window instead of the console game"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    rng = random.Random(args.seed)

    if args.ui:
        from ui import TicTacToeUI
        human_player = Player(args.play_as) if args.play_as else Player.X
        ui = TicTacToeUI(human_player=human_player, rng=rng, verbose=args.verbose)
        ui.run()
        return

    try:
        human_player = Player(args.play_as) if args.play_as else ask_human_player()
        game = TicTacToeGame(human_player=human_player, rng=rng, verbose=args.verbose)
        play_console(game)
    except (KeyboardInterrupt, EOFError):
        console.print("\n\nGame interrupted by user.")
    finally:
        console.print("Goodbye!")


if __name__ == "__main__":
    main()
