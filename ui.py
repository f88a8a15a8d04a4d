"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board as clickable squares
- Game status and the computer's last move
- Mark selection (play as X or O)
"""

import random
import tkinter as tk
from tkinter import ttk
from typing import Optional

from tictactoe.game_state import Player

from main import TicTacToeGame


# Square colors
EMPTY_BG = '#16213e'
HUMAN_BG = '#065f46'
HUMAN_FG = '#10b981'
COMPUTER_BG = '#7f1d1d'
COMPUTER_FG = '#f87171'
WIN_BG = '#ffd700'

# Delay before the computer answers, so the human's move is drawn first (ms)
COMPUTER_DELAY_MS = 150


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        human_player: Player = Player.X,
        rng: Optional[random.Random] = None,
        verbose: Optional[bool] = None
    ):
        """Initialize the UI."""
        self.rng = rng
        self.verbose = verbose
        self.game = TicTacToeGame(human_player, rng=rng, verbose=verbose)

        # Id of the queued computer move, if any
        self.pending_move_id: Optional[str] = None

        # Create UI
        self._create_ui()
        self._new_game()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('Move.TLabel', font=('Segoe UI', 11), foreground='#00ff88')

        ttk.Label(main_frame, text="🎮 TicTacToe", style='Title.TLabel').pack(pady=(0, 10))

        # Board
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for square in range(9):
            cell = tk.Button(
                board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=4,
                height=2,
                bg=EMPTY_BG,
                fg='white',
                activebackground='#0f3460',
                relief='ridge',
                borderwidth=2,
                command=lambda s=square: self._on_square_clicked(s)
            )
            cell.grid(row=square // 3, column=square % 3, padx=2, pady=2)
            self.board_cells.append(cell)

        # Game status
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.computer_move_label = ttk.Label(main_frame, text="", style='Move.TLabel')
        self.computer_move_label.pack()

        # Mark selection
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        mark_frame = ttk.Frame(main_frame)
        mark_frame.pack(pady=5)

        ttk.Label(mark_frame, text="Play as: ").pack(side=tk.LEFT)
        self.mark_var = tk.StringVar(value=self.game.human_player.value)
        for player in Player:
            tk.Radiobutton(
                mark_frame,
                text=player.value,
                value=player.value,
                variable=self.mark_var,
                font=('Segoe UI', 10, 'bold'),
                bg='#1a1a2e',
                fg='white',
                selectcolor='#2d3748',
                activebackground='#1a1a2e'
            ).pack(side=tk.LEFT, padx=5)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="🔄 New Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._new_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=('Segoe UI', 11),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _new_game(self):
        """Start a new game with the selected mark."""
        self._cancel_computer_move()

        human_player = Player(self.mark_var.get())
        if human_player != self.game.human_player:
            self.game = TicTacToeGame(human_player, rng=self.rng, verbose=self.verbose)
        else:
            self.game.reset()

        self.computer_move_label.configure(text="")
        self._update_board_display()

        if not self.game.is_human_turn():
            self._schedule_computer_move()

    def _on_square_clicked(self, square: int):
        """Play the human's move on a click."""
        if not self.game.is_human_turn():
            return

        result = self.game.human_move(square)
        if not result.is_valid:
            self.status_label.configure(text=result.error_message)
            return

        self._update_board_display()

        if not self.game.is_over():
            self._schedule_computer_move()

    def _schedule_computer_move(self):
        self.status_label.configure(text="Computer is thinking...")
        self.pending_move_id = self.root.after(COMPUTER_DELAY_MS, self._computer_move)

    def _cancel_computer_move(self):
        if self.pending_move_id is not None:
            self.root.after_cancel(self.pending_move_id)
            self.pending_move_id = None

    def _computer_move(self):
        """Let the computer answer (runs on the UI thread)."""
        self.pending_move_id = None
        move = self.game.computer_move()
        if move is None:
            print("ERROR: Computer could not find a move!")
            return

        self.computer_move_label.configure(text=f"→ Computer moved to {move}")
        self._update_board_display()

    def _update_board_display(self):
        """Update the board squares and the status line."""
        board = self.game.game_state.board
        for square, cell in enumerate(self.board_cells):
            mark = board[square]
            if mark is None:
                cell.configure(text="", bg=EMPTY_BG)
            elif mark == self.game.human_player:
                cell.configure(text=mark.value, bg=HUMAN_BG, fg=HUMAN_FG)
            else:
                cell.configure(text=mark.value, bg=COMPUTER_BG, fg=COMPUTER_FG)

        if self.game.is_over():
            line = self.game.winning_line()
            if line is not None:
                for square in line:
                    self.board_cells[square].configure(bg=WIN_BG, fg='black')
            self.status_label.configure(text=self.game.result_message())
        elif self.game.is_human_turn():
            self.status_label.configure(text=f"Your turn ({self.game.human_player})")

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_computer_move()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()

