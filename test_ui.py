"""
Tests for the tkinter window's game flow.
The window is never opened: the Tk root and widgets are replaced by fakes.
"""

import random

import pytest

pytest.importorskip("tkinter")

import main
import ui
from main import TicTacToeGame
from tictactoe.game_state import Player
from ui import TicTacToeUI


class FakeRoot:
    """Keeps scheduled callbacks instead of running an event loop."""

    def __init__(self):
        self.scheduled = {}
        self.calls = 0
        self.closed = False

    def after(self, ms, callback):
        self.calls += 1
        after_id = f"after#{self.calls}"
        self.scheduled[after_id] = callback
        return after_id

    def after_cancel(self, after_id):
        del self.scheduled[after_id]

    def quit(self):
        self.closed = True

    def destroy(self):
        pass


class FakeWidget:
    def __init__(self):
        self.options = {}

    def configure(self, **kwargs):
        self.options.update(kwargs)


class FakeVar:
    def __init__(self, value):
        self.value = value

    def get(self):
        return self.value


@pytest.fixture
def window():
    """A TicTacToeUI wired to fakes, human plays X."""
    ui = TicTacToeUI.__new__(TicTacToeUI)
    ui.rng = random.Random(0)
    ui.verbose = False
    ui.game = TicTacToeGame(Player.X, rng=ui.rng, verbose=False)
    ui.pending_move_id = None
    ui.root = FakeRoot()
    ui.board_cells = [FakeWidget() for _ in range(9)]
    ui.status_label = FakeWidget()
    ui.computer_move_label = FakeWidget()
    ui.mark_var = FakeVar("X")
    return ui


def test_click_schedules_computer_reply(window):
    window._on_square_clicked(4)

    assert window.pending_move_id in window.root.scheduled
    assert window.status_label.options["text"] == "Computer is thinking..."


def test_scheduled_reply_plays_and_clears_id(window):
    window._on_square_clicked(4)

    window.root.scheduled[window.pending_move_id]()

    assert window.pending_move_id is None
    assert window.game.game_state.occupied_count() == 2
    assert window.game.is_human_turn()
    assert window.computer_move_label.options["text"].startswith("→ Computer moved to")


def test_new_game_cancels_pending_reply(window):
    window._on_square_clicked(4)

    window._new_game()

    assert window.root.scheduled == {}
    assert window.pending_move_id is None
    assert window.game.game_state.board == [None] * 9
    assert window.game.is_human_turn()


def test_new_game_as_o_replaces_pending_reply(window):
    window._on_square_clicked(4)
    stale = window.pending_move_id
    window.mark_var.value = "O"

    window._new_game()

    # Only the new game's opening move is queued
    assert stale not in window.root.scheduled
    assert list(window.root.scheduled) == [window.pending_move_id]
    assert window.game.human_player == Player.O
    assert window.game.game_state.board == [None] * 9


def test_quit_cancels_pending_reply(window, capsys):
    window._on_square_clicked(4)

    window._quit()

    assert window.root.scheduled == {}
    assert window.root.closed
    assert "Quitting..." in capsys.readouterr().out


def test_window_is_launched_from_main(monkeypatch):
    launched = []

    class RecordingUI:
        def __init__(self, human_player, rng, verbose):
            launched.append((human_player, verbose))

        def run(self):
            launched.append("run")

    monkeypatch.setattr(ui, "TicTacToeUI", RecordingUI)

    main.main(["--ui", "--play-as", "O", "--seed", "1"])

    assert launched == [(Player.O, False), "run"]
    assert not hasattr(ui, "main")
