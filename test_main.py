"""
Tests for the console driver.
"""

import io
import random

import pytest

from main import TicTacToeConsole, choose_human_player, main
from tictactoe.game_state import Player


class FirstCellAI:
    """Stand-in opponent that always plays the lowest empty cell."""

    def __init__(self):
        self.calls = 0

    def best_move(self, game_state):
        self.calls += 1
        return game_state.play(game_state.remaining_cells()[0])


@pytest.mark.parametrize("play_x, play_o, expected", [
    (True, False, Player.X),
    (False, True, Player.O),
    (True, True, Player.X),
])
def test_choose_human_player_from_flags(play_x, play_o, expected):
    assert choose_human_player(play_x, play_o, random.Random(0)) == expected


def test_choose_human_player_coin_flip():
    coin = random.Random(11).randrange(2)
    expected = Player.O if coin == 0 else Player.X
    assert choose_human_player(False, False, random.Random(11)) == expected


def test_human_wins(capsys):
    ai = FirstCellAI()
    game = TicTacToeConsole(human_player=Player.X, ai=ai)

    # O answers at 1 and then 2; "1" is taken and "abc" is not a cell
    finished = game.play(["0", "1", "abc", "3", "6", "8"])
    out = capsys.readouterr().out

    assert finished
    assert "You are playing X" in out
    assert "X wins!" in out
    assert ai.calls == 2
    assert game.game_state.cells()[6] == Player.X
    assert game.game_state.cells()[8] != Player.X


def test_computer_moves_first(capsys):
    ai = FirstCellAI()
    game = TicTacToeConsole(human_player=Player.O, ai=ai)

    finished = game.play([])
    out = capsys.readouterr().out

    assert not finished
    assert "You are playing O" in out
    assert ai.calls == 1
    assert game.game_state.cells()[0] == Player.X
    assert game.game_state.current == Player.X


def test_computer_wins(capsys):
    game = TicTacToeConsole(human_player=Player.O, ai=FirstCellAI())

    # X takes 0, 1, 2 along the top row
    assert game.play(["4", "5"])
    assert "X wins!" in capsys.readouterr().out


def test_stalemate_declared_before_last_move(capsys):
    game = TicTacToeConsole(human_player=Player.X, ai=FirstCellAI())

    # X: 4, 2, 3, 7  O: 0, 1, 5, 6
    assert game.play(["4", "2", "3", "7"])
    out = capsys.readouterr().out

    assert "Stalemate!" in out
    assert game.game_state.remaining_cells() == [8]


def test_seeded_ai_game(capsys):
    from tictactoe.ai_player import AIPlayer

    game = TicTacToeConsole(human_player=Player.X, ai=AIPlayer(rng=random.Random(3)))
    game.play(["4"])

    assert game.game_state.cells()[4] == Player.X
    assert game.game_state.current == Player.O
    assert len(game.game_state.remaining_cells()) == 7


def test_main_runs_a_short_game(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\nnope\n"))

    assert main(["-x", "--seed", "1", "--depth", "1"]) == 0
    out = capsys.readouterr().out
    assert "You are playing X" in out
    assert " 3 | X | 5" in out
