"""Shared helpers for the TicTacToe tests."""

import numpy as np
import pytest

from tictactoe.game_state import GameState, Player, EMPTY


MARKERS = {"X": Player.X, "O": Player.O, ".": EMPTY}


def make_state(layout: str, current: Player) -> GameState:
    """Build a state from a layout like "XX. .O. ..O" (spaces ignored)."""
    cells = [MARKERS[c] for c in layout.replace(" ", "")]
    assert len(cells) == 9
    return GameState(board=np.array(cells, dtype=np.int8), current=current)


@pytest.fixture
def new_game() -> GameState:
    return GameState.new()
