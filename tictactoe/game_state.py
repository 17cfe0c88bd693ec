"""
Game state management for TicTacToe.
Tracks the board, the player glyphs, and who made the last move.
"""

from enum import IntEnum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig


BOARD_SIZE = GameConfig.BOARD_SIZE
MAX_MOVES = GameConfig.MAX_MOVES
EMPTY = GameConfig.EMPTY_CELL


class Player(IntEnum):
    """The two players in the game. The value indexes the glyph table."""
    X = 0
    O = 1

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player(1 - self)


def _empty_board() -> np.ndarray:
    return np.full(MAX_MOVES, EMPTY, dtype=np.int8)


@dataclass(eq=False)
class GameState:
    """
    A snapshot of a TicTacToe game.

    Tracks:
    - The 9 cells of the board, row by row (EMPTY or a Player value)
    - The display glyph of each player
    - The player who made the most recent move

    Moves are made with play() or expand(), which return new states and
    leave this one untouched, so one state can be searched from many
    branches at once.
    """

    board: np.ndarray = field(default_factory=_empty_board)
    players: Tuple[str, str] = GameConfig.PLAYER_GLYPHS

    # Player who made the last move. A fresh game starts at O so that
    # next_player() for the opening move is X.
    current: Player = Player.O

    # Cell index of the move that produced this state
    last_move: Optional[int] = None

    @classmethod
    def new(cls, players: Tuple[str, str] = GameConfig.PLAYER_GLYPHS) -> "GameState":
        """Create a fresh game with every cell empty."""
        return cls(board=_empty_board(), players=tuple(players), current=Player.O)

    def place(self, row: int, col: int, marker: int):
        """
        Write a marker into a cell.

        No bounds or occupancy checks: callers must only place on a cell
        they know is empty.
        """
        self.board[self.index(row, col)] = marker

    def at(self, row: int, col: int) -> int:
        """Get the marker at (row, col)."""
        return int(self.board[self.index(row, col)])

    @staticmethod
    def cell(index: int) -> Tuple[int, int]:
        """Convert a cell index (0-8) to (row, col)."""
        return divmod(index, BOARD_SIZE)

    @staticmethod
    def index(row: int, col: int) -> int:
        """Convert (row, col) to a cell index (0-8)."""
        return row * BOARD_SIZE + col

    def next_player(self) -> Player:
        """The player who moves after current."""
        return Player(self.current).opposite()

    def remaining_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Cell indexes in ascending order.
        """
        return np.flatnonzero(self.board == EMPTY).tolist()

    def cells(self) -> Tuple[int, ...]:
        """The board as a plain tuple of markers."""
        return tuple(self.board.tolist())

    def clone(self) -> "GameState":
        """Create an independent copy of the game state."""
        return GameState(
            board=self.board.copy(),
            players=self.players,
            current=self.current,
            last_move=self.last_move,
        )

    def play(self, index: int) -> "GameState":
        """
        Make the next player's move at a cell.

        Args:
            index: Cell index (0-8). Must be empty.

        Returns:
            A new state with the move applied. This state is not changed.
        """
        row, col = self.cell(index)
        new_state = self.clone()
        new_state.current = self.next_player()
        new_state.place(row, col, new_state.current)
        new_state.last_move = index
        return new_state

    def expand(self) -> List["GameState"]:
        """Every state reachable with one move, in ascending cell order."""
        return [self.play(index) for index in self.remaining_cells()]

    def glyph(self, marker: int) -> str:
        """Display glyph for a player marker."""
        return self.players[marker]

    def render(self) -> str:
        """
        Render the board as text.

        Empty cells show their index so a human knows what to type.
        """
        lines = [""]
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                played = self.at(row, col)
                if played != EMPTY:
                    cells.append(self.glyph(played))
                else:
                    cells.append(str(self.index(row, col)))
            lines.append(" " + " | ".join(cells))
            if row < BOARD_SIZE - 1:
                lines.append("---+" * (BOARD_SIZE - 1) + "---")
        lines.append("")
        return "\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print(self.render())
