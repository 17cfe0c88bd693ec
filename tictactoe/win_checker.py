"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a stalemate.
"""

from typing import Optional, List, Tuple
from dataclasses import dataclass

import numpy as np

from .game_state import GameState, Player, BOARD_SIZE, EMPTY


_GRID = np.arange(BOARD_SIZE * BOARD_SIZE).reshape(BOARD_SIZE, BOARD_SIZE)


@dataclass
class GameResult:
    """Outcome of a game-over check."""
    winner: Optional[Player] = None
    is_stalemate: bool = False

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None or self.is_stalemate


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 markers of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # Line families as cell indexes: every row, every column,
    # and one line for each diagonal
    LINE_FAMILIES = [
        [tuple(line) for line in _GRID.tolist()],
        [tuple(line) for line in _GRID.T.tolist()],
        [tuple(_GRID.diagonal().tolist())],
        [tuple(np.fliplr(_GRID).diagonal().tolist())],
    ]

    WINNING_LINES = [line for family in LINE_FAMILIES for line in family]

    def check_winner(self, game_state: GameState) -> int:
        """
        Check if there's a winner.

        Args:
            game_state: The game state.

        Returns:
            The winning Player, or EMPTY if no winner yet.
        """
        board = game_state.board.tolist()
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner != EMPTY:
                return winner

        return EMPTY

    def _check_line(self, board: List[int], line: Tuple[int, ...]) -> int:
        """
        Walk one line in order.

        An empty cell ends the line with no winner, whatever was counted
        before it.
        """
        scores = [0, 0]
        for index in line:
            marker = board[index]
            if marker == EMPTY:
                return EMPTY
            scores[marker] += 1
            if scores[marker] == BOARD_SIZE:
                return Player(marker)

        return EMPTY

    def get_winning_line(self, game_state: GameState) -> Optional[Tuple[int, ...]]:
        """
        Get the winning line if there is one.

        Returns:
            The cell indexes of the line, or None.
        """
        board = game_state.board.tolist()
        for line in self.WINNING_LINES:
            if self._check_line(board, line) != EMPTY:
                return line
        return None

    def check_stalemate(self, game_state: GameState) -> bool:
        """
        Check if the game is a stalemate.

        A stalemate occurs when there is no winner AND either:
        - All cells are filled
        - One cell is left and filling it with the forced move
          still would not win (declared before that move is played)
        """
        if self.check_winner(game_state) != EMPTY:
            return False

        remaining = game_state.remaining_cells()
        if len(remaining) == 0:
            return True

        if len(remaining) == 1:
            last = game_state.expand()[0]
            return self.check_winner(last) == EMPTY

        return False

    def check_game_over(self, game_state: GameState) -> GameResult:
        """
        Check whether the game has ended.

        Returns:
            GameResult with the winner or the stalemate flag set.
        """
        winner = self.check_winner(game_state)
        if winner != EMPTY:
            return GameResult(winner=Player(winner))

        return GameResult(is_stalemate=self.check_stalemate(game_state))
