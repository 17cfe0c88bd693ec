"""
Move validator for TicTacToe.
Checks human input before it is played.
"""

from typing import Optional, List
from dataclasses import dataclass

from .game_state import GameState, MAX_MOVES, EMPTY
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    index: Optional[int] = None


class MoveValidator:
    """
    Validates TicTacToe moves typed by a human.

    Rules:
    1. Input must be a cell number
    2. Cell number must be on the board (0-8)
    3. Can only place on empty cells
    4. Game must not be over
    """

    def __init__(self):
        self.win_checker = WinChecker()

    def validate_move(self, game_state: GameState, text: str) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            text: One line of input, e.g. "4".

        Returns:
            ValidationResult with is_valid, error_message and the cell index.
        """
        try:
            index = int(text.strip())
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=f"Not a cell number: {text.strip()!r}"
            )

        if self.win_checker.check_game_over(game_state).is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not 0 <= index < MAX_MOVES:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{MAX_MOVES - 1}."
            )

        row, col = game_state.cell(index)
        if game_state.at(row, col) != EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already taken by {game_state.glyph(game_state.at(row, col))}"
            )

        return ValidationResult(is_valid=True, index=index)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all cells the next player may play.

        Returns:
            Cell indexes, or an empty list once the game is over.
        """
        if self.win_checker.check_game_over(game_state).is_game_over:
            return []
        return game_state.remaining_cells()
