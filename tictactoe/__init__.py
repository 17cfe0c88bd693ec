"""
TicTacToe
=========
Play tic-tac-toe against the computer from the terminal.
The computer picks its moves with a concurrent negamax search.
"""

from .config import GameConfig
from .game_state import GameState, Player, EMPTY
from .win_checker import WinChecker, GameResult
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, Outcome

__version__ = "1.0.0"
