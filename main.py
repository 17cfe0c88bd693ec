"""
Console driver for TicTacToe.

This script ties together:
- Game state (board, turns, display)
- Move validation for typed input
- The AI player

Run this script to play TicTacToe against the computer!
"""

import logging
import random
import sys
from typing import Iterable, Optional

from tictactoe.config import GameConfig
from tictactoe.game_state import GameState, Player
from tictactoe.move_validator import MoveValidator
from tictactoe.win_checker import WinChecker
from tictactoe.ai_player import AIPlayer


logger = logging.getLogger(__name__)


class TicTacToeConsole:
    """
    Main controller for a game in the terminal.

    Game flow:
    1. Human types a cell number and hits return
    2. Move is validated and played, board is shown
    3. Computer calculates and plays its best response
    4. Repeat until someone wins or it's a stalemate
    """

    def __init__(
        self,
        human_player: Player = Player.X,
        ai: Optional[AIPlayer] = None,
        players=GameConfig.PLAYER_GLYPHS
    ):
        """
        Initialize the game.

        Args:
            human_player: Which player the human controls. X moves first.
            ai: The computer opponent.
            players: Display glyphs for X and O.
        """
        self.human_player = human_player
        self.ai = ai if ai is not None else AIPlayer()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.game_state = GameState.new(players)

    def start(self):
        """Announce sides and, if the computer goes first, make its opening move."""
        glyph = self.game_state.glyph(self.human_player)
        print(f"You are playing {glyph}. Enter a # and hit return to move.")

        if self.human_player == Player.O:
            self.game_state = self.ai.best_move(self.game_state)
        self.game_state.print_board()

    def play(self, lines: Iterable[str]) -> bool:
        """
        Run the game loop over lines of input.

        Returns:
            True if the game finished, False if input ran out first.
        """
        self.start()

        for line in lines:
            result = self.validator.validate_move(self.game_state, line)
            if not result.is_valid:
                logger.debug("Ignoring input: %s", result.error_message)
                continue

            self.game_state = self.game_state.play(result.index)
            self.game_state.print_board()
            if self._check_game_over():
                return True

            self._computer_move()
            if self._check_game_over():
                return True

        return False

    def _computer_move(self):
        """Let the AI answer the human's move."""
        self.game_state = self.ai.best_move(self.game_state)
        self.game_state.print_board()

    def _check_game_over(self) -> bool:
        """Print the result if the game has ended."""
        result = self.win_checker.check_game_over(self.game_state)

        if result.winner is not None:
            print(self.game_state.glyph(result.winner), "wins!")
        elif result.is_stalemate:
            print("Stalemate!")

        return result.is_game_over


def choose_human_player(play_x: bool, play_o: bool, rng: random.Random) -> Player:
    """Pick the human's side from the flags; a coin flip if neither is set."""
    if not play_x and (play_o or rng.randrange(2) == 0):
        return Player.O
    return Player.X


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "-x",
        action="store_true",
        help="Player is X; player goes first"
    )
    parser.add_argument(
        "-o",
        action="store_true",
        help="Player is O; computer goes first"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random choices"
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=GameConfig.MAX_DEPTH,
        help=f"Search depth of the computer (default: {GameConfig.MAX_DEPTH})"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=GameConfig.LOG_FORMAT
    )

    rng = random.Random(args.seed)
    human_player = choose_human_player(args.x, args.o, rng)

    game = TicTacToeConsole(
        human_player=human_player,
        ai=AIPlayer(max_depth=args.depth, rng=rng)
    )

    try:
        game.play(sys.stdin)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
