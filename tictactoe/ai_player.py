"""
AI player for TicTacToe.
Uses a concurrent negamax search to choose the best move.
"""

import asyncio
import logging
import random
from typing import Optional
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState, Player, MAX_MOVES, EMPTY
from .win_checker import WinChecker


logger = logging.getLogger(__name__)


@dataclass
class Outcome:
    """A searched position and its score."""
    move: GameState
    score: int


class AIPlayer:
    """
    An AI that plays TicTacToe using negamax.

    Every legal move at every node is searched in its own task, down to
    max_depth plies, with no pruning. Among equally good moves one is
    picked at random.
    """

    def __init__(
        self,
        max_depth: int = GameConfig.MAX_DEPTH,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the AI player.

        Args:
            max_depth: Plies to search before scoring a position as 0.
            rng: Random source for tie-breaks. Seed it for repeatable play.
        """
        self.max_depth = max_depth
        self.rng = rng if rng is not None else random.Random()
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def best_move(self, game_state: GameState) -> GameState:
        """
        Get the state after the best move for the player to move.

        Returns the given state itself if there is nothing to play.
        """
        return self.search(game_state).move

    def search(self, game_state: GameState) -> Outcome:
        """Run a full search from the given position."""
        self.moves_evaluated = 0
        outcome = asyncio.run(self.evaluate(game_state, depth=0))

        logger.debug(
            "AI evaluated %d positions. Best move: %s (score: %d)",
            self.moves_evaluated, outcome.move.last_move, outcome.score
        )
        return outcome

    async def evaluate(
        self,
        game_state: GameState,
        depth: int,
        perspective: Optional[Player] = None,
        response: Optional[asyncio.Queue] = None
    ) -> Outcome:
        """
        Negamax evaluation of a position.

        Args:
            game_state: Position to evaluate. Never modified.
            depth: Plies below the root of the search.
            perspective: Player the score is for, the one about to move.
                Defaults to game_state.next_player().
            response: Parent's result queue. When given, this position and
                its score are put on it before returning.

        Returns:
            The chosen successor and this position's score. Positions that
            are won, cut off, or have no moves return themselves.
        """
        if perspective is None:
            perspective = game_state.next_player()

        self.moves_evaluated += 1
        result = Outcome(game_state, 0)

        winner = self.win_checker.check_winner(game_state)
        if winner != EMPTY:
            # Faster wins and slower losses score higher
            result.score = (MAX_MOVES + 1) - depth
            if winner != perspective:
                result.score = -result.score
            await self._publish(response, result)
            return result

        if depth == self.max_depth:
            await self._publish(response, result)
            return result

        children = game_state.expand()
        responses = asyncio.Queue(maxsize=MAX_MOVES)
        best = []

        async with asyncio.TaskGroup() as tasks:
            for child in children:
                tasks.create_task(
                    self.evaluate(child, depth + 1, perspective.opposite(), responses)
                )

            for _ in range(len(children)):
                reply = await responses.get()
                # Good for the child's mover is bad for us
                candidate = Outcome(reply.move, -reply.score)

                if not best or candidate.score == best[0].score:
                    best.append(candidate)
                elif candidate.score > best[0].score:
                    best = [candidate]

        if best:
            result.score = best[0].score
        await self._publish(response, result)

        if best:
            return self.rng.choice(best)
        return result

    async def _publish(self, response: Optional[asyncio.Queue], outcome: Outcome):
        if response is not None:
            await response.put(Outcome(outcome.move, outcome.score))
