"""The computer opponent. Plays one color at a fixed difficulty."""

import logging
import random
from typing import Optional

from src.bot.strategies import SEARCH_DEPTH, STRATEGIES, SearchContext
from src.chess.game import GameState
from src.chess.legality import CandidateMove, legal_moves
from src.core.shared_types import Color, Difficulty

logger = logging.getLogger(__name__)


class ChessBot:
    """
    Chooses a move for its color. Making the move is up to the caller (through make_move, like any other move).

    ---
    rng: inject a seeded random.Random to make easy/medium reproducible (hard is deterministic anyway)
    """

    def __init__(
        self,
        difficulty: Difficulty,
        color: Color,
        rng: Optional[random.Random] = None,
        depth: int = SEARCH_DEPTH,
    ) -> None:
        self.difficulty = difficulty
        self.color = color
        self.context = SearchContext(color=color, rng=rng or random.Random(), depth=depth)

    def choose_move(self, state: GameState) -> Optional[CandidateMove]:
        """None if the bot has no legal move (the game is over)"""
        moves = legal_moves(state.board, self.color)
        if not moves:
            logger.debug("%s bot has no legal moves", self.color)
            return None

        strategy = STRATEGIES[self.difficulty]
        move = strategy(state.board, moves, self.context)
        logger.debug(
            "%s bot (%s) picked %s%s out of %d moves",
            self.color,
            self.difficulty,
            move.from_square.to_algebraic(),
            move.to_square.to_algebraic(),
            len(moves),
        )
        return move
