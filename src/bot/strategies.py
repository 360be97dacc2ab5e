"""
Move selection strategies of the bot, one per difficulty.

Key idea: same strategy pattern as the movement rules. STRATEGIES maps a Difficulty to the function choosing a move.
Every strategy receives the legal moves (computed once by the bot through the shared legality module) and must
return one of them.
"""

import math
import random
from dataclasses import dataclass, field
from typing import Callable, Optional

from src.bot.evaluate import evaluate_board, evaluate_move
from src.chess.board import Board
from src.chess.legality import CandidateMove, legal_moves
from src.core.shared_types import Color, Difficulty, opponent_of

SEARCH_DEPTH = 3
GREEDY_TOP_N = 3


@dataclass
class SearchContext:
    """What a strategy may use besides the board: who it plays for, a source of randomness, how deep to search"""

    color: Color
    rng: random.Random = field(default_factory=random.Random)
    depth: int = SEARCH_DEPTH


@dataclass(frozen=True)
class SearchResult:
    move: Optional[CandidateMove]
    score: float
    nodes: int = 0


# --- EASY ---
def choose_random_move(
    board: Board, moves: list[CandidateMove], context: SearchContext
) -> CandidateMove:
    """Any legal move, each equally likely"""
    return context.rng.choice(moves)


# --- MEDIUM ---
def choose_greedy_move(
    board: Board, moves: list[CandidateMove], context: SearchContext
) -> CandidateMove:
    """
    Score every move on its own (see `evaluate_move()`) and pick one of the best few at random.
    The randomness is on purpose: it keeps this level from always playing the same game.
    """
    scored = sorted(
        moves,
        key=lambda move: evaluate_move(board, move.from_square, move.to_square),
        reverse=True,
    )
    return context.rng.choice(scored[:GREEDY_TOP_N])


# --- HARD ---
class _NodeCounter:
    def __init__(self) -> None:
        self.nodes = 0


def minimax(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    bot_color: Color,
    prune: bool = True,
    counter: Optional[_NodeCounter] = None,
) -> float:
    """
    Minimax with alpha-beta pruning
    ----

    * maximizing layers: the bot is to move. Minimizing layers: its opponent.
    * leaves (depth 0) are scored by `evaluate_board()` from the bot's point of view.
    * a side without legal moves scores -inf (bot) / +inf (opponent).
      NOTE: this does not tell stalemate (a draw) apart from checkmate.
    * as soon as beta <= alpha the remaining moves of the node are skipped (unless prune is False).
    """
    if counter is not None:
        counter.nodes += 1

    if depth == 0:
        return evaluate_board(board, bot_color)

    color_to_move = bot_color if maximizing else opponent_of(bot_color)
    moves = legal_moves(board, color_to_move)
    if not moves:
        return -math.inf if maximizing else math.inf

    if maximizing:
        max_eval = -math.inf
        for move in moves:
            child = board.move_piece(move.from_square, move.to_square)
            evaluation = minimax(
                child, depth - 1, alpha, beta, False, bot_color, prune, counter
            )
            max_eval = max(max_eval, evaluation)
            alpha = max(alpha, evaluation)
            if prune and beta <= alpha:
                break
        return max_eval

    min_eval = math.inf
    for move in moves:
        child = board.move_piece(move.from_square, move.to_square)
        evaluation = minimax(
            child, depth - 1, alpha, beta, True, bot_color, prune, counter
        )
        min_eval = min(min_eval, evaluation)
        beta = min(beta, evaluation)
        if prune and beta <= alpha:
            break
    return min_eval


def search(
    board: Board,
    bot_color: Color,
    depth: int = SEARCH_DEPTH,
    prune: bool = True,
    moves: Optional[list[CandidateMove]] = None,
) -> SearchResult:
    """
    Root of the search: try every legal move of the bot, answer with the opponent, and so on until `depth` plies
    have been played, then evaluate.

    Every root move is searched with a full (-inf, inf) window, so its score is exact and the result is the same
    with or without pruning. Ties keep the first move found (row-major scan, then generation order).
    """
    if moves is None:
        moves = legal_moves(board, bot_color)
    if not moves:
        return SearchResult(move=None, score=-math.inf)

    counter = _NodeCounter()
    best_move = moves[0]
    best_score = -math.inf
    for move in moves:
        child = board.move_piece(move.from_square, move.to_square)
        score = minimax(
            child, depth - 1, -math.inf, math.inf, False, bot_color, prune, counter
        )
        if score > best_score:
            best_score = score
            best_move = move
    return SearchResult(move=best_move, score=best_score, nodes=counter.nodes)


def choose_minimax_move(
    board: Board, moves: list[CandidateMove], context: SearchContext
) -> CandidateMove:
    result = search(board, context.color, depth=context.depth, moves=moves)
    # for the type checker: moves is never empty here
    assert result.move is not None
    return result.move


# -- STRATEGY PATTERN: ONE STRATEGY PER DIFFICULTY ---
StrategyFn = Callable[[Board, list[CandidateMove], SearchContext], CandidateMove]
STRATEGIES: dict[Difficulty, StrategyFn] = {
    Difficulty.EASY: choose_random_move,
    Difficulty.MEDIUM: choose_greedy_move,
    Difficulty.HARD: choose_minimax_move,
}
