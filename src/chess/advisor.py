"""
Hints for the player to move: ways out of a check, and suggested moves otherwise.

Both are queries on top of make_move. Nothing here changes a state.
"""

from dataclasses import dataclass

from src.chess.game import GameState, make_move
from src.chess.moves import Move, pseudo_legal_moves
from src.chess.square import Square
from src.core.shared_types import PieceType, Status

# Scoring of the suggestions when not in check
CAPTURE_BONUS = 10.0
CENTER_WEIGHT = 0.5
SUGGESTION_LIMIT = 5


@dataclass(frozen=True)
class MoveHint:
    from_square: Square
    to_square: Square
    notation: str


def _accepted_moves(state: GameState) -> list[tuple[Move, GameState]]:
    """Every move of the player to move that make_move accepts (+ the state it leads to), in row-major/generation order"""
    moves: list[tuple[Move, GameState]] = []
    for from_square in state.board.locate_color(state.current_player):
        for to_square in pseudo_legal_moves(
            state.board, from_square, state.en_passant_target
        ):
            next_state = make_move(state, from_square, to_square)
            if next_state is not None:
                moves.append((next_state.last_move, next_state))
    return moves


def check_escape_moves(state: GameState) -> list[MoveHint]:
    """
    Moves for the player in check
    ----

    Keeps the accepted moves after which the resulting status is not 'check', then orders them:
    king moves first, then captures, then everything else. Python's sort is stable, so within a group the
    enumeration order is kept.

    NOTE: the status after a move describes the OPPONENT (the next player). So this filter drops moves that give
    check back, while make_move already guarantees the mover's own king is safe.
    """
    escapes: list[Move] = []
    for move, next_state in _accepted_moves(state):
        if next_state.status != Status.CHECK:
            escapes.append(move)

    escapes.sort(key=lambda move: (move.piece.type != PieceType.KING, not move.is_capture))
    return [
        MoveHint(move.from_square, move.to_square, move.notation) for move in escapes
    ]


def suggested_moves(state: GameState, limit: int = SUGGESTION_LIMIT) -> list[MoveHint]:
    """
    A handful of moves worth looking at.

    * In check: the first escape moves.
    * Otherwise: captures score a fixed bonus, and moves towards the center score higher. Best first.
    """
    if state.status == Status.CHECK:
        return check_escape_moves(state)[:limit]

    scored = [
        (
            (CAPTURE_BONUS if move.is_capture else 0.0)
            + (7 - move.to_square.distance_to_center()) * CENTER_WEIGHT,
            move,
        )
        for move, _ in _accepted_moves(state)
    ]
    scored.sort(key=lambda item: item[0], reverse=True)
    return [
        MoveHint(move.from_square, move.to_square, move.notation)
        for _, move in scored[:limit]
    ]
