"""
The single legality filter
---

A pseudo-legal move is legal when, after making it on a copy of the board, the mover's own king is not attacked.
That one test covers pins, blocking a check, moving the king out of check, etc.

Both the game (make_move / status) and the bot enumerate moves through this module.
"""

from dataclasses import dataclass
from typing import Optional

from src.chess.attacks import is_in_check
from src.chess.board import Board
from src.chess.moves import pseudo_legal_moves
from src.chess.square import Square
from src.core.shared_types import Color


@dataclass(frozen=True)
class CandidateMove:
    """A (from, to) pair known to be legal on the board it was generated for"""

    from_square: Square
    to_square: Square


def trial_board(board: Board, from_square: Square, to_square: Square) -> Optional[Board]:
    """
    Make the move on a copy of the board.
    Returns None if the square is empty, the piece stays where it is, or the move leaves the mover's king attacked.
    """
    piece = board.piece(from_square)
    if piece is None or from_square == to_square:
        return None

    new_board = board.move_piece(from_square, to_square)
    if is_in_check(new_board, piece.color):
        return None
    return new_board


def is_legal(board: Board, from_square: Square, to_square: Square) -> bool:
    return trial_board(board, from_square, to_square) is not None


def legal_targets(
    board: Board, from_square: Square, en_passant_target: Optional[Square] = None
) -> list[Square]:
    """Pseudo-legal targets of the piece on from_square that survive the legality filter"""
    return [
        to_square
        for to_square in pseudo_legal_moves(board, from_square, en_passant_target)
        if is_legal(board, from_square, to_square)
    ]


def legal_moves(
    board: Board, color: Color, en_passant_target: Optional[Square] = None
) -> list[CandidateMove]:
    """
    All legal moves for a color.

    Order: row-major scan of the board, then the generation order of each piece's movement rule.
    """
    return [
        CandidateMove(from_square, to_square)
        for from_square in board.locate_color(color)
        for to_square in legal_targets(board, from_square, en_passant_target)
    ]


def has_legal_move(board: Board, color: Color) -> bool:
    """Stops at the first legal move found"""
    return any(
        is_legal(board, from_square, to_square)
        for from_square in board.locate_color(color)
        for to_square in pseudo_legal_moves(board, from_square)
    )
