"""
Is a king under attack?

A square is attacked when any of the opponent's pieces has it among its pseudo-legal targets. No en passant target is
passed along: an en passant capture can never land on the king's square anyway.
"""

from src.chess.board import Board
from src.chess.moves import pseudo_legal_moves
from src.chess.square import Square
from src.core.shared_types import Color, opponent_of


def is_square_attacked(board: Board, square: Square, by_color: Color) -> bool:
    return any(
        square in pseudo_legal_moves(board, attacker_square)
        for attacker_square in board.locate_color(by_color)
    )


def is_in_check(board: Board, color: Color) -> bool:
    """
    Locate the king of the given color and check if any opposing piece can move onto it.

    Raises MissingKingError if there is no king of that color on the board.
    """
    king_square = board.find_king(color)
    return is_square_attacked(board, king_square, opponent_of(color))
