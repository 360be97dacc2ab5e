"""
Static evaluation used by the bot
---

Scores are in pawns, seen from the bot's side: its own pieces count positive, the opponent's negative.

* material: pawn 1, knight 3, bishop 3.25, rook 5, queen 9, king 1000
* positional: every piece gets a bonus for being close to the center, pawns for having advanced, and knights/bishops
  a little extra when they stand (near) the middle of the board.
"""

from src.chess.board import Board
from src.chess.moves import pawn_starting_row
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.shared_types import Color, PieceType

PIECE_VALUES: dict[PieceType, float] = {
    PieceType.PAWN: 1.0,
    PieceType.KNIGHT: 3.0,
    PieceType.BISHOP: 3.25,
    PieceType.ROOK: 5.0,
    PieceType.QUEEN: 9.0,
    PieceType.KING: 1000.0,
}

CENTER_SQUARES: frozenset[Square] = frozenset(
    {Square(3, 3), Square(3, 4), Square(4, 3), Square(4, 4)}
)

CENTER_WEIGHT = 0.1
PAWN_ADVANCE_WEIGHT = 0.1
KNIGHT_CENTER_BONUS = 0.2
BISHOP_CENTER_BONUS = 0.15


def rows_advanced(square: Square, color: Color) -> int:
    """How far a pawn has come from the edge of the board it started from"""
    return 7 - square.row if color == Color.WHITE else square.row


def positional_value(piece: Piece, square: Square) -> float:
    distance = square.distance_to_center()
    value = (7 - distance) * CENTER_WEIGHT

    if piece.type == PieceType.PAWN:
        value += rows_advanced(square, piece.color) * PAWN_ADVANCE_WEIGHT
    elif piece.type == PieceType.KNIGHT and distance < 2:
        value += KNIGHT_CENTER_BONUS
    elif piece.type == PieceType.BISHOP and distance < 3:
        value += BISHOP_CENTER_BONUS
    return value


def evaluate_board(board: Board, color: Color) -> float:
    score = 0.0
    for square, piece in board.occupied_squares():
        piece_score = PIECE_VALUES[piece.type] + positional_value(piece, square)
        score += piece_score if piece.color == color else -piece_score
    return score


# --- SINGLE MOVE SCORING (greedy bot) ---
CENTER_MOVE_BONUS = 0.3
DEVELOPMENT_BONUS = 0.5


def home_row(color: Color) -> int:
    """The back rank, one behind the pawns"""
    return pawn_starting_row(color) + (1 if color == Color.WHITE else -1)


def evaluate_move(board: Board, from_square: Square, to_square: Square) -> float:
    """
    Quick score of a single move, without looking ahead
    ---

    * value of the piece captured (if any)
    * a small bonus for moving onto one of the four center squares
    * a small bonus for developing a knight or bishop off the back rank
    """
    score = 0.0
    captured = board.piece(to_square)
    if captured is not None:
        score += PIECE_VALUES[captured.type]

    if to_square in CENTER_SQUARES:
        score += CENTER_MOVE_BONUS

    moving = board.piece(from_square)
    if (
        moving is not None
        and moving.type in (PieceType.KNIGHT, PieceType.BISHOP)
        and from_square.row == home_row(moving.color)
    ):
        score += DEVELOPMENT_BONUS
    return score
