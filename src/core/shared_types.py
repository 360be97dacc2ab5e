"""
Type definitions used across layers
"""

from enum import StrEnum


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


class Status(StrEnum):
    PLAYING = "playing"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    DRAW = "draw"


class Difficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class GameMode(StrEnum):
    HUMAN_VS_HUMAN = "human-vs-human"
    HUMAN_VS_BOT = "human-vs-bot"


# Once one of these is reached, no more moves get accepted
FINISHED_STATUSES: frozenset[Status] = frozenset(
    {Status.CHECKMATE, Status.STALEMATE, Status.DRAW}
)


def opponent_of(color: Color) -> Color:
    return Color.WHITE if color == Color.BLACK else Color.BLACK
