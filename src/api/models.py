"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.chess.square import FILES, RANKS
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Difficulty, GameMode, Status


def _is_algebraic_notation(value: str) -> bool:
    return len(value) == 2 and value[0] in FILES and value[1] in RANKS


# --- REQUEST MODELS ---
class GameConfig(BaseModel):
    """How a session is played. The defaults are what a new player gets."""

    mode: GameMode = GameMode.HUMAN_VS_BOT
    difficulty: Difficulty = Difficulty.MEDIUM
    player_color: Color = Color.WHITE

    @property
    def bot_color(self) -> Optional[Color]:
        """The bot plays the other color. No bot when two humans play."""
        if self.mode != GameMode.HUMAN_VS_BOT:
            return None
        return Color.BLACK if self.player_color == Color.WHITE else Color.WHITE


class CreateSessionRequest(BaseModel):
    config: GameConfig = Field(default_factory=GameConfig)


class SessionRequest(BaseModel):
    """Any request that only needs to know which session it is about"""

    session_id: UUID


class LegalMovesRequest(BaseModel):
    session_id: UUID
    square: str

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value


class MoveRequest(BaseModel):
    session_id: UUID
    from_square: str
    to_square: str

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value


# --- RESPONSE MODELS ---
class SessionResponse(BaseModel):
    session_id: UUID
    config: GameConfig
    board: list[list[Optional[str]]]  # FEN characters, row 0 = 8th rank. None for an empty square
    position: str
    current_player: Color
    status: Status
    move_history: list[str]
    last_move: Optional[str]
    half_move_clock: int
    full_move_number: int


class LegalMovesResponse(BaseModel):
    session_id: UUID
    square: str
    legal_moves: list[str]


class MoveHintResponse(BaseModel):
    from_square: str
    to_square: str
    notation: str


class SuggestionsResponse(BaseModel):
    session_id: UUID
    in_check: bool
    suggestions: list[MoveHintResponse]
