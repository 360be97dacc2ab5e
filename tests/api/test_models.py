from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from src.api.models import (
    CreateSessionRequest,
    GameConfig,
    LegalMovesRequest,
    MoveRequest,
)
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Difficulty, GameMode


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- GameConfig --
def test_default_config() -> None:
    request = CreateSessionRequest()
    assert request.config.mode == GameMode.HUMAN_VS_BOT
    assert request.config.difficulty == Difficulty.MEDIUM
    assert request.config.player_color == Color.WHITE


def test_config_from_strings() -> None:
    """As it would arrive in a JSON body"""
    config = GameConfig(mode="human-vs-human", difficulty="hard", player_color="black")
    assert config.mode == GameMode.HUMAN_VS_HUMAN
    assert config.difficulty == Difficulty.HARD
    assert config.player_color == Color.BLACK


@pytest.mark.parametrize(
    "mode, player_color, expected",
    [
        (GameMode.HUMAN_VS_BOT, Color.WHITE, Color.BLACK),
        (GameMode.HUMAN_VS_BOT, Color.BLACK, Color.WHITE),
        (GameMode.HUMAN_VS_HUMAN, Color.WHITE, None),
    ],
)
def test_bot_color(mode: GameMode, player_color: Color, expected: Color | None) -> None:
    assert GameConfig(mode=mode, player_color=player_color).bot_color == expected


def test_unknown_difficulty() -> None:
    with pytest.raises(ValidationError):
        GameConfig(difficulty="grandmaster")


# -- Validation - MoveRequest --
def test_valid_square_names(mock_id: UUID) -> None:
    """Test that MoveRequest accepts correctly written squares in algebraic notation."""
    request = MoveRequest(session_id=mock_id, from_square="e2", to_square="e4")
    assert request.from_square == "e2"
    assert request.to_square == "e4"


@pytest.mark.parametrize(
    "square",
    [
        "nonsense",  # anything more than two characters.
        "11",  # First character is not a letter
        "aa",  # second character is not a number
        "i1",  # off the board
        "a9",
        "E2",  # files are lower case
    ],
)
def test_invalid_from_square(mock_id: UUID, square: str) -> None:
    """Test that an exception is raised when using invalid square name."""
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(session_id=mock_id, from_square=square, to_square="e2")


@pytest.mark.parametrize("square", ["nonsense", "11", "aa"])
def test_invalid_to_square(mock_id: UUID, square: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(session_id=mock_id, from_square="e2", to_square=square)


# -- Validation - LegalMovesRequest --
def test_legal_moves_request(mock_id: UUID) -> None:
    assert LegalMovesRequest(session_id=mock_id, square="h8").square == "h8"
    with pytest.raises(InvalidRequestError):
        _ = LegalMovesRequest(session_id=mock_id, square="h0")
