"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from collections.abc import Callable, Iterator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.chess.board import Board
from src.chess.game import GameState, state_from_board
from src.core.shared_types import Color
from src.db.schema import Base

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Iterator[Session]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


# --- POSITIONS ---
PositionFactory = Callable[..., GameState]


@pytest.fixture
def position() -> PositionFactory:
    """Call the returned function with a FEN piece placement (and the color to move) to get a GameState"""

    def _create_state(
        fen: str, to_move: Color = Color.WHITE, half_move_clock: int = 0
    ) -> GameState:
        return state_from_board(Board.from_fen(fen), to_move, half_move_clock)

    return _create_state
