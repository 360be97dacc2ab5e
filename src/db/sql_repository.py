"""Implementation of (Session)Repository using SQLAlchemy"""

import logging
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import SessionModel
from src.db.schema import DBSession

logger = logging.getLogger(__name__)


class SQLSessionRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_session(self, session_id: UUID) -> SessionModel | None:
        """Get session by ID, if record exists."""
        session_db = self._fetch_session(session_id)
        if session_db:
            return self._to_model(session_db)
        return None

    def create_session(self, session: SessionModel) -> tuple[SessionModel, UUID]:
        """Store new session and return the stored data + newly created session ID."""
        new_id = uuid4()
        session_db = DBSession(
            id=new_id,
            mode=session.mode,
            difficulty=session.difficulty,
            player_color=session.player_color,
            moves=list(session.moves),
            status=session.status,
        )
        self.db.add(session_db)
        self.db.commit()
        self.db.refresh(session_db)
        logger.debug("Created session record %s", new_id)
        return self._to_model(session_db), new_id

    def update_session(
        self, session_id: UUID, session: SessionModel
    ) -> SessionModel | None:
        """Add new info to existing record."""
        session_db = self._fetch_session(session_id)
        if not session_db:
            return None
        session_db.mode = session.mode
        session_db.difficulty = session.difficulty
        session_db.player_color = session.player_color
        # new list object: SQLAlchemy does not track in-place changes of a JSON column
        session_db.moves = list(session.moves)
        session_db.status = session.status
        self.db.commit()
        self.db.refresh(session_db)
        logger.debug("Updated session record %s (%d moves)", session_id, len(session.moves))
        return self._to_model(session_db)

    def delete_session(self, session_id: UUID) -> SessionModel | None:
        """Remove a session's record."""
        session_db = self._fetch_session(session_id)
        if not session_db:
            return None
        session_model = self._to_model(session_db)
        self.db.delete(session_db)
        self.db.commit()
        logger.debug("Deleted session record %s", session_id)
        return session_model

    def _fetch_session(self, session_id: UUID) -> DBSession | None:
        query = select(DBSession).where(DBSession.id == session_id)
        return self.db.scalar(query)

    def _to_model(self, session_db: DBSession) -> SessionModel:
        """Convert SQLAlchemy model to data transfer model."""
        return SessionModel(
            mode=session_db.mode,
            difficulty=session_db.difficulty,
            player_color=session_db.player_color,
            moves=list(session_db.moves),
            status=session_db.status,
        )
