"""Protocol repository (SQLAlchemy implementation in sql_repository.py, tests use an in-memory dictionary)"""

from typing import Protocol
from uuid import UUID

from src.core.models import SessionModel


class SessionRepository(Protocol):
    """Persistence layer orchestration"""

    def get_session(self, session_id: UUID) -> SessionModel | None:
        """Get session by ID, if record exists."""
        ...

    def create_session(self, session: SessionModel) -> tuple[SessionModel, UUID]:
        """Store new session and return the stored data + newly created session ID."""
        ...

    def update_session(
        self, session_id: UUID, session: SessionModel
    ) -> SessionModel | None:
        """Add new info to existing record."""
        ...

    def delete_session(self, session_id: UUID) -> SessionModel | None:
        """Remove a session's record."""
        ...
