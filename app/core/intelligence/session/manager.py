"""In-memory session store for booking conversations."""

import logging
from typing import Optional

from .models import Session

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Process-wide mapping from session id to Session.

    Sessions are created lazily on first reference and live until an
    explicit reset. No eviction and no locking: each session id is
    expected to have at most one request in flight.
    """

    def __init__(self):
        """Initialize an empty store."""
        self._sessions: dict[str, Session] = {}

    def get(self, session_id: str) -> Session:
        """
        Get session by ID, creating a default one if missing.

        Args:
            session_id: Session identifier

        Returns:
            Existing or new Session
        """
        session = self._sessions.get(session_id)
        if session is None:
            session = Session(session_id=session_id)
            self._sessions[session_id] = session
            logger.debug(f"Session created: {session_id}")
        return session

    def peek(self, session_id: str) -> Optional[Session]:
        """Get session by ID without creating it."""
        return self._sessions.get(session_id)

    def reset(self, session_id: str) -> Session:
        """
        Discard any existing session and return a fresh one.

        Args:
            session_id: Session identifier

        Returns:
            Newly created default Session
        """
        if self._sessions.pop(session_id, None) is not None:
            logger.debug(f"Session discarded: {session_id}")
        return self.get(session_id)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
