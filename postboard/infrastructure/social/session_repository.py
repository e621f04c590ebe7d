"""
Adapter: Session lookup.

Implements SessionRepository port with an in-process token table.
"""

from typing import Optional

from postboard.domain.social.entities import UserRef
from postboard.domain.social.ports import SessionRepository


class InMemorySessionRepository(SessionRepository):
    """In-memory adapter mapping bearer tokens to users."""

    def __init__(self) -> None:
        self._sessions: dict[str, UserRef] = {}

    def add(self, token: str, user_ref: UserRef) -> None:
        """Open a session for user_ref under token."""
        self._sessions[token] = user_ref

    async def fetch_user_ref(self, token: str) -> Optional[UserRef]:
        """Return the user owning token, or None if the session is unknown."""
        return self._sessions.get(token)
