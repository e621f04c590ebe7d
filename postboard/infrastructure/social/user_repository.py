"""
Adapter: User storage.

Implements UserRepository port with an in-process dict.
Suitable for development, demos and tests.
"""

from datetime import datetime, timezone

from postboard.domain.social.entities import User, UserRef
from postboard.domain.social.errors import NotFoundError
from postboard.domain.social.ports import UserRepository


class InMemoryUserRepository(UserRepository):
    """In-memory adapter for users, keyed by reference."""

    def __init__(self) -> None:
        self._users: dict[UserRef, User] = {}

    def add(self, ref: UserRef, name: str) -> User:
        """Register a user and return it."""
        user = User(ref=ref, name=name, created_at=datetime.now(timezone.utc))
        self._users[ref] = user
        return user

    async def fetch_by_ref(self, ref: UserRef) -> User:
        """Return the user for ref.

        Raises:
            NotFoundError: If no user is registered under ref.
        """
        try:
            return self._users[ref]
        except KeyError:
            raise NotFoundError(f"user not found: {ref}") from None
