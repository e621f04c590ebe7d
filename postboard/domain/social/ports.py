"""
Port interfaces (ABCs) for the social bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
All ports are asynchronous: adapters are expected to perform IO.
"""

from abc import ABC, abstractmethod
from typing import Optional

from postboard.domain.social.entities import Metadata, Post, PostRef, User, UserRef


class MetadataRepository(ABC):
    """Port for retrieving service metadata."""

    @abstractmethod
    async def fetch_metadata(self) -> Metadata:
        """Return metadata describing the service."""
        raise NotImplementedError


class UserRepository(ABC):
    """Port for retrieving users."""

    @abstractmethod
    async def fetch_by_ref(self, ref: UserRef) -> User:
        """Return the user identified by ref.

        Raises:
            NotFoundError: If no such user exists.
        """
        raise NotImplementedError


class PostRepository(ABC):
    """Port for retrieving and persisting posts."""

    @abstractmethod
    async def fetch_by_ref(self, ref: PostRef) -> Post:
        """Return the post identified by ref.

        Raises:
            NotFoundError: If no such post exists.
        """
        raise NotImplementedError

    @abstractmethod
    async def create(self, author: UserRef, text: str) -> Post:
        """Persist a new post and return it with its assigned reference."""
        raise NotImplementedError


class SessionRepository(ABC):
    """Port for resolving session credentials to users."""

    @abstractmethod
    async def fetch_user_ref(self, token: str) -> Optional[UserRef]:
        """Return the user owning the session token, or None if unknown."""
        raise NotImplementedError
