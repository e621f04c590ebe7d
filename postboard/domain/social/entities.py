"""
Domain entities for the social bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserRef:
    """Opaque reference to a user, built from a raw identifier."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PostRef:
    """Opaque reference to a post, built from a raw identifier."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Metadata:
    """Descriptive information about the running service."""

    name: str
    version: str


@dataclass(frozen=True)
class User:
    """A registered user of the board."""

    ref: UserRef
    name: str
    created_at: datetime


@dataclass(frozen=True)
class Post:
    """A short text post written by a user."""

    ref: PostRef
    author: UserRef
    text: str
    created_at: datetime
