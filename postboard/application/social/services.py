"""
Collaborator bundle for the social bounded context.

The API router receives every collaborator it needs through one
Services instance, so adapters can be swapped wholesale in tests.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable

from postboard.application.social.dtos import CreatePostCommand
from postboard.domain.social.entities import Post
from postboard.domain.social.ports import (
    MetadataRepository,
    PostRepository,
    SessionRepository,
    UserRepository,
)

CreatePostOperation = Callable[[CreatePostCommand], Awaitable[Post]]


@dataclass(frozen=True)
class Services:
    """Repositories and operations consumed by the API router.

    Attributes:
        metadata_repository: Source of service metadata.
        user_repository: Source of users.
        post_repository: Source of posts.
        session_repository: Resolves bearer tokens to users.
        user_create_post: Creates a post for the authenticated user.
    """

    metadata_repository: MetadataRepository
    user_repository: UserRepository
    post_repository: PostRepository
    session_repository: SessionRepository
    user_create_post: CreatePostOperation
