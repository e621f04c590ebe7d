"""
Data Transfer Objects for the social application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from postboard.domain.social.entities import UserRef


@dataclass(frozen=True)
class CreatePostCommand:
    """Input DTO for creating a post on behalf of the authenticated user.

    Attributes:
        user_ref: Reference of the user writing the post.
        text: Body of the post.
    """

    user_ref: UserRef
    text: str
