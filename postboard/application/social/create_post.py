"""
Use case: Create a post for the authenticated user.

Input: CreatePostCommand (user_ref, text)
Output: Post
Side effects: Persists the post through the PostRepository.
Failure cases: BusinessLogicError.
"""

import logging

from postboard.application.social.dtos import CreatePostCommand
from postboard.domain.social.entities import Post
from postboard.domain.social.errors import BusinessLogicError
from postboard.domain.social.ports import PostRepository

logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 280


class CreatePostUseCase:
    """Applies the posting rules and persists the post.

    A post must contain at least one non-whitespace character and
    must not exceed ``max_length`` characters.
    """

    def __init__(
        self, post_repository: PostRepository, max_length: int = DEFAULT_MAX_LENGTH
    ) -> None:
        self._post_repository = post_repository
        self._max_length = max_length

    async def execute(self, command: CreatePostCommand) -> Post:
        """Run the create-post use case.

        Args:
            command: The author reference and the post text.

        Returns:
            The persisted post.

        Raises:
            BusinessLogicError: If the text is blank or too long.
        """
        if not command.text.strip():
            raise BusinessLogicError("post text must not be blank")
        if len(command.text) > self._max_length:
            raise BusinessLogicError(
                f"post text must be at most {self._max_length} characters"
            )

        post = await self._post_repository.create(
            author=command.user_ref, text=command.text
        )
        logger.info("Created post=%s for user=%s", post.ref, command.user_ref)
        return post

    async def __call__(self, command: CreatePostCommand) -> Post:
        return await self.execute(command)
