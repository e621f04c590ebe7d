"""
Adapter: Post storage.

Implements PostRepository port with an in-process dict.
References are allocated sequentially ("1", "2", ...).
"""

import asyncio
from datetime import datetime, timezone

from postboard.domain.social.entities import Post, PostRef, UserRef
from postboard.domain.social.errors import NotFoundError
from postboard.domain.social.ports import PostRepository


class InMemoryPostRepository(PostRepository):
    """In-memory adapter for posts, keyed by reference."""

    def __init__(self) -> None:
        self._posts: dict[PostRef, Post] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def fetch_by_ref(self, ref: PostRef) -> Post:
        """Return the post for ref.

        Raises:
            NotFoundError: If no post is stored under ref.
        """
        try:
            return self._posts[ref]
        except KeyError:
            raise NotFoundError(f"post not found: {ref}") from None

    async def create(self, author: UserRef, text: str) -> Post:
        """Store a new post under the next free reference."""
        async with self._lock:
            ref = PostRef(str(self._next_id))
            self._next_id += 1
            post = Post(
                ref=ref,
                author=author,
                text=text,
                created_at=datetime.now(timezone.utc),
            )
            self._posts[ref] = post
        return post
