"""
Tests for the in-memory infrastructure adapters.
"""

import pytest

from postboard.core.config import Settings
from postboard.domain.social.entities import PostRef, UserRef
from postboard.domain.social.errors import NotFoundError
from postboard.infrastructure.social.metadata_repository import (
    StaticMetadataRepository,
)
from postboard.infrastructure.social.post_repository import InMemoryPostRepository
from postboard.infrastructure.social.session_repository import (
    InMemorySessionRepository,
)
from postboard.infrastructure.social.user_repository import InMemoryUserRepository
from postboard.interfaces.social.dependencies import DEMO_USER_ID, build_services


class TestInMemoryRepositories:
    """Tests for the in-memory adapters."""

    @pytest.mark.asyncio
    async def test_metadata(self) -> None:
        """Metadata reports the configured name and version."""
        metadata = await StaticMetadataRepository("Board", "1.2.3").fetch_metadata()
        assert (metadata.name, metadata.version) == ("Board", "1.2.3")

    @pytest.mark.asyncio
    async def test_user_lookup(self) -> None:
        """Registered users are found; others raise NotFoundError."""
        repository = InMemoryUserRepository()
        repository.add(UserRef("1"), "Ann")

        assert (await repository.fetch_by_ref(UserRef("1"))).name == "Ann"
        with pytest.raises(NotFoundError, match="user not found: 2"):
            await repository.fetch_by_ref(UserRef("2"))

    @pytest.mark.asyncio
    async def test_posts_get_sequential_refs(self) -> None:
        """Created posts receive increasing references and can be fetched."""
        repository = InMemoryPostRepository()

        first = await repository.create(author=UserRef("1"), text="a")
        second = await repository.create(author=UserRef("1"), text="b")

        assert (first.ref, second.ref) == (PostRef("1"), PostRef("2"))
        assert await repository.fetch_by_ref(PostRef("2")) == second
        assert first.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_missing_post(self) -> None:
        """Unknown post references raise NotFoundError."""
        with pytest.raises(NotFoundError, match="post not found: 9"):
            await InMemoryPostRepository().fetch_by_ref(PostRef("9"))

    @pytest.mark.asyncio
    async def test_sessions(self) -> None:
        """Known tokens resolve to their user; unknown ones to None."""
        repository = InMemorySessionRepository()
        repository.add("t", UserRef("1"))

        assert await repository.fetch_user_ref("t") == UserRef("1")
        assert await repository.fetch_user_ref("other") is None


class TestBuildServices:
    """Tests for the composition root."""

    @pytest.mark.asyncio
    async def test_demo_seed(self) -> None:
        """Seeding opens a session for the demo user."""
        services = build_services(
            Settings(seed_demo_data=True, demo_session_token="demo-123")
        )

        user_ref = await services.session_repository.fetch_user_ref("demo-123")

        assert user_ref == UserRef(DEMO_USER_ID)
        assert (await services.user_repository.fetch_by_ref(user_ref)).ref == user_ref

    @pytest.mark.asyncio
    async def test_no_seed_by_default(self) -> None:
        """Without seeding there are no sessions."""
        services = build_services(Settings(seed_demo_data=False))
        assert await services.session_repository.fetch_user_ref("demo-token") is None
