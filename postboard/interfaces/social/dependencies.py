"""
Dependency wiring for the social bounded context.

Builds the Services bundle from infrastructure adapters and use cases
via constructor injection. This is the composition root for the
social context.
"""

import logging

from postboard.application.social.create_post import CreatePostUseCase
from postboard.application.social.services import Services
from postboard.core.config import Settings
from postboard.domain.social.entities import UserRef
from postboard.infrastructure.social.metadata_repository import (
    StaticMetadataRepository,
)
from postboard.infrastructure.social.post_repository import InMemoryPostRepository
from postboard.infrastructure.social.session_repository import (
    InMemorySessionRepository,
)
from postboard.infrastructure.social.user_repository import InMemoryUserRepository

logger = logging.getLogger(__name__)

DEMO_USER_ID = "demo"
DEMO_USER_NAME = "Demo User"


def build_services(settings: Settings) -> Services:
    """Build the default Services bundle with in-memory adapters.

    Args:
        settings: Application settings.

    Returns:
        A Services bundle ready to be handed to the API router.
    """
    user_repository = InMemoryUserRepository()
    post_repository = InMemoryPostRepository()
    session_repository = InMemorySessionRepository()

    if settings.seed_demo_data:
        demo_ref = UserRef(DEMO_USER_ID)
        user_repository.add(demo_ref, DEMO_USER_NAME)
        session_repository.add(settings.demo_session_token, demo_ref)
        logger.info("Seeded demo user=%s", demo_ref)

    return Services(
        metadata_repository=StaticMetadataRepository(
            name=settings.project_name, version=settings.version
        ),
        user_repository=user_repository,
        post_repository=post_repository,
        session_repository=session_repository,
        user_create_post=CreatePostUseCase(
            post_repository=post_repository,
            max_length=settings.post_max_length,
        ),
    )
