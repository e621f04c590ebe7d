"""
Shared fixtures for the Postboard test suite.

Every test gets a fresh application built around in-memory adapters
seeded with one user and one open session.
"""

import pytest
from fastapi.testclient import TestClient

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
from postboard.main import create_app

USER_ID = "123"
USER_NAME = "Alice"
SESSION_TOKEN = "valid-token"


@pytest.fixture
def app_settings() -> Settings:
    return Settings(
        project_name="Postboard",
        version="9.9.9",
        api_prefix="/api",
        rate_limit_enabled=True,
        cors_handle_preflight=False,
        seed_demo_data=False,
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    repository = InMemoryUserRepository()
    repository.add(UserRef(USER_ID), USER_NAME)
    return repository


@pytest.fixture
def post_repository() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def session_repository() -> InMemorySessionRepository:
    repository = InMemorySessionRepository()
    repository.add(SESSION_TOKEN, UserRef(USER_ID))
    return repository


@pytest.fixture
def services(
    app_settings: Settings,
    user_repository: InMemoryUserRepository,
    post_repository: InMemoryPostRepository,
    session_repository: InMemorySessionRepository,
) -> Services:
    return Services(
        metadata_repository=StaticMetadataRepository(
            name=app_settings.project_name, version=app_settings.version
        ),
        user_repository=user_repository,
        post_repository=post_repository,
        session_repository=session_repository,
        user_create_post=CreatePostUseCase(
            post_repository=post_repository,
            max_length=app_settings.post_max_length,
        ),
    )


@pytest.fixture
def client(services: Services, app_settings: Settings) -> TestClient:
    return TestClient(create_app(services=services, app_settings=app_settings))


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {SESSION_TOKEN}"}
