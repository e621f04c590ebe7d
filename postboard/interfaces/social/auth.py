"""
Authentication dependency for the social API.

Resolves the bearer token of a request to the user owning the session.
The resolved UserRef is attached to ``request.state.user_ref`` and
returned to the route. Requests without a valid session fail with
AuthenticationError before the route body runs.
"""

import logging
from typing import Awaitable, Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from postboard.domain.social.entities import UserRef
from postboard.domain.social.errors import AuthenticationError
from postboard.domain.social.ports import SessionRepository

logger = logging.getLogger(__name__)

# HTTP Bearer token extractor; missing credentials are reported by require_auth
bearer_scheme = HTTPBearer(auto_error=False)


def require_auth(
    session_repository: SessionRepository,
) -> Callable[..., Awaitable[UserRef]]:
    """Build a FastAPI dependency that authenticates the request.

    Args:
        session_repository: Resolves bearer tokens to users.

    Returns:
        An async dependency returning the authenticated user's reference.
    """

    async def authenticate(
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ) -> UserRef:
        if credentials is None:
            raise AuthenticationError("authentication required")

        user_ref = await session_repository.fetch_user_ref(credentials.credentials)
        if user_ref is None:
            logger.debug("Rejected request with unknown session token")
            raise AuthenticationError("invalid session")

        request.state.user_ref = user_ref
        return user_ref

    return authenticate
