"""
FastAPI router for the social bounded context.

All routes delegate to the injected collaborators. No business logic here.
Routes return raw presented payloads; the envelope and the error mapping
are applied by the route class (see postboard.shared.errors.envelope).

Routes (relative to the mount prefix):
    GET  /             service metadata
    GET  /users/{id}   a user            (authenticated)
    GET  /posts/{id}   a post            (authenticated)
    POST /posts        create a post     (authenticated)
    HEAD /...          any GET route above, same stages
    *    /{path}       not found
"""

from typing import Any, Callable, Optional

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter

from postboard.application.social.dtos import CreatePostCommand
from postboard.application.social.services import Services
from postboard.domain.social.entities import PostRef, UserRef
from postboard.domain.social.errors import NotFoundError, ValidationError
from postboard.interfaces.social.auth import require_auth
from postboard.interfaces.social.presenter import model_to_json
from postboard.interfaces.social.schemas import CreatePostRequest
from postboard.shared.errors.envelope import EnvelopeResponse, EnvelopeRoute
from postboard.shared.security.rate_limiting import DEFAULT_RATE_LIMIT, HEAVY_RATE_LIMIT

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_api_router(
    services: Services,
    limiter: Optional[Limiter] = None,
    rate_limit_default: str = DEFAULT_RATE_LIMIT,
    rate_limit_heavy: str = HEAVY_RATE_LIMIT,
) -> APIRouter:
    """Build the API router around a bundle of collaborators.

    Args:
        services: Repositories and operations the routes delegate to.
        limiter: Optional slowapi limiter; routes are unlimited without one.
        rate_limit_default: Limit applied to read routes.
        rate_limit_heavy: Limit applied to post creation.

    Returns:
        A router whose every response is enveloped.
    """
    router = APIRouter(
        route_class=EnvelopeRoute,
        default_response_class=EnvelopeResponse,
        tags=["social"],
    )
    authenticated = require_auth(services.session_repository)

    def limited(limit_value: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        if limiter is None:
            return lambda endpoint: endpoint
        return limiter.limit(limit_value)

    @router.get("/", summary="Service metadata", response_model=None)
    @limited(rate_limit_default)
    async def get_metadata(request: Request) -> dict[str, Any]:
        """Return metadata describing the service."""
        return model_to_json(await services.metadata_repository.fetch_metadata())

    @router.get(
        "/users/{id}",
        summary="Fetch a user",
        response_model=None,
        dependencies=[Depends(authenticated)],
    )
    @limited(rate_limit_default)
    async def get_user(request: Request, id: str) -> dict[str, Any]:
        """Return the user identified by id."""
        ref = UserRef(id)
        return model_to_json(await services.user_repository.fetch_by_ref(ref))

    @router.get(
        "/posts/{id}",
        summary="Fetch a post",
        response_model=None,
        dependencies=[Depends(authenticated)],
    )
    @limited(rate_limit_default)
    async def get_post(request: Request, id: str) -> dict[str, Any]:
        """Return the post identified by id."""
        ref = PostRef(id)
        return model_to_json(await services.post_repository.fetch_by_ref(ref))

    @router.post("/posts", summary="Create a post", response_model=None)
    @limited(rate_limit_heavy)
    async def create_post(
        request: Request,
        payload: Optional[CreatePostRequest] = None,
        user_ref: UserRef = Depends(authenticated),
    ) -> dict[str, Any]:
        """Create a post for the authenticated user."""
        text = payload.text if payload is not None else None
        if text is None:
            raise ValidationError("`text` is required")
        post = await services.user_create_post(
            CreatePostCommand(user_ref=user_ref, text=text)
        )
        return model_to_json(post)

    # HEAD answers every GET route; the server drops the body.
    for route in list(router.routes):
        if "GET" in route.methods:
            router.add_api_route(
                route.path,
                route.endpoint,
                methods=["HEAD"],
                response_model=None,
                dependencies=route.dependencies,
                include_in_schema=False,
            )

    # Registered last: concrete routes above always match first.
    @router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
    async def not_found(path: str) -> None:
        raise NotFoundError("not found")

    return router
