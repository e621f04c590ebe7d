"""
Application entry point.

Creates the FastAPI application and wires together:
- The API router (one per bounded context), mounted under the API prefix
- The response envelope and centralized error mapping
- CORS middleware
- Rate limiting
- Logging configuration

Request stages, outermost first:
    CORS headers -> error envelope -> authentication -> body validation
    -> rate limit -> route handler

No business logic belongs here.
"""

from typing import Optional

from fastapi import FastAPI

from postboard.application.social.services import Services
from postboard.core.config import Settings, settings
from postboard.interfaces.social.dependencies import build_services
from postboard.interfaces.social.router import create_api_router
from postboard.shared.errors.handlers import register_error_handlers
from postboard.shared.logging import configure_logging
from postboard.shared.security.cors import CorsHeadersMiddleware
from postboard.shared.security.rate_limiting import build_limiter


def create_app(
    services: Optional[Services] = None, app_settings: Optional[Settings] = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers the API router, error handlers, CORS middleware and the
    rate limiter. This is the composition root of the application.

    Args:
        services: Collaborators for the API router. Defaults to the
            in-memory adapters built from the settings.
        app_settings: Settings to use instead of the module-level ones.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    configure_logging(level=app_settings.log_level)

    if services is None:
        services = build_services(app_settings)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        openapi_url="/openapi.json" if app_settings.debug else None,
    )

    # --- Rate Limiting ---
    limiter = build_limiter(enabled=app_settings.rate_limit_enabled)
    app.state.limiter = limiter

    # --- CORS Middleware ---
    app.add_middleware(
        CorsHeadersMiddleware,
        allow_origin=app_settings.cors_allow_origin,
        allow_methods=app_settings.cors_allow_methods,
        allow_headers=app_settings.cors_allow_headers,
        path_prefix=app_settings.api_prefix,
        handle_preflight=app_settings.cors_handle_preflight,
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(
        create_api_router(
            services,
            limiter=limiter,
            rate_limit_default=app_settings.rate_limit_default,
            rate_limit_heavy=app_settings.rate_limit_heavy,
        ),
        prefix=app_settings.api_prefix,
    )

    return app


app = create_app()
