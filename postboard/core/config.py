"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API, reported as metadata.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix the API router is mounted under.
        cors_allow_origin: Value of Access-Control-Allow-Origin.
        cors_allow_methods: Methods that receive CORS headers.
        cors_allow_headers: Request headers clients may send.
        cors_handle_preflight: Answer OPTIONS preflight requests directly.
        rate_limit_enabled: Toggle per-client rate limiting.
        rate_limit_default: Rate limit for read endpoints.
        rate_limit_heavy: Rate limit for write endpoints.
        post_max_length: Maximum number of characters in a post.
        seed_demo_data: Seed a demo user, session and post at startup.
        demo_session_token: Bearer token of the seeded demo session.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="POSTBOARD_"
    )

    project_name: str = "Postboard"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"

    cors_allow_origin: str = "*"
    cors_allow_methods: list[str] = ["GET", "POST", "DELETE", "PATCH"]
    cors_allow_headers: list[str] = ["Authorization", "Content-Type"]
    cors_handle_preflight: bool = False

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"
    rate_limit_heavy: str = "10/minute"

    post_max_length: int = 280

    seed_demo_data: bool = False
    demo_session_token: str = "demo-token"


settings = Settings()
