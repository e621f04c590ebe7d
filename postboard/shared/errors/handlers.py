"""
Centralized error handling for FastAPI.

Maps errors to HTTP responses wrapped in the failure envelope:

    {"result": {}, "errors": [{"message": "..."}]}

Classification order:
1. Domain errors, by ErrorKind, through ERROR_POLICIES.
2. Request validation errors raised by FastAPI, as 400.
3. Any error carrying an HTTP status (100-599) in ``status_code`` or ``status``.
4. Everything else: 500 with a generic message, logged with traceback.

No stack traces or internal details are exposed to clients.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from postboard.domain.social.errors import DomainError, ErrorKind

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_401 = 401
HTTP_404 = 404
HTTP_500 = 500

GENERIC_ERROR_MESSAGE = "something happened"

_PARAMETER_SOURCES = ("body", "query", "path", "header", "cookie")

MIN_HTTP_STATUS = 100
MAX_HTTP_STATUS = 599


@dataclass(frozen=True)
class ErrorPolicy:
    """How an error kind is rendered.

    Attributes:
        status_code: HTTP status of the response.
        expose_message: Whether the error's own message reaches the client.
    """

    status_code: int
    expose_message: bool = True


ERROR_POLICIES: dict[ErrorKind, ErrorPolicy] = {
    ErrorKind.NOT_FOUND: ErrorPolicy(HTTP_404),
    ErrorKind.VALIDATION: ErrorPolicy(HTTP_400),
    ErrorKind.BUSINESS_LOGIC: ErrorPolicy(HTTP_400),
    ErrorKind.AUTHENTICATION: ErrorPolicy(HTTP_401),
}


@dataclass(frozen=True)
class ClassifiedError:
    """Outcome of classifying an error.

    Attributes:
        status_code: HTTP status to respond with.
        message: Client-facing message.
        unexpected: True when the error fell through every known shape.
    """

    status_code: int
    message: str
    unexpected: bool = False


def error_body(message: str) -> dict[str, Any]:
    """Build the failure envelope for a single message."""
    return {"result": {}, "errors": [{"message": message}]}


def classify_error(exc: BaseException) -> ClassifiedError:
    """Map an error to its HTTP status and client-facing message.

    Args:
        exc: Any error raised while handling a request.

    Returns:
        The status code and message to render.
    """
    if isinstance(exc, DomainError):
        policy = ERROR_POLICIES[exc.kind]
        message = exc.message if policy.expose_message else GENERIC_ERROR_MESSAGE
        return ClassifiedError(policy.status_code, message or GENERIC_ERROR_MESSAGE)

    if isinstance(exc, RequestValidationError):
        return ClassifiedError(HTTP_400, _describe_validation_error(exc))

    status_code = _explicit_status(exc)
    if status_code is not None:
        return ClassifiedError(status_code, _message_of(exc) or GENERIC_ERROR_MESSAGE)

    return ClassifiedError(HTTP_500, GENERIC_ERROR_MESSAGE, unexpected=True)


def error_response(exc: BaseException) -> JSONResponse:
    """Render an error as an enveloped JSON response.

    Unexpected errors are logged with their traceback; expected ones
    are logged at INFO without one.
    """
    classified = classify_error(exc)
    if classified.unexpected:
        logger.error("Unexpected error: %s", type(exc).__name__, exc_info=exc)
    else:
        logger.info(
            "Request failed with %d: %s", classified.status_code, classified.message
        )
    return JSONResponse(
        status_code=classified.status_code, content=error_body(classified.message)
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register envelope-producing error handlers on the application.

    API routes render their own failures (see EnvelopeRoute); these
    handlers cover everything raised outside of them, such as unknown
    paths outside the API prefix.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle framework HTTP errors (404, 405, ...)."""
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request input."""
        return error_response(exc)

    @app.exception_handler(DomainError)
    async def handle_domain_error(_request: Request, exc: DomainError) -> JSONResponse:
        """Handle domain errors raised outside API routes."""
        return error_response(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        return error_response(exc)


def _explicit_status(exc: BaseException) -> Optional[int]:
    for attribute in ("status_code", "status"):
        value = getattr(exc, attribute, None)
        if isinstance(value, bool) or not isinstance(value, int):
            continue
        if MIN_HTTP_STATUS <= value <= MAX_HTTP_STATUS:
            return value
    return None


def _message_of(exc: BaseException) -> str:
    detail = getattr(exc, "detail", None)
    if detail is not None:
        return detail if isinstance(detail, str) else str(detail)
    return str(exc)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    reason = first.get("msg") or "invalid value"
    if first.get("type") == "json_invalid":
        return reason
    location = [part for part in first.get("loc", ()) if isinstance(part, str)]
    if location and location[0] in _PARAMETER_SOURCES:
        location = location[1:]
    if not location:
        return reason
    return f"`{'.'.join(location)}`: {reason}"
