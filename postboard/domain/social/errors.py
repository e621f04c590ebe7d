"""
Domain-specific errors for the social bounded context.

All errors raised from the domain and application layers are defined here.
Each error belongs to exactly one ErrorKind; the kinds are mapped to HTTP
responses at the interface layer.
No framework imports allowed.
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of error categories understood by the API."""

    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    BUSINESS_LOGIC = "business_logic"
    AUTHENTICATION = "authentication"


class DomainError(Exception):
    """Base error for all social domain errors."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class NotFoundError(DomainError):
    """Raised when a referenced entity or route does not exist."""

    kind = ErrorKind.NOT_FOUND


class ValidationError(DomainError):
    """Raised when client input is missing or malformed."""

    kind = ErrorKind.VALIDATION


class BusinessLogicError(DomainError):
    """Raised when a request violates a domain rule."""

    kind = ErrorKind.BUSINESS_LOGIC


class AuthenticationError(DomainError):
    """Raised when a request carries no valid session."""

    kind = ErrorKind.AUTHENTICATION
