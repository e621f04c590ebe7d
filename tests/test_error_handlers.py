"""
Tests for the centralized error classification.

Covers the kind-to-status table and the fallthrough order for
errors that are not domain errors.
"""

import pytest
from fastapi import HTTPException
from fastapi.exceptions import RequestValidationError

from postboard.domain.social.errors import (
    AuthenticationError,
    BusinessLogicError,
    ErrorKind,
    NotFoundError,
    ValidationError,
)
from postboard.shared.errors.handlers import (
    ERROR_POLICIES,
    GENERIC_ERROR_MESSAGE,
    classify_error,
    error_body,
)


class StatusCodeError(Exception):
    status_code = 418


class TestErrorPolicies:
    """Tests for the kind-to-status table."""

    def test_every_kind_has_a_policy(self) -> None:
        """The mapping is total over ErrorKind."""
        assert set(ERROR_POLICIES) == set(ErrorKind)

    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (NotFoundError("missing"), 404),
            (ValidationError("bad input"), 400),
            (BusinessLogicError("rule broken"), 400),
            (AuthenticationError("who are you"), 401),
        ],
    )
    def test_domain_errors(self, error, status_code: int) -> None:
        """Domain errors map by kind and expose their message."""
        classified = classify_error(error)
        assert classified.status_code == status_code
        assert classified.message == error.message
        assert not classified.unexpected


class TestFallthrough:
    """Tests for errors outside the domain taxonomy."""

    def test_status_code_attribute(self) -> None:
        """status_code is honored with the error's message."""
        classified = classify_error(StatusCodeError("teapot"))
        assert (classified.status_code, classified.message) == (418, "teapot")

    def test_http_exception_uses_detail(self) -> None:
        """HTTP exceptions expose their detail, not their repr."""
        classified = classify_error(HTTPException(status_code=409, detail="conflict"))
        assert (classified.status_code, classified.message) == (409, "conflict")

    def test_boolean_status_is_ignored(self) -> None:
        """A boolean status attribute is not a status code."""
        error = RuntimeError("flag")
        error.status = True
        classified = classify_error(error)
        assert classified.status_code == 500
        assert classified.unexpected

    @pytest.mark.parametrize("status", [0, 42, 600, -1])
    def test_status_outside_http_range_is_ignored(self, status: int) -> None:
        """Only 100-599 counts as an HTTP status."""
        error = RuntimeError("odd")
        error.status = status
        classified = classify_error(error)
        assert classified.status_code == 500
        assert classified.unexpected

    def test_unclassified_error(self) -> None:
        """Anything else is a generic 500."""
        classified = classify_error(KeyError("secret"))
        assert classified.status_code == 500
        assert classified.message == GENERIC_ERROR_MESSAGE
        assert classified.unexpected

    def test_request_validation_error(self) -> None:
        """Framework validation errors become 400 with the field name."""
        error = RequestValidationError(
            [{"loc": ("body", "text"), "msg": "Input should be a valid string"}]
        )
        classified = classify_error(error)
        assert classified.status_code == 400
        assert classified.message == "`text`: Input should be a valid string"

    def test_request_validation_error_skips_index_parts(self) -> None:
        """List indexes in the location are dropped from the field name."""
        error = RequestValidationError(
            [{"loc": ("body", "tags", 0), "msg": "Input should be a valid string"}]
        )
        assert classify_error(error).message == "`tags`: Input should be a valid string"


class TestErrorBody:
    """Tests for the failure envelope."""

    def test_shape(self) -> None:
        """The failure envelope has an empty result and one error."""
        assert error_body("nope") == {"result": {}, "errors": [{"message": "nope"}]}
