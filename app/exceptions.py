# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every failure reaches the client as a JSON body of the form
#   {"error": "<message>", "code": "<CODE>", ...}
# Errors should tell HOW to fix, not just WHAT failed.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class FoodReviewsException(Exception):
    """
    Base exception for the Food Reviews API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "FOOD_REVIEWS_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "error": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Review / Comment Exceptions
# =============================================================================

class ReviewNotFoundError(FoodReviewsException):
    """Raised when a review ID doesn't exist."""

    def __init__(self, review_id: str):
        super().__init__(
            message=f"Review not found: {review_id}",
            code="REVIEW_NOT_FOUND",
            status_code=404,
            suggestion="Check that the review_id is correct and the review hasn't been deleted",
            details={"review_id": review_id}
        )


class CommentNotFoundError(FoodReviewsException):
    """Raised when no review holds a comment with the given ID."""

    def __init__(self, comment_id: str):
        super().__init__(
            message=f"Comment not found: {comment_id}",
            code="COMMENT_NOT_FOUND",
            status_code=404,
            suggestion="Check that the comment_id is correct and the comment hasn't been deleted",
            details={"comment_id": comment_id}
        )


class InvalidQueryParameterError(FoodReviewsException):
    """Raised when a filter value in the query string can't be used."""

    def __init__(self, name: str, value: str, expected: str):
        super().__init__(
            message=f"Invalid value for query parameter '{name}': {value!r}",
            code="INVALID_QUERY_PARAMETER",
            status_code=400,
            suggestion=f"Pass {expected} for '{name}'",
            details={"parameter": name, "value": value}
        )


# =============================================================================
# Auth Exceptions
# =============================================================================
# Both credential failures on protected routes are reported as 403.

class MissingCredentialError(FoodReviewsException):
    """Raised when a protected route is called without a bearer token."""

    def __init__(self):
        super().__init__(
            message="Missing access token",
            code="MISSING_CREDENTIAL",
            status_code=403,
            suggestion="Send an 'Authorization: Bearer <token>' header obtained from POST /login",
        )


class InvalidTokenError(FoodReviewsException):
    """Raised when the bearer token fails verification for any reason."""

    def __init__(self):
        super().__init__(
            message="Invalid or expired access token",
            code="INVALID_TOKEN",
            status_code=403,
            suggestion="Log in again via POST /login to get a fresh token",
        )


class InvalidCredentialsError(FoodReviewsException):
    """Raised when an email/password pair doesn't match a user."""

    def __init__(self):
        super().__init__(
            message="Invalid email or password",
            code="INVALID_CREDENTIALS",
            status_code=401,
            suggestion="Check the email and password, or register via POST /users",
        )


class EmailAlreadyRegisteredError(FoodReviewsException):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            message=f"Email already registered: {email}",
            code="EMAIL_ALREADY_REGISTERED",
            status_code=409,
            suggestion="Log in with the existing account or use another email",
            details={"email": email}
        )


# =============================================================================
# Datastore Exceptions
# =============================================================================

class DatabaseError(FoodReviewsException):
    """Raised when MongoDB rejects or fails an operation unexpectedly."""

    def __init__(self, operation: str):
        super().__init__(
            message=f"Database operation failed: {operation}",
            code="INTERNAL_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def food_reviews_exception_handler(
    request: Request,
    exc: FoodReviewsException
) -> JSONResponse:
    """
    Convert FoodReviewsException to JSON response.

    Returns structured error with:
    - error: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body/path validation errors.

    Converts pydantic errors to a JSON-safe list of field problems.
    """
    errors = [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={
            "error": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }
    )


async def database_exception_handler(
    request: Request,
    exc: PyMongoError
) -> JSONResponse:
    """Log datastore failures and hide driver details from the client."""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content=DatabaseError(f"{request.method} {request.url.path}").to_dict()
    )
