# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from typing import Any

from bson import ObjectId
from bson.errors import InvalidId


# =============================================================================
# ObjectId Utilities
# =============================================================================

def parse_object_id(value: str | ObjectId) -> ObjectId | None:
    """
    Parse a client-supplied id into an ObjectId.

    Returns None instead of raising when the value isn't a valid
    24-character hex id, so callers can treat it as "not found".

    Example:
        oid = parse_object_id("65a1f0c2e4b0a1b2c3d4e5f6")  # ObjectId(...)
        oid = parse_object_id("not-an-id")                  # None
    """
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for errors raised below the HTTP layer.

    Provides actionable error messages following the principle:
    "Errors should tell HOW to fix, not just WHAT failed."

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging

    Example:
        class MyServiceError(ApplicationError):
            def __init__(self, message: str, **kwargs):
                super().__init__(message, code="MY_SERVICE_ERROR", **kwargs)
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result
