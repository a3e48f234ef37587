# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .review_service import ReviewService, build_review_query, parse_review_filter
from .comment_service import CommentService
from .user_service import UserService
from .token_service import (
    InvalidSignatureError,
    MalformedTokenError,
    TokenClaims,
    TokenError,
    TokenExpiredError,
    TokenService,
)

__all__ = [
    "ReviewService",
    "build_review_query",
    "parse_review_filter",
    "CommentService",
    "UserService",
    "TokenService",
    "TokenClaims",
    "TokenError",
    "InvalidSignatureError",
    "MalformedTokenError",
    "TokenExpiredError",
]
