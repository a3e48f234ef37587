# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - review.py: Review and embedded Comment schemas
# - user.py: Registration, login and public user schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Review Models - Reviews with embedded comments
# -----------------------------------------------------------------------------
from .review import (
    MAX_RATING,
    MIN_RATING,
    Comment,
    CommentCreate,
    CommentUpdate,
    Review,
    ReviewCreate,
    ReviewFilter,
    ReviewSummary,
    ReviewUpdate,
)

# -----------------------------------------------------------------------------
# User Models - Accounts and login
# -----------------------------------------------------------------------------
from .user import (
    LoginRequest,
    UserCreate,
    UserResponse,
)

__all__ = [
    # Review
    "MAX_RATING",
    "MIN_RATING",
    "Comment",
    "CommentCreate",
    "CommentUpdate",
    "Review",
    "ReviewCreate",
    "ReviewFilter",
    "ReviewSummary",
    "ReviewUpdate",
    # User
    "LoginRequest",
    "UserCreate",
    "UserResponse",
]
