# =============================================================================
# core/models/review.py - Review and Comment Schemas
# =============================================================================
# These models define the API contract for review operations:
# - ReviewCreate / ReviewUpdate: Input for creating and sparse-updating reviews
# - Review / ReviewSummary: Output for detail and list views
# - CommentCreate / CommentUpdate / Comment: Comments embedded in a review
#
# A review document stores its comments inline:
#   {"_id": ObjectId, "title": ..., "food": ..., "content": ..., "rating": 9,
#    "comments": [{"_id": ObjectId, "content": ..., "nickname": ...}]}
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field

# Ratings are whole numbers on a 0-10 scale
MIN_RATING = 0
MAX_RATING = 10

# Fields a sparse PUT may replace
REVIEW_UPDATABLE_FIELDS = ("title", "food", "content", "rating")


# =============================================================================
# Comments
# =============================================================================

class CommentCreate(BaseModel):
    """
    Schema for adding a comment to a review.

    Example:
        {"content": "Agreed, best ribeye in town", "nickname": "meatlover"}
    """

    content: str = Field(..., min_length=1, description="Comment text")
    nickname: str = Field(..., min_length=1, max_length=100, description="Display name of the commenter")


class CommentUpdate(CommentCreate):
    """Schema for rewriting an existing comment's content and nickname."""


class Comment(BaseModel):
    """A comment as returned to clients."""

    id: str = Field(..., description="Server-generated comment identifier")
    content: str
    nickname: str

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Comment":
        """Build from an embedded comment sub-document."""
        return cls(
            id=str(doc["_id"]),
            content=doc.get("content", ""),
            nickname=doc.get("nickname", ""),
        )


# =============================================================================
# Reviews
# =============================================================================

class ReviewCreate(BaseModel):
    """
    Schema for creating a review.

    Example:
        {
            "title": "Good steak at the SteakOut Restaurant",
            "food": "Ribeye Steak",
            "content": "The steak was perfectly prepared",
            "rating": 9
        }
    """

    title: str = Field(..., min_length=1, max_length=200)
    food: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)

    model_config = {
        "json_schema_extra": {
            "example": {
                "title": "Good steak at the SteakOut Restaurant",
                "food": "Ribeye Steak",
                "content": "The steak was perfectly prepared",
                "rating": 9,
            }
        }
    }


class ReviewUpdate(BaseModel):
    """
    Schema for a sparse update of a review.

    Every field is optional. Empty strings, 0 and null are treated as
    "not supplied" and leave the stored value untouched.

    Example:
        {"rating": 10}
    """

    title: str | None = Field(default=None, max_length=200)
    food: str | None = Field(default=None, max_length=200)
    content: str | None = None
    rating: int | None = Field(default=None, ge=MIN_RATING, le=MAX_RATING)

    def changes(self) -> dict[str, Any]:
        """Return only the fields that should overwrite stored values."""
        return {
            field: getattr(self, field)
            for field in REVIEW_UPDATABLE_FIELDS
            if getattr(self, field)
        }


class ReviewSummary(BaseModel):
    """A review in list views, without its comments."""

    id: str
    title: str
    food: str
    content: str
    rating: int

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "ReviewSummary":
        return cls(
            id=str(doc["_id"]),
            title=doc.get("title", ""),
            food=doc.get("food", ""),
            content=doc.get("content", ""),
            rating=doc.get("rating", 0),
        )


class Review(ReviewSummary):
    """A review in the detail view, with its comments in insertion order."""

    comments: list[Comment] = Field(default_factory=list)

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Review":
        summary = ReviewSummary.from_document(doc)
        return cls(
            **summary.model_dump(),
            comments=[Comment.from_document(c) for c in doc.get("comments", [])],
        )


class ReviewFilter(BaseModel):
    """
    Parsed list filter.

    Criteria are ANDed together; a None criterion adds no constraint.
    """

    title: str | None = None
    min_rating: int | None = None
