# =============================================================================
# app/routers/reviews.py - Review CRUD Endpoints
# =============================================================================
# Handles review listing, creation, sparse update and deletion, plus adding
# a comment to a review. Comments are edited through app/routers/comments.py.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Query
from pydantic import BaseModel, Field

from app.dependencies import CommentServiceDep, ReviewServiceDep
from core.models.review import (
    Comment,
    CommentCreate,
    Review,
    ReviewCreate,
    ReviewSummary,
    ReviewUpdate,
)
from core.services.review_service import parse_review_filter

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class ReviewCreateResponse(BaseModel):
    """Response when creating a review."""
    message: str = Field(default="Review created successfully")
    id: str = Field(..., examples=["65a1f0c2e4b0a1b2c3d4e5f6"])
    review: Review


class ReviewDeleteResponse(BaseModel):
    """Response when deleting a review."""
    message: str = Field(default="Review deleted successfully")
    id: str


class CommentCreateResponse(BaseModel):
    """Response when adding a comment."""
    message: str = Field(default="Comment added successfully")
    review_id: str
    comment: Comment


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=list[ReviewSummary])
def list_reviews(
    reviews: ReviewServiceDep,
    title: Annotated[str | None, Query(description="Case-insensitive text the title must contain")] = None,
    # Taken as text so a bad value gets our 400 instead of a generic 422
    min_rating: Annotated[str | None, Query(description="Only reviews rated at least this")] = None,
):
    """
    List reviews.

    Comments are left out; fetch a single review to see them.
    Filters combine with AND; omitted filters match everything.
    """
    return reviews.list_reviews(parse_review_filter(title=title, min_rating=min_rating))


@router.post("", response_model=ReviewCreateResponse)
def create_review(request: ReviewCreate, reviews: ReviewServiceDep):
    """
    Create a review.

    Returns the generated id along with the stored review.
    """
    review = reviews.create_review(request)
    return ReviewCreateResponse(id=review.id, review=review)


@router.get("/{review_id}", response_model=Review)
def get_review(
    review_id: Annotated[str, Path(description="Review id")],
    reviews: ReviewServiceDep,
):
    """Get a review with all of its comments."""
    return reviews.get_review(review_id)


@router.put("/{review_id}", response_model=Review)
def update_review(
    review_id: Annotated[str, Path(description="Review id")],
    request: ReviewUpdate,
    reviews: ReviewServiceDep,
):
    """
    Update a review.

    Only non-empty fields are changed; anything omitted, empty or 0
    keeps its current value.
    """
    return reviews.update_review(review_id, request)


@router.delete("/{review_id}", response_model=ReviewDeleteResponse)
def delete_review(
    review_id: Annotated[str, Path(description="Review id")],
    reviews: ReviewServiceDep,
):
    """Delete a review together with its comments."""
    reviews.delete_review(review_id)
    return ReviewDeleteResponse(id=review_id)


@router.post("/{review_id}/comments", response_model=CommentCreateResponse)
def add_comment(
    review_id: Annotated[str, Path(description="Review id")],
    request: CommentCreate,
    comments: CommentServiceDep,
):
    """Add a comment to the end of a review's comment list."""
    comment = comments.add_comment(review_id, request)
    return CommentCreateResponse(review_id=review_id, comment=comment)
