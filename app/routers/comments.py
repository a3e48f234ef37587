# =============================================================================
# app/routers/comments.py - Comment Endpoints
# =============================================================================
# Edit and delete comments by their own id; the parent review is found by
# the service. Comments are created under POST /reviews/{id}/comments.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path
from pydantic import BaseModel, Field

from app.dependencies import CommentServiceDep
from core.models.review import CommentUpdate

router = APIRouter()


class CommentUpdateResponse(BaseModel):
    """Response when updating a comment."""
    message: str = Field(default="Comment updated successfully")
    comment_id: str
    modified_count: int


class CommentDeleteResponse(BaseModel):
    """Response when deleting a comment."""
    message: str = Field(default="Comment deleted successfully")
    comment_id: str


@router.put("/{comment_id}", response_model=CommentUpdateResponse)
def update_comment(
    comment_id: Annotated[str, Path(description="Comment id")],
    request: CommentUpdate,
    comments: CommentServiceDep,
):
    """Replace a comment's content and nickname. Its id never changes."""
    modified = comments.update_comment(comment_id, request)
    return CommentUpdateResponse(comment_id=comment_id, modified_count=modified)


@router.delete("/{comment_id}", response_model=CommentDeleteResponse)
def delete_comment(
    comment_id: Annotated[str, Path(description="Comment id")],
    comments: CommentServiceDep,
):
    """Remove a comment from the review that holds it."""
    comments.delete_comment(comment_id)
    return CommentDeleteResponse(comment_id=comment_id)
