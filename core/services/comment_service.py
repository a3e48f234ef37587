# =============================================================================
# core/services/comment_service.py - Comment Business Logic
# =============================================================================
# Comments live inside their review's "comments" array. They have no
# collection of their own, so every operation is a single-document array
# update on the reviews collection:
#   add    -> $push onto the parent review
#   update -> $set on the element matched by comments._id (positional $)
#   delete -> $pull of the element with that _id
#
# Comment ids are globally unique, and update/delete address a comment
# without its review id. That lookup is a query across all reviews on the
# nested comments._id field, backed by the index created in lib/mongo_client.py.
# =============================================================================

import logging

from bson import ObjectId
from pymongo.database import Database
from pymongo.errors import PyMongoError

from lib.mongo_client import REVIEWS_COLLECTION
from lib.utils import parse_object_id
from core.models.review import Comment, CommentCreate, CommentUpdate
from app.exceptions import CommentNotFoundError, ReviewNotFoundError

logger = logging.getLogger(__name__)


class CommentService:
    """
    Service for comments embedded in reviews.

    Never reads a review to rewrite it; each call is one atomic update.
    """

    def __init__(self, db: Database):
        self._reviews = db[REVIEWS_COLLECTION]

    def add_comment(self, review_id: str, data: CommentCreate) -> Comment:
        """
        Append a comment to a review.

        Args:
            review_id: The parent review id
            data: Comment content and nickname

        Returns:
            The new comment with its generated id

        Raises:
            ReviewNotFoundError: If the review doesn't exist (no orphan is created)
        """
        oid = parse_object_id(review_id)
        if oid is None:
            raise ReviewNotFoundError(review_id)

        comment = {"_id": ObjectId(), "content": data.content, "nickname": data.nickname}

        try:
            result = self._reviews.update_one(
                {"_id": oid},
                {"$push": {"comments": comment}},
            )
        except PyMongoError as e:
            logger.error(f"Failed to add comment to review {review_id}: {e}")
            raise

        if result.matched_count == 0:
            raise ReviewNotFoundError(review_id)

        logger.info(f"Added comment {comment['_id']} to review {review_id}")
        return Comment.from_document(comment)

    def update_comment(self, comment_id: str, data: CommentUpdate) -> int:
        """
        Rewrite a comment's content and nickname, keeping its id.

        Returns:
            Number of comments modified (0 if the values were unchanged)

        Raises:
            CommentNotFoundError: If no review contains this comment
        """
        oid = parse_object_id(comment_id)
        if oid is None:
            raise CommentNotFoundError(comment_id)

        try:
            result = self._reviews.update_one(
                {"comments._id": oid},
                {"$set": {
                    "comments.$.content": data.content,
                    "comments.$.nickname": data.nickname,
                }},
            )
        except PyMongoError as e:
            logger.error(f"Failed to update comment {comment_id}: {e}")
            raise

        if result.matched_count == 0:
            raise CommentNotFoundError(comment_id)

        logger.info(f"Updated comment: {comment_id}")
        return result.modified_count

    def delete_comment(self, comment_id: str) -> None:
        """
        Remove a comment from whichever review holds it.

        Raises:
            CommentNotFoundError: If no review contains this comment
        """
        oid = parse_object_id(comment_id)
        if oid is None:
            raise CommentNotFoundError(comment_id)

        try:
            result = self._reviews.update_one(
                {"comments._id": oid},
                {"$pull": {"comments": {"_id": oid}}},
            )
        except PyMongoError as e:
            logger.error(f"Failed to delete comment {comment_id}: {e}")
            raise

        if result.matched_count == 0:
            raise CommentNotFoundError(comment_id)

        logger.info(f"Deleted comment: {comment_id}")
