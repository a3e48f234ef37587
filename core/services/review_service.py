# =============================================================================
# core/services/review_service.py - Review Business Logic
# =============================================================================
# Handles review CRUD and filtered listing against the "reviews" collection.
# Separates HTTP concerns from database/business logic.
#
# Filters are built from typed values only: the title criterion is escaped
# before it becomes a regex, and min_rating must parse as an integer.
# =============================================================================

import logging
import re
from typing import Any

from pymongo import ASCENDING, ReturnDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError

from lib.mongo_client import REVIEWS_COLLECTION
from lib.utils import parse_object_id
from core.models.review import (
    Review,
    ReviewCreate,
    ReviewFilter,
    ReviewSummary,
    ReviewUpdate,
)
from app.exceptions import InvalidQueryParameterError, ReviewNotFoundError

logger = logging.getLogger(__name__)

# List views never carry comments; a review can hold any number of them
LIST_PROJECTION = {"comments": 0}

# Largest integers BSON can encode
BSON_INT64_MIN = -(2 ** 63)
BSON_INT64_MAX = 2 ** 63 - 1


def parse_review_filter(
    title: str | None = None,
    min_rating: str | None = None,
) -> ReviewFilter:
    """
    Turn raw query-string values into a ReviewFilter.

    Blank values count as absent.

    Raises:
        InvalidQueryParameterError: If min_rating isn't an integer that
            fits in 64 bits
    """
    title = title.strip() if title else None
    min_rating = min_rating.strip() if min_rating else None

    rating: int | None = None
    if min_rating:
        try:
            rating = int(min_rating)
        except ValueError:
            raise InvalidQueryParameterError("min_rating", min_rating, "a whole number such as 7")
        if not BSON_INT64_MIN <= rating <= BSON_INT64_MAX:
            raise InvalidQueryParameterError("min_rating", min_rating, "a whole number such as 7")

    return ReviewFilter(title=title or None, min_rating=rating)


def build_review_query(review_filter: ReviewFilter) -> dict[str, Any]:
    """
    Build the MongoDB query for a filter.

    Example:
        build_review_query(ReviewFilter(title="steak", min_rating=7))
        # {"title": {"$regex": "steak", "$options": "i"}, "rating": {"$gte": 7}}
    """
    query: dict[str, Any] = {}
    if review_filter.title:
        query["title"] = {"$regex": re.escape(review_filter.title), "$options": "i"}
    if review_filter.min_rating is not None:
        query["rating"] = {"$gte": review_filter.min_rating}
    return query


class ReviewService:
    """
    Service for review documents.

    Provides a clean interface between API routes and database.
    """

    def __init__(self, db: Database):
        self._reviews = db[REVIEWS_COLLECTION]

    def list_reviews(self, review_filter: ReviewFilter | None = None) -> list[ReviewSummary]:
        """
        List reviews matching a filter, without comments.

        Args:
            review_filter: Optional criteria; None lists every review

        Returns:
            Review summaries ordered by id (creation order)
        """
        query = build_review_query(review_filter or ReviewFilter())

        try:
            cursor = self._reviews.find(query, LIST_PROJECTION).sort("_id", ASCENDING)
            reviews = [ReviewSummary.from_document(doc) for doc in cursor]
        except PyMongoError as e:
            logger.error(f"Failed to list reviews: {e}")
            raise

        logger.debug(f"Listed {len(reviews)} reviews for query {query}")
        return reviews

    def create_review(self, data: ReviewCreate) -> Review:
        """
        Insert a new review with an empty comment list.

        Returns:
            The created review, including its generated id
        """
        doc = {**data.model_dump(), "comments": []}

        try:
            result = self._reviews.insert_one(doc)
        except PyMongoError as e:
            logger.error(f"Failed to create review: {e}")
            raise

        doc["_id"] = result.inserted_id
        logger.info(f"Created review: {result.inserted_id}")
        return Review.from_document(doc)

    def get_review(self, review_id: str) -> Review:
        """
        Get a review by id, including its comments.

        Raises:
            ReviewNotFoundError: If no review has this id
        """
        oid = parse_object_id(review_id)
        if oid is None:
            raise ReviewNotFoundError(review_id)

        try:
            doc = self._reviews.find_one({"_id": oid})
        except PyMongoError as e:
            logger.error(f"Failed to fetch review {review_id}: {e}")
            raise

        if not doc:
            raise ReviewNotFoundError(review_id)

        return Review.from_document(doc)

    def update_review(self, review_id: str, update: ReviewUpdate) -> Review:
        """
        Sparse update of a review.

        Only truthy fields in the update are written; everything else keeps
        its stored value. The write is a single find_one_and_update, so two
        concurrent updates to different fields can't undo each other.

        Args:
            review_id: The review id
            update: Partial fields

        Returns:
            The review after the update

        Raises:
            ReviewNotFoundError: If no review has this id
        """
        oid = parse_object_id(review_id)
        if oid is None:
            raise ReviewNotFoundError(review_id)

        changes = update.changes()
        if not changes:
            return self.get_review(review_id)  # Nothing to update

        try:
            doc = self._reviews.find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"Failed to update review {review_id}: {e}")
            raise

        if not doc:
            raise ReviewNotFoundError(review_id)

        logger.info(f"Updated review {review_id}: {sorted(changes)}")
        return Review.from_document(doc)

    def delete_review(self, review_id: str) -> None:
        """
        Delete a review and every comment embedded in it.

        Raises:
            ReviewNotFoundError: If no review has this id
        """
        oid = parse_object_id(review_id)
        if oid is None:
            raise ReviewNotFoundError(review_id)

        try:
            result = self._reviews.delete_one({"_id": oid})
        except PyMongoError as e:
            logger.error(f"Failed to delete review {review_id}: {e}")
            raise

        if result.deleted_count == 0:
            raise ReviewNotFoundError(review_id)

        logger.info(f"Deleted review: {review_id}")
