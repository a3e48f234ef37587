# =============================================================================
# lib/mongo_client.py - MongoDB Client Wrapper
# =============================================================================
# This module provides a thin wrapper around pymongo.
# It implements the singleton pattern to reuse a single client connection
# (pymongo pools connections internally) and owns the index definitions the
# repositories rely on:
# - users.email (unique) so two accounts can't share an email
# - reviews.comments._id so comment lookups by id don't scan every review
#
# Usage:
#   from lib.mongo_client import MongoDatabase
#   db = MongoDatabase.get_database()
#   db[REVIEWS_COLLECTION].find_one(...)
# =============================================================================

from __future__ import annotations

import logging
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.config import settings
from lib.utils import ApplicationError

# Set up logging for this module
logger = logging.getLogger(__name__)

REVIEWS_COLLECTION = "reviews"
USERS_COLLECTION = "users"


class MongoClientError(ApplicationError):
    """Error while creating or preparing the MongoDB connection."""


class MongoDatabase:
    """
    Process-wide access to the MongoDB database.

    All methods are class methods for easy access without instantiation.
    The client is created lazily on first use and shared by every request.

    Example:
        db = MongoDatabase.get_database()
        MongoDatabase.ensure_indexes(db)
    """

    _client: MongoClient | None = None

    @classmethod
    def get_client(cls) -> MongoClient:
        """
        Get or create the singleton MongoClient.

        Returns:
            MongoClient: pymongo client instance

        Raises:
            MongoClientError: If client creation fails
        """
        if cls._client is None:
            try:
                cls._client = MongoClient(
                    settings.MONGODB_URI,
                    serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
                    tz_aware=True,
                )
                logger.info("MongoDB client initialized successfully")
            except (PyMongoError, ValueError) as e:
                raise MongoClientError(
                    message=f"Failed to create MongoDB client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check MONGODB_URI in your .env file"
                )
        return cls._client

    @classmethod
    def get_database(cls) -> Database:
        """Get the configured application database."""
        return cls.get_client()[settings.MONGODB_DB_NAME]

    @classmethod
    def ensure_indexes(cls, db: Database) -> None:
        """
        Create the indexes the repositories depend on.

        Safe to call on every startup; MongoDB ignores indexes that
        already exist with the same definition.

        Raises:
            MongoClientError: If the server rejects an index
        """
        try:
            db[USERS_COLLECTION].create_index(
                [("email", ASCENDING)], unique=True, name="email_unique"
            )
            db[REVIEWS_COLLECTION].create_index(
                [("comments._id", ASCENDING)], name="comment_id"
            )
            logger.info(f"Indexes ensured on database {db.name}")
        except PyMongoError as e:
            raise MongoClientError(
                message=f"Failed to create indexes: {e}",
                code="INDEX_CREATION_FAILED",
                suggestion="Remove duplicate user emails before starting the API",
                details={"database": db.name}
            )

    @classmethod
    def ping(cls) -> bool:
        """Return True if the server answers a ping."""
        try:
            cls.get_client().admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    @classmethod
    def close(cls) -> None:
        """Close the shared client, if one was created."""
        if cls._client is not None:
            cls._client.close()
            cls._client = None
            logger.info("MongoDB client closed")
