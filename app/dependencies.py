# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# This is the only place that reads settings on behalf of the services:
# each service gets its database handle or secret through its constructor.
# Tests override get_database / get_token_service via app.dependency_overrides.
# =============================================================================

from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from pymongo.database import Database

from app.config import settings
from lib.mongo_client import MongoDatabase
from core.services import CommentService, ReviewService, TokenService, UserService


def get_database() -> Database:
    """
    Get the MongoDB database handle.

    Returns the database from the shared client.
    """
    return MongoDatabase.get_database()


@lru_cache
def get_token_service() -> TokenService:
    """Get the process-wide token service, built once from settings."""
    return TokenService(
        secret=settings.SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        lifetime=timedelta(seconds=settings.access_token_lifetime_seconds),
    )


# Type aliases for dependency injection
DatabaseDep = Annotated[Database, Depends(get_database)]
TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]


def get_review_service(db: DatabaseDep) -> ReviewService:
    return ReviewService(db)


def get_comment_service(db: DatabaseDep) -> CommentService:
    return CommentService(db)


def get_user_service(db: DatabaseDep) -> UserService:
    return UserService(db)


ReviewServiceDep = Annotated[ReviewService, Depends(get_review_service)]
CommentServiceDep = Annotated[CommentService, Depends(get_comment_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
