# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides an in-memory MongoDB (mongomock) per test
# - Provides services, a controllable clock, and an API test client
# =============================================================================

import os
from datetime import datetime, timedelta, timezone

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("MONGODB_DB_NAME", "food_reviews_test")
os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_database, get_token_service
from app.main import app
from core.services import CommentService, ReviewService, TokenService, UserService
from lib.mongo_client import MongoDatabase

TEST_SECRET = "test-secret-key-0123456789"


# =============================================================================
# Clock
# =============================================================================

class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def db():
    """Fresh in-memory database with the production indexes."""
    database = mongomock.MongoClient()["food_reviews_test"]
    MongoDatabase.ensure_indexes(database)
    return database


@pytest.fixture
def review_service(db):
    return ReviewService(db)


@pytest.fixture
def comment_service(db):
    return CommentService(db)


@pytest.fixture
def user_service(db):
    return UserService(db)


@pytest.fixture
def clock():
    """Clock fixed at a known instant (whole seconds, like JWT claims)."""
    return FakeClock(datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def token_service(clock):
    return TokenService(secret=TEST_SECRET, lifetime=timedelta(hours=1), clock=clock)


@pytest.fixture
def client(db, token_service):
    """API client wired to the in-memory database and the fake clock."""
    app.dependency_overrides[get_database] = lambda: db
    app.dependency_overrides[get_token_service] = lambda: token_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_review_dict():
    """Sample review payload for testing."""
    return {
        "title": "Good steak at the SteakOut Restaurant",
        "food": "Ribeye Steak",
        "content": "The steak was perfectly prepared",
        "rating": 9,
    }
