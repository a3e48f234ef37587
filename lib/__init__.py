# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - mongo_client.py: Shared MongoDB client and index definitions
# - passwords.py: bcrypt password hashing
# - utils.py: Shared utilities (error base class, ObjectId parsing)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.mongo_client import (
    MongoDatabase,
    MongoClientError,
    REVIEWS_COLLECTION,
    USERS_COLLECTION,
)
from lib.passwords import hash_password, verify_password
from lib.utils import ApplicationError, parse_object_id

__all__ = [
    # MongoDB
    "MongoDatabase",
    "MongoClientError",
    "REVIEWS_COLLECTION",
    "USERS_COLLECTION",
    # Passwords
    "hash_password",
    "verify_password",
    # Utils
    "ApplicationError",
    "parse_object_id",
]
