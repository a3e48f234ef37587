# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Registration and credential checks against the "users" collection.
# Passwords are stored as bcrypt hashes (lib/passwords.py); emails are unique,
# enforced by the index in lib/mongo_client.py.
# =============================================================================

import logging
from typing import Any

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from lib.mongo_client import USERS_COLLECTION
from lib.passwords import hash_password, verify_password
from core.models.user import UserCreate, UserResponse
from app.exceptions import EmailAlreadyRegisteredError, InvalidCredentialsError

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


class UserService:
    """Service for user accounts."""

    def __init__(self, db: Database):
        self._users = db[USERS_COLLECTION]

    def create_user(self, data: UserCreate) -> UserResponse:
        """
        Register a user.

        Returns:
            The created user (id and email only)

        Raises:
            EmailAlreadyRegisteredError: If the email is taken
        """
        email = _normalize_email(data.email)
        doc: dict[str, Any] = {
            "email": email,
            "password_hash": hash_password(data.password),
        }

        try:
            result = self._users.insert_one(doc)
        except DuplicateKeyError:
            logger.warning(f"Registration rejected, email already in use: {email}")
            raise EmailAlreadyRegisteredError(email)
        except PyMongoError as e:
            logger.error(f"Failed to create user: {e}")
            raise

        doc["_id"] = result.inserted_id
        logger.info(f"Created user: {result.inserted_id}")
        return UserResponse.from_document(doc)

    def verify_credentials(self, email: str, password: str) -> UserResponse:
        """
        Check an email/password pair.

        Unknown email and wrong password fail the same way, so callers
        can't tell which accounts exist.

        Raises:
            InvalidCredentialsError: If the pair doesn't match a user
        """
        email = _normalize_email(email)
        try:
            doc = self._users.find_one({"email": email})
        except PyMongoError as e:
            logger.error(f"Failed to look up user {email}: {e}")
            raise

        if not doc or not verify_password(password, doc.get("password_hash", "")):
            logger.warning(f"Failed login attempt for {email}")
            raise InvalidCredentialsError()

        return UserResponse.from_document(doc)
