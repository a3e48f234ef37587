# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# Registration and login payloads, plus the public view of a user.
# The stored document also carries "password_hash", which never leaves the
# service layer.
# =============================================================================

from typing import Any

from pydantic import BaseModel, EmailStr, Field, field_validator

from lib.passwords import BCRYPT_MAX_BYTES


class UserCreate(BaseModel):
    """
    Schema for registering a user.

    Example:
        {"email": "jane@example.com", "password": "correct horse battery"}
    """

    email: EmailStr
    password: str = Field(..., min_length=8)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        # bcrypt only reads the first 72 bytes, so longer passwords would collide
        if len(value.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes when UTF-8 encoded")
        return value


class LoginRequest(BaseModel):
    """Credentials exchanged for an access token."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """Public view of a user."""

    id: str
    email: str

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "UserResponse":
        return cls(id=str(doc["_id"]), email=doc["email"])
