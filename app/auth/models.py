# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from core.services.token_service import TokenClaims


class AuthUser(BaseModel):
    """
    Authenticated user extracted from a verified access token.

    This is the identity available from the token itself,
    without querying the database.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    issued_at: datetime
    expires_at: datetime

    @classmethod
    def from_claims(cls, claims: TokenClaims) -> "AuthUser":
        return cls(
            id=claims.subject_id,
            email=claims.email,
            issued_at=claims.issued_at,
            expires_at=claims.expires_at,
        )


class TokenResponse(BaseModel):
    """Response body of POST /login."""
    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(..., alias="accessToken")
