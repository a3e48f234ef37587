# =============================================================================
# core/services/token_service.py - Access Token Issuing and Verification
# =============================================================================
# Issues and verifies signed, time-limited JWT access tokens (python-jose).
#
# Tokens carry: sub (user id), email, iat, exp. They are stateless - there is
# no revocation list and no refresh. Verification is pure computation: no I/O.
#
# The clock is injectable so expiry can be tested without sleeping.
# =============================================================================

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

from jose import JWTError, jwt
from jose.exceptions import JWTClaimsError

from lib.utils import ApplicationError

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_LIFETIME = timedelta(hours=1)


# =============================================================================
# Token Errors
# =============================================================================

class TokenError(ApplicationError):
    """Base class for every reason a token can be rejected."""


class InvalidSignatureError(TokenError):
    """The token was not signed with our secret, or was altered."""

    def __init__(self, reason: str = "Signature verification failed"):
        super().__init__(reason, code="INVALID_SIGNATURE")


class TokenExpiredError(TokenError):
    """The token's exp claim is in the past."""

    def __init__(self, expired_at: datetime):
        super().__init__(
            f"Token expired at {expired_at.isoformat()}",
            code="TOKEN_EXPIRED",
            suggestion="Log in again to get a new token",
            details={"expired_at": expired_at.isoformat()},
        )


class MalformedTokenError(TokenError):
    """The token can't be decoded into the expected claims."""

    def __init__(self, reason: str):
        super().__init__(reason, code="MALFORMED_TOKEN")


# =============================================================================
# Claims
# =============================================================================

@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified token."""

    subject_id: str
    email: str
    issued_at: datetime
    expires_at: datetime


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# Service
# =============================================================================

class TokenService:
    """
    Signs and verifies access tokens with a single process-wide secret.

    Example:
        tokens = TokenService(secret="...", lifetime=timedelta(hours=1))
        token = tokens.issue(user_id, "jane@example.com")
        claims = tokens.verify(token)   # TokenClaims or raises TokenError
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        lifetime: timedelta = DEFAULT_TOKEN_LIFETIME,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = lifetime
        self._clock = clock

    def issue(self, subject_id: str, email: str) -> str:
        """
        Produce a signed token for a user.

        Args:
            subject_id: The user's id (stored as the sub claim)
            email: The user's email

        Returns:
            Compact JWT string, valid for the configured lifetime
        """
        issued_at = self._clock()
        expires_at = issued_at + self._lifetime
        payload = {
            "sub": str(subject_id),
            "email": email,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        logger.debug(f"Issued token for user {subject_id}, expires {expires_at.isoformat()}")
        return token

    def verify(self, token: str) -> TokenClaims:
        """
        Check a token's structure, signature and expiry.

        Returns:
            TokenClaims decoded from the token

        Raises:
            MalformedTokenError: Token isn't a JWT or lacks required claims
            InvalidSignatureError: Signature doesn't match our secret
            TokenExpiredError: Current time is past the exp claim
        """
        # Structure first, so garbage input isn't reported as a bad signature
        try:
            jwt.get_unverified_claims(token)
        except JWTError as e:
            raise MalformedTokenError(f"Token could not be decoded: {e}")

        try:
            # Expiry is checked below against our own clock
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JWTClaimsError as e:
            # Signature was fine; a registered claim has the wrong type
            raise MalformedTokenError(f"Token has invalid claims: {e}")
        except JWTError as e:
            raise InvalidSignatureError(str(e))

        claims = self._parse_claims(payload)

        if self._clock() >= claims.expires_at:
            raise TokenExpiredError(claims.expires_at)

        return claims

    @staticmethod
    def _parse_claims(payload: dict[str, Any]) -> TokenClaims:
        subject_id = payload.get("sub")
        email = payload.get("email")
        issued_at = payload.get("iat")
        expires_at = payload.get("exp")

        if not subject_id or not isinstance(subject_id, str):
            raise MalformedTokenError("Token is missing the 'sub' claim")
        if not email or not isinstance(email, str):
            raise MalformedTokenError("Token is missing the 'email' claim")
        if not isinstance(issued_at, int) or not isinstance(expires_at, int):
            raise MalformedTokenError("Token has missing or non-numeric 'iat'/'exp' claims")

        return TokenClaims(
            subject_id=subject_id,
            email=email,
            issued_at=datetime.fromtimestamp(issued_at, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(expires_at, tz=timezone.utc),
        )
