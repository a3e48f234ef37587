# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Gatekeeping for protected routes.
#
# authorize() is the plain check: credentials in, AuthUser out, or one of
#   MissingCredentialError (no "Authorization: Bearer <token>" header)  -> 403
#   InvalidTokenError      (bad signature, expired, or malformed token) -> 403
# get_current_user() adapts it to FastAPI's Depends().
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.auth.models import AuthUser
from app.dependencies import TokenServiceDep
from app.exceptions import InvalidTokenError, MissingCredentialError
from core.services.token_service import TokenError, TokenService

logger = logging.getLogger(__name__)

# HTTP Bearer token extractor; a missing header is reported by authorize()
security = HTTPBearer(auto_error=False)


def authorize(
    credentials: Optional[HTTPAuthorizationCredentials],
    token_service: TokenService,
) -> AuthUser:
    """
    Verify bearer credentials and return the caller's identity.

    Args:
        credentials: Parsed Authorization header, or None if absent
        token_service: Verifier for the token

    Returns:
        AuthUser: Identity from the token claims

    Raises:
        MissingCredentialError: No bearer token was sent
        InvalidTokenError: The token failed verification
    """
    if credentials is None or not credentials.credentials:
        raise MissingCredentialError()

    try:
        claims = token_service.verify(credentials.credentials)
    except TokenError as e:
        # The client only learns "invalid token"; the reason stays in the log
        logger.warning(f"Token rejected: {e.code}")
        raise InvalidTokenError()

    logger.debug(f"Authenticated user: {claims.subject_id}")
    return AuthUser.from_claims(claims)


def get_current_user(
    token_service: TokenServiceDep,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    FastAPI dependency for protected routes.

    Returns:
        AuthUser: The authenticated user

    Raises:
        MissingCredentialError: 403 if no token is provided
        InvalidTokenError: 403 if the token is invalid or expired
    """
    return authorize(credentials, token_service)
