# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# API endpoints for accounts and access tokens:
# - POST /users     register with email + password
# - POST /login     exchange credentials for a bearer token (1 hour)
# - GET  /user/{id} profile from the caller's token claims (protected)
# =============================================================================

import logging
from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Path
from pydantic import BaseModel

from app.auth.dependencies import get_current_user
from app.auth.models import AuthUser, TokenResponse
from app.dependencies import TokenServiceDep, UserServiceDep
from core.models.user import LoginRequest, UserCreate, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


class ProfileResponse(BaseModel):
    """Identity as carried by the caller's token."""
    id: str
    email: str
    issued_at: datetime
    expires_at: datetime


@router.post("/users", response_model=UserResponse)
def register_user(request: UserCreate, users: UserServiceDep) -> UserResponse:
    """
    Register a new user.

    The password is stored as a salted bcrypt hash.

    Raises:
        409: If the email is already registered
    """
    return users.create_user(request)


@router.post("/login", response_model=TokenResponse)
def login(
    request: LoginRequest,
    users: UserServiceDep,
    tokens: TokenServiceDep,
) -> TokenResponse:
    """
    Log in with email and password.

    Returns:
        {"accessToken": "<jwt>"} valid for one hour

    Raises:
        401: If the email/password pair is wrong
    """
    user = users.verify_credentials(request.email, request.password)
    logger.info(f"User logged in: {user.id}")
    return TokenResponse(access_token=tokens.issue(user.id, user.email))


@router.get("/user/{user_id}", response_model=ProfileResponse)
def get_profile(
    user_id: Annotated[str, Path(description="User id")],
    user: AuthUser = Depends(get_current_user),
) -> ProfileResponse:
    """
    Get the authenticated user's profile.

    The profile comes from the verified token claims, not the database,
    so a caller only ever sees their own identity whatever user_id says.

    Raises:
        403: If the token is missing, invalid or expired
    """
    return ProfileResponse(
        id=user.id,
        email=user.email,
        issued_at=user.issued_at,
        expires_at=user.expires_at,
    )
