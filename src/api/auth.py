"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user, get_identity_verifier
from src.database import get_db
from src.exceptions import InvalidInputError, UnauthenticatedError
from src.models.user import User
from src.schemas.auth import AuthResponse, FederatedLogin, UserLogin, UserRegister, UserResponse
from src.services.auth import (
    authenticate_user,
    create_access_token,
    create_user,
    federated_login,
)
from src.services.federated import GoogleIdentityVerifier

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def build_auth_response(user: User) -> AuthResponse:
    """Issue a token for ``user`` and wrap it with the public profile."""
    return AuthResponse(
        access_token=create_access_token(user.id, user.email),
        user=UserResponse.model_validate(user),
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    if not user_data.name.strip():
        raise InvalidInputError("Name must not be blank")
    user = create_user(db, user_data.name, user_data.email, user_data.password)
    return build_auth_response(user)


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)

    if not user:
        raise UnauthenticatedError("Invalid email or password")

    return build_auth_response(user)


@router.post("/federated", response_model=AuthResponse)
async def login_federated(
    body: FederatedLogin,
    db: Annotated[Session, Depends(get_db)],
    verifier: Annotated[GoogleIdentityVerifier, Depends(get_identity_verifier)],
):
    """Sign in with a Google ID token, creating or linking the account."""
    identity = await verifier.verify(body.id_token)
    if identity is None:
        raise UnauthenticatedError("Could not verify Google identity")

    user = federated_login(db, identity)
    return build_auth_response(user)


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user
