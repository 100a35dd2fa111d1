"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.exceptions import InvalidTokenError, UnauthenticatedError
from src.models.user import User
from src.services.auth import decode_access_token
from src.services.cart_service import CartService
from src.services.catalog_service import CatalogService
from src.services.dish_service import DishService
from src.services.federated import GoogleIdentityVerifier
from src.services.preference_service import PreferenceService
from src.services.reference_service import ReferenceService
from src.services.saved_dish_service import SavedDishService
from src.services.saved_item_service import SavedItemService

# auto_error=False so a missing header is a 401 and a bad token a 403
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from JWT token."""
    if credentials is None:
        raise UnauthenticatedError()

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise InvalidTokenError()

    user_id = payload.get("sub")
    if user_id is None or not str(user_id).isdigit():
        raise InvalidTokenError()

    user = db.get(User, int(user_id))
    if user is None:
        raise InvalidTokenError("User no longer exists", user_id=user_id)

    return user


def get_cart_service(db: Annotated[Session, Depends(get_db)]) -> CartService:
    """Get cart service."""
    return CartService(db)


def get_saved_item_service(db: Annotated[Session, Depends(get_db)]) -> SavedItemService:
    """Get saved item service."""
    return SavedItemService(db)


def get_preference_service(db: Annotated[Session, Depends(get_db)]) -> PreferenceService:
    """Get preference service."""
    return PreferenceService(db)


def get_saved_dish_service(db: Annotated[Session, Depends(get_db)]) -> SavedDishService:
    """Get saved dish service."""
    return SavedDishService(db)


def get_catalog_service(db: Annotated[Session, Depends(get_db)]) -> CatalogService:
    """Get catalog service."""
    return CatalogService(db)


def get_reference_service(db: Annotated[Session, Depends(get_db)]) -> ReferenceService:
    """Get reference entity service."""
    return ReferenceService(db)


def get_dish_service() -> DishService:
    """Get dish lookup service."""
    return DishService()


def get_identity_verifier() -> GoogleIdentityVerifier:
    """Get Google ID token verifier."""
    return GoogleIdentityVerifier()
