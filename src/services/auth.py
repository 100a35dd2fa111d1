"""Authentication service for JWT and password handling."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.exceptions import ConflictError
from src.models.user import User

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=12)


@dataclass
class FederatedIdentity:
    """Identity claims taken from a verified Google ID token."""

    subject: str
    email: str
    name: str | None = None


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, email: str) -> str:
    """Create a JWT access token."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token.

    Malformed, expired and foreign-signed tokens all yield None.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError:
        return None


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user or not user.password_hash:
        # Burn the same time as a real check so unknown emails are not detectable
        pwd_context.dummy_verify()
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def create_user(db: Session, name: str, email: str, password: str) -> User:
    """Create a new user.

    Relies on the unique constraint on email instead of checking first.
    """
    hashed_password = get_password_hash(password)
    user = User(name=name, email=email, password_hash=hashed_password)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Email already registered") from None
    db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user


def get_user_by_google_id(db: Session, google_id: str) -> User | None:
    """Get a user by linked Google account id."""
    return db.query(User).filter(User.google_id == google_id).first()


def _find_federated_user(db: Session, identity: FederatedIdentity) -> User | None:
    return get_user_by_google_id(db, identity.subject) or get_user_by_email(db, identity.email)


def federated_login(db: Session, identity: FederatedIdentity) -> User:
    """Find or create the account for a verified Google identity.

    The Google subject wins over the email, so an account stays reachable
    after its Google email changes. An existing password account with the
    same email gets the Google id attached. Signing in again with an already
    linked account is a no-op.
    """
    user = get_user_by_google_id(db, identity.subject)
    if user is not None:
        return user

    user = get_user_by_email(db, identity.email)
    if user is None:
        user = User(
            name=identity.name or identity.email.split("@")[0],
            email=identity.email,
            google_id=identity.subject,
        )
        db.add(user)
        action = "Created user from"
    elif user.google_id is None:
        user.google_id = identity.subject
        action = "Linked user to"
    else:
        # Email already linked to another Google account; keep that link
        return user

    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent sign-in; use the winner's row
        db.rollback()
        user = _find_federated_user(db, identity)
        if user is None:
            raise ConflictError("Google account could not be linked") from None
        return user

    db.refresh(user)
    logger.info(f"{action} Google sign-in: user {user.id}")
    return user
