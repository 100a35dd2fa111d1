"""Tests for the authentication service."""

import pytest

from src.exceptions import ConflictError
from src.models.user import User
from src.services.auth import (
    FederatedIdentity,
    authenticate_user,
    create_access_token,
    create_user,
    decode_access_token,
    federated_login,
    get_password_hash,
    verify_password,
)


def test_password_hash_is_salted():
    """Test that hashing the same password twice gives different hashes."""
    first = get_password_hash("hunter2hunter2")
    second = get_password_hash("hunter2hunter2")
    assert first != second
    assert verify_password("hunter2hunter2", first)
    assert verify_password("hunter2hunter2", second)
    assert not verify_password("wrong-password", first)


def test_token_round_trip():
    """Test that a token decodes back to its claims."""
    token = create_access_token(42, "fan@example.com")
    payload = decode_access_token(token)
    assert payload["sub"] == "42"
    assert payload["email"] == "fan@example.com"
    assert "exp" in payload


def test_decode_rejects_tampered_token():
    """Test that changing a token invalidates it."""
    token = create_access_token(1, "fan@example.com")
    tampered = token[:-2] + ("aa" if not token.endswith("aa") else "bb")
    assert decode_access_token(tampered) is None
    assert decode_access_token("") is None


def test_create_user_duplicate_email(db):
    """Test that a duplicate email raises a conflict."""
    create_user(db, "First", "dup@example.com", "password123")
    with pytest.raises(ConflictError):
        create_user(db, "Second", "dup@example.com", "password456")
    assert db.query(User).filter(User.email == "dup@example.com").count() == 1


def test_email_is_case_sensitive_as_stored(db):
    """Test that lookup does not fold case."""
    create_user(db, "Case", "Case@example.com", "password123")
    assert authenticate_user(db, "Case@example.com", "password123") is not None
    assert authenticate_user(db, "case@example.com", "password123") is None


def test_authenticate_unknown_email(db):
    """Test that an unknown email does not authenticate."""
    assert authenticate_user(db, "ghost@example.com", "password123") is None


def test_federated_login_creates_user(db):
    """Test that a first Google sign-in creates a password-less account."""
    identity = FederatedIdentity(subject="google-123", email="fed@example.com", name="Fed User")
    user = federated_login(db, identity)

    assert user.id is not None
    assert user.name == "Fed User"
    assert user.google_id == "google-123"
    assert user.password_hash is None


def test_federated_only_account_cannot_password_login(db):
    """Test that an account without a password rejects password logins."""
    federated_login(db, FederatedIdentity(subject="google-1", email="nopass@example.com"))
    assert authenticate_user(db, "nopass@example.com", "anything") is None


def test_federated_login_links_existing_account(db):
    """Test that Google sign-in attaches to an existing password account."""
    existing = create_user(db, "Linked", "link@example.com", "password123")

    user = federated_login(db, FederatedIdentity(subject="google-456", email="link@example.com"))

    assert user.id == existing.id
    assert user.google_id == "google-456"
    # Password login keeps working after linking
    assert authenticate_user(db, "link@example.com", "password123") is not None


def test_federated_login_is_idempotent(db):
    """Test that signing in again with a linked account changes nothing."""
    identity = FederatedIdentity(subject="google-789", email="again@example.com")
    first = federated_login(db, identity)
    second = federated_login(db, identity)

    assert first.id == second.id
    assert db.query(User).filter(User.email == "again@example.com").count() == 1


def test_federated_login_after_google_email_change(db):
    """Test that a linked Google account is found by subject when its email changes."""
    original = federated_login(db, FederatedIdentity(subject="google-moved", email="old@example.com"))

    user = federated_login(db, FederatedIdentity(subject="google-moved", email="new@example.com"))

    assert user.id == original.id
    assert user.email == "old@example.com"
    assert db.query(User).filter(User.google_id == "google-moved").count() == 1
    assert db.query(User).filter(User.email == "new@example.com").count() == 0


def test_federated_login_subject_linked_elsewhere(db):
    """Test that a subject already linked to one account is not attached to another."""
    linked = federated_login(db, FederatedIdentity(subject="google-taken", email="first@example.com"))
    password_account = create_user(db, "Second", "second@example.com", "password123")

    user = federated_login(
        db, FederatedIdentity(subject="google-taken", email="second@example.com")
    )

    assert user.id == linked.id
    db.refresh(password_account)
    assert password_account.google_id is None


def test_federated_login_unique_violation_is_conflict(db, monkeypatch):
    """Test that a Google id taken between lookup and commit becomes a conflict."""
    federated_login(db, FederatedIdentity(subject="google-race", email="winner@example.com"))
    # Hide the linked row from the subject lookup so the insert collides
    monkeypatch.setattr("src.services.auth.get_user_by_google_id", lambda db, google_id: None)

    with pytest.raises(ConflictError):
        federated_login(db, FederatedIdentity(subject="google-race", email="loser@example.com"))
    assert db.query(User).filter(User.email == "loser@example.com").count() == 0
