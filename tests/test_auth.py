"""Tests for registration and login."""

import pytest

from expensetrack.domain.auth import AuthService, hash_password, verify_password
from expensetrack.domain.entities import UserIdentity
from expensetrack.domain.errors import (
    AuthenticationError,
    ConflictError,
    ValidationError,
)


@pytest.fixture
def auth_service(temp_db):
    return AuthService(temp_db)


def test_hash_round_trip():
    hashed = hash_password("secret123")

    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("secret124", hashed)


def test_register_stores_hashed_password(auth_service, temp_db):
    identity = auth_service.register("carol", "secret123", "secret123")

    assert identity == UserIdentity(id=identity.id, username="carol")
    user = temp_db.get_user_by_username("carol")
    assert user.id == identity.id
    assert user.password_hash != "secret123"


@pytest.mark.parametrize(
    "username, password, confirm, message",
    [
        ("bob", "secret123", "secret123", "Username must be at least 4 characters long"),
        ("carol", "short1", "short1", "Password must be at least 8 characters long"),
        ("carol", "nodigitshere", "nodigitshere", "Password must contain at least one number"),
        ("carol", "secret123", "secret124", "Passwords do not match"),
    ],
)
def test_register_rules(auth_service, username, password, confirm, message):
    with pytest.raises(ValidationError, match=message):
        auth_service.register(username, password, confirm)


def test_register_taken_username(auth_service):
    auth_service.register("carol", "secret123", "secret123")

    with pytest.raises(ConflictError):
        auth_service.register("carol", "other4567", "other4567")


def test_authenticate(auth_service):
    registered = auth_service.register("carol", "secret123", "secret123")

    assert auth_service.authenticate("carol", "secret123") == registered


@pytest.mark.parametrize(
    "username, password, message",
    [
        ("", "secret123", "Username is required"),
        ("carol", "", "Password is required"),
        ("nobody", "secret123", "No account found with this username"),
        ("carol", "wrong1234", "Incorrect password"),
    ],
)
def test_authenticate_failures(auth_service, username, password, message):
    auth_service.register("carol", "secret123", "secret123")

    with pytest.raises(AuthenticationError) as excinfo:
        auth_service.authenticate(username, password)

    assert str(excinfo.value) == message


def test_get_identity(auth_service, sample_user):
    assert auth_service.get_identity(sample_user.id) == sample_user
    assert auth_service.get_identity(9999) is None
