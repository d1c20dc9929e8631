"""Authentication domain service."""

import logging
import re
from typing import Optional

import bcrypt

from expensetrack.database.base import Database
from expensetrack.domain.entities import UserIdentity
from expensetrack.domain.errors import (
    AuthenticationError,
    ConflictError,
    ValidationError,
    username_taken,
)

logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 4
MIN_PASSWORD_LENGTH = 8


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))


class AuthService:
    """Service for registering and authenticating users."""

    def __init__(self, db: Database):
        """Initialize auth service.

        Args:
            db: Database instance
        """
        self.db = db

    def register(
        self, username: str, password: str, password_confirm: str
    ) -> UserIdentity:
        """Register a new user.

        Args:
            username: At least 4 characters, not taken yet
            password: At least 8 characters, including a digit
            password_confirm: Must equal ``password``

        Returns:
            Identity of the new user

        Raises:
            ValidationError: If a registration rule is broken
            ConflictError: If the username is already taken
        """
        if len(username) < MIN_USERNAME_LENGTH:
            raise ValidationError(
                f"Username must be at least {MIN_USERNAME_LENGTH} characters long",
                field_errors={"username": "too short"},
            )
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
                field_errors={"password": "too short"},
            )
        if not re.search(r"\d", password):
            raise ValidationError(
                "Password must contain at least one number",
                field_errors={"password": "missing digit"},
            )
        if password != password_confirm:
            raise ValidationError(
                "Passwords do not match",
                field_errors={"password_confirm": "does not match"},
            )
        if self.db.get_user_by_username(username) is not None:
            raise ConflictError(username_taken(username))

        user_id = self.db.create_user(username, hash_password(password))
        logger.info("Registered user %s (%s)", user_id, username)
        return UserIdentity(id=user_id, username=username)

    def authenticate(self, username: str, password: str) -> UserIdentity:
        """Check credentials and return the matching identity.

        Raises:
            AuthenticationError: If a credential is missing or wrong
        """
        if not username:
            raise AuthenticationError("Username is required")
        if not password:
            raise AuthenticationError("Password is required")

        user = self.db.get_user_by_username(username)
        if user is None:
            raise AuthenticationError("No account found with this username")
        if not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt for user %s", user.id)
            raise AuthenticationError("Incorrect password")

        return user.to_identity()

    def get_identity(self, user_id: int) -> Optional[UserIdentity]:
        """Resolve a stored user ID back to an identity, if the user exists."""
        user = self.db.get_user(user_id)
        if user is None:
            return None
        return user.to_identity()
