"""Shared domain error messages and error types."""

from typing import Iterable, Mapping, Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic.

    ``field_errors`` maps a field name to the reason it was rejected when the
    error concerns a form-like input.
    """

    def __init__(
        self, message: str, field_errors: Optional[Mapping[str, str]] = None
    ):
        super().__init__(message)
        self.field_errors = dict(field_errors or {})


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class AccessDeniedError(DomainError):
    """Acting user does not own the requested entity."""


class AuthenticationError(DomainError):
    """Credentials are missing or wrong."""


class ImportFailedError(DomainError):
    """Import produced no rows or could not be committed."""


class ResourceError(DomainError):
    """A file or storage resource could not be used."""


class ConfigurationError(DomainError):
    """Process configuration is malformed."""


def expense_not_found(expense_id: int) -> str:
    """Return message for missing expense."""
    return f"Expense {expense_id} not found"


def expense_access_denied(expense_id: int) -> str:
    """Return message when an expense belongs to another user."""
    return f"Expense {expense_id} belongs to another user"


def invalid_expense(field_errors: Mapping[str, str]) -> str:
    """Return summary message for rejected expense fields."""
    details = "; ".join(f"{name}: {reason}" for name, reason in field_errors.items())
    return f"Invalid expense ({details})"


def no_rows_imported(reasons: Iterable[str]) -> str:
    """Return message for an import where every row was skipped."""
    return f"No rows were imported. Reasons: {', '.join(reasons)}"


def username_taken(username: str) -> str:
    """Return message for duplicate registration."""
    return f"Username '{username}' is already taken"
