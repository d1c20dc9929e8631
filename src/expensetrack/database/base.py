"""Abstract database interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, Optional, Sequence

# Entities are only needed for annotations. Importing them at runtime would
# run domain/__init__.py, whose services import this module.
if TYPE_CHECKING:
    from expensetrack.domain.entities import Criteria, Expense, User


class Database(ABC):
    """Abstract database interface for expensetrack.

    Every expense query takes a ``Criteria`` (user plus inclusive date range).
    Category keys returned by grouping operations are lowercase. Soft-deleted
    expenses are invisible to every read operation. Writes that fail are
    rolled back and raise ``ResourceError``.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # User operations
    @abstractmethod
    def create_user(self, username: str, password_hash: str) -> int:
        """Create a user. Returns user ID."""
        pass

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        pass

    # Expense operations
    @abstractmethod
    def save_expense(self, expense: Expense) -> Expense:
        """Insert an expense without ID or fully replace an existing one.

        Returns the stored expense, carrying its ID.
        """
        pass

    @abstractmethod
    def delete_expense(self, expense_id: int) -> None:
        """Remove an expense from all future queries."""
        pass

    @abstractmethod
    def get_expense(self, expense_id: int) -> Optional[Expense]:
        """Get expense by ID."""
        pass

    @abstractmethod
    def find_expenses(
        self, criteria: Criteria, offset: int, limit: int
    ) -> list[Expense]:
        """List expenses matching criteria, newest first."""
        pass

    @abstractmethod
    def count_expenses(self, criteria: Criteria) -> int:
        """Count expenses matching criteria."""
        pass

    @abstractmethod
    def list_expenditure_years(self, user_id: int) -> list[int]:
        """List the distinct years a user has expenses in, newest first."""
        pass

    @abstractmethod
    def sum_amounts_by_category(self, criteria: Criteria) -> dict[str, Decimal]:
        """Sum amounts per lowercase category."""
        pass

    @abstractmethod
    def average_amounts_by_category(self, criteria: Criteria) -> dict[str, Decimal]:
        """Average amount per lowercase category."""
        pass

    @abstractmethod
    def sum_amounts(self, criteria: Criteria) -> Decimal:
        """Sum of all amounts matching criteria, 0 when nothing matches."""
        pass

    @abstractmethod
    def import_many(self, expenses: Sequence[Expense]) -> int:
        """Insert expenses in one transaction. Returns number inserted.

        Either every expense is stored or none is.

        Raises:
            ResourceError: If storage fails; nothing has been written
        """
        pass
