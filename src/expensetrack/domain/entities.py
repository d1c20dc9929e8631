"""Domain model entities for expensetrack.

These are pure data classes representing business concepts, independent of
the database schema. Services only ever exchange these objects with the
repository, never ORM rows.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class UserIdentity:
    """Read-only projection of the authenticated user."""

    id: int
    username: str


@dataclass(frozen=True)
class User:
    """Registered user domain entity."""

    id: int
    username: str
    password_hash: str
    created_at: datetime

    def to_identity(self) -> UserIdentity:
        return UserIdentity(id=self.id, username=self.username)


@dataclass(frozen=True)
class Expense:
    """Expense domain entity.

    ``id`` is None until the expense has been persisted. ``amount`` and
    ``amount_cents`` always describe the same value; cents are derived with
    half-up rounding.
    """

    id: Optional[int]
    user_id: int
    date: date
    category: str
    amount: Decimal
    amount_cents: int
    description: str
    deleted_at: Optional[datetime] = None

    def with_id(self, expense_id: int) -> "Expense":
        """Return a copy carrying the identifier assigned by storage."""
        return replace(self, id=expense_id)


@dataclass(frozen=True)
class Criteria:
    """Filter for one user's expenses within an inclusive date range."""

    user_id: int
    date_from: datetime
    date_to: datetime


@dataclass(frozen=True)
class CategoryAmount:
    """Aggregated amount for a category with its relative share."""

    value: Decimal
    percentage: int


class AlertType(str, Enum):
    WARNING = "warning"
    SUCCESS = "success"


@dataclass(frozen=True)
class Alert:
    """Budget notice shown on the dashboard."""

    type: AlertType
    message: str


@dataclass(frozen=True)
class SkippedRow:
    """Import row that was not persisted, with the reason why."""

    row: tuple[str, ...]
    reason: str


@dataclass(frozen=True)
class ImportResult:
    """Outcome of a successful import."""

    imported_count: int
    skipped_rows: tuple[SkippedRow, ...] = ()

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_rows)


@dataclass(frozen=True)
class ExpensePage:
    """One page of a user's monthly expense listing."""

    expenses: tuple[Expense, ...]
    total: int
    page: int
    page_size: int
    total_pages: int


@dataclass(frozen=True)
class MonthlyDashboard:
    """Everything shown on the monthly dashboard."""

    year: int
    month: int
    alerts: tuple[Alert, ...]
    total_expenditure: Decimal
    category_totals: dict[str, CategoryAmount] = field(default_factory=dict)
    category_averages: dict[str, CategoryAmount] = field(default_factory=dict)
    available_years: tuple[int, ...] = ()
