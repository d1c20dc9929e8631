"""Expense domain service."""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Optional, Union

from expensetrack.database.base import Database
from expensetrack.domain.criteria import build_monthly_criteria
from expensetrack.domain.entities import Expense, ExpensePage, UserIdentity
from expensetrack.domain.errors import (
    AccessDeniedError,
    NotFoundError,
    ValidationError,
    expense_access_denied,
    expense_not_found,
    invalid_expense,
)
from expensetrack.utils.amount_parser import parse_amount, to_cents
from expensetrack.utils.date_parser import parse_date

logger = logging.getLogger(__name__)

DateInput = Union[str, date]
AmountInput = Union[str, Decimal, int, float]


@dataclass(frozen=True)
class ExpenseDraft:
    """Validated, normalized expense fields not yet bound to a user."""

    date: date
    category: str
    amount: Decimal
    description: str


def validate_expense_input(
    date_value: Optional[DateInput],
    category: Optional[str],
    amount: Optional[AmountInput],
    description: Optional[str],
    categories: Iterable[str],
    today: date,
) -> tuple[Optional[ExpenseDraft], dict[str, str]]:
    """Validate user-supplied expense fields.

    Every field is checked, so the caller gets all problems at once.

    Args:
        date_value: Expense date, as a date or a string
        category: Category name, matched case-insensitively
        amount: Amount, as a number or a string
        description: Free text description
        categories: Allowed category names
        today: Latest acceptable expense date

    Returns:
        Tuple of (draft, errors). ``draft`` is None whenever ``errors``
        (field name -> reason) is not empty.
    """
    errors: dict[str, str] = {}

    expense_date: Optional[date] = None
    if isinstance(date_value, datetime):
        expense_date = date_value.date()
    elif isinstance(date_value, date):
        expense_date = date_value
    else:
        try:
            expense_date = parse_date(date_value or "")
        except ValueError:
            errors["date"] = "Invalid date format"
    if expense_date is not None and expense_date > today:
        errors["date"] = "Date cannot be in the future"

    category_key = (category or "").strip().lower()
    allowed = {name.strip().lower() for name in categories}
    if category_key not in allowed:
        errors["category"] = "Invalid category selected"

    parsed_amount: Optional[Decimal] = None
    try:
        # Numbers pass through the same checks as typed-in text
        parsed_amount = parse_amount("" if amount is None else str(amount))
    except ValueError:
        errors["amount"] = "Invalid amount format"
    if parsed_amount is not None and parsed_amount <= 0:
        errors["amount"] = "Amount must be greater than 0"

    description_clean = (description or "").strip()
    if not description_clean:
        errors["description"] = "Description cannot be empty"

    if errors:
        return None, errors
    return (
        ExpenseDraft(
            date=expense_date,
            category=category_key,
            amount=parsed_amount,
            description=description_clean,
        ),
        errors,
    )


class ExpenseService:
    """Service for managing a user's expenses."""

    def __init__(self, db: Database, categories: Iterable[str] = ()):
        """Initialize expense service.

        Args:
            db: Database instance
            categories: Configured category names expenses may use
        """
        self.db = db
        self.categories = [name.strip().lower() for name in categories]

    def _validate(
        self,
        amount: AmountInput,
        description: str,
        date_value: DateInput,
        category: str,
        today: Optional[date],
    ) -> ExpenseDraft:
        draft, errors = validate_expense_input(
            date_value,
            category,
            amount,
            description,
            self.categories,
            today or date.today(),
        )
        if errors:
            raise ValidationError(invalid_expense(errors), field_errors=errors)
        return draft

    def create(
        self,
        user: UserIdentity,
        amount: AmountInput,
        description: str,
        date: DateInput,
        category: str,
        today: Optional[date] = None,
    ) -> Expense:
        """Create an expense for a user.

        Args:
            user: Owner of the new expense
            amount: Amount, must be greater than 0
            description: Non-empty description
            date: Expense date, not in the future
            category: One of the configured categories
            today: Reference date for the future-date check (defaults to today)

        Returns:
            The stored expense, with its ID

        Raises:
            ValidationError: With ``field_errors`` for every rejected field
        """
        draft = self._validate(amount, description, date, category, today)
        expense = Expense(
            id=None,
            user_id=user.id,
            date=draft.date,
            category=draft.category,
            amount=draft.amount,
            amount_cents=to_cents(draft.amount),
            description=draft.description,
        )
        saved = self.db.save_expense(expense)
        logger.info("Created expense %s for user %s", saved.id, user.id)
        return saved

    def update(
        self,
        user: UserIdentity,
        expense_id: int,
        amount: AmountInput,
        description: str,
        date: DateInput,
        category: str,
        today: Optional[date] = None,
    ) -> Expense:
        """Replace date, category, amount and description of an expense.

        The identifier, owner and soft-delete marker are kept.

        Raises:
            NotFoundError: If the expense doesn't exist
            AccessDeniedError: If the expense belongs to another user
            ValidationError: With ``field_errors`` for every rejected field
        """
        existing = self.get_owned_expense(user, expense_id)
        draft = self._validate(amount, description, date, category, today)
        updated = Expense(
            id=existing.id,
            user_id=existing.user_id,
            date=draft.date,
            category=draft.category,
            amount=draft.amount,
            amount_cents=to_cents(draft.amount),
            description=draft.description,
            deleted_at=existing.deleted_at,
        )
        saved = self.db.save_expense(updated)
        logger.info("Updated expense %s for user %s", expense_id, user.id)
        return saved

    def find(self, expense_id: int) -> Optional[Expense]:
        """Get expense by ID, regardless of owner."""
        return self.db.get_expense(expense_id)

    def get_owned_expense(self, user: UserIdentity, expense_id: int) -> Expense:
        """Get an expense the user owns.

        Raises:
            NotFoundError: If the expense doesn't exist
            AccessDeniedError: If the expense belongs to another user
        """
        expense = self.db.get_expense(expense_id)
        if expense is None:
            raise NotFoundError(expense_not_found(expense_id))
        if expense.user_id != user.id:
            raise AccessDeniedError(expense_access_denied(expense_id))
        return expense

    def delete(self, user: UserIdentity, expense_id: int) -> None:
        """Delete an expense the user owns."""
        self.get_owned_expense(user, expense_id)
        self.db.delete_expense(expense_id)
        logger.info("Deleted expense %s for user %s", expense_id, user.id)

    def list_expenses(
        self, user: UserIdentity, year: int, month: int, page: int, page_size: int
    ) -> list[Expense]:
        """List one page of a user's expenses for a month, newest first."""
        criteria = build_monthly_criteria(user.id, year, month)
        offset = (page - 1) * page_size
        return self.db.find_expenses(criteria, offset, page_size)

    def count(self, user: UserIdentity, year: int, month: int) -> int:
        """Count a user's expenses for a month."""
        criteria = build_monthly_criteria(user.id, year, month)
        return self.db.count_expenses(criteria)

    def paginate(
        self, user: UserIdentity, year: int, month: int, page: int, page_size: int
    ) -> ExpensePage:
        """Return a page of expenses, clamping the page into the valid range."""
        total = self.count(user, year, month)
        total_pages = math.ceil(total / page_size)
        page = max(1, min(page, total_pages or 1))
        expenses = self.list_expenses(user, year, month, page, page_size)
        return ExpensePage(
            expenses=tuple(expenses),
            total=total,
            page=page,
            page_size=page_size,
            total_pages=total_pages,
        )

    def list_expenditure_years(self, user: UserIdentity) -> list[int]:
        """Years the user has expenses in, newest first."""
        return self.db.list_expenditure_years(user.id)
