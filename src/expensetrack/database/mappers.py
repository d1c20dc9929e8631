"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so services never see ORM rows.
"""

from decimal import Decimal

from expensetrack.domain import entities as domain
from expensetrack.database.models import (
    User as ORMUser,
    Expense as ORMExpense,
)


def user_to_domain(orm_user: ORMUser) -> domain.User:
    """Convert SQLAlchemy User model to domain User entity."""
    return domain.User(
        id=orm_user.id,
        username=orm_user.username,
        password_hash=orm_user.password_hash,
        created_at=orm_user.created_at,
    )


def expense_to_domain(orm_expense: ORMExpense) -> domain.Expense:
    """Convert SQLAlchemy Expense model to domain Expense entity."""
    return domain.Expense(
        id=orm_expense.id,
        user_id=orm_expense.user_id,
        date=orm_expense.date,
        category=orm_expense.category,
        amount=Decimal(orm_expense.amount),
        amount_cents=orm_expense.amount_cents,
        description=orm_expense.description,
        deleted_at=orm_expense.deleted_at,
    )


def expense_to_orm(expense: domain.Expense) -> ORMExpense:
    """Build a new SQLAlchemy Expense row from a domain entity."""
    return ORMExpense(
        user_id=expense.user_id,
        date=expense.date,
        category=expense.category,
        amount=expense.amount,
        amount_cents=expense.amount_cents,
        description=expense.description,
        deleted_at=expense.deleted_at,
    )
