"""Shared pytest fixtures for expensetrack tests."""

import json
import os
import tempfile
from datetime import date
from decimal import Decimal

import pytest

from expensetrack.config import get_settings
from expensetrack.database.factories import create_sqlite_database
from expensetrack.domain.alerts import AlertGenerator
from expensetrack.domain.csv_import import CSVImportService
from expensetrack.domain.entities import Expense, UserIdentity
from expensetrack.domain.expense import ExpenseService
from expensetrack.domain.summary import MonthlySummaryService
from expensetrack.utils.amount_parser import to_cents


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def budgets():
    """Category budgets in configuration order."""
    return {
        "groceries": Decimal("100"),
        "leisure": Decimal("50"),
        "transport": Decimal("80"),
    }


@pytest.fixture
def sample_user(temp_db):
    """Create a user directly in the database (no password hashing)."""
    user_id = temp_db.create_user("alice", "not-a-real-hash")
    return UserIdentity(id=user_id, username="alice")


@pytest.fixture
def other_user(temp_db):
    """Create a second user."""
    user_id = temp_db.create_user("bobby", "not-a-real-hash")
    return UserIdentity(id=user_id, username="bobby")


@pytest.fixture
def expense_service(temp_db, budgets):
    """Create an ExpenseService with a temporary database."""
    return ExpenseService(temp_db, categories=budgets.keys())


@pytest.fixture
def import_service(temp_db, budgets):
    """Create a CSVImportService with a temporary database."""
    return CSVImportService(temp_db, categories=budgets.keys())


@pytest.fixture
def summary_service(temp_db):
    """Create a MonthlySummaryService with a temporary database."""
    return MonthlySummaryService(temp_db)


@pytest.fixture
def alert_generator(temp_db, budgets):
    """Create an AlertGenerator with the sample budgets."""
    return AlertGenerator(temp_db, budgets)


@pytest.fixture
def add_expense(temp_db):
    """Return a helper storing an expense directly, bypassing validation."""

    def _add(user, day: date, category: str, amount: str, description: str = "Test expense"):
        value = Decimal(amount)
        return temp_db.save_expense(
            Expense(
                id=None,
                user_id=user.id,
                date=day,
                category=category,
                amount=value,
                amount_cents=to_cents(value),
                description=description,
            )
        )

    return _add


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Point the CLI at test budgets and a private session file."""
    monkeypatch.setenv(
        "CATEGORY_BUDGETS", json.dumps({"Groceries": 100, "Leisure": 50})
    )
    monkeypatch.setenv("EXPENSETRACK_SESSION_FILE", str(tmp_path / "session.json"))
    monkeypatch.delenv("EXPENSETRACK_BUDGETS_FILE", raising=False)
    monkeypatch.delenv("EXPENSETRACK_DB_PATH", raising=False)
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
