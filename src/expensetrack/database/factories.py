"""Database factory functions for creating database instances."""

from pathlib import Path
from typing import Optional

from expensetrack.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, uses the
            configured path (EXPENSETRACK_DB_PATH, defaulting to
            ~/.expensetrack/expensetrack.db)

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Imported here: config imports the domain layer, which imports this package
        from expensetrack.config import get_settings

        database_path = get_settings().database_path

    Path(database_path).parent.mkdir(parents=True, exist_ok=True)
    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)
