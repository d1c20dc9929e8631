"""Process configuration for expensetrack.

Everything is read from environment variables. Category budgets are a JSON
object mapping a category name to its monthly ceiling, e.g.::

    CATEGORY_BUDGETS='{"Groceries": 300, "Leisure": 150.50}'
"""

import json
import os
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

from expensetrack.domain.errors import ConfigurationError


DEFAULT_DATA_DIR = Path.home() / ".expensetrack"


class Settings:
    def __init__(
        self,
        database_path: str,
        session_file: str,
        category_budgets: Mapping[str, Decimal],
        log_level: str,
    ) -> None:
        self.database_path = database_path
        self.session_file = session_file
        self.category_budgets = dict(category_budgets)
        self.log_level = log_level

    @property
    def categories(self) -> list[str]:
        """Configured category names, lowercase, in configuration order."""
        return list(self.category_budgets)


def parse_category_budgets(raw: Optional[str]) -> dict[str, Decimal]:
    """Parse a JSON budget mapping.

    Keys are lowercased and trimmed; insertion order is kept so alerts follow
    the order categories were configured in.

    Raises:
        ConfigurationError: If the JSON is malformed or a budget is not a number
    """
    if raw is None or not raw.strip():
        return {}

    try:
        data = json.loads(raw, parse_float=Decimal, parse_int=Decimal)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Category budgets are not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError("Category budgets must be a JSON object")

    budgets: dict[str, Decimal] = {}
    for name, budget in data.items():
        if not isinstance(budget, Decimal):
            raise ConfigurationError(
                f"Budget for category '{name}' must be a number, got {budget!r}"
            )
        budgets[name.strip().lower()] = budget
    return budgets


def _read_budgets() -> dict[str, Decimal]:
    raw = os.environ.get("CATEGORY_BUDGETS")
    if raw is None:
        budgets_file = os.environ.get("EXPENSETRACK_BUDGETS_FILE")
        if budgets_file:
            try:
                raw = Path(budgets_file).read_text(encoding="utf-8")
            except OSError as e:
                raise ConfigurationError(
                    f"Could not read budgets file '{budgets_file}': {e}"
                ) from e
    return parse_category_budgets(raw)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    data_dir = Path(os.environ.get("EXPENSETRACK_DATA_DIR", str(DEFAULT_DATA_DIR)))
    database_path = os.environ.get(
        "EXPENSETRACK_DB_PATH", str(data_dir / "expensetrack.db")
    )
    session_file = os.environ.get(
        "EXPENSETRACK_SESSION_FILE", str(data_dir / "session.json")
    )
    log_level = os.environ.get("EXPENSETRACK_LOG_LEVEL", "WARNING").upper()
    return Settings(
        database_path=database_path,
        session_file=session_file,
        category_budgets=_read_budgets(),
        log_level=log_level,
    )
