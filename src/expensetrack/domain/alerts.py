"""Budget alert domain service."""

import logging
from decimal import Decimal
from typing import Mapping

from expensetrack.database.base import Database
from expensetrack.domain.criteria import build_monthly_criteria
from expensetrack.domain.entities import Alert, AlertType, UserIdentity

logger = logging.getLogger(__name__)

WITHIN_BUDGET_MESSAGE = "Looking good! You're within budget for this month."


class AlertGenerator:
    """Compares monthly category totals against configured budgets."""

    def __init__(self, db: Database, category_budgets: Mapping[str, Decimal]):
        """Initialize alert generator.

        Args:
            db: Database instance
            category_budgets: Budget ceiling per category. Keys are matched
                case-insensitively; their order decides the order of alerts.
        """
        self.db = db
        self.category_budgets = {
            name.strip().lower(): Decimal(budget)
            for name, budget in category_budgets.items()
        }

    def generate(self, user: UserIdentity, year: int, month: int) -> list[Alert]:
        """Build the budget alerts for one month.

        Returns:
            One warning per category whose total exceeds its budget, in
            configuration order, or a single success alert when there is none
        """
        criteria = build_monthly_criteria(user.id, year, month)
        category_totals = self.db.sum_amounts_by_category(criteria)

        alerts: list[Alert] = []
        for category, budget in self.category_budgets.items():
            total = category_totals.get(category)
            if total is None or total <= budget:
                continue
            alerts.append(
                Alert(
                    type=AlertType.WARNING,
                    message=budget_exceeded(category, total - budget),
                )
            )

        logger.debug(
            "Generated %d budget warnings for user %s, %d-%02d",
            len(alerts),
            user.id,
            year,
            month,
        )
        if not alerts:
            alerts.append(Alert(type=AlertType.SUCCESS, message=WITHIN_BUDGET_MESSAGE))
        return alerts


def budget_exceeded(category: str, excess: Decimal) -> str:
    """Return the warning text for a category over its budget."""
    return f"{category[:1].upper()}{category[1:]} budget exceeded by {excess:.2f} €"
