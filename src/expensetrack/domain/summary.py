"""Monthly summary domain service."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Mapping

from expensetrack.database.base import Database
from expensetrack.domain.criteria import build_monthly_criteria
from expensetrack.domain.entities import CategoryAmount, UserIdentity


def percentage_of(value: Decimal, reference: Decimal) -> int:
    """Return ``value`` as a whole percentage of ``reference``.

    Rounds half away from zero, so 50.5 becomes 51. A non-positive reference
    yields 0.
    """
    if reference <= 0:
        return 0
    ratio = Decimal(value) / Decimal(reference) * 100
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class MonthlySummaryService:
    """Service computing monthly totals and averages for the dashboard."""

    def __init__(self, db: Database):
        """Initialize monthly summary service.

        Args:
            db: Database instance
        """
        self.db = db

    def compute_total_expenditure(
        self, user: UserIdentity, year: int, month: int
    ) -> Decimal:
        """Sum of all of the user's expenses in the month, 0 if none."""
        criteria = build_monthly_criteria(user.id, year, month)
        return self.db.sum_amounts(criteria)

    def compute_per_category_totals(
        self, user: UserIdentity, year: int, month: int
    ) -> dict[str, CategoryAmount]:
        """Per-category totals, each with its share of the month's spending.

        Args:
            user: Acting user
            year: Year of the month to summarize
            month: Month number, 1-12

        Returns:
            Mapping of lowercase category to CategoryAmount, where percentage
            is the category total relative to the sum of all categories
        """
        criteria = build_monthly_criteria(user.id, year, month)
        totals = self.db.sum_amounts_by_category(criteria)
        grand_total = sum(totals.values(), Decimal("0"))
        return self._annotate(totals, grand_total)

    def compute_per_category_averages(
        self, user: UserIdentity, year: int, month: int
    ) -> dict[str, CategoryAmount]:
        """Per-category average expense, relative to the largest average.

        The category with the highest average always gets 100.
        """
        criteria = build_monthly_criteria(user.id, year, month)
        averages = self.db.average_amounts_by_category(criteria)
        if not averages:
            return {}
        return self._annotate(averages, max(averages.values()))

    @staticmethod
    def _annotate(
        values: Mapping[str, Decimal], reference: Decimal
    ) -> dict[str, CategoryAmount]:
        return {
            category: CategoryAmount(
                value=value, percentage=percentage_of(value, reference)
            )
            for category, value in values.items()
        }
