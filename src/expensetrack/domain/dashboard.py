"""Monthly dashboard domain service."""

from datetime import date
from typing import Optional

from expensetrack.database.base import Database
from expensetrack.domain.alerts import AlertGenerator
from expensetrack.domain.entities import MonthlyDashboard, UserIdentity
from expensetrack.domain.summary import MonthlySummaryService


class DashboardService:
    """Assembles the monthly dashboard from the summary and alert services."""

    def __init__(
        self,
        db: Database,
        summary_service: MonthlySummaryService,
        alert_generator: AlertGenerator,
    ):
        self.db = db
        self.summary_service = summary_service
        self.alert_generator = alert_generator

    def build(
        self,
        user: UserIdentity,
        year: int,
        month: int,
        today: Optional[date] = None,
    ) -> MonthlyDashboard:
        """Build the dashboard for one month.

        When the user has no expenses at all, the current year is offered as
        the only available year.
        """
        today = today or date.today()
        available_years = self.db.list_expenditure_years(user.id)
        if not available_years:
            available_years = [today.year]

        return MonthlyDashboard(
            year=year,
            month=month,
            alerts=tuple(self.alert_generator.generate(user, year, month)),
            total_expenditure=self.summary_service.compute_total_expenditure(
                user, year, month
            ),
            category_totals=self.summary_service.compute_per_category_totals(
                user, year, month
            ),
            category_averages=self.summary_service.compute_per_category_averages(
                user, year, month
            ),
            available_years=tuple(available_years),
        )
