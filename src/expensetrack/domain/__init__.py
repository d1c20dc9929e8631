"""Domain layer for expensetrack application."""

from expensetrack.domain.expense import ExpenseService
from expensetrack.domain.csv_import import CSVImportService
from expensetrack.domain.summary import MonthlySummaryService
from expensetrack.domain.alerts import AlertGenerator
from expensetrack.domain.dashboard import DashboardService
from expensetrack.domain.auth import AuthService

__all__ = [
    "ExpenseService",
    "CSVImportService",
    "MonthlySummaryService",
    "AlertGenerator",
    "DashboardService",
    "AuthService",
]
