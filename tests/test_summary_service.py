"""Tests for the monthly summary service."""

from datetime import date
from decimal import Decimal

from expensetrack.domain.entities import CategoryAmount, UserIdentity
from expensetrack.domain.summary import MonthlySummaryService, percentage_of


class StubTotals:
    """Minimal repository returning fixed aggregates."""

    def __init__(self, totals=None, averages=None):
        self.totals = totals or {}
        self.averages = averages or {}

    def sum_amounts_by_category(self, criteria):
        return dict(self.totals)

    def average_amounts_by_category(self, criteria):
        return dict(self.averages)

    def sum_amounts(self, criteria):
        return sum(self.totals.values(), Decimal("0"))


def test_percentage_of_rounds_half_up():
    assert percentage_of(Decimal("50.5"), Decimal("100")) == 51
    assert percentage_of(Decimal("49.5"), Decimal("100")) == 50
    assert percentage_of(Decimal("1"), Decimal("3")) == 33


def test_percentage_of_zero_reference():
    assert percentage_of(Decimal("0"), Decimal("0")) == 0


def test_total_expenditure_empty_month(summary_service, sample_user):
    assert summary_service.compute_total_expenditure(sample_user, 2025, 1) == 0


def test_total_expenditure_only_counts_month_and_user(
    summary_service, sample_user, other_user, add_expense
):
    add_expense(sample_user, date(2025, 1, 1), "groceries", "12.30")
    add_expense(sample_user, date(2025, 1, 31), "leisure", "7.70")
    add_expense(sample_user, date(2025, 2, 1), "groceries", "100.00")
    add_expense(sample_user, date(2024, 12, 31), "groceries", "100.00")
    add_expense(other_user, date(2025, 1, 15), "groceries", "100.00")

    total = summary_service.compute_total_expenditure(sample_user, 2025, 1)

    assert total == Decimal("20.00")


def test_total_expenditure_leap_day(summary_service, sample_user, add_expense):
    add_expense(sample_user, date(2024, 2, 29), "groceries", "5.00")

    assert summary_service.compute_total_expenditure(sample_user, 2024, 2) == Decimal("5.00")
    assert summary_service.compute_total_expenditure(sample_user, 2024, 3) == 0


def test_per_category_totals(summary_service, sample_user, add_expense):
    add_expense(sample_user, date(2025, 1, 2), "groceries", "12.30")
    add_expense(sample_user, date(2025, 1, 3), "groceries", "30.00")
    add_expense(sample_user, date(2025, 1, 4), "leisure", "40.00")

    totals = summary_service.compute_per_category_totals(sample_user, 2025, 1)

    assert totals == {
        "groceries": CategoryAmount(value=Decimal("42.30"), percentage=51),
        "leisure": CategoryAmount(value=Decimal("40.00"), percentage=49),
    }
    assert sum(entry.percentage for entry in totals.values()) == 100


def test_per_category_totals_half_boundary(summary_service, sample_user, add_expense):
    add_expense(sample_user, date(2025, 1, 2), "groceries", "50.50")
    add_expense(sample_user, date(2025, 1, 3), "leisure", "49.50")

    totals = summary_service.compute_per_category_totals(sample_user, 2025, 1)

    assert totals["groceries"].percentage == 51
    assert totals["leisure"].percentage == 50


def test_per_category_totals_empty(summary_service, sample_user):
    assert summary_service.compute_per_category_totals(sample_user, 2025, 1) == {}


def test_per_category_totals_zero_grand_total():
    service = MonthlySummaryService(
        StubTotals(totals={"groceries": Decimal("0"), "leisure": Decimal("0")})
    )

    totals = service.compute_per_category_totals(_identity(), 2025, 1)

    assert [entry.percentage for entry in totals.values()] == [0, 0]


def test_per_category_averages(summary_service, sample_user, add_expense):
    add_expense(sample_user, date(2025, 1, 2), "groceries", "12.30")
    add_expense(sample_user, date(2025, 1, 3), "groceries", "30.00")
    add_expense(sample_user, date(2025, 1, 4), "leisure", "40.00")

    averages = summary_service.compute_per_category_averages(sample_user, 2025, 1)

    assert averages["leisure"] == CategoryAmount(value=Decimal("40.00"), percentage=100)
    assert averages["groceries"] == CategoryAmount(value=Decimal("21.15"), percentage=53)


def test_per_category_averages_empty(summary_service, sample_user):
    assert summary_service.compute_per_category_averages(sample_user, 2025, 1) == {}


def test_per_category_averages_max_is_always_100():
    service = MonthlySummaryService(
        StubTotals(
            averages={
                "groceries": Decimal("3.33"),
                "leisure": Decimal("9.99"),
                "transport": Decimal("5.00"),
            }
        )
    )

    averages = service.compute_per_category_averages(_identity(), 2025, 1)

    assert averages["leisure"].percentage == 100
    assert averages["groceries"].percentage == 33
    assert averages["transport"].percentage == 50


def test_per_category_averages_zero_max():
    service = MonthlySummaryService(StubTotals(averages={"groceries": Decimal("0")}))

    averages = service.compute_per_category_averages(_identity(), 2025, 1)

    assert averages == {"groceries": CategoryAmount(value=Decimal("0"), percentage=0)}


def test_deleted_expenses_not_summed(summary_service, sample_user, add_expense, temp_db):
    kept = add_expense(sample_user, date(2025, 1, 2), "groceries", "10.00")
    removed = add_expense(sample_user, date(2025, 1, 3), "groceries", "99.00")
    temp_db.delete_expense(removed.id)

    assert summary_service.compute_total_expenditure(sample_user, 2025, 1) == kept.amount


def _identity():
    return UserIdentity(id=1, username="alice")
