"""Tests for budget alert generation."""

from datetime import date
from decimal import Decimal

from expensetrack.domain.alerts import (
    AlertGenerator,
    WITHIN_BUDGET_MESSAGE,
    budget_exceeded,
)
from expensetrack.domain.entities import Alert, AlertType


def test_single_warning_for_exceeded_category(temp_db, sample_user, add_expense):
    add_expense(sample_user, date(2025, 1, 2), "groceries", "70.00")
    add_expense(sample_user, date(2025, 1, 20), "groceries", "50.00")
    add_expense(sample_user, date(2025, 1, 5), "leisure", "40.00")
    generator = AlertGenerator(
        temp_db, {"groceries": Decimal("100"), "leisure": Decimal("50")}
    )

    alerts = generator.generate(sample_user, 2025, 1)

    assert alerts == [
        Alert(type=AlertType.WARNING, message="Groceries budget exceeded by 20.00 €")
    ]


def test_success_when_everything_within_budget(alert_generator, sample_user, add_expense):
    add_expense(sample_user, date(2025, 1, 2), "groceries", "100.00")
    add_expense(sample_user, date(2025, 1, 5), "leisure", "10.00")

    alerts = alert_generator.generate(sample_user, 2025, 1)

    assert alerts == [Alert(type=AlertType.SUCCESS, message=WITHIN_BUDGET_MESSAGE)]


def test_success_for_empty_month(alert_generator, sample_user):
    alerts = alert_generator.generate(sample_user, 2025, 1)

    assert len(alerts) == 1
    assert alerts[0].type is AlertType.SUCCESS


def test_warnings_follow_configuration_order(temp_db, sample_user, add_expense):
    add_expense(sample_user, date(2025, 1, 2), "groceries", "30.00")
    add_expense(sample_user, date(2025, 1, 3), "leisure", "30.00")
    add_expense(sample_user, date(2025, 1, 4), "transport", "30.00")
    generator = AlertGenerator(
        temp_db,
        {
            "transport": Decimal("10"),
            "groceries": Decimal("29.99"),
            "leisure": Decimal("5"),
        },
    )

    messages = [alert.message for alert in generator.generate(sample_user, 2025, 1)]

    assert messages == [
        "Transport budget exceeded by 20.00 €",
        "Groceries budget exceeded by 0.01 €",
        "Leisure budget exceeded by 25.00 €",
    ]


def test_budget_keys_are_case_insensitive(temp_db, sample_user, add_expense):
    add_expense(sample_user, date(2025, 1, 2), "groceries", "150.00")
    generator = AlertGenerator(temp_db, {"Groceries": 100})

    alerts = generator.generate(sample_user, 2025, 1)

    assert alerts[0].message == "Groceries budget exceeded by 50.00 €"


def test_unbudgeted_category_produces_no_alert(temp_db, sample_user, add_expense):
    add_expense(sample_user, date(2025, 1, 2), "hobbies", "999.00")
    generator = AlertGenerator(temp_db, {"groceries": Decimal("100")})

    alerts = generator.generate(sample_user, 2025, 1)

    assert [alert.type for alert in alerts] == [AlertType.SUCCESS]


def test_other_months_do_not_count(alert_generator, sample_user, add_expense):
    add_expense(sample_user, date(2025, 2, 1), "groceries", "500.00")

    alerts = alert_generator.generate(sample_user, 2025, 1)

    assert [alert.type for alert in alerts] == [AlertType.SUCCESS]


def test_budget_exceeded_message_format():
    assert budget_exceeded("leisure", Decimal("3.5")) == "Leisure budget exceeded by 3.50 €"
