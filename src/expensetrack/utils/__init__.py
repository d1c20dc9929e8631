"""Utility functions for expensetrack."""

from expensetrack.utils.date_parser import parse_date, month_bounds
from expensetrack.utils.amount_parser import parse_amount, to_cents, from_cents

__all__ = ["parse_date", "month_bounds", "parse_amount", "to_cents", "from_cents"]
