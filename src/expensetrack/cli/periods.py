"""CLI helpers for month selection."""

from datetime import date
from typing import Optional

import click


def resolve_year_month(
    year: Optional[int], month: Optional[int], today: Optional[date] = None
) -> tuple[int, int]:
    """Fill in the current year and month for options left unset."""
    today = today or date.today()
    if year is None:
        year = today.year
    if month is None:
        month = today.month
    return year, month


def month_options(func):
    """Attach --year and --month options to a command."""
    func = click.option(
        "--month",
        type=click.IntRange(1, 12),
        help="Month number (default: current month)",
    )(func)
    func = click.option(
        "--year",
        type=click.IntRange(1900, 9999),
        help="Year (default: current year)",
    )(func)
    return func
