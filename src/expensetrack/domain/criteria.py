"""Monthly criteria construction."""

from datetime import datetime, time

from expensetrack.domain.entities import Criteria
from expensetrack.utils.date_parser import month_bounds


def build_monthly_criteria(user_id: int, year: int, month: int) -> Criteria:
    """Build the filter covering one calendar month for a user.

    The range runs from the first day at 00:00:00 to the real last day of the
    month at 23:59:59. ``month`` must already be within 1-12.
    """
    first_day, last_day = month_bounds(year, month)
    return Criteria(
        user_id=user_id,
        date_from=datetime.combine(first_day, time.min),
        date_to=datetime.combine(last_day, time(23, 59, 59)),
    )
