"""Calendar helpers for budget periods."""

import calendar
import math
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Optional, Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from foodbudget.domain.categories import OTHER_CATEGORY
from foodbudget.domain.entities import Expense

SECONDS_PER_DAY = 24 * 60 * 60


def format_date(value: Union[date, datetime, str]) -> str:
    """Format a date as DD-MM-YYYY.

    Args:
        value: date, datetime or ISO date string

    Returns:
        Zero-padded DD-MM-YYYY string
    """
    if isinstance(value, str):
        value = date_parser.isoparse(value)
    return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"


def renewal_date(year: int, month: int, renewal_day: int) -> date:
    """Return the renewal date in a given month.

    Month values outside 1..12 roll over into adjacent years. Renewal days
    past the end of the month are clamped to the month's last day, so a
    renewal on the 31st falls on April 30th and February 28th/29th.

    Args:
        year: Calendar year
        month: Calendar month, may be 0 or 13 for the adjacent months
        renewal_day: Day of month (1-31)

    Returns:
        Date of the renewal in that month
    """
    first = date(year, 1, 1) + relativedelta(months=month - 1)
    last_day = calendar.monthrange(first.year, first.month)[1]
    return first.replace(day=min(renewal_day, last_day))


def last_renewal_date(renewal_day: int, today: date) -> date:
    """Return the start of the budget period containing today."""
    this_month = renewal_date(today.year, today.month, renewal_day)
    if today >= this_month:
        return this_month
    return renewal_date(today.year, today.month - 1, renewal_day)


def next_renewal_date(renewal_day: int, today: date) -> date:
    """Return the first renewal date strictly after today."""
    this_month = renewal_date(today.year, today.month, renewal_day)
    if today < this_month:
        return this_month
    return renewal_date(today.year, today.month + 1, renewal_day)


def days_until_renewal(renewal_day: int, now: Optional[datetime] = None) -> int:
    """Return the number of days until the next budget renewal.

    The difference is measured from ``now`` to midnight of the next renewal
    date and rounded up, so partially elapsed days count as whole days.

    Args:
        renewal_day: Day of month the budget renews on
        now: Current moment, defaults to the local time

    Returns:
        Ceiling of the day difference
    """
    if now is None:
        now = datetime.now()
    target = next_renewal_date(renewal_day, now.date())
    target_moment = datetime(target.year, target.month, target.day, tzinfo=now.tzinfo)
    return math.ceil((target_moment - now).total_seconds() / SECONDS_PER_DAY)


def group_expenses_by_date(expenses: Iterable[Expense]) -> dict[str, list[Expense]]:
    """Bucket expenses by formatted date, keeping first-seen key order."""
    groups: dict[str, list[Expense]] = {}
    for expense in expenses:
        groups.setdefault(format_date(expense.date), []).append(expense)
    return groups


def group_expenses_by_category(expenses: Iterable[Expense]) -> dict[str, Decimal]:
    """Sum expense amounts per category, keeping first-seen key order."""
    groups: dict[str, Decimal] = {}
    for expense in expenses:
        category = expense.category or OTHER_CATEGORY
        groups[category] = groups.get(category, Decimal("0")) + expense.amount
    return groups
