"""Budget period forecasting."""

from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from foodbudget.domain.entities import Budget, Expense, Forecast, UsageLevel
from foodbudget.utils.date_utils import (
    days_until_renewal,
    last_renewal_date,
    next_renewal_date,
)

ZERO = Decimal("0")
HUNDRED = Decimal("100")

USAGE_OK_LIMIT = Decimal("60")
USAGE_WARNING_LIMIT = Decimal("85")


def filter_expenses_by_date_range(
    expenses: Iterable[Expense],
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> list[Expense]:
    """Return expenses dated within the inclusive range.

    Either bound may be omitted to leave that side open.
    """
    result = []
    for expense in expenses:
        if start_date is not None and expense.date < start_date:
            continue
        if end_date is not None and expense.date > end_date:
            continue
        result.append(expense)
    return result


def calculate_total_expenses(
    expenses: Iterable[Expense],
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> Decimal:
    """Sum expense amounts within the optional date range."""
    filtered = filter_expenses_by_date_range(expenses, start_date, end_date)
    return sum((expense.amount for expense in filtered), ZERO)


def calculate_daily_average(
    expenses: Iterable[Expense],
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> Decimal:
    """Average spend per day over an inclusive date range.

    Without both bounds the range spans the filtered expenses' own earliest
    and latest dates. The divisor counts both boundary days and is at least 1.
    """
    filtered = filter_expenses_by_date_range(expenses, start_date, end_date)
    if not filtered:
        return ZERO

    total = calculate_total_expenses(filtered)
    if start_date is None or end_date is None:
        dates = [expense.date for expense in filtered]
        start_date, end_date = min(dates), max(dates)

    days = max(1, (end_date - start_date).days + 1)
    return total / days


def forecast_expenses(
    expenses: Sequence[Expense], budget: Budget, now: Optional[datetime] = None
) -> Forecast:
    """Project spending through the end of the current budget period.

    The observed daily average since the last renewal is extrapolated over
    the days left until the next renewal.

    Args:
        expenses: All recorded expenses
        budget: Budget with a valid renewal day
        now: Current moment, defaults to the local time

    Returns:
        Forecast for the current period
    """
    if now is None:
        now = datetime.now()
    today = now.date()

    period_start = last_renewal_date(budget.renewal_day, today)
    period_end = next_renewal_date(budget.renewal_day, today)

    period_expenses = filter_expenses_by_date_range(expenses, period_start, today)
    average_daily = calculate_daily_average(period_expenses, period_start, today)
    remaining_days = days_until_renewal(budget.renewal_day, now)

    additional = average_daily * remaining_days
    current = calculate_total_expenses(period_expenses)

    return Forecast(
        current_expenses=current,
        average_daily_expense=average_daily,
        days_until_renewal=remaining_days,
        forecasted_additional_expenses=additional,
        forecasted_total_expenses=current + additional,
        forecasted_remaining_budget=budget.current_amount - additional,
        last_renewal_date=period_start,
        next_renewal_date=period_end,
    )


def usage_percentage(spent: Decimal, budget_amount: Decimal) -> Decimal:
    """Percentage of the budget consumed, clamped to 0..100.

    A budget of zero or less counts as fully consumed.
    """
    if budget_amount <= 0:
        return HUNDRED
    return min(HUNDRED, max(ZERO, spent / budget_amount * HUNDRED))


def usage_level(percentage: Decimal) -> UsageLevel:
    """Classify a usage percentage for display."""
    if percentage <= USAGE_OK_LIMIT:
        return UsageLevel.OK
    if percentage <= USAGE_WARNING_LIMIT:
        return UsageLevel.WARNING
    return UsageLevel.OVER
