"""Tests for budget period forecasting."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from foodbudget.domain.entities import Expense, UsageLevel
from foodbudget.domain.forecast import (
    calculate_daily_average,
    calculate_total_expenses,
    filter_expenses_by_date_range,
    forecast_expenses,
    usage_level,
    usage_percentage,
)

NOW = datetime(2024, 1, 20, 12, 0)


def _expense(expense_id, amount, day):
    return Expense(id=expense_id, amount=Decimal(amount), date=day, category="Other")


class TestForecastExpenses:
    """Tests for forecast_expenses."""

    def test_worked_example(self, forecast_budget, sample_expenses):
        forecast = forecast_expenses(sample_expenses, forecast_budget, now=NOW)

        assert forecast.last_renewal_date == date(2024, 1, 10)
        assert forecast.next_renewal_date == date(2024, 2, 10)
        assert forecast.current_expenses == Decimal("200")
        assert float(forecast.average_daily_expense) == pytest.approx(200 / 11)
        assert forecast.days_until_renewal == 21
        assert float(forecast.forecasted_additional_expenses) == pytest.approx(381.818, abs=0.001)
        assert float(forecast.forecasted_total_expenses) == pytest.approx(581.818, abs=0.001)
        assert float(forecast.forecasted_remaining_budget) == pytest.approx(218.182, abs=0.001)

    def test_ignores_expenses_outside_period(self, forecast_budget, sample_expenses):
        future = _expense(4, "999", date(2024, 1, 25))
        forecast = forecast_expenses(sample_expenses + [future], forecast_budget, now=NOW)

        assert forecast.current_expenses == Decimal("200")

    def test_period_bounds_are_inclusive(self, forecast_budget):
        expenses = [
            _expense(1, "11", date(2024, 1, 10)),
            _expense(2, "22", date(2024, 1, 20)),
            _expense(3, "5", date(2024, 1, 9)),
        ]

        forecast = forecast_expenses(expenses, forecast_budget, now=NOW)

        assert forecast.current_expenses == Decimal("33")
        assert forecast.average_daily_expense == Decimal("3")

    def test_empty_expenses_give_zero_average(self, forecast_budget):
        forecast = forecast_expenses([], forecast_budget, now=NOW)

        assert forecast.current_expenses == Decimal("0")
        assert forecast.average_daily_expense == Decimal("0")
        assert forecast.forecasted_additional_expenses == Decimal("0")
        assert forecast.forecasted_total_expenses == Decimal("0")
        assert forecast.forecasted_remaining_budget == Decimal("600")
        assert forecast.days_until_renewal == 21

    def test_before_renewal_day_uses_previous_month(self, forecast_budget):
        expenses = [_expense(1, "54", date(2023, 12, 20))]

        forecast = forecast_expenses(expenses, forecast_budget, now=datetime(2024, 1, 5))

        assert forecast.last_renewal_date == date(2023, 12, 10)
        # Dec 10 through Jan 5 inclusive is 27 days
        assert forecast.average_daily_expense == Decimal("2")
        assert forecast.days_until_renewal == 5
        assert forecast.forecasted_additional_expenses == Decimal("10")

    def test_first_day_of_period(self, forecast_budget):
        expenses = [_expense(1, "40", date(2024, 1, 10))]

        forecast = forecast_expenses(expenses, forecast_budget, now=datetime(2024, 1, 10))

        assert forecast.average_daily_expense == Decimal("40")
        assert forecast.days_until_renewal == 31

    def test_is_idempotent(self, forecast_budget, sample_expenses):
        first = forecast_expenses(sample_expenses, forecast_budget, now=NOW)
        second = forecast_expenses(sample_expenses, forecast_budget, now=NOW)

        assert first == second

    def test_defaults_to_current_time(self, forecast_budget):
        forecast = forecast_expenses([], forecast_budget)

        assert forecast.forecasted_remaining_budget == Decimal("600")


class TestHelpers:
    """Tests for the filtering and averaging helpers."""

    def test_filter_open_bounds(self, sample_expenses):
        assert len(filter_expenses_by_date_range(sample_expenses)) == 3
        assert [e.id for e in filter_expenses_by_date_range(sample_expenses, date(2024, 1, 12))] == [2, 3]
        assert [e.id for e in filter_expenses_by_date_range(sample_expenses, None, date(2024, 1, 12))] == [1, 2]

    def test_total(self, sample_expenses):
        assert calculate_total_expenses(sample_expenses) == Decimal("500")
        assert calculate_total_expenses(sample_expenses, date(2024, 1, 10), date(2024, 1, 31)) == Decimal("200")

    def test_daily_average_without_bounds_uses_expense_span(self):
        expenses = [_expense(1, "10", date(2024, 1, 1)), _expense(2, "20", date(2024, 1, 10))]

        assert calculate_daily_average(expenses) == Decimal("3")

    def test_daily_average_single_day(self):
        assert calculate_daily_average([_expense(1, "7", date(2024, 1, 1))]) == Decimal("7")

    def test_daily_average_empty(self):
        assert calculate_daily_average([], date(2024, 1, 1), date(2024, 1, 31)) == Decimal("0")


class TestUsagePercentage:
    """Tests for usage_percentage and usage_level."""

    def test_proportion(self):
        assert usage_percentage(Decimal("50"), Decimal("200")) == Decimal("25")

    def test_clamped_to_hundred(self):
        assert usage_percentage(Decimal("500"), Decimal("200")) == Decimal("100")

    def test_clamped_to_zero(self):
        assert usage_percentage(Decimal("-50"), Decimal("200")) == Decimal("0")

    @pytest.mark.parametrize("budget_amount", [Decimal("0"), Decimal("-10")])
    def test_non_positive_budget_is_fully_used(self, budget_amount):
        assert usage_percentage(Decimal("0"), budget_amount) == Decimal("100")

    @pytest.mark.parametrize(
        "spent, budget_amount",
        [("0", "1"), ("1e6", "3"), ("-1e6", "3"), ("0.01", "1e9"), ("7", "-0.5")],
    )
    def test_always_within_bounds(self, spent, budget_amount):
        result = usage_percentage(Decimal(spent), Decimal(budget_amount))
        assert Decimal("0") <= result <= Decimal("100")

    @pytest.mark.parametrize(
        "percentage, level",
        [
            ("0", UsageLevel.OK),
            ("60", UsageLevel.OK),
            ("60.5", UsageLevel.WARNING),
            ("85", UsageLevel.WARNING),
            ("85.1", UsageLevel.OVER),
            ("100", UsageLevel.OVER),
        ],
    )
    def test_usage_level(self, percentage, level):
        assert usage_level(Decimal(percentage)) == level
