"""Dashboard and forecast commands."""

import click

from foodbudget.cli.formatting import expense_header, expense_row, format_amount, usage_bar
from foodbudget.domain.budget import BudgetService
from foodbudget.domain.forecast import filter_expenses_by_date_range, usage_level, usage_percentage
from foodbudget.utils.date_utils import format_date, group_expenses_by_category

RECENT_EXPENSES = 5


@click.command("dashboard")
@click.pass_context
def dashboard(ctx):
    """Show budget usage, the period forecast and recent spending."""
    service: BudgetService = ctx.obj["service"]
    budget = service.budget

    if budget.monthly_amount <= 0:
        click.echo("No budget set. Run 'foodbudget budget setup' first.")
        return

    forecast = service.forecast()
    current_usage = usage_percentage(budget.spent, budget.monthly_amount)
    forecast_usage = usage_percentage(forecast.forecasted_total_expenses, budget.monthly_amount)

    click.echo(
        f"\nBudget period {format_date(forecast.last_renewal_date)} - "
        f"{format_date(forecast.next_renewal_date)}"
    )
    click.echo("=" * 60)
    click.echo(
        f"Spent:     {format_amount(budget.spent)} / {format_amount(budget.monthly_amount)}"
    )
    click.echo(f"           {usage_bar(current_usage, usage_level(current_usage))}")
    click.echo(
        f"Forecast:  {format_amount(forecast.forecasted_total_expenses)} / "
        f"{format_amount(budget.monthly_amount)}"
    )
    click.echo(f"           {usage_bar(forecast_usage, usage_level(forecast_usage))}")
    remaining_color = "red" if forecast.forecasted_remaining_budget < 0 else "green"
    click.echo(
        "Left at renewal: "
        + click.style(format_amount(forecast.forecasted_remaining_budget), fg=remaining_color)
    )

    period_expenses = filter_expenses_by_date_range(
        service.expenses, forecast.last_renewal_date
    )
    by_category = group_expenses_by_category(period_expenses)
    if by_category:
        click.echo("\nSpending by category")
        click.echo("-" * 60)
        for category, total in sorted(by_category.items(), key=lambda item: item[1], reverse=True):
            click.echo(f"{category:<30} {format_amount(total):>20}")

    recent = service.list_expenses()[:RECENT_EXPENSES]
    if recent:
        click.echo("\nRecent expenses")
        click.echo(expense_header())
        click.echo("-" * 91)
        for expense in recent:
            click.echo(expense_row(expense))


@click.command("forecast")
@click.pass_context
def forecast(ctx):
    """Show the spending forecast for the current budget period."""
    service: BudgetService = ctx.obj["service"]
    budget = service.budget

    if budget.monthly_amount <= 0:
        click.echo("No budget set. Run 'foodbudget budget setup' first.")
        return

    result = service.forecast()
    click.echo(f"Period start:             {format_date(result.last_renewal_date)}")
    click.echo(f"Next renewal:             {format_date(result.next_renewal_date)}")
    click.echo(f"Days until renewal:       {result.days_until_renewal}")
    click.echo(f"Spent this period:        {format_amount(result.current_expenses)}")
    click.echo(f"Average per day:          {format_amount(result.average_daily_expense)}")
    click.echo(f"Expected further spend:   {format_amount(result.forecasted_additional_expenses)}")
    click.echo(f"Expected period total:    {format_amount(result.forecasted_total_expenses)}")
    click.echo(f"Expected left at renewal: {format_amount(result.forecasted_remaining_budget)}")


def register_commands(cli):
    """Register dashboard commands with main CLI."""
    cli.add_command(dashboard)
    cli.add_command(forecast)
