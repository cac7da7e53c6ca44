"""Budget setup commands."""

import click

from foodbudget.cli.error_handling import handle_domain_error
from foodbudget.cli.formatting import format_amount
from foodbudget.domain.budget import BudgetService
from foodbudget.domain.errors import DomainError
from foodbudget.utils.amount_parser import parse_amount


@click.group("budget")
def budget_group():
    """Manage the monthly food budget."""
    pass


@budget_group.command("setup")
@click.option("--monthly-amount", required=True, help="Monthly food budget (e.g., 1200)")
@click.option(
    "--renewal-day",
    required=True,
    type=int,
    help="Day of month the budget renews, e.g. payday (1-31)",
)
@click.option(
    "--current-amount",
    help="Money left in the current period (defaults to the monthly amount)",
)
@click.pass_context
def setup_budget(ctx, monthly_amount: str, renewal_day: int, current_amount: str | None):
    """Set or replace the budget.

    Examples:
        foodbudget budget setup --monthly-amount 1200 --renewal-day 10
        foodbudget budget setup --monthly-amount 1200 --renewal-day 10 --current-amount 640.50
    """
    service: BudgetService = ctx.obj["service"]

    try:
        monthly = parse_amount(monthly_amount)
        current = parse_amount(current_amount) if current_amount else monthly
        budget = service.setup_budget(monthly, renewal_day, current)
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)

    click.echo("Budget saved")
    click.echo(f"  Monthly amount: {format_amount(budget.monthly_amount)}")
    click.echo(f"  Renewal day: {budget.renewal_day}")
    click.echo(f"  Current amount: {format_amount(budget.current_amount)}")


@budget_group.command("show")
@click.pass_context
def show_budget(ctx):
    """Show the current budget."""
    service: BudgetService = ctx.obj["service"]
    budget = service.budget

    if budget.monthly_amount <= 0:
        click.echo("No budget set. Run 'foodbudget budget setup' first.")
        return

    click.echo(f"Monthly amount: {format_amount(budget.monthly_amount)}")
    click.echo(f"Renewal day:    {budget.renewal_day}")
    click.echo(f"Current amount: {format_amount(budget.current_amount)}")
    click.echo(f"Spent:          {format_amount(budget.spent)}")


def register_commands(cli):
    """Register budget commands with main CLI."""
    cli.add_command(budget_group)
