"""Expense commands."""

import click

from foodbudget.cli.error_handling import handle_domain_error
from foodbudget.cli.formatting import expense_header, expense_row, format_amount
from foodbudget.domain.budget import BudgetService
from foodbudget.domain.categories import EXPENSE_CATEGORIES
from foodbudget.domain.errors import DomainError
from foodbudget.utils.amount_parser import parse_amount
from foodbudget.utils.date_parser import parse_date
from foodbudget.utils.date_utils import group_expenses_by_date


@click.command("add")
@click.option("--amount", required=True, help="Expense amount (e.g., 42.50)")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Expense date (YYYY-MM-DD, DD-MM-YYYY or relative like 'today', 'yesterday')",
)
@click.option(
    "--category",
    required=True,
    help=f"Category ({', '.join(EXPENSE_CATEGORIES)})",
)
@click.option("--description", help="What was bought")
@click.option("--shop", help="Shop or restaurant")
@click.option("--duration", type=int, help="Number of days the purchase should last")
@click.pass_context
def add_expense(
    ctx,
    amount: str,
    date: str,
    category: str,
    description: str | None,
    shop: str | None,
    duration: int | None,
):
    """Add an expense manually.

    Examples:
        foodbudget add --amount 42.50 --category dairy --shop "Corner shop"
        foodbudget add --amount 18 --date yesterday --category bread --duration 3
    """
    service: BudgetService = ctx.obj["service"]

    try:
        expense_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        expense_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        expense = service.add_expense(
            amount=expense_amount,
            date=expense_date,
            category=category,
            description=description,
            shop=shop,
            duration=duration,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created expense {expense.id}")
    click.echo(f"  Date: {expense.date}")
    click.echo(f"  Amount: {format_amount(expense.amount)}")
    click.echo(f"  Category: {expense.category}")
    if expense.description:
        click.echo(f"  Description: {expense.description}")
    if expense.shop:
        click.echo(f"  Shop: {expense.shop}")
    click.echo(f"Remaining budget: {format_amount(service.budget.current_amount)}")


@click.command("list")
@click.option("--search", help="Text to look for in description or shop")
@click.option("--category", help="Only show this category")
@click.pass_context
def list_expenses(ctx, search: str | None, category: str | None):
    """List expenses grouped by day, newest first."""
    service: BudgetService = ctx.obj["service"]
    expenses = service.list_expenses(search=search, category=category)

    if not expenses:
        click.echo("No expenses found.")
        return

    click.echo(f"\nFound {len(expenses)} expense(s):")
    for day, day_expenses in group_expenses_by_date(expenses).items():
        day_total = sum(e.amount for e in day_expenses)
        click.echo("")
        click.echo(click.style(f"{day}  ({format_amount(day_total)})", bold=True))
        click.echo(expense_header())
        click.echo("-" * 91)
        for expense in day_expenses:
            click.echo(expense_row(expense))


@click.command("remove")
@click.argument("expense_id", type=int)
@click.pass_context
def remove_expense(ctx, expense_id: int):
    """Delete an expense and give its amount back to the budget."""
    service: BudgetService = ctx.obj["service"]

    try:
        expense = service.remove_expense(expense_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Removed expense {expense.id} ({format_amount(expense.amount)})")
    click.echo(f"Remaining budget: {format_amount(service.budget.current_amount)}")


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(add_expense)
    cli.add_command(list_expenses)
    cli.add_command(remove_expense)
