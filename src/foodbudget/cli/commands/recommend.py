"""Recommendations command."""

import click

from foodbudget.cli.error_handling import handle_domain_error
from foodbudget.domain.budget import BudgetService
from foodbudget.domain.errors import DomainError
from foodbudget.domain.recommendations import parse_recommendations, recommendation_summary
from foodbudget.relay.client import RelayClient


@click.command("recommend")
@click.option("--raw", is_flag=True, help="Print the model's answer without reformatting")
@click.pass_context
def recommend(ctx, raw: bool):
    """Ask the AI relay for suggestions based on your spending."""
    service: BudgetService = ctx.obj["service"]
    settings = ctx.obj["settings"]

    expenses = service.list_expenses()
    if not expenses:
        click.echo("No expenses recorded yet, nothing to analyze.")
        return

    client = RelayClient(settings.relay_url, timeout=settings.relay_timeout)
    forecast = service.forecast()
    try:
        text = client.get_recommendations(
            expenses,
            budget=service.budget.monthly_amount,
            remaining_budget=forecast.forecasted_remaining_budget,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    if raw:
        click.echo(text)
        return

    click.echo(recommendation_summary(text))
    click.echo("")
    for number, item in enumerate(parse_recommendations(text), start=1):
        click.echo(f"{number}. {item}")


def register_commands(cli):
    """Register recommend command with main CLI."""
    cli.add_command(recommend)
