"""Receipt scanning command."""

from pathlib import Path

import click

from foodbudget.cli.error_handling import handle_domain_error
from foodbudget.cli.formatting import format_amount
from foodbudget.domain.budget import BudgetService
from foodbudget.domain.errors import DomainError
from foodbudget.domain.receipt import ReceiptScan
from foodbudget.relay.client import RelayClient, image_to_data_url
from foodbudget.utils.amount_parser import parse_amount


def _show_scan(scan: ReceiptScan) -> None:
    click.echo(f"Store: {scan.store or '-'}")
    click.echo(f"Date:  {scan.date or '-'}")
    if scan.total is not None:
        click.echo(f"Total: {format_amount(scan.total)}")
    click.echo(f"\n{'#':<4} {'Item':<36} {'Price':>14} {'Category':<12}")
    click.echo("-" * 70)
    for index, item in enumerate(scan.items, start=1):
        click.echo(f"{index:<4} {item.name[:36]:<36} {format_amount(item.price):>14} {item.category:<12}")


def _parse_assignment(value: str) -> tuple[int, str]:
    """Parse an 'INDEX=VALUE' option into a zero-based index and value."""
    index, sep, text = value.partition("=")
    if not sep or not index.strip().isdigit() or int(index) < 1:
        raise click.BadParameter(f"Expected INDEX=VALUE, got '{value}'")
    return int(index) - 1, text.strip()


@click.command("scan")
@click.argument("image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--duration", type=int, help="Number of days the shopping should last")
@click.option("--drop", "drops", type=int, multiple=True, help="Item number to leave out")
@click.option(
    "--set-category",
    "category_edits",
    multiple=True,
    help="Change an item's category, as INDEX=CATEGORY",
)
@click.option(
    "--set-price", "price_edits", multiple=True, help="Change an item's price, as INDEX=PRICE"
)
@click.option("--yes", "-y", is_flag=True, help="Save without asking for confirmation")
@click.pass_context
def scan_receipt(ctx, image: Path, duration, drops, category_edits, price_edits, yes: bool):
    """Read a receipt photo and add one expense per item.

    Examples:
        foodbudget scan receipt.jpg
        foodbudget scan receipt.jpg --drop 3 --set-category 2=dairy --duration 7 --yes
    """
    service: BudgetService = ctx.obj["service"]
    settings = ctx.obj["settings"]
    client = RelayClient(settings.relay_url, timeout=settings.relay_timeout)

    try:
        click.echo("Analyzing receipt...")
        scan = client.analyze_receipt(image_to_data_url(image))
    except DomainError as e:
        handle_domain_error(ctx, e)

    if scan.parse_error:
        click.echo(f"Error: Could not read the receipt: {scan.parse_error}", err=True)
        if scan.raw_response:
            click.echo(scan.raw_response, err=True)
        ctx.exit(1)

    try:
        for value in category_edits:
            index, category = _parse_assignment(value)
            scan = scan.with_item(index, category=category)
        for value in price_edits:
            index, price = _parse_assignment(value)
            scan = scan.with_item(index, price=parse_amount(price))
        for index in sorted(set(drops), reverse=True):
            if index < 1:
                raise IndexError(index)
            scan = scan.without_item(index - 1)
    except IndexError:
        click.echo("Error: Item number out of range", err=True)
        ctx.exit(1)
    except ValueError as e:
        handle_domain_error(ctx, e)

    _show_scan(scan)

    try:
        expenses = scan.to_expenses(duration=duration)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(f"\nSave {len(expenses)} expense(s)?", default=True):
        click.echo("Nothing saved.")
        return

    added = service.add_expenses(expenses)
    total = sum(e.amount for e in added)
    click.echo(f"Saved {len(added)} expense(s) totalling {format_amount(total)}")
    click.echo(f"Remaining budget: {format_amount(service.budget.current_amount)}")


def register_commands(cli):
    """Register scan command with main CLI."""
    cli.add_command(scan_receipt)
