"""Backup export and import commands."""

from pathlib import Path

import click

from foodbudget.cli.error_handling import handle_domain_error
from foodbudget.domain.backup import read_backup, write_backup
from foodbudget.domain.budget import BudgetService
from foodbudget.domain.errors import ImportFormatError


@click.command("export")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Directory to write the backup file into",
)
@click.pass_context
def export_data(ctx, output_dir: Path):
    """Write budget and expenses to a JSON backup file."""
    service: BudgetService = ctx.obj["service"]

    output_dir.mkdir(parents=True, exist_ok=True)
    try:
        path = write_backup(service.state, output_dir)
    except OSError as e:
        click.echo(f"Error: Could not write backup: {e}", err=True)
        ctx.exit(1)

    click.echo(f"Exported {len(service.expenses)} expense(s) to {path}")


@click.command("import")
@click.argument("backup_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--yes", "-y", is_flag=True, help="Replace current data without asking")
@click.pass_context
def import_data(ctx, backup_file: Path, yes: bool):
    """Replace budget and expenses with the contents of a backup file."""
    service: BudgetService = ctx.obj["service"]

    try:
        state = read_backup(backup_file)
    except ImportFormatError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(
        "This replaces your current budget and all expenses. Continue?", default=False
    ):
        click.echo("Import cancelled.")
        return

    service.replace_all(state.budget, state.expenses)
    click.echo(f"Imported budget and {len(state.expenses)} expense(s) from {backup_file}")


def register_commands(cli):
    """Register backup commands with main CLI."""
    cli.add_command(export_data)
    cli.add_command(import_data)
