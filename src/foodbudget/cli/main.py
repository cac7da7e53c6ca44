"""Main CLI entry point."""

import click

from foodbudget.config import configure_logging, load_settings
from foodbudget.domain.budget import BudgetService
from foodbudget.storage.factories import create_sqlite_store

# Import and register all commands at module level
from foodbudget.cli.commands import (
    budget,
    expense,
    dashboard,
    scan,
    recommend,
    backup,
    serve,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FOODBUDGET_DB_PATH environment variable)",
    envvar="FOODBUDGET_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides FOODBUDGET_LOG_LEVEL environment variable)",
    envvar="FOODBUDGET_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """Foodbudget - Food budget tracker.

    Set a monthly food budget, record expenses by hand or from receipt
    photos, and see how the rest of the budget period is likely to go.
    """
    ctx.ensure_object(dict)
    settings = load_settings()
    configure_logging(log_level or settings.log_level)
    ctx.obj["settings"] = settings

    # Open the store only when actually running a command (not for --help)
    if ctx.invoked_subcommand is not None:
        store = create_sqlite_store(database_path=db_path or settings.db_path)
        store.connect()
        store.initialize_schema()
        ctx.call_on_close(store.disconnect)

        service = BudgetService(store)
        service.load()
        ctx.obj["service"] = service


# Register all commands
budget.register_commands(cli)
expense.register_commands(cli)
dashboard.register_commands(cli)
scan.register_commands(cli)
recommend.register_commands(cli)
backup.register_commands(cli)
serve.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
