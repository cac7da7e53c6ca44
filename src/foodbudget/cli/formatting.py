"""Text rendering helpers shared by CLI commands."""

from decimal import Decimal

import click

from foodbudget.domain.entities import Expense, UsageLevel

CURRENCY = "zł"
BAR_WIDTH = 30

LEVEL_COLORS = {
    UsageLevel.OK: "green",
    UsageLevel.WARNING: "yellow",
    UsageLevel.OVER: "red",
}


def format_amount(amount: Decimal) -> str:
    """Format an amount with two decimals and the currency."""
    return f"{amount:,.2f} {CURRENCY}"


def usage_bar(percentage: Decimal, level: UsageLevel) -> str:
    """Render a percentage as a colored text progress bar."""
    filled = int(percentage / 100 * BAR_WIDTH)
    bar = "#" * filled + "." * (BAR_WIDTH - filled)
    return click.style(f"[{bar}] {percentage:5.1f}%", fg=LEVEL_COLORS[level])


def expense_row(expense: Expense) -> str:
    """One-line table row for an expense."""
    description = (expense.description or "")[:28]
    shop = (expense.shop or "")[:18]
    return (
        f"{expense.id:<15} {format_amount(expense.amount):>14} "
        f"{expense.category:<12} {shop:<18} {description:<28}"
    )


def expense_header() -> str:
    return f"{'ID':<15} {'Amount':>14} {'Category':<12} {'Shop':<18} {'Description':<28}"
