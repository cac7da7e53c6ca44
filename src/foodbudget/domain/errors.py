"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ImportFormatError(DomainError):
    """Backup document is malformed or missing required data."""


class RelayError(DomainError):
    """The AI relay could not be reached or reported a failure."""


def expense_not_found(expense_id: int) -> str:
    """Return message for missing expense."""
    return f"Expense {expense_id} not found"


def amount_must_be_positive(field: str, amount: Decimal) -> str:
    """Return message for a non-positive amount."""
    return f"{field} must be greater than zero (got {amount})"


def amount_must_not_be_negative(field: str, amount: Decimal) -> str:
    """Return message for a negative amount."""
    return f"{field} must not be negative (got {amount})"


def renewal_day_out_of_range(renewal_day: int) -> str:
    """Return message for a renewal day outside 1..31."""
    return f"Renewal day must be between 1 and 31 (got {renewal_day})"


def backup_missing_keys(missing: list[str]) -> str:
    """Return message when a backup document lacks required top-level keys."""
    return (
        "Invalid backup file: missing required "
        f"{'key' if len(missing) == 1 else 'keys'} {', '.join(repr(k) for k in missing)}"
    )
