"""Domain layer for foodbudget application."""

from foodbudget.domain.entities import Budget, Expense, Forecast, ReceiptItem, UsageLevel
from foodbudget.domain.errors import (
    DomainError,
    ValidationError,
    NotFoundError,
    ImportFormatError,
    RelayError,
)

__all__ = [
    "Budget",
    "Expense",
    "Forecast",
    "ReceiptItem",
    "UsageLevel",
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ImportFormatError",
    "RelayError",
]
