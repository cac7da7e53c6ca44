"""Domain model entities for foodbudget.

These are pure data classes representing business concepts, independent of
the storage format. The mapping to the stored JSON records lives in
``foodbudget.storage.mappers``.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Budget:
    """Monthly food budget with its running balance."""

    monthly_amount: Decimal
    renewal_day: int
    current_amount: Decimal

    @classmethod
    def default(cls) -> "Budget":
        """Zero-value budget used before the first setup."""
        return cls(monthly_amount=Decimal("0"), renewal_day=1, current_amount=Decimal("0"))

    @property
    def spent(self) -> Decimal:
        """Amount spent in the current period according to the running balance."""
        return self.monthly_amount - self.current_amount


@dataclass(frozen=True)
class Expense:
    """Single food expense."""

    id: int
    amount: Decimal
    date: date
    category: str
    description: Optional[str] = None
    shop: Optional[str] = None
    duration: Optional[int] = None


@dataclass(frozen=True)
class Forecast:
    """Projection of spending through the end of the current budget period."""

    current_expenses: Decimal
    average_daily_expense: Decimal
    days_until_renewal: int
    forecasted_additional_expenses: Decimal
    forecasted_total_expenses: Decimal
    forecasted_remaining_budget: Decimal
    last_renewal_date: date
    next_renewal_date: date


class UsageLevel(str, Enum):
    """Traffic-light level of budget usage."""

    OK = "ok"
    WARNING = "warning"
    OVER = "over"


@dataclass(frozen=True)
class ReceiptItem:
    """Line item extracted from a receipt, editable before saving."""

    name: str
    price: Decimal
    category: str
