"""Mapper functions between domain entities and stored JSON records.

Records use the camelCase field names of the backup format, so stored values
and exported backups share one layout.
"""

from typing import Any, Optional

from foodbudget.domain.entities import Budget, Expense
from foodbudget.domain.categories import fix_category
from foodbudget.utils.amount_parser import to_decimal
from foodbudget.utils.date_parser import parse_stored_date


def _number(value) -> float | int:
    """Encode a Decimal as a JSON number."""
    return int(value) if value == value.to_integral_value() else float(value)


def budget_to_record(budget: Budget) -> dict[str, Any]:
    """Convert a Budget entity to its stored record."""
    return {
        "monthlyAmount": _number(budget.monthly_amount),
        "renewalDay": budget.renewal_day,
        "currentAmount": _number(budget.current_amount),
    }


def budget_from_record(record: Any) -> Budget:
    """Convert a stored record to a Budget entity.

    Raises:
        ValueError: If the record is malformed
    """
    if not isinstance(record, dict):
        raise ValueError(f"Budget record must be an object, got {type(record).__name__}")
    try:
        renewal_day = int(record["renewalDay"])
        if not 1 <= renewal_day <= 31:
            raise ValueError(f"renewalDay out of range: {renewal_day}")
        return Budget(
            monthly_amount=to_decimal(record["monthlyAmount"]),
            renewal_day=renewal_day,
            current_amount=to_decimal(record["currentAmount"]),
        )
    except KeyError as e:
        raise ValueError(f"Budget record is missing {e}")
    except TypeError as e:
        raise ValueError(f"Invalid budget record: {e}")


def expense_to_record(expense: Expense) -> dict[str, Any]:
    """Convert an Expense entity to its stored record."""
    return {
        "id": expense.id,
        "amount": _number(expense.amount),
        "date": expense.date.isoformat(),
        "category": expense.category,
        "description": expense.description,
        "shop": expense.shop,
        "duration": expense.duration,
    }


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def expense_from_record(record: Any) -> Expense:
    """Convert a stored record to an Expense entity.

    Raises:
        ValueError: If the record is malformed
    """
    if not isinstance(record, dict):
        raise ValueError(f"Expense record must be an object, got {type(record).__name__}")
    try:
        duration = record.get("duration")
        amount = to_decimal(record["amount"])
        if amount <= 0:
            raise ValueError(f"Expense amount must be greater than zero, got {amount}")
        return Expense(
            id=int(record["id"]),
            amount=amount,
            date=parse_stored_date(record["date"]),
            category=fix_category(record.get("category")),
            description=_optional_text(record.get("description")),
            shop=_optional_text(record.get("shop")),
            duration=int(duration) if duration not in (None, "") else None,
        )
    except KeyError as e:
        raise ValueError(f"Expense record is missing {e}")
    except TypeError as e:
        raise ValueError(f"Invalid expense record: {e}")


def expenses_to_records(expenses) -> list[dict[str, Any]]:
    """Convert a sequence of Expense entities to stored records."""
    return [expense_to_record(expense) for expense in expenses]


def expenses_from_records(records: Any) -> tuple[Expense, ...]:
    """Convert a list of stored records to Expense entities.

    Raises:
        ValueError: If the list or any record is malformed
    """
    if not isinstance(records, list):
        raise ValueError(f"Expenses must be a list, got {type(records).__name__}")
    return tuple(expense_from_record(record) for record in records)
