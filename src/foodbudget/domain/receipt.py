"""Receipt scan results and their decomposition into expenses."""

import json
import re
from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from foodbudget.domain.categories import fix_category
from foodbudget.domain.entities import Expense, ReceiptItem
from foodbudget.domain.errors import ValidationError, amount_must_be_positive
from foodbudget.utils.amount_parser import to_decimal
from foodbudget.utils.date_parser import parse_stored_date

JSON_BLOCK_PATTERN = re.compile(r"\{.*\}", re.DOTALL)


def extract_json_block(text: str) -> Optional[Any]:
    """Parse the outermost ``{...}`` block found in free text.

    Returns:
        The decoded JSON value, or None if there is no block or it does not
        parse
    """
    match = JSON_BLOCK_PATTERN.search(text or "")
    if match is None:
        return None
    try:
        return json.loads(match.group(0))
    except ValueError:
        return None


def _lenient_decimal(value: Any) -> Optional[Decimal]:
    try:
        return to_decimal(value)
    except ValueError:
        return None


def _lenient_date(value: Any) -> Optional[date]:
    try:
        return parse_stored_date(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class ReceiptScan:
    """Data read from one receipt, reviewed before it becomes expenses."""

    total: Optional[Decimal]
    store: Optional[str]
    date: Optional[date]
    items: tuple[ReceiptItem, ...]
    raw_response: Optional[str] = None
    parse_error: Optional[str] = None

    @classmethod
    def from_relay(cls, data: dict[str, Any]) -> "ReceiptScan":
        """Build a scan from the relay's ``data`` payload.

        Categories are normalized; prices that do not parse become zero and
        must be corrected before saving.
        """
        items = []
        for raw_item in data.get("items") or []:
            if not isinstance(raw_item, dict):
                continue
            items.append(
                ReceiptItem(
                    name=str(raw_item.get("name") or ""),
                    price=_lenient_decimal(raw_item.get("price")) or Decimal("0"),
                    category=fix_category(raw_item.get("category")),
                )
            )
        store = data.get("store")
        return cls(
            total=_lenient_decimal(data.get("total")),
            store=str(store) if store else None,
            date=_lenient_date(data.get("date")),
            items=tuple(items),
            raw_response=data.get("rawResponse"),
            parse_error=data.get("parseError"),
        )

    def with_item(self, index: int, **changes: Any) -> "ReceiptScan":
        """Return a copy with one item edited; category edits are normalized."""
        if "category" in changes:
            changes["category"] = fix_category(changes["category"])
        items = list(self.items)
        items[index] = replace(items[index], **changes)
        return replace(self, items=tuple(items))

    def without_item(self, index: int) -> "ReceiptScan":
        """Return a copy with one item dropped."""
        items = list(self.items)
        del items[index]
        return replace(self, items=tuple(items))

    def to_expenses(
        self, duration: Optional[int] = None, today: Optional[date] = None
    ) -> list[Expense]:
        """Turn every line item into its own expense.

        All expenses share the receipt's date (or today), its store and the
        single ``duration`` entered for the whole receipt. IDs are left at 0
        for the budget service to assign.

        Raises:
            ValidationError: If there are no items or a price is not positive
        """
        if not self.items:
            raise ValidationError("The receipt has no items, nothing to save")
        expense_date = self.date or today or date.today()

        expenses = []
        for item in self.items:
            if item.price <= 0:
                raise ValidationError(amount_must_be_positive(f"Price of '{item.name}'", item.price))
            expenses.append(
                Expense(
                    id=0,
                    amount=item.price,
                    date=expense_date,
                    category=item.category,
                    description=item.name or None,
                    shop=self.store or "",
                    duration=duration,
                )
            )
        return expenses
