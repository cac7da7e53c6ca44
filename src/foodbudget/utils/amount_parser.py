"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re
from typing import Any


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "123,45" (decimal comma)
    - "12.50 zł", "PLN 12.50", "$12.50"
    - "1 234.56"

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Remove currency markers
    amount_str = re.sub(r"(?i)(zł|pln|[$€£])", "", amount_str)

    # Remove whitespace used as thousands separator
    amount_str = re.sub(r"\s+", "", amount_str)

    if "," in amount_str and "." in amount_str:
        # Whichever separator comes last is the decimal point
        if amount_str.rfind(",") > amount_str.rfind("."):
            amount_str = amount_str.replace(".", "").replace(",", ".")
        else:
            amount_str = amount_str.replace(",", "")
    elif amount_str.count(",") == 1:
        amount_str = amount_str.replace(",", ".")
    else:
        amount_str = amount_str.replace(",", "")

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}': not a finite number")
    return amount


def to_decimal(value: Any) -> Decimal:
    """Convert a JSON number or numeric string to Decimal.

    Floats go through ``str`` so 12.3 becomes Decimal("12.3").

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, (int, float)):
        value = Decimal(str(value))
    elif isinstance(value, str):
        return parse_amount(value)
    elif not isinstance(value, Decimal):
        raise ValueError(f"Not a number: {value!r}")
    if not value.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return value
