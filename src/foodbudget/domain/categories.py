"""Expense category enumeration and normalization."""

from typing import Optional

OTHER_CATEGORY = "Other"

EXPENSE_CATEGORIES: tuple[str, ...] = (
    "Bread",
    "Dairy",
    "Meat",
    "Fruit",
    "Vegetables",
    "Drinks",
    "Snacks",
    "Ready meals",
    "Restaurant",
    OTHER_CATEGORY,
)


def fix_category(raw: Optional[str]) -> str:
    """Normalize a category name to one of EXPENSE_CATEGORIES.

    The first letter is upper-cased and the rest lower-cased. Anything that
    is then not a known category (including empty input) becomes "Other".

    Args:
        raw: Category as typed by the user or returned by the relay

    Returns:
        A member of EXPENSE_CATEGORIES
    """
    if not raw:
        return OTHER_CATEGORY
    capitalized = raw[:1].upper() + raw[1:].lower()
    return capitalized if capitalized in EXPENSE_CATEGORIES else OTHER_CATEGORY
