"""Prompt templates sent to the completion model."""

from decimal import Decimal
from typing import Any

from foodbudget.domain.categories import EXPENSE_CATEGORIES, OTHER_CATEGORY
from foodbudget.utils.amount_parser import to_decimal

RECENT_EXPENSE_LIMIT = 10

RECEIPT_PROMPT = f"""
Analyze the photo of this receipt and return the following information as JSON:

1. The receipt total
2. The name of the shop or restaurant
3. The purchase date
4. Every product with its price and category

Response format:
{{
  "total": "receipt total",
  "store": "shop name",
  "date": "purchase date as YYYY-MM-DD",
  "items": [
    {{
      "name": "product name",
      "price": "price as a number",
      "category": "one of: {', '.join(c.lower() for c in EXPENSE_CATEGORIES)}"
    }}
  ]
}}

If any information is unreadable or missing, use null.

Important: respond with JSON only, ready to be parsed.
"""

RECOMMENDATIONS_PROMPT = """
You are reviewing a user's food spending. Here is the data:

1. Monthly food budget: {budget}
2. Remaining budget this month: {remaining_budget}
3. Spending by category:
   {categories}
4. Most recent expenses:
   {recent}

Based on this data, write personalized recommendations.

Rules:
1. Address the user directly in the second person ("You spent", "Your budget").
2. Do not use asterisks for bold text.
3. Be specific and practical.

Response format:
1. One sentence summarizing the budget situation (two lines at most).
2. Then five separate recommendations, each in its own paragraph, each
   starting with a verb (e.g. "Consider...", "Limit...", "Try...").
3. IMPORTANT: start each recommendation on a new line and number it
   ("1. Consider...", "2. Limit...").

Keep the whole answer short and concrete.
"""


def _amount(value: Any) -> Decimal:
    try:
        return to_decimal(value)
    except ValueError:
        return Decimal("0")


def category_totals(expenses: list[dict[str, Any]]) -> list[tuple[str, Decimal]]:
    """Sum raw expense records per category, largest first."""
    totals: dict[str, Decimal] = {}
    for expense in expenses:
        category = expense.get("category") or OTHER_CATEGORY
        totals[category] = totals.get(category, Decimal("0")) + _amount(expense.get("amount"))
    return sorted(totals.items(), key=lambda item: item[1], reverse=True)


def build_recommendations_prompt(
    expenses: list[dict[str, Any]], budget: Any, remaining_budget: Any
) -> str:
    """Fill the recommendations template from the request body."""
    categories = "\n   ".join(
        f"- {category}: {total:.2f}" for category, total in category_totals(expenses)
    )
    recent = "\n   ".join(
        f"- {e.get('description') or e.get('category') or 'Purchase'} "
        f"({e.get('shop') or 'Shop'}): {_amount(e.get('amount')):.2f}"
        for e in expenses[:RECENT_EXPENSE_LIMIT]
    )
    return RECOMMENDATIONS_PROMPT.format(
        budget=budget,
        remaining_budget=remaining_budget,
        categories=categories or "- none",
        recent=recent or "- none",
    )
