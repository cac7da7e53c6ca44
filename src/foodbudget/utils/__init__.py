"""Utility functions for foodbudget."""

from foodbudget.utils.date_parser import parse_date
from foodbudget.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_amount"]
