"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from typing import Any

from dateutil import parser as date_parser


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and the
    relative words "today", "yesterday" and "tomorrow".

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        return date_parser.isoparse(date_str).date()
    except ValueError:
        pass

    # Non-ISO numeric dates are day first, as they are displayed
    try:
        return date_parser.parse(date_str, dayfirst=True).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_stored_date(value: Any) -> date:
    """Parse a date as stored in records and backups.

    Accepts ``date`` objects, ISO dates ("2024-01-15") and ISO datetimes
    ("2024-01-15T10:00:00.000Z"); only the calendar date is kept.

    Raises:
        ValueError: If the value is not a recognizable ISO date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid date value: {value!r}")
    try:
        return date_parser.isoparse(value.strip()).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Invalid date value {value!r}: {e}")
