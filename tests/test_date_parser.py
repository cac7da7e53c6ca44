"""Tests for date parser with relative dates."""

import pytest
from datetime import date, datetime, timedelta
from foodbudget.utils.date_parser import parse_date, parse_stored_date


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    result = parse_date("2024-01-15")
    assert result == date(2024, 1, 15)


def test_parse_written_date():
    """Test parsing a date written out in words."""
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_today():
    """Test parsing 'today'."""
    result = parse_date("today")
    assert result == date.today()


def test_parse_yesterday():
    """Test parsing 'yesterday'."""
    result = parse_date("yesterday")
    assert result == date.today() - timedelta(days=1)


def test_parse_tomorrow():
    """Test parsing 'tomorrow'."""
    result = parse_date("tomorrow")
    assert result == date.today() + timedelta(days=1)


def test_parse_case_and_whitespace():
    """Test that relative words ignore case and surrounding spaces."""
    assert parse_date("  Today ") == date.today()


def test_parse_invalid_date():
    """Test parsing invalid date."""
    with pytest.raises(ValueError):
        parse_date("not a date")


def test_parse_stored_iso_date():
    assert parse_stored_date("2024-01-15") == date(2024, 1, 15)


def test_parse_stored_iso_datetime():
    assert parse_stored_date("2024-01-15T10:00:00.000Z") == date(2024, 1, 15)


def test_parse_stored_date_objects():
    assert parse_stored_date(date(2024, 1, 15)) == date(2024, 1, 15)
    assert parse_stored_date(datetime(2024, 1, 15, 23, 59)) == date(2024, 1, 15)


@pytest.mark.parametrize("value", ["", "   ", "15/01/2024x", None, 20240115])
def test_parse_stored_invalid(value):
    with pytest.raises(ValueError):
        parse_stored_date(value)


def test_parse_numeric_date_is_day_first():
    """Test that DD-MM-YYYY input matches the displayed format."""
    assert parse_date("05-01-2024") == date(2024, 1, 5)
    assert parse_date("05/01/2024") == date(2024, 1, 5)


def test_parse_iso_date_is_not_day_first():
    """Test that ISO dates keep month before day."""
    assert parse_date("2024-01-05") == date(2024, 1, 5)
