"""Shared pytest fixtures for foodbudget tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from foodbudget.config import Settings
from foodbudget.domain.budget import BudgetService
from foodbudget.domain.entities import Budget, Expense
from foodbudget.storage.factories import create_sqlite_store

# 2024-01-20 12:00:00 UTC
FIXED_CLOCK = 1705752000.0


@pytest.fixture
def temp_store():
    """Create a temporary store for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    store = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    store.database_path = db_path
    store.connect()
    store.initialize_schema()

    yield store

    store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def budget_service(temp_store):
    """Create a loaded BudgetService with a deterministic clock."""
    service = BudgetService(temp_store, clock=lambda: FIXED_CLOCK)
    service.load()
    return service


@pytest.fixture
def sample_budget(budget_service):
    """Set up a budget of 1000 renewing on the 10th."""
    return budget_service.setup_budget(
        monthly_amount=Decimal("1000"), renewal_day=10, current_amount=Decimal("1000")
    )


@pytest.fixture
def sample_expenses():
    """Expenses around the January 10 - February 10 period."""
    return [
        Expense(id=1, amount=Decimal("300"), date=date(2024, 1, 5), category="Meat"),
        Expense(
            id=2,
            amount=Decimal("50"),
            date=date(2024, 1, 12),
            category="Dairy",
            description="Milk and cheese",
            shop="Corner shop",
        ),
        Expense(
            id=3,
            amount=Decimal("150"),
            date=date(2024, 1, 15),
            category="Restaurant",
            description="Dinner",
        ),
    ]


@pytest.fixture
def forecast_budget():
    return Budget(
        monthly_amount=Decimal("1000"), renewal_day=10, current_amount=Decimal("600")
    )


@pytest.fixture
def settings():
    """Settings pointing at a relay that tests replace with fakes."""
    return Settings(relay_url="http://relay.test", anthropic_api_key="test-key")


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()

