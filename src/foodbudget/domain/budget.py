"""Budget domain service."""

import logging
import time
from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Sequence

from foodbudget.domain.categories import fix_category
from foodbudget.domain.entities import Budget, Expense, Forecast
from foodbudget.domain.errors import (
    NotFoundError,
    ValidationError,
    amount_must_be_positive,
    amount_must_not_be_negative,
    expense_not_found,
    renewal_day_out_of_range,
)
from foodbudget.domain.forecast import forecast_expenses
from foodbudget.domain.state import (
    AddExpense,
    BudgetState,
    Command,
    RemoveExpense,
    ReplaceAll,
    UpdateBudget,
    apply_command,
)
from foodbudget.storage.base import BUDGET_KEY, EXPENSES_KEY, KeyValueStore
from foodbudget.storage.mappers import (
    budget_from_record,
    budget_to_record,
    expenses_from_records,
    expenses_to_records,
)

logger = logging.getLogger(__name__)


def validate_budget(budget: Budget) -> None:
    """Check a budget entered through setup.

    Raises:
        ValidationError: If an amount or the renewal day is out of range
    """
    if budget.monthly_amount <= 0:
        raise ValidationError(amount_must_be_positive("Monthly amount", budget.monthly_amount))
    if not 1 <= budget.renewal_day <= 31:
        raise ValidationError(renewal_day_out_of_range(budget.renewal_day))
    if budget.current_amount < 0:
        raise ValidationError(
            amount_must_not_be_negative("Current amount", budget.current_amount)
        )


class BudgetService:
    """Application state bound to a store.

    Holds the current ``BudgetState``. Every change goes through
    ``dispatch``, which applies one command and writes both the budget and
    the expense list back to the store.
    """

    def __init__(self, store: KeyValueStore, clock=time.time):
        """Initialize budget service.

        Args:
            store: Key/value store holding the "budget" and "expenses" records
            clock: Returns the current time in seconds, used for expense IDs
        """
        self.store = store
        self.clock = clock
        self.state = BudgetState()

    def load(self) -> BudgetState:
        """Read state from the store, falling back to defaults for bad data."""
        budget = Budget.default()
        expenses: tuple[Expense, ...] = ()

        budget_record = self.store.get(BUDGET_KEY)
        if budget_record is not None:
            try:
                budget = budget_from_record(budget_record)
            except ValueError as e:
                logger.error("Ignoring unreadable budget record: %s", e)

        expense_records = self.store.get(EXPENSES_KEY)
        if expense_records is not None:
            try:
                expenses = expenses_from_records(expense_records)
            except ValueError as e:
                logger.error("Ignoring unreadable expense records: %s", e)

        self.state = BudgetState(budget=budget, expenses=expenses)
        return self.state

    def save(self) -> bool:
        """Write the current state to the store. Returns True on success."""
        return self._write(
            budget_to_record(self.state.budget), expenses_to_records(self.state.expenses)
        )

    def _write(self, budget_record, expense_records) -> bool:
        budget_saved = self.store.set(BUDGET_KEY, budget_record)
        expenses_saved = self.store.set(EXPENSES_KEY, expense_records)
        if not (budget_saved and expenses_saved):
            logger.warning("State could not be fully persisted")
        return budget_saved and expenses_saved

    def dispatch(self, command: Command) -> BudgetState:
        """Apply a command, persist the result and return the new state.

        Both records are encoded before anything changes, so a state that
        cannot be stored leaves memory and the store untouched.
        """
        state = apply_command(self.state, command)
        budget_record = budget_to_record(state.budget)
        expense_records = expenses_to_records(state.expenses)
        self.state = state
        self._write(budget_record, expense_records)
        return self.state

    @property
    def budget(self) -> Budget:
        return self.state.budget

    @property
    def expenses(self) -> tuple[Expense, ...]:
        return self.state.expenses

    def setup_budget(
        self, monthly_amount: Decimal, renewal_day: int, current_amount: Decimal
    ) -> Budget:
        """Validate and store a new budget, keeping the expense list.

        Raises:
            ValidationError: If an amount or the renewal day is out of range
        """
        budget = Budget(
            monthly_amount=monthly_amount,
            renewal_day=renewal_day,
            current_amount=current_amount,
        )
        validate_budget(budget)
        self.dispatch(UpdateBudget(budget))
        logger.info("Budget set to %s renewing on day %d", monthly_amount, renewal_day)
        return budget

    def next_expense_id(self) -> int:
        """Millisecond timestamp, bumped past existing IDs to stay unique."""
        candidate = int(self.clock() * 1000)
        existing = [expense.id for expense in self.state.expenses]
        if existing and candidate <= max(existing):
            candidate = max(existing) + 1
        return candidate

    def add_expense(
        self,
        amount: Decimal,
        date: date,
        category: str,
        description: Optional[str] = None,
        shop: Optional[str] = None,
        duration: Optional[int] = None,
    ) -> Expense:
        """Record an expense and deduct it from the running balance.

        Raises:
            ValidationError: If the amount is not positive, the category is
                empty or the duration is negative
        """
        if amount <= 0:
            raise ValidationError(amount_must_be_positive("Amount", amount))
        if not category or not category.strip():
            raise ValidationError("Category is required")
        if duration is not None and duration < 0:
            raise ValidationError(f"Duration must not be negative (got {duration})")

        expense = Expense(
            id=self.next_expense_id(),
            amount=amount,
            date=date,
            category=fix_category(category.strip()),
            description=description or None,
            shop=shop or None,
            duration=duration,
        )
        self.dispatch(AddExpense(expense))
        logger.info("Added expense %d of %s", expense.id, expense.amount)
        return expense

    def add_expenses(self, expenses: Sequence[Expense]) -> list[Expense]:
        """Record prepared expenses, assigning each a fresh ID."""
        added = []
        for expense in expenses:
            expense = replace(expense, id=self.next_expense_id())
            self.dispatch(AddExpense(expense))
            added.append(expense)
        logger.info("Added %d expenses", len(added))
        return added

    def remove_expense(self, expense_id: int) -> Expense:
        """Delete an expense and return its amount to the running balance.

        Raises:
            NotFoundError: If no expense has this ID
        """
        expense = self.state.find_expense(expense_id)
        if expense is None:
            raise NotFoundError(expense_not_found(expense_id))
        self.dispatch(RemoveExpense(expense_id))
        logger.info("Removed expense %d", expense_id)
        return expense

    def replace_all(self, budget: Budget, expenses: Sequence[Expense]) -> BudgetState:
        """Replace the whole state, as done by a backup import."""
        state = self.dispatch(ReplaceAll(budget=budget, expenses=tuple(expenses)))
        logger.info("Replaced state with %d expenses", len(state.expenses))
        return state

    def get_expense(self, expense_id: int) -> Optional[Expense]:
        """Get expense by ID."""
        return self.state.find_expense(expense_id)

    def list_expenses(
        self, search: Optional[str] = None, category: Optional[str] = None
    ) -> list[Expense]:
        """List expenses newest first.

        Args:
            search: Case-insensitive text matched against description and shop
            category: Category to keep, normalized like expense categories
        """
        result = list(self.state.expenses)
        if search:
            term = search.lower()
            result = [
                e
                for e in result
                if (e.description and term in e.description.lower())
                or (e.shop and term in e.shop.lower())
            ]
        if category:
            category = fix_category(category.strip())
            result = [e for e in result if e.category == category]
        return sorted(result, key=lambda e: e.date, reverse=True)

    def forecast(self, now: Optional[datetime] = None) -> Forecast:
        """Forecast the current budget period."""
        return forecast_expenses(self.state.expenses, self.state.budget, now=now)
