"""Tests for state transitions."""

from datetime import date
from decimal import Decimal

import pytest

from foodbudget.domain.entities import Budget, Expense
from foodbudget.domain.state import (
    AddExpense,
    BudgetState,
    RemoveExpense,
    ReplaceAll,
    UpdateBudget,
    apply_command,
)


@pytest.fixture
def state():
    budget = Budget(monthly_amount=Decimal("1000"), renewal_day=10, current_amount=Decimal("800"))
    expense = Expense(id=1, amount=Decimal("200"), date=date(2024, 1, 12), category="Meat")
    return BudgetState(budget=budget, expenses=(expense,))


def test_default_state_is_empty():
    state = BudgetState()

    assert state.budget == Budget.default()
    assert state.budget.monthly_amount == Decimal("0")
    assert state.budget.renewal_day == 1
    assert state.expenses == ()


def test_add_expense_deducts_amount(state):
    expense = Expense(id=2, amount=Decimal("49.99"), date=date(2024, 1, 13), category="Dairy")

    new_state = apply_command(state, AddExpense(expense))

    assert new_state.budget.current_amount == Decimal("750.01")
    assert new_state.expenses[-1] == expense
    assert len(new_state.expenses) == 2
    # the original value is untouched
    assert state.budget.current_amount == Decimal("800")
    assert len(state.expenses) == 1


def test_add_expense_may_overdraw(state):
    expense = Expense(id=2, amount=Decimal("900"), date=date(2024, 1, 13), category="Meat")

    new_state = apply_command(state, AddExpense(expense))

    assert new_state.budget.current_amount == Decimal("-100")


def test_remove_expense_restores_amount(state):
    new_state = apply_command(state, RemoveExpense(1))

    assert new_state.budget.current_amount == Decimal("1000")
    assert new_state.expenses == ()


def test_add_then_remove_is_identity(state):
    expense = Expense(id=2, amount=Decimal("12.34"), date=date(2024, 1, 13), category="Fruit")

    new_state = apply_command(apply_command(state, AddExpense(expense)), RemoveExpense(2))

    assert new_state == state


def test_remove_unknown_expense_is_noop(state):
    assert apply_command(state, RemoveExpense(999)) is state


def test_replace_all(state):
    budget = Budget(monthly_amount=Decimal("500"), renewal_day=1, current_amount=Decimal("500"))

    new_state = apply_command(state, ReplaceAll(budget=budget, expenses=()))

    assert new_state.budget == budget
    assert new_state.expenses == ()


def test_update_budget_keeps_expenses(state):
    budget = Budget(monthly_amount=Decimal("1200"), renewal_day=15, current_amount=Decimal("1200"))

    new_state = apply_command(state, UpdateBudget(budget))

    assert new_state.budget == budget
    assert new_state.expenses == state.expenses


def test_unknown_command_raises(state):
    with pytest.raises(TypeError):
        apply_command(state, "add")


def test_find_expense(state):
    assert state.find_expense(1).amount == Decimal("200")
    assert state.find_expense(2) is None


def test_budget_spent():
    budget = Budget(monthly_amount=Decimal("1000"), renewal_day=10, current_amount=Decimal("650"))
    assert budget.spent == Decimal("350")
