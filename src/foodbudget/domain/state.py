"""Application state and its transitions.

Budget and expense list change together: every command produces a whole new
``BudgetState`` in one step, so the running balance can never drift from the
expense list because one of two writes was lost.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Union

from foodbudget.domain.entities import Budget, Expense


@dataclass(frozen=True)
class BudgetState:
    """Budget and expenses as one immutable value."""

    budget: Budget = field(default_factory=Budget.default)
    expenses: tuple[Expense, ...] = ()

    def find_expense(self, expense_id: int) -> Optional[Expense]:
        """Return the expense with the given ID, if present."""
        for expense in self.expenses:
            if expense.id == expense_id:
                return expense
        return None


@dataclass(frozen=True)
class AddExpense:
    expense: Expense


@dataclass(frozen=True)
class RemoveExpense:
    expense_id: int


@dataclass(frozen=True)
class ReplaceAll:
    budget: Budget
    expenses: tuple[Expense, ...]


@dataclass(frozen=True)
class UpdateBudget:
    budget: Budget


Command = Union[AddExpense, RemoveExpense, ReplaceAll, UpdateBudget]


def apply_command(state: BudgetState, command: Command) -> BudgetState:
    """Return the state that results from applying a command.

    Removing an unknown expense returns the state unchanged.

    Raises:
        TypeError: If the command type is unknown
    """
    if isinstance(command, AddExpense):
        expense = command.expense
        budget = replace(
            state.budget, current_amount=state.budget.current_amount - expense.amount
        )
        return BudgetState(budget=budget, expenses=state.expenses + (expense,))

    if isinstance(command, RemoveExpense):
        expense = state.find_expense(command.expense_id)
        if expense is None:
            return state
        budget = replace(
            state.budget, current_amount=state.budget.current_amount + expense.amount
        )
        expenses = tuple(e for e in state.expenses if e.id != command.expense_id)
        return BudgetState(budget=budget, expenses=expenses)

    if isinstance(command, ReplaceAll):
        return BudgetState(budget=command.budget, expenses=tuple(command.expenses))

    if isinstance(command, UpdateBudget):
        return BudgetState(budget=command.budget, expenses=state.expenses)

    raise TypeError(f"Unknown command: {command!r}")
