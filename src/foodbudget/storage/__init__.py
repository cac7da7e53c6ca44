"""Storage layer for foodbudget application."""

from foodbudget.storage.base import KeyValueStore, BUDGET_KEY, EXPENSES_KEY
from foodbudget.storage.factories import create_sqlite_store

__all__ = ["KeyValueStore", "BUDGET_KEY", "EXPENSES_KEY", "create_sqlite_store"]
