"""Abstract key/value store interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

BUDGET_KEY = "budget"
EXPENSES_KEY = "expenses"


class KeyValueStore(ABC):
    """Durable key/value store holding JSON-compatible values.

    Implementations never raise on I/O problems: failures are logged and
    reported through the return value, so callers degrade to "no data".
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize store schema (create tables)."""
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the decoded value for key, or None if missing or unreadable."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> bool:
        """Store a JSON-compatible value. Returns True on success."""
        pass

    @abstractmethod
    def remove(self, key: str) -> bool:
        """Delete a key. Returns True on success, including when it was absent."""
        pass

    @abstractmethod
    def clear(self) -> bool:
        """Delete every key. Returns True on success."""
        pass
