"""SQLAlchemy key/value store implementation."""

import json
import logging
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from foodbudget.storage.base import KeyValueStore
from foodbudget.storage.models import Record, create_session_factory

logger = logging.getLogger(__name__)


class SQLAlchemyStore(KeyValueStore):
    """SQLAlchemy-based implementation of the KeyValueStore interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy store.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the store."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the store."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize store schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def get(self, key: str) -> Optional[Any]:
        """Return the decoded value for key, or None if missing or unreadable."""
        try:
            record = self._get_session().get(Record, key)
        except SQLAlchemyError:
            logger.exception("Failed to read %r from store", key)
            self._rollback()
            return None
        if record is None:
            return None
        try:
            return json.loads(record.value)
        except ValueError:
            logger.error("Stored value for %r is not valid JSON, ignoring it", key)
            return None

    def set(self, key: str, value: Any) -> bool:
        """Store a JSON-compatible value. Returns True on success."""
        try:
            encoded = json.dumps(value)
        except (TypeError, ValueError):
            logger.exception("Value for %r is not JSON serializable", key)
            return False

        session = self._get_session()
        try:
            record = session.get(Record, key)
            if record is None:
                session.add(Record(key=key, value=encoded))
            else:
                record.value = encoded
            session.commit()
        except SQLAlchemyError:
            logger.exception("Failed to write %r to store", key)
            self._rollback()
            return False
        return True

    def remove(self, key: str) -> bool:
        """Delete a key. Returns True on success, including when it was absent."""
        session = self._get_session()
        try:
            session.query(Record).filter(Record.key == key).delete()
            session.commit()
        except SQLAlchemyError:
            logger.exception("Failed to remove %r from store", key)
            self._rollback()
            return False
        return True

    def clear(self) -> bool:
        """Delete every key. Returns True on success."""
        session = self._get_session()
        try:
            session.query(Record).delete()
            session.commit()
        except SQLAlchemyError:
            logger.exception("Failed to clear store")
            self._rollback()
            return False
        return True

    def _rollback(self) -> None:
        if self._session is not None:
            self._session.rollback()
