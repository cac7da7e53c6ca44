"""Backup export and import."""

import json
from datetime import datetime, UTC
from pathlib import Path
from typing import Any, Optional

from foodbudget.domain.errors import ImportFormatError, backup_missing_keys
from foodbudget.domain.state import BudgetState
from foodbudget.storage.mappers import (
    budget_from_record,
    budget_to_record,
    expenses_from_records,
    expenses_to_records,
)

BACKUP_VERSION = "1.0"


def backup_filename(now: Optional[datetime] = None) -> str:
    """Return the download name for a backup taken at ``now``."""
    if now is None:
        now = datetime.now(UTC)
    return f"foodbudget-backup-{now.date().isoformat()}.json"


def export_backup(state: BudgetState, now: Optional[datetime] = None) -> dict[str, Any]:
    """Build the backup document for a state."""
    if now is None:
        now = datetime.now(UTC)
    return {
        "budget": budget_to_record(state.budget),
        "expenses": expenses_to_records(state.expenses),
        "exportDate": now.isoformat(),
        "version": BACKUP_VERSION,
    }


def dump_backup(state: BudgetState, now: Optional[datetime] = None) -> str:
    """Serialize a state to backup JSON text."""
    return json.dumps(export_backup(state, now), indent=2, ensure_ascii=False)


def write_backup(
    state: BudgetState, directory: Path, now: Optional[datetime] = None
) -> Path:
    """Write a backup file into a directory and return its path."""
    path = Path(directory) / backup_filename(now)
    path.write_text(dump_backup(state, now), encoding="utf-8")
    return path


def import_backup(text: str) -> BudgetState:
    """Parse backup JSON text into a state.

    Nothing is applied here; the caller replaces its state only when this
    returns.

    Raises:
        ImportFormatError: If the text is not JSON, lacks the "budget" or
            "expenses" keys, or contains malformed records
    """
    try:
        data = json.loads(text)
    except ValueError as e:
        raise ImportFormatError(f"Invalid backup file: not valid JSON ({e})")

    if not isinstance(data, dict):
        raise ImportFormatError("Invalid backup file: expected a JSON object")

    missing = [key for key in ("budget", "expenses") if data.get(key) is None]
    if missing:
        raise ImportFormatError(backup_missing_keys(missing))

    try:
        budget = budget_from_record(data["budget"])
        expenses = expenses_from_records(data["expenses"])
    except ValueError as e:
        raise ImportFormatError(f"Invalid backup file: {e}")

    return BudgetState(budget=budget, expenses=expenses)


def read_backup(path: Path) -> BudgetState:
    """Read and parse a backup file.

    Raises:
        ImportFormatError: If the file cannot be read or parsed
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ImportFormatError(f"Could not read backup file {path}: {e}")
    return import_backup(text)
