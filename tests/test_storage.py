"""Tests for the SQLAlchemy key/value store."""

from pathlib import Path

from foodbudget.storage.factories import create_sqlite_store
from foodbudget.storage.models import Record


def test_get_missing_key(temp_store):
    assert temp_store.get("budget") is None


def test_set_and_get(temp_store):
    value = {"monthlyAmount": 1000, "renewalDay": 10, "currentAmount": 812.5}

    assert temp_store.set("budget", value) is True
    assert temp_store.get("budget") == value


def test_set_overwrites(temp_store):
    temp_store.set("expenses", [])
    temp_store.set("expenses", [{"id": 1}])

    assert temp_store.get("expenses") == [{"id": 1}]


def test_values_survive_reconnect(temp_store):
    temp_store.set("expenses", [{"id": 1, "amount": 3}])

    other = create_sqlite_store(database_path=temp_store.database_path)
    try:
        assert other.get("expenses") == [{"id": 1, "amount": 3}]
    finally:
        other.disconnect()


def test_remove(temp_store):
    temp_store.set("budget", {"a": 1})

    assert temp_store.remove("budget") is True
    assert temp_store.get("budget") is None
    assert temp_store.remove("budget") is True


def test_clear(temp_store):
    temp_store.set("budget", {"a": 1})
    temp_store.set("expenses", [])

    assert temp_store.clear() is True
    assert temp_store.get("budget") is None
    assert temp_store.get("expenses") is None


def test_unserializable_value_is_rejected(temp_store):
    assert temp_store.set("budget", {"when": object()}) is False
    assert temp_store.get("budget") is None


def test_corrupt_value_reads_as_missing(temp_store, caplog):
    session = temp_store._get_session()
    session.add(Record(key="budget", value="{not json"))
    session.commit()

    assert temp_store.get("budget") is None
    assert "not valid JSON" in caplog.text


def test_factory_uses_environment(monkeypatch, tmp_path):
    db_path = tmp_path / "env.db"
    monkeypatch.setenv("FOODBUDGET_DB_PATH", str(db_path))

    store = create_sqlite_store()

    assert store.database_url == f"sqlite:///{db_path}"


def test_factory_default_location(monkeypatch, tmp_path):
    monkeypatch.delenv("FOODBUDGET_DB_PATH", raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)

    store = create_sqlite_store()

    assert (tmp_path / ".foodbudget").is_dir()
    assert store.database_url == f"sqlite:///{tmp_path / '.foodbudget' / 'foodbudget.db'}"
