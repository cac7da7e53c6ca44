"""Tests for settings loading."""

import pytest

from foodbudget.config import DEFAULT_MODEL, DEFAULT_RELAY_URL, Settings, load_settings

ENV_VARS = (
    "FOODBUDGET_DB_PATH",
    "FOODBUDGET_RELAY_URL",
    "FOODBUDGET_RELAY_TIMEOUT",
    "ANTHROPIC_API_KEY",
    "FOODBUDGET_MODEL",
    "FOODBUDGET_HOST",
    "PORT",
    "FOODBUDGET_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return tmp_path / "missing.env"


def test_defaults(clean_env):
    settings = load_settings(str(clean_env))

    assert settings == Settings()
    assert settings.relay_url == DEFAULT_RELAY_URL
    assert settings.model == DEFAULT_MODEL
    assert settings.port == 5000
    assert settings.relay_timeout == 60.0


def test_environment_overrides(clean_env, monkeypatch):
    monkeypatch.setenv("FOODBUDGET_DB_PATH", "/tmp/food.db")
    monkeypatch.setenv("FOODBUDGET_RELAY_URL", "http://relay.example:8000")
    monkeypatch.setenv("FOODBUDGET_RELAY_TIMEOUT", "5")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("FOODBUDGET_LOG_LEVEL", "DEBUG")

    settings = load_settings(str(clean_env))

    assert settings.db_path == "/tmp/food.db"
    assert settings.relay_url == "http://relay.example:8000"
    assert settings.relay_timeout == 5.0
    assert settings.anthropic_api_key == "sk-test"
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"


def test_env_file_does_not_override_environment(clean_env, monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "FOODBUDGET_RELAY_URL=http://from-file:9000\nFOODBUDGET_MODEL=file-model\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("FOODBUDGET_MODEL", "env-model")

    settings = load_settings(str(env_file))

    assert settings.relay_url == "http://from-file:9000"
    assert settings.model == "env-model"
