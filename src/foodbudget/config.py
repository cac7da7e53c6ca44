"""Runtime configuration read from the environment and an optional .env file."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_RELAY_URL = "http://127.0.0.1:5000"
DEFAULT_MODEL = "claude-sonnet-4-5"
DEFAULT_PORT = 5000


@dataclass(frozen=True)
class Settings:
    """Settings shared by the CLI and the relay server."""

    db_path: Optional[str] = None
    relay_url: str = DEFAULT_RELAY_URL
    relay_timeout: float = 60.0
    anthropic_api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    max_tokens_receipt: int = 4096
    max_tokens_recommendations: int = 1000
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    log_level: str = "WARNING"


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Build Settings from environment variables.

    Values from a .env file are loaded first without overriding variables
    that are already set.
    """
    load_dotenv(env_file, override=False)
    return Settings(
        db_path=os.getenv("FOODBUDGET_DB_PATH"),
        relay_url=os.getenv("FOODBUDGET_RELAY_URL", DEFAULT_RELAY_URL),
        relay_timeout=float(os.getenv("FOODBUDGET_RELAY_TIMEOUT", "60")),
        anthropic_api_key=os.getenv("ANTHROPIC_API_KEY"),
        model=os.getenv("FOODBUDGET_MODEL", DEFAULT_MODEL),
        host=os.getenv("FOODBUDGET_HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", str(DEFAULT_PORT))),
        log_level=os.getenv("FOODBUDGET_LOG_LEVEL", "WARNING"),
    )


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
