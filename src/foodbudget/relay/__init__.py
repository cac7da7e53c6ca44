"""AI relay server and client."""

from foodbudget.relay.app import create_app
from foodbudget.relay.client import RelayClient

__all__ = ["create_app", "RelayClient"]
