"""Client used by the CLI to call the AI relay."""

import base64
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional, Sequence

import httpx

from foodbudget.domain.entities import Expense
from foodbudget.domain.errors import RelayError
from foodbudget.domain.receipt import ReceiptScan
from foodbudget.storage.mappers import expenses_to_records

logger = logging.getLogger(__name__)

IMAGE_MEDIA_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
}


def image_to_data_url(path: Path) -> str:
    """Read a JPG or PNG file into a base64 data URL.

    Raises:
        RelayError: If the file type is unsupported or the file is unreadable
    """
    path = Path(path)
    media_type = IMAGE_MEDIA_TYPES.get(path.suffix.lower())
    if media_type is None:
        raise RelayError("Unsupported file format. Supported formats: JPG, PNG")
    try:
        data = path.read_bytes()
    except OSError as e:
        raise RelayError(f"Could not read {path}: {e}")
    return f"data:{media_type};base64,{base64.b64encode(data).decode('ascii')}"


class RelayClient:
    """HTTP client for the relay endpoints."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 60.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize relay client.

        Args:
            base_url: Relay root URL, e.g. http://127.0.0.1:5000
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            with httpx.Client(
                base_url=self.base_url, timeout=self.timeout, transport=self.transport
            ) as client:
                response = client.post(path, json=payload)
        except httpx.HTTPError as e:
            logger.error("Relay request to %s failed: %s", path, e)
            raise RelayError(f"Could not reach the relay: {e}")

        try:
            body = response.json()
        except ValueError:
            raise RelayError(f"Relay returned HTTP {response.status_code} with a non-JSON body")
        if not isinstance(body, dict):
            raise RelayError(f"Relay returned HTTP {response.status_code} with an unexpected body")

        if response.is_error or not body.get("success"):
            message = body.get("error") or f"HTTP {response.status_code}"
            if body.get("details"):
                message = f"{message}: {body['details']}"
            raise RelayError(message)
        return body

    def analyze_receipt(self, image_data_url: str) -> ReceiptScan:
        """Send a receipt image and return the reviewed-ready scan."""
        body = self._post("/api/analyze-receipt", {"image": image_data_url})
        data = body.get("data")
        if not isinstance(data, dict):
            raise RelayError("Relay returned no receipt data")
        return ReceiptScan.from_relay(data)

    def get_recommendations(
        self,
        expenses: Sequence[Expense],
        budget: Decimal,
        remaining_budget: Decimal,
    ) -> str:
        """Request free-text recommendations for the expense history."""
        body = self._post(
            "/api/get-recommendations",
            {
                "expenses": expenses_to_records(expenses),
                "budget": float(budget),
                "remainingBudget": float(remaining_budget),
            },
        )
        return str(body.get("data") or "")
