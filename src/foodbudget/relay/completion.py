"""Client for the hosted completion model."""

import logging
import re
from typing import Optional, Protocol

import anthropic

logger = logging.getLogger(__name__)

DATA_URL_PATTERN = re.compile(r"^data:(?P<media_type>[\w/+.-]+);base64,(?P<data>.+)$", re.DOTALL)
SUPPORTED_MEDIA_TYPES = ("image/jpeg", "image/png", "image/gif", "image/webp")


def split_data_url(image: str) -> tuple[str, str]:
    """Split a base64 data URL into (media type, base64 payload).

    A bare base64 string is treated as a JPEG image.

    Raises:
        ValueError: If the media type is not a supported image type
    """
    match = DATA_URL_PATTERN.match(image.strip())
    if match is None:
        return "image/jpeg", image.strip()
    media_type = match.group("media_type").lower()
    if media_type == "image/jpg":
        media_type = "image/jpeg"
    if media_type not in SUPPORTED_MEDIA_TYPES:
        raise ValueError(f"Unsupported image type: {media_type}")
    return media_type, match.group("data")


class CompletionClient(Protocol):
    """What the relay needs from a model provider."""

    def complete(self, prompt: str, max_tokens: int) -> str:
        ...

    def complete_with_image(self, prompt: str, image: str, max_tokens: int) -> str:
        ...


class AnthropicCompletionClient:
    """CompletionClient backed by the Anthropic Messages API."""

    def __init__(self, model: str, api_key: Optional[str] = None):
        """Initialize the client.

        Args:
            model: Model name to call
            api_key: API key; the SDK falls back to ANTHROPIC_API_KEY
        """
        self.model = model
        self.client = anthropic.Anthropic(api_key=api_key)

    def _text(self, response) -> str:
        return "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )

    def complete(self, prompt: str, max_tokens: int) -> str:
        """Send a text prompt and return the reply text."""
        response = self.client.messages.create(
            model=self.model,
            max_tokens=max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
        return self._text(response)

    def complete_with_image(self, prompt: str, image: str, max_tokens: int) -> str:
        """Send a prompt with one image given as a data URL and return the reply text."""
        media_type, data = split_data_url(image)
        logger.debug("Sending %s image to %s", media_type, self.model)
        response = self.client.messages.create(
            model=self.model,
            max_tokens=max_tokens,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image",
                            "source": {
                                "type": "base64",
                                "media_type": media_type,
                                "data": data,
                            },
                        },
                        {"type": "text", "text": prompt},
                    ],
                }
            ],
        )
        return self._text(response)
