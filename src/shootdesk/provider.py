"""
Client for the external text-to-image provider.

This module holds all communication with the provider's Images API: sending
a generation request and downloading the generated bitmap when the provider
answers with a URL instead of inline data.

Responsibilities:
- Manage the HTTP session and credentials
- Send exactly one generation request per call (no retries)
- Map provider failures to ``ProviderError`` with the provider's own message
"""

import logging
from typing import Optional

import requests

from shootdesk.errors import ProviderError
from shootdesk.schemas import GenerationRequest, ProviderImage

logger = logging.getLogger(__name__)

INLINE_IMAGE_KEYS = ("b64_json", "b64json", "b64")


def mirrored_status(status: int) -> int:
    return status if 400 <= status < 600 else 502


class ImageProviderClient:

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openai.com/v1",
        model: str = "gpt-image-1",
        timeout: Optional[float] = None,
        debug: bool = False,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.debug = debug
        self.generations_url = f"{base_url.rstrip('/')}/images/generations"
        self.session = session or requests.Session()

    def _details(self, payload):
        return payload if self.debug else None

    def generate(self, request: GenerationRequest) -> ProviderImage:
        body = {
            "model": self.model,
            "prompt": request.prompt,
            "size": request.provider_size_hint,
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        try:
            resp = self.session.post(
                self.generations_url, json=body, headers=headers, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.error("Error reaching image provider: %s", e)
            raise ProviderError(
                "Failed to reach image provider.", details=self._details(str(e))
            ) from e

        try:
            data = resp.json()
        except ValueError as e:
            logger.error("Failed to parse provider response as JSON: %s", e)
            raise ProviderError(
                "Unexpected response from image provider.",
                status_code=502,
                details=self._details(resp.text),
            ) from e
        if not isinstance(data, dict):
            raise ProviderError(
                "Unexpected response from image provider.",
                status_code=502,
                details=self._details(data),
            )

        if not resp.ok:
            error = data.get("error")
            message = error.get("message") if isinstance(error, dict) else None
            logger.error("Image generation failed: %s %s", resp.status_code, data)
            raise ProviderError(
                message or f"Image provider returned status {resp.status_code}",
                status_code=mirrored_status(resp.status_code),
                details=self._details(data),
            )

        entries = data.get("data")
        entry = {}
        if isinstance(entries, list) and entries and isinstance(entries[0], dict):
            entry = entries[0]
        url = entry.get("url")
        b64_data = next((entry[k] for k in INLINE_IMAGE_KEYS if entry.get(k)), None)
        if not all(isinstance(v, str) for v in (url, b64_data) if v is not None):
            logger.error("Provider returned a malformed image entry: %s", entry)
            raise ProviderError(
                "Unexpected response from image provider.",
                status_code=502,
                details=self._details(data),
            )
        if not url and not b64_data:
            logger.error("Provider response without image: %s", data)
            raise ProviderError(
                "No image returned", status_code=500, details=self._details(data)
            )
        return ProviderImage(url=url, b64_data=b64_data)

    def fetch_image(self, url: str) -> bytes:
        """Download a generated image the provider returned by URL."""
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error("Error fetching generated image: %s", e)
            raise ProviderError("Failed fetching generated image.") from e
        if not resp.ok:
            raise ProviderError(
                f"Failed fetching generated image URL: {resp.status_code}",
                status_code=502,
            )
        return resp.content
