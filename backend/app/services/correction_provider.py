"""Common behaviour for external correction providers.

A provider turns sanitized student text into a :class:`CorrectionResult` with
one HTTP round trip. Subclasses only describe the request and how to pull the
correction payload out of the response; transport errors, status handling and
credential checks live here.
"""

import logging
import time
from abc import ABC, abstractmethod

import httpx

from app.core.errors import ConfigurationError, ProviderCallError, ResponseFormatError
from app.models.correction import CorrectionResult
from app.services.llm_client import LLMProviderConfig

logger = logging.getLogger(__name__)


class CorrectionProvider(ABC):
    """One link in the gateway's fallback chain."""

    name: str = "provider"

    def __init__(self, config: LLMProviderConfig, client: httpx.AsyncClient) -> None:
        self.config = config
        self.client = client

    async def check(self, text: str) -> CorrectionResult:
        """Send *text* to the provider and decode its answer."""
        if not self.config.is_configured:
            raise ConfigurationError(self.name)

        url = self.endpoint_url()
        payload = self.build_payload(text)
        logger.info(
            "POST %s  provider=%s  model=%s  text_len=%d",
            url, self.name, self.config.model, len(text),
        )

        start = time.perf_counter()
        try:
            response = await self.client.post(
                url,
                headers=self.build_headers(),
                json=payload,
                timeout=httpx.Timeout(
                    self.config.timeout_seconds, connect=self.config.connect_timeout_seconds,
                ),
            )
        except httpx.HTTPError as exc:
            raise ProviderCallError(self.name, f"{type(exc).__name__}: {exc}") from exc

        elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
        logger.info("%s response status: %d (%.2f ms)", self.name, response.status_code, elapsed_ms)
        if response.status_code != 200:
            logger.error("%s error body: %s", self.name, response.text[:500])
            raise ProviderCallError(self.name, f"HTTP {response.status_code}")

        try:
            body = response.json()
        except ValueError as exc:
            raise ResponseFormatError(self.name, "response body is not JSON") from exc
        if not isinstance(body, dict):
            raise ResponseFormatError(
                self.name, f"expected a JSON object, got {type(body).__name__}",
            )

        return self.decode(body)

    @abstractmethod
    def endpoint_url(self) -> str:
        """Full URL of the generation endpoint."""

    @abstractmethod
    def build_headers(self) -> dict[str, str]:
        """Auth and content headers for the request."""

    @abstractmethod
    def build_payload(self, text: str) -> dict:
        """JSON request body for *text*."""

    @abstractmethod
    def decode(self, body: dict) -> CorrectionResult:
        """Extract the correction payload from a successful response body."""
