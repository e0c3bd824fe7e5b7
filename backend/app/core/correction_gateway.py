"""Correction gateway: validation, sanitization and the provider fallback chain."""

import logging
import time
from collections.abc import Sequence

import httpx

from app.config import Settings
from app.core.errors import (
    ALL_PROVIDERS_DOWN_MESSAGE,
    SECONDARY_MISCONFIGURED_MESSAGE,
    ConfigurationError,
    ServiceUnavailableError,
    ValidationError,
)
from app.core.prompt_builder import sanitize_text
from app.models.correction import CorrectionResult
from app.services.anthropic_provider import AnthropicProvider
from app.services.correction_provider import CorrectionProvider
from app.services.llm_client import LLMProvider, get_provider_config
from app.services.openai_provider import OpenAIProvider

logger = logging.getLogger(__name__)


class CorrectionGateway:
    """Tries each provider in order and returns the first answer.

    Providers are called strictly one after another; a later provider is only
    reached when every earlier one raised.
    """

    def __init__(self, providers: Sequence[CorrectionProvider]) -> None:
        if not providers:
            raise ValueError("CorrectionGateway needs at least one provider")
        self.providers = list(providers)

    async def check(self, text: str | None) -> CorrectionResult:
        """Check *text* and return the normalized result.

        Raises:
            ValidationError: *text* is empty or whitespace-only.
            ServiceUnavailableError: every provider failed.
        """
        if text is None or not text.strip():
            raise ValidationError()

        sanitized = sanitize_text(text)
        if len(sanitized) != len(text):
            logger.info("Stripped %d control character(s) from input", len(text) - len(sanitized))

        last_error: Exception | None = None
        for provider in self.providers:
            start = time.perf_counter()
            try:
                result = await provider.check(sanitized)
            except Exception as exc:
                logger.warning("%s request failed: %s", provider.name, exc)
                last_error = exc
                continue

            elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
            logger.info(
                "Checked %d chars via %s: has_errors=%s errors=%d (%.2f ms)",
                len(sanitized), provider.name, result.has_errors, len(result.errors), elapsed_ms,
            )
            return result

        if isinstance(last_error, ConfigurationError):
            logger.error("Fallback provider %s is not configured", last_error.provider)
            raise ServiceUnavailableError(SECONDARY_MISCONFIGURED_MESSAGE, misconfigured=True)

        logger.error("All %d providers failed", len(self.providers))
        raise ServiceUnavailableError(ALL_PROVIDERS_DOWN_MESSAGE)


def build_gateway(settings: Settings, client: httpx.AsyncClient) -> CorrectionGateway:
    """Build the production chain: OpenAI first, Anthropic as fallback."""
    primary = OpenAIProvider(get_provider_config(LLMProvider.openai, settings), client)
    secondary = AnthropicProvider(
        get_provider_config(LLMProvider.anthropic, settings),
        client,
        api_version=settings.anthropic_version,
    )
    for provider in (primary, secondary):
        if not provider.config.is_configured:
            logger.warning("Provider %s has no API key configured", provider.name)
    return CorrectionGateway([primary, secondary])
