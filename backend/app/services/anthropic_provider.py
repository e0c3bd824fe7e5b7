"""Secondary provider: Anthropic Messages API answering with JSON text."""

import logging

import httpx

from app.core.errors import ResponseFormatError
from app.core.prompt_builder import build_system_prompt, build_user_message
from app.models.correction import CorrectionResult
from app.services.correction_provider import CorrectionProvider
from app.services.llm_client import LLMProviderConfig
from app.utils.json_parser import decode_correction_payload

logger = logging.getLogger(__name__)

DEFAULT_ANTHROPIC_VERSION = "2023-06-01"


class AnthropicProvider(CorrectionProvider):
    """No schema enforcement: the first text block must itself be the JSON object."""

    name = "anthropic"

    def __init__(
        self,
        config: LLMProviderConfig,
        client: httpx.AsyncClient,
        api_version: str = DEFAULT_ANTHROPIC_VERSION,
    ) -> None:
        super().__init__(config, client)
        self.api_version = api_version

    def endpoint_url(self) -> str:
        return f"{self.config.base_url}/messages"

    def build_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-api-key": self.config.api_key,
            "anthropic-version": self.api_version,
        }

    def build_payload(self, text: str) -> dict:
        return {
            "model": self.config.model,
            "max_tokens": self.config.max_tokens,
            "temperature": self.config.temperature,
            "system": build_system_prompt(include_json_format=True),
            "messages": [
                {"role": "user", "content": build_user_message(text)},
            ],
        }

    def decode(self, body: dict) -> CorrectionResult:
        blocks = body.get("content")
        if not isinstance(blocks, list):
            blocks = []
        text_block = next(
            (b for b in blocks if isinstance(b, dict) and b.get("type") == "text"),
            None,
        )
        if text_block is None:
            logger.warning(
                "Anthropic returned no text block (stop_reason=%s)",
                body.get("stop_reason", "unknown"),
            )
            raise ResponseFormatError(self.name, "Unexpected response format from Claude")

        return decode_correction_payload(text_block.get("text"), self.name)
