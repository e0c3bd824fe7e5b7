"""Primary provider: OpenAI Chat Completions with a forced function call."""

import logging

from app.core.errors import ResponseFormatError
from app.core.prompt_builder import (
    CORRECTION_TOOL,
    CORRECTION_TOOL_NAME,
    build_system_prompt,
    build_user_message,
)
from app.models.correction import CorrectionResult
from app.services.correction_provider import CorrectionProvider
from app.utils.json_parser import decode_correction_payload

logger = logging.getLogger(__name__)


class OpenAIProvider(CorrectionProvider):
    """Structured output via the ``provideCorrections`` tool."""

    name = "openai"

    def endpoint_url(self) -> str:
        return f"{self.config.base_url}/chat/completions"

    def build_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
        }

    def build_payload(self, text: str) -> dict:
        return {
            "model": self.config.model,
            "temperature": self.config.temperature,
            "max_tokens": self.config.max_tokens,
            "messages": [
                {"role": "system", "content": build_system_prompt()},
                {"role": "user", "content": build_user_message(text)},
            ],
            "tools": [CORRECTION_TOOL],
            "tool_choice": {
                "type": "function",
                "function": {"name": CORRECTION_TOOL_NAME},
            },
        }

    def decode(self, body: dict) -> CorrectionResult:
        try:
            message = body["choices"][0]["message"]
        except (KeyError, IndexError, TypeError) as exc:
            logger.error("OpenAI response missing choices: keys=%s", list(body.keys()))
            raise ResponseFormatError(self.name, "Unexpected response format from OpenAI") from exc

        tool_calls = message.get("tool_calls") if isinstance(message, dict) else None
        arguments = None
        if isinstance(tool_calls, list) and tool_calls and isinstance(tool_calls[0], dict):
            function = tool_calls[0].get("function")
            if isinstance(function, dict):
                arguments = function.get("arguments")
        if not isinstance(arguments, str) or not arguments:
            logger.warning(
                "OpenAI returned no tool call (finish_reason=%s)",
                body["choices"][0].get("finish_reason", "unknown"),
            )
            raise ResponseFormatError(self.name, "Unexpected response format from OpenAI")

        return decode_correction_payload(arguments, self.name)
