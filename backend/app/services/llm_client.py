"""Provider configuration for the correction fallback chain.

Environment settings win over the built-in defaults; only the API keys have
no usable default.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from app.config import Settings, settings as default_settings


class LLMProvider(str, enum.Enum):
    openai = "openai"
    anthropic = "anthropic"


@dataclass
class LLMProviderConfig:
    provider: LLMProvider
    base_url: str
    model: str
    api_key: str = ""
    max_tokens: int = 1024
    temperature: float = 0.2
    timeout_seconds: float = 90.0
    connect_timeout_seconds: float = 10.0

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


PROVIDER_DEFAULTS: dict[LLMProvider, LLMProviderConfig] = {
    LLMProvider.openai: LLMProviderConfig(
        provider=LLMProvider.openai,
        base_url="https://api.openai.com/v1",
        model="gpt-4o",
    ),
    LLMProvider.anthropic: LLMProviderConfig(
        provider=LLMProvider.anthropic,
        base_url="https://api.anthropic.com/v1",
        model="claude-3-sonnet-20240229",
    ),
}


def get_provider_config(
    provider: LLMProvider, settings: Settings | None = None
) -> LLMProviderConfig:
    """Build the config for *provider* from settings, falling back to defaults."""
    cfg = settings or default_settings
    defaults = PROVIDER_DEFAULTS[provider]

    if provider == LLMProvider.openai:
        base_url, model, api_key = cfg.openai_base_url, cfg.openai_model, cfg.openai_api_key
    else:
        base_url, model, api_key = (
            cfg.anthropic_base_url, cfg.anthropic_model, cfg.anthropic_api_key,
        )

    return LLMProviderConfig(
        provider=provider,
        base_url=(base_url or defaults.base_url).rstrip("/"),
        model=model or defaults.model,
        api_key=api_key,
        max_tokens=cfg.llm_max_tokens,
        temperature=cfg.llm_temperature,
        timeout_seconds=cfg.llm_timeout_seconds,
        connect_timeout_seconds=cfg.llm_connect_timeout_seconds,
    )
