"""Application configuration."""

from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Development mode: when False, logs are single-line JSON and error details are hidden
    dev_mode: bool = True

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]

    # Primary provider (OpenAI Chat Completions, structured tool output)
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-4o"

    # Secondary provider (Anthropic Messages, free-form JSON text)
    anthropic_api_key: str = ""
    anthropic_base_url: str = "https://api.anthropic.com/v1"
    anthropic_model: str = "claude-3-sonnet-20240229"
    anthropic_version: str = "2023-06-01"

    # LLM generation
    llm_max_tokens: int = 1024
    llm_temperature: float = 0.2
    llm_timeout_seconds: float = 90.0
    llm_connect_timeout_seconds: float = 10.0

    # Logging
    log_level: str = "info"

    @model_validator(mode="after")
    def _validate_timeouts(self) -> "Settings":
        if self.llm_timeout_seconds <= 0 or self.llm_connect_timeout_seconds <= 0:
            raise ValueError("LLM timeouts must be positive")
        if self.llm_max_tokens <= 0:
            raise ValueError("LLM_MAX_TOKENS must be positive")
        return self

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
