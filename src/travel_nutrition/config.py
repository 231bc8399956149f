"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    openai_temperature: float = 0.6
    openai_max_output_tokens: int = 220
    openai_store: bool = False
    weather_base_url: str = "https://api.open-meteo.com/v1"
    weather_timeout_seconds: float = 10.0
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def resolve_api_key(header_value: str | None) -> str | None:
    """Return a per-request OpenAI key from a header value, if one was sent."""
    if header_value is None:
        return None
    cleaned = header_value.strip()
    return cleaned or None
