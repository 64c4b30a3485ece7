"""Application configuration."""

import logging
import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_PROVIDER_ORDER: tuple[str, ...] = ("groq", "cerebras", "openrouter", "gemini")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    groq_api_key: str | None = None
    cerebras_api_key: str | None = None
    openrouter_api_key: str | None = None
    gemini_api_key: str | None = None
    groq_model: str = "llama3-8b-8192"
    cerebras_model: str = "llama3.1-8b"
    openrouter_model: str = "mistralai/mixtral-8x7b-instruct"
    gemini_model: str = "gemini-2.5-flash"
    provider_order: str | None = None
    provider_timeout_seconds: float = 30.0
    temperature: float = 0.7
    max_tokens: int = 500
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3001
    cors_allow_origins: str = "*"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator(
        "groq_api_key",
        "cerebras_api_key",
        "openrouter_api_key",
        "gemini_api_key",
        mode="before",
    )
    @classmethod
    def _blank_key_is_missing(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level


def parse_provider_order(raw: str | None) -> tuple[str, ...]:
    """Parse the provider fallback order from env."""
    if raw is None:
        return DEFAULT_PROVIDER_ORDER
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return DEFAULT_PROVIDER_ORDER
    names: list[str] = []
    for chunk in cleaned.split(","):
        value = chunk.strip().lower()
        if not value or value in names:
            continue
        if value in DEFAULT_PROVIDER_ORDER:
            names.append(value)
    return tuple(names) or DEFAULT_PROVIDER_ORDER


def parse_cors_origins(raw: str) -> list[str]:
    """Parse allowed CORS origins from env."""
    origins = [chunk.strip() for chunk in raw.split(",") if chunk.strip()]
    return origins or ["*"]
