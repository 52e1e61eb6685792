"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    openai_api_key: str
    openai_model: str = "gpt-4o-mini"
    openai_reasoning_effort: str | None = None
    openai_store: bool = False
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"
    ai_default_provider: str = "openai"
    cors_origins: str = DEFAULT_CORS_ORIGINS
    diet_table: str = "diet_plans"
    workout_table: str = "workout_plans"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return []
    origins: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip().rstrip("/")
        if value and value not in origins:
            origins.append(value)
    return origins
