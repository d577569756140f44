"""
Application configuration loaded from environment variables.
Uses pydantic-settings for typed, validated config.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment variables read by the application. None are mandatory."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── OpenAI ────────────────────────────────────────────────
    openai_api_key: str | None = None   # fallback when the caller sends no key
    openai_model: str = "gpt-4o-mini"
    openai_timeout_seconds: float = 30.0
    openai_temperature: float | None = None

    # ── App ───────────────────────────────────────────────────
    app_name: str = "resume-ai"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]


# Singleton — import this wherever config is needed
settings = Settings()
