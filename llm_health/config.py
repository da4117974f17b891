"""Application configuration via environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central configuration for the LLM Health Check API."""

    # Application
    app_name: str = "LLM Health Check API"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = Field(default="development", pattern=r"^(development|staging|production)$")
    log_level: str = "INFO"
    log_format: str = "json"

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)

    # API
    allowed_origins: str = "http://localhost:3000"
    rate_limit_default: str = "100/minute"

    # Oracle (OpenAI-compatible chat completions)
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    oracle_model: str = "gpt-3.5-turbo"
    oracle_temperature: float = Field(default=0.1, ge=0.0, le=2.0)
    oracle_timeout_seconds: float | None = None
    oracle_check_on_startup: bool = False

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",")]

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    model_config = {"env_prefix": "LLM_HEALTH_", "env_file": ".env", "extra": "ignore"}


def get_settings() -> Settings:
    """Return a settings instance built from the environment."""
    return Settings()
