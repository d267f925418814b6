"""Application settings for the NASA data proxy."""

from __future__ import annotations

import json
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration entrypoint for the FastAPI application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True

    # Server
    base_url: str = "http://127.0.0.1:5001"
    host: str = "0.0.0.0"
    port: int = 5001
    allowed_origins: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Observability
    log_level: str = "INFO"
    enable_tracing: bool = False
    otlp_endpoint: str | None = None
    otlp_headers: str | None = None

    # Metrics endpoint authentication
    metrics_username: str = "prometheus"
    metrics_password: str | None = None

    # Upstream providers
    nasa_api_key: str = "DEMO_KEY"  # NASA public demo key, shared quota
    demo_api_key: str = "DEMO_KEY"  # used by the client's direct-upstream tier
    user_agent: str = "AstroLink-NASA-Explorer/1.0"

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def parse_allowed_origins(cls, value: str | list[str] | None) -> list[str]:
        """Normalize ALLOWED_ORIGINS env input into a list."""
        if isinstance(value, list):
            return value
        if isinstance(value, str):
            raw = value.strip()
            if not raw:
                return []
            if raw.startswith("["):
                try:
                    parsed = json.loads(raw)
                    if isinstance(parsed, list):
                        return parsed
                except json.JSONDecodeError:
                    pass
            return [item.strip() for item in raw.split(",") if item.strip()]
        return []

    @field_validator("nasa_api_key", mode="before")
    @classmethod
    def default_blank_key(cls, value: str | None) -> str:
        """Treat an empty NASA_API_KEY the same as an unset one."""
        if value is None or not str(value).strip():
            return "DEMO_KEY"
        return str(value).strip()

    @property
    def is_production(self) -> bool:
        """Return True when running in production."""
        return self.environment == "production"

    @property
    def cors_origins(self) -> list[str]:
        """Expose allowed CORS origins for middleware wiring."""
        return self.allowed_origins

    @property
    def masked_api_key(self) -> str:
        """First eight characters of the NASA key, for startup logs."""
        return f"{self.nasa_api_key[:8]}..."


settings = Settings()
