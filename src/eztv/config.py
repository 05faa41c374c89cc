"""Centralised configuration via Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide configuration loaded from environment variables."""

    model_config = {"env_prefix": "EZTV_", "frozen": True}

    # Tracker
    base_url: str = "https://eztv.ag/"
    # Endpoint used by search_show_episodes(), relative to base_url
    search_endpoint: str = "search/"

    # HTTP
    request_timeout: int = 30
    user_agent: str = "Mozilla/5.0"

    # Logging
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Factory — allows overriding in tests."""
    return Settings()
