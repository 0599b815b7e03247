"""Application settings and lazy settings loader."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration.

    Note: task keys are part of the serialized payload contract and are not configurable.
    """

    # Load `.env` if present.
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    LOG_LEVEL: str = "INFO"
    # JSON lines for log shipping; console renderer for local debugging
    LOG_JSON: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance (lazy-loaded)."""
    return Settings()
