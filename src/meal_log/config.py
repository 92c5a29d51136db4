"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    db_path: Path = Path("meal.db")
    openfoodfacts_base_url: str = "https://world.openfoodfacts.org/api/v2"
    http_timeout_seconds: float = 15
    default_weight_kg: float = 70
    food_dictionary_path: Path | None = None
    food_search_threshold: float = 0.35
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
