"""Configuration management for DISC Profile."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Relative SQLite paths resolve against this directory
    base_dir: Path = Field(default_factory=lambda: Path(__file__).parent.parent.parent)

    # Local database
    database_url: str = "sqlite:///data/disc_profile.db"

    # Remote backend (PostgREST / Supabase REST)
    remote_url: str = ""
    remote_api_key: str = ""
    remote_timeout: float = 10.0  # seconds

    # Questionnaire
    question_limit: int = Field(default=25, ge=1)

    # Logging
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
