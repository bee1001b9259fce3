"""Application settings loaded from environment variables.

Values come from the process environment or a ``.env`` file found by
walking up from the current directory.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def find_env_file(start: Path | None = None) -> Path | None:
    """Return the closest ``.env`` file at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


ENV_FILE_PATH = find_env_file()


class Settings(BaseSettings):
    """Configuration of the voting portal."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Electoral API
    electoral_api_url: str = "http://localhost:8000/api"
    electoral_api_timeout_seconds: float = 30.0

    # Supabase (admin login)
    supabase_url: str | None = None
    supabase_anon_key: str | None = None

    # App
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = Field(default="console", pattern="^(console|json)$")
    sentry_dsn: str | None = None
    sentry_traces_sample_rate: float = 0.0

    # UI behaviour
    results_refresh_seconds: int = 10
    vote_verification_delay_seconds: float = 1.2
    min_training_votes: int = 10

    @field_validator("electoral_api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def supabase_enabled(self) -> bool:
        """Admin login is available only when both Supabase values are set."""
        return bool(self.supabase_url and self.supabase_anon_key)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()


def reload_settings() -> Settings:
    """Drop the cached settings and read the environment again."""
    get_settings.cache_clear()
    return get_settings()


settings = get_settings()
