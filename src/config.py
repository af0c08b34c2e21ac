"""Application configuration using pydantic-settings pattern."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Turn Timer"
    app_version: str = "0.1.0"
    app_env: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Countdown
    tick_interval_seconds: float = Field(
        default=1.0,
        gt=0.0,
        description="Seconds between countdown ticks while a meeting runs",
    )

    # Render stream
    stream_queue_size: int = Field(
        default=100,
        ge=1,
        description="Snapshots buffered per stream subscriber before dropping",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
