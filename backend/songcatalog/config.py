"""Application configuration from environment variables."""
from pydantic_settings import BaseSettings
from functools import lru_cache


class ConfigurationError(Exception):
    """Required configuration is missing or invalid."""
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: str = "*"

    # Database (required, no usable default)
    database_url: str = ""

    # External music info API
    music_api_url: str = ""
    music_api_timeout: float = 10.0  # seconds

    # Pagination
    default_page_size: int = 10
    default_verses_page_size: int = 5
    max_page_size: int = 100

    # Logging
    log_level: str = "info"
    log_path: str = ""

    class Config:
        env_file = (".env", "../.env")  # Check both backend/ and parent dir
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def validate_settings(settings: Settings) -> None:
    """Fail fast on configuration the service cannot run without.

    A missing music API URL is tolerated here; only song creation needs it.
    """
    if not settings.database_url:
        raise ConfigurationError("DATABASE_URL is not set")
