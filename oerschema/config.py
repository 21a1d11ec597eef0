"""
Configuration management for the OER Schema service.
Uses pydantic-settings for environment-based configuration.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "OER Schema"
    DEBUG: bool = False

    # Vocabulary source (bundled oerschema/data/oerschema.yml when unset)
    VOCABULARY_PATH: str | None = None

    # Namespace used to resolve local vocabulary terms. Must end with "/".
    BASE_URL: str = "http://oerschema.org/"

    # Resolve local terms against the request origin instead of BASE_URL
    USE_REQUEST_BASE_URL: bool = False

    # Indent JSON family responses (JSON, JSON-LD, JSON Schema)
    PRETTY_JSON: bool = True

    # Static generation output
    STATIC_OUTPUT_DIR: str = "./public/static"

    # Logging
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.
    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
