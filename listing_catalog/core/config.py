"""Application configuration using Pydantic Settings.

This module provides type-safe environment variable management
for the read-only listing datastore and the HTTP surface.
"""

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Attributes:
        APP_ENV: Application environment (development, staging, production).
        DEBUG: Enable debug mode.
        API_PREFIX: Prefix for the property routes.
        DATABASE_PATH: Location of the SQLite listing datastore.
        DEFAULT_PAGE_SIZE: Page size used when a search omits ``limit``.
        LOG_LEVEL: Minimum level emitted by the log sink.
        CORS_ORIGINS: Comma-separated list of allowed CORS origins.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Application
    APP_ENV: str = "development"
    DEBUG: bool = False
    API_PREFIX: str = ""

    # Datastore
    DATABASE_PATH: Path = Path("data") / "zillow_rockridge.db"
    DEFAULT_PAGE_SIZE: int = 20

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000"

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string.

        Returns:
            List of allowed origin URLs.
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Singleton Settings instance.
    """
    return Settings()


settings = get_settings()
