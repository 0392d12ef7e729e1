"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

ASYNC_DRIVER_SCHEME = "postgresql+asyncpg://"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        database_url: Explicit DSN. Takes priority over the postgres_* values.
        db_echo: Echo every SQL statement through the sqlalchemy.engine logger.
        db_pool_size: Number of pooled connections kept open per process.
        rate_limit_enabled: Toggle the slowapi limiter (tests switch it off).
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "NC News"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "nc_news"
    db_echo: bool = False
    db_pool_size: int = 5

    rate_limit_enabled: bool = True
    rate_limit_default: str = "120/minute"

    def get_database_url(self) -> str:
        """Return the effective async DSN for the news database.

        Priority:
        1. Explicit `DATABASE_URL` (a plain postgresql:// URL is upgraded to asyncpg)
        2. Build DSN from postgres_* values (useful for Docker Compose or local setups)
        """
        if self.database_url:
            if self.database_url.startswith("postgresql://"):
                return self.database_url.replace("postgresql://", ASYNC_DRIVER_SCHEME, 1)
            return self.database_url
        return (
            f"{ASYNC_DRIVER_SCHEME}{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
