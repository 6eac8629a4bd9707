"""Application configuration and settings management.

This module defines the application settings loaded from environment
variables and provides a helper for accessing the cached settings.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Attributes:
        DATABASE_URL: Database connection string.
        ALLOWED_ORIGINS: Allowed origins for CORS.
        LOG_LEVEL: Root logging level name.
        PASSWORD_HASH_SCHEMES: Passlib schemes used for password hashing.
        CREATE_TABLES: Create missing tables when the application starts.
    """

    DATABASE_URL: str = "sqlite:///./app.db"
    ALLOWED_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"
    PASSWORD_HASH_SCHEMES: List[str] = ["bcrypt"]
    CREATE_TABLES: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="allow")


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings.

    The settings object is cached to prevent reloading environment
    variables multiple times during application lifetime.
    """

    return Settings()
