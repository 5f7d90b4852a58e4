# barbershop/config.py

"""
Configuration module - central access point for environment variables.

Application code reads settings through get_settings(), never os.getenv().
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Database
    DATABASE_PATH: str = Field(
        default="./barbershop.db",
        description="File path of the embedded SQLite database",
    )
    TURSO_DATABASE_URL: Optional[str] = Field(
        default=None,
        description="libSQL/Turso URL; when set the remote engine is used instead of the file",
    )
    TURSO_AUTH_TOKEN: Optional[str] = Field(default=None)
    SEED_DEFAULTS: bool = Field(
        default=True,
        description="Insert default admin, services, barbers and working hours on startup",
    )

    # Auth
    JWT_SECRET: str = Field(default="change-me-later")
    JWT_ALGORITHM: str = Field(default="HS256")
    ACCESS_TOKEN_EXPIRE_DAYS: int = Field(default=7)

    # Booking
    SLOT_MINUTES: int = Field(default=30)

    # HTTP
    CORS_ORIGINS: str = Field(default="*", description="Comma-separated allowed origins")

    LOG_LEVEL: str = Field(default="INFO")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
