"""Pulsa Reseller Backend - Core Configuration."""

from functools import lru_cache

from pydantic import Field, MySQLDsn
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Pulsa Reseller API"
    debug: bool = False
    log_level: str = Field(default="INFO", description="Root logger level")
    api_prefix: str = Field(default="/api/v1", description="Prefix for all API routes")
    allowed_origins: str = Field(
        default="http://localhost:5173,http://localhost:3000",
        description="Comma-separated list of allowed CORS origins",
    )

    # Database
    database_url: MySQLDsn = Field(..., description="MySQL connection string with aiomysql driver")

    # Clerk Authentication
    clerk_secret_key: str = Field(..., description="Clerk secret key")
    clerk_publishable_key: str = Field(..., description="Clerk publishable key")

    @property
    def cors_origins(self) -> list[str]:
        """Allowed CORS origins as a list."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()  # type: ignore[call-arg]
