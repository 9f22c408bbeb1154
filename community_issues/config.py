"""
Application configuration using Pydantic settings.

Usage:
    from community_issues.config import get_settings
    settings = get_settings()

For field limits and categories, import from community_issues.constants.
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables and .env file.

    Only PORT and ENV change runtime behavior: ENV=production stops the
    process from starting its own listener.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # App settings
    app_name: str = Field(default="Community Issue Reporter", validation_alias="APP_NAME")
    api_prefix: str = Field(default="/api", validation_alias="API_PREFIX")
    debug: bool = Field(default=False, validation_alias="DEBUG")
    env: str = Field(default="development", validation_alias="ENV")

    # Listener
    host: str = Field(default="127.0.0.1", validation_alias="HOST")
    port: int = Field(default=4000, validation_alias="PORT")

    # HTTP
    cors_allowed_origins: str = Field(default="*", validation_alias="CORS_ALLOWED_ORIGINS")
    max_request_size_kb: int = Field(default=100, ge=1, validation_alias="MAX_REQUEST_SIZE_KB")

    # Client
    api_base_url: str = Field(default="http://localhost:4000", validation_alias="ISSUES_API_URL")

    @property
    def is_production(self) -> bool:
        return self.env.lower() in ("production", "prod")

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


__all__ = ["Settings", "get_settings"]
