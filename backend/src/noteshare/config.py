"""
App configuration - pydantic settings loaded from env vars / .env
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings - loads from .env file"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # basic app stuff
    app_name: str = Field(default="NoteShare API")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)  # set to True for dev
    environment: str = Field(default="development", description="Environment name")

    # server config
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, description="Listen port")

    # DB settings
    db_uri: str = Field(
        default="sqlite+aiosqlite:///./noteshare.db", description="Database connection URL"
    )
    db_echo: bool = Field(default=False)  # useful for debugging
    skip_create_tables: bool = Field(
        default=False, description="Don't run create_all on startup (alembic-managed DBs)"
    )

    # JWT - no defaults, secrets must come from the environment
    jwt_secret: str = Field(min_length=1, description="Access token signing key")
    refresh_token_secret: str = Field(min_length=1, description="Refresh token signing key")
    jwt_algorithm: str = Field(default="HS256", description="JWT algorithm")
    access_token_expire_minutes: int = Field(
        default=30, gt=0, description="Access token expiration in minutes"
    )
    refresh_token_expire_days: int = Field(
        default=7, gt=0, description="Refresh token expiration in days"
    )
    cookie_secure: bool = Field(default=True, description="Send refresh cookie over HTTPS only")

    # CORS
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")
    cors_allow_credentials: bool = Field(default=True)

    # Pagination
    default_page_size: int = Field(default=10, gt=0, description="Default pagination size")
    max_page_size: int = Field(default=100, gt=0, description="Maximum pagination size")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: str | None = Field(default=None, description="Directory for rotating log files")


@lru_cache
def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
