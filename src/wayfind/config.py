"""Application settings via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Data layer configuration loaded from environment variables with WAYFIND_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="WAYFIND_",
        env_file=".env",
        case_sensitive=False,
    )

    # --- Core ---
    app_version: str = "0.1.0"
    log_level: str = "INFO"
    log_format: str = "console"

    # --- Remote API ---
    api_base_url: str = "https://wayfind-api.azurewebsites.net"
    request_timeout_seconds: float = 5.0
    health_endpoint: str = "/health"

    # --- Local store ---
    database_url: str = "sqlite+aiosqlite:///wayfind.db"
    # Drop and recreate the schema the first time the store is used.
    local_reset_on_init: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
