"""Service settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """API process settings, read from ``VEHICLE_TCO_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="VEHICLE_TCO_", env_file=".env", extra="ignore")

    app_name: str = "Vehicle TCO Comparison API"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
