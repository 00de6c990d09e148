"""Library configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``GEO_BOUNDS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GEO_BOUNDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "info"


settings = Settings()
