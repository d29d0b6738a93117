"""Configuration module using Pydantic settings."""

from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"

    # Aggregation
    combine_by_month: bool = True

    # CSV export
    csv_separator: str = ";"
    decimal_places: int | None = Field(default=None, ge=0)  # None keeps the shortest float repr
    csv_output: Path | None = None
    default_csv_name: str = "Toggl Reports.csv"


# Global settings instance
settings = Settings()
