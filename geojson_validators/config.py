"""
Configuration management for geojson-validators.

Provides type-safe settings using Pydantic BaseSettings with
environment variable support and .env file loading.

All variables use the ``GEOJSON_`` prefix, e.g. ``GEOJSON_LOG_LEVEL=DEBUG``.
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Validator settings."""

    model_config = SettingsConfigDict(
        env_prefix="GEOJSON_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Debug mode forces DEBUG logging regardless of log_level
    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # WGS84 coordinate bounds, applied only when no CRS is active
    longitude_min: float = Field(default=-180.0, description="Minimum longitude")
    longitude_max: float = Field(default=180.0, description="Maximum longitude")
    latitude_min: float = Field(default=-90.0, description="Minimum latitude")
    latitude_max: float = Field(default=90.0, description="Maximum latitude")

    # Diagnostics
    max_value_repr: int = Field(
        default=200,
        ge=20,
        description="Maximum length of the rendered offending value in error responses",
    )

    @model_validator(mode="after")
    def bounds_must_be_ordered(self) -> "Settings":
        if self.longitude_min > self.longitude_max:
            raise ValueError(
                f"longitude_min ({self.longitude_min}) must be less than "
                f"longitude_max ({self.longitude_max})"
            )
        if self.latitude_min > self.latitude_max:
            raise ValueError(
                f"latitude_min ({self.latitude_min}) must be less than "
                f"latitude_max ({self.latitude_max})"
            )
        return self


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
