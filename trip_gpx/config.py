"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from trip_gpx.shared.constants import (
    DEFAULT_ELEVATION_NOISE_THRESHOLD_M,
    DEFAULT_KEY_POINT_INTERVAL_KM,
    MAX_GPX_FILE_SIZE_BYTES,
)


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    log_level: str = Field(default="INFO", description="Logging level")

    # === GPX analysis ===
    elevation_noise_threshold_m: float = Field(
        default=DEFAULT_ELEVATION_NOISE_THRESHOLD_M,
        gt=0,
        description="Minimum elevation delta (m) counted towards gain/loss"
    )
    key_point_interval_km: float = Field(
        default=DEFAULT_KEY_POINT_INTERVAL_KM,
        gt=0,
        description="Distance between sampled key points"
    )

    # === Uploads ===
    max_upload_bytes: int = Field(
        default=MAX_GPX_FILE_SIZE_BYTES,
        gt=0,
        description="Largest GPX upload accepted by callers"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept 'debug', 'Info', ... from the environment."""
        return v.strip().upper()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
