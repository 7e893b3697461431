"""
Configuration settings for geopoint.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from geopoint.core.errors import ConfigurationError


class Settings(BaseSettings):
    """
    Toolkit settings with environment variable support.

    Attributes:
        earth_radius_km: Radius of the spherical Earth model
        lenient_json_decode: Default missing JSON lat/lng keys to 0.0 instead of failing
        api_v1_prefix: Path prefix for the HTTP API routes
        environment: Deployment environment
        log_level: Explicit log level, or None to derive it from environment
        log_file: Optional path for a rotating log file
        json_logs: Whether the log file uses the JSON formatter
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="GEOPOINT_",
    )

    # Geodesy
    earth_radius_km: float = 6371.0

    # Codecs
    lenient_json_decode: bool = False

    # API settings
    api_v1_prefix: str = "/api/v1"
    port: int = 8000
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    # Logging
    log_level: Optional[str] = None
    log_file: Optional[Path] = None
    json_logs: bool = False

    @field_validator("earth_radius_km")
    @classmethod
    def _radius_must_be_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError(f"earth_radius_km must be positive, got {value}")
        return value

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def load_settings(**overrides: object) -> Settings:
    """
    Build a Settings instance from the environment plus explicit overrides.

    Args:
        **overrides: Field values that take precedence over the environment

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If any value fails validation
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(loc) for loc in first.get("loc", ())) or None
        raise ConfigurationError(
            f"Invalid configuration: {first.get('msg', 'validation failed')}",
            config_key=key,
            details={"error_count": e.error_count()},
        ) from e


# Global settings instance
settings = load_settings()
