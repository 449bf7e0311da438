"""Typed settings for URL construction and logging."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError

DEFAULT_BASE_URL = "https://data.hub.api.metoffice.gov.uk/sitespecific/v0/point/"
DEFAULT_COORDINATE_PRECISION = 6


class Settings(BaseSettings):
    """Settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    base_url: str = Field(default=DEFAULT_BASE_URL, alias="METOFFICE_BASE_URL")
    coordinate_precision: int = Field(
        default=DEFAULT_COORDINATE_PRECISION,
        alias="METOFFICE_COORDINATE_PRECISION",
    )
    include_location_name: bool = Field(default=True, alias="METOFFICE_INCLUDE_LOCATION_NAME")
    exclude_parameter_metadata: bool = Field(
        default=False,
        alias="METOFFICE_EXCLUDE_PARAMETER_METADATA",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        alias="METOFFICE_LOG_LEVEL",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_case_level(cls, value: Any) -> Any:
        """Accept lower-case level names from the environment."""
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def validate_urls(self) -> Settings:
        """Validate the base URL and query precision."""
        base = self.base_url.strip()
        if not base.startswith("https://"):
            raise ValueError("METOFFICE_BASE_URL must start with 'https://'.")
        if "?" in base or "#" in base:
            raise ValueError("METOFFICE_BASE_URL must not carry a query or fragment.")
        if not base.endswith("/"):
            base = base + "/"
        self.base_url = base
        if not (1 <= self.coordinate_precision <= 10):
            raise ValueError("METOFFICE_COORDINATE_PRECISION must be between 1 and 10.")
        return self

    def safe_summary(self) -> dict[str, Any]:
        """Return a config summary safe for logging."""
        return {
            "base_url": self.base_url,
            "coordinate_precision": self.coordinate_precision,
            "include_location_name": self.include_location_name,
            "exclude_parameter_metadata": self.exclude_parameter_metadata,
            "log_level": self.log_level,
        }


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc
