"""Application configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from confpatterns.domain.core.exceptions import ConfigurationError


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(extra="forbid")

    level: str = Field("INFO", description="Root log level")
    destination: str = Field("console", description="Log destination (console, file, both)")
    file_path: str = Field("logs/confpatterns.log", description="Log file path")
    max_size_mb: int = Field(10, ge=1, description="Maximum log file size before rotation")
    backup_count: int = Field(5, ge=0, description="Number of rotated log files to keep")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        valid_destinations = ["console", "file", "both"]
        if v.lower() not in valid_destinations:
            raise ValueError(f"Log destination must be one of {valid_destinations}")
        return v.lower()


class SettingsConfig(BaseModel):
    """Settings store persistence configuration."""
    model_config = ConfigDict(extra="forbid")

    default_file: str = Field("settings.txt", description="Settings file used when no path is given")
    encoding: str = Field("utf-8", description="Settings file encoding")
    atomic_write: bool = Field(False, description="Write through a temporary file and rename")


class AppConfig(BaseModel):
    """Top-level application configuration."""
    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    settings: SettingsConfig = Field(default_factory=SettingsConfig)


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """
    Validate a raw configuration mapping.

    Args:
        data: Configuration dictionary

    Returns:
        Validated AppConfig

    Raises:
        ConfigurationError: If validation fails
    """
    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
