"""Configuration schemas."""

from .app_schema import AppConfig, LoggingConfig, SettingsConfig, validate_config

__all__ = ["AppConfig", "LoggingConfig", "SettingsConfig", "validate_config"]
