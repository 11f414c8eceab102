"""Configuration package with clean public API."""

# Main configuration classes
from .schemas import AppConfig, LoggingConfig, SettingsConfig, validate_config

# Configuration loading
from .loader import ConfigurationLoader

__all__ = [
    # Main configuration
    'AppConfig',
    'validate_config',

    # Specific configurations
    'LoggingConfig',
    'SettingsConfig',

    # Loading
    'ConfigurationLoader',
]
