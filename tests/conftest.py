"""Shared fixtures for the test suite."""
import pytest

from confpatterns.config.manager import ConfigurationManager
from confpatterns.config.schemas.app_schema import SettingsConfig


@pytest.fixture(autouse=True)
def clean_settings():
    """Start every test with an empty, default-configured settings singleton."""
    manager = ConfigurationManager.get_instance()
    manager.clear_settings()
    manager.apply_config(SettingsConfig())
    yield manager
    manager.clear_settings()
    manager.apply_config(SettingsConfig())


@pytest.fixture
def settings_file(tmp_path):
    """Path to a not-yet-existing settings file in a temporary directory."""
    return tmp_path / "settings.txt"
