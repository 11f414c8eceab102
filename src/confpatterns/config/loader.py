"""Configuration loading from files and defaults."""
import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from confpatterns.config.defaults import DEFAULT_CONFIG
from confpatterns.config.schemas.app_schema import AppConfig, validate_config
from confpatterns.config.utils.env_expansion import expand_config_env_vars
from confpatterns.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Loads application configuration.

    Configuration is resolved in three steps: the built-in defaults, then
    the optional config file deep-merged on top, then environment variable
    expansion over the merged result.
    """

    def load_from_file(self, config_file: str) -> Dict[str, Any]:
        """
        Read a YAML or JSON configuration file.

        Args:
            config_file: Path to the file; ``.json`` is parsed as JSON,
                anything else as YAML

        Returns:
            Raw configuration dictionary

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        path = Path(config_file)
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {config_file}: {e}") from e
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot parse configuration file {config_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping, got {type(data).__name__}"
            )
        logger.debug("Loaded configuration file %s", config_file)
        return data

    def load_configuration(self, config_file: Optional[str] = None) -> Dict[str, Any]:
        """Merge defaults with the optional config file and expand env vars."""
        config_data = copy.deepcopy(DEFAULT_CONFIG)
        if config_file:
            config_data = self._merge(config_data, self.load_from_file(config_file))
        return expand_config_env_vars(config_data)

    def load_app_config(self, config_file: Optional[str] = None) -> AppConfig:
        """Load and validate the application configuration."""
        return validate_config(self.load_configuration(config_file))

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge ``override`` into ``base``."""
        result = dict(base)
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(result.get(key), dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result
