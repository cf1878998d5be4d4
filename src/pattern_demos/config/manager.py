"""Configuration manager - defaults, config file, environment and CLI overrides."""
import copy
import json
import os
from typing import Any, Dict, Optional

from pydantic import ValidationError

from pattern_demos.config.defaults import (
    CONFIG_FILE_ENV_VAR,
    DEFAULT_CONFIG,
    ENV_OVERRIDES,
    NO_WAIT_ENV_VAR,
    TRUTHY,
)
from pattern_demos.config.schemas.app_schema import AppConfig
from pattern_demos.domain.core.exceptions import ConfigurationError
from pattern_demos.helpers.logger import get_logger

logger = get_logger(__name__)


def _deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if key in target and isinstance(target[key], dict) and isinstance(value, dict):
            _deep_update(target[key], value)
        else:
            target[key] = value


class ConfigurationManager:
    """
    Manages application configuration with defaults and overrides.

    Precedence, lowest first:
    - built-in defaults (with ``${VAR:default}`` interpolation)
    - JSON configuration file
    - environment variable overrides
    - explicit overrides passed to :meth:`update_config` (the CLI flags)
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager with defaults.

        Args:
            config_file: Optional path to a JSON configuration file. If not
                         provided, PATTERN_DEMOS_CONFIG is consulted.
        """
        self._config = copy.deepcopy(DEFAULT_CONFIG)

        config_file = config_file or os.environ.get(CONFIG_FILE_ENV_VAR)
        if config_file:
            self._load_config_file(config_file)

        self._load_env_vars()

    def _load_config_file(self, config_path: str) -> None:
        """Load configuration from file."""
        try:
            with open(config_path, 'r') as f:
                user_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load configuration from {config_path}: {e}") from e

        if not isinstance(user_config, dict):
            raise ConfigurationError(
                f"Configuration file {config_path} must contain a JSON object"
            )

        logger.debug("Loaded configuration file", path=config_path)
        _deep_update(self._config, user_config)

    def _load_env_vars(self) -> None:
        """Load and apply environment variable overrides."""
        for env_var, path in ENV_OVERRIDES.items():
            if env_var not in os.environ:
                continue
            value: Any = os.environ[env_var]
            if env_var == NO_WAIT_ENV_VAR:
                value = value.strip().lower() not in TRUTHY
            self._set_nested_value(self._config, path, value)

    def _set_nested_value(self, config: Dict[str, Any], path: tuple, value: Any) -> None:
        """Set a nested configuration value."""
        current = config
        for key in path[:-1]:
            current = current.setdefault(key, {})
        current[path[-1]] = value

    def _interpolate_values(self, config: Any) -> Any:
        """Interpolate ``${VAR}`` and ``${VAR:default}`` in configuration values."""
        if isinstance(config, str):
            if config.startswith("${") and config.endswith("}"):
                var_name = config[2:-1]
                if ":" in var_name:
                    var_name, default = var_name.split(":", 1)
                    return os.environ.get(var_name, default)
                return os.environ.get(var_name, config)
            return config
        elif isinstance(config, dict):
            return {k: self._interpolate_values(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._interpolate_values(v) for v in config]
        return config

    def update_config(self, user_config: Dict[str, Any]) -> None:
        """
        Update configuration with user-provided values.

        Args:
            user_config: Partial configuration dictionary, merged recursively
        """
        _deep_update(self._config, user_config)

    def get_config(self) -> Dict[str, Any]:
        """
        Get the complete configuration with all interpolations applied.

        Returns:
            Dict containing the complete configuration
        """
        return self._interpolate_values(self._config)

    def get_app_config(self) -> AppConfig:
        """
        Validate the configuration and return it as an AppConfig.

        Raises:
            ConfigurationError: If any value fails schema validation
        """
        try:
            return AppConfig.model_validate(self.get_config())
        except ValidationError as e:
            fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            raise ConfigurationError(
                f"Invalid configuration: {', '.join(fields)}", missing_fields=fields
            ) from e
