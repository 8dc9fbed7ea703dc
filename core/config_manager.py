"""
Configuration Manager for the Document Library.

This module provides a central configuration management system that loads
configuration from multiple sources with clear precedence:
1. Default values (lowest precedence)
2. YAML configuration files
3. Environment variables
4. Explicit overrides (highest precedence)
"""

import os
import logging
from typing import Dict, Any, Optional, Type, TypeVar

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from core.config import LibraryConfig, ApplicationEnvironment
from library.exceptions import LibraryConfigError

# Type variable for generic config models
T = TypeVar('T', bound=BaseModel)

logger = logging.getLogger(__name__)

NESTED_DELIMITER = "__"


def _deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``source`` into ``target``."""
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_update(target[key], value)
        else:
            target[key] = value
    return target


class ConfigManager:
    """
    Central configuration manager for the Document Library.

    Handles loading configuration from multiple sources with clear precedence,
    validation, and environment-specific configuration.
    """

    def __init__(
        self,
        env_prefix: str = "LIBRARY_",
        config_path: Optional[str] = None,
        env_file: Optional[str] = None,
        environment: Optional[str] = None
    ):
        """
        Initialize the configuration manager.

        Args:
            env_prefix: Prefix for environment variables
            config_path: Path to YAML configuration file
            env_file: Path to .env file
            environment: Application environment (development, testing, staging, production)
        """
        self.env_prefix = env_prefix
        self.config_path = config_path
        self.env_file = env_file or ".env"

        self._load_env_variables()

        self.environment = environment or os.getenv(
            f"{env_prefix}ENVIRONMENT",
            ApplicationEnvironment.DEVELOPMENT.value
        )

        self._config_cache: Dict[str, BaseModel] = {}

    def _load_env_variables(self) -> None:
        """Load environment variables from .env file."""
        if os.path.exists(self.env_file):
            load_dotenv(self.env_file)
            logger.info(f"Loaded environment variables from {self.env_file}")

    def _load_from_file(self, file_path: str) -> Dict[str, Any]:
        """
        Load configuration from a YAML file.

        Args:
            file_path: Path to YAML configuration file

        Returns:
            Configuration as a dictionary
        """
        if not os.path.exists(file_path):
            logger.warning(f"Configuration file not found: {file_path}")
            return {}

        file_ext = os.path.splitext(file_path)[1].lower()
        if file_ext not in ('.yaml', '.yml'):
            logger.warning(f"Expected YAML file but got {file_ext} extension: {file_path}")
            return {}

        try:
            with open(file_path, 'r') as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise LibraryConfigError(f"Invalid YAML in {file_path}: {e}") from e

        logger.info(f"Loaded YAML configuration from {file_path}")
        return config_data if config_data else {}

    def _get_env_config(self) -> Dict[str, Any]:
        """
        Get configuration from environment variables.

        ``LIBRARY_ALLOW_DUPLICATES=false`` sets a top-level field and
        ``LIBRARY_EVENTS__ISOLATE_LISTENER_ERRORS=true`` sets a nested one.

        Returns:
            Configuration from environment variables as a nested dictionary
        """
        env_config: Dict[str, Any] = {}

        for key, value in os.environ.items():
            if not key.startswith(self.env_prefix):
                continue
            path = key[len(self.env_prefix):].lower().split(NESTED_DELIMITER)
            if not all(path):
                continue
            node = env_config
            for part in path[:-1]:
                node = node.setdefault(part, {})
                if not isinstance(node, dict):
                    break
            else:
                node[path[-1]] = value

        return env_config

    def _merge_config_sources(
        self,
        model_class: Type[T],
        overrides: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Merge configuration from multiple sources with clear precedence.

        Precedence order (lowest to highest):
        1. Default values from model
        2. Main configuration file
        3. Environment-specific configuration file
        4. Environment variables
        5. Explicit overrides

        Args:
            model_class: Pydantic model class
            overrides: Explicit configuration overrides

        Returns:
            Merged configuration as a dictionary
        """
        config_dict: Dict[str, Any] = {}

        if self.config_path:
            _deep_update(config_dict, self._model_section(
                model_class, self._load_from_file(self.config_path)))

        env_config_path = os.path.join(
            os.path.dirname(self.config_path) if self.config_path else ".",
            f"config.{self.environment.lower()}.yaml"
        )
        if os.path.exists(env_config_path):
            _deep_update(config_dict, self._model_section(
                model_class, self._load_from_file(env_config_path)))

        _deep_update(config_dict, self._get_env_config())

        if overrides:
            _deep_update(config_dict, overrides)

        return config_dict

    @staticmethod
    def _model_section(model_class: Type[T], file_config: Dict[str, Any]) -> Dict[str, Any]:
        """Pick the section of a config file that belongs to ``model_class``."""
        model_name = model_class.__name__
        if model_name in file_config:
            return file_config[model_name]
        if model_name.lower() in file_config:
            return file_config[model_name.lower()]
        if model_class is LibraryConfig:
            return file_config
        return {}

    def get_config(
        self,
        model_class: Type[T],
        overrides: Optional[Dict[str, Any]] = None,
        cache: bool = True
    ) -> T:
        """
        Get configuration for a specific model, merged from all sources.

        Args:
            model_class: Pydantic model class
            overrides: Explicit configuration overrides
            cache: Whether to cache the configuration

        Returns:
            Configuration as a Pydantic model instance

        Raises:
            LibraryConfigError: If the merged configuration does not validate
        """
        if not cache:
            return self._validate(model_class, self._merge_config_sources(model_class, overrides))

        # Overrides apply to a single call and are never cached
        cache_key = model_class.__name__
        if cache_key not in self._config_cache:
            self._config_cache[cache_key] = self._validate(
                model_class, self._merge_config_sources(model_class))

        config = self._config_cache[cache_key]
        if overrides:
            return self._validate(model_class, _deep_update(config.model_dump(), overrides))
        return config

    @staticmethod
    def _validate(model_class: Type[T], config_dict: Dict[str, Any]) -> T:
        try:
            return model_class.model_validate(config_dict)
        except ValidationError as e:
            logger.error(f"Error validating configuration for {model_class.__name__}: {e}")
            raise LibraryConfigError(
                f"Invalid configuration for {model_class.__name__}"
            ) from e

    def get_library_config(self, overrides: Optional[Dict[str, Any]] = None) -> LibraryConfig:
        """
        Get the library configuration.

        Args:
            overrides: Explicit configuration overrides

        Returns:
            Library configuration
        """
        return self.get_config(LibraryConfig, overrides)

    def save_config(self, config: BaseModel, file_path: Optional[str] = None) -> None:
        """
        Save configuration to a YAML file.

        Args:
            config: Configuration to save
            file_path: Path to save the configuration to
        """
        file_path = file_path or self.config_path
        if not file_path:
            logger.warning("No file path specified for saving configuration")
            return

        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        file_path = self._ensure_yaml_extension(file_path)
        with open(file_path, 'w') as f:
            yaml.dump(config.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)
        logger.info(f"Configuration saved to {file_path} in YAML format")

    def _ensure_yaml_extension(self, file_path: str) -> str:
        """
        Ensure file path has a YAML extension.

        Args:
            file_path: Path to file

        Returns:
            Path with .yaml extension
        """
        file_ext = os.path.splitext(file_path)[1].lower()
        if file_ext not in ('.yaml', '.yml'):
            return os.path.splitext(file_path)[0] + '.yaml'
        return file_path
