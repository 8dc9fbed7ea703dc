"""
Unit tests for the configuration system.

These tests verify that the configuration system works correctly, including:
- Loading configuration from multiple sources
- Validation of configuration values
- Environment-specific configuration
"""

import os
import sys
import yaml
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from core.config_manager import ConfigManager
from core.config import (
    LibraryConfig, LoggingConfig, EventConfig, SearchConfig,
    ApplicationEnvironment
)
from library.exceptions import LibraryConfigError


class TestConfigModels(unittest.TestCase):
    """Test the Pydantic configuration models."""

    def test_library_config_defaults(self):
        config = LibraryConfig()
        self.assertEqual(config.name, "document-library")
        self.assertEqual(config.environment, ApplicationEnvironment.DEVELOPMENT)
        self.assertTrue(config.allow_duplicates)
        self.assertFalse(config.events.isolate_listener_errors)
        self.assertTrue(config.search.case_sensitive)
        self.assertEqual(config.logging.level, "INFO")

    def test_logging_level_validation(self):
        self.assertEqual(LoggingConfig(level="debug").level, "DEBUG")

        with self.assertRaises(ValueError):
            LoggingConfig(level="chatty")

    def test_nested_configs_from_dicts(self):
        config = LibraryConfig(
            events={"isolate_listener_errors": True},
            search={"case_sensitive": False},
        )
        self.assertIsInstance(config.events, EventConfig)
        self.assertTrue(config.events.isolate_listener_errors)
        self.assertIsInstance(config.search, SearchConfig)
        self.assertFalse(config.search.case_sensitive)

    def test_invalid_environment(self):
        with self.assertRaises(ValueError):
            LibraryConfig(environment="moon")


class TestConfigManager(unittest.TestCase):
    """Test the configuration manager."""

    def setUp(self):
        """Set up test environment."""
        self.temp_dir = tempfile.TemporaryDirectory()

        self.config_path = os.path.join(self.temp_dir.name, "config.yaml")
        with open(self.config_path, "w") as f:
            yaml.dump({
                "name": "test-library",
                "allow_duplicates": False,
                "search": {"case_sensitive": False},
            }, f)

        self.env_config_path = os.path.join(self.temp_dir.name, "config.production.yaml")
        with open(self.env_config_path, "w") as f:
            yaml.dump({
                "name": "test-library-prod",
                "events": {"isolate_listener_errors": True},
            }, f)

        self.env_file = os.path.join(self.temp_dir.name, ".env")

        # Keep variables set by a test (or loaded from .env) out of the others
        self.env_patcher = patch.dict(os.environ, {}, clear=False)
        self.env_patcher.start()
        for key in [k for k in os.environ if k.startswith("LIBRARY_")]:
            del os.environ[key]

    def tearDown(self):
        """Clean up test environment."""
        self.env_patcher.stop()
        self.temp_dir.cleanup()

    def test_config_loading(self):
        """Test loading configuration from file."""
        config_manager = ConfigManager(
            config_path=self.config_path,
            env_file=self.env_file
        )

        config = config_manager.get_library_config()

        self.assertEqual(config.name, "test-library")
        self.assertFalse(config.allow_duplicates)
        self.assertFalse(config.search.case_sensitive)
        self.assertFalse(config.events.isolate_listener_errors)

    def test_environment_specific_config(self):
        """Test environment-specific configuration."""
        config_manager = ConfigManager(
            config_path=self.config_path,
            env_file=self.env_file,
            environment="production"
        )

        config = config_manager.get_config(LibraryConfig)

        self.assertEqual(config.name, "test-library-prod")
        self.assertTrue(config.events.isolate_listener_errors)
        # Values only present in the main file are kept
        self.assertFalse(config.search.case_sensitive)

    def test_environment_variables(self):
        """Test that environment variables override file values."""
        os.environ["LIBRARY_NAME"] = "from-env"
        os.environ["LIBRARY_EVENTS__ISOLATE_LISTENER_ERRORS"] = "true"

        config_manager = ConfigManager(
            config_path=self.config_path,
            env_file=self.env_file
        )
        config = config_manager.get_library_config()

        self.assertEqual(config.name, "from-env")
        self.assertTrue(config.events.isolate_listener_errors)
        self.assertFalse(config.search.case_sensitive)

    def test_env_file(self):
        """Test that variables are read from the .env file."""
        with open(self.env_file, "w") as f:
            f.write("LIBRARY_ALLOW_DUPLICATES=true\n")

        config_manager = ConfigManager(
            config_path=self.config_path,
            env_file=self.env_file
        )
        config = config_manager.get_library_config()

        self.assertTrue(config.allow_duplicates)

    def test_config_overrides(self):
        """Test configuration overrides."""
        config_manager = ConfigManager(
            config_path=self.config_path,
            env_file=self.env_file
        )

        config = config_manager.get_library_config(overrides={
            "name": "override-library",
            "search": {"case_sensitive": True},
        })

        self.assertEqual(config.name, "override-library")
        self.assertTrue(config.search.case_sensitive)
        self.assertFalse(config.allow_duplicates)

    def test_overrides_applied_to_cached_config(self):
        config_manager = ConfigManager(
            config_path=self.config_path,
            env_file=self.env_file
        )
        cached = config_manager.get_library_config()

        self.assertIs(config_manager.get_library_config(), cached)
        overridden = config_manager.get_library_config(overrides={"allow_duplicates": True})
        self.assertTrue(overridden.allow_duplicates)
        self.assertEqual(overridden.name, "test-library")

    def test_first_call_overrides_are_not_cached(self):
        """Test that overrides on the first call do not leak into later calls."""
        config_manager = ConfigManager(
            config_path=self.config_path,
            env_file=self.env_file
        )

        overridden = config_manager.get_library_config(overrides={"name": "one-off"})
        plain = config_manager.get_library_config()

        self.assertEqual(overridden.name, "one-off")
        self.assertEqual(plain.name, "test-library")
        self.assertIs(config_manager.get_library_config(), plain)

    def test_uncached_config_applies_overrides(self):
        config_manager = ConfigManager(
            config_path=self.config_path,
            env_file=self.env_file
        )

        config = config_manager.get_config(LibraryConfig, overrides={"name": "one-off"}, cache=False)

        self.assertEqual(config.name, "one-off")
        self.assertEqual(config_manager.get_library_config().name, "test-library")

    def test_invalid_config_raises(self):
        with open(self.config_path, "w") as f:
            yaml.dump({"logging": {"level": "chatty"}}, f)

        config_manager = ConfigManager(
            config_path=self.config_path,
            env_file=self.env_file
        )

        with self.assertRaises(LibraryConfigError):
            config_manager.get_library_config()

    def test_missing_config_file_uses_defaults(self):
        config_manager = ConfigManager(
            config_path=os.path.join(self.temp_dir.name, "missing.yaml"),
            env_file=self.env_file
        )

        self.assertEqual(config_manager.get_library_config(), LibraryConfig())

    def test_save_and_reload(self):
        config_manager = ConfigManager(env_file=self.env_file)
        saved_path = os.path.join(self.temp_dir.name, "saved", "library.yml")
        config = LibraryConfig(name="saved", environment="staging")

        config_manager.save_config(config, saved_path)

        reloaded = ConfigManager(config_path=saved_path, env_file=self.env_file).get_library_config()
        self.assertEqual(reloaded.name, "saved")
        self.assertEqual(reloaded.environment, ApplicationEnvironment.STAGING)


if __name__ == "__main__":
    unittest.main()
