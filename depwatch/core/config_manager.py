"""
Configuration management for depwatch.

Handles loading, merging, and discovery of configuration files.
"""
import importlib.resources as importlib_resources
import os
from typing import Optional

import yaml

from depwatch.utils.exceptions import ConfigurationError

USER_CONFIG_FILENAME = "depwatch.config.yaml"

# Top-level keys whose values must be mappings
CONFIG_SECTIONS = ("resolver", "stats", "report", "forwarding", "logging")


class ConfigManager:
    """Manages depwatch configuration loading and merging operations."""

    def load_config(self, path: str) -> dict:
        """Load configuration from YAML file."""
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file: {path}", original_exception=e)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in config file: {path}", original_exception=e)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {path}")
        return data

    def deep_merge(self, default: dict, user: dict) -> dict:
        """Deep merge user config into default config."""
        result = default.copy()
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def load_package_default_config(self) -> dict:
        """Load default config shipped inside the package."""
        config_files = importlib_resources.files("depwatch.config")
        default_config_path = config_files / "default.yaml"
        with default_config_path.open("r") as f:
            return yaml.safe_load(f)

    def load_and_merge_config(self, user_config_path: str) -> dict:
        """Load user config and merge with package default."""
        default_config = self.load_package_default_config()
        user_config = self.load_config(user_config_path)
        return self.deep_merge(default_config, user_config)

    def discover_and_load_config(self, config_arg: Optional[str]) -> dict:
        """Discover config file with priority order."""

        # Priority 1: --config argument
        if config_arg:
            if os.path.exists(config_arg):
                return self.load_and_merge_config(config_arg)
            raise ConfigurationError(f"Config file not found: {config_arg}")

        # Priority 2: depwatch.config.yaml in current directory
        if os.path.exists(USER_CONFIG_FILENAME):
            return self.load_and_merge_config(USER_CONFIG_FILENAME)

        # Priority 3: Package default config
        return self.load_package_default_config()

    def merge_config_and_args(self, config: dict, assume_yes: bool = False, verbose: bool = False) -> dict:
        """Merge configuration with CLI arguments."""
        for section in CONFIG_SECTIONS:
            if section in config and not isinstance(config[section], dict):
                raise ConfigurationError(f"{section} must be a mapping")

        if assume_yes:
            config["assume_yes"] = True

        if verbose:
            config["verbose"] = True
            config.setdefault("logging", {})["level"] = "DEBUG"

        threshold = config.get("report", {}).get("threshold")
        if not isinstance(threshold, int) or isinstance(threshold, bool):
            raise ConfigurationError(f"report.threshold must be an integer, got {threshold!r}")

        return config
