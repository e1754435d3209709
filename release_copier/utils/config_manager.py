"""
Configuration management utilities.

This module loads the optional TOML configuration file. A file looks like::

    [source]
    owner = "octo-org"
    repo = "octo-private"
    api_key = "ghp_..."

    [destination]
    owner = "octo-org"
    repo = "octo-public"

    [copy]
    temp_dir = "./files"
    include_assets = ["\\\\.zip$", "\\\\.tar\\\\.gz$"]
    sort_by_semver = true
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import DEFAULT_CONFIG_PATH


class ConfigManager:
    """
    Manages configuration loading and access.

    Values are looked up with dotted keys (``"source.owner"``). A missing
    default file is not an error; a missing explicitly requested file is.
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to configuration file. If None, uses the default path.
        """
        self.explicit = config_path is not None
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from file.

        Returns:
            Dictionary containing configuration data (empty when the default
            file does not exist)

        Raises:
            FileNotFoundError: If an explicitly given config file doesn't exist
            ValueError: If the config file is invalid
        """
        if self._config is not None:
            return self._config

        if not self.config_path.exists():
            if self.explicit:
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
            logging.debug("No configuration file at %s, using defaults", self.config_path)
            self._config = {}
            return self._config

        try:
            with open(self.config_path, "rb") as f:
                self._config = tomllib.load(f)
            logging.debug("Loaded configuration from %s", self.config_path)
            return self._config
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in configuration file {self.config_path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Failed to load configuration from {self.config_path}: {e}") from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dotted key.

        Args:
            key: Configuration key, e.g. "copy.temp_dir"
            default: Default value if key not found

        Returns:
            Configuration value or default

        Example:
            >>> config = ConfigManager("~/.config/release-copier/config.toml")
            >>> config.get("source.owner")
            'octo-org'
        """
        value: Any = self.load()

        for k in key.split("."):
            if not isinstance(value, dict):
                return default
            value = value.get(k)
            if value is None:
                return default

        return value


__all__ = ["ConfigManager"]
