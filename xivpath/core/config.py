# ==============================================================================
# XIVPATH - CONFIGURATION MODULE
# ==============================================================================
# Centralized configuration management for the command line tools.
#
# This module handles:
#   - Loading/saving configuration from a JSON file
#   - Default values for all settings
#   - Validation of settings with a fixed set of allowed values
#
# Configuration is stored in the user data directory (see paths.py).
# The path parser itself takes no configuration.
#
# Usage:
#   from xivpath.core.config import Config
#   config = Config()
#   config.load()
#   print(config.database_path)
#   config.catalog_format = "csv"
#   config.save()
# ==============================================================================

import json
import logging
import os
from typing import Any, Dict, Optional

from .paths import Paths


logger = logging.getLogger(__name__)


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================
# These are used when no config file exists or when values are missing.

DEFAULT_CONFIG = {
    # -------------------------------------------------------------------------
    # DATABASE
    # -------------------------------------------------------------------------
    # Path to the SQLite catalog database ("" = user data directory)
    "database_path": "",

    # -------------------------------------------------------------------------
    # CATALOG SETTINGS
    # -------------------------------------------------------------------------
    # Default catalog export format (txt, json, csv)
    "catalog_format": "txt",

    # -------------------------------------------------------------------------
    # LOGGING
    # -------------------------------------------------------------------------
    # Console log level (DEBUG, INFO, WARNING, ERROR)
    "log_level": "WARNING",

    # Also write a log file to the logs directory
    "log_to_file": False,

    # Enable debug logging (overrides log_level)
    "debug_mode": False,
}

CATALOG_FORMATS = ('txt', 'json', 'csv')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


# ==============================================================================
# CONFIGURATION CLASS
# ==============================================================================
class Config:
    """
    Configuration manager for XivPath.

    Handles loading, saving, and accessing settings. Settings are stored in
    a JSON file and can be accessed as properties on this object.

    Attributes:
        config_path: Path to the configuration file
        data: Dictionary containing all settings
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to config file. If None, uses default location.
        """
        self.config_path = config_path or Paths.get_config_path()

        # Initialize with defaults
        self.data: Dict[str, Any] = DEFAULT_CONFIG.copy()

        # Track if config has been modified
        self._modified = False

    # -------------------------------------------------------------------------
    # LOADING AND SAVING
    # -------------------------------------------------------------------------

    def load(self) -> bool:
        """
        Load configuration from file.

        If the file doesn't exist, defaults are used.
        Missing keys are filled with defaults, unknown keys are ignored.

        Returns:
            True if file was loaded, False if using defaults
        """
        if not os.path.isfile(self.config_path):
            logger.info("Config file not found, using defaults")
            return False

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Invalid config file %s: %s", self.config_path, e)
            return False
        except OSError as e:
            logger.error("Failed to load config %s: %s", self.config_path, e)
            return False

        if not isinstance(loaded, dict):
            logger.error("Invalid config file %s: expected a JSON object", self.config_path)
            return False

        # Merge with defaults (so new settings get default values)
        for key, value in loaded.items():
            if key in self.data:
                self.data[key] = value

        logger.info("Loaded config from %s", self.config_path)
        self._modified = False
        return True

    def save(self) -> bool:
        """
        Save configuration to file.

        Creates the directory if it doesn't exist.

        Returns:
            True if saved successfully
        """
        try:
            directory = os.path.dirname(self.config_path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(self.data, f, indent=4, sort_keys=True)
        except OSError as e:
            logger.error("Failed to save config %s: %s", self.config_path, e)
            return False

        logger.info("Saved config to %s", self.config_path)
        self._modified = False
        return True

    def reset_to_defaults(self):
        """Reset all settings to their default values."""
        self.data = DEFAULT_CONFIG.copy()
        self._modified = True

    @property
    def is_modified(self) -> bool:
        return self._modified

    # -------------------------------------------------------------------------
    # PROPERTY ACCESS
    # -------------------------------------------------------------------------

    @property
    def database_path(self) -> str:
        """Get the database path, falling back to the user data directory."""
        return self.data.get('database_path') or Paths.get_database_path()

    @database_path.setter
    def database_path(self, value: str):
        self.data['database_path'] = value
        self._modified = True

    @property
    def catalog_format(self) -> str:
        """Get the default catalog format (txt, json, csv)."""
        return self.data.get('catalog_format', 'txt')

    @catalog_format.setter
    def catalog_format(self, value: str):
        if value not in CATALOG_FORMATS:
            raise ValueError("catalog_format must be 'txt', 'json', or 'csv'")
        self.data['catalog_format'] = value
        self._modified = True

    @property
    def log_level(self) -> str:
        """Effective console log level name."""
        if self.debug_mode:
            return 'DEBUG'
        return str(self.data.get('log_level', 'WARNING')).upper()

    @log_level.setter
    def log_level(self, value: str):
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        self.data['log_level'] = value
        self._modified = True

    @property
    def log_to_file(self) -> bool:
        return bool(self.data.get('log_to_file', False))

    @log_to_file.setter
    def log_to_file(self, value: bool):
        self.data['log_to_file'] = bool(value)
        self._modified = True

    @property
    def debug_mode(self) -> bool:
        """Check if debug mode is enabled."""
        return bool(self.data.get('debug_mode', False))

    @debug_mode.setter
    def debug_mode(self, value: bool):
        self.data['debug_mode'] = bool(value)
        self._modified = True

    # -------------------------------------------------------------------------
    # GENERIC ACCESS
    # -------------------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            The configuration value
        """
        return self.data.get(key, default)

    def set(self, key: str, value: Any):
        self.data[key] = value
        self._modified = True

    def __getitem__(self, key: str) -> Any:
        """Allow dictionary-style access: config['key']"""
        return self.data[key]

    def __setitem__(self, key: str, value: Any):
        """Allow dictionary-style setting: config['key'] = value"""
        self.data[key] = value
        self._modified = True


# ==============================================================================
# GLOBAL CONFIG INSTANCE
# ==============================================================================
# This provides a singleton-like access to configuration

_global_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    Creates and loads config on first call.

    Returns:
        The global Config instance
    """
    global _global_config

    if _global_config is None:
        _global_config = Config()
        _global_config.load()

    return _global_config
