# ==============================================================================
# XIVPATH - PATH UTILITIES
# ==============================================================================
# Where XivPath keeps its own files on disk.
#
# User data (database, config, logs) is stored in:
#   - Windows: %APPDATA%/XivPath/
#   - Linux:   $XDG_CONFIG_HOME/XivPath/ (default ~/.config/XivPath/)
#   - macOS:   ~/Library/Application Support/XivPath/
#
# Setting XIVPATH_HOME overrides the location on every platform.
#
# Usage:
#   from xivpath.core.paths import Paths
#   db_path = Paths.get_database_path()
#   config_path = Paths.get_config_path()
# ==============================================================================

import os
import sys
from typing import Optional


class Paths:
    """
    Centralized path management for XivPath.

    These are paths of XivPath's own files on the local machine, not game
    paths. Directories are created on first use.
    """

    # Application name for folder creation
    APP_NAME = "XivPath"

    # Environment variable that overrides the user data directory
    HOME_ENV = "XIVPATH_HOME"

    # Cache for computed paths
    _user_data_dir: Optional[str] = None

    @classmethod
    def get_user_data_dir(cls) -> str:
        """
        Get the user data directory.

        This is where we store user-specific files like:
        - Database (xivpath.db)
        - Configuration (config.json)
        - Logs

        Returns:
            Absolute path to user data directory
        """
        if cls._user_data_dir is None:
            override = os.environ.get(cls.HOME_ENV)
            if override:
                cls._user_data_dir = os.path.abspath(override)
            elif sys.platform == 'win32':
                base = os.environ.get('APPDATA', os.path.expanduser('~'))
                cls._user_data_dir = os.path.join(base, cls.APP_NAME)
            elif sys.platform == 'darwin':
                cls._user_data_dir = os.path.join(
                    os.path.expanduser('~'),
                    'Library', 'Application Support', cls.APP_NAME
                )
            else:
                base = os.environ.get('XDG_CONFIG_HOME',
                                      os.path.join(os.path.expanduser('~'), '.config'))
                cls._user_data_dir = os.path.join(base, cls.APP_NAME)

            os.makedirs(cls._user_data_dir, exist_ok=True)

        return cls._user_data_dir

    @classmethod
    def reset(cls):
        """Forget the cached directory (after changing XIVPATH_HOME)."""
        cls._user_data_dir = None

    @classmethod
    def get_database_path(cls) -> str:
        """
        Get the path to the SQLite catalog database.

        Returns:
            Absolute path to xivpath.db
        """
        return os.path.join(cls.get_user_data_dir(), 'xivpath.db')

    @classmethod
    def get_config_path(cls) -> str:
        return os.path.join(cls.get_user_data_dir(), 'config.json')

    @classmethod
    def get_logs_dir(cls) -> str:
        """
        Get the path to the logs directory.

        Returns:
            Absolute path to logs directory
        """
        logs_dir = os.path.join(cls.get_user_data_dir(), 'logs')
        os.makedirs(logs_dir, exist_ok=True)
        return logs_dir

    @classmethod
    def get_log_file_path(cls) -> str:
        return os.path.join(cls.get_logs_dir(), 'xivpath.log')
