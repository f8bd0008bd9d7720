# ==============================================================================
# CORE MODULE INIT
# ==============================================================================
# Application building blocks around the game path parser.
#
# This package contains:
#   - Database:      SQLite catalog of classified paths (SQLAlchemy ORM)
#   - PathCataloger: Bulk classification, reports and catalog export
#   - Config:        JSON configuration management
#   - Paths:         Locations of XivPath's own files
#   - setup_logging: Logging configuration for the command line tools
#
# Usage:
#   from xivpath.core import Database, PathCataloger
#   from xivpath.core.config import get_config
# ==============================================================================

from .database import Database, ClassifiedPath
from .cataloger import PathCataloger, CatalogEntry
from .config import Config, get_config
from .paths import Paths
from .logging_setup import setup_logging

__all__ = [
    # Database
    'Database',
    'ClassifiedPath',

    # Cataloging
    'PathCataloger',
    'CatalogEntry',

    # Configuration
    'Config',
    'get_config',

    # Paths
    'Paths',

    # Logging
    'setup_logging',
]
