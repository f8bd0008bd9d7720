# ==============================================================================
# XIVPATH - SOURCE PACKAGE
# ==============================================================================
# Main package for XivPath, a classifier for game resource paths.
#
# Subpackages:
#   - parsers: Game path parser, grammar, descriptors, skeleton resolution
#   - core:    Catalog database, cataloger, configuration, logging
#
# Entry points:
#   - main.py / xivpath:  Command-line interface (xivpath/cli.py)
# ==============================================================================

__version__ = "1.0.0"
__description__ = "Game resource path classification"

# Convenience imports
from .parsers import (
    classify, object_type_of, extract_animation_key, GamePathParser,
    GameObjectInfo, FileType, ObjectType,
)

__all__ = [
    '__version__',
    '__description__',

    # Parser
    'classify',
    'object_type_of',
    'extract_animation_key',
    'GamePathParser',
    'GameObjectInfo',
    'FileType',
    'ObjectType',
]
