# ==============================================================================
# PARSERS MODULE
# ==============================================================================
# This module contains the game path parser and everything it is built from.
#
# Contents:
#   - enums:            FileType, ObjectType and the typed id enumerations
#   - names:            String code lookup tables (extensions, slots, races)
#   - grammar:          Compiled path layouts and matching path builders
#   - game_object_info: GameObjectInfo descriptor and its payloads
#   - game_path_parser: GamePathParser, classify(), object_type_of()
#   - skeletons:        Skeleton paths for model paths
#
# The parser only looks at path strings. It never opens the files they name.
# ==============================================================================

from .enums import (
    FileType, ObjectType, GenderRace, EquipSlot, BodySlot, CustomizationType,
    ClientLanguage,
)
from .names import NameTables, DEFAULT_NAMES
from .grammar import GRAMMAR_TABLE, match_grammar
from .game_object_info import (
    GameObjectInfo, EquipmentData, WeaponData, MonsterData, DemiHumanData,
    CustomizationData, IconData, MapData,
)
from .game_path_parser import (
    GamePathParser, normalize_path, classify, object_type_of,
    extract_animation_key, get_parser,
)
from .skeletons import resolve_skeletons_for_model, EstType, UnsupportedModelError

__all__ = [
    # Enumerations
    'FileType', 'ObjectType', 'GenderRace', 'EquipSlot', 'BodySlot',
    'CustomizationType', 'ClientLanguage',

    # Tables
    'NameTables', 'DEFAULT_NAMES', 'GRAMMAR_TABLE', 'match_grammar',

    # Descriptors
    'GameObjectInfo', 'EquipmentData', 'WeaponData', 'MonsterData',
    'DemiHumanData', 'CustomizationData', 'IconData', 'MapData',

    # Parser
    'GamePathParser', 'normalize_path', 'classify', 'object_type_of',
    'extract_animation_key', 'get_parser',

    # Skeletons
    'resolve_skeletons_for_model', 'EstType', 'UnsupportedModelError',
]
