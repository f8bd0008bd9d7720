# ==============================================================================
# GAME PATH PARSER
# ==============================================================================
# Turns a game-internal resource path into a GameObjectInfo descriptor.
#
# Pipeline:
#   1. normalize_path()       lower case, '\' -> '/'
#   2. file_type_of()         FileType from the extension
#      object_type_of()       ObjectType from the first two folders
#   3. match_grammar()        first layout for (FileType, ObjectType) that matches
#   4. _decode()              per-ObjectType handler reads the named groups
#
# The parser never raises. Paths it cannot classify, paths that match no
# layout, and paths whose fields fail to decode all come back as a
# descriptor with only FileType/ObjectType set. Decode failures are logged.
#
# The parser holds no per-call state. The module level functions use one
# shared default instance and may be called from any thread.
#
# Usage:
#   from xivpath.parsers.game_path_parser import classify, object_type_of
#   info = classify("chara/equipment/e0001/model/c0101e0001_top.mdl")
#   info.payload.equip_slot      # EquipSlot.BODY
#   object_type_of("ui/icon/012000/012345.tex")   # ObjectType.ICON
# ==============================================================================

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Pattern, Tuple, Union

from .enums import CustomizationType, FileType, ObjectType
from .game_object_info import (
    CustomizationData, DemiHumanData, EquipmentData, GameObjectInfo, IconData,
    MapData, MonsterData, Payload, U8_MAX, U16_MAX, U32_MAX, WeaponData,
)
from .grammar import GRAMMAR_TABLE, GrammarKey, match_grammar
from .names import DEFAULT_NAMES, NameTables


logger = logging.getLogger(__name__)


# ==============================================================================
# NORMALIZATION AND TYPED PARSING
# ==============================================================================

def normalize_path(path: str) -> str:
    """Lower-case a path and turn backslashes into forward slashes."""
    return path.lower().replace('\\', '/')


def _parse_uint(text: str, maximum: int) -> int:
    """Parse an ASCII digit capture and check it fits the given width."""
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"{text!r} is not an ASCII number")
    value = int(text)
    if value < 0 or value > maximum:
        raise ValueError(f"{text!r} does not fit in 0..{maximum}")
    return value


def parse_u8(text: str) -> int:
    return _parse_uint(text, U8_MAX)


def parse_u16(text: str) -> int:
    return _parse_uint(text, U16_MAX)


def parse_u32(text: str) -> int:
    return _parse_uint(text, U32_MAX)


# ==============================================================================
# DECODE RESULT
# ==============================================================================

@dataclass(frozen=True)
class Decoded:
    payload: Payload


@dataclass(frozen=True)
class Degraded:
    reason: str


DecodeResult = Union[Decoded, Degraded]


# ==============================================================================
# ANIMATION KEY PATTERNS
# ==============================================================================

ACTION_TIMELINE_KEY = re.compile(
    r"chara[/\\]action[/\\](?P<key>[^\s]+?)\.tmb", re.IGNORECASE
)
ANIMATION_PACKAGE_KEY = re.compile(
    r"chara[/\\]human[/\\]c0101[/\\]animation[/\\]a0001[/\\][^\s]+?[/\\](?P<key>[^\s]+?)\.pap",
    re.IGNORECASE,
)


# ==============================================================================
# PARSER
# ==============================================================================

class GamePathParser:
    """
    Classifies game paths into GameObjectInfo descriptors.

    Attributes:
        names: Lookup tables for extensions, folders and string codes
        grammar: (FileType, ObjectType) -> ordered compiled layouts
        logger: Where decode failures are reported
    """

    def __init__(self, names: NameTables = DEFAULT_NAMES,
                 grammar: Mapping[GrammarKey, Tuple[Pattern, ...]] = GRAMMAR_TABLE,
                 log: Optional[logging.Logger] = None):
        self.names = names
        self.grammar = grammar
        self.logger = log if log is not None else logger

        # ObjectType -> handler. Every ObjectType is listed; None means the
        # type has no payload.
        self._handlers: Dict[ObjectType, Optional[Callable[[FileType, re.Match], Payload]]] = {
            ObjectType.UNKNOWN: None,
            ObjectType.VFX: None,
            ObjectType.WORLD: None,
            ObjectType.HOUSING: None,
            ObjectType.LOADING_SCREEN: None,
            ObjectType.INTERFACE: None,
            ObjectType.FONT: None,
            ObjectType.EQUIPMENT: self._handle_equipment,
            ObjectType.ACCESSORY: self._handle_equipment,
            ObjectType.WEAPON: self._handle_weapon,
            ObjectType.MONSTER: self._handle_monster,
            ObjectType.DEMI_HUMAN: self._handle_demihuman,
            ObjectType.CHARACTER: self._handle_customization,
            ObjectType.ICON: self._handle_icon,
            ObjectType.MAP: self._handle_map,
        }
        missing = set(ObjectType) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No decode handler for {sorted(t.name for t in missing)}")

    # -------------------------------------------------------------------------
    # PUBLIC INTERFACE
    # -------------------------------------------------------------------------

    def classify(self, path: str) -> GameObjectInfo:
        """
        Classify a game path.

        Args:
            path: Game path in any case, with '/' or '\\' separators

        Returns:
            GameObjectInfo; payload is None unless every field decoded
        """
        path = normalize_path(path)
        file_type = self.file_type_of(path)
        object_type = self._object_type_of_normalized(path)

        match = match_grammar(path, file_type, object_type, self.grammar)
        if match is None:
            return GameObjectInfo(file_type, object_type)

        result = self._decode(path, file_type, object_type, match)
        if isinstance(result, Decoded):
            return GameObjectInfo(file_type, object_type, result.payload)
        return GameObjectInfo(file_type, object_type)

    def file_type_of(self, path: str) -> FileType:
        """FileType of a path, by extension."""
        name = normalize_path(path).rsplit('/', 1)[-1]
        dot = name.rfind('.')
        return self.names.file_type_for(name[dot:] if dot >= 0 else "")

    def object_type_of(self, path: str) -> ObjectType:
        """
        ObjectType of a path from its first two folders only.

        This is the cheap half of classify() for callers that do not need
        any decoded ids.
        """
        return self._object_type_of_normalized(normalize_path(path))

    def extract_animation_key(self, path: str) -> str:
        """
        Key of an action timeline or base animation package path.

        Returns:
            Lower-cased key, or "" if the path is neither
        """
        match = ACTION_TIMELINE_KEY.search(path)
        if match is None:
            match = ANIMATION_PACKAGE_KEY.search(path)
        return match.group('key').lower() if match else ""

    # -------------------------------------------------------------------------
    # CLASSIFICATION
    # -------------------------------------------------------------------------

    def _object_type_of_normalized(self, path: str) -> ObjectType:
        if not path:
            return ObjectType.UNKNOWN

        folders = path.split('/')
        if len(folders) < 2:
            return ObjectType.UNKNOWN

        return self.names.object_type_for(folders[0], folders[1])

    def _decode(self, path: str, file_type: FileType, object_type: ObjectType,
                match: re.Match) -> DecodeResult:
        handler = self._handlers[object_type]
        if handler is None:
            return Degraded(f"{object_type.name} paths carry no payload")

        try:
            return Decoded(handler(file_type, match))
        except Exception as e:
            self.logger.error("Could not parse %s: %r", path, e)
            return Degraded(repr(e))

    # -------------------------------------------------------------------------
    # FIELD HANDLERS
    # -------------------------------------------------------------------------
    # Each handler only reads the groups its FileType's layout captures.

    def _handle_equipment(self, file_type: FileType, match: re.Match) -> EquipmentData:
        set_id = parse_u16(match.group('id'))
        if file_type is FileType.IMC:
            return EquipmentData(set_id)

        gender_race = self.names.gender_race_from_code(match.group('race'))
        slot = self.names.equip_slots[match.group('slot')]
        if file_type is FileType.MODEL:
            return EquipmentData(set_id, gender_race, slot)

        variant = parse_u8(match.group('variant'))
        return EquipmentData(set_id, gender_race, slot, variant)

    def _handle_weapon(self, file_type: FileType, match: re.Match) -> WeaponData:
        weapon_id = parse_u16(match.group('weapon'))
        set_id = parse_u16(match.group('id'))
        if file_type in (FileType.IMC, FileType.MODEL):
            return WeaponData(set_id, weapon_id)

        return WeaponData(set_id, weapon_id, parse_u8(match.group('variant')))

    def _handle_monster(self, file_type: FileType, match: re.Match) -> MonsterData:
        monster_id = parse_u16(match.group('monster'))
        body_id = parse_u16(match.group('id'))
        if file_type in (FileType.IMC, FileType.MODEL):
            return MonsterData(monster_id, body_id)

        return MonsterData(monster_id, body_id, parse_u8(match.group('variant')))

    def _handle_demihuman(self, file_type: FileType, match: re.Match) -> DemiHumanData:
        demi_human_id = parse_u16(match.group('id'))
        equip_id = parse_u16(match.group('equip'))
        if file_type is FileType.IMC:
            return DemiHumanData(demi_human_id, equip_id)

        slot = self.names.equip_slots[match.group('slot')]
        if file_type is FileType.MODEL:
            return DemiHumanData(demi_human_id, equip_id, slot)

        variant = parse_u8(match.group('variant'))
        return DemiHumanData(demi_human_id, equip_id, slot, variant)

    def _handle_customization(self, file_type: FileType, match: re.Match) -> CustomizationData:
        groups = match.groupdict()
        if groups.get('catchlight') is not None:
            return CustomizationData(CustomizationType.IRIS)

        if groups.get('skin') is not None:
            return CustomizationData(CustomizationType.SKIN)

        slot_id = parse_u16(match.group('id'))
        location = groups.get('location')
        if location is not None:
            if location == 'face':
                kind = CustomizationType.DECAL_FACE
            elif location == 'equip':
                kind = CustomizationType.DECAL_EQUIP
            else:
                kind = CustomizationType.UNKNOWN
            return CustomizationData(kind, slot_id)

        gender_race = self.names.gender_race_from_code(match.group('race'))
        body_slot = self.names.body_slots[match.group('type')]
        slot = groups.get('slot')
        kind = (self.names.customization_types[slot] if slot is not None
                else CustomizationType.SKIN)

        if file_type is FileType.MATERIAL:
            variant = groups.get('variant')
            variant = parse_u8(variant) if variant is not None else 0
            return CustomizationData(kind, slot_id, gender_race, body_slot, variant)

        return CustomizationData(kind, slot_id, gender_race, body_slot)

    def _handle_icon(self, file_type: FileType, match: re.Match) -> IconData:
        groups = match.groupdict()
        hq = groups.get('hq') is not None
        hr = groups.get('hr') is not None or groups.get('hr_suffix') is not None
        icon_id = parse_u32(match.group('id'))

        lang = groups.get('lang')
        if lang is None:
            return IconData(icon_id, hq, hr)

        # TODO: decide whether unrecognized language folders should decode
        # to no language instead of English.
        return IconData(icon_id, hq, hr, self.names.language_from_code(lang))

    def _handle_map(self, file_type: FileType, match: re.Match) -> MapData:
        map_id = match.group('id').encode('ascii')
        variant = parse_u8(match.group('variant'))

        suffix = match.group('suffix')
        if suffix is not None:
            return MapData(map_id[0], map_id[1], map_id[2], map_id[3], variant,
                           suffix.encode('ascii')[0])

        return MapData(map_id[0], map_id[1], map_id[2], map_id[3], variant)


# ==============================================================================
# MODULE LEVEL INTERFACE
# ==============================================================================

_default_parser = GamePathParser()


def get_parser() -> GamePathParser:
    """The shared parser using the default tables."""
    return _default_parser


def classify(path: str) -> GameObjectInfo:
    return _default_parser.classify(path)


def object_type_of(path: str) -> ObjectType:
    return _default_parser.object_type_of(path)


def extract_animation_key(path: str) -> str:
    return _default_parser.extract_animation_key(path)
