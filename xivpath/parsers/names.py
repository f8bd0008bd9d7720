# ==============================================================================
# GAME PATH NAME TABLES
# ==============================================================================
# Static lookup tables that turn the string codes found in game paths into
# the enumerations from enums.py.
#
# Tables:
#   - EXTENSION_TO_FILE_TYPE:        ".mdl" -> FileType.MODEL
#   - FOLDER_TO_OBJECT_TYPE:         ("chara", "weapon") -> ObjectType.WEAPON
#   - CODE_TO_GENDER_RACE:           "0101" -> GenderRace.MIDLANDER_MALE
#   - SUFFIX_TO_EQUIP_SLOT:          "met" -> EquipSlot.HEAD
#   - STRING_TO_BODY_SLOT:           "hair" -> BodySlot.HAIR
#   - SUFFIX_TO_CUSTOMIZATION_TYPE:  "fac" -> CustomizationType.FACE
#   - CODE_TO_LANGUAGE:              "en" -> ClientLanguage.ENGLISH
#
# All tables are read-only mappings built once at import. They are bundled
# into a NameTables value so a parser can be given alternate tables.
#
# Usage:
#   from xivpath.parsers.names import DEFAULT_NAMES
#   DEFAULT_NAMES.file_type_for(".tex")        # FileType.TEXTURE
#   DEFAULT_NAMES.gender_race_from_code("0201") # GenderRace.MIDLANDER_FEMALE
# ==============================================================================

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .enums import (
    BodySlot, ClientLanguage, CustomizationType, EquipSlot, FileType,
    GenderRace, ObjectType,
)


# ==============================================================================
# EXTENSIONS
# ==============================================================================

EXTENSION_TO_FILE_TYPE: Mapping[str, FileType] = MappingProxyType({
    ".mdl": FileType.MODEL,
    ".tex": FileType.TEXTURE,
    ".atex": FileType.TEXTURE,
    ".mtrl": FileType.MATERIAL,
    ".avfx": FileType.VFX,
    ".pap": FileType.ANIMATION,
    ".tmb": FileType.ANIMATION,
    ".scd": FileType.SOUND,
    ".imc": FileType.IMC,
    ".eqp": FileType.META_INFO,
    ".eqdp": FileType.META_INFO,
    ".est": FileType.META_INFO,
    ".exd": FileType.META_INFO,
    ".exh": FileType.META_INFO,
    ".shpk": FileType.SHADER,
    ".shcd": FileType.SHADER,
    ".fdt": FileType.FONT,
    ".envb": FileType.ENVIRONMENT,
    ".sklb": FileType.SKELETON,
})


# ==============================================================================
# FOLDERS
# ==============================================================================
# First folder -> (second folder table, fallback for any other second folder).
# A first folder with an empty table maps every second folder to its fallback.

FolderRule = Tuple[Mapping[str, ObjectType], ObjectType]

FOLDER_TO_OBJECT_TYPE: Mapping[str, FolderRule] = MappingProxyType({
    "chara": (MappingProxyType({
        "equipment": ObjectType.EQUIPMENT,
        "accessory": ObjectType.ACCESSORY,
        "weapon": ObjectType.WEAPON,
        "human": ObjectType.CHARACTER,
        "demihuman": ObjectType.DEMI_HUMAN,
        "monster": ObjectType.MONSTER,
        "common": ObjectType.CHARACTER,
    }), ObjectType.UNKNOWN),
    "ui": (MappingProxyType({
        "icon": ObjectType.ICON,
        "loadingimage": ObjectType.LOADING_SCREEN,
        "map": ObjectType.MAP,
        "uld": ObjectType.INTERFACE,
    }), ObjectType.UNKNOWN),
    "common": (MappingProxyType({
        "font": ObjectType.FONT,
    }), ObjectType.UNKNOWN),
    "hou": (MappingProxyType({}), ObjectType.HOUSING),
    "bgcommon": (MappingProxyType({
        "hou": ObjectType.HOUSING,
    }), ObjectType.WORLD),
    "bg": (MappingProxyType({}), ObjectType.WORLD),
    "vfx": (MappingProxyType({}), ObjectType.VFX),
})


# ==============================================================================
# CODES AND SUFFIXES
# ==============================================================================

CODE_TO_GENDER_RACE: Mapping[str, GenderRace] = MappingProxyType({
    race.code: race for race in GenderRace if race is not GenderRace.UNKNOWN
})

SUFFIX_TO_EQUIP_SLOT: Mapping[str, EquipSlot] = MappingProxyType({
    "met": EquipSlot.HEAD,
    "top": EquipSlot.BODY,
    "glv": EquipSlot.HANDS,
    "dwn": EquipSlot.LEGS,
    "sho": EquipSlot.FEET,
    "ear": EquipSlot.EARS,
    "nek": EquipSlot.NECK,
    "wrs": EquipSlot.WRISTS,
    "rir": EquipSlot.RIGHT_FINGER,
    "ril": EquipSlot.LEFT_FINGER,
})

STRING_TO_BODY_SLOT: Mapping[str, BodySlot] = MappingProxyType({
    "hair": BodySlot.HAIR,
    "face": BodySlot.FACE,
    "tail": BodySlot.TAIL,
    "body": BodySlot.BODY,
    "zear": BodySlot.ZEAR,
})

SUFFIX_TO_CUSTOMIZATION_TYPE: Mapping[str, CustomizationType] = MappingProxyType({
    "fac": CustomizationType.FACE,
    "iri": CustomizationType.IRIS,
    "acc": CustomizationType.ACCESSORY,
    "hir": CustomizationType.HAIR,
    "til": CustomizationType.TAIL,
    "top": CustomizationType.BODY,
    "zer": CustomizationType.ZEAR,
    "etc": CustomizationType.ETC,
})

CODE_TO_LANGUAGE: Mapping[str, ClientLanguage] = MappingProxyType({
    "en": ClientLanguage.ENGLISH,
    "ja": ClientLanguage.JAPANESE,
    "de": ClientLanguage.GERMAN,
    "fr": ClientLanguage.FRENCH,
})


# ==============================================================================
# NAME TABLES BUNDLE
# ==============================================================================

@dataclass(frozen=True)
class NameTables:
    """
    The lookup tables a GamePathParser consults.

    Attributes:
        extensions:          Extension (with dot) -> FileType
        folders:             First folder -> (second folder table, fallback)
        gender_races:        Four digit race code -> GenderRace
        equip_slots:         Three letter suffix -> EquipSlot
        body_slots:          Folder name -> BodySlot
        customization_types: Three letter suffix -> CustomizationType
        languages:           Two letter code -> ClientLanguage
        default_language:    Language used for unrecognized codes
    """
    extensions: Mapping[str, FileType] = field(default_factory=lambda: EXTENSION_TO_FILE_TYPE)
    folders: Mapping[str, FolderRule] = field(default_factory=lambda: FOLDER_TO_OBJECT_TYPE)
    gender_races: Mapping[str, GenderRace] = field(default_factory=lambda: CODE_TO_GENDER_RACE)
    equip_slots: Mapping[str, EquipSlot] = field(default_factory=lambda: SUFFIX_TO_EQUIP_SLOT)
    body_slots: Mapping[str, BodySlot] = field(default_factory=lambda: STRING_TO_BODY_SLOT)
    customization_types: Mapping[str, CustomizationType] = field(
        default_factory=lambda: SUFFIX_TO_CUSTOMIZATION_TYPE)
    languages: Mapping[str, ClientLanguage] = field(default_factory=lambda: CODE_TO_LANGUAGE)
    default_language: ClientLanguage = ClientLanguage.ENGLISH

    def file_type_for(self, extension: str) -> FileType:
        """Map an extension such as '.mdl' to its FileType."""
        return self.extensions.get(extension, FileType.UNKNOWN)

    def object_type_for(self, first: str, second: str) -> ObjectType:
        """Map the first two folders of a path to an ObjectType."""
        rule = self.folders.get(first)
        if rule is None:
            return ObjectType.UNKNOWN

        table, fallback = rule
        return table.get(second, fallback)

    def gender_race_from_code(self, code: str) -> GenderRace:
        """Unlisted codes are GenderRace.UNKNOWN rather than an error."""
        return self.gender_races.get(code, GenderRace.UNKNOWN)

    def language_from_code(self, code: Optional[str]) -> ClientLanguage:
        return self.languages.get(code, self.default_language)


DEFAULT_NAMES = NameTables()

# Reverse tables used when formatting paths
EQUIP_SLOT_TO_SUFFIX: Mapping[EquipSlot, str] = MappingProxyType(
    {slot: suffix for suffix, slot in SUFFIX_TO_EQUIP_SLOT.items()}
)
BODY_SLOT_TO_STRING: Mapping[BodySlot, str] = MappingProxyType(
    {slot: name for name, slot in STRING_TO_BODY_SLOT.items()}
)
LANGUAGE_TO_CODE: Mapping[ClientLanguage, str] = MappingProxyType(
    {language: code for code, language in CODE_TO_LANGUAGE.items()}
)
