# ==============================================================================
# GAME PATH ENUMERATIONS
# ==============================================================================
# Closed enumerations used by the game path parser and its descriptors.
#
# Enumerations:
#   - FileType:          Coarse file category derived from the extension
#   - ObjectType:        Coarse asset category derived from the folder layout
#   - GenderRace:        Four digit model race code (c0101, c0201, ...)
#   - EquipSlot:         Three letter equipment slot suffix (_met, _top, ...)
#   - BodySlot:          Human customization folder (hair, face, ...)
#   - CustomizationType: What part of a character a file customizes
#   - ClientLanguage:    Language folder of localized icons
#
# The string codes behind these values live in names.py.
# ==============================================================================

from enum import Enum


class FileType(Enum):
    """File category, derived from the path extension."""
    UNKNOWN = "Unknown"
    SOUND = "Sound"
    IMC = "Imc"
    VFX = "Vfx"
    ANIMATION = "Animation"
    META_INFO = "MetaInfo"
    MATERIAL = "Material"
    TEXTURE = "Texture"
    MODEL = "Model"
    SHADER = "Shader"
    FONT = "Font"
    ENVIRONMENT = "Environment"
    SKELETON = "Skeleton"


class ObjectType(Enum):
    """Asset category, derived from the first two folders of a path."""
    UNKNOWN = "Unknown"
    VFX = "Vfx"
    DEMI_HUMAN = "DemiHuman"
    ACCESSORY = "Accessory"
    WORLD = "World"
    HOUSING = "Housing"
    MONSTER = "Monster"
    ICON = "Icon"
    LOADING_SCREEN = "LoadingScreen"
    MAP = "Map"
    INTERFACE = "Interface"
    EQUIPMENT = "Equipment"
    CHARACTER = "Character"
    WEAPON = "Weapon"
    FONT = "Font"


class GenderRace(Enum):
    """
    Model race code as used in c#### folder and file names.

    The value is the integer form of the four digit code, so c0101 is 101.
    NPC variants end in 04.
    """
    UNKNOWN = 0
    MIDLANDER_MALE = 101
    MIDLANDER_MALE_NPC = 104
    MIDLANDER_FEMALE = 201
    MIDLANDER_FEMALE_NPC = 204
    HIGHLANDER_MALE = 301
    HIGHLANDER_MALE_NPC = 304
    HIGHLANDER_FEMALE = 401
    HIGHLANDER_FEMALE_NPC = 404
    ELEZEN_MALE = 501
    ELEZEN_MALE_NPC = 504
    ELEZEN_FEMALE = 601
    ELEZEN_FEMALE_NPC = 604
    MIQOTE_MALE = 701
    MIQOTE_MALE_NPC = 704
    MIQOTE_FEMALE = 801
    MIQOTE_FEMALE_NPC = 804
    ROEGADYN_MALE = 901
    ROEGADYN_MALE_NPC = 904
    ROEGADYN_FEMALE = 1001
    ROEGADYN_FEMALE_NPC = 1004
    LALAFELL_MALE = 1101
    LALAFELL_MALE_NPC = 1104
    LALAFELL_FEMALE = 1201
    LALAFELL_FEMALE_NPC = 1204
    AURA_MALE = 1301
    AURA_MALE_NPC = 1304
    AURA_FEMALE = 1401
    AURA_FEMALE_NPC = 1404
    HROTHGAR_MALE = 1501
    HROTHGAR_MALE_NPC = 1504
    HROTHGAR_FEMALE = 1601
    HROTHGAR_FEMALE_NPC = 1604
    VIERA_MALE = 1701
    VIERA_MALE_NPC = 1704
    VIERA_FEMALE = 1801
    VIERA_FEMALE_NPC = 1804
    UNKNOWN_MALE_NPC = 9104
    UNKNOWN_FEMALE_NPC = 9204

    @property
    def code(self) -> str:
        """Four digit folder code, e.g. '0101'."""
        return f"{self.value:04d}"


class EquipSlot(Enum):
    """Equipment slot encoded by the three letter model suffix."""
    UNKNOWN = "Unknown"
    HEAD = "Head"
    BODY = "Body"
    HANDS = "Hands"
    LEGS = "Legs"
    FEET = "Feet"
    EARS = "Ears"
    NECK = "Neck"
    WRISTS = "Wrists"
    RIGHT_FINGER = "RFinger"
    LEFT_FINGER = "LFinger"


class BodySlot(Enum):
    """Human customization folder under chara/human/c####/obj/."""
    UNKNOWN = "Unknown"
    HAIR = "Hair"
    FACE = "Face"
    TAIL = "Tail"
    BODY = "Body"
    ZEAR = "Zear"


class CustomizationType(Enum):
    """Which part of a character a customization file applies to."""
    UNKNOWN = "Unknown"
    BODY = "Body"
    TAIL = "Tail"
    FACE = "Face"
    IRIS = "Iris"
    ACCESSORY = "Accessory"
    HAIR = "Hair"
    ZEAR = "Zear"
    DECAL_FACE = "DecalFace"
    DECAL_EQUIP = "DecalEquip"
    SKIN = "Skin"
    ETC = "Etc"


class ClientLanguage(Enum):
    """Language of a localized icon folder."""
    JAPANESE = "Japanese"
    ENGLISH = "English"
    GERMAN = "German"
    FRENCH = "French"
